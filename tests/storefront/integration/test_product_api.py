"""Integration tests for the Product API endpoints."""

from uuid import uuid4

import jwt
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from protean.integrations.fastapi import register_exception_handlers
from protean.utils.globals import current_domain
from storefront.api import product_router
from storefront.api.auth import token_payload
from storefront.product.product import Product

API_KEY = {"apikey": "test-api-key"}
MISSING_ID = "00000000-0000-0000-0000-000000000000"


def _bearer(user_id=None, email="buyer@example.com", account_type=None, secret="test-jwt-secret"):
    payload = token_payload(user_id or str(uuid4()), email, account_type)
    token = jwt.encode(payload, secret, algorithm="HS256")
    return {**API_KEY, "Authorization": f"Bearer {token}"}


@pytest.fixture()
def client():
    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(product_router)
    return TestClient(app)


@pytest.fixture()
def admin():
    return _bearer(email="admin@example.com", account_type="ADMIN")


@pytest.fixture()
def buyer():
    return _bearer()


def _create(client, admin, **overrides):
    body = {
        "name": "Jollof rice",
        "price": 2000,
        "countInStock": 2,
        "description": "Jollof rice as you like it",
    }
    body.update(overrides)
    response = client.post("/api/product", json=body, headers=admin)
    assert response.status_code == 201
    return response.json()["data"]["id"]


class TestApiKey:
    def test_listing_without_api_key_is_401(self, client):
        response = client.get("/api/product")
        assert response.status_code == 401

    def test_listing_with_wrong_api_key_is_401(self, client):
        response = client.get("/api/product", headers={"apikey": "nope"})
        assert response.status_code == 401

    def test_token_alone_is_not_enough(self, client):
        headers = _bearer(account_type="ADMIN")
        del headers["apikey"]
        response = client.get("/api/product", headers=headers)
        assert response.status_code == 401


class TestListProducts:
    def test_empty_listing(self, client):
        response = client.get("/api/product", headers=API_KEY)
        assert response.status_code == 200
        assert response.json() == {"data": []}

    def test_listing_shape(self, client, admin):
        _create(client, admin)
        response = client.get("/api/product", headers=API_KEY)
        assert response.status_code == 200

        data = response.json()["data"]
        assert len(data) == 1
        product = data[0]
        assert product["name"] == "Jollof rice"
        assert product["countInStock"] == 2
        assert product["numReviews"] == 0
        assert product["rating"] == 0
        assert product["isActive"] is True
        assert product["reviews"] == []

    def test_price_filter(self, client, admin):
        _create(client, admin, name="Jollof rice", price=2000)
        _create(client, admin, name="Fried rice", price=4000, description="Fried rice as you like it")
        _create(client, admin, name="Bean cake", price=4500, description="Bean cake as you like it")

        response = client.get("/api/product", params={"price": "1000-2000"}, headers=API_KEY)
        assert [p["name"] for p in response.json()["data"]] == ["Jollof rice"]

        response = client.get("/api/product", params={"price": "1000-2000,4100-*"}, headers=API_KEY)
        assert {p["name"] for p in response.json()["data"]} == {"Jollof rice", "Bean cake"}

    def test_search_filter(self, client, admin):
        _create(client, admin)
        response = client.get("/api/product", params={"search": "like"}, headers=API_KEY)
        assert len(response.json()["data"]) == 1

        response = client.get("/api/product", params={"search": "likz"}, headers=API_KEY)
        assert response.json()["data"] == []

    def test_malformed_filter_returns_empty_200(self, client, admin):
        _create(client, admin)
        response = client.get("/api/product", params={"price": "abc", "rating": "x"}, headers=API_KEY)
        assert response.status_code == 200
        assert response.json() == {"data": []}

    def test_superscript_rating_returns_empty_200(self, client, admin):
        _create(client, admin)
        response = client.get("/api/product", params={"rating": "²"}, headers=API_KEY)
        assert response.status_code == 200
        assert response.json() == {"data": []}

    def test_rating_and_reviews_filters(self, client, admin, buyer):
        reviewed = _create(client, admin, name="Fried rice")
        _create(client, admin, name="Bean cake")
        client.post(f"/api/product/review/{reviewed}", json={"rating": 3, "comment": "Tasty and filling"}, headers=buyer)

        response = client.get("/api/product", params={"rating": "3"}, headers=API_KEY)
        assert [p["name"] for p in response.json()["data"]] == ["Fried rice"]

        response = client.get("/api/product", params={"reviews": "1-*"}, headers=API_KEY)
        assert [p["name"] for p in response.json()["data"]] == ["Fried rice"]


class TestGetProduct:
    def test_get_product(self, client, admin):
        product_id = _create(client, admin)
        response = client.get(f"/api/product/{product_id}", headers=API_KEY)
        assert response.status_code == 200
        assert response.json()["data"]["id"] == product_id

    def test_missing_product_is_404(self, client):
        response = client.get(f"/api/product/{MISSING_ID}", headers=API_KEY)
        assert response.status_code == 404


class TestReviewEndpoints:
    def test_add_review_returns_201(self, client, admin, buyer):
        product_id = _create(client, admin)
        response = client.post(
            f"/api/product/review/{product_id}",
            json={"rating": 4, "comment": "Great food, fast delivery"},
            headers=buyer,
        )
        assert response.status_code == 201
        data = response.json()["data"]
        assert data["numReviews"] == 1
        assert data["rating"] == 4
        assert data["reviews"][0]["comment"] == "Great food, fast delivery"

    def test_rating_defaults_to_one(self, client, admin, buyer):
        product_id = _create(client, admin)
        response = client.post(
            f"/api/product/review/{product_id}",
            json={"comment": "Edible but nothing special"},
            headers=buyer,
        )
        assert response.status_code == 201
        assert response.json()["data"]["rating"] == 1

    def test_review_author_comes_from_token(self, client, admin):
        product_id = _create(client, admin)
        user_id = str(uuid4())
        client.post(
            f"/api/product/review/{product_id}",
            json={"rating": 4, "comment": "Great food, fast delivery"},
            headers=_bearer(user_id=user_id),
        )

        product = current_domain.repository_for(Product).get(product_id)
        assert str(product.reviews[0].user) == user_id

    def test_duplicate_review_is_400(self, client, admin, buyer):
        product_id = _create(client, admin)
        body = {"rating": 4, "comment": "Great food, fast delivery"}
        client.post(f"/api/product/review/{product_id}", json=body, headers=buyer)

        response = client.post(f"/api/product/review/{product_id}", json=body, headers=buyer)
        assert response.status_code == 400

        product = current_domain.repository_for(Product).get(product_id)
        assert product.num_reviews == 1

    def test_out_of_range_rating_is_422(self, client, admin, buyer):
        product_id = _create(client, admin)
        response = client.post(
            f"/api/product/review/{product_id}",
            json={"rating": 6, "comment": "Off the charts delicious"},
            headers=buyer,
        )
        assert response.status_code == 422

    def test_short_comment_is_422(self, client, admin, buyer):
        product_id = _create(client, admin)
        response = client.post(
            f"/api/product/review/{product_id}",
            json={"rating": 4, "comment": "Nice"},
            headers=buyer,
        )
        assert response.status_code == 422

    def test_review_without_token_is_401(self, client, admin):
        product_id = _create(client, admin)
        response = client.post(
            f"/api/product/review/{product_id}",
            json={"rating": 4, "comment": "Great food, fast delivery"},
            headers=API_KEY,
        )
        assert response.status_code == 401

    def test_review_with_forged_token_is_401(self, client, admin):
        product_id = _create(client, admin)
        response = client.post(
            f"/api/product/review/{product_id}",
            json={"rating": 4, "comment": "Great food, fast delivery"},
            headers=_bearer(secret="some-other-secret"),
        )
        assert response.status_code == 401

    def test_token_without_email_is_401(self, client, admin):
        product_id = _create(client, admin)
        response = client.post(
            f"/api/product/review/{product_id}",
            json={"rating": 4, "comment": "Great food, fast delivery"},
            headers=_bearer(email=None),
        )
        assert response.status_code == 401

    def test_edit_review(self, client, admin, buyer):
        product_id = _create(client, admin)
        client.post(
            f"/api/product/review/{product_id}",
            json={"rating": 2, "comment": "Cold on arrival this time"},
            headers=buyer,
        )

        response = client.put(
            f"/api/product/review/{product_id}",
            json={"rating": 5, "comment": "Hot and fresh the second time"},
            headers=buyer,
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["rating"] == 5
        assert data["numReviews"] == 1
        assert data["reviews"][0]["comment"] == "Hot and fresh the second time"

    def test_edit_without_review_is_400(self, client, admin, buyer):
        product_id = _create(client, admin)
        response = client.put(
            f"/api/product/review/{product_id}",
            json={"rating": 5, "comment": "I never reviewed this one"},
            headers=buyer,
        )
        assert response.status_code == 400

    def test_delete_review(self, client, admin, buyer):
        product_id = _create(client, admin)
        client.post(
            f"/api/product/review/{product_id}",
            json={"rating": 2, "comment": "Cold on arrival this time"},
            headers=buyer,
        )

        response = client.delete(f"/api/product/review/{product_id}", headers=buyer)
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["numReviews"] == 0
        assert data["rating"] == 0
        assert data["reviews"] == []

    def test_delete_without_review_is_400(self, client, admin, buyer):
        product_id = _create(client, admin)
        response = client.delete(f"/api/product/review/{product_id}", headers=buyer)
        assert response.status_code == 400


class TestCatalogueWrites:
    def test_create_requires_admin(self, client, buyer):
        response = client.post(
            "/api/product",
            json={"name": "Jollof rice", "price": 2000, "description": "Jollof rice as you like it"},
            headers=buyer,
        )
        assert response.status_code == 403

    def test_create_requires_token(self, client):
        response = client.post(
            "/api/product",
            json={"name": "Jollof rice", "price": 2000, "description": "Jollof rice as you like it"},
            headers=API_KEY,
        )
        assert response.status_code == 401

    def test_create_rejects_negative_price(self, client, admin):
        response = client.post(
            "/api/product",
            json={"name": "Jollof rice", "price": -1, "description": "Jollof rice as you like it"},
            headers=admin,
        )
        assert response.status_code == 422

    def test_update_product(self, client, admin):
        product_id = _create(client, admin)
        response = client.put(f"/api/product/{product_id}", json={"price": 2500, "isActive": False}, headers=admin)
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["price"] == 2500
        assert data["isActive"] is False
        assert data["name"] == "Jollof rice"

    def test_update_requires_admin(self, client, admin, buyer):
        product_id = _create(client, admin)
        response = client.put(f"/api/product/{product_id}", json={"price": 1}, headers=buyer)
        assert response.status_code == 403

    def test_delete_product(self, client, admin):
        product_id = _create(client, admin)
        response = client.delete(f"/api/product/{product_id}", headers=admin)
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

        response = client.get("/api/product", headers=API_KEY)
        assert response.json()["data"] == []

    def test_delete_requires_admin(self, client, admin, buyer):
        product_id = _create(client, admin)
        response = client.delete(f"/api/product/{product_id}", headers=buyer)
        assert response.status_code == 403
