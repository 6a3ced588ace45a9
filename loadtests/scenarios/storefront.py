"""Storefront load test scenarios.

Two stateful SequentialTaskSet journeys: an admin stocking the catalogue, and
a shopper browsing filtered listings and reviewing what they find. Steps
execute in order and each depends on the previous step succeeding.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import (
    access_token,
    headers,
    listing_params,
    product_data,
    product_update,
    review_data,
)
from loadtests.helpers.state import AdminState, ShopperState


class CatalogueStocking(SequentialTaskSet):
    """Create Product -> Update Product -> (sometimes) Delete Product."""

    def on_start(self):
        self.state = AdminState(token=access_token(account_type="ADMIN"))

    @task
    def create_product(self):
        with self.client.post(
            "/api/product",
            json=product_data(),
            headers=headers(self.state.token),
            catch_response=True,
            name="POST /api/product",
        ) as resp:
            if resp.status_code == 201:
                self.state.product_ids.append(resp.json()["data"]["id"])
            else:
                resp.failure(f"Create product failed: {resp.status_code}")
                self.interrupt()

    @task
    def update_product(self):
        product_id = self.state.product_ids[-1]
        with self.client.put(
            f"/api/product/{product_id}",
            json=product_update(),
            headers=headers(self.state.token),
            catch_response=True,
            name="PUT /api/product/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Update product failed: {resp.status_code}")

    @task
    def maybe_delete_product(self):
        if random.random() > 0.1:
            return
        product_id = self.state.product_ids.pop()
        with self.client.delete(
            f"/api/product/{product_id}",
            headers=headers(self.state.token),
            catch_response=True,
            name="DELETE /api/product/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Delete product failed: {resp.status_code}")

    @task
    def done(self):
        self.interrupt()


class ShopperJourney(SequentialTaskSet):
    """Browse Listing -> Filter Listing -> Review -> Edit Review -> (sometimes) Delete Review."""

    def on_start(self):
        self.state = ShopperState(token=access_token())

    @task
    def browse(self):
        with self.client.get(
            "/api/product",
            headers=headers(),
            catch_response=True,
            name="GET /api/product",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Listing failed: {resp.status_code}")
                self.interrupt()
                return
            self.state.seen_product_ids = [p["id"] for p in resp.json()["data"]]
            if not self.state.seen_product_ids:
                self.interrupt()

    @task
    def filter_listing(self):
        with self.client.get(
            "/api/product",
            params=listing_params(),
            headers=headers(),
            catch_response=True,
            name="GET /api/product?filters",
        ) as resp:
            if resp.status_code != 200 or "data" not in resp.json():
                resp.failure(f"Filtered listing failed: {resp.status_code}")

    @task
    def add_review(self):
        candidates = [p for p in self.state.seen_product_ids if p not in self.state.reviewed_product_ids]
        if not candidates:
            self.interrupt()
            return
        product_id = random.choice(candidates)
        with self.client.post(
            f"/api/product/review/{product_id}",
            json=review_data(),
            headers=headers(self.state.token),
            catch_response=True,
            name="POST /api/product/review/{id}",
        ) as resp:
            if resp.status_code == 201:
                self.state.reviewed_product_ids.append(product_id)
            else:
                resp.failure(f"Add review failed: {resp.status_code}")
                self.interrupt()

    @task
    def edit_review(self):
        product_id = self.state.reviewed_product_ids[-1]
        with self.client.put(
            f"/api/product/review/{product_id}",
            json=review_data(),
            headers=headers(self.state.token),
            catch_response=True,
            name="PUT /api/product/review/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Edit review failed: {resp.status_code}")

    @task
    def maybe_delete_review(self):
        if random.random() > 0.2:
            return
        product_id = self.state.reviewed_product_ids.pop()
        with self.client.delete(
            f"/api/product/review/{product_id}",
            headers=headers(self.state.token),
            catch_response=True,
            name="DELETE /api/product/review/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Delete review failed: {resp.status_code}")

    @task
    def done(self):
        self.interrupt()


class StorefrontUser(HttpUser):
    """Locust user simulating storefront traffic.

    Weighted distribution:
    - 80% Shopper journey (reads dominate)
    - 20% Catalogue stocking
    """

    wait_time = between(0.5, 2.0)
    tasks = {
        ShopperJourney: 8,
        CatalogueStocking: 2,
    }
