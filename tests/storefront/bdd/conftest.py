"""Shared BDD fixtures and step definitions for the storefront."""

import pytest
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then
from storefront.product.events import ProductCreated, ProductUpdated, ReviewAdded, ReviewDeleted, ReviewEdited
from storefront.product.product import Product

COMMENT = "Tasty and well portioned"

# Map event name strings to classes for dynamic lookup
_PRODUCT_EVENT_CLASSES = {
    "ProductCreated": ProductCreated,
    "ProductUpdated": ProductUpdated,
    "ReviewAdded": ReviewAdded,
    "ReviewEdited": ReviewEdited,
    "ReviewDeleted": ReviewDeleted,
}


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a product "{name}" priced {price:d}'), target_fixture="product")
def product_priced(name, price):
    product = Product.create(name=name, price=price, count_in_stock=5, description=f"{name} as you like it")
    product._events.clear()
    return product


@given(parsers.cfparse("the product has reviews rated {ratings}"))
def product_has_reviews(product, ratings):
    for i, rating in enumerate(ratings.split(",")):
        product.add_review(user=f"regular-{i}", rating=int(rating), comment=COMMENT)
    product._events.clear()


@given(parsers.cfparse('user "{user}" has reviewed the product with {rating:d} stars'))
def user_has_reviewed(product, user, rating):
    product.add_review(user=user, rating=rating, comment=COMMENT)
    product._events.clear()


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the action fails with a validation error")
def action_fails_with_validation_error(error):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)


@then(parsers.cfparse("the product rating is {rating:d}"))
def product_rating_is(product, rating):
    assert product.rating == rating


@then(parsers.re(r"the product has (?P<count>\d+) reviews?"))
def product_review_count(product, count):
    assert product.num_reviews == int(count)
    assert len(product.reviews) == int(count)


@then(parsers.cfparse("a {event_type} product event is raised"))
def product_event_raised(product, event_type):
    event_cls = _PRODUCT_EVENT_CLASSES[event_type]
    assert any(
        isinstance(e, event_cls) for e in product._events
    ), f"No {event_type} event found. Events: {[type(e).__name__ for e in product._events]}"
