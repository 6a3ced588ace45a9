"""Domain events for the Product aggregate."""

from protean.fields import Boolean, DateTime, Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductCreated:
    """An admin added a new product to the catalogue."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    price: Float(required=True)
    count_in_stock: Integer(required=True)
    is_active: Boolean(default=True)
    created_at: DateTime(required=True)


@storefront.event(part_of="Product")
class ProductUpdated:
    """An admin changed product details, price or stock."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    price: Float(required=True)
    count_in_stock: Integer(required=True)
    is_active: Boolean()
    updated_at: DateTime(required=True)


# Review events carry the product rating as recomputed after the change.


@storefront.event(part_of="Product")
class ReviewAdded:
    __version__ = 1

    product_id: Identifier(required=True)
    review_id: Identifier(required=True)
    user: Identifier(required=True)
    rating: Integer(required=True)
    product_rating: Integer(required=True)
    num_reviews: Integer(required=True)
    added_at: DateTime(required=True)


@storefront.event(part_of="Product")
class ReviewEdited:
    __version__ = 1

    product_id: Identifier(required=True)
    review_id: Identifier(required=True)
    user: Identifier(required=True)
    rating: Integer(required=True)
    product_rating: Integer(required=True)
    edited_at: DateTime(required=True)


@storefront.event(part_of="Product")
class ReviewDeleted:
    __version__ = 1

    product_id: Identifier(required=True)
    user: Identifier(required=True)
    product_rating: Integer(required=True)
    num_reviews: Integer(required=True)
    deleted_at: DateTime(required=True)
