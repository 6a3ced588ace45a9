"""Pydantic request/response schemas for the Product API.

These are separate from Protean commands. The API layer is the external
contract; commands are internal domain concepts.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from storefront.shared.validation import MIN_COMMENT_LENGTH


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class CreateProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Jollof rice",
                    "price": 2000,
                    "countInStock": 2,
                    "description": "Jollof rice as you like it",
                    "image": "https://cdn.example.com/products/jollof.jpg",
                    "public_id": "products/jollof",
                }
            ]
        },
        "populate_by_name": True,
    }

    name: str = Field(..., min_length=1, max_length=255)
    price: float = Field(..., ge=0)
    count_in_stock: int = Field(0, ge=0, alias="countInStock")
    description: str = Field(..., min_length=1)
    image: str | None = Field(None, max_length=500)
    public_id: str | None = Field(None, max_length=255)
    is_active: bool = Field(True, alias="isActive")


class UpdateProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {"examples": [{"price": 2500, "countInStock": 10, "isActive": True}]},
        "populate_by_name": True,
    }

    name: str | None = Field(None, min_length=1, max_length=255)
    price: float | None = Field(None, ge=0)
    count_in_stock: int | None = Field(None, ge=0, alias="countInStock")
    description: str | None = Field(None, min_length=1)
    image: str | None = Field(None, max_length=500)
    public_id: str | None = Field(None, max_length=255)
    is_active: bool | None = Field(None, alias="isActive")


class ReviewRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"rating": 4, "comment": "Great food, generous portions"}]}}

    rating: int = Field(1, ge=1, le=5)
    comment: str = Field(..., min_length=MIN_COMMENT_LENGTH, max_length=2000)


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class ReviewResponse(BaseModel):
    model_config = {"populate_by_name": True}

    id: str
    user: str
    rating: int
    comment: str
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")

    @classmethod
    def from_review(cls, review) -> ReviewResponse:
        return cls(
            id=str(review.id),
            user=str(review.user),
            rating=review.rating,
            comment=review.comment,
            created_at=review.created_at,
            updated_at=review.updated_at,
        )


class ProductResponse(BaseModel):
    model_config = {"populate_by_name": True}

    id: str
    name: str
    price: float
    count_in_stock: int = Field(alias="countInStock")
    description: str
    image: str | None = None
    public_id: str | None = None
    rating: int
    num_reviews: int = Field(alias="numReviews")
    reviews: list[ReviewResponse] = []
    is_active: bool = Field(alias="isActive")
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")

    @classmethod
    def from_product(cls, product) -> ProductResponse:
        return cls(
            id=str(product.id),
            name=product.name,
            price=product.price,
            count_in_stock=product.count_in_stock,
            description=product.description,
            image=product.image,
            public_id=product.public_id,
            rating=product.rating,
            num_reviews=product.num_reviews,
            reviews=[ReviewResponse.from_review(review) for review in product.reviews],
            is_active=product.is_active,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


class ProductListResponse(BaseModel):
    data: list[ProductResponse]


class ProductDataResponse(BaseModel):
    data: ProductResponse


class StatusResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "ok"}]}}

    status: str = "ok"
