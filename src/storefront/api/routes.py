"""FastAPI routes for the Product catalogue and its reviews.

Each route translates between Pydantic schemas (external contract) and
Protean commands (internal domain concepts). Reads go straight to the
repository.
"""

from fastapi import APIRouter, Depends, Query
from protean.utils.globals import current_domain

from storefront.api.auth import AuthenticatedUser, current_user, require_admin, require_api_key
from storefront.api.schemas import (
    CreateProductRequest,
    ProductDataResponse,
    ProductListResponse,
    ProductResponse,
    ReviewRequest,
    StatusResponse,
    UpdateProductRequest,
)
from storefront.product.creation import CreateProduct
from storefront.product.details import UpdateProduct
from storefront.product.listing import ProductFilter
from storefront.product.product import Product
from storefront.product.removal import DeleteProduct
from storefront.product.reviews import AddReview, DeleteReview, EditReview

product_router = APIRouter(prefix="/api/product", tags=["products"], dependencies=[Depends(require_api_key)])


def _product_data(product_id: str) -> ProductDataResponse:
    product = current_domain.repository_for(Product).get(product_id)
    return ProductDataResponse(data=ProductResponse.from_product(product))


# --- Catalogue reads ---


@product_router.get("", response_model=ProductListResponse)
async def list_products(
    search: str | None = Query(None, description="Case-insensitive text to find in the description"),
    price: str | None = Query(None, description="Price ranges, e.g. 1000-2000,4100-*"),
    active: str | None = Query(None, description="true or false"),
    rating: str | None = Query(None, description="Exact average rating"),
    reviews: str | None = Query(None, description="Review count ranges, e.g. 1-3 or 1-*"),
) -> ProductListResponse:
    """List products matching the query-string filters."""
    product_filter = ProductFilter.from_params(
        {"search": search, "price": price, "active": active, "rating": rating, "reviews": reviews}
    )
    products = current_domain.repository_for(Product).find(product_filter)
    return ProductListResponse(data=[ProductResponse.from_product(product) for product in products])


@product_router.get("/{product_id}", response_model=ProductDataResponse)
async def get_product(product_id: str) -> ProductDataResponse:
    return _product_data(product_id)


# --- Reviews (authenticated users) ---


@product_router.post("/review/{product_id}", status_code=201, response_model=ProductDataResponse)
async def add_review(
    product_id: str,
    body: ReviewRequest,
    user: AuthenticatedUser = Depends(current_user),
) -> ProductDataResponse:
    """Add the caller's review to a product."""
    command = AddReview(product_id=product_id, user=user.id, rating=body.rating, comment=body.comment)
    current_domain.process(command, asynchronous=False)
    return _product_data(product_id)


@product_router.put("/review/{product_id}", response_model=ProductDataResponse)
async def edit_review(
    product_id: str,
    body: ReviewRequest,
    user: AuthenticatedUser = Depends(current_user),
) -> ProductDataResponse:
    """Replace the caller's review on a product."""
    command = EditReview(product_id=product_id, user=user.id, rating=body.rating, comment=body.comment)
    current_domain.process(command, asynchronous=False)
    return _product_data(product_id)


@product_router.delete("/review/{product_id}", response_model=ProductDataResponse)
async def delete_review(
    product_id: str,
    user: AuthenticatedUser = Depends(current_user),
) -> ProductDataResponse:
    """Delete the caller's review on a product."""
    command = DeleteReview(product_id=product_id, user=user.id)
    current_domain.process(command, asynchronous=False)
    return _product_data(product_id)


# --- Catalogue writes (admins) ---


@product_router.post("", status_code=201, response_model=ProductDataResponse)
async def create_product(
    body: CreateProductRequest,
    _admin: AuthenticatedUser = Depends(require_admin),
) -> ProductDataResponse:
    command = CreateProduct(
        name=body.name,
        price=body.price,
        count_in_stock=body.count_in_stock,
        description=body.description,
        image=body.image,
        public_id=body.public_id,
        is_active=body.is_active,
    )
    product_id = current_domain.process(command, asynchronous=False)
    return _product_data(product_id)


@product_router.put("/{product_id}", response_model=ProductDataResponse)
async def update_product(
    product_id: str,
    body: UpdateProductRequest,
    _admin: AuthenticatedUser = Depends(require_admin),
) -> ProductDataResponse:
    command = UpdateProduct(
        product_id=product_id,
        name=body.name,
        price=body.price,
        count_in_stock=body.count_in_stock,
        description=body.description,
        image=body.image,
        public_id=body.public_id,
        is_active=body.is_active,
    )
    current_domain.process(command, asynchronous=False)
    return _product_data(product_id)


@product_router.delete("/{product_id}", response_model=StatusResponse)
async def delete_product(
    product_id: str,
    _admin: AuthenticatedUser = Depends(require_admin),
) -> StatusResponse:
    current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)
    return StatusResponse()
