"""Repository for the Product aggregate."""

from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.product.listing import ProductFilter
from storefront.product.product import Product, Review


@storefront.repository(part_of=Product)
class ProductRepository:
    """Adds filtered listing and removal to the standard repository."""

    def find(self, product_filter: ProductFilter) -> list[Product]:
        """Products matching ``product_filter``, oldest first."""
        if product_filter.matches_nothing:
            return []

        query = self._dao.query.order_by("created_at")
        if product_filter.criteria is not None:
            query = query.filter(product_filter.criteria)
        return query.all().items

    def remove(self, product: Product) -> None:
        """Delete ``product`` together with the reviews it owns."""
        review_dao = current_domain.repository_for(Review)._dao
        for review in list(product.reviews):
            review_dao.delete(review)
        self._dao.delete(product)
