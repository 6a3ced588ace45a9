"""Review management: commands and handler.

Each handler loads the product, applies one review mutation and persists the
product. A user holds at most one review per product, so the user identity is
enough to address a review.
"""

from protean import handle
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.product.product import Product
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Product")
class AddReview:
    product_id: Identifier(required=True)
    user: Identifier(required=True)
    rating: Integer(default=1)
    comment: String(required=True, max_length=2000)


@storefront.command(part_of="Product")
class EditReview:
    product_id: Identifier(required=True)
    user: Identifier(required=True)
    rating: Integer(default=1)
    comment: String(required=True, max_length=2000)


@storefront.command(part_of="Product")
class DeleteReview:
    product_id: Identifier(required=True)
    user: Identifier(required=True)


@storefront.command_handler(part_of=Product)
class ManageReviewsHandler:
    @handle(AddReview)
    def add_review(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)

        product.add_review(user=command.user, rating=command.rating, comment=command.comment)
        repo.add(product)

        logger.info(
            "review_added",
            product_id=str(product.id),
            user=str(command.user),
            rating=product.rating,
            num_reviews=product.num_reviews,
        )
        return str(product.id)

    @handle(EditReview)
    def edit_review(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)

        product.edit_review(user=command.user, rating=command.rating, comment=command.comment)
        repo.add(product)

        logger.info("review_edited", product_id=str(product.id), user=str(command.user), rating=product.rating)
        return str(product.id)

    @handle(DeleteReview)
    def delete_review(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)

        product.delete_review(user=command.user)
        repo.add(product)

        logger.info(
            "review_deleted",
            product_id=str(product.id),
            user=str(command.user),
            rating=product.rating,
            num_reviews=product.num_reviews,
        )
        return str(product.id)
