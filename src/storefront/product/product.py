"""Product aggregate root with its embedded Review entities.

A product's ``rating`` and ``num_reviews`` are derived from its reviews and are
recomputed by the aggregate on every review mutation; clients never set them.
The rating is the ceiling of the mean review rating (a mean of 3.2 gives 4),
and 0 when the product has no reviews.
"""

import math
from datetime import datetime

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import (
    Boolean,
    DateTime,
    Float,
    HasMany,
    Identifier,
    Integer,
    String,
    Text,
)

from storefront.domain import storefront
from storefront.product.errors import DuplicateUserReview, UserHasNoReview
from storefront.product.events import (
    ProductCreated,
    ProductUpdated,
    ReviewAdded,
    ReviewDeleted,
    ReviewEdited,
)
from storefront.shared.validation import MIN_COMMENT_LENGTH, check_comment, check_rating


@storefront.entity(part_of="Product")
class Review:
    """One user's rating and comment on a product."""

    user: Identifier(required=True)
    rating: Integer(default=1, min_value=1, max_value=5)
    comment: String(required=True, min_length=MIN_COMMENT_LENGTH, max_length=2000)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @invariant.post
    def rating_must_be_a_star_value(self):
        if not check_rating(self.rating):
            raise ValidationError({"rating": ["Rating must be one of 1, 2, 3, 4 or 5"]})

    @invariant.post
    def comment_must_be_long_enough(self):
        if self.comment is not None and not check_comment(self.comment):
            raise ValidationError({"comment": [f"Comment must be at least {MIN_COMMENT_LENGTH} characters"]})


@storefront.aggregate
class Product:
    """Product aggregate root."""

    name: String(required=True, max_length=255)
    price: Float(required=True, min_value=0.0)
    count_in_stock: Integer(required=True, min_value=0, default=0)
    description: Text(required=True)
    image: String(max_length=500)
    public_id: String(max_length=255)
    rating: Integer(default=0, min_value=0, max_value=5)
    num_reviews: Integer(default=0, min_value=0)
    reviews: HasMany(Review)
    is_active: Boolean(default=True)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @invariant.post
    def one_review_per_user(self):
        users = [str(review.user) for review in self.reviews]
        if len(users) != len(set(users)):
            raise ValidationError({"reviews": ["A user can review a product only once"]})

    @classmethod
    def create(
        cls,
        name,
        price,
        description,
        count_in_stock=0,
        image=None,
        public_id=None,
        is_active=True,
    ):
        now = datetime.now()
        product = cls(
            name=name,
            price=price,
            count_in_stock=count_in_stock,
            description=description,
            image=image,
            public_id=public_id,
            is_active=is_active,
            rating=0,
            num_reviews=0,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductCreated(
                product_id=product.id,
                name=name,
                price=price,
                count_in_stock=count_in_stock,
                is_active=is_active,
                created_at=now,
            )
        )
        return product

    def update_details(
        self,
        name=None,
        price=None,
        count_in_stock=None,
        description=None,
        image=None,
        public_id=None,
        is_active=None,
    ):
        now = datetime.now()

        with atomic_change(self):
            if name is not None:
                self.name = name
            if price is not None:
                self.price = price
            if count_in_stock is not None:
                self.count_in_stock = count_in_stock
            if description is not None:
                self.description = description
            if image is not None:
                self.image = image
            if public_id is not None:
                self.public_id = public_id
            if is_active is not None:
                self.is_active = is_active
            self.updated_at = now

        self.raise_(
            ProductUpdated(
                product_id=self.id,
                name=self.name,
                price=self.price,
                count_in_stock=self.count_in_stock,
                is_active=self.is_active,
                updated_at=now,
            )
        )

    # -------------------------------------------------------------------
    # Reviews
    # -------------------------------------------------------------------
    def review_by(self, user):
        """Return the review written by ``user``, or None."""
        return next((r for r in self.reviews if str(r.user) == str(user)), None)

    def add_review(self, user, rating=1, comment=None):
        if self.review_by(user) is not None:
            raise DuplicateUserReview(user)

        now = datetime.now()
        review = Review(user=user, rating=rating, comment=comment, created_at=now, updated_at=now)

        with atomic_change(self):
            self.add_reviews(review)
            self.num_reviews = self.num_reviews + 1
            self._recompute_rating()
            self.updated_at = now

        self.raise_(
            ReviewAdded(
                product_id=self.id,
                review_id=review.id,
                user=review.user,
                rating=review.rating,
                product_rating=self.rating,
                num_reviews=self.num_reviews,
                added_at=now,
            )
        )
        return review

    def edit_review(self, user, rating=1, comment=None):
        """Replace the content of ``user``'s review. Other reviews are untouched."""
        review = self.review_by(user)
        if review is None:
            raise UserHasNoReview(user)

        # Validate the replacement in full before touching the aggregate
        Review(user=user, rating=rating, comment=comment)

        now = datetime.now()
        with atomic_change(self):
            review.rating = rating
            review.comment = comment
            review.updated_at = now
            self._recompute_rating()
            self.updated_at = now

        self.raise_(
            ReviewEdited(
                product_id=self.id,
                review_id=review.id,
                user=review.user,
                rating=review.rating,
                product_rating=self.rating,
                edited_at=now,
            )
        )
        return review

    def delete_review(self, user):
        review = self.review_by(user)
        if review is None:
            raise UserHasNoReview(user)

        now = datetime.now()
        with atomic_change(self):
            self.remove_reviews(review)
            self.num_reviews = self.num_reviews - 1
            self._recompute_rating()
            self.updated_at = now

        self.raise_(
            ReviewDeleted(
                product_id=self.id,
                user=str(user),
                product_rating=self.rating,
                num_reviews=self.num_reviews,
                deleted_at=now,
            )
        )

    def _recompute_rating(self):
        ratings = [review.rating for review in self.reviews]
        if not ratings:
            self.rating = 0
            return
        self.rating = math.ceil(sum(ratings) / len(ratings))
