"""Named failures of review mutations on the Product aggregate.

Both are validation errors, so the HTTP layer answers them with a client error.
``code`` is stable and safe to match on.
"""

from protean.exceptions import ValidationError


class DuplicateUserReview(ValidationError):
    code = "DUPLICATE_USER_REVIEW"

    def __init__(self, user):
        self.user = str(user)
        super().__init__({"reviews": [f"User {self.user} has already reviewed this product"]})


class UserHasNoReview(ValidationError):
    code = "USER_HAS_NO_REVIEW"

    def __init__(self, user):
        self.user = str(user)
        super().__init__({"reviews": [f"User {self.user} has no review on this product"]})
