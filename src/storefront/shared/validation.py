"""Field checks shared by the Product aggregate and the HTTP edge."""

import uuid

ALLOWED_RATINGS = (1, 2, 3, 4, 5)
MIN_COMMENT_LENGTH = 10


def check_id(value) -> bool:
    """True when ``value`` is a well-formed identifier (UUID)."""
    if value is None:
        return False
    try:
        uuid.UUID(str(value))
    except ValueError:
        return False
    return True


def check_rating(rating) -> bool:
    """True when ``rating`` is one of the five star values."""
    return not isinstance(rating, bool) and rating in ALLOWED_RATINGS


def check_comment(comment) -> bool:
    return comment is not None and len(str(comment)) >= MIN_COMMENT_LENGTH
