"""Product listing filter built from query-string parameters.

Supported parameters:

    search=<text>          case-insensitive substring of ``description``
    price=<ranges>         ``low-high`` or ``low-*``, comma separated, OR-ed
    active=true|false      exact ``is_active``
    rating=<n>             exact derived ``rating``
    reviews=<ranges>       same range form, applied to ``num_reviews``

Distinct parameters are AND-ed. Unknown, absent or empty parameters add no
constraint. A malformed value never raises: it makes the whole filter match
nothing, so the listing comes back empty.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass

from protean.utils.query import Q

_RANGE_RE = re.compile(r"^\s*([0-9]+(?:\.[0-9]+)?)\s*-\s*([0-9]+(?:\.[0-9]+)?|\*)\s*$")
_RATING_RE = re.compile(r"^[0-9]+$")
_UNBOUNDED = "*"

# Query parameter -> aggregate field for range filters
_RANGE_FIELDS = {
    "price": "price",
    "reviews": "num_reviews",
}


def parse_range(expression):
    """Parse ``low-high`` or ``low-*`` into ``(low, high)``.

    ``high`` is None when unbounded. Returns None for anything malformed,
    including a reversed range.
    """
    match = _RANGE_RE.match(expression)
    if match is None:
        return None

    low = float(match.group(1))
    if match.group(2) == _UNBOUNDED:
        return low, None

    high = float(match.group(2))
    if high < low:
        return None
    return low, high


def range_criteria(field_name, value):
    """Build an OR of inclusive ranges over ``field_name``, or None if no range is valid."""
    criteria = None
    for expression in value.split(","):
        bounds = parse_range(expression)
        if bounds is None:
            continue

        low, high = bounds
        lookups = {f"{field_name}__gte": low}
        if high is not None:
            lookups[f"{field_name}__lte"] = high

        criteria = Q(**lookups) if criteria is None else criteria | Q(**lookups)
    return criteria


@dataclass
class ProductFilter:
    """A filter over the Product collection.

    ``criteria`` is None when nothing constrains the listing.
    """

    criteria: Q | None = None
    matches_nothing: bool = False

    def narrow(self, criteria):
        if criteria is None:
            self.matches_nothing = True
            return
        self.criteria = criteria if self.criteria is None else self.criteria & criteria

    @classmethod
    def from_params(cls, params: Mapping[str, str]) -> "ProductFilter":
        product_filter = cls()

        def value_of(name):
            value = params.get(name)
            if value is None:
                return None
            value = str(value).strip()
            return value or None

        search = value_of("search")
        if search is not None:
            product_filter.narrow(Q(description__icontains=search))

        for param, field_name in _RANGE_FIELDS.items():
            value = value_of(param)
            if value is not None:
                product_filter.narrow(range_criteria(field_name, value))

        active = value_of("active")
        if active is not None:
            flag = {"true": True, "false": False}.get(active.lower())
            product_filter.narrow(None if flag is None else Q(is_active=flag))

        rating = value_of("rating")
        if rating is not None:
            product_filter.narrow(Q(rating=int(rating)) if _RATING_RE.match(rating) else None)

        return product_filter
