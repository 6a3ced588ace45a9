"""Storefront bounded context: product catalogue, customer reviews and ratings.

Products own their reviews. Rating and review count are derived on the
aggregate and kept in step with every review mutation.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
storefront = Domain(name="storefront")
