"""Reviews bounded context: customer product and shop reviews.

Handles review submission (two form shapes: product reviews and mobile-shop
reviews), the listing read model, and review analytics for the dashboard.
Reviews are write-once: there is no edit or delete path.
"""

from protean.domain import Domain

from reviews.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

reviews = Domain(name="reviews")
