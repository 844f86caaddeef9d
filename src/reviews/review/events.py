"""Domain events for the Review aggregate.

Reviews are write-once, so a single fact is enough: the review was submitted.
The event carries the full review so projectors never read back the aggregate.
"""

from protean.fields import Boolean, DateTime, Identifier, Integer, String, Text

from reviews.domain import reviews


@reviews.event(part_of="Review")
class ReviewSubmitted:
    """A customer submitted a review through one of the review forms."""

    __version__ = 1

    review_id = Identifier(required=True)
    form = String(required=True)  # "Product" / "Mobile"
    product_name = String(required=True)
    stars = Integer(required=True)
    description = Text()
    image_url = String()
    bought_from_url = String()
    product_type = String()
    product_quality = String()
    service_quality = String()
    would_recommend = Boolean()
    customer_name = String()
    mobile_number = String()
    user_id = Identifier()
    user_name = String()
    user_email = String()
    submitted_at = DateTime(required=True)
