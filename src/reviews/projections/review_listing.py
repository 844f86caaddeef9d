"""ReviewListing: one row per submitted review, serving every list view.

The public feed, a customer's own reviews, and the mobile-shop dashboard
are all filters over this projection, newest first.
"""

import os

from protean.core.projector import on
from protean.fields import Boolean, DateTime, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from reviews.domain import reviews
from reviews.review.events import ReviewSubmitted
from reviews.review.review import Review

# Upper bound on rows returned by a single list query
LIST_LIMIT = int(os.getenv("REVIEWS_LIST_LIMIT", "1000"))


@reviews.projection
class ReviewListing:
    review_id = Identifier(identifier=True, required=True)
    form = String(required=True)
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
    created_at = DateTime()
    updated_at = DateTime()


@reviews.projector(projector_for=ReviewListing, aggregates=[Review])
class ReviewListingProjector:
    @on(ReviewSubmitted)
    def on_review_submitted(self, event):
        current_domain.repository_for(ReviewListing).add(
            ReviewListing(
                review_id=event.review_id,
                form=event.form,
                product_name=event.product_name,
                stars=event.stars,
                description=event.description,
                image_url=event.image_url,
                bought_from_url=event.bought_from_url,
                product_type=event.product_type,
                product_quality=event.product_quality,
                service_quality=event.service_quality,
                would_recommend=event.would_recommend,
                customer_name=event.customer_name,
                mobile_number=event.mobile_number,
                user_id=event.user_id,
                user_name=event.user_name,
                user_email=event.user_email,
                created_at=event.submitted_at,
                updated_at=event.submitted_at,
            )
        )


def newest_first(**filters):
    """Listing rows matching ``filters``, most recently created first."""
    query = current_domain.repository_for(ReviewListing)._dao.query
    if filters:
        query = query.filter(**filters)
    return query.order_by("-created_at").limit(LIST_LIMIT).all().items


def every_row(**filters):
    """All listing rows matching ``filters``, fetched a page at a time."""
    query = current_domain.repository_for(ReviewListing)._dao.query
    if filters:
        query = query.filter(**filters)
    query = query.order_by("-created_at")

    rows = []
    while True:
        page = query.offset(len(rows)).limit(LIST_LIMIT).all().items
        rows.extend(page)
        if len(page) < LIST_LIMIT:
            return rows
