"""FastAPI routes for the Reviews bounded context.

Writes translate Pydantic schemas (external contract) into Protean commands;
reads are filters over the ReviewListing projection, newest first.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from reviews.analytics import summarize_reviews
from reviews.api.schemas import (
    QualityDistributionSchema,
    ReviewResponse,
    ReviewSummaryResponse,
    ReviewUserSchema,
    SubmitMobileReviewRequest,
    SubmitReviewRequest,
)
from reviews.api.session import SessionUser, require_user
from reviews.projections.review_listing import every_row, newest_first
from reviews.review.review import Review, ReviewForm
from reviews.review.submission import SubmitMobileReview, SubmitReview
from reviews.utils.logging import get_logger

logger = get_logger(__name__)

review_router = APIRouter(prefix="/api", tags=["reviews"])

SignedInUser = Annotated[SessionUser, Depends(require_user)]


def _user(record) -> ReviewUserSchema | None:
    if not record.user_id:
        return None
    return ReviewUserSchema(id=str(record.user_id), name=record.user_name, email=record.user_email)


def _listing_response(row) -> ReviewResponse:
    return ReviewResponse(
        id=str(row.review_id),
        form=row.form,
        product_name=row.product_name,
        stars=row.stars,
        description=row.description,
        image_url=row.image_url,
        bought_from_url=row.bought_from_url,
        product_type=row.product_type,
        product_quality=row.product_quality,
        service_quality=row.service_quality,
        would_recommend=row.would_recommend,
        customer_name=row.customer_name,
        mobile_number=row.mobile_number,
        created_at=row.created_at,
        updated_at=row.updated_at,
        user=_user(row),
    )


def _created_response(review_id: str) -> ReviewResponse:
    # Read the aggregate, not the projection: projectors may run asynchronously
    review = current_domain.repository_for(Review).get(review_id)
    return ReviewResponse(
        id=str(review.id),
        form=review.form,
        product_name=review.product_name,
        stars=review.stars.score,
        description=review.description,
        image_url=review.image_url,
        bought_from_url=review.bought_from_url,
        product_type=review.product_type,
        product_quality=review.product_quality,
        service_quality=review.service_quality,
        would_recommend=review.would_recommend,
        customer_name=review.customer_name,
        mobile_number=review.mobile_number,
        created_at=review.created_at,
        updated_at=review.updated_at,
        user=_user(review),
    )


def _string_keys(distribution: dict) -> dict[str, int]:
    return {("Unspecified" if key is None else str(key)): count for key, count in distribution.items()}


# ---------------------------------------------------------------------------
# Product reviews
# ---------------------------------------------------------------------------
@review_router.get("/all-reviews", response_model=list[ReviewResponse])
async def list_all_reviews() -> list[ReviewResponse]:
    """Every review, newest first. Public."""
    return [_listing_response(row) for row in newest_first()]


@review_router.get("/reviews", response_model=list[ReviewResponse])
async def list_my_reviews(user: SignedInUser) -> list[ReviewResponse]:
    """The signed-in user's reviews, newest first."""
    rows = newest_first(user_id=user.id)
    logger.debug("reviews_listed", scope="mine", user_id=user.id, count=len(rows))
    return [_listing_response(row) for row in rows]


@review_router.post("/reviews", status_code=201, response_model=ReviewResponse)
async def submit_review(body: SubmitReviewRequest, user: SignedInUser) -> ReviewResponse:
    """Submit a product review as the signed-in user."""
    command = SubmitReview(
        product_name=body.product_name,
        stars=body.stars,
        description=body.description,
        image_url=body.image_url,
        bought_from_url=body.bought_from_url,
        user_id=user.id,
        user_name=user.name,
        user_email=user.email,
    )
    review_id = current_domain.process(command, asynchronous=False)
    return _created_response(review_id)


# ---------------------------------------------------------------------------
# Mobile-shop reviews
# ---------------------------------------------------------------------------
@review_router.get("/mobile-reviews", response_model=list[ReviewResponse])
async def list_mobile_reviews() -> list[ReviewResponse]:
    """Mobile-shop reviews with the questionnaire fields, newest first."""
    return [_listing_response(row) for row in newest_first(form=ReviewForm.MOBILE.value)]


@review_router.post("/mobile-reviews", status_code=201, response_model=ReviewResponse)
async def submit_mobile_review(body: SubmitMobileReviewRequest, user: SignedInUser) -> ReviewResponse:
    """Submit a mobile-shop experience review as the signed-in user."""
    command = SubmitMobileReview(
        product_name=body.product_name,
        stars=body.stars,
        product_type=body.product_type,
        product_quality=body.product_quality,
        service_quality=body.service_quality,
        would_recommend=body.would_recommend,
        description=body.description,
        image_url=body.image_url,
        customer_name=body.customer_name,
        mobile_number=body.mobile_number,
        user_id=user.id,
        user_name=user.name,
        user_email=user.email,
    )
    review_id = current_domain.process(command, asynchronous=False)
    return _created_response(review_id)


@review_router.get("/mobile-reviews/summary", response_model=ReviewSummaryResponse)
async def mobile_review_summary() -> ReviewSummaryResponse:
    """Dashboard statistics over all mobile-shop reviews."""
    summary = summarize_reviews(every_row(form=ReviewForm.MOBILE.value))
    return ReviewSummaryResponse(
        total_count=summary.total_count,
        average_rating=summary.average_rating,
        recommendation_rate=summary.recommendation_rate,
        product_type_distribution=_string_keys(summary.product_type_distribution),
        quality_distribution=QualityDistributionSchema(
            product=_string_keys(summary.quality_distribution.product),
            service=_string_keys(summary.quality_distribution.service),
        ),
    )
