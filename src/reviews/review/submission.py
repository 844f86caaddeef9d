"""SubmitReview / SubmitMobileReview: create a review from one of the two forms.

The submitter is whoever the session says is signed in; the API layer copies
the session user onto the command. Handlers return the new review's id.
"""

from protean.fields import Boolean, Identifier, Integer, String, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from reviews.domain import reviews
from reviews.review.review import Review
from reviews.utils.logging import get_logger

logger = get_logger(__name__)


@reviews.command(part_of="Review")
class SubmitReview:
    product_name = String(required=True, max_length=200)
    stars = Integer(required=True)
    description = Text()
    image_url = String(max_length=500)
    bought_from_url = String(max_length=500)
    user_id = Identifier()
    user_name = String(max_length=100)
    user_email = String(max_length=254)


@reviews.command(part_of="Review")
class SubmitMobileReview:
    product_name = String(required=True, max_length=200)
    stars = Integer(required=True)
    product_type = String(required=True, max_length=100)
    product_quality = String(required=True)
    service_quality = String(required=True)
    would_recommend = Boolean()
    description = Text()
    image_url = String(max_length=500)
    customer_name = String(max_length=100)
    mobile_number = String(max_length=20)
    user_id = Identifier()
    user_name = String(max_length=100)
    user_email = String(max_length=254)


@reviews.command_handler(part_of=Review)
class SubmitReviewHandler:
    @handle(SubmitReview)
    def submit_review(self, command):
        review = Review.submit(
            product_name=command.product_name,
            stars=command.stars,
            description=command.description,
            image_url=command.image_url,
            bought_from_url=command.bought_from_url,
            user_id=command.user_id,
            user_name=command.user_name,
            user_email=command.user_email,
        )
        current_domain.repository_for(Review).add(review)

        logger.info(
            "review_submitted",
            review_id=str(review.id),
            form=review.form,
            stars=review.stars.score,
        )
        return str(review.id)

    @handle(SubmitMobileReview)
    def submit_mobile_review(self, command):
        review = Review.submit_mobile(
            product_name=command.product_name,
            stars=command.stars,
            product_type=command.product_type,
            product_quality=command.product_quality,
            service_quality=command.service_quality,
            would_recommend=command.would_recommend,
            description=command.description,
            image_url=command.image_url,
            customer_name=command.customer_name,
            mobile_number=command.mobile_number,
            user_id=command.user_id,
            user_name=command.user_name,
            user_email=command.user_email,
        )
        current_domain.repository_for(Review).add(review)

        logger.info(
            "review_submitted",
            review_id=str(review.id),
            form=review.form,
            stars=review.stars.score,
        )
        return str(review.id)
