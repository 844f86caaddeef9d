"""Review aggregate: the core of the Reviews domain.

A Review is a customer's star rating plus commentary about a product or a
shop visit. Two submission shapes produce it:

    PRODUCT  product name, stars, and optionally where it was bought
    MOBILE   the mobile-shop questionnaire: product type, product and
             service quality, and whether the customer would recommend us

Reviews are immutable once submitted: there is no edit or removal path.
"""

import re
from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import (
    Boolean,
    DateTime,
    Identifier,
    Integer,
    String,
    Text,
    ValueObject,
)

from reviews.domain import reviews
from reviews.review.events import ReviewSubmitted


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class ReviewForm(Enum):
    PRODUCT = "Product"
    MOBILE = "Mobile"


class Quality(Enum):
    EXCELLENT = "Excellent"
    GOOD = "Good"
    AVERAGE = "Average"
    POOR = "Poor"


class ProductType(Enum):
    """Categories offered by the mobile-shop form. Free text is also accepted."""

    MOBILE_PHONE = "Mobile Phone"
    ACCESSORIES = "Accessories"
    REPAIR_SERVICE = "Repair Service"
    OTHER = "Other"


_URL_PATTERN = re.compile(r"^https?://\S+$", re.IGNORECASE)
_PHONE_PATTERN = re.compile(r"^\+?[\d\s\-()]+$")


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@reviews.value_object(part_of="Review")
class Rating:
    """A star rating from 1 to 5."""

    score = Integer(required=True)

    @invariant.post
    def score_must_be_in_range(self):
        if self.score is not None and (self.score < 1 or self.score > 5):
            raise ValidationError({"stars": ["Rating must be between 1 and 5"]})


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@reviews.aggregate
class Review:
    """A submitted review. Created once, read thereafter."""

    form = String(choices=ReviewForm, default=ReviewForm.PRODUCT.value)

    # Content
    product_name = String(required=True, max_length=200)
    stars = ValueObject(Rating, required=True)
    description = Text()
    image_url = String(max_length=500)
    bought_from_url = String(max_length=500)

    # Mobile-shop questionnaire
    product_type = String(max_length=100)
    product_quality = String(choices=Quality)
    service_quality = String(choices=Quality)
    would_recommend = Boolean()
    customer_name = String(max_length=100)
    mobile_number = String(max_length=20)

    # Submitter, owned by the identity provider
    user_id = Identifier()
    user_name = String(max_length=100)
    user_email = String(max_length=254)

    # Timestamps
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Invariants
    # -------------------------------------------------------------------
    @invariant.post
    def product_name_must_not_be_blank(self):
        if self.product_name is not None and len(self.product_name.strip()) == 0:
            raise ValidationError({"product_name": ["Product name cannot be empty"]})

    @invariant.post
    def urls_must_be_http(self):
        for field_name in ("image_url", "bought_from_url"):
            value = getattr(self, field_name)
            if value and not _URL_PATTERN.match(value):
                raise ValidationError({field_name: ["Must be an http(s) URL"]})

    @invariant.post
    def mobile_number_format(self):
        number = self.mobile_number
        if number and (not re.search(r"\d", number) or not _PHONE_PATTERN.match(number)):
            raise ValidationError({"mobile_number": [f"Invalid phone number: {number!r}"]})

    @invariant.post
    def mobile_questionnaire_must_be_complete(self):
        if self.form != ReviewForm.MOBILE.value:
            return

        errors = {}
        if not self.product_type:
            errors["product_type"] = ["Product type is required"]
        if not self.product_quality:
            errors["product_quality"] = ["Product quality is required"]
        if not self.service_quality:
            errors["service_quality"] = ["Service quality is required"]
        if self.would_recommend is None:
            errors["would_recommend"] = ["Please tell us whether you would recommend us"]
        if errors:
            raise ValidationError(errors)

    # -------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------
    @classmethod
    def submit(
        cls,
        product_name,
        stars,
        description=None,
        image_url=None,
        bought_from_url=None,
        user_id=None,
        user_name=None,
        user_email=None,
    ):
        """Submit a product review."""
        return cls._create(
            form=ReviewForm.PRODUCT,
            product_name=product_name,
            stars=stars,
            description=description,
            image_url=image_url,
            bought_from_url=bought_from_url,
            user_id=user_id,
            user_name=user_name,
            user_email=user_email,
        )

    @classmethod
    def submit_mobile(
        cls,
        product_name,
        stars,
        product_type,
        product_quality,
        service_quality,
        would_recommend,
        description=None,
        image_url=None,
        customer_name=None,
        mobile_number=None,
        user_id=None,
        user_name=None,
        user_email=None,
    ):
        """Submit a mobile-shop experience review."""
        return cls._create(
            form=ReviewForm.MOBILE,
            product_name=product_name,
            stars=stars,
            product_type=product_type,
            product_quality=product_quality,
            service_quality=service_quality,
            would_recommend=would_recommend,
            description=description,
            image_url=image_url,
            customer_name=customer_name,
            mobile_number=mobile_number,
            user_id=user_id,
            user_name=user_name,
            user_email=user_email,
        )

    @classmethod
    def _create(cls, form, product_name, stars, user_id=None, **fields):
        now = datetime.now(UTC)

        # Blank optional text from HTML forms is stored as unset
        fields = {name: (None if value == "" else value) for name, value in fields.items()}

        review = cls(
            form=form.value,
            product_name=product_name.strip() if product_name else product_name,
            stars=Rating(score=stars),
            user_id=str(user_id) if user_id else None,
            created_at=now,
            updated_at=now,
            **fields,
        )

        review.raise_(
            ReviewSubmitted(
                review_id=str(review.id),
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
                user_id=review.user_id,
                user_name=review.user_name,
                user_email=review.user_email,
                submitted_at=now,
            )
        )

        return review
