"""Review form state and submission.

Form state is an immutable struct; ``reduce_form`` is the only way it
changes. ``submit_form`` validates first and never touches the network for
an incomplete form.
"""

from dataclasses import asdict, dataclass, field, replace

from pydantic.alias_generators import to_camel

from reviews.client.errors import ReviewClientError, ReviewFormError
from reviews.review.review import ProductType, Quality, ReviewForm

QUALITY_CHOICES = tuple(quality.value for quality in Quality)
PRODUCT_TYPE_CHOICES = tuple(product_type.value for product_type in ProductType)


# ---------------------------------------------------------------------------
# Field sets, one per form shape
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class ProductReviewFields:
    product_name: str = ""
    bought_from_url: str = ""
    stars: int = 5
    description: str = ""
    image_url: str = ""


@dataclass(frozen=True)
class MobileReviewFields:
    customer_name: str = ""
    mobile_number: str = ""
    product_type: str = ""
    product_name: str = ""
    stars: int = 5
    product_quality: str = ""
    service_quality: str = ""
    would_recommend: bool | None = None
    description: str = ""
    image_url: str = ""


_BLANK_FIELDS = {
    ReviewForm.PRODUCT: ProductReviewFields,
    ReviewForm.MOBILE: MobileReviewFields,
}


@dataclass(frozen=True)
class FormState:
    form: ReviewForm = ReviewForm.PRODUCT
    fields: ProductReviewFields | MobileReviewFields = field(default_factory=ProductReviewFields)
    submitting: bool = False
    error: str | None = None
    success: bool = False
    created: object | None = None  # ReviewRecord returned by the last successful submit

    @classmethod
    def blank(cls, form: ReviewForm) -> "FormState":
        return cls(form=form, fields=_BLANK_FIELDS[form]())


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class FieldChanged:
    name: str
    value: object


@dataclass(frozen=True)
class SubmitStarted:
    pass


@dataclass(frozen=True)
class SubmitSucceeded:
    record: object


@dataclass(frozen=True)
class SubmitFailed:
    message: str


@dataclass(frozen=True)
class SuccessDismissed:
    pass


@dataclass(frozen=True)
class FormReset:
    pass


def _stars(value) -> int:
    # Blank or non-numeric input becomes 0, which validation rejects
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def reduce_form(state: FormState, event) -> FormState:
    if isinstance(event, FieldChanged):
        value = _stars(event.value) if event.name == "stars" else event.value
        return replace(state, fields=replace(state.fields, **{event.name: value}))
    if isinstance(event, SubmitStarted):
        return replace(state, submitting=True, error=None, success=False, created=None)
    if isinstance(event, SubmitSucceeded):
        # Clear the form for the next review
        return replace(
            state,
            fields=_BLANK_FIELDS[state.form](),
            submitting=False,
            error=None,
            success=True,
            created=event.record,
        )
    if isinstance(event, SubmitFailed):
        return replace(state, submitting=False, error=event.message, success=False)
    if isinstance(event, SuccessDismissed):
        return replace(state, success=False)
    if isinstance(event, FormReset):
        return FormState.blank(state.form)
    raise ValueError(f"Unknown form event: {event!r}")


# ---------------------------------------------------------------------------
# Validation & submission
# ---------------------------------------------------------------------------
_MOBILE_REQUIRED = (
    ("product_type", "product type"),
    ("product_quality", "product quality"),
    ("service_quality", "service quality"),
)


def validate_fields(fields: ProductReviewFields | MobileReviewFields) -> None:
    """Raise ``ReviewFormError`` when a required field is missing."""
    if not fields.product_name.strip() or not fields.stars:
        raise ReviewFormError("Product name and stars are required", fields=("product_name", "stars"))

    if not 1 <= fields.stars <= 5:
        raise ReviewFormError("Stars must be between 1 and 5", fields=("stars",))

    if isinstance(fields, MobileReviewFields):
        missing = [name for name, _ in _MOBILE_REQUIRED if not getattr(fields, name)]
        labels = [label for name, label in _MOBILE_REQUIRED if name in missing]
        if fields.would_recommend is None:
            missing.append("would_recommend")
            labels.append("whether you would recommend us")
        if missing:
            raise ReviewFormError(f"Please answer: {', '.join(labels)}", fields=tuple(missing))

        for name in ("product_quality", "service_quality"):
            if getattr(fields, name) not in QUALITY_CHOICES:
                raise ReviewFormError(f"Choose one of: {', '.join(QUALITY_CHOICES)}", fields=(name,))


def to_payload(fields: ProductReviewFields | MobileReviewFields) -> dict:
    """Request body in the API's camelCase shape."""
    payload = {to_camel(name): value for name, value in asdict(fields).items()}
    payload["productName"] = fields.product_name.strip()
    return payload


def submit_form(state: FormState, client) -> FormState:
    """Validate, then create the review through ``client``.

    Every failure ends up as ``state.error``; the user may fix the form and
    resubmit.
    """
    if state.submitting:
        return state

    try:
        validate_fields(state.fields)
    except ReviewFormError as exc:
        return reduce_form(state, SubmitFailed(exc.message))

    state = reduce_form(state, SubmitStarted())
    try:
        record = client.create_review(to_payload(state.fields), form=state.form)
    except ReviewClientError as exc:
        return reduce_form(state, SubmitFailed(exc.message))
    return reduce_form(state, SubmitSucceeded(record))
