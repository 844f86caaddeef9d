"""Pydantic request/response schemas for the Reviews API.

These are separate from Protean commands (anti-corruption pattern).
The API layer is the external contract; commands are internal domain concepts.
JSON keys are camelCase on the wire; Python attributes stay snake_case.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class SubmitReviewRequest(CamelModel):
    product_name: str = Field(max_length=200)
    stars: int = Field(default=5, ge=1, le=5)
    description: str | None = None
    image_url: str | None = Field(default=None, max_length=500)
    bought_from_url: str | None = Field(default=None, max_length=500)


class SubmitMobileReviewRequest(CamelModel):
    product_name: str = Field(max_length=200)
    stars: int = Field(default=5, ge=1, le=5)
    product_type: str = Field(max_length=100)
    product_quality: str
    service_quality: str
    would_recommend: bool | None = None
    description: str | None = None
    image_url: str | None = Field(default=None, max_length=500)
    customer_name: str | None = Field(default=None, max_length=100)
    mobile_number: str | None = Field(default=None, max_length=20)


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class ReviewUserSchema(CamelModel):
    id: str
    name: str | None = None
    email: str | None = None


class ReviewResponse(CamelModel):
    id: str
    form: str
    product_name: str
    stars: int
    description: str | None = None
    image_url: str | None = None
    bought_from_url: str | None = None
    product_type: str | None = None
    product_quality: str | None = None
    service_quality: str | None = None
    would_recommend: bool | None = None
    customer_name: str | None = None
    mobile_number: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    user: ReviewUserSchema | None = None


class QualityDistributionSchema(CamelModel):
    product: dict[str, int] = {}
    service: dict[str, int] = {}


class ReviewSummaryResponse(CamelModel):
    total_count: int
    average_rating: float | None = None
    recommendation_rate: float | None = None
    product_type_distribution: dict[str, int] = {}
    quality_distribution: QualityDistributionSchema = QualityDistributionSchema()
