"""HTTP client for the Reviews API, the fetch layer behind every view.

No retries, no backoff, no caching: each call either returns data or raises
a ``ReviewClientError`` carrying a message fit to show the user.
"""

import os
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

import requests
from pydantic import ValidationError

from reviews.api.schemas import CamelModel, ReviewUserSchema
from reviews.api.session import SessionUser
from reviews.client.errors import ReviewResponseError, ReviewTransportError, extract_error_detail
from reviews.review.review import ReviewForm
from reviews.utils.logging import get_logger

logger = get_logger(__name__)


class ReviewScope(Enum):
    """Which collection to list. Each scope has its own endpoint."""

    ALL = "/api/all-reviews"
    MINE = "/api/reviews"
    MOBILE = "/api/mobile-reviews"


_CREATE_PATHS = {
    ReviewForm.PRODUCT: "/api/reviews",
    ReviewForm.MOBILE: "/api/mobile-reviews",
}


class ReviewRecord(CamelModel):
    """A review as the API returns it. Only id and product name are guaranteed."""

    id: str
    product_name: str
    form: str | None = None
    stars: int | None = None
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


@dataclass(frozen=True)
class ClientSettings:
    base_url: str = "http://localhost:8000"
    timeout: float = 10.0

    @classmethod
    def from_env(cls) -> "ClientSettings":
        return cls(
            base_url=os.getenv("REVIEWS_API_URL", cls.base_url).rstrip("/"),
            timeout=float(os.getenv("REVIEWS_API_TIMEOUT", str(cls.timeout))),
        )


class ReviewClient:
    def __init__(
        self,
        settings: ClientSettings | None = None,
        user: SessionUser | None = None,
        session: requests.Session | None = None,
    ):
        self.settings = settings or ClientSettings.from_env()
        self.user = user
        self._session = session or requests.Session()

    def _headers(self) -> dict[str, str]:
        if self.user is None:
            return {}
        headers = {"X-User-Id": self.user.id}
        if self.user.email:
            headers["X-User-Email"] = self.user.email
        if self.user.name:
            headers["X-User-Name"] = self.user.name
        return headers

    def _request(self, method: str, path: str, fallback: str, **kwargs) -> requests.Response:
        url = f"{self.settings.base_url}{path}"
        try:
            response = self._session.request(
                method,
                url,
                headers=self._headers(),
                timeout=self.settings.timeout,
                **kwargs,
            )
        except requests.RequestException as exc:
            logger.warning("review_request_failed", method=method, path=path, error=str(exc))
            raise ReviewTransportError("Network error, please try again") from exc

        if not response.ok:
            message = extract_error_detail(response, fallback)
            logger.warning(
                "review_request_failed",
                method=method,
                path=path,
                status_code=response.status_code,
                error=message,
            )
            raise ReviewResponseError(message, response.status_code)
        return response

    def _records(self, response: requests.Response, fallback: str, many: bool):
        try:
            body = response.json()
            if many:
                return [ReviewRecord.model_validate(item) for item in body]
            return ReviewRecord.model_validate(body)
        except (ValueError, TypeError, ValidationError) as exc:
            logger.warning("review_response_unreadable", status_code=response.status_code, error=str(exc))
            raise ReviewResponseError(fallback, response.status_code) from exc

    def list_reviews(self, scope: ReviewScope = ReviewScope.ALL) -> list[ReviewRecord]:
        """Fetch one of the review collections, newest first."""
        fallback = "Failed to fetch reviews"
        response = self._request("GET", scope.value, fallback)
        records = self._records(response, fallback, many=True)
        logger.debug("reviews_listed", scope=scope.name, count=len(records))
        return records

    def create_review(self, payload: dict, form: ReviewForm = ReviewForm.PRODUCT) -> ReviewRecord:
        """Submit a review; ``payload`` uses the API's camelCase keys."""
        fallback = "Failed to submit review"
        response = self._request("POST", _CREATE_PATHS[form], fallback, json=payload)
        return self._records(response, fallback, many=False)
