"""Client-side error taxonomy.

Every failure a view can hit while talking to the Reviews API ends up as a
``ReviewClientError`` whose ``message`` is shown inline to the user.
"""


class ReviewClientError(Exception):
    """Base class; ``message`` is the user-visible text."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ReviewTransportError(ReviewClientError):
    """The request never got a response (connection refused, timeout, ...)."""


class ReviewResponseError(ReviewClientError):
    """The API answered with a non-success status."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class ReviewFormError(ReviewClientError):
    """The form failed validation; nothing was sent."""

    def __init__(self, message: str, fields: tuple[str, ...] = ()):
        super().__init__(message)
        self.fields = fields


def extract_error_detail(response, fallback: str) -> str:
    """Human-readable message from an API error response.

    Handles the API's two error shapes:

    - Domain errors: {"error": "msg"} or {"error": {"field": ["msg", ...]}}
    - Framework errors: {"detail": "msg"} or {"detail": [{"loc": [...], "msg": "..."}]}
    """
    try:
        body = response.json()
    except ValueError:
        return fallback

    if not isinstance(body, dict):
        return fallback

    if "error" in body:
        error = body["error"]
        if isinstance(error, dict):
            return " | ".join(
                f"{field}: {', '.join(map(str, msgs)) if isinstance(msgs, list) else msgs}"
                for field, msgs in error.items()
            )
        return str(error) or fallback

    detail = body.get("detail")
    if isinstance(detail, list):
        parts = []
        for err in detail:
            if not isinstance(err, dict):
                parts.append(str(err))
                continue
            loc = ".".join(str(p) for p in err.get("loc", []) if p != "body")
            msg = err.get("msg", str(err))
            parts.append(f"{loc}: {msg}" if loc else msg)
        return " | ".join(parts) or fallback
    if detail:
        return str(detail)

    return fallback
