"""Session boundary for the Reviews API.

Sign-in is handled by the identity provider in front of this service, which
forwards the signed-in user as ``X-User-*`` headers. Requests without a user
are unauthenticated.
"""

from typing import Annotated

from fastapi import Header, HTTPException
from pydantic import BaseModel


class SessionUser(BaseModel):
    id: str
    email: str | None = None
    name: str | None = None


def require_user(
    x_user_id: Annotated[str | None, Header()] = None,
    x_user_email: Annotated[str | None, Header()] = None,
    x_user_name: Annotated[str | None, Header()] = None,
) -> SessionUser:
    """Dependency for routes that need a signed-in user."""
    if not x_user_id:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return SessionUser(id=x_user_id, email=x_user_email, name=x_user_name)
