"""Session gate for views that need a signed-in user."""

from dataclasses import dataclass
from enum import Enum

SIGN_IN_PATH = "/auth/signin"


class SessionStatus(Enum):
    LOADING = "loading"
    AUTHENTICATED = "authenticated"
    UNAUTHENTICATED = "unauthenticated"


@dataclass(frozen=True)
class GateDecision:
    render: bool
    placeholder: str | None = None
    redirect_to: str | None = None


def gate(status: SessionStatus) -> GateDecision:
    if status is SessionStatus.LOADING:
        return GateDecision(render=False, placeholder="Loading...")
    if status is SessionStatus.UNAUTHENTICATED:
        return GateDecision(render=False, redirect_to=SIGN_IN_PATH)
    return GateDecision(render=True)
