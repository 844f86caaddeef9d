"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state; nothing is shared
between users.
"""

import uuid
from dataclasses import dataclass, field


@dataclass
class ReviewerState:
    """A simulated signed-in reviewer and the reviews they have created."""

    user_id: str = field(default_factory=lambda: f"lt-{uuid.uuid4().hex[:12]}")
    review_ids: list[str] = field(default_factory=list)

    @property
    def headers(self) -> dict[str, str]:
        return {"X-User-Id": self.user_id}
