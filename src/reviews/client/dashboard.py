"""Mobile-shop review dashboard state.

The dashboard keeps the fetched collection and its summary together and
only recomputes the summary when a different collection arrives.
"""

from collections.abc import Sequence
from dataclasses import dataclass, replace

from reviews.analytics import ReviewSummary, format_rate, format_rating, summarize_reviews


@dataclass(frozen=True)
class DashboardState:
    reviews: Sequence = ()
    summary: ReviewSummary = ReviewSummary()


def load(state: DashboardState, reviews) -> DashboardState:
    """Take a freshly fetched collection; same object, same summary."""
    if reviews is state.reviews:
        return state
    return replace(state, reviews=reviews, summary=summarize_reviews(reviews))


def headline(state: DashboardState) -> dict[str, str]:
    """Formatted figures for the dashboard header."""
    return {
        "total": str(state.summary.total_count),
        "average_rating": format_rating(state.summary.average_rating),
        "recommendation_rate": format_rate(state.summary.recommendation_rate),
    }
