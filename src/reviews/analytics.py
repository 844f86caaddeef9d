"""Summary statistics over a collection of reviews.

Used by the mobile-shop dashboard, both server side (the summary endpoint)
and client side (recomputed whenever the fetched collection changes).

Reviews are read by attribute, so projection rows and client-side
``ReviewRecord`` models can both be summarized.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class QualityDistribution:
    product: dict[Any, int] = field(default_factory=dict)
    service: dict[Any, int] = field(default_factory=dict)


@dataclass(frozen=True)
class ReviewSummary:
    """Summary of a review collection.

    ``average_rating`` and ``recommendation_rate`` are ``None`` for an empty
    collection: nothing is computed. Neither value is rounded.
    Distribution keys appear in first-seen order.
    """

    total_count: int = 0
    average_rating: float | None = None
    recommendation_rate: float | None = None
    product_type_distribution: dict[Any, int] = field(default_factory=dict)
    quality_distribution: QualityDistribution = field(default_factory=QualityDistribution)

    @property
    def is_computed(self) -> bool:
        return self.total_count > 0


def _tally(counts: dict, key) -> None:
    counts[key] = counts.get(key, 0) + 1


def summarize_reviews(items: Iterable) -> ReviewSummary:
    """Compute a ``ReviewSummary`` in a single pass over ``items``.

    A review without a star rating counts as 0 stars (it still counts
    towards the total). Reviews missing a category value are tallied
    under ``None``, so every distribution sums to ``total_count``.
    """
    items = list(items)
    if not items:
        return ReviewSummary()

    star_total = 0
    recommended = 0
    product_types: dict[Any, int] = {}
    product_quality: dict[Any, int] = {}
    service_quality: dict[Any, int] = {}

    for item in items:
        star_total += getattr(item, "stars", None) or 0
        if getattr(item, "would_recommend", None) is True:
            recommended += 1
        _tally(product_types, getattr(item, "product_type", None))
        _tally(product_quality, getattr(item, "product_quality", None))
        _tally(service_quality, getattr(item, "service_quality", None))

    count = len(items)
    return ReviewSummary(
        total_count=count,
        average_rating=star_total / count,
        recommendation_rate=recommended / count * 100,
        product_type_distribution=product_types,
        quality_distribution=QualityDistribution(product=product_quality, service=service_quality),
    )


def format_rating(average: float | None) -> str:
    """Average rating for display, one decimal place."""
    if average is None:
        return "–"
    return f"{average:.1f}"


def format_rate(rate: float | None) -> str:
    """Recommendation rate for display, as a whole percentage."""
    if rate is None:
        return "–"
    return f"{rate:.0f}%"
