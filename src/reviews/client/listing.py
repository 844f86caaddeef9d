"""Review list views: "load more" pagination, star filters, star rendering.

All pagination is client side: the whole collection is fetched and a
growing prefix of it is shown.
"""

from dataclasses import dataclass, replace
from enum import Enum

PAGE_SIZE = 6


@dataclass(frozen=True)
class Pagination:
    visible: int = PAGE_SIZE
    page_size: int = PAGE_SIZE

    def visible_items(self, items):
        return list(items)[: self.visible]

    def has_more(self, total: int) -> bool:
        return self.visible < total


def load_more(state: Pagination, total: int) -> Pagination:
    """Reveal up to one more page, never past the end of the collection."""
    if not state.has_more(total):
        return state
    return replace(state, visible=min(state.visible + state.page_size, total))


class StarFilter(Enum):
    ALL = "all"
    FIVE = "5-star"
    FOUR = "4-star"
    THREE = "3-star"

    @property
    def stars(self) -> int | None:
        if self is StarFilter.ALL:
            return None
        return int(self.value.split("-")[0])

    @property
    def label(self) -> str:
        if self is StarFilter.ALL:
            return "All Reviews"
        return f"{self.value.replace('-', ' ')} Reviews"


@dataclass(frozen=True)
class ListingState:
    selected: StarFilter = StarFilter.ALL
    pagination: Pagination = Pagination()


def select_filter(state: ListingState, selected: StarFilter) -> ListingState:
    # A new filter starts again from the first page
    return ListingState(selected=selected, pagination=Pagination(page_size=state.pagination.page_size))


def filter_by_stars(items, selected: StarFilter):
    if selected.stars is None:
        return list(items)
    return [item for item in items if (getattr(item, "stars", None) or 0) == selected.stars]


def show_more(state: ListingState, items) -> ListingState:
    """Reveal one more page within the current filter."""
    total = len(filter_by_stars(items, state.selected))
    return replace(state, pagination=load_more(state.pagination, total))


def visible_reviews(state: ListingState, items):
    """The reviews on screen: filtered, then cut to the visible prefix."""
    return state.pagination.visible_items(filter_by_stars(items, state.selected))


def render_stars(rating: int | None, out_of: int = 5) -> list[bool]:
    """Filled/empty flag per star; a missing rating shows no filled stars."""
    rating = rating or 0
    return [index < rating for index in range(out_of)]
