"""Tests for load-more pagination, star filters and star rendering."""

import pytest
from reviews.client.listing import (
    PAGE_SIZE,
    ListingState,
    Pagination,
    StarFilter,
    filter_by_stars,
    load_more,
    render_stars,
    select_filter,
    show_more,
    visible_reviews,
)


class TestPagination:
    def test_page_size_is_six(self):
        assert PAGE_SIZE == 6
        assert Pagination().visible == 6

    @pytest.mark.parametrize(
        "visible, total, expected",
        [(6, 20, 12), (6, 9, 9), (12, 13, 13), (6, 7, 7)],
    )
    def test_load_more_reveals_at_most_one_page(self, visible, total, expected):
        state = load_more(Pagination(visible=visible), total)
        assert state.visible == expected
        assert state.visible - visible == min(PAGE_SIZE, total - visible)

    def test_load_more_at_end_is_noop(self):
        state = Pagination(visible=6)
        assert load_more(state, 4) is state
        assert not state.has_more(6)

    def test_visible_items_is_a_prefix(self):
        items = list(range(10))
        assert Pagination().visible_items(items) == [0, 1, 2, 3, 4, 5]

    def test_short_collection_shows_everything(self):
        assert Pagination().visible_items([1, 2]) == [1, 2]


class TestStarFilter:
    def test_filter_values(self):
        assert StarFilter.ALL.stars is None
        assert StarFilter.FIVE.stars == 5
        assert StarFilter.THREE.stars == 3

    def test_labels(self):
        assert StarFilter.ALL.label == "All Reviews"
        assert StarFilter.FOUR.label == "4 star Reviews"

    def test_filter_matches_exact_stars(self, make_record):
        items = [make_record("a", stars=5), make_record("b", stars=4), make_record("c", stars=5)]
        assert [r.id for r in filter_by_stars(items, StarFilter.FIVE)] == ["a", "c"]

    def test_all_keeps_everything(self, make_record):
        items = [make_record("a", stars=5), make_record("b")]
        assert filter_by_stars(items, StarFilter.ALL) == items

    def test_unrated_never_matches_star_filter(self, make_record):
        assert filter_by_stars([make_record("a")], StarFilter.THREE) == []


class TestListingState:
    def test_select_filter_resets_pagination(self):
        state = ListingState(pagination=Pagination(visible=18))
        state = select_filter(state, StarFilter.FOUR)
        assert state.selected is StarFilter.FOUR
        assert state.pagination.visible == PAGE_SIZE

    def test_show_more_counts_filtered_items(self, make_record):
        items = [make_record(str(i), stars=5 if i < 8 else 3) for i in range(20)]
        state = ListingState(selected=StarFilter.FIVE)
        state = show_more(state, items)
        assert state.pagination.visible == 8
        assert len(visible_reviews(state, items)) == 8

    def test_visible_reviews_filters_then_cuts(self, make_record):
        items = [make_record(str(i), stars=4) for i in range(10)]
        assert [r.id for r in visible_reviews(ListingState(), items)] == ["0", "1", "2", "3", "4", "5"]


class TestRenderStars:
    def test_partial(self):
        assert render_stars(3) == [True, True, True, False, False]

    def test_missing_rating(self):
        assert render_stars(None) == [False] * 5
