"""Shared BDD fixtures and step definitions for the Reviews domain."""

import pytest
from protean.exceptions import ValidationError
from pytest_bdd import parsers, then
from reviews.review.events import ReviewSubmitted

_REVIEW_EVENT_CLASSES = {
    "ReviewSubmitted": ReviewSubmitted,
}


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the review form is "{form}"'))
def review_form_is(review, form):
    assert review.form == form


@then(parsers.cfparse("the review has {stars:d} stars"))
def review_has_stars(review, stars):
    assert review.stars.score == stars


@then("the submission fails with a validation error")
def submission_fails(error):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)


@then(parsers.cfparse('the error concerns "{field}"'))
def error_concerns(error, field):
    assert field in error["exc"].messages


@then(parsers.cfparse("a {event_type} event is raised"))
def review_event_raised(review, event_type):
    event_cls = _REVIEW_EVENT_CLASSES[event_type]
    assert any(
        isinstance(e, event_cls) for e in review._events
    ), f"No {event_type} event found. Events: {[type(e).__name__ for e in review._events]}"
