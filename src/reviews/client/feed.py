"""Review feed with polling and optimistic updates.

The feed re-fetches on a fixed interval. A polled fetch can race a review
the user is submitting, so submission follows optimistic-update-then-
revalidate: show the new review at once, then unconditionally re-fetch and
replace the local list with the server's. The server's list always wins;
the two are never merged.
"""

from dataclasses import dataclass, replace

from reviews.client.api import ReviewScope
from reviews.client.errors import ReviewClientError, ReviewFormError
from reviews.client.forms import FormState, SubmitFailed, reduce_form, submit_form, validate_fields

POLL_INTERVAL = 30.0


@dataclass(frozen=True)
class FeedState:
    scope: ReviewScope = ReviewScope.ALL
    reviews: tuple = ()
    loading: bool = True
    error: str | None = None
    last_fetched_at: float | None = None


def apply_optimistic(state: FeedState, record) -> FeedState:
    """Assume the create succeeded: put the new review at the top."""
    return replace(state, reviews=(record, *state.reviews))


def replace_with_server(state: FeedState, records, now: float) -> FeedState:
    return replace(state, reviews=tuple(records), loading=False, error=None, last_fetched_at=now)


def fetch_failed(state: FeedState, message: str, now: float) -> FeedState:
    # Keep showing what we had; the next poll tries again
    return replace(state, loading=False, error=message, last_fetched_at=now)


def revalidate(state: FeedState, client, now: float) -> FeedState:
    try:
        records = client.list_reviews(state.scope)
    except ReviewClientError as exc:
        return fetch_failed(state, exc.message, now)
    return replace_with_server(state, records, now)


def poll_due(state: FeedState, now: float) -> bool:
    return state.last_fetched_at is None or now - state.last_fetched_at >= POLL_INTERVAL


def poll(state: FeedState, client, now: float) -> FeedState:
    if not poll_due(state, now):
        return state
    return revalidate(state, client, now)


def submit_to_feed(feed: FeedState, form: FormState, client, now: float) -> tuple[FeedState, FormState]:
    """Submit ``form`` and reconcile ``feed`` with the server afterwards.

    An invalid form is rejected before any request is made. Otherwise the
    feed is re-fetched whether or not the create succeeded, so a failed
    create leaves the feed showing exactly what the server has.
    """
    try:
        validate_fields(form.fields)
    except ReviewFormError as exc:
        return feed, reduce_form(form, SubmitFailed(exc.message))

    form = submit_form(form, client)
    if form.success:
        feed = apply_optimistic(feed, form.created)
    return revalidate(feed, client, now), form
