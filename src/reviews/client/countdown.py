"""Countdown-gated submission modal.

Opening the modal starts a fixed time budget for filling in the review.
If the budget runs out before the form is submitted, the modal closes and
whatever was typed is discarded.
"""

from dataclasses import dataclass, replace

from reviews.client.forms import FieldChanged, FormState, reduce_form, submit_form
from reviews.review.review import ReviewForm

TIME_BUDGET = 120.0


@dataclass(frozen=True)
class ModalState:
    form: FormState = FormState()
    is_open: bool = False
    deadline: float | None = None
    expired: bool = False

    def remaining(self, now: float) -> float:
        if not self.is_open or self.deadline is None:
            return 0.0
        return max(0.0, self.deadline - now)


@dataclass(frozen=True)
class Opened:
    now: float
    form: ReviewForm = ReviewForm.PRODUCT


@dataclass(frozen=True)
class Ticked:
    now: float


@dataclass(frozen=True)
class Edited:
    name: str
    value: object
    now: float


@dataclass(frozen=True)
class Closed:
    pass


def reduce_modal(state: ModalState, event) -> ModalState:
    if isinstance(event, Opened):
        return ModalState(
            form=FormState.blank(event.form),
            is_open=True,
            deadline=event.now + TIME_BUDGET,
        )
    if isinstance(event, Ticked | Edited) and state.is_open and event.now >= state.deadline:
        # Out of time: discard the draft
        return ModalState(form=FormState.blank(state.form.form), expired=True)
    if isinstance(event, Ticked):
        return state
    if isinstance(event, Edited):
        if not state.is_open:
            return state
        return replace(state, form=reduce_form(state.form, FieldChanged(event.name, event.value)))
    if isinstance(event, Closed):
        return ModalState(form=FormState.blank(state.form.form))
    raise ValueError(f"Unknown modal event: {event!r}")


def can_submit(state: ModalState, now: float) -> bool:
    return state.is_open and now < state.deadline


def submit_modal(state: ModalState, client, now: float) -> ModalState:
    """Submit the draft if time remains; expire the modal otherwise."""
    if not can_submit(state, now):
        return reduce_modal(state, Ticked(now))

    form = submit_form(state.form, client)
    if form.success:
        return ModalState(form=form)
    return replace(state, form=form)
