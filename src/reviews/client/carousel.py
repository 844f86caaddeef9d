"""Auto-advancing review carousel.

Five slides advance on a fixed interval. Any manual navigation pauses the
auto-advance; it resumes once the user has left the carousel alone for
``RESUME_AFTER`` seconds. Times are monotonic seconds supplied by the caller.
"""

from dataclasses import dataclass, replace

SLIDE_COUNT = 5
INTERVAL = 5.0
RESUME_AFTER = 10.0


@dataclass(frozen=True)
class CarouselState:
    index: int = 0
    slide_count: int = SLIDE_COUNT
    last_advanced_at: float = 0.0
    paused_until: float | None = None

    @property
    def is_paused(self) -> bool:
        return self.paused_until is not None


@dataclass(frozen=True)
class Tick:
    now: float


@dataclass(frozen=True)
class Next:
    now: float


@dataclass(frozen=True)
class Previous:
    now: float


@dataclass(frozen=True)
class GoTo:
    index: int
    now: float


def _manual(state: CarouselState, index: int, now: float) -> CarouselState:
    return replace(
        state,
        index=index % state.slide_count,
        last_advanced_at=now,
        paused_until=now + RESUME_AFTER,
    )


def reduce_carousel(state: CarouselState, event) -> CarouselState:
    if isinstance(event, Next):
        return _manual(state, state.index + 1, event.now)
    if isinstance(event, Previous):
        return _manual(state, state.index - 1, event.now)
    if isinstance(event, GoTo):
        return _manual(state, event.index, event.now)
    if isinstance(event, Tick):
        if state.is_paused:
            if event.now < state.paused_until:
                return state
            # Resume: the interval restarts from the end of the pause
            return replace(state, paused_until=None, last_advanced_at=event.now)
        if event.now - state.last_advanced_at >= INTERVAL:
            return replace(
                state,
                index=(state.index + 1) % state.slide_count,
                last_advanced_at=event.now,
            )
        return state
    raise ValueError(f"Unknown carousel event: {event!r}")
