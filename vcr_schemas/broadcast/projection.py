"""Broadcast state projection.

The current `State` is never stored or mutated: it is the fold of the ordered
broadcast events seen so far. This module is a pure function library, safe to
call from any number of consumers.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from vcr_schemas.core.models import State

from .events import Event, EventType


def project(prev: State, ev: Event) -> State:
    """Return the state that results from applying `ev` on top of `prev`."""

    if ev.type == EventType.BROADCAST_STARTED:
        return State(broadcast_id=ev.broadcast.id)
    if ev.type == EventType.BROADCAST_FINISHED:
        return State()
    if ev.type == EventType.SCREENING_STARTED:
        if ev.screening is None:
            # Without screening data the event cannot say which tape is playing.
            return State(broadcast_id=ev.broadcast.id)
        return State(
            broadcast_id=ev.broadcast.id,
            screening_id=ev.screening.id,
            tape_id=ev.screening.tape_id,
        )
    if ev.type == EventType.SCREENING_FINISHED:
        return State(broadcast_id=ev.broadcast.id)
    return prev


def iter_states(events: Iterable[Event], initial: State = State()) -> Iterator[State]:
    """Yield the state after each event, in order."""

    state = initial
    for ev in events:
        state = project(state, ev)
        yield state


def project_all(events: Iterable[Event], initial: State = State()) -> State:
    state = initial
    for state in iter_states(events, initial):
        pass
    return state
