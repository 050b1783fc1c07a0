from __future__ import annotations

import uuid
from datetime import datetime, timezone

import pytest

from vcr_schemas.broadcast.events import (
    BroadcastData,
    Event,
    EventType,
    ScreeningData,
    decode_event,
    encode_event,
)
from vcr_schemas.broadcast.projection import iter_states, project, project_all
from vcr_schemas.contracts.errors import MalformedPayload
from vcr_schemas.core.models import State


SCREENING_ID = uuid.UUID("f29a4ffe-cb9f-43ba-9f91-a3b1fa350472")
BROADCAST = BroadcastData(id=55, started_at=datetime(1997, 9, 1, 12, 0, tzinfo=timezone.utc))
SCREENING = ScreeningData(
    id=SCREENING_ID,
    started_at=datetime(1997, 9, 1, 12, 15, tzinfo=timezone.utc),
    tape_id=109,
)

BROADCAST_JSON = '"broadcast":{"id":55,"started_at":"1997-09-01T12:00:00Z"}'
SCREENING_JSON = '"screening":{"id":"f29a4ffe-cb9f-43ba-9f91-a3b1fa350472","started_at":"1997-09-01T12:15:00Z","tape_id":109}'

CASES = [
    (
        Event(type=EventType.BROADCAST_STARTED, broadcast=BROADCAST),
        '{"type":"broadcast-started",' + BROADCAST_JSON + "}",
    ),
    (
        Event(type=EventType.BROADCAST_FINISHED, broadcast=BROADCAST),
        '{"type":"broadcast-finished",' + BROADCAST_JSON + "}",
    ),
    (
        Event(type=EventType.SCREENING_STARTED, broadcast=BROADCAST, screening=SCREENING),
        '{"type":"screening-started",' + BROADCAST_JSON + "," + SCREENING_JSON + "}",
    ),
    (
        Event(type=EventType.SCREENING_FINISHED, broadcast=BROADCAST, screening=SCREENING),
        '{"type":"screening-finished",' + BROADCAST_JSON + "," + SCREENING_JSON + "}",
    ),
]


@pytest.mark.parametrize("ev,wire", CASES, ids=[c[0].type.value for c in CASES])
def test_event_encodes_to_exact_json(ev: Event, wire: str) -> None:
    assert encode_event(ev) == wire.encode("utf-8")


@pytest.mark.parametrize("ev,wire", CASES, ids=[c[0].type.value for c in CASES])
def test_event_decodes_from_json(ev: Event, wire: str) -> None:
    assert decode_event(wire) == ev


def test_screening_key_is_omitted_not_null() -> None:
    assert b"screening" not in encode_event(Event(type=EventType.BROADCAST_STARTED, broadcast=BROADCAST))


def test_decode_accepts_offsets_and_fractional_seconds() -> None:
    ev = decode_event(
        '{"type":"broadcast-started","broadcast":{"id":55,"started_at":"1997-09-01T14:00:00.123456789+02:00"}}'
    )
    assert ev.broadcast.started_at == datetime(1997, 9, 1, 12, 0, 0, 123456, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "raw",
    [
        '{"broadcast":{"id":55,"started_at":"1997-09-01T12:00:00Z"}}',
        '{"type":"broadcast-started","broadcast":{"id":"55","started_at":"1997-09-01T12:00:00Z"}}',
        '{"type":"broadcast-started","broadcast":{"id":55,"started_at":"1997-09-01 12:00"}}',
        '{"type":"screening-started",' + BROADCAST_JSON + ',"screening":{"id":"f29a","started_at":"1997-09-01T12:15:00Z","tape_id":109}}',
    ],
)
def test_malformed_events_raise(raw: str) -> None:
    with pytest.raises(MalformedPayload):
        decode_event(raw)


def test_projection_sequence() -> None:
    events = [
        Event(type=EventType.BROADCAST_STARTED, broadcast=BROADCAST),
        Event(type=EventType.SCREENING_STARTED, broadcast=BROADCAST, screening=SCREENING),
        Event(type=EventType.SCREENING_FINISHED, broadcast=BROADCAST, screening=SCREENING),
        Event(type=EventType.BROADCAST_FINISHED, broadcast=BROADCAST),
    ]
    assert list(iter_states(events)) == [
        State(broadcast_id=55),
        State(broadcast_id=55, screening_id=SCREENING_ID, tape_id=109),
        State(broadcast_id=55),
        State(),
    ]
    assert project_all(events) == State()
    assert project_all(events[:2]) == State(broadcast_id=55, screening_id=SCREENING_ID, tape_id=109)


def test_screening_started_replaces_previous_state() -> None:
    prev = State(broadcast_id=12, screening_id=uuid.uuid4(), tape_id=1)
    ev = Event(type=EventType.SCREENING_STARTED, broadcast=BROADCAST, screening=SCREENING)
    assert project(prev, ev) == State(broadcast_id=55, screening_id=SCREENING_ID, tape_id=109)


def test_unrecognized_event_leaves_state_unchanged() -> None:
    prev = State(broadcast_id=55, screening_id=SCREENING_ID, tape_id=109)
    ev = decode_event('{"type":"intermission-started",' + BROADCAST_JSON + "}")
    assert ev.type == "intermission-started"
    assert project(prev, ev) is prev


def test_project_all_of_nothing_is_initial_state() -> None:
    assert project_all([]) == State()
    assert project_all([], State(broadcast_id=3)) == State(broadcast_id=3)


def test_state_dict_round_trip() -> None:
    s = State(broadcast_id=13, screening_id=uuid.UUID("96d1ca5c-7658-48c9-8193-9d1739854467"), tape_id=124)
    assert s.to_dict() == {
        "broadcast_id": 13,
        "screening_id": "96d1ca5c-7658-48c9-8193-9d1739854467",
        "tape_id": 124,
    }
    assert State.from_dict(s.to_dict()) == s
    assert State().to_dict() == {"broadcast_id": None, "screening_id": None, "tape_id": None}
    assert State.from_dict(State().to_dict()) == State()
