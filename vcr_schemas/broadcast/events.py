from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Mapping, Optional, Union

from vcr_schemas.contracts.codec import dumps, envelope_errors, load_object, tag_value
from vcr_schemas.contracts.errors import MalformedPayload
from vcr_schemas.contracts.validation import (
    require_int,
    require_object,
    require_timestamp,
    require_uuid,
)
from vcr_schemas.core.timeutil import format_rfc3339


FAMILY = "broadcast-events"


class EventType(str, Enum):
    """Which broadcast state change has taken place."""

    BROADCAST_STARTED = "broadcast-started"
    BROADCAST_FINISHED = "broadcast-finished"
    SCREENING_STARTED = "screening-started"
    SCREENING_FINISHED = "screening-finished"


@dataclass(frozen=True)
class BroadcastData:
    """The broadcast in which the event is occurring."""

    id: int
    started_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "started_at": format_rfc3339(self.started_at)}

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> "BroadcastData":
        d = require_object(d, "broadcast")
        return BroadcastData(id=require_int(d, "id"), started_at=require_timestamp(d, "started_at"))


@dataclass(frozen=True)
class ScreeningData:
    """The screening in which the event is occurring (screening events only)."""

    id: uuid.UUID
    started_at: datetime
    tape_id: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "started_at": format_rfc3339(self.started_at),
            "tape_id": self.tape_id,
        }

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> "ScreeningData":
        d = require_object(d, "screening")
        return ScreeningData(
            id=require_uuid(d, "id"),
            started_at=require_timestamp(d, "started_at"),
            tape_id=require_int(d, "tape_id"),
        )


@dataclass(frozen=True)
class Event:
    """A change in the overall broadcast state.

    The screening is an envelope field rather than a variant: it is orthogonal to
    the discriminant and simply absent outside of screenings.
    """

    type: Union[EventType, str]
    broadcast: BroadcastData
    screening: Optional[ScreeningData] = None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"type": tag_value(self.type), "broadcast": self.broadcast.to_dict()}
        if self.screening is not None:
            d["screening"] = self.screening.to_dict()
        return d

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> "Event":
        raw_type = d.get("type")
        if not isinstance(raw_type, str):
            raise MalformedPayload(f"{FAMILY}: 'type' must be string")
        try:
            ev_type: Union[EventType, str] = EventType(raw_type)
        except ValueError:
            ev_type = raw_type
        with envelope_errors(FAMILY):
            broadcast = BroadcastData.from_dict(d.get("broadcast"))
            raw_screening = d.get("screening")
            screening = ScreeningData.from_dict(raw_screening) if raw_screening is not None else None
        return Event(type=ev_type, broadcast=broadcast, screening=screening)


def encode_event(ev: Event) -> bytes:
    return dumps(ev.to_dict())


def decode_event(data: bytes | str | Mapping[str, Any]) -> Event:
    return Event.from_dict(load_object(data, family=FAMILY))
