from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Union

from vcr_schemas.contracts.codec import VariantCodec, dumps, load_object, tag_value
from vcr_schemas.contracts.validation import require_int

from .image import PayloadImage
from .toast import PayloadToast


FAMILY = "onscreen-events"


class EventType(str, Enum):
    """Change in stream status, a toast for a viewer interaction, or an image
    alert; each is rendered differently by the onscreen graphics."""

    STATUS = "status"
    TOAST = "toast"
    IMAGE = "image"


@dataclass(frozen=True)
class PayloadStatus:
    current_tape_id: int

    def to_dict(self) -> dict[str, Any]:
        return {"current_tape_id": self.current_tape_id}

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> "PayloadStatus":
        return PayloadStatus(current_tape_id=require_int(d, "current_tape_id"))


Payload = Union[PayloadStatus, PayloadToast, PayloadImage]

PAYLOAD_CODEC = VariantCodec(
    family=FAMILY,
    tag_field="type",
    payload_field="payload",
    tags=EventType,
    variants={
        EventType.STATUS: PayloadStatus,
        EventType.TOAST: PayloadToast,
        EventType.IMAGE: PayloadImage,
    },
    required=True,
)


@dataclass(frozen=True)
class Event:
    type: Union[EventType, str]
    payload: Optional[Payload] = None

    def __post_init__(self) -> None:
        PAYLOAD_CODEC.check(self.type, self.payload)

    def to_dict(self) -> dict[str, Any]:
        return PAYLOAD_CODEC.embed({"type": tag_value(self.type)}, self.type, self.payload)

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> "Event":
        ev_type = PAYLOAD_CODEC.read_tag(d)
        return Event(type=ev_type, payload=PAYLOAD_CODEC.decode_payload(ev_type, d))


def encode_event(ev: Event) -> bytes:
    return dumps(ev.to_dict())


def decode_event(data: bytes | str | Mapping[str, Any]) -> Event:
    return Event.from_dict(load_object(data, family=FAMILY))
