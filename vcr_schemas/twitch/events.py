from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Union

from vcr_schemas.contracts.codec import VariantCodec, dumps, envelope_errors, load_object, tag_value
from vcr_schemas.contracts.validation import require_int, require_str
from vcr_schemas.core.models import Viewer, viewer_from_wire, viewer_to_wire


FAMILY = "twitch-events"


class EventType(str, Enum):
    STREAM_STARTED = "stream-started"
    STREAM_ENDED = "stream-ended"
    STREAM_HYPE_STARTED = "stream-hype-started"
    VIEWER_FOLLOWED = "viewer-followed"
    VIEWER_RAIDED = "viewer-raided"
    VIEWER_CHEERED = "viewer-cheered"
    VIEWER_REDEEMED_FUN_POINTS = "viewer-redeemed-fun-points"
    VIEWER_SUBSCRIBED = "viewer-subscribed"
    VIEWER_RESUBSCRIBED = "viewer-resubscribed"
    VIEWER_RECEIVED_GIFT_SUB = "viewer-received-gift-sub"
    VIEWER_GIFTED_SUBS = "viewer-gifted-subs"


@dataclass(frozen=True)
class PayloadViewerRaided:
    num_raiders: int

    def to_dict(self) -> dict[str, Any]:
        return {"num_raiders": self.num_raiders}

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> "PayloadViewerRaided":
        return PayloadViewerRaided(num_raiders=require_int(d, "num_raiders"))


@dataclass(frozen=True)
class PayloadViewerCheered:
    num_bits: int
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"num_bits": self.num_bits, "message": self.message}

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> "PayloadViewerCheered":
        return PayloadViewerCheered(num_bits=require_int(d, "num_bits"), message=require_str(d, "message"))


@dataclass(frozen=True)
class PayloadViewerRedeemedFunPoints:
    num_points: int
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"num_points": self.num_points, "message": self.message}

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> "PayloadViewerRedeemedFunPoints":
        return PayloadViewerRedeemedFunPoints(
            num_points=require_int(d, "num_points"),
            message=require_str(d, "message"),
        )


@dataclass(frozen=True)
class PayloadViewerSubscribed:
    credit_multiplier: int

    def to_dict(self) -> dict[str, Any]:
        return {"credit_multiplier": self.credit_multiplier}

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> "PayloadViewerSubscribed":
        return PayloadViewerSubscribed(credit_multiplier=require_int(d, "credit_multiplier"))


@dataclass(frozen=True)
class PayloadViewerResubscribed:
    credit_multiplier: int
    num_cumulative_months: int
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "credit_multiplier": self.credit_multiplier,
            "num_cumulative_months": self.num_cumulative_months,
            "message": self.message,
        }

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> "PayloadViewerResubscribed":
        return PayloadViewerResubscribed(
            credit_multiplier=require_int(d, "credit_multiplier"),
            num_cumulative_months=require_int(d, "num_cumulative_months"),
            message=require_str(d, "message"),
        )


@dataclass(frozen=True)
class PayloadViewerReceivedGiftSub:
    credit_multiplier: int

    def to_dict(self) -> dict[str, Any]:
        return {"credit_multiplier": self.credit_multiplier}

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> "PayloadViewerReceivedGiftSub":
        return PayloadViewerReceivedGiftSub(credit_multiplier=require_int(d, "credit_multiplier"))


@dataclass(frozen=True)
class PayloadViewerGiftedSubs:
    credit_multiplier: int
    num_subscriptions: int

    def to_dict(self) -> dict[str, Any]:
        return {"credit_multiplier": self.credit_multiplier, "num_subscriptions": self.num_subscriptions}

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> "PayloadViewerGiftedSubs":
        return PayloadViewerGiftedSubs(
            credit_multiplier=require_int(d, "credit_multiplier"),
            num_subscriptions=require_int(d, "num_subscriptions"),
        )


Payload = Union[
    PayloadViewerRaided,
    PayloadViewerCheered,
    PayloadViewerRedeemedFunPoints,
    PayloadViewerSubscribed,
    PayloadViewerResubscribed,
    PayloadViewerReceivedGiftSub,
    PayloadViewerGiftedSubs,
]

# stream-started, stream-ended, stream-hype-started and viewer-followed carry no payload.
PAYLOAD_CODEC = VariantCodec(
    family=FAMILY,
    tag_field="type",
    payload_field="payload",
    tags=EventType,
    variants={
        EventType.VIEWER_RAIDED: PayloadViewerRaided,
        EventType.VIEWER_CHEERED: PayloadViewerCheered,
        EventType.VIEWER_REDEEMED_FUN_POINTS: PayloadViewerRedeemedFunPoints,
        EventType.VIEWER_SUBSCRIBED: PayloadViewerSubscribed,
        EventType.VIEWER_RESUBSCRIBED: PayloadViewerResubscribed,
        EventType.VIEWER_RECEIVED_GIFT_SUB: PayloadViewerReceivedGiftSub,
        EventType.VIEWER_GIFTED_SUBS: PayloadViewerGiftedSubs,
    },
)

# Viewer events that always name the viewer; only cheers and gifted subs may be anonymous.
NAMED_VIEWER_TYPES = frozenset(
    {
        EventType.VIEWER_FOLLOWED,
        EventType.VIEWER_RAIDED,
        EventType.VIEWER_REDEEMED_FUN_POINTS,
        EventType.VIEWER_SUBSCRIBED,
        EventType.VIEWER_RESUBSCRIBED,
        EventType.VIEWER_RECEIVED_GIFT_SUB,
    }
)


@dataclass(frozen=True)
class Event:
    """Something that happened on Twitch: a viewer interaction or a change in the
    state of the stream.

    `viewer` is None for stream-level events and for anonymous cheers/gifts;
    every other viewer event must name its viewer.
    """

    type: Union[EventType, str]
    viewer: Optional[Viewer] = None
    payload: Optional[Payload] = None

    def __post_init__(self) -> None:
        if self.viewer is None and self.type in NAMED_VIEWER_TYPES:
            raise ValueError(f"{FAMILY}: '{tag_value(self.type)}' requires a viewer")
        PAYLOAD_CODEC.check(self.type, self.payload)

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"type": tag_value(self.type), "viewer": viewer_to_wire(self.viewer)}
        return PAYLOAD_CODEC.embed(d, self.type, self.payload)

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> "Event":
        ev_type = PAYLOAD_CODEC.read_tag(d)
        with envelope_errors(FAMILY):
            viewer = viewer_from_wire(d, anonymous_ok=ev_type not in NAMED_VIEWER_TYPES)
        return Event(type=ev_type, viewer=viewer, payload=PAYLOAD_CODEC.decode_payload(ev_type, d))


def encode_event(ev: Event) -> bytes:
    return dumps(ev.to_dict())


def decode_event(data: bytes | str | Mapping[str, Any]) -> Event:
    return Event.from_dict(load_object(data, family=FAMILY))
