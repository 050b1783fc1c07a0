"""Toast notifications that shout out a viewer after an interaction.

The viewer may be anonymous (cheers, gifted subs), in which case it is None and
encoded as null. Toast types without extra detail omit `data` entirely.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Union

from vcr_schemas.contracts.codec import VariantCodec, envelope_errors, tag_value
from vcr_schemas.contracts.validation import require_int, require_str
from vcr_schemas.core.models import Viewer, viewer_from_wire, viewer_to_wire


class ToastType(str, Enum):
    FOLLOWED = "followed"
    RAIDED = "raided"
    CHEERED = "cheered"
    SUBSCRIBED = "subscribed"
    RESUBSCRIBED = "resubscribed"
    GIFTED_SUBS = "gifted-subs"


@dataclass(frozen=True)
class ToastDataRaided:
    num_viewers: int

    def to_dict(self) -> dict[str, Any]:
        return {"num_viewers": self.num_viewers}

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> "ToastDataRaided":
        return ToastDataRaided(num_viewers=require_int(d, "num_viewers"))


@dataclass(frozen=True)
class ToastDataCheered:
    num_bits: int
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"num_bits": self.num_bits, "message": self.message}

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> "ToastDataCheered":
        return ToastDataCheered(num_bits=require_int(d, "num_bits"), message=require_str(d, "message"))


@dataclass(frozen=True)
class ToastDataResubscribed:
    num_cumulative_months: int
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"num_cumulative_months": self.num_cumulative_months, "message": self.message}

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> "ToastDataResubscribed":
        return ToastDataResubscribed(
            num_cumulative_months=require_int(d, "num_cumulative_months"),
            message=require_str(d, "message"),
        )


@dataclass(frozen=True)
class ToastDataGiftedSubs:
    num_subscriptions: int

    def to_dict(self) -> dict[str, Any]:
        return {"num_subscriptions": self.num_subscriptions}

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> "ToastDataGiftedSubs":
        return ToastDataGiftedSubs(num_subscriptions=require_int(d, "num_subscriptions"))


ToastData = Union[ToastDataRaided, ToastDataCheered, ToastDataResubscribed, ToastDataGiftedSubs]

DATA_CODEC = VariantCodec(
    family="onscreen-events/toast",
    tag_field="type",
    payload_field="data",
    tags=ToastType,
    variants={
        ToastType.RAIDED: ToastDataRaided,
        ToastType.CHEERED: ToastDataCheered,
        ToastType.RESUBSCRIBED: ToastDataResubscribed,
        ToastType.GIFTED_SUBS: ToastDataGiftedSubs,
    },
    omit_empty=True,
)


@dataclass(frozen=True)
class PayloadToast:
    type: Union[ToastType, str]
    viewer: Optional[Viewer] = None
    data: Optional[ToastData] = None

    def __post_init__(self) -> None:
        DATA_CODEC.check(self.type, self.data)

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"type": tag_value(self.type), "viewer": viewer_to_wire(self.viewer)}
        return DATA_CODEC.embed(d, self.type, self.data)

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> "PayloadToast":
        toast_type = DATA_CODEC.read_tag(d)
        with envelope_errors(DATA_CODEC.family):
            viewer = viewer_from_wire(d)
        return PayloadToast(type=toast_type, viewer=viewer, data=DATA_CODEC.decode_payload(toast_type, d))
