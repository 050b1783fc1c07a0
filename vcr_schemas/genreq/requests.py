from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Union

from vcr_schemas.contracts.codec import VariantCodec, dumps, envelope_errors, load_object, tag_value
from vcr_schemas.core.models import Viewer, viewer_from_wire

from .image import PayloadImage


FAMILY = "generation-requests"


class RequestType(str, Enum):
    """The kind of asset(s) to generate."""

    IMAGE = "image"


Payload = PayloadImage

PAYLOAD_CODEC = VariantCodec(
    family=FAMILY,
    tag_field="type",
    payload_field="payload",
    tags=RequestType,
    variants={RequestType.IMAGE: PayloadImage},
    required=True,
)


@dataclass(frozen=True)
class Request:
    """A payload produced to the generation-requests queue to kick off the
    processing for a cheer that asks for an asset to be generated.

    The requesting viewer is always known; anonymous cheers can't request assets.
    """

    type: Union[RequestType, str]
    viewer: Viewer
    payload: Optional[Payload] = None

    def __post_init__(self) -> None:
        PAYLOAD_CODEC.check(self.type, self.payload)

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"type": tag_value(self.type), "viewer": self.viewer.to_dict()}
        return PAYLOAD_CODEC.embed(d, self.type, self.payload)

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> "Request":
        req_type = PAYLOAD_CODEC.read_tag(d)
        with envelope_errors(FAMILY):
            viewer = viewer_from_wire(d, anonymous_ok=False)
        return Request(type=req_type, viewer=viewer, payload=PAYLOAD_CODEC.decode_payload(req_type, d))


def encode_request(req: Request) -> bytes:
    return dumps(req.to_dict())


def decode_request(data: bytes | str | Mapping[str, Any]) -> Request:
    return Request.from_dict(load_object(data, family=FAMILY))
