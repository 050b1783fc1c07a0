"""Image alerts: display of a previously generated (or static) image."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Union

from vcr_schemas.contracts.codec import VariantCodec, envelope_errors, tag_value
from vcr_schemas.contracts.validation import require_str
from vcr_schemas.core.models import Viewer, viewer_from_wire


class ImageType(str, Enum):
    STATIC = "static"
    GHOST = "ghost"
    FRIEND = "friend"


@dataclass(frozen=True)
class ImageDetailsStatic:
    image_id: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"image_id": self.image_id, "message": self.message}

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> "ImageDetailsStatic":
        return ImageDetailsStatic(image_id=require_str(d, "image_id"), message=require_str(d, "message"))


@dataclass(frozen=True)
class ImageDetailsGhost:
    image_url: str
    description: str

    def to_dict(self) -> dict[str, Any]:
        return {"image_url": self.image_url, "description": self.description}

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> "ImageDetailsGhost":
        return ImageDetailsGhost(image_url=require_str(d, "image_url"), description=require_str(d, "description"))


@dataclass(frozen=True)
class ImageDetailsFriend:
    image_url: str
    description: str
    name: str
    background_color: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "image_url": self.image_url,
            "description": self.description,
            "name": self.name,
            "background_color": self.background_color,
        }

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> "ImageDetailsFriend":
        return ImageDetailsFriend(
            image_url=require_str(d, "image_url"),
            description=require_str(d, "description"),
            name=require_str(d, "name"),
            background_color=require_str(d, "background_color"),
        )


ImageDetails = Union[ImageDetailsStatic, ImageDetailsGhost, ImageDetailsFriend]

DETAILS_CODEC = VariantCodec(
    family="onscreen-events/image",
    tag_field="type",
    payload_field="details",
    tags=ImageType,
    variants={
        ImageType.STATIC: ImageDetailsStatic,
        ImageType.GHOST: ImageDetailsGhost,
        ImageType.FRIEND: ImageDetailsFriend,
    },
    required=True,
)


@dataclass(frozen=True)
class PayloadImage:
    type: Union[ImageType, str]
    viewer: Viewer
    details: Optional[ImageDetails] = None

    def __post_init__(self) -> None:
        DETAILS_CODEC.check(self.type, self.details)

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"type": tag_value(self.type), "viewer": self.viewer.to_dict()}
        return DETAILS_CODEC.embed(d, self.type, self.details)

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> "PayloadImage":
        image_type = DETAILS_CODEC.read_tag(d)
        with envelope_errors(DETAILS_CODEC.family):
            viewer = viewer_from_wire(d, anonymous_ok=False)
        return PayloadImage(type=image_type, viewer=viewer, details=DETAILS_CODEC.decode_payload(image_type, d))
