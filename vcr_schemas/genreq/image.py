from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Union

from vcr_schemas.contracts.codec import VariantCodec, tag_value
from vcr_schemas.contracts.errors import FieldError
from vcr_schemas.contracts.validation import require_str

from .color import Color, match_color


class ImageStyle(str, Enum):
    """The style of alert to generate an image for."""

    GHOST = "ghost"
    CLIP_ART = "clip-art"
    FRIEND = "friend"


def _require_color(d: Mapping[str, Any], k: str) -> Color:
    s = require_str(d, k)
    try:
        return Color(s)
    except ValueError as e:
        raise FieldError(f"{k} must be one of {[c.value for c in Color]}") from e


@dataclass(frozen=True)
class ImageInputsGhost:
    subject: str

    def to_dict(self) -> dict[str, Any]:
        return {"subject": self.subject}

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> "ImageInputsGhost":
        return ImageInputsGhost(subject=require_str(d, "subject"))


@dataclass(frozen=True)
class ImageInputsClipArt:
    color: Color
    subject: str

    def to_dict(self) -> dict[str, Any]:
        return {"color": self.color.value, "subject": self.subject}

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> "ImageInputsClipArt":
        return ImageInputsClipArt(color=_require_color(d, "color"), subject=require_str(d, "subject"))

    @staticmethod
    def from_description(text: str) -> "ImageInputsClipArt":
        """Split a viewer's description ("yellow caterpillar in a top hat") into
        color and subject. Raises `NoColor` if it doesn't start with a color."""

        color, subject = match_color(text)
        return ImageInputsClipArt(color=color, subject=subject)


@dataclass(frozen=True)
class ImageInputsFriend:
    color: Color
    subject: str

    def to_dict(self) -> dict[str, Any]:
        return {"color": self.color.value, "subject": self.subject}

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> "ImageInputsFriend":
        return ImageInputsFriend(color=_require_color(d, "color"), subject=require_str(d, "subject"))

    @staticmethod
    def from_description(text: str) -> "ImageInputsFriend":
        color, subject = match_color(text)
        return ImageInputsFriend(color=color, subject=subject)


ImageInputs = Union[ImageInputsGhost, ImageInputsClipArt, ImageInputsFriend]

INPUTS_CODEC = VariantCodec(
    family="generation-requests/image",
    tag_field="style",
    payload_field="inputs",
    tags=ImageStyle,
    variants={
        ImageStyle.GHOST: ImageInputsGhost,
        ImageStyle.CLIP_ART: ImageInputsClipArt,
        ImageStyle.FRIEND: ImageInputsFriend,
    },
    required=True,
)


@dataclass(frozen=True)
class PayloadImage:
    """A request to generate one or more images for an alert.

    The inputs are the user-provided details used to build the prompt; their
    shape depends on the style.
    """

    style: Union[ImageStyle, str]
    inputs: Optional[ImageInputs] = None

    def __post_init__(self) -> None:
        INPUTS_CODEC.check(self.style, self.inputs)

    def to_dict(self) -> dict[str, Any]:
        return INPUTS_CODEC.embed({"style": tag_value(self.style)}, self.style, self.inputs)

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> "PayloadImage":
        style = INPUTS_CODEC.read_tag(d)
        return PayloadImage(style=style, inputs=INPUTS_CODEC.decode_payload(style, d))
