"""Tagged-variant codec.

Every event family on the queues has the same wire shape: one discriminant field
plus at most one variant payload stored under a family-specific key (`payload`,
`inputs`, `details`, `data`). `VariantCodec` holds the discriminant -> variant
registry for one such family and implements both halves of the round trip.

Decoding is two-phase: the envelope is parsed and the discriminant read first,
then the payload is dispatched by discriminant. A discriminant the registry does
not know is *not* an error: the payload is left empty so older consumers keep
working when producers add variants. Re-encoding an empty payload writes `null`.
"""

from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Mapping, Optional, Union

from .errors import FieldError, MalformedPayload, MalformedVariant
from .validation import require_object


logger = logging.getLogger(__name__)

Tag = Union[Enum, str]


def dumps(obj: Any) -> bytes:
    """Canonical wire encoding: compact UTF-8 JSON, keys in declaration order."""

    return json.dumps(obj, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def load_object(data: bytes | str | Mapping[str, Any], *, family: str) -> Mapping[str, Any]:
    if isinstance(data, Mapping):
        return data
    try:
        obj = json.loads(data)
    except (TypeError, ValueError) as e:
        raise MalformedPayload(f"{family}: invalid JSON: {e}") from e
    if not isinstance(obj, dict):
        raise MalformedPayload(f"{family}: event must be object")
    return obj


@contextmanager
def envelope_errors(family: str) -> Iterator[None]:
    """Report field failures in envelope (non-variant) fields as `MalformedPayload`."""

    try:
        yield
    except FieldError as e:
        raise MalformedPayload(f"{family}: {e}") from e


def tag_value(tag: Tag) -> str:
    return tag.value if isinstance(tag, Enum) else str(tag)


@dataclass(frozen=True)
class VariantCodec:
    family: str
    tag_field: str
    payload_field: str
    tags: type[Enum]
    # Registry order doubles as the variant priority order.
    variants: Mapping[Enum, type]
    # When True an empty payload omits the key instead of writing null.
    omit_empty: bool = False
    # When True every known discriminant must carry a payload (never null).
    required: bool = False

    def resolve_tag(self, raw: str) -> Tag:
        try:
            return self.tags(raw)
        except ValueError:
            return raw

    def read_tag(self, obj: Mapping[str, Any]) -> Tag:
        raw = obj.get(self.tag_field)
        if not isinstance(raw, str):
            raise MalformedPayload(f"{self.family}: '{self.tag_field}' must be string")
        return self.resolve_tag(raw)

    def variant_for(self, tag: Tag) -> Optional[type]:
        if not isinstance(tag, self.tags):
            tag = self.resolve_tag(tag_value(tag))
            if not isinstance(tag, self.tags):
                return None
        return self.variants.get(tag)

    def check(self, tag: Tag, payload: Any) -> None:
        if payload is None:
            if self.required and self.variant_for(tag) is not None:
                raise ValueError(f"{self.family}: '{tag_value(tag)}' requires {self.payload_field}")
            return
        expected = self.variant_for(tag)
        if expected is None:
            raise ValueError(
                f"{self.family}: '{tag_value(tag)}' carries no {self.payload_field}, "
                f"got {type(payload).__name__}"
            )
        if not isinstance(payload, expected):
            raise ValueError(
                f"{self.family}: '{tag_value(tag)}' requires {expected.__name__}, "
                f"got {type(payload).__name__}"
            )

    def encode_payload(self, tag: Tag, payload: Any) -> Optional[dict[str, Any]]:
        self.check(tag, payload)
        if payload is None:
            return None
        return payload.to_dict()

    def embed(self, d: dict[str, Any], tag: Tag, payload: Any) -> dict[str, Any]:
        encoded = self.encode_payload(tag, payload)
        if encoded is None and self.omit_empty:
            return d
        d[self.payload_field] = encoded
        return d

    def decode_payload(self, tag: Tag, obj: Mapping[str, Any]) -> Any:
        cls = self.variant_for(tag)
        if cls is None:
            if not isinstance(tag, self.tags):
                logger.debug(
                    "%s: unrecognized %s '%s', leaving %s empty",
                    self.family,
                    self.tag_field,
                    tag_value(tag),
                    self.payload_field,
                )
            return None

        if self.payload_field not in obj:
            if self.omit_empty:
                return None
            raise MalformedVariant(
                f"{self.family}: '{tag_value(tag)}' is missing '{self.payload_field}'"
            )
        raw = obj[self.payload_field]
        if raw is None:
            if self.required:
                raise MalformedVariant(f"{self.family}: '{tag_value(tag)}' has null '{self.payload_field}'")
            return None
        try:
            return cls.from_dict(require_object(raw, self.payload_field))
        except (FieldError, MalformedPayload) as e:
            raise MalformedVariant(f"{self.family} '{tag_value(tag)}': {e}") from e
