"""Field-level checks shared by every family's `from_dict`.

Each helper raises `FieldError`; callers never see it directly because the codec
rewraps it as `MalformedPayload` (envelope fields) or `MalformedVariant` (payload
fields). Unknown keys are ignored: newer producers may add fields and older
consumers must keep decoding.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any, Mapping

from vcr_schemas.core.timeutil import parse_rfc3339

from .errors import FieldError


def require_object(value: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise FieldError(f"{what} must be object")
    return value


def require_str(d: Mapping[str, Any], k: str, *, non_empty: bool = False) -> str:
    v = d.get(k)
    if not isinstance(v, str):
        raise FieldError(f"{k} must be string")
    if non_empty and not v.strip():
        raise FieldError(f"{k} must be non-empty string")
    return v


def require_int(d: Mapping[str, Any], k: str) -> int:
    v = d.get(k)
    # bool is an int subclass; a JSON `true` is never a count.
    if not isinstance(v, int) or isinstance(v, bool):
        raise FieldError(f"{k} must be int")
    return v


def require_timestamp(d: Mapping[str, Any], k: str) -> datetime:
    s = require_str(d, k, non_empty=True)
    try:
        return parse_rfc3339(s)
    except ValueError as e:
        raise FieldError(f"{k}: {e}") from e


def require_uuid(d: Mapping[str, Any], k: str) -> uuid.UUID:
    s = require_str(d, k, non_empty=True)
    try:
        return uuid.UUID(s)
    except ValueError as e:
        raise FieldError(f"{k} must be a UUID string") from e


def require_bool(d: Mapping[str, Any], k: str) -> bool:
    v = d.get(k)
    if not isinstance(v, bool):
        raise FieldError(f"{k} must be bool")
    return v
