from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from vcr_schemas.contracts.errors import FieldError
from vcr_schemas.contracts.validation import require_object, require_str


@dataclass(frozen=True)
class Viewer:
    """A user interacting with the platform, either directly on Twitch or via the
    website (authenticated through Twitch)."""

    twitch_user_id: str
    twitch_display_name: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "twitch_user_id": self.twitch_user_id,
            "twitch_display_name": self.twitch_display_name,
        }

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> "Viewer":
        d = require_object(d, "viewer")
        return Viewer(
            twitch_user_id=require_str(d, "twitch_user_id"),
            twitch_display_name=require_str(d, "twitch_display_name"),
        )


def viewer_to_wire(viewer: Optional[Viewer]) -> Optional[dict[str, Any]]:
    return None if viewer is None else viewer.to_dict()


def viewer_from_wire(d: Mapping[str, Any], k: str = "viewer", *, anonymous_ok: bool = True) -> Optional[Viewer]:
    """Read an optional viewer reference; JSON null means an anonymous actor."""

    raw = d.get(k)
    if raw is None:
        if anonymous_ok:
            return None
        raise FieldError(f"{k} must be object")
    return Viewer.from_dict(raw)


@dataclass(frozen=True)
class State:
    """Current broadcast state, derived from the latest broadcast events.

    All-None is the zero state (no broadcast live).
    """

    broadcast_id: Optional[int] = None
    screening_id: Optional[uuid.UUID] = None
    tape_id: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "broadcast_id": self.broadcast_id,
            "screening_id": str(self.screening_id) if self.screening_id is not None else None,
            "tape_id": self.tape_id,
        }

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> "State":
        d = require_object(d, "state")
        screening_id = d.get("screening_id")
        broadcast_id = d.get("broadcast_id")
        tape_id = d.get("tape_id")
        for k, v in (("broadcast_id", broadcast_id), ("tape_id", tape_id)):
            if v is not None and (not isinstance(v, int) or isinstance(v, bool)):
                raise FieldError(f"{k} must be int or null")
        if screening_id is not None:
            if not isinstance(screening_id, str):
                raise FieldError("screening_id must be UUID string or null")
            try:
                screening_id = uuid.UUID(screening_id)
            except ValueError as e:
                raise FieldError("screening_id must be UUID string or null") from e
        return State(broadcast_id=broadcast_id, screening_id=screening_id, tape_id=tape_id)
