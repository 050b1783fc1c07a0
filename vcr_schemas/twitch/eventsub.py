"""EventSub -> twitch-events adapter.

Twitch delivers EventSub notifications to our webhook callback; the webhook
framework itself lives elsewhere. All this module sees is a `RawNotification`
(subscription type + raw `event` object), which it maps to exactly one
`twitch.events.Event`.

Supported subscription types map 1:1 to an event type, except `channel.subscribe`
which becomes viewer-received-gift-sub when `is_gift` is set.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping

from vcr_schemas.contracts.errors import (
    FieldError,
    MalformedPayload,
    UnsupportedNotificationType,
)
from vcr_schemas.contracts.validation import require_bool, require_int, require_object, require_str
from vcr_schemas.core.models import Viewer

from .events import (
    Event,
    EventType,
    PayloadViewerCheered,
    PayloadViewerGiftedSubs,
    PayloadViewerRaided,
    PayloadViewerReceivedGiftSub,
    PayloadViewerResubscribed,
    PayloadViewerSubscribed,
)
from .tiers import credit_multiplier_from_tier


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RawNotification:
    """The part of an EventSub notification the adapter depends on."""

    subscription_type: str
    event: Mapping[str, Any]

    @staticmethod
    def from_callback(body: bytes | str | Mapping[str, Any]) -> "RawNotification":
        """Parse a full callback body: `{"subscription": {"type": ...}, "event": {...}}`."""

        try:
            d = json.loads(body) if isinstance(body, (bytes, str)) else body
            d = require_object(d, "notification")
            subscription = require_object(d.get("subscription"), "subscription")
            return RawNotification(
                subscription_type=require_str(subscription, "type", non_empty=True),
                event=require_object(d.get("event"), "event"),
            )
        except ValueError as e:
            # JSONDecodeError and FieldError are both ValueErrors.
            raise MalformedPayload(f"invalid EventSub notification: {e}") from e


def _viewer(d: Mapping[str, Any], id_key: str = "user_id", name_key: str = "user_name") -> Viewer:
    return Viewer(twitch_user_id=require_str(d, id_key), twitch_display_name=require_str(d, name_key))


def _stream_online(d: Mapping[str, Any]) -> Event:
    return Event(type=EventType.STREAM_STARTED)


def _stream_offline(d: Mapping[str, Any]) -> Event:
    return Event(type=EventType.STREAM_ENDED)


def _hype_train_begin(d: Mapping[str, Any]) -> Event:
    return Event(type=EventType.STREAM_HYPE_STARTED)


def _channel_follow(d: Mapping[str, Any]) -> Event:
    return Event(type=EventType.VIEWER_FOLLOWED, viewer=_viewer(d))


def _channel_raid(d: Mapping[str, Any]) -> Event:
    return Event(
        type=EventType.VIEWER_RAIDED,
        viewer=_viewer(d, "from_broadcaster_user_id", "from_broadcaster_user_name"),
        payload=PayloadViewerRaided(num_raiders=require_int(d, "viewers")),
    )


def _channel_cheer(d: Mapping[str, Any]) -> Event:
    viewer = None if require_bool(d, "is_anonymous") else _viewer(d)
    return Event(
        type=EventType.VIEWER_CHEERED,
        viewer=viewer,
        payload=PayloadViewerCheered(num_bits=require_int(d, "bits"), message=require_str(d, "message")),
    )


def _channel_subscribe(d: Mapping[str, Any]) -> Event:
    credit_multiplier = credit_multiplier_from_tier(require_str(d, "tier"))
    if d.get("is_gift") is True:
        return Event(
            type=EventType.VIEWER_RECEIVED_GIFT_SUB,
            viewer=_viewer(d),
            payload=PayloadViewerReceivedGiftSub(credit_multiplier=credit_multiplier),
        )
    return Event(
        type=EventType.VIEWER_SUBSCRIBED,
        viewer=_viewer(d),
        payload=PayloadViewerSubscribed(credit_multiplier=credit_multiplier),
    )


def _channel_subscription_message(d: Mapping[str, Any]) -> Event:
    credit_multiplier = credit_multiplier_from_tier(require_str(d, "tier"))
    message = require_object(d.get("message"), "message")
    return Event(
        type=EventType.VIEWER_RESUBSCRIBED,
        viewer=_viewer(d),
        payload=PayloadViewerResubscribed(
            credit_multiplier=credit_multiplier,
            num_cumulative_months=require_int(d, "cumulative_months"),
            message=require_str(message, "text"),
        ),
    )


def _channel_subscription_gift(d: Mapping[str, Any]) -> Event:
    credit_multiplier = credit_multiplier_from_tier(require_str(d, "tier"))
    viewer = None if require_bool(d, "is_anonymous") else _viewer(d)
    return Event(
        type=EventType.VIEWER_GIFTED_SUBS,
        viewer=viewer,
        payload=PayloadViewerGiftedSubs(
            credit_multiplier=credit_multiplier,
            num_subscriptions=require_int(d, "total"),
        ),
    )


HANDLERS: dict[str, Callable[[Mapping[str, Any]], Event]] = {
    "stream.online": _stream_online,
    "stream.offline": _stream_offline,
    "channel.hype_train.begin": _hype_train_begin,
    "channel.follow": _channel_follow,
    "channel.raid": _channel_raid,
    "channel.cheer": _channel_cheer,
    "channel.subscribe": _channel_subscribe,
    "channel.subscription.message": _channel_subscription_message,
    "channel.subscription.gift": _channel_subscription_gift,
}


def from_eventsub(notification: RawNotification) -> Event:
    """Map one EventSub notification to a twitch event.

    Raises `UnsupportedNotificationType` for subscription types we have no event
    for, `MalformedPayload` if the event body is missing fields, and lets
    `UnrecognizedTier` through untouched.
    """

    handler = HANDLERS.get(notification.subscription_type)
    if handler is None:
        logger.warning("unsupported EventSub type: %s", notification.subscription_type)
        raise UnsupportedNotificationType(notification.subscription_type)
    try:
        return handler(notification.event)
    except FieldError as e:
        raise MalformedPayload(f"failed to parse {notification.subscription_type} event: {e}") from e
