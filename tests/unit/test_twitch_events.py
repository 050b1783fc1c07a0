from __future__ import annotations

import pytest

from vcr_schemas.core.models import Viewer
from vcr_schemas.twitch.events import (
    Event,
    EventType,
    PayloadViewerCheered,
    PayloadViewerGiftedSubs,
    PayloadViewerRaided,
    PayloadViewerReceivedGiftSub,
    PayloadViewerRedeemedFunPoints,
    PayloadViewerResubscribed,
    PayloadViewerSubscribed,
    decode_event,
    encode_event,
)


VIEWER = Viewer(twitch_user_id="90790024", twitch_display_name="wasabimilkshake")
VIEWER_JSON = '{"twitch_user_id":"90790024","twitch_display_name":"wasabimilkshake"}'

CASES = [
    ("stream started", Event(type=EventType.STREAM_STARTED), '{"type":"stream-started","viewer":null,"payload":null}'),
    ("stream ended", Event(type=EventType.STREAM_ENDED), '{"type":"stream-ended","viewer":null,"payload":null}'),
    (
        "stream hype started",
        Event(type=EventType.STREAM_HYPE_STARTED),
        '{"type":"stream-hype-started","viewer":null,"payload":null}',
    ),
    (
        "viewer followed",
        Event(type=EventType.VIEWER_FOLLOWED, viewer=VIEWER),
        '{"type":"viewer-followed","viewer":' + VIEWER_JSON + ',"payload":null}',
    ),
    (
        "viewer raided",
        Event(type=EventType.VIEWER_RAIDED, viewer=VIEWER, payload=PayloadViewerRaided(num_raiders=42)),
        '{"type":"viewer-raided","viewer":' + VIEWER_JSON + ',"payload":{"num_raiders":42}}',
    ),
    (
        "viewer cheered",
        Event(
            type=EventType.VIEWER_CHEERED,
            viewer=VIEWER,
            payload=PayloadViewerCheered(num_bits=200, message="ghost of a seal"),
        ),
        '{"type":"viewer-cheered","viewer":' + VIEWER_JSON + ',"payload":{"num_bits":200,"message":"ghost of a seal"}}',
    ),
    (
        "viewer cheered (anonymous)",
        Event(type=EventType.VIEWER_CHEERED, payload=PayloadViewerCheered(num_bits=200, message="ghost of a seal")),
        '{"type":"viewer-cheered","viewer":null,"payload":{"num_bits":200,"message":"ghost of a seal"}}',
    ),
    (
        "viewer redeemed fun points",
        Event(
            type=EventType.VIEWER_REDEEMED_FUN_POINTS,
            viewer=VIEWER,
            payload=PayloadViewerRedeemedFunPoints(num_points=200, message="ghost of a seal"),
        ),
        '{"type":"viewer-redeemed-fun-points","viewer":' + VIEWER_JSON
        + ',"payload":{"num_points":200,"message":"ghost of a seal"}}',
    ),
    (
        "viewer subscribed",
        Event(type=EventType.VIEWER_SUBSCRIBED, viewer=VIEWER, payload=PayloadViewerSubscribed(credit_multiplier=1)),
        '{"type":"viewer-subscribed","viewer":' + VIEWER_JSON + ',"payload":{"credit_multiplier":1}}',
    ),
    (
        "viewer resubscribed",
        Event(
            type=EventType.VIEWER_RESUBSCRIBED,
            viewer=VIEWER,
            payload=PayloadViewerResubscribed(credit_multiplier=1, num_cumulative_months=3, message="good job"),
        ),
        '{"type":"viewer-resubscribed","viewer":' + VIEWER_JSON
        + ',"payload":{"credit_multiplier":1,"num_cumulative_months":3,"message":"good job"}}',
    ),
    (
        "viewer received gift sub",
        Event(
            type=EventType.VIEWER_RECEIVED_GIFT_SUB,
            viewer=VIEWER,
            payload=PayloadViewerReceivedGiftSub(credit_multiplier=1),
        ),
        '{"type":"viewer-received-gift-sub","viewer":' + VIEWER_JSON + ',"payload":{"credit_multiplier":1}}',
    ),
    (
        "viewer gifted subs",
        Event(
            type=EventType.VIEWER_GIFTED_SUBS,
            viewer=VIEWER,
            payload=PayloadViewerGiftedSubs(credit_multiplier=1, num_subscriptions=5),
        ),
        '{"type":"viewer-gifted-subs","viewer":' + VIEWER_JSON
        + ',"payload":{"credit_multiplier":1,"num_subscriptions":5}}',
    ),
    (
        "viewer gifted subs (anonymous)",
        Event(
            type=EventType.VIEWER_GIFTED_SUBS,
            payload=PayloadViewerGiftedSubs(credit_multiplier=1, num_subscriptions=5),
        ),
        '{"type":"viewer-gifted-subs","viewer":null,"payload":{"credit_multiplier":1,"num_subscriptions":5}}',
    ),
]


@pytest.mark.parametrize("name,ev,wire", CASES, ids=[c[0] for c in CASES])
def test_event_encodes_to_exact_json(name: str, ev: Event, wire: str) -> None:
    assert encode_event(ev) == wire.encode("utf-8")


@pytest.mark.parametrize("name,ev,wire", CASES, ids=[c[0] for c in CASES])
def test_event_decodes_from_json(name: str, ev: Event, wire: str) -> None:
    assert decode_event(wire) == ev


def test_every_event_type_has_a_case() -> None:
    assert {ev.type for _, ev, _ in CASES} == set(EventType)


def test_anonymous_viewer_decodes_to_none() -> None:
    ev = decode_event('{"type":"viewer-cheered","viewer":null,"payload":{"num_bits":1,"message":""}}')
    assert ev.viewer is None
    assert ev.payload == PayloadViewerCheered(num_bits=1, message="")
