from __future__ import annotations

from typing import Any, Callable, Mapping, NamedTuple

from vcr_schemas.broadcast import events as broadcast_events
from vcr_schemas.genreq import requests as generation_requests
from vcr_schemas.onscreen import events as onscreen_events
from vcr_schemas.twitch import events as twitch_events

# Queue names (one event family per queue).

BROADCAST_EVENTS = broadcast_events.FAMILY
TWITCH_EVENTS = twitch_events.FAMILY
GENERATION_REQUESTS = generation_requests.FAMILY
ONSCREEN_EVENTS = onscreen_events.FAMILY

ALL_STREAMS = (BROADCAST_EVENTS, TWITCH_EVENTS, GENERATION_REQUESTS, ONSCREEN_EVENTS)


class StreamCodec(NamedTuple):
    encode: Callable[[Any], bytes]
    decode: Callable[[bytes | str | Mapping[str, Any]], Any]


_CODECS = {
    BROADCAST_EVENTS: StreamCodec(broadcast_events.encode_event, broadcast_events.decode_event),
    TWITCH_EVENTS: StreamCodec(twitch_events.encode_event, twitch_events.decode_event),
    GENERATION_REQUESTS: StreamCodec(generation_requests.encode_request, generation_requests.decode_request),
    ONSCREEN_EVENTS: StreamCodec(onscreen_events.encode_event, onscreen_events.decode_event),
}


def codec_for_stream(stream: str) -> StreamCodec:
    try:
        return _CODECS[stream]
    except KeyError:
        raise ValueError(f"unknown stream: {stream}") from None
