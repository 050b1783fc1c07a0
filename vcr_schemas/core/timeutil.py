"""RFC3339 timestamps as they appear on the wire.

Producers on the other side of the queues write Go-style RFC3339 with optional
nanosecond fractions and a literal `Z` for UTC. Python's `isoformat()` writes
`+00:00` instead, so both directions go through here.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

_RFC3339_RE = re.compile(
    r"^([0-9]{4}-[0-9]{2}-[0-9]{2})[Tt]([0-9]{2}:[0-9]{2}:[0-9]{2})(?:\.([0-9]+))?([Zz]|[+-][0-9]{2}:[0-5][0-9])$"
)


def ensure_tz(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def format_rfc3339(dt: datetime) -> str:
    dt = ensure_tz(dt)
    out = dt.strftime("%Y-%m-%dT%H:%M:%S")
    if dt.microsecond:
        out += "." + f"{dt.microsecond:06d}".rstrip("0")
    offset = dt.utcoffset() or timedelta(0)
    if offset == timedelta(0):
        return out + "Z"
    total_minutes = int(offset.total_seconds()) // 60
    sign = "+" if total_minutes >= 0 else "-"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{out}{sign}{hours:02d}:{minutes:02d}"


def parse_rfc3339(s: str) -> datetime:
    m = _RFC3339_RE.match(s)
    if m is None:
        raise ValueError(f"invalid RFC3339 timestamp: {s}")
    date_part, time_part, frac, zone = m.groups()
    dt = datetime.strptime(f"{date_part}T{time_part}", "%Y-%m-%dT%H:%M:%S")
    if frac:
        # Python keeps microseconds; anything finer is truncated.
        dt = dt.replace(microsecond=int(frac[:6].ljust(6, "0")))
    if zone in ("Z", "z"):
        tz = timezone.utc
    else:
        sign = 1 if zone[0] == "+" else -1
        hours, minutes = int(zone[1:3]), int(zone[4:6])
        tz = timezone(sign * timedelta(hours=hours, minutes=minutes))
    return dt.replace(tzinfo=tz)
