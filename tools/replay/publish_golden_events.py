from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Allow running from repo root without installing as a package.
sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

import redis  # type: ignore

from vcr_schemas.contracts.errors import SchemaError
from vcr_schemas.contracts.streams import ALL_STREAMS, codec_for_stream
from vcr_schemas.core.settings import load_settings


logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def _iter_event_files(root: Path) -> list[tuple[str, Path]]:
    """(family, path) for every golden event, grouped by family directory."""

    out: list[tuple[str, Path]] = []
    for family in ALL_STREAMS:
        out.extend((family, p) for p in sorted((root / family).glob("*.json")))
    return out


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--config", default=str(Path("config") / "settings.yaml"))
    ap.add_argument("--redis-url", help="overrides redis.url from the config")
    ap.add_argument("--events-dir", help="overrides golden_events.dir from the config")
    ap.add_argument("--dry-run", action="store_true")
    ap.add_argument(
        "--fail-on-invalid",
        action="store_true",
        help="By default invalid (dirty) golden events are skipped. Use this flag to fail fast instead.",
    )
    args = ap.parse_args()

    settings = load_settings(args.config)
    root = Path(args.events_dir or settings.golden_events_dir)
    files = _iter_event_files(root)
    if not files:
        raise SystemExit(f"no golden events found under {root}")

    r = None if args.dry_run else redis.Redis.from_url(args.redis_url or settings.redis_url)
    for family, fp in files:
        codec = codec_for_stream(family)
        try:
            # Publish the canonical encoding, not the (pretty-printed) fixture.
            body = codec.encode(codec.decode(fp.read_bytes()))
        except SchemaError as e:
            if args.fail_on_invalid:
                raise
            logger.info("[skip-invalid] %s/%s: %s", family, fp.name, e)
            continue
        stream = settings.queue_for(family)
        if r is None:
            logger.info("[dry-run] xadd %s <- %s/%s", stream, family, fp.name)
        else:
            r.xadd(stream, {"event": body})
            logger.info("xadd %s <- %s/%s", stream, family, fp.name)


if __name__ == "__main__":
    main()
