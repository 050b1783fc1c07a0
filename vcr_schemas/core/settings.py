from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import os

from vcr_schemas.contracts import streams


@dataclass(frozen=True)
class Settings:
    env: str
    redis_url: str
    # family -> queue (redis stream) name; defaults to the family name
    queues: Dict[str, str] = field(default_factory=dict)
    golden_events_dir: str = "contracts/golden_events/v1"

    def queue_for(self, family: str) -> str:
        return self.queues.get(family, family)


def load_settings(path: str | Path = "config/settings.yaml") -> Settings:
    p = Path(path)

    # Keep imports optional at module import time (the codecs never need YAML).
    try:
        import yaml  # type: ignore
    except ModuleNotFoundError as e:  # pragma: no cover
        raise ModuleNotFoundError(
            "PyYAML is required to load config/settings.yaml. Install with: pip install pyyaml"
        ) from e

    data: Dict[str, Any] = yaml.safe_load(p.read_text(encoding="utf-8")) or {}

    # Env override (used for compose profile isolation).
    env_redis_url = os.getenv("VCR_SCHEMAS_REDIS_URL")

    redis_section = data.get("redis") or {}
    redis_url = env_redis_url or redis_section.get("url")
    if not redis_url:
        raise ValueError("redis.url must be set (or VCR_SCHEMAS_REDIS_URL)")

    queues = {family: family for family in streams.ALL_STREAMS}
    for family, name in (data.get("queues") or {}).items():
        if family not in queues:
            raise ValueError(f"queues: unknown event family '{family}'")
        queues[family] = str(name)

    golden = data.get("golden_events") or {}
    return Settings(
        env=data.get("env", "dev"),
        redis_url=redis_url,
        queues=queues,
        golden_events_dir=str(golden.get("dir", "contracts/golden_events/v1")),
    )
