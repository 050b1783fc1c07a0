"""Subscription tier -> fun point credit multiplier.

Billing-adjacent: the mapping is exact and an unknown tier is a contract break
with Twitch, never a default.
"""

from __future__ import annotations

from vcr_schemas.contracts.errors import UnrecognizedTier


CREDIT_MULTIPLIER_BY_TIER = {
    # Tier 1 subs are the baseline at $5; fun points are credited 1x.
    "1000": 1,
    # Tier 2 subs cost $10; credits are doubled.
    "2000": 2,
    # Tier 3 subs are $25, so subscribers get 5x.
    "3000": 5,
}


def credit_multiplier_from_tier(tier: str) -> int:
    try:
        return CREDIT_MULTIPLIER_BY_TIER[tier]
    except (KeyError, TypeError) as e:
        raise UnrecognizedTier(tier) from e
