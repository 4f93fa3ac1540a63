"""
Health Classifier

derive_health is pure.
- No I/O
- No mutation
- No caching

Health is always derived, never stored.

RULES:
======
1. NOT_CREATED and ERROR count as missing, per importance tier
2. SKIPPED is never missing (deliberate decision, not a failure)
3. One missing critical asset = RISK, no debate
4. Otherwise any missing important asset = INCOMPLETE
5. Optional assets are counted but never degrade the level
"""

from __future__ import annotations
from typing import Dict, List

from ..contracts.base import (
    AssetImportance, AssetStatus, HealthLevel, require_exhaustive
)
from ..contracts.records import Blog
from ..contracts.derived import BlogHealth, MissingCounts


STATUS_COUNTS_AS_MISSING: Dict[AssetStatus, bool] = {
    AssetStatus.NOT_CREATED: True,
    AssetStatus.CREATED: False,
    AssetStatus.CONNECTED: False,
    AssetStatus.VERIFIED: False,
    AssetStatus.ERROR: True,
    AssetStatus.SKIPPED: False,
}

require_exhaustive(STATUS_COUNTS_AS_MISSING, AssetStatus, "STATUS_COUNTS_AS_MISSING")

BAD_STATUSES = frozenset(
    status for status, missing in STATUS_COUNTS_AS_MISSING.items() if missing
)


def derive_health(blog: Blog) -> BlogHealth:
    """Classify one blog by the statuses and tiers of its assets."""
    counts: Dict[AssetImportance, int] = {tier: 0 for tier in AssetImportance}
    reasons: List[str] = []

    for asset in blog.assets:
        if not STATUS_COUNTS_AS_MISSING[asset.status]:
            continue

        counts[asset.importance] += 1

        if asset.importance is AssetImportance.CRITICAL:
            reasons.append(f"Critical asset missing or broken: {asset.type.value}")

    missing = MissingCounts(
        critical=counts[AssetImportance.CRITICAL],
        important=counts[AssetImportance.IMPORTANT],
        optional=counts[AssetImportance.OPTIONAL],
    )

    return BlogHealth(
        level=_level_for(missing),
        missing=missing,
        reasons=tuple(reasons),
    )


def _level_for(missing: MissingCounts) -> HealthLevel:
    if missing.critical > 0:
        return HealthLevel.RISK
    if missing.important > 0:
        return HealthLevel.INCOMPLETE
    return HealthLevel.HEALTHY
