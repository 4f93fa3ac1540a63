"""
Section Completeness Calculator

Verified = VERIFIED or CONNECTED.
SKIPPED counts toward the total but never toward verified: it is
neutral here, just as it is never "missing" for health.
"""

from __future__ import annotations
from typing import Dict, Iterable

from ..contracts.base import AssetCategory, AssetStatus, require_exhaustive
from ..contracts.records import Asset
from ..contracts.derived import SectionCompleteness


STATUS_COUNTS_AS_VERIFIED: Dict[AssetStatus, bool] = {
    AssetStatus.NOT_CREATED: False,
    AssetStatus.CREATED: False,
    AssetStatus.CONNECTED: True,
    AssetStatus.VERIFIED: True,
    AssetStatus.ERROR: False,
    AssetStatus.SKIPPED: False,
}

require_exhaustive(STATUS_COUNTS_AS_VERIFIED, AssetStatus, "STATUS_COUNTS_AS_VERIFIED")


def derive_section_completeness(
    assets: Iterable[Asset],
    category: AssetCategory
) -> SectionCompleteness:
    section = [a for a in assets if a.category == category]
    verified = sum(1 for a in section if STATUS_COUNTS_AS_VERIFIED[a.status])
    return SectionCompleteness(verified=verified, total=len(section))
