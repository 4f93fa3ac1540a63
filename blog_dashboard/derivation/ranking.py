"""
Severity Ranker

Numeric rank for sorting by health severity.
Lower = worse = appears first.
"""

from __future__ import annotations
from typing import Dict, Union

from ..contracts.base import HealthLevel, require_exhaustive


UNKNOWN_RANK = 99

HEALTH_RANKS: Dict[HealthLevel, int] = {
    HealthLevel.RISK: 0,
    HealthLevel.INCOMPLETE: 1,
    HealthLevel.HEALTHY: 2,
}

require_exhaustive(HEALTH_RANKS, HealthLevel, "HEALTH_RANKS")

_RANKS_BY_VALUE: Dict[str, int] = {level.value: rank for level, rank in HEALTH_RANKS.items()}


def health_rank(level: Union[HealthLevel, str]) -> int:
    """Rank of a health level (enum or its string value); anything else sorts last."""
    if isinstance(level, HealthLevel):
        return HEALTH_RANKS[level]
    if isinstance(level, str):
        return _RANKS_BY_VALUE.get(level, UNKNOWN_RANK)
    return UNKNOWN_RANK
