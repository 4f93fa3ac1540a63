"""
Derived Value Shapes

Output types of the derivation engine. None of these are stored on
records or cached between reads; they have no identity of their own.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple

from .base import BlogStatus, HealthLevel


@dataclass(frozen=True)
class MissingCounts:
    """Assets in a bad status, per importance tier."""
    critical: int = 0
    important: int = 0
    optional: int = 0

    def to_dict(self) -> dict:
        return {
            'critical': self.critical,
            'important': self.important,
            'optional': self.optional,
        }


@dataclass(frozen=True)
class BlogHealth:
    """Severity level, missing counts and critical-failure reasons for one blog."""
    level: HealthLevel
    missing: MissingCounts
    reasons: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            'level': self.level.value,
            'missing': self.missing.to_dict(),
            'reasons': list(self.reasons),
        }


@dataclass(frozen=True)
class SectionCompleteness:
    """Verified vs total assets for one blog and one category."""
    verified: int
    total: int

    def to_ratio_string(self) -> str:
        return f"{self.verified}/{self.total}"

    def to_dict(self) -> dict:
        return {'verified': self.verified, 'total': self.total}


@dataclass(frozen=True)
class BlogSnapshot:
    """
    Flattened, exportable projection of one blog's derived state.
    Holds no reference back to the Blog it was built from.
    """
    id: str
    domain: str
    display_name: str
    status: BlogStatus
    health: HealthLevel
    missing_critical: int
    missing_important: int
    internal: SectionCompleteness
    external: SectionCompleteness
    distribution: SectionCompleteness

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'domain': self.domain,
            'displayName': self.display_name,
            'status': self.status.value,
            'health': self.health.value,
            'missingCritical': self.missing_critical,
            'missingImportant': self.missing_important,
            'sections': {
                'internal': self.internal.to_dict(),
                'external': self.external.to_dict(),
                'distribution': self.distribution.to_dict(),
            },
        }
