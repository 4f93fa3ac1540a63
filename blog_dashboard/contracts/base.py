"""
Base Contracts and Shared Types

These are the foundational types used across all layers.
All types here are IMMUTABLE and represent pure data.
No behavior, no side effects, no I/O.

CLOSED ENUMERATIONS:
====================
- Every status, category, tier and level is an Enum member
- Per-member rules live in lookup tables, never in default branches
- Lookup tables are checked for full coverage at import time
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Mapping, Optional, Tuple, Type
from enum import Enum, auto


# =============================================================================
# RECORD ENUMS (Closed World)
# =============================================================================

class BlogStatus(Enum):
    """Lifecycle status of a blog."""
    ACTIVE = "active"
    PAUSED = "paused"
    ARCHIVED = "archived"


class AssetCategory(Enum):
    """Section an asset belongs to. Derived from its type."""
    INTERNAL = "internal"
    EXTERNAL = "external"
    DISTRIBUTION = "distribution"


class AssetImportance(Enum):
    """
    Importance tier. Weights how an asset's absence affects health.
    Derived from its type.
    """
    CRITICAL = "critical"
    IMPORTANT = "important"
    OPTIONAL = "optional"


class AssetStatus(Enum):
    """
    Observed state of an asset.

    SKIPPED is a FIRST CLASS state: a documented decision,
    never a failure.
    """
    NOT_CREATED = "not_created"  # Asset does not exist yet
    CREATED = "created"          # Exists but not connected/configured
    CONNECTED = "connected"      # Connected to the system
    VERIFIED = "verified"        # Verified working
    ERROR = "error"              # Has an error/issue
    SKIPPED = "skipped"          # Intentionally skipped


class AssetType(Enum):
    """Closed set of asset types tracked per blog."""
    # Internal factory
    GITHUB_REPO = "github_repo"
    LOVABLE_PROJECT = "lovable_project"
    PRODUCTION_SITE = "production_site"
    # External platforms
    GOOGLE_SEARCH_CONSOLE = "google_search_console"
    GOOGLE_ANALYTICS = "google_analytics"
    FACEBOOK_PAGE = "facebook_page"
    INSTAGRAM_ACCOUNT = "instagram_account"
    X_ACCOUNT = "x_account"
    # Distribution
    OG_METADATA = "og_metadata"
    SHARE_IMAGE = "share_image"
    RSS_FEED = "rss_feed"


class EvidenceType(Enum):
    """Kind of provenance backing an asset status."""
    MANUAL_NOTE = "manual_note"
    API_CHECK = "api_check"
    SCREENSHOT = "screenshot"
    LINK = "link"


class HealthLevel(Enum):
    """Derived severity summary for a blog."""
    RISK = "risk"
    INCOMPLETE = "incomplete"
    HEALTHY = "healthy"


def require_exhaustive(table: Mapping, enum_cls: Type[Enum], name: str) -> None:
    """
    Fail fast if a lookup table does not cover every member of an enum.

    Called at import time by every module that keys rules on an enum,
    so a new member without a rule stops the program from loading.
    """
    missing = [member.name for member in enum_cls if member not in table]
    if missing:
        raise TypeError(
            f"{name} does not cover {enum_cls.__name__} members: {', '.join(missing)}"
        )


# =============================================================================
# ERROR STATES (Explicit, never silent)
# =============================================================================

class ErrorCode(Enum):
    """
    Explicit error codes for catalogue loading.
    The derivation engine itself has no error states.
    """
    SOURCE_NOT_FOUND = auto()
    SOURCE_UNREACHABLE = auto()
    MALFORMED_PAYLOAD = auto()
    UNSUPPORTED_SCHEMA_VERSION = auto()
    DUPLICATE_IDENTIFIER = auto()


@dataclass(frozen=True)
class Error:
    """
    Immutable error representation with full context.
    Errors are data, not exceptions - they can be stored and displayed.
    """
    code: ErrorCode
    message: str
    timestamp: datetime
    context: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)

    def with_context(self, key: str, value: str) -> Error:
        """Return new Error with additional context (immutable)."""
        return Error(
            code=self.code,
            message=self.message,
            timestamp=self.timestamp,
            context=self.context + ((key, value),)
        )

    def to_dict(self) -> dict:
        return {
            'code': self.code.name,
            'message': self.message,
            'timestamp': self.timestamp.isoformat(),
            'context': dict(self.context),
        }


@dataclass(frozen=True)
class Result:
    """
    Result type for operations that can fail.
    Either contains a value OR an error, never both.
    """
    value: Optional[object] = None
    error: Optional[Error] = None

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    @staticmethod
    def success(value: object) -> Result:
        return Result(value=value, error=None)

    @staticmethod
    def failure(error: Error) -> Result:
        return Result(value=None, error=error)


# =============================================================================
# TEMPORAL HELPERS (UTC only)
# =============================================================================

def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_iso(iso_string: str) -> datetime:
    """Parse an ISO 8601 string ('Z' accepted). Naive values are taken as UTC."""
    dt = datetime.fromisoformat(iso_string.replace('Z', '+00:00'))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def to_iso(value: datetime) -> str:
    """Render a UTC timestamp with a trailing 'Z'."""
    return value.astimezone(timezone.utc).isoformat().replace('+00:00', 'Z')
