"""
Record Model
============

Immutable shape of the catalogue: Blog, Asset, Evidence.

CONSTRAINTS:
- No derived values (health, completeness) are stored here
- Collections are tuples; appending evidence builds a new Asset
- Category and importance are fixed when the asset is created
- Serialized keys follow the catalogue document (camelCase)
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Dict, Optional, Tuple

from .base import (
    AssetCategory, AssetImportance, AssetStatus, AssetType, BlogStatus,
    EvidenceType, parse_iso, require_exhaustive, to_iso, utc_now,
)


# =============================================================================
# ASSET TYPE DEFINITIONS
# =============================================================================

@dataclass(frozen=True)
class AssetTypeDefinition:
    """Fixed category, default tier and display text for one asset type."""
    type: AssetType
    category: AssetCategory
    default_importance: AssetImportance
    label: str
    description: str


ASSET_TYPE_DEFINITIONS: Dict[AssetType, AssetTypeDefinition] = {
    definition.type: definition
    for definition in (
        # Internal factory (critical)
        AssetTypeDefinition(AssetType.GITHUB_REPO, AssetCategory.INTERNAL,
                            AssetImportance.CRITICAL, "GitHub Repository",
                            "Designer/content repository"),
        AssetTypeDefinition(AssetType.LOVABLE_PROJECT, AssetCategory.INTERNAL,
                            AssetImportance.CRITICAL, "Lovable Project",
                            "Lovable project for site generation"),
        AssetTypeDefinition(AssetType.PRODUCTION_SITE, AssetCategory.INTERNAL,
                            AssetImportance.CRITICAL, "Production Site",
                            "Live production website"),
        # External platforms
        AssetTypeDefinition(AssetType.GOOGLE_SEARCH_CONSOLE, AssetCategory.EXTERNAL,
                            AssetImportance.CRITICAL, "Google Search Console",
                            "Search Console property for SEO"),
        AssetTypeDefinition(AssetType.GOOGLE_ANALYTICS, AssetCategory.EXTERNAL,
                            AssetImportance.IMPORTANT, "Google Analytics",
                            "Analytics property for traffic tracking"),
        AssetTypeDefinition(AssetType.FACEBOOK_PAGE, AssetCategory.EXTERNAL,
                            AssetImportance.OPTIONAL, "Facebook Page",
                            "Facebook page for social presence"),
        AssetTypeDefinition(AssetType.INSTAGRAM_ACCOUNT, AssetCategory.EXTERNAL,
                            AssetImportance.OPTIONAL, "Instagram",
                            "Instagram account for social presence"),
        AssetTypeDefinition(AssetType.X_ACCOUNT, AssetCategory.EXTERNAL,
                            AssetImportance.OPTIONAL, "X (Twitter)",
                            "Twitter/X account for social presence"),
        # Distribution
        AssetTypeDefinition(AssetType.OG_METADATA, AssetCategory.DISTRIBUTION,
                            AssetImportance.OPTIONAL, "Open Graph Metadata",
                            "OG tags present for social sharing"),
        AssetTypeDefinition(AssetType.SHARE_IMAGE, AssetCategory.DISTRIBUTION,
                            AssetImportance.OPTIONAL, "Share Image",
                            "Default social share image"),
        AssetTypeDefinition(AssetType.RSS_FEED, AssetCategory.DISTRIBUTION,
                            AssetImportance.OPTIONAL, "RSS/Atom Feed",
                            "Syndication feed available"),
    )
}

require_exhaustive(ASSET_TYPE_DEFINITIONS, AssetType, "ASSET_TYPE_DEFINITIONS")


def get_asset_type_definition(asset_type: AssetType) -> AssetTypeDefinition:
    return ASSET_TYPE_DEFINITIONS[asset_type]


def _required_str(data: dict, key: str) -> str:
    """Non-empty string field of a catalogue entry."""
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string, got {type(value).__name__}")
    if not value:
        raise ValueError(f"'{key}' must not be empty")
    return value


# =============================================================================
# EVIDENCE
# =============================================================================

@dataclass(frozen=True)
class Evidence:
    """
    Provenance for an asset status.
    Append-only: never edited or removed once recorded.
    """
    type: EvidenceType
    value: str
    recorded_at: datetime

    def to_dict(self) -> dict:
        return {
            'type': self.type.value,
            'value': self.value,
            'recordedAt': to_iso(self.recorded_at),
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Evidence':
        return cls(
            type=EvidenceType(data['type']),
            value=str(data['value']),
            recorded_at=parse_iso(data['recordedAt']),
        )


# =============================================================================
# ASSET
# =============================================================================

@dataclass(frozen=True)
class Asset:
    """
    One internal or external artifact tracked for a blog.

    Assets describe reality. They do not cause it.
    """
    asset_id: str
    type: AssetType
    category: AssetCategory
    importance: AssetImportance
    status: AssetStatus
    label: str
    url: Optional[str] = None
    external_id: Optional[str] = None     # Platform-specific ID
    last_checked_at: Optional[datetime] = None
    notes: Optional[str] = None           # Freeform decision log
    evidence: Tuple[Evidence, ...] = field(default_factory=tuple)

    @classmethod
    def create(
        cls,
        asset_id: str,
        asset_type: AssetType,
        label: str,
        **overrides
    ) -> 'Asset':
        """
        Create an asset with category and tier taken from its type.

        Starts as NOT_CREATED with no evidence unless overridden.
        """
        definition = get_asset_type_definition(asset_type)
        values = dict(
            asset_id=asset_id,
            type=asset_type,
            category=definition.category,
            importance=definition.default_importance,
            status=AssetStatus.NOT_CREATED,
            label=label,
        )
        values.update(overrides)
        if 'evidence' in values:
            values['evidence'] = tuple(values['evidence'])
        return cls(**values)

    def add_evidence(
        self,
        evidence_type: EvidenceType,
        value: str,
        recorded_at: Optional[datetime] = None
    ) -> 'Asset':
        """Return a new Asset with one more evidence entry. Self is unchanged."""
        entry = Evidence(
            type=evidence_type,
            value=value,
            recorded_at=recorded_at or utc_now(),
        )
        return replace(self, evidence=self.evidence + (entry,))

    def to_dict(self) -> dict:
        return {
            'assetId': self.asset_id,
            'type': self.type.value,
            'category': self.category.value,
            'importance': self.importance.value,
            'status': self.status.value,
            'label': self.label,
            'url': self.url,
            'externalId': self.external_id,
            'lastCheckedAt': to_iso(self.last_checked_at) if self.last_checked_at else None,
            'notes': self.notes,
            'evidence': [e.to_dict() for e in self.evidence],
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Asset':
        """
        Reconstruct from a catalogue entry.

        Category and importance fall back to the type definition
        when the document does not state them.
        """
        asset_type = AssetType(data['type'])
        definition = get_asset_type_definition(asset_type)
        return cls(
            asset_id=_required_str(data, 'assetId'),
            type=asset_type,
            category=AssetCategory(data['category']) if data.get('category') else definition.category,
            importance=AssetImportance(data['importance']) if data.get('importance') else definition.default_importance,
            status=AssetStatus(data['status']),
            label=data.get('label') or definition.label,
            url=data.get('url'),
            external_id=data.get('externalId'),
            last_checked_at=parse_iso(data['lastCheckedAt']) if data.get('lastCheckedAt') else None,
            notes=data.get('notes'),
            evidence=tuple(Evidence.from_dict(e) for e in data.get('evidence', [])),
        )


# =============================================================================
# BLOG
# =============================================================================

@dataclass(frozen=True)
class Blog:
    """One tracked site. Exclusively owns its ordered assets."""
    id: str
    display_name: str
    domain: str
    status: BlogStatus
    notes: Optional[str] = None
    assets: Tuple[Asset, ...] = field(default_factory=tuple)

    def assets_of_type(self, asset_type: AssetType) -> Tuple[Asset, ...]:
        return tuple(a for a in self.assets if a.type == asset_type)

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'displayName': self.display_name,
            'domain': self.domain,
            'status': self.status.value,
            'notes': self.notes,
            'assets': [a.to_dict() for a in self.assets],
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Blog':
        return cls(
            id=_required_str(data, 'id'),
            display_name=_required_str(data, 'displayName'),
            domain=_required_str(data, 'domain'),
            status=BlogStatus(data['status']),
            notes=data.get('notes'),
            assets=tuple(Asset.from_dict(a) for a in data.get('assets', [])),
        )


def create_empty_blog(domain: str, display_name: str) -> Blog:
    """New active blog keyed by its domain, with no assets."""
    return Blog(
        id=domain,
        display_name=display_name,
        domain=domain,
        status=BlogStatus.ACTIVE,
    )


# =============================================================================
# CATALOGUE
# =============================================================================

@dataclass(frozen=True)
class Catalogue:
    """
    Versioned, validated catalogue document.
    Treated as an immutable snapshot for one derivation pass.
    """
    schema_version: str
    blogs: Tuple[Blog, ...] = field(default_factory=tuple)

    def find_blog(self, blog_id: str) -> Optional[Blog]:
        for blog in self.blogs:
            if blog.id == blog_id:
                return blog
        return None

    def to_dict(self) -> dict:
        return {
            'schemaVersion': self.schema_version,
            'blogs': [b.to_dict() for b in self.blogs],
        }
