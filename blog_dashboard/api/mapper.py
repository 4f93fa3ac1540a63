"""
API Mapper
==========

Transforms records and derived state into response dictionaries.
This is the ONLY place display labels are attached; it never
recomputes or alters derived values.
"""
from typing import Any, Dict, List, Optional, Tuple

from ..contracts.base import (
    AssetCategory, AssetStatus, AssetType, BlogStatus, HealthLevel,
    require_exhaustive,
)
from ..contracts.records import Asset, Blog
from ..contracts.derived import BlogHealth
from ..derivation import derive_health, derive_section_completeness


HEALTH_LABELS: Dict[HealthLevel, str] = {
    HealthLevel.HEALTHY: "Healthy",
    HealthLevel.INCOMPLETE: "Incomplete",
    HealthLevel.RISK: "Risk",
}

ASSET_STATUS_LABELS: Dict[AssetStatus, str] = {
    AssetStatus.VERIFIED: "Verified",
    AssetStatus.CONNECTED: "Connected",
    AssetStatus.CREATED: "Created",
    AssetStatus.NOT_CREATED: "Not Created",
    AssetStatus.ERROR: "Error",
    AssetStatus.SKIPPED: "Skipped",
}

BLOG_STATUS_LABELS: Dict[BlogStatus, str] = {
    BlogStatus.ACTIVE: "Active",
    BlogStatus.PAUSED: "Paused",
    BlogStatus.ARCHIVED: "Archived",
}

require_exhaustive(HEALTH_LABELS, HealthLevel, "HEALTH_LABELS")
require_exhaustive(ASSET_STATUS_LABELS, AssetStatus, "ASSET_STATUS_LABELS")
require_exhaustive(BLOG_STATUS_LABELS, BlogStatus, "BLOG_STATUS_LABELS")

# (key, title, subtitle, category, types) - types=None means whole category
DETAIL_SECTIONS: Tuple[Tuple[str, str, Optional[str], AssetCategory, Optional[Tuple[AssetType, ...]]], ...] = (
    ("internal", "Internal Factory Assets", "Does this blog exist in our system?",
     AssetCategory.INTERNAL, None),
    ("search", "Search & Measurement", None, AssetCategory.EXTERNAL,
     (AssetType.GOOGLE_SEARCH_CONSOLE, AssetType.GOOGLE_ANALYTICS)),
    ("social", "Social Presence", None, AssetCategory.EXTERNAL,
     (AssetType.FACEBOOK_PAGE, AssetType.INSTAGRAM_ACCOUNT, AssetType.X_ACCOUNT)),
    ("distribution", "Distribution Readiness", "Nice to have, not blocking",
     AssetCategory.DISTRIBUTION, None),
)

QUICK_LINK_TYPES: Tuple[Tuple[str, AssetType], ...] = (
    ("production", AssetType.PRODUCTION_SITE),
    ("github", AssetType.GITHUB_REPO),
    ("lovable", AssetType.LOVABLE_PROJECT),
)


def map_list_row(blog: Blog, health: BlogHealth) -> Dict[str, Any]:
    """One row of the blog list. Health is passed in, never recomputed."""
    return {
        "id": blog.id,
        "displayName": blog.display_name,
        "domain": blog.domain,
        "status": blog.status.value,
        "statusLabel": BLOG_STATUS_LABELS[blog.status],
        "health": health.level.value,
        "healthLabel": HEALTH_LABELS[health.level],
        "missing": health.missing.to_dict(),
        "summary": _missing_summary(health),
    }


def map_blog_detail(blog: Blog) -> Dict[str, Any]:
    """Blog overview: identity, health, completeness, grouped assets, links."""
    health = derive_health(blog)

    return {
        "blog": {
            "id": blog.id,
            "displayName": blog.display_name,
            "domain": blog.domain,
            "status": blog.status.value,
            "statusLabel": BLOG_STATUS_LABELS[blog.status],
            "notes": blog.notes,
        },
        "health": {
            **health.to_dict(),
            "label": HEALTH_LABELS[health.level],
        },
        "completeness": {
            category.value: derive_section_completeness(blog.assets, category).to_dict()
            for category in AssetCategory
        },
        "sections": _map_sections(blog),
        "links": _quick_links(blog),
    }


def map_asset(asset: Asset) -> Dict[str, Any]:
    return {
        **asset.to_dict(),
        "statusLabel": ASSET_STATUS_LABELS[asset.status],
    }


def _map_sections(blog: Blog) -> List[Dict[str, Any]]:
    sections = []
    for key, title, subtitle, category, types in DETAIL_SECTIONS:
        assets = [
            a for a in blog.assets
            if a.category == category and (types is None or a.type in types)
        ]
        if not assets:
            continue
        sections.append({
            "key": key,
            "title": title,
            "subtitle": subtitle,
            "assets": [map_asset(a) for a in assets],
        })
    return sections


def _quick_links(blog: Blog) -> Dict[str, Optional[str]]:
    links = {}
    for key, asset_type in QUICK_LINK_TYPES:
        matching = [a.url for a in blog.assets_of_type(asset_type) if a.url]
        links[key] = matching[0] if matching else None
    return links


def _missing_summary(health: BlogHealth) -> str:
    parts = []
    if health.missing.critical > 0:
        parts.append(f"{health.missing.critical} critical")
    if health.missing.important > 0:
        parts.append(f"{health.missing.important} important")
    return ", ".join(parts) if parts else "Complete"
