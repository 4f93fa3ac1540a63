"""
Catalogue Fixtures

Explicit, deterministic records for engine, loader and API tests.
No random generation here; property tests build their own strategies.
"""

from __future__ import annotations
from dataclasses import replace
from datetime import datetime, timezone
from typing import Iterable, Optional
import json

from blog_dashboard.contracts import (
    Asset, AssetStatus, AssetType, Blog, BlogStatus,
)


# =============================================================================
# FIXED TIMESTAMPS (deterministic)
# =============================================================================

T1 = datetime(2026, 1, 1, 10, 0, 0, tzinfo=timezone.utc)
T2 = datetime(2026, 1, 1, 10, 5, 0, tzinfo=timezone.utc)
T3 = datetime(2026, 1, 1, 10, 10, 0, tzinfo=timezone.utc)


# =============================================================================
# BUILDERS
# =============================================================================

def make_asset(
    asset_type: AssetType,
    status: AssetStatus,
    asset_id: Optional[str] = None,
    **overrides
) -> Asset:
    return Asset.create(
        asset_id or f"{asset_type.value}_{status.value}",
        asset_type,
        asset_type.value.replace("_", " ").title(),
        status=status,
        **overrides
    )


def make_blog(
    blog_id: str,
    display_name: Optional[str] = None,
    domain: Optional[str] = None,
    status: BlogStatus = BlogStatus.ACTIVE,
    assets: Iterable[Asset] = (),
) -> Blog:
    assets = tuple(assets)
    # Asset ids must be unique within a blog
    assets = tuple(
        replace(a, asset_id=f"{a.asset_id}_{i}")
        for i, a in enumerate(assets)
    )
    return Blog(
        id=blog_id,
        display_name=display_name or blog_id,
        domain=domain or blog_id,
        status=status,
        assets=assets,
    )


# =============================================================================
# NAMED BLOGS
# =============================================================================

def blog_at_risk(blog_id: str = "risky.example", **kwargs) -> Blog:
    """One critical missing, one important connected, one optional in error."""
    return make_blog(blog_id, assets=[
        make_asset(AssetType.GITHUB_REPO, AssetStatus.NOT_CREATED),
        make_asset(AssetType.GOOGLE_ANALYTICS, AssetStatus.CONNECTED),
        make_asset(AssetType.RSS_FEED, AssetStatus.ERROR),
    ], **kwargs)


def blog_incomplete(blog_id: str = "incomplete.example", **kwargs) -> Blog:
    return make_blog(blog_id, assets=[
        make_asset(AssetType.GITHUB_REPO, AssetStatus.VERIFIED),
        make_asset(AssetType.PRODUCTION_SITE, AssetStatus.CONNECTED),
        make_asset(AssetType.GOOGLE_ANALYTICS, AssetStatus.NOT_CREATED),
    ], **kwargs)


def blog_healthy(blog_id: str = "healthy.example", **kwargs) -> Blog:
    return make_blog(blog_id, assets=[
        make_asset(AssetType.GITHUB_REPO, AssetStatus.VERIFIED),
        make_asset(AssetType.LOVABLE_PROJECT, AssetStatus.SKIPPED),
        make_asset(AssetType.GOOGLE_SEARCH_CONSOLE, AssetStatus.VERIFIED),
        make_asset(AssetType.FACEBOOK_PAGE, AssetStatus.SKIPPED),
    ], **kwargs)


# =============================================================================
# CATALOGUE DOCUMENTS
# =============================================================================

CATALOGUE_DOCUMENT = {
    "schemaVersion": "1.0",
    "blogs": [
        {
            "id": "alpha.example",
            "displayName": "Alpha",
            "domain": "alpha.example",
            "status": "active",
            "notes": "Flagship",
            "assets": [
                {"assetId": "a-repo", "type": "github_repo", "category": "internal",
                 "importance": "critical", "status": "verified", "label": "GitHub Repository",
                 "url": "https://github.com/example/alpha",
                 "evidence": [{"type": "link", "value": "https://github.com/example/alpha",
                               "recordedAt": "2026-01-01T10:00:00Z"}]},
                {"assetId": "a-site", "type": "production_site", "category": "internal",
                 "importance": "critical", "status": "not_created", "label": "Production Site",
                 "url": "https://alpha.example"},
                {"assetId": "a-ga", "type": "google_analytics", "status": "connected",
                 "label": "Google Analytics"},
                {"assetId": "a-x", "type": "x_account", "status": "skipped", "label": "X"},
            ],
        },
        {
            "id": "beta.example",
            "displayName": "Beta",
            "domain": "beta.example",
            "status": "paused",
            "assets": [
                {"assetId": "b-repo", "type": "github_repo", "status": "verified",
                 "label": "GitHub Repository"},
                {"assetId": "b-ga", "type": "google_analytics", "status": "not_created",
                 "label": "Google Analytics"},
            ],
        },
        {
            "id": "gamma.example",
            "displayName": "Gamma",
            "domain": "gamma.example",
            "status": "active",
            "assets": [
                {"assetId": "g-repo", "type": "github_repo", "status": "verified",
                 "label": "GitHub Repository"},
                {"assetId": "g-rss", "type": "rss_feed", "status": "verified",
                 "label": "RSS/Atom Feed"},
            ],
        },
    ],
}


def write_catalogue(path, document: Optional[dict] = None) -> str:
    """Write a catalogue document to path; returns the path as a string."""
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(document if document is not None else CATALOGUE_DOCUMENT, f)
    return str(path)
