"""
Contracts Module

Explicit record types, enums and derived-value shapes shared by every
layer. All contract types are immutable (frozen dataclasses).
"""

from .base import (
    BlogStatus, AssetCategory, AssetImportance, AssetStatus, AssetType,
    EvidenceType, HealthLevel, ErrorCode, Error, Result, require_exhaustive,
)
from .records import (
    AssetTypeDefinition, ASSET_TYPE_DEFINITIONS, get_asset_type_definition,
    Evidence, Asset, Blog, Catalogue, create_empty_blog,
)
from .derived import MissingCounts, BlogHealth, SectionCompleteness, BlogSnapshot

__all__ = [
    # Enums
    'BlogStatus', 'AssetCategory', 'AssetImportance', 'AssetStatus',
    'AssetType', 'EvidenceType', 'HealthLevel',
    # Errors
    'ErrorCode', 'Error', 'Result', 'require_exhaustive',
    # Records
    'AssetTypeDefinition', 'ASSET_TYPE_DEFINITIONS', 'get_asset_type_definition',
    'Evidence', 'Asset', 'Blog', 'Catalogue', 'create_empty_blog',
    # Derived
    'MissingCounts', 'BlogHealth', 'SectionCompleteness', 'BlogSnapshot',
]
