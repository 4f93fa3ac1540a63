"""
Catalogue Storage Layer

RESPONSIBILITY: Fetch, parse and validate the catalogue document
ALLOWED INPUTS: A file path or http(s) URL from DashboardConfig
OUTPUTS: Result holding a Catalogue, or an Error

WHAT THIS LAYER MUST NOT DO:
============================
- Write to the catalogue source (read-only, always)
- Return a partially valid catalogue
- Raise for expected failures (missing file, bad JSON, bad enum values)

Every engine function assumes well-formed records. This layer is the
only place malformed input is detected; failures are surfaced as Error
values before any derivation runs.
"""

from __future__ import annotations
from typing import List, Optional, Set
import json
import os

import httpx

from ..config import DashboardConfig
from ..contracts.base import Error, ErrorCode, Result, utc_now
from ..contracts.records import Blog, Catalogue
from ..observability import get_logger


logger = get_logger(__name__)

SUPPORTED_SCHEMA_MAJOR = "1"


# =============================================================================
# PARSING & VALIDATION
# =============================================================================

def parse_catalogue(data: object) -> Result:
    """
    Validate a decoded catalogue document and build a Catalogue.

    Checks, in order: document shape, schema version, each blog record,
    unique blog ids, unique asset ids within each blog.
    """
    if not isinstance(data, dict):
        return _fail(ErrorCode.MALFORMED_PAYLOAD, "Catalogue must be a JSON object")

    schema_version = data.get('schemaVersion')
    if not isinstance(schema_version, str) or not schema_version:
        return _fail(ErrorCode.MALFORMED_PAYLOAD, "Missing schemaVersion")

    if schema_version.split('.')[0] != SUPPORTED_SCHEMA_MAJOR:
        return Result.failure(
            _error(ErrorCode.UNSUPPORTED_SCHEMA_VERSION,
                   f"Unsupported schema version: {schema_version}")
            .with_context('schema_version', schema_version)
        )

    raw_blogs = data.get('blogs')
    if not isinstance(raw_blogs, list):
        return _fail(ErrorCode.MALFORMED_PAYLOAD, "'blogs' must be a list")

    blogs: List[Blog] = []
    seen_blog_ids: Set[str] = set()

    for index, raw_blog in enumerate(raw_blogs):
        try:
            blog = Blog.from_dict(raw_blog)
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            return Result.failure(
                _error(ErrorCode.MALFORMED_PAYLOAD, f"Invalid blog record: {_describe(e)}")
                .with_context('blog_index', str(index))
            )

        if blog.id in seen_blog_ids:
            return Result.failure(
                _error(ErrorCode.DUPLICATE_IDENTIFIER, f"Duplicate blog id: {blog.id}")
                .with_context('blog_id', blog.id)
            )
        seen_blog_ids.add(blog.id)

        duplicate_asset = _first_duplicate_asset_id(blog)
        if duplicate_asset is not None:
            return Result.failure(
                _error(ErrorCode.DUPLICATE_IDENTIFIER,
                       f"Duplicate asset id in blog {blog.id}: {duplicate_asset}")
                .with_context('blog_id', blog.id)
                .with_context('asset_id', duplicate_asset)
            )

        blogs.append(blog)

    return Result.success(Catalogue(schema_version=schema_version, blogs=tuple(blogs)))


def _first_duplicate_asset_id(blog: Blog) -> Optional[str]:
    seen: Set[str] = set()
    for asset in blog.assets:
        if asset.asset_id in seen:
            return asset.asset_id
        seen.add(asset.asset_id)
    return None


def _describe(error: Exception) -> str:
    if isinstance(error, KeyError):
        return f"missing field {error}"
    return str(error)


def _error(code: ErrorCode, message: str) -> Error:
    return Error(code=code, message=message, timestamp=utc_now())


def _fail(code: ErrorCode, message: str) -> Result:
    return Result.failure(_error(code, message))


# =============================================================================
# LOADER
# =============================================================================

class CatalogueLoader:
    """
    Reads the catalogue from a file or URL.

    GUARANTEES:
    ===========
    1. load() never raises for I/O, decode or validation failures
    2. The source is only ever read
    3. Each load() returns a fresh, independent Catalogue
    """

    def __init__(
        self,
        config: Optional[DashboardConfig] = None,
        transport: Optional[httpx.BaseTransport] = None
    ):
        self._config = config or DashboardConfig()
        self._transport = transport

    @property
    def source(self) -> str:
        return self._config.data_source

    def load(self) -> Result:
        if self._config.is_remote:
            raw = self._read_url()
        else:
            raw = self._read_file()

        if raw.is_failure:
            logger.warning("Catalogue load failed: %s", raw.error.message)
            return raw

        try:
            data = json.loads(raw.value)
        except ValueError as e:
            logger.warning("Catalogue is not valid JSON: %s", e)
            return Result.failure(
                _error(ErrorCode.MALFORMED_PAYLOAD, f"Invalid JSON: {e}")
                .with_context('source', self.source)
            )

        result = parse_catalogue(data)
        if result.is_success:
            logger.info(
                "Loaded catalogue %s (schema %s, %d blogs)",
                self.source, result.value.schema_version, len(result.value.blogs),
            )
        else:
            logger.warning("Catalogue rejected: %s", result.error.message)
        return result

    def _read_file(self) -> Result:
        path = self.source
        if not os.path.exists(path):
            return Result.failure(
                _error(ErrorCode.SOURCE_NOT_FOUND, f"Catalogue not found: {path}")
                .with_context('source', path)
            )
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return Result.success(f.read())
        except (OSError, UnicodeDecodeError) as e:
            return Result.failure(
                _error(ErrorCode.SOURCE_UNREACHABLE, f"Cannot read catalogue: {e}")
                .with_context('source', path)
            )

    def _read_url(self) -> Result:
        url = self.source
        try:
            with httpx.Client(
                timeout=self._config.http_timeout,
                headers={'User-Agent': self._config.user_agent},
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = client.get(url)
        except httpx.TimeoutException:
            return Result.failure(
                _error(ErrorCode.SOURCE_UNREACHABLE, "Catalogue request timed out")
                .with_context('source', url)
            )
        except httpx.HTTPError as e:
            return Result.failure(
                _error(ErrorCode.SOURCE_UNREACHABLE, f"Catalogue request failed: {e}")
                .with_context('source', url)
            )

        if response.status_code == 404:
            return Result.failure(
                _error(ErrorCode.SOURCE_NOT_FOUND, f"Failed to load blogs: {response.status_code}")
                .with_context('source', url)
            )
        if response.status_code != 200:
            return Result.failure(
                _error(ErrorCode.SOURCE_UNREACHABLE, f"Failed to load blogs: {response.status_code}")
                .with_context('source', url)
            )
        return Result.success(response.text)


# =============================================================================
# SESSION (single in-memory snapshot)
# =============================================================================

class CatalogueSession:
    """
    Holds the one catalogue snapshot of a session.

    reload() replaces the snapshot wholesale; a failed reload leaves
    the error visible and clears the previous catalogue, so a stale
    view is never presented as current.
    """

    def __init__(self, loader: CatalogueLoader):
        self._loader = loader
        self._result: Optional[Result] = None

    @property
    def loaded(self) -> bool:
        return self._result is not None

    @property
    def catalogue(self) -> Optional[Catalogue]:
        if self._result is None or self._result.is_failure:
            return None
        return self._result.value

    @property
    def error(self) -> Optional[Error]:
        return self._result.error if self._result is not None else None

    def reload(self) -> Result:
        self._result = self._loader.load()
        return self._result

    def ensure_loaded(self) -> Result:
        if self._result is None:
            return self.reload()
        return self._result


__all__ = [
    'parse_catalogue', 'CatalogueLoader', 'CatalogueSession',
    'SUPPORTED_SCHEMA_MAJOR',
]
