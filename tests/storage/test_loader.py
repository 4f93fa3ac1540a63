"""
Catalogue Loader Tests

Every expected failure comes back as an Error value, never an exception.
URL sources are exercised through httpx.MockTransport; no network.
"""

import copy
import json

import httpx
import pytest

from blog_dashboard.config import DashboardConfig
from blog_dashboard.contracts import BlogStatus, ErrorCode
from blog_dashboard.storage import CatalogueLoader, CatalogueSession, parse_catalogue

from tests.fixtures import CATALOGUE_DOCUMENT, write_catalogue


def _document(**changes):
    document = copy.deepcopy(CATALOGUE_DOCUMENT)
    document.update(changes)
    return document


def _file_loader(tmp_path, document=None) -> CatalogueLoader:
    path = write_catalogue(tmp_path / "blogs.json", document)
    return CatalogueLoader(DashboardConfig(data_source=path))


# =============================================================================
# PARSING
# =============================================================================

class TestParseCatalogue:

    def test_valid_document(self):
        result = parse_catalogue(copy.deepcopy(CATALOGUE_DOCUMENT))

        assert result.is_success
        catalogue = result.value
        assert catalogue.schema_version == "1.0"
        assert [b.id for b in catalogue.blogs] == ["alpha.example", "beta.example", "gamma.example"]
        assert catalogue.find_blog("beta.example").status == BlogStatus.PAUSED

    @pytest.mark.parametrize("payload", [[], "blogs", 42, None])
    def test_non_object_rejected(self, payload):
        result = parse_catalogue(payload)

        assert result.is_failure
        assert result.error.code == ErrorCode.MALFORMED_PAYLOAD

    def test_missing_schema_version(self):
        document = copy.deepcopy(CATALOGUE_DOCUMENT)
        del document["schemaVersion"]

        result = parse_catalogue(document)

        assert result.error.code == ErrorCode.MALFORMED_PAYLOAD

    def test_minor_version_accepted(self):
        assert parse_catalogue(_document(schemaVersion="1.7")).is_success

    def test_unsupported_major_version(self):
        result = parse_catalogue(_document(schemaVersion="2.0"))

        assert result.error.code == ErrorCode.UNSUPPORTED_SCHEMA_VERSION
        assert dict(result.error.context)["schema_version"] == "2.0"

    def test_blogs_must_be_list(self):
        result = parse_catalogue(_document(blogs={"alpha": {}}))

        assert result.error.code == ErrorCode.MALFORMED_PAYLOAD

    def test_unknown_enum_value(self):
        document = copy.deepcopy(CATALOGUE_DOCUMENT)
        document["blogs"][1]["assets"][0]["status"] = "pending"

        result = parse_catalogue(document)

        assert result.error.code == ErrorCode.MALFORMED_PAYLOAD
        assert dict(result.error.context)["blog_index"] == "1"

    def test_missing_required_field(self):
        document = copy.deepcopy(CATALOGUE_DOCUMENT)
        del document["blogs"][0]["domain"]

        result = parse_catalogue(document)

        assert result.error.code == ErrorCode.MALFORMED_PAYLOAD
        assert "domain" in result.error.message

    @pytest.mark.parametrize("field,value", [
        ("displayName", None),
        ("domain", None),
        ("id", 42),
        ("domain", ""),
    ])
    def test_required_text_fields(self, field, value):
        document = copy.deepcopy(CATALOGUE_DOCUMENT)
        document["blogs"][0][field] = value

        result = parse_catalogue(document)

        assert result.is_failure
        assert result.error.code == ErrorCode.MALFORMED_PAYLOAD
        assert field in result.error.message

    @pytest.mark.parametrize("value", [None, ""])
    def test_asset_id_must_be_text(self, value):
        document = copy.deepcopy(CATALOGUE_DOCUMENT)
        document["blogs"][2]["assets"][0]["assetId"] = value

        result = parse_catalogue(document)

        assert result.error.code == ErrorCode.MALFORMED_PAYLOAD
        assert dict(result.error.context)["blog_index"] == "2"

    def test_duplicate_blog_id(self):
        document = copy.deepcopy(CATALOGUE_DOCUMENT)
        document["blogs"].append(copy.deepcopy(document["blogs"][0]))

        result = parse_catalogue(document)

        assert result.error.code == ErrorCode.DUPLICATE_IDENTIFIER
        assert dict(result.error.context)["blog_id"] == "alpha.example"

    def test_duplicate_asset_id_within_blog(self):
        document = copy.deepcopy(CATALOGUE_DOCUMENT)
        assets = document["blogs"][2]["assets"]
        assets[1]["assetId"] = assets[0]["assetId"]

        result = parse_catalogue(document)

        assert result.error.code == ErrorCode.DUPLICATE_IDENTIFIER
        assert dict(result.error.context)["asset_id"] == "g-repo"

    def test_same_asset_id_across_blogs_allowed(self):
        document = copy.deepcopy(CATALOGUE_DOCUMENT)
        document["blogs"][1]["assets"][0]["assetId"] = "a-repo"

        assert parse_catalogue(document).is_success

    def test_empty_catalogue(self):
        result = parse_catalogue({"schemaVersion": "1.0", "blogs": []})

        assert result.is_success
        assert result.value.blogs == ()


# =============================================================================
# FILE SOURCES
# =============================================================================

class TestFileLoader:

    def test_load_file(self, tmp_path):
        result = _file_loader(tmp_path).load()

        assert result.is_success
        assert len(result.value.blogs) == 3

    def test_missing_file(self, tmp_path):
        loader = CatalogueLoader(DashboardConfig(data_source=str(tmp_path / "absent.json")))

        result = loader.load()

        assert result.is_failure
        assert result.error.code == ErrorCode.SOURCE_NOT_FOUND

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "blogs.json"
        path.write_text("{not json", encoding="utf-8")

        result = CatalogueLoader(DashboardConfig(data_source=str(path))).load()

        assert result.error.code == ErrorCode.MALFORMED_PAYLOAD
        assert dict(result.error.context)["source"] == str(path)

    def test_source_is_not_modified(self, tmp_path):
        loader = _file_loader(tmp_path)
        before = (tmp_path / "blogs.json").read_bytes()

        loader.load()
        loader.load()

        assert (tmp_path / "blogs.json").read_bytes() == before

    def test_each_load_is_independent(self, tmp_path):
        loader = _file_loader(tmp_path)

        first = loader.load().value
        second = loader.load().value

        assert first == second
        assert first is not second


# =============================================================================
# URL SOURCES
# =============================================================================

def _url_loader(handler) -> CatalogueLoader:
    config = DashboardConfig(data_source="https://catalogue.example/blogs.json")
    return CatalogueLoader(config, transport=httpx.MockTransport(handler))


class TestUrlLoader:

    def test_load_url(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["agent"] = request.headers["User-Agent"]
            return httpx.Response(200, text=json.dumps(CATALOGUE_DOCUMENT))

        result = _url_loader(handler).load()

        assert result.is_success
        assert len(result.value.blogs) == 3
        assert seen["agent"] == "BlogDashboard/1.0"

    def test_not_found(self):
        result = _url_loader(lambda request: httpx.Response(404)).load()

        assert result.error.code == ErrorCode.SOURCE_NOT_FOUND
        assert result.error.message == "Failed to load blogs: 404"

    def test_server_error(self):
        result = _url_loader(lambda request: httpx.Response(500)).load()

        assert result.error.code == ErrorCode.SOURCE_UNREACHABLE
        assert result.error.message == "Failed to load blogs: 500"

    def test_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        result = _url_loader(handler).load()

        assert result.error.code == ErrorCode.SOURCE_UNREACHABLE

    def test_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout("slow", request=request)

        result = _url_loader(handler).load()

        assert result.error.code == ErrorCode.SOURCE_UNREACHABLE
        assert "timed out" in result.error.message

    def test_invalid_body(self):
        result = _url_loader(lambda request: httpx.Response(200, text="<html>")).load()

        assert result.error.code == ErrorCode.MALFORMED_PAYLOAD


# =============================================================================
# SESSION
# =============================================================================

class TestSession:

    def test_lazy_load(self, tmp_path):
        session = CatalogueSession(_file_loader(tmp_path))

        assert not session.loaded
        assert session.ensure_loaded().is_success
        assert session.loaded
        assert session.error is None

    def test_ensure_loaded_reuses_snapshot(self, tmp_path):
        session = CatalogueSession(_file_loader(tmp_path))

        first = session.ensure_loaded().value
        write_catalogue(tmp_path / "blogs.json", {"schemaVersion": "1.0", "blogs": []})

        assert session.ensure_loaded().value is first

    def test_reload_picks_up_changes(self, tmp_path):
        session = CatalogueSession(_file_loader(tmp_path))
        session.ensure_loaded()
        write_catalogue(tmp_path / "blogs.json", {"schemaVersion": "1.0", "blogs": []})

        result = session.reload()

        assert result.value.blogs == ()

    def test_failed_reload_clears_catalogue(self, tmp_path):
        session = CatalogueSession(_file_loader(tmp_path))
        session.ensure_loaded()
        (tmp_path / "blogs.json").write_text("[]", encoding="utf-8")

        session.reload()

        assert session.catalogue is None
        assert session.error.code == ErrorCode.MALFORMED_PAYLOAD


# =============================================================================
# CONFIG
# =============================================================================

class TestConfig:

    def test_defaults(self):
        config = DashboardConfig.from_env({})

        assert config.data_source.endswith("blogs.json")
        assert config.http_timeout == 10.0
        assert config.log_level == "INFO"
        assert not config.is_remote

    def test_environment_overrides(self):
        config = DashboardConfig.from_env({
            "BLOG_DASHBOARD_DATA": "https://example.com/blogs.json",
            "BLOG_DASHBOARD_HTTP_TIMEOUT": "2.5",
            "BLOG_DASHBOARD_LOG_LEVEL": "DEBUG",
        })

        assert config.is_remote
        assert config.http_timeout == 2.5
        assert config.log_level == "DEBUG"

    @pytest.mark.parametrize("kwargs", [{"data_source": ""}, {"http_timeout": 0}])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            DashboardConfig(**kwargs)
