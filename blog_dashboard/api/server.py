"""
Blog Dashboard: Read-Only API Server
====================================

Surfaces derived state over the loaded catalogue.
Strictly read-only: nothing here writes to the catalogue source.

Endpoints:
- GET  /health                              -> Liveness + catalogue state
- GET  /api/v1/blogs                        -> Filtered, severity-ordered list
- GET  /api/v1/blogs/{blog_id}              -> Blog overview
- GET  /api/v1/blogs/{blog_id}/capabilities -> Display-only probes
- GET  /api/v1/export/snapshot.json         -> JSON export
- GET  /api/v1/export/snapshot.csv          -> CSV export
- POST /api/v1/catalogue/reload             -> Re-read the source

Usage:
    uvicorn blog_dashboard.api.server:app --reload
"""
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from ..config import DashboardConfig
from ..capabilities import run_all_checks
from ..contracts.base import AssetType
from ..contracts.records import Catalogue
from ..derivation import (
    ALL, ViewFilter, build_snapshot, derive_view, snapshot_to_csv, snapshot_to_json,
)
from ..observability import get_logger, setup_logger
from ..storage import CatalogueLoader, CatalogueSession
from .mapper import map_blog_detail, map_list_row


logger = get_logger(__name__)


def create_app(
    config: Optional[DashboardConfig] = None,
    loader: Optional[CatalogueLoader] = None,
    probe_transport: Optional[httpx.AsyncBaseTransport] = None
) -> FastAPI:
    """Build the API around one catalogue session."""
    config = config or DashboardConfig.from_env()
    setup_logger(level=config.log_level)
    session = CatalogueSession(loader or CatalogueLoader(config))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Loading catalogue from %s", config.data_source)
        session.reload()
        yield
        logger.info("Shutting down dashboard API")

    app = FastAPI(
        title="Blog Dashboard API",
        version="1.0.0",
        description="Read-only status board for the blog factory",
        lifespan=lifespan,
    )
    app.state.session = session
    app.state.config = config
    app.state.probe_transport = probe_transport

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["GET", "POST"],  # POST only re-reads the source
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check(request: Request):
        current = request.app.state.session
        return {
            "status": "online",
            "mode": "read-only",
            "catalogue": {
                "loaded": current.catalogue is not None,
                "error": current.error.to_dict() if current.error else None,
            },
        }

    @app.get("/api/v1/blogs")
    async def list_blogs(
        request: Request,
        status: str = ALL,
        health: str = ALL,
        q: str = "",
    ):
        catalogue = _require_catalogue(request)
        try:
            view_filter = ViewFilter.from_params(status=status, health=health, query=q)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=f"Invalid filter: {e}")

        rows = [map_list_row(blog, blog_health)
                for blog, blog_health in derive_view(catalogue.blogs, view_filter)]
        return {
            "schemaVersion": catalogue.schema_version,
            "total": len(catalogue.blogs),
            "count": len(rows),
            "blogs": rows,
        }

    @app.get("/api/v1/blogs/{blog_id}")
    async def get_blog(blog_id: str, request: Request):
        catalogue = _require_catalogue(request)
        blog = catalogue.find_blog(blog_id)
        if blog is None:
            raise HTTPException(status_code=404, detail=f"No blog with ID: {blog_id}")
        return map_blog_detail(blog)

    @app.get("/api/v1/blogs/{blog_id}/capabilities")
    async def get_capabilities(blog_id: str, request: Request):
        catalogue = _require_catalogue(request)
        blog = catalogue.find_blog(blog_id)
        if blog is None:
            raise HTTPException(status_code=404, detail=f"No blog with ID: {blog_id}")

        production_urls = [a.url for a in blog.assets_of_type(AssetType.PRODUCTION_SITE) if a.url]
        production_url = production_urls[0] if production_urls else None

        async with httpx.AsyncClient(
            timeout=request.app.state.config.http_timeout,
            headers={"User-Agent": request.app.state.config.user_agent},
            transport=request.app.state.probe_transport,
        ) as client:
            report = await run_all_checks(blog.domain, production_url, client=client)
        return {"blogId": blog.id, "checks": report.to_dict()}

    @app.get("/api/v1/export/snapshot.json")
    async def export_json(request: Request):
        catalogue = _require_catalogue(request)
        body = snapshot_to_json(build_snapshot(catalogue.blogs))
        return Response(
            content=body.encode("utf-8"),
            media_type="application/json; charset=utf-8",
            headers={"Content-Disposition": 'attachment; filename="blog-snapshot.json"'},
        )

    @app.get("/api/v1/export/snapshot.csv")
    async def export_csv(request: Request, quote: bool = False):
        catalogue = _require_catalogue(request)
        body = snapshot_to_csv(build_snapshot(catalogue.blogs), quote_fields=quote)
        return Response(
            content=body.encode("utf-8"),
            media_type="text/csv; charset=utf-8",
            headers={"Content-Disposition": 'attachment; filename="blog-snapshot.csv"'},
        )

    @app.post("/api/v1/catalogue/reload")
    async def reload_catalogue(request: Request):
        result = request.app.state.session.reload()
        if result.is_failure:
            logger.warning("Reload failed: %s", result.error.message)
            raise HTTPException(status_code=503, detail=result.error.message)
        logger.info("Catalogue reloaded (%d blogs)", len(result.value.blogs))
        return {"reloaded": True, "blogs": len(result.value.blogs)}

    return app


def _require_catalogue(request: Request) -> Catalogue:
    """Current catalogue, or 503 carrying the load error."""
    session: CatalogueSession = request.app.state.session
    result = session.ensure_loaded()
    if result.is_failure:
        raise HTTPException(status_code=503, detail=result.error.message)
    return result.value


app = create_app()
