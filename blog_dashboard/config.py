"""
Dashboard Configuration

Single configuration object shared by the loader, probes, API and CLI.
Environment variables override defaults via DashboardConfig.from_env().
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Mapping, Optional
import os


DATA_SOURCE_ENV = "BLOG_DASHBOARD_DATA"
HTTP_TIMEOUT_ENV = "BLOG_DASHBOARD_HTTP_TIMEOUT"
LOG_LEVEL_ENV = "BLOG_DASHBOARD_LOG_LEVEL"

DEFAULT_DATA_SOURCE = os.path.join("data", "blogs.json")


@dataclass(frozen=True)
class DashboardConfig:
    """Where the catalogue lives and how to reach external systems."""
    data_source: str = DEFAULT_DATA_SOURCE   # File path or http(s) URL
    http_timeout: float = 10.0               # Seconds, catalogue fetch and probes
    user_agent: str = "BlogDashboard/1.0"
    log_level: str = "INFO"

    def __post_init__(self):
        if not self.data_source:
            raise ValueError("data_source must be a non-empty string")
        if self.http_timeout <= 0:
            raise ValueError("http_timeout must be positive")

    @property
    def is_remote(self) -> bool:
        return self.data_source.startswith(("http://", "https://"))

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'DashboardConfig':
        environ = os.environ if environ is None else environ
        return cls(
            data_source=environ.get(DATA_SOURCE_ENV, DEFAULT_DATA_SOURCE),
            http_timeout=float(environ.get(HTTP_TIMEOUT_ENV, "10.0")),
            log_level=environ.get(LOG_LEVEL_ENV, "INFO"),
        )
