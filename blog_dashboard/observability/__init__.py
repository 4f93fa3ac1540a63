"""
Observability Layer

RESPONSIBILITY: Logging for the loader, probes, API and CLI
OUTPUTS: Configured standard-library loggers

WHAT THIS LAYER MUST NOT DO:
============================
- Modify system behavior
- Be called from the derivation engine (pure functions do not log)
"""

from __future__ import annotations
from typing import Optional
import logging
import os


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_LEVEL_ENV = "BLOG_DASHBOARD_LOG_LEVEL"
ROOT_LOGGER_NAME = "blog_dashboard"


def setup_logger(name: Optional[str] = None, level: Optional[str] = None) -> logging.Logger:
    """
    Get or create a configured logger.

    Usage:
        from blog_dashboard.observability import get_logger
        logger = get_logger(__name__)
        logger.info("Message here")

    Handlers are attached once, to the package root logger; child
    loggers propagate to it.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)

    if not root.handlers:
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(console)
        root.setLevel(_resolve_level(level))
    elif level:
        root.setLevel(_resolve_level(level))

    return logging.getLogger(name or ROOT_LOGGER_NAME)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Alias for setup_logger for convenience."""
    return setup_logger(name)


def _resolve_level(level: Optional[str]) -> int:
    name = (level or os.environ.get(LOG_LEVEL_ENV, "INFO")).upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO
