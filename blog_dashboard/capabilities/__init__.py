"""
Capability Checks

Read-only detection of external platform presence.

HARD RULES:
===========
- Never runs automatically
- Never blocks derivation (engine never awaits or reads these)
- Never changes assets or the catalogue
- Results are display-only

Search Console and Analytics checks are manual placeholders.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
import asyncio

import httpx

from ..contracts.base import to_iso, utc_now
from ..observability import get_logger


logger = get_logger(__name__)

DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class CapabilityCheckResult:
    """Outcome of one probe. A failed probe is a result, not an exception."""
    detected: bool
    checked_at: datetime
    notes: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            'detected': self.detected,
            'checkedAt': to_iso(self.checked_at),
            'notes': self.notes,
        }


@dataclass(frozen=True)
class CapabilityReport:
    """All probes run for one blog."""
    production_site: CapabilityCheckResult
    google_search_console: CapabilityCheckResult
    google_analytics: CapabilityCheckResult

    def to_dict(self) -> dict:
        return {
            'productionSite': self.production_site.to_dict(),
            'googleSearchConsole': self.google_search_console.to_dict(),
            'googleAnalytics': self.google_analytics.to_dict(),
        }


async def check_production_site(
    url: str,
    client: Optional[httpx.AsyncClient] = None,
    timeout: float = DEFAULT_TIMEOUT
) -> CapabilityCheckResult:
    """HEAD request: is the production site reachable?"""
    try:
        if client is not None:
            response = await client.head(url, follow_redirects=True)
        else:
            async with httpx.AsyncClient(timeout=timeout) as own_client:
                response = await own_client.head(url, follow_redirects=True)
    except (httpx.HTTPError, httpx.InvalidURL, TypeError) as e:
        logger.debug("Production site probe failed for %s: %s", url, e)
        return CapabilityCheckResult(
            detected=False,
            checked_at=utc_now(),
            notes="Site unreachable",
        )

    logger.debug("Production site probe %s -> %d", url, response.status_code)
    return CapabilityCheckResult(
        detected=True,
        checked_at=utc_now(),
        notes=f"Site responded ({response.status_code})",
    )


async def check_google_search_console(domain: str) -> CapabilityCheckResult:
    return CapabilityCheckResult(
        detected=False,
        checked_at=utc_now(),
        notes=f"Manual verification required for {domain}",
    )


async def check_google_analytics(domain: str) -> CapabilityCheckResult:
    return CapabilityCheckResult(
        detected=False,
        checked_at=utc_now(),
        notes=f"Manual verification required for {domain}",
    )


async def run_all_checks(
    domain: str,
    production_url: Optional[str] = None,
    client: Optional[httpx.AsyncClient] = None,
    timeout: float = DEFAULT_TIMEOUT
) -> CapabilityReport:
    """Run every probe for one blog concurrently."""
    if production_url:
        site_check = check_production_site(production_url, client=client, timeout=timeout)
    else:
        site_check = _not_configured()

    production_site, search_console, analytics = await asyncio.gather(
        site_check,
        check_google_search_console(domain),
        check_google_analytics(domain),
    )
    return CapabilityReport(
        production_site=production_site,
        google_search_console=search_console,
        google_analytics=analytics,
    )


async def _not_configured() -> CapabilityCheckResult:
    return CapabilityCheckResult(
        detected=False,
        checked_at=utc_now(),
        notes="No production URL configured",
    )


__all__ = [
    'CapabilityCheckResult', 'CapabilityReport',
    'check_production_site', 'check_google_search_console',
    'check_google_analytics', 'run_all_checks',
]
