"""
Filter/Sort Pipeline
====================

Deterministic selection and ordering of blogs for the list view.
Input: Blogs + ViewFilter -> Output: ordered (Blog, BlogHealth) pairs

RULES:
======
1. Inclusion = status match AND health match AND domain substring match
2. Order = severity rank ascending (risk first), then display name
3. Sort is stable: fully equal keys keep input order
4. The input collection is never mutated; same inputs = same output
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple
import unicodedata

from ..contracts.base import BlogStatus, HealthLevel
from ..contracts.records import Blog
from ..contracts.derived import BlogHealth
from .health import derive_health
from .ranking import health_rank


ALL = "all"

RankedBlog = Tuple[Blog, BlogHealth]


@dataclass(frozen=True)
class ViewFilter:
    """
    Filter parameters for the list view.
    None means "all" for status and health; empty query means no filter.
    """
    status: Optional[BlogStatus] = None
    health: Optional[HealthLevel] = None
    query: str = ""

    @classmethod
    def from_params(
        cls,
        status: str = ALL,
        health: str = ALL,
        query: str = ""
    ) -> 'ViewFilter':
        """
        Parse the string form used by the API and CLI.

        Raises ValueError for values outside the known enumerations.
        """
        return cls(
            status=None if status in (ALL, "", None) else BlogStatus(status),
            health=None if health in (ALL, "", None) else HealthLevel(health),
            query=query or "",
        )

    def matches(self, blog: Blog, health: BlogHealth) -> bool:
        if self.status is not None and blog.status != self.status:
            return False
        if self.health is not None and health.level != self.health:
            return False
        if self.query and self.query.casefold() not in blog.domain.casefold():
            return False
        return True


def display_name_key(name: str) -> Tuple[str, str]:
    """
    Collation key for display names.

    Primary: accents stripped and case folded, so "Ébène" sorts with "ebene".
    Secondary: the exact name, so distinct names never compare equal.
    """
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base.casefold(), name)


def derive_view(
    blogs: Iterable[Blog],
    view_filter: Optional[ViewFilter] = None
) -> Tuple[RankedBlog, ...]:
    """Filter and order blogs; health is derived once per blog."""
    view_filter = view_filter or ViewFilter()

    selected = []
    for blog in blogs:
        health = derive_health(blog)
        if view_filter.matches(blog, health):
            selected.append((blog, health))

    selected.sort(key=lambda pair: (
        health_rank(pair[1].level),
        display_name_key(pair[0].display_name),
    ))
    return tuple(selected)
