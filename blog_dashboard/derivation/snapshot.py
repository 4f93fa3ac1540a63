"""
Snapshot Builder and Serializers

Builds exportable snapshots of dashboard state.
All data is derived, nothing stored.

CSV FORMAT:
===========
- Header: eight fixed columns
- One row per snapshot, same column order, joined by ','
- Completeness pairs rendered as "verified/total"
- Lines joined by '\\n', no trailing newline
- Values are NOT escaped by default: a value containing ',' yields a
  row with extra cells. quote_fields=True applies RFC 4180 quoting.
"""

from __future__ import annotations
from typing import Iterable, List, Sequence, Tuple
import csv
import io

from ..contracts.base import AssetCategory
from ..contracts.records import Blog
from ..contracts.derived import BlogSnapshot
from ..domain.serialization import dumps_pretty
from .completeness import derive_section_completeness
from .health import derive_health


CSV_DELIMITER = ","

CSV_HEADERS: Tuple[str, ...] = (
    "Domain",
    "Name",
    "Status",
    "Health",
    "Critical Missing",
    "Important Missing",
    "Internal Verified",
    "External Verified",
)


def build_snapshot(blogs: Iterable[Blog]) -> Tuple[BlogSnapshot, ...]:
    """One snapshot per blog, in input order."""
    snapshots = []
    for blog in blogs:
        health = derive_health(blog)
        snapshots.append(BlogSnapshot(
            id=blog.id,
            domain=blog.domain,
            display_name=blog.display_name,
            status=blog.status,
            health=health.level,
            missing_critical=health.missing.critical,
            missing_important=health.missing.important,
            internal=derive_section_completeness(blog.assets, AssetCategory.INTERNAL),
            external=derive_section_completeness(blog.assets, AssetCategory.EXTERNAL),
            distribution=derive_section_completeness(blog.assets, AssetCategory.DISTRIBUTION),
        ))
    return tuple(snapshots)


def snapshot_row(snapshot: BlogSnapshot) -> List[str]:
    """Cells of one CSV row, in CSV_HEADERS order."""
    return [
        snapshot.domain,
        snapshot.display_name,
        snapshot.status.value,
        snapshot.health.value,
        str(snapshot.missing_critical),
        str(snapshot.missing_important),
        snapshot.internal.to_ratio_string(),
        snapshot.external.to_ratio_string(),
    ]


def snapshot_to_csv(snapshots: Sequence[BlogSnapshot], quote_fields: bool = False) -> str:
    rows = [list(CSV_HEADERS)] + [snapshot_row(s) for s in snapshots]

    if not quote_fields:
        return "\n".join(CSV_DELIMITER.join(row) for row in rows)

    buffer = io.StringIO()
    writer = csv.writer(
        buffer,
        delimiter=CSV_DELIMITER,
        lineterminator="\n",
        quoting=csv.QUOTE_MINIMAL,
    )
    writer.writerows(rows)
    return buffer.getvalue().rstrip("\n")


def snapshot_to_json(snapshots: Sequence[BlogSnapshot]) -> str:
    """Pretty-printed JSON array of snapshot records."""
    return dumps_pretty(list(snapshots))
