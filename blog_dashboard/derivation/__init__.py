"""
Derivation Engine

RESPONSIBILITY: Turn immutable Blog records into derived state
ALLOWED INPUTS: Blog / Asset records from a loaded Catalogue
OUTPUTS: BlogHealth, SectionCompleteness, ranked views, snapshots

WHAT THIS LAYER MUST NOT DO:
============================
- Perform I/O or logging
- Mutate or cache anything between calls
- Consult capability probe results
"""

from .health import derive_health, BAD_STATUSES, STATUS_COUNTS_AS_MISSING
from .completeness import derive_section_completeness, STATUS_COUNTS_AS_VERIFIED
from .ranking import health_rank, HEALTH_RANKS, UNKNOWN_RANK
from .view import ViewFilter, derive_view, display_name_key, ALL
from .snapshot import (
    build_snapshot, snapshot_to_csv, snapshot_to_json, snapshot_row,
    CSV_HEADERS, CSV_DELIMITER,
)

__all__ = [
    'derive_health', 'BAD_STATUSES', 'STATUS_COUNTS_AS_MISSING',
    'derive_section_completeness', 'STATUS_COUNTS_AS_VERIFIED',
    'health_rank', 'HEALTH_RANKS', 'UNKNOWN_RANK',
    'ViewFilter', 'derive_view', 'display_name_key', 'ALL',
    'build_snapshot', 'snapshot_to_csv', 'snapshot_to_json', 'snapshot_row',
    'CSV_HEADERS', 'CSV_DELIMITER',
]
