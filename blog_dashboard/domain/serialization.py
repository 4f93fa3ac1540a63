import json
from datetime import datetime
from enum import Enum
from typing import Any

from ..contracts.base import to_iso


class DashboardEncoder(json.JSONEncoder):
    """
    JSON Encoder for exported dashboard data.

    RULES:
    1. Datetimes MUST be ISO 8601 strings (UTC, 'Z' suffix).
    2. Enums MUST use their .value.
    3. Records with to_dict() use it, so exported keys match the catalogue.
    """

    def default(self, obj: Any) -> Any:
        if isinstance(obj, datetime):
            return to_iso(obj)
        if isinstance(obj, Enum):
            return obj.value
        if hasattr(obj, "to_dict"):
            return obj.to_dict()

        return super().default(obj)


def dumps_pretty(payload: Any) -> str:
    """Pretty-printed (2-space) JSON, non-ASCII kept as UTF-8 text."""
    return json.dumps(payload, cls=DashboardEncoder, indent=2, ensure_ascii=False)
