"""
Base Model

Shared pydantic configuration for dashboard records. Upstream payloads use
camelCase keys; models accept either camelCase or snake_case on input and
serialize back to camelCase for presentation.
"""

import math
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DashboardModel(BaseModel):
    """Base class for all dashboard records."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_payload(self) -> dict[str, Any]:
        """Serialize to a camelCase JSON-compatible dictionary."""
        return self.model_dump(by_alias=True, mode="json")


def coerce_points(value: Any) -> int | float:
    """
    Coerce a raw points value to a number.

    Absent, non-numeric, boolean and non-finite values count as 0.

    Args:
        value: Raw value from an upstream record

    Returns:
        Numeric points value
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    return value


def coerce_stat(value: Any) -> int:
    """
    Coerce a raw counting stat (goals, wins, rank) to an int.

    Absent, boolean, non-numeric and non-finite values count as 0.
    Whole-number strings such as ``"3"`` are accepted.
    """
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return 0
    return int(coerce_points(value))
