"""DTO schema for trend chart model configurations.

A trend chart plots one point per build. The configuration decides which
points are kept:
- how many of the most recent builds are shown,
- how many days of history are shown,
- whether the domain axis is indexed by build number or by calendar date.

Counts are stored exactly as given. Whether a count should be applied is a
derived query, not a constructor-time check.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Final


class AxisType(StrEnum):
    """Type of the domain (X) axis of a trend chart."""

    BUILD = "build"
    DATE = "date"


DEFAULT_BUILD_COUNT: Final[int] = 50
DEFAULT_DAY_COUNT: Final[int] = 0
DEFAULT_DOMAIN_AXIS_TYPE: Final[AxisType] = AxisType.BUILD


@dataclass(frozen=True, slots=True)
class ChartModelConfiguration:
    """Immutable configuration of a trend chart model.

    Args:
        axis_type: Indexing scheme of the domain axis.
        build_count: Maximum number of most-recent builds to include.
        day_count: Maximum number of days of history to include.
    """

    axis_type: AxisType = DEFAULT_DOMAIN_AXIS_TYPE
    build_count: int = DEFAULT_BUILD_COUNT
    day_count: int = DEFAULT_DAY_COUNT

    def get_axis_type(self) -> AxisType:
        """Return the type of the domain axis."""

        return self.axis_type

    def get_build_count(self) -> int:
        """Return the number of builds to consider."""

        return self.build_count

    def is_build_count_defined(self) -> bool:
        """Return True when the build count limit should be applied."""

        return self.build_count > 1

    def get_day_count(self) -> int:
        """Return the number of days to consider."""

        return self.day_count

    def is_day_count_defined(self) -> bool:
        """Return True when the day count limit should be applied."""

        return self.day_count > 0


def create_default() -> ChartModelConfiguration:
    """Return the default configuration (build axis, 50 builds, no day limit)."""

    return ChartModelConfiguration()


def create(
    axis_type: AxisType,
    build_count: int = DEFAULT_BUILD_COUNT,
    day_count: int = DEFAULT_DAY_COUNT,
) -> ChartModelConfiguration:
    """Create a configuration for the given axis type.

    Args:
        axis_type: Indexing scheme of the domain axis.
        build_count: Number of builds to consider; stored without validation.
        day_count: Number of days to consider; stored without validation.

    Returns:
        ChartModelConfiguration holding the given values.
    """

    return ChartModelConfiguration(axis_type=axis_type, build_count=build_count, day_count=day_count)
