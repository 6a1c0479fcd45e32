"""Pure analysis package for trendcharts.

This package contains deterministic, testable value types that operate on
in-memory inputs. It must not import Django or perform any I/O.
"""

from .trend_config_dto import AxisType, ChartModelConfiguration, create, create_default

__all__ = ["AxisType", "ChartModelConfiguration", "create", "create_default"]
