"""Payload encoding/decoding helpers for trend chart model configurations.

The browser stores the chart configuration as a small JSON object and sends it
back with every trend request. The payload is untrusted and advisory: any
problem with it resolves to defaults instead of an error.
"""

from __future__ import annotations

import json
import logging
import math
import re
from typing import Any, Final

from analysis.trend_config_dto import (
    DEFAULT_BUILD_COUNT,
    DEFAULT_DAY_COUNT,
    DEFAULT_DOMAIN_AXIS_TYPE,
    AxisType,
    ChartModelConfiguration,
    create_default,
)

logger = logging.getLogger(__name__)

BUILD_AS_DOMAIN_PROPERTY: Final[str] = "buildAsDomain"
NUMBER_OF_BUILDS_PROPERTY: Final[str] = "numberOfBuilds"
NUMBER_OF_DAYS_PROPERTY: Final[str] = "numberOfDays"

_NUMERIC_TEXT: Final[re.Pattern[str]] = re.compile(r"[+-]?\d+(?:\.\d*)?", re.ASCII)


def from_payload(payload: str | bytes | None) -> ChartModelConfiguration:
    """Resolve a ChartModelConfiguration from an optional JSON payload.

    Args:
        payload: JSON object text, or None/empty to request defaults.

    Returns:
        ChartModelConfiguration with every property resolved independently.
        Malformed payloads resolve to `create_default()`.
    """

    node = _parse_payload(payload)
    if node is None:
        return create_default()
    return ChartModelConfiguration(
        axis_type=_resolve_axis_type(node),
        build_count=_resolve_count(node, NUMBER_OF_BUILDS_PROPERTY, DEFAULT_BUILD_COUNT),
        day_count=_resolve_count(node, NUMBER_OF_DAYS_PROPERTY, DEFAULT_DAY_COUNT),
    )


def encode_chart_model_configuration(config: ChartModelConfiguration) -> dict[str, Any]:
    """Encode a ChartModelConfiguration into the browser payload shape.

    Args:
        config: ChartModelConfiguration to encode.

    Returns:
        Dict payload safe for `json.dumps` and accepted by `from_payload`.
    """

    return {
        BUILD_AS_DOMAIN_PROPERTY: config.axis_type is AxisType.BUILD,
        NUMBER_OF_BUILDS_PROPERTY: config.build_count,
        NUMBER_OF_DAYS_PROPERTY: config.day_count,
    }


def _parse_payload(payload: str | bytes | None) -> dict[str, Any] | None:
    """Parse the payload into a JSON object, or None when defaults apply."""

    if payload is None:
        return None
    if isinstance(payload, bytes):
        try:
            payload = payload.decode("utf-8")
        except UnicodeDecodeError:
            logger.debug("Discarding chart configuration payload that is not UTF-8.")
            return None
    if not payload.strip():
        return None
    try:
        node = json.loads(payload, parse_constant=_reject_constant)
    except (ValueError, TypeError, RecursionError) as exc:
        logger.debug("Discarding malformed chart configuration payload: %s", exc)
        return None
    if not isinstance(node, dict):
        logger.debug("Discarding chart configuration payload of type %s.", type(node).__name__)
        return None
    return node


def _reject_constant(name: str) -> Any:
    """Reject the non-standard `NaN`/`Infinity` literals accepted by `json`."""

    raise ValueError(f"Unsupported JSON constant: {name}")


def _resolve_axis_type(node: dict[str, Any]) -> AxisType:
    """Resolve the domain axis type from the `buildAsDomain` property."""

    if BUILD_AS_DOMAIN_PROPERTY not in node:
        return DEFAULT_DOMAIN_AXIS_TYPE
    if _coerce_bool(node[BUILD_AS_DOMAIN_PROPERTY], default=True):
        return AxisType.BUILD
    return AxisType.DATE


def _resolve_count(node: dict[str, Any], prop: str, default: int) -> int:
    """Resolve a count property; values <= 1 fall back to the default."""

    if prop not in node:
        return default
    value = _coerce_int(node[prop], default=default)
    if value > 1:
        return value
    return default


def _coerce_bool(value: object, *, default: bool) -> bool:
    """Best-effort bool coercion for payload values."""

    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        normalized = value.strip()
        if normalized == "true":
            return True
        if normalized == "false":
            return False
    return default


def _coerce_int(value: object, *, default: int) -> int:
    """Best-effort int coercion for payload values."""

    if isinstance(value, bool):
        return 1 if value else 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else default
    if isinstance(value, str):
        text = value.strip()
        if not _NUMERIC_TEXT.fullmatch(text):
            return default
        try:
            return int(text.split(".", 1)[0])
        except ValueError:
            # digit count above sys.get_int_max_str_digits()
            return default
    return default
