"""Views exposing trend chart configuration resolution to the browser."""

from __future__ import annotations

import logging
from typing import Any

from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from analysis.trend_config_dto import ChartModelConfiguration
from core.charting.config_codec import encode_chart_model_configuration, from_payload

logger = logging.getLogger(__name__)

CONFIGURATION_PARAM = "configuration"


@csrf_exempt
@require_http_methods(["GET", "POST"])
def trend_configuration_api(request: HttpRequest) -> JsonResponse:
    """Return the resolved trend chart configuration as JSON.

    GET reads the JSON payload from the `configuration` query parameter; POST
    reads it from the request body. Missing or malformed payloads resolve to
    the default configuration.
    """

    if request.method == "POST":
        payload: str | bytes | None = request.body
    else:
        payload = request.GET.get(CONFIGURATION_PARAM)
    config = from_payload(payload)
    logger.debug("Resolved trend chart configuration: %s", config)
    return JsonResponse(_configuration_as_json(config))


def _configuration_as_json(config: ChartModelConfiguration) -> dict[str, Any]:
    return {
        "axisType": str(config.get_axis_type()),
        "buildCount": config.get_build_count(),
        "buildCountDefined": config.is_build_count_defined(),
        "dayCount": config.get_day_count(),
        "dayCountDefined": config.is_day_count_defined(),
        "configuration": encode_chart_model_configuration(config),
    }
