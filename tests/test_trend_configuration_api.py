"""Tests for the trend configuration JSON endpoint."""

from __future__ import annotations

import json

import pytest
from django.urls import reverse

pytestmark = pytest.mark.integration


def test_trend_configuration_api_returns_defaults_without_payload(client) -> None:
    """A request without a configuration resolves to the default configuration."""

    response = client.get(reverse("core:trend_configuration_api"))

    assert response.status_code == 200
    assert response.json() == {
        "axisType": "build",
        "buildCount": 50,
        "buildCountDefined": True,
        "dayCount": 0,
        "dayCountDefined": False,
        "configuration": {"buildAsDomain": True, "numberOfBuilds": 50, "numberOfDays": 0},
    }


def test_trend_configuration_api_resolves_query_parameter(client) -> None:
    payload = json.dumps({"buildAsDomain": False, "numberOfDays": 14, "ignored": "x"})

    response = client.get(reverse("core:trend_configuration_api"), {"configuration": payload})

    assert response.status_code == 200
    data = response.json()
    assert data["axisType"] == "date"
    assert data["buildCount"] == 50
    assert data["dayCount"] == 14
    assert data["dayCountDefined"] is True
    assert data["configuration"] == {"buildAsDomain": False, "numberOfBuilds": 50, "numberOfDays": 14}


def test_trend_configuration_api_treats_malformed_payload_as_defaults(client) -> None:
    response = client.get(reverse("core:trend_configuration_api"), {"configuration": "not json"})

    assert response.status_code == 200
    assert response.json()["axisType"] == "build"
    assert response.json()["buildCount"] == 50
    assert response.json()["dayCount"] == 0


def test_trend_configuration_api_resolves_post_body(client) -> None:
    response = client.post(
        reverse("core:trend_configuration_api"),
        data=json.dumps({"numberOfBuilds": 10}),
        content_type="application/json",
    )

    assert response.status_code == 200
    assert response.json()["buildCount"] == 10
    assert response.json()["buildCountDefined"] is True


def test_trend_configuration_api_rejects_other_methods(client) -> None:
    response = client.delete(reverse("core:trend_configuration_api"))

    assert response.status_code == 405
