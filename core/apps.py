"""App configuration for the core Django app."""

from __future__ import annotations

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Configuration for the `core` app, which serves trend chart configuration."""

    name = "core"
    verbose_name = "Trend chart configuration"
