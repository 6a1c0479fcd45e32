"""Trend chart configuration helpers.

Trend charts are driven by a `ChartModelConfiguration` resolved from the JSON
payload the browser sends. This package contains the payload codec used by the
configuration view.
"""
