"""
Shared utilities for SVG switch processing.

This package aggregates common building blocks consumed by the
conditional processing package:

- config: Settings via pydantic-settings
- logging: Structured logging with element correlation
- errors: Canonical error types and responses

Do not import from svg_switch into shared/.
"""
