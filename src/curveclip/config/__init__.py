"""Configuration management for curveclip.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- OutlineConfig: Placement, redraw flag and degenerate-input policy
- RenderConfig: Flattening tolerance and SVG output settings
- LoggingConfig: Logging settings
- CurveClipSettings: Main application settings
"""

from curveclip.config.settings import (
    CurveClipSettings,
    LoggingConfig,
    OutlineConfig,
    RenderConfig,
    get_default_settings,
)

__all__ = [
    "CurveClipSettings",
    "LoggingConfig",
    "OutlineConfig",
    "RenderConfig",
    "get_default_settings",
]
