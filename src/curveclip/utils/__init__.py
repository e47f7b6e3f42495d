"""Utility functions for curveclip.

This module provides:

- Logging setup and configuration
- Build statistics tracking
"""

from curveclip.utils.logging import (
    BuildLogger,
    BuildStats,
    configure_logging,
)

__all__ = [
    "BuildLogger",
    "BuildStats",
    "configure_logging",
]
