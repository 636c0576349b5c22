"""Utility functions for atlascpp.

This module provides utility functions including:

- Logging setup and configuration
- Export statistics tracking
"""

from atlascpp.utils.logging import (
    ExportLogger,
    ExportStats,
    configure_logging,
)

__all__ = [
    "ExportLogger",
    "ExportStats",
    "configure_logging",
]
