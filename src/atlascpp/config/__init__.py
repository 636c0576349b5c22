"""Configuration management for atlascpp.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- ContractConfig: Names of the companion artifacts the emitted source refers to
- ExportConfig: Export behaviour settings
- LoggingConfig: Logging settings
- AtlasCppSettings: Main application settings
"""

from atlascpp.config.settings import (
    AtlasCppSettings,
    ContractConfig,
    ExportConfig,
    LoggingConfig,
    get_default_settings,
)

__all__ = [
    "AtlasCppSettings",
    "ContractConfig",
    "ExportConfig",
    "LoggingConfig",
    "get_default_settings",
]
