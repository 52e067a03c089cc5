"""Configuration management for pathgraph.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Cleanup tolerances applied before normalization
- ProcessingConfig: Document processing settings
- LoggingConfig: Logging settings
- PathGraphSettings: Main application settings
"""

from pathgraph.config.settings import (
    GeometryConfig,
    LoggingConfig,
    PathGraphSettings,
    ProcessingConfig,
    get_default_settings,
)

__all__ = [
    "GeometryConfig",
    "LoggingConfig",
    "PathGraphSettings",
    "ProcessingConfig",
    "get_default_settings",
]
