"""
Runtime Configuration Module

Provides configuration loading and management for hashtree.
"""

from .runtime import (
    RuntimeConfig,
    TreeConfig,
    LoggingConfig,
    get_default_config,
    set_default_config,
)

__all__ = [
    "RuntimeConfig",
    "TreeConfig",
    "LoggingConfig",
    "get_default_config",
    "set_default_config",
]
