"""Config module.

This module provides configuration management functionality.
"""

from smartcare_billing.config.manager import load_config
from smartcare_billing.config.schema import (
    Config,
    DisplayConfig,
    LoggingConfig,
    SessionConfig,
)

__all__ = [
    # Main configuration loading
    "load_config",
    # Configuration models
    "Config",
    "DisplayConfig",
    "SessionConfig",
    "LoggingConfig",
]
