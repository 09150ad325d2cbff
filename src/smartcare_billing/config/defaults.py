"""Default configuration values.

This module defines the default configuration values used when no configuration
file is provided or when configuration values are not specified.
"""

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {
    "display": {
        # Banner width in characters
        "width": 55,
        "currency_symbol": "$",
        # Clear the terminal between screens
        "clear_screen": True,
    },
    "session": {
        # Patient ids are assigned sequentially from here
        "first_patient_id": 5001,
        # End the run on malformed numeric input, false returns to the menu
        "abort_on_invalid_input": True,
    },
    "logging": {
        # Console stays quiet below WARNING so logs don't interleave with menus
        "level": "WARNING",
        "log_file": "logs/smartcare-billing.log",
        "redact_pii": False,
    },
}

# Default configuration file path
DEFAULT_CONFIG_PATH = "config/config.json"
