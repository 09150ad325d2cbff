"""Logging configuration and logger factory for SmartCare Billing.

This module provides centralized logging configuration with support for:
- Console and file handlers with different log levels
- Log rotation to prevent unbounded file growth
- PII redaction via custom formatters
- Environment variable configuration
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

from .formatters import PIIRedactingFormatter

# Constants
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LOG_FILE = Path("logs") / "smartcare-billing.log"
MAX_LOG_FILE_SIZE = 10 * 1024 * 1024  # 10MB
BACKUP_COUNT = 5
AUDIT_LOGGER_NAME = "smartcare_billing.logging_audit.audit"

# Track if logging has been configured, and the handlers it installed
_logging_configured = False
_installed_handlers: List[logging.Handler] = []

logger = logging.getLogger(__name__)


def configure_logging(
    level: str = "WARNING",
    log_file: Optional[Path] = None,
    redact_pii: bool = False,
) -> None:
    """Configure logging for SmartCare Billing.
    
    Sets up both console and file handlers. The console handler uses the
    requested level so that log output does not interleave with the
    interactive menus; the file handler always records DEBUG and above.
    Audit events are written to the file handler only.
    This function is idempotent - it can be called multiple times safely.
    
    Args:
        level: Log level for console output (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Path to log file. If None, uses SMARTCARE_LOG_FILE
                 environment variable if set, else DEFAULT_LOG_FILE.
        redact_pii: Whether to redact patient names from logs
        
    Raises:
        ValueError: If invalid log level is provided
        RuntimeError: If log directory cannot be created
        
    Example:
        >>> configure_logging(level="DEBUG", redact_pii=True)
        >>> configure_logging(level="INFO", log_file=Path("custom/billing.log"))
    """
    global _logging_configured, _installed_handlers
    
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(
            f"Invalid log level: {level}. "
            f"Must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL"
        )
    
    if log_file is None:
        env_log_file = os.environ.get("SMARTCARE_LOG_FILE")
        log_file = Path(env_log_file) if env_log_file else DEFAULT_LOG_FILE
    
    log_dir = log_file.parent
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except (OSError, PermissionError) as e:
        raise RuntimeError(
            f"Failed to create log directory: {log_dir}. "
            f"Ensure write permissions are available. Error: {e}"
        ) from e
    
    root_logger = logging.getLogger()
    
    # Reconfiguring replaces our handlers instead of stacking duplicates
    if _logging_configured:
        for handler in _installed_handlers:
            root_logger.removeHandler(handler)
            handler.close()
    _installed_handlers = []
    
    root_logger.setLevel(logging.DEBUG)
    
    formatter = PIIRedactingFormatter(fmt=DEFAULT_LOG_FORMAT, redact_pii=redact_pii)
    
    console_handler = logging.StreamHandler()
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(_exclude_audit_records)
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)
    
    try:
        file_handler = RotatingFileHandler(
            filename=str(log_file),
            maxBytes=MAX_LOG_FILE_SIZE,
            backupCount=BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)
    except (OSError, PermissionError) as e:
        root_logger.warning(
            f"Failed to create file handler for {log_file}: {e}. "
            f"Logging to console only."
        )
    
    _logging_configured = True
    logger.debug(f"Logging configured: console={level.upper()}, file={log_file}")


def get_logger(module_name: str) -> logging.Logger:
    """Get a logger for the specified module.
    
    Args:
        module_name: Name of the module, typically __name__
        
    Returns:
        Logger instance for the module
    """
    return logging.getLogger(module_name)


def _exclude_audit_records(record: logging.LogRecord) -> bool:
    # Audit lines belong to the log file, the console shows user messages
    return record.name != AUDIT_LOGGER_NAME
