"""Custom log formatters for SmartCare Billing.

This module provides specialized formatters for logging, including PII redaction.
"""

import logging
import re
from typing import List, Tuple


class PIIRedactingFormatter(logging.Formatter):
    """Custom formatter that redacts patient names from log messages.
    
    Billing log lines carry patient names in two places: ``name=...`` fields
    of audit events and the ``generated for <name>`` tail of bill
    notifications. Both are replaced when redaction is enabled.
    
    Attributes:
        redact_pii: Whether to enable PII redaction
        patterns: List of (regex_pattern, replacement_text) tuples for redaction
        
    Example:
        >>> formatter = PIIRedactingFormatter(
        ...     fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        ...     redact_pii=True
        ... )
        >>> handler = logging.StreamHandler()
        >>> handler.setFormatter(formatter)
    """
    
    def __init__(
        self,
        fmt: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt: str | None = None,
        redact_pii: bool = False,
    ) -> None:
        """Initialize the PIIRedactingFormatter.
        
        Args:
            fmt: Log message format string
            datefmt: Date format string (optional)
            redact_pii: Whether to enable PII redaction
        """
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.redact_pii = redact_pii
        
        self.patterns: List[Tuple[re.Pattern[str], str]] = [
            # Audit fields: name=Asha Rao | next_field=...
            (re.compile(r'name=[^|\n]*?(?=\s*\||$)', re.MULTILINE), 'name=[NAME-REDACTED]'),
            
            # Notification text: "Bill of $50.00 generated for Asha Rao"
            (re.compile(r'(generated for )[^|\n]*'), r'\1[NAME-REDACTED]'),
        ]
    
    def format(self, record: logging.LogRecord) -> str:
        """Format the log record with optional PII redaction.
        
        Args:
            record: Log record to format
            
        Returns:
            Formatted log message with PII redacted if enabled
        """
        original = super().format(record)
        
        if self.redact_pii:
            for pattern, replacement in self.patterns:
                original = pattern.sub(replacement, original)
        
        return original
