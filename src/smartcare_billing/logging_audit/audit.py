"""Audit trail functionality for SmartCare Billing.

This module provides structured audit logging for billing outcomes. Audit
events are log lines only; nothing is persisted beyond the configured log
handlers.
"""

import time
import uuid
from typing import Any, Dict

from .logger import get_logger

logger = get_logger(__name__)

# Standard fields, emitted first and in this order
FIELD_ORDER = [
    "status",
    "patient_id",
    "patient_type",
    "strategy",
    "base_charge",
    "final_charge",
    "error_message",
    "correlation_id",
]


def log_audit_event(event_type: str, details: Dict[str, Any]) -> str:
    """Log an audit trail event.
    
    Creates a structured audit log entry. Events are logged at INFO level
    unless ``details["status"]`` is ``"failure"``, in which case ERROR is used.
    
    Args:
        event_type: Type of operation (e.g., "BILL_GENERATED", "ADMISSION_FAILED",
                   "SESSION_STARTED", "SESSION_ENDED")
        details: Dictionary with event details. Common fields include:
                - status: "success" or "failure"
                - patient_id: Patient identifier
                - name: Patient name (redacted by PIIRedactingFormatter)
                - base_charge / final_charge: Money values
                - error_message: Error details (if status is failure)
                
    Returns:
        The formatted audit message
                
    Example:
        >>> log_audit_event("BILL_GENERATED", {
        ...     "status": "success",
        ...     "patient_id": 5001,
        ...     "final_charge": "420.00",
        ... })
    """
    details = dict(details)
    details.setdefault("timestamp", time.time())
    details.setdefault("correlation_id", str(uuid.uuid4()))
    
    message_parts = [f"AUDIT [{event_type}]"]
    
    for field in FIELD_ORDER:
        if field in details:
            message_parts.append(f"{field}={details[field]}")
    
    for key, value in details.items():
        if key not in FIELD_ORDER and key != "timestamp":
            message_parts.append(f"{key}={value}")
    
    audit_message = " | ".join(message_parts)
    
    if details.get("status") == "failure":
        logger.error(audit_message)
    else:
        logger.info(audit_message)
    
    return audit_message
