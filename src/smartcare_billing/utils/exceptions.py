"""Custom exception classes for SmartCare Billing.

All exceptions inherit from SmartCareBillingError to allow catching all custom exceptions.
"""

from typing import Optional


class SmartCareBillingError(Exception):
    """Base exception for all SmartCare Billing custom exceptions."""

    pass


class ValidationError(SmartCareBillingError):
    """Raised when data validation fails.
    
    Examples:
        - Non-numeric days admitted
        - Non-numeric room rate or consultation fee
    """

    pass


class InvalidInputError(ValidationError):
    """Raised when console input cannot be converted to the expected type.
    
    Attributes:
        field: Human-readable name of the field being read
        raw_value: The text that failed conversion
        
    Example:
        >>> raise InvalidInputError("Days Admitted", "three")
    """

    def __init__(self, field: str, raw_value: Optional[str], expected: str = "number") -> None:
        self.field = field
        self.raw_value = raw_value
        self.expected = expected
        super().__init__(
            f"Invalid value for '{field}': {raw_value!r}. Expected a valid {expected}."
        )


class ConfigurationError(SmartCareBillingError):
    """Raised when configuration loading or validation fails.
    
    Examples:
        - Invalid configuration file format
        - Configuration value out of range
        - Malformed environment variable override
    """

    pass
