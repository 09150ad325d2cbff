"""Conversion of console text into billing values.

Surrounding whitespace is ignored. Anything else that is not a plain number
raises InvalidInputError so the caller can decide whether to abandon the
current admission or the whole session.
"""

from decimal import Decimal, InvalidOperation
from typing import Optional

from smartcare_billing.utils.exceptions import InvalidInputError


def parse_days(raw: Optional[str], field: str = "Days Admitted") -> int:
    """Convert text to a whole number of days.

    Args:
        raw: Text as typed
        field: Field name used in the error message

    Returns:
        Parsed integer

    Raises:
        InvalidInputError: If raw is not an integer

    Example:
        >>> parse_days(" 3 ")
        3
    """
    if raw is None:
        raise InvalidInputError(field, raw, "whole number")
    try:
        return int(raw.strip())
    except ValueError:
        raise InvalidInputError(field, raw, "whole number") from None


def parse_amount(raw: Optional[str], field: str) -> Decimal:
    """Convert text to a monetary amount.

    NaN and infinity are rejected along with non-numeric text.

    Args:
        raw: Text as typed
        field: Field name used in the error message

    Returns:
        Parsed Decimal, unrounded

    Raises:
        InvalidInputError: If raw is not a finite decimal number

    Example:
        >>> parse_amount("200.50", "Room Rate per Day")
        Decimal('200.50')
    """
    if raw is None:
        raise InvalidInputError(field, raw, "amount")
    try:
        amount = Decimal(raw.strip())
    except InvalidOperation:
        raise InvalidInputError(field, raw, "amount") from None
    if not amount.is_finite():
        raise InvalidInputError(field, raw, "amount")
    return amount
