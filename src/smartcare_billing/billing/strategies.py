"""Billing strategies.

A billing strategy maps a base charge to a final charge. The set of
strategies is closed: each BillingStrategy member is mapped through
STRATEGY_CALCULATORS to a pure calculation function.

Menu codes:
    1 (or anything unrecognized) - Normal
    2 - Corporate Insurance (30% off)
    3 - Senior Citizen Discount (15% off)
"""

import logging
from decimal import Decimal
from enum import Enum
from typing import Callable, Dict, Optional

logger = logging.getLogger(__name__)

CORPORATE_INSURANCE_RATE = Decimal("0.7")
SENIOR_CITIZEN_RATE = Decimal("0.85")

BillCalculator = Callable[[Decimal], Decimal]


class BillingStrategy(Enum):
    """Billing scheme selected once per billing event."""

    NORMAL = "normal"
    CORPORATE_INSURANCE = "corporate-insurance"
    SENIOR_CITIZEN = "senior-citizen"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def from_code(cls, code: Optional[str]) -> "BillingStrategy":
        """Resolve a menu code to a strategy.

        Only "2" and "3" select a discount. Any other input, including blank
        or garbage text, falls back to NORMAL without raising.

        Args:
            code: Raw menu input

        Returns:
            Selected BillingStrategy

        Example:
            >>> BillingStrategy.from_code("2")
            <BillingStrategy.CORPORATE_INSURANCE: 'corporate-insurance'>
            >>> BillingStrategy.from_code("9")
            <BillingStrategy.NORMAL: 'normal'>
        """
        strategy = _MENU_CODES.get(code)
        if strategy is None:
            logger.debug(f"Unrecognized billing code {code!r}, using normal billing")
            return cls.NORMAL
        return strategy

    @classmethod
    def from_name(cls, name: str) -> "BillingStrategy":
        """Resolve a CLI option name (case-insensitive) to a strategy.

        Raises:
            ValueError: If name is not one of the strategy values
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            valid = ", ".join(s.value for s in cls)
            raise ValueError(
                f"Unknown billing strategy: {name}. Must be one of: {valid}"
            ) from None


def normal_billing(amount: Decimal) -> Decimal:
    return amount


def corporate_insurance(amount: Decimal) -> Decimal:
    return amount * CORPORATE_INSURANCE_RATE


def senior_citizen_discount(amount: Decimal) -> Decimal:
    return amount * SENIOR_CITIZEN_RATE


STRATEGY_CALCULATORS: Dict[BillingStrategy, BillCalculator] = {
    BillingStrategy.NORMAL: normal_billing,
    BillingStrategy.CORPORATE_INSURANCE: corporate_insurance,
    BillingStrategy.SENIOR_CITIZEN: senior_citizen_discount,
}

_MENU_CODES: Dict[Optional[str], BillingStrategy] = {
    "1": BillingStrategy.NORMAL,
    "2": BillingStrategy.CORPORATE_INSURANCE,
    "3": BillingStrategy.SENIOR_CITIZEN,
}

_DISPLAY_NAMES: Dict[BillingStrategy, str] = {
    BillingStrategy.NORMAL: "Normal",
    BillingStrategy.CORPORATE_INSURANCE: "Corporate Insurance",
    BillingStrategy.SENIOR_CITIZEN: "Senior Citizen Discount",
}


def apply_strategy(strategy: BillingStrategy, amount: Decimal) -> Decimal:
    """Apply a billing strategy to a base charge.

    Args:
        strategy: Billing strategy to apply
        amount: Base charge

    Returns:
        Final charge (unrounded)

    Example:
        >>> apply_strategy(BillingStrategy.SENIOR_CITIZEN, Decimal("100.00"))
        Decimal('85.0000')
    """
    return STRATEGY_CALCULATORS[strategy](amount)
