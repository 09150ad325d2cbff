"""Billing module.

This module provides billing strategies, the department notification
fan-out, and the care center that ties them together.
"""

from smartcare_billing.billing.notifier import BillNotifier
from smartcare_billing.billing.strategies import BillingStrategy, apply_strategy

__all__ = [
    "BillNotifier",
    "BillingStrategy",
    "apply_strategy",
]
