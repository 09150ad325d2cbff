"""Billing workflow examples.

This module demonstrates billing patients programmatically with the care
center, without going through the interactive menu.
"""

import logging
from decimal import Decimal

from smartcare_billing.billing.care_center import CareCenter
from smartcare_billing.billing.departments import register_departments
from smartcare_billing.billing.notifier import BillNotifier
from smartcare_billing.billing.strategies import BillingStrategy
from smartcare_billing.models import Inpatient, Outpatient

# Configure logging to see audit events
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


def example_1_inpatient_with_insurance():
    """Example 1: Bill an inpatient under corporate insurance.
    
    3 days at 200.00 per day is a 600.00 base charge; corporate insurance
    covers 30%, leaving 420.00.
    """
    print("=" * 80)
    print("EXAMPLE 1: Inpatient with Corporate Insurance")
    print("=" * 80)
    print()
    
    center = CareCenter(notifier=register_departments(BillNotifier()))
    patient = Inpatient(5001, "Asha Rao", 3, Decimal("200.00"))
    
    bill = center.register_bill(patient, BillingStrategy.CORPORATE_INSURANCE)
    
    print()
    print(f"Discount applied: {bill.discount}")
    print()


def example_2_compare_schemes():
    """Example 2: Compare all billing schemes for the same consultation."""
    print("=" * 80)
    print("EXAMPLE 2: Comparing Billing Schemes")
    print("=" * 80)
    print()
    
    # No subscribers: nothing is announced, bills are still printed
    center = CareCenter()
    
    for patient_id, strategy in enumerate(BillingStrategy, start=5001):
        patient = Outpatient(patient_id, "Ravi Kumar", Decimal("100.00"))
        bill = center.register_bill(patient, strategy)
        print(f"-> {strategy.display_name}: {bill.final_charge:.2f}")
        print()


if __name__ == "__main__":
    example_1_inpatient_with_insurance()
    example_2_compare_schemes()
