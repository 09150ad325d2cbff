"""Custom notification subscriber example.

Shows how to add a department to the bill notification fan-out alongside
the default Accounts Dept and Reception Desk subscribers.
"""

from decimal import Decimal

from smartcare_billing.billing.care_center import CareCenter
from smartcare_billing.billing.departments import register_departments
from smartcare_billing.billing.notifier import BillNotifier
from smartcare_billing.billing.strategies import BillingStrategy
from smartcare_billing.models import Outpatient


class PharmacyDesk:
    """Collects bill notifications instead of printing them."""
    
    def __init__(self) -> None:
        self.received: list[str] = []
    
    def __call__(self, message: str) -> None:
        self.received.append(message)


def main() -> None:
    pharmacy = PharmacyDesk()
    
    notifier = register_departments(BillNotifier())
    notifier.subscribe(pharmacy)
    
    center = CareCenter(notifier=notifier)
    center.register_bill(
        Outpatient(5001, "Meera Iyer", Decimal("80.00")),
        BillingStrategy.SENIOR_CITIZEN,
    )
    
    print(f"\nPharmacy desk received {len(pharmacy.received)} notification(s):")
    for message in pharmacy.received:
        print(f"  {message}")
    
    # Stop notifying the pharmacy for later bills
    notifier.unsubscribe(pharmacy)


if __name__ == "__main__":
    main()
