"""Care center billing orchestration.

The care center computes a patient's base charge, applies the selected
billing strategy, prints the itemized bill, and notifies the subscribed
departments.
"""

import logging
from typing import Optional

from smartcare_billing.billing.notifier import BillNotifier
from smartcare_billing.billing.strategies import BillingStrategy, apply_strategy
from smartcare_billing.logging_audit import log_audit_event
from smartcare_billing.models.bill import Bill
from smartcare_billing.models.patient import Patient
from smartcare_billing.utils.display import ConsoleDisplay

logger = logging.getLogger(__name__)


class CareCenter:
    """Registers bills and fans out bill notifications.
    
    Attributes:
        notifier: Fan-out notified after every bill
        display: Console output helper
        
    Example:
        >>> center = CareCenter()
        >>> center.notifier.subscribe(print)
        >>> bill = center.register_bill(
        ...     Outpatient(5001, "Ravi", Decimal("50.00")),
        ...     BillingStrategy.NORMAL,
        ... )
        >>> bill.final_charge
        Decimal('50.00')
    """
    
    def __init__(
        self,
        notifier: Optional[BillNotifier] = None,
        display: Optional[ConsoleDisplay] = None,
    ) -> None:
        self.notifier = notifier if notifier is not None else BillNotifier()
        self.display = display if display is not None else ConsoleDisplay()
    
    def register_bill(self, patient: Patient, strategy: BillingStrategy) -> Bill:
        """Compute, print and announce a patient's bill.
        
        Args:
            patient: Admitted patient
            strategy: Billing strategy to apply to the base charge
            
        Returns:
            The printed Bill
        """
        base_charge = patient.base_charge()
        final_charge = apply_strategy(strategy, base_charge)
        
        bill = Bill(
            patient_id=patient.patient_id,
            full_name=patient.full_name,
            patient_type=patient.patient_type,
            base_charge=base_charge,
            final_charge=final_charge,
            strategy=strategy,
        )
        
        self.print_bill(bill)
        
        log_audit_event("BILL_GENERATED", {"status": "success", **bill.to_dict()})
        
        self.notifier.publish(self.notification_message(bill))
        return bill
    
    def print_bill(self, bill: Bill) -> None:
        """Print the bill banner and label/value rows."""
        self.display.title("BILL DETAILS")
        self.display.show_info("Patient ID", str(bill.patient_id))
        self.display.show_info("Name", bill.full_name)
        self.display.show_info("Patient Type", bill.patient_type.value)
        self.display.show_info("Base Charge", self.display.currency(bill.base_charge))
        self.display.show_info("Final Bill", self.display.currency(bill.final_charge))
    
    def notification_message(self, bill: Bill) -> str:
        return (
            f"Bill of {self.display.currency(bill.final_charge)} "
            f"generated for {bill.full_name}"
        )
