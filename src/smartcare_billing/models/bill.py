"""Bill data model.

A Bill exists only for the duration of printing and notification; it is
returned to the caller for inspection but never stored.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict

from smartcare_billing.billing.strategies import BillingStrategy
from smartcare_billing.models.patient import PatientType


@dataclass(frozen=True)
class Bill:
    """Itemized bill for a single admission.

    Attributes:
        patient_id: Patient identifier
        full_name: Patient name
        patient_type: Inpatient or Outpatient
        base_charge: Charge computed from the patient's treatment facts
        final_charge: Base charge after the billing strategy is applied
        strategy: Billing strategy used
    """

    patient_id: int
    full_name: str
    patient_type: PatientType
    base_charge: Decimal
    final_charge: Decimal
    strategy: BillingStrategy

    @property
    def discount(self) -> Decimal:
        """Amount deducted from the base charge by the strategy."""
        return self.base_charge - self.final_charge

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for the BILL_GENERATED audit event.

        Returns:
            Dictionary representation with money values as strings
        """
        return {
            "patient_id": self.patient_id,
            "full_name": self.full_name,
            "patient_type": self.patient_type.value,
            "base_charge": str(self.base_charge),
            "final_charge": str(self.final_charge),
            "strategy": self.strategy.value,
        }
