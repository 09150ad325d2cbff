"""Patient data models.

This module defines the two patient variants handled by the billing desk.
Each variant computes its own base charge from its treatment facts:

- Inpatient: days stayed multiplied by the daily room rate
- Outpatient: the flat consultation fee

Values are not validated here; zero or negative amounts are billed as given.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Union


class PatientType(Enum):
    """Patient admission type, used as the bill's type label."""

    INPATIENT = "Inpatient"
    OUTPATIENT = "Outpatient"


@dataclass(frozen=True)
class Inpatient:
    """Patient admitted to a room for one or more days.

    Attributes:
        patient_id: Sequential patient identifier
        full_name: Patient name as entered (may be empty)
        days_stayed: Number of days admitted
        daily_room_rate: Room charge per day

    Example:
        >>> patient = Inpatient(5001, "Asha Rao", 3, Decimal("200.00"))
        >>> patient.base_charge()
        Decimal('600.00')
    """

    patient_id: int
    full_name: str
    days_stayed: int
    daily_room_rate: Decimal

    @property
    def patient_type(self) -> PatientType:
        return PatientType.INPATIENT

    def base_charge(self) -> Decimal:
        """Return days stayed multiplied by the daily room rate."""
        return self.days_stayed * self.daily_room_rate


@dataclass(frozen=True)
class Outpatient:
    """Patient seen in the outpatient department (OPD) for a consultation.

    Attributes:
        patient_id: Sequential patient identifier
        full_name: Patient name as entered (may be empty)
        consultation_fee: Flat consultation fee
    """

    patient_id: int
    full_name: str
    consultation_fee: Decimal

    @property
    def patient_type(self) -> PatientType:
        return PatientType.OUTPATIENT

    def base_charge(self) -> Decimal:
        """Return the consultation fee."""
        return self.consultation_fee


Patient = Union[Inpatient, Outpatient]
