"""Models module.

This module provides the patient and bill data models for the application.
"""

from smartcare_billing.models.bill import Bill
from smartcare_billing.models.patient import (
    Inpatient,
    Outpatient,
    Patient,
    PatientType,
)

__all__ = [
    "Bill",
    "Inpatient",
    "Outpatient",
    "Patient",
    "PatientType",
]
