"""Interactive billing session.

The session is a small state machine driven by console input:

    MAIN_MENU --"2"--> EXIT
    MAIN_MENU --other--> ADMISSION_FLOW --> MAIN_MENU

The next patient id and the department notifier are owned by the session
and live only as long as it does.
"""

import logging
from enum import Enum
from typing import Optional

import click

from smartcare_billing.billing.care_center import CareCenter
from smartcare_billing.billing.departments import register_departments
from smartcare_billing.billing.notifier import BillNotifier
from smartcare_billing.billing.strategies import BillingStrategy
from smartcare_billing.cli.input_parsing import parse_amount, parse_days
from smartcare_billing.config.schema import Config
from smartcare_billing.logging_audit import log_audit_event
from smartcare_billing.models.bill import Bill
from smartcare_billing.models.patient import Inpatient, Outpatient, Patient
from smartcare_billing.utils.display import ConsoleDisplay
from smartcare_billing.utils.exceptions import InvalidInputError

logger = logging.getLogger(__name__)

DEFAULT_FIRST_PATIENT_ID = 5001
EXIT_CODE = "2"
INPATIENT_CODE = "1"


class ShellState(Enum):
    MAIN_MENU = "main_menu"
    ADMISSION_FLOW = "admission_flow"
    EXIT = "exit"


class BillingSession:
    """One run of the interactive billing shell.
    
    Attributes:
        center: Care center that prints bills and notifies departments
        display: Console output helper
        next_patient_id: Id the next admitted patient will receive
        abort_on_invalid_input: Re-raise InvalidInputError to end the
            session. When false the main menu is shown again
        state: Current shell state
        bills_issued: Number of bills printed in this session
    """
    
    def __init__(
        self,
        center: Optional[CareCenter] = None,
        display: Optional[ConsoleDisplay] = None,
        first_patient_id: int = DEFAULT_FIRST_PATIENT_ID,
        abort_on_invalid_input: bool = True,
    ) -> None:
        self.display = display if display is not None else ConsoleDisplay()
        if center is None:
            center = CareCenter(
                notifier=register_departments(BillNotifier()),
                display=self.display,
            )
        self.center = center
        self.next_patient_id = first_patient_id
        self.abort_on_invalid_input = abort_on_invalid_input
        self.state = ShellState.MAIN_MENU
        self.bills_issued = 0
    
    @classmethod
    def from_config(cls, config: Config) -> "BillingSession":
        """Build a session wired with the default departments."""
        display = ConsoleDisplay(
            width=config.display.width,
            currency_symbol=config.display.currency_symbol,
            clear_screen=config.display.clear_screen,
        )
        return cls(
            display=display,
            first_patient_id=config.session.first_patient_id,
            abort_on_invalid_input=config.session.abort_on_invalid_input,
        )
    
    def run(self) -> int:
        """Run the menu loop until the user selects Exit.
        
        Returns:
            Number of bills issued during the session
            
        Raises:
            InvalidInputError: On malformed numeric input, unless
                abort_on_invalid_input is disabled
            click.Abort: If input ends while prompting
        """
        log_audit_event("SESSION_STARTED", {"status": "success"})
        while self.state is not ShellState.EXIT:
            if self.state is ShellState.MAIN_MENU:
                self.state = self.main_menu()
            else:
                self.admission_flow()
                self.state = ShellState.MAIN_MENU
        log_audit_event("SESSION_ENDED", {
            "status": "success",
            "bills_issued": self.bills_issued,
        })
        return self.bills_issued
    
    def main_menu(self) -> ShellState:
        self.display.clear()
        self.display.title("SmartCare Patient Billing System")
        click.echo("1. Admit and Bill Patient")
        click.echo("2. Exit")
        option = self._read("\nChoose Option")
        if option == EXIT_CODE:
            return ShellState.EXIT
        return ShellState.ADMISSION_FLOW
    
    def admission_flow(self) -> Optional[Bill]:
        """Admit one patient and print their bill.
        
        Malformed numeric input abandons the admission without consuming a
        patient id. The error is re-raised to end the session, or the main
        menu returns when abort_on_invalid_input is disabled.
        
        Returns:
            The printed Bill, or None if the admission was abandoned
        """
        try:
            bill = self.admit_and_bill()
        except InvalidInputError as e:
            log_audit_event("ADMISSION_FAILED", {
                "status": "failure",
                "field": e.field,
                "error_message": str(e),
            })
            if self.abort_on_invalid_input:
                raise
            click.secho(f"\nAdmission cancelled: {e}", fg="red", err=True)
            self.display.wait()
            return None
        
        self.display.wait()
        return bill
    
    def admit_and_bill(self) -> Bill:
        self.display.clear()
        self.display.title("Patient Admission")
        
        name = self._read("Enter Patient Name")
        
        click.echo("\nSelect Patient Type")
        click.echo("1. Indoor Patient")
        click.echo("2. Outpatient (OPD)")
        patient_type = self._read("Option")
        
        patient: Patient
        if patient_type == INPATIENT_CODE:
            days = parse_days(self._read("Days Admitted"))
            rate = parse_amount(self._read("Room Rate per Day"), "Room Rate per Day")
            patient = Inpatient(self.allocate_patient_id(), name, days, rate)
        else:
            fee = parse_amount(self._read("Consultation Fee"), "Consultation Fee")
            patient = Outpatient(self.allocate_patient_id(), name, fee)
        
        click.echo("\nSelect Billing Scheme")
        click.echo("1. Normal")
        click.echo("2. Corporate Insurance")
        click.echo("3. Senior Citizen Discount")
        strategy = BillingStrategy.from_code(self._read("Choice"))
        
        logger.debug(
            f"Admitted patient {patient.patient_id} as {patient.patient_type.value}, "
            f"strategy={strategy.value}"
        )
        
        self.display.clear()
        bill = self.center.register_bill(patient, strategy)
        self.bills_issued += 1
        return bill
    
    def allocate_patient_id(self) -> int:
        patient_id = self.next_patient_id
        self.next_patient_id += 1
        return patient_id
    
    @staticmethod
    def _read(label: str) -> str:
        # Blank input is returned as "" rather than re-prompting
        return click.prompt(label, default="", show_default=False)
