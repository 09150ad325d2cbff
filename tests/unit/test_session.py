"""Unit tests for the interactive billing session."""

from decimal import Decimal

import pytest

from smartcare_billing.billing.care_center import CareCenter
from smartcare_billing.billing.notifier import BillNotifier
from smartcare_billing.billing.strategies import BillingStrategy
from smartcare_billing.cli.session import BillingSession, ShellState
from smartcare_billing.config.schema import Config, DisplayConfig, SessionConfig
from smartcare_billing.utils.exceptions import InvalidInputError


def admission(name, type_code, fields, scheme):
    """Build the console input for one admission starting at the main menu."""
    return "\n".join(["1", name, type_code, *fields, scheme]) + "\n"


@pytest.fixture
def bills():
    return []


@pytest.fixture
def session(quiet_display, bills):
    """Session whose care center records bills and notifications."""
    notifier = BillNotifier()
    center = CareCenter(notifier=notifier, display=quiet_display)
    original = center.register_bill

    def recording_register_bill(patient, strategy):
        bill = original(patient, strategy)
        bills.append(bill)
        return bill

    center.register_bill = recording_register_bill
    return BillingSession(center=center, display=quiet_display)


class TestMainMenu:
    """Test main menu transitions."""

    def test_exit_immediately(self, session, run_session):
        """Test selecting 2 ends the session with no bills."""
        # Act
        result = run_session(session, "2\n")

        # Assert
        assert result.exit_code == 0
        assert session.state is ShellState.EXIT
        assert session.bills_issued == 0
        assert "SMARTCARE PATIENT BILLING SYSTEM" in result.output
        assert "1. Admit and Bill Patient" in result.output
        assert "2. Exit" in result.output

    def test_invalid_option_starts_admission(self, session, run_session, bills):
        """Test anything other than 2 goes to the admission flow."""
        result = run_session(session, "x\nRavi\n2\n50\n1\n2\n")

        assert result.exit_code == 0
        assert len(bills) == 1
        assert "PATIENT ADMISSION" in result.output

    def test_end_of_input_aborts(self, session, run_session):
        result = run_session(session, "")

        assert result.exit_code == 1


class TestAdmissionFlow:
    """Test admission and billing through the console."""

    def test_inpatient_corporate_insurance(self, session, run_session, bills):
        """Test inpatient 3 days at 200.00 with corporate insurance."""
        # Arrange
        script = admission("Asha Rao", "1", ["3", "200.00"], "2") + "2\n"

        # Act
        result = run_session(session, script)

        # Assert
        assert result.exit_code == 0, result.output
        assert len(bills) == 1
        bill = bills[0]
        assert bill.patient_id == 5001
        assert bill.base_charge == Decimal("600.00")
        assert bill.final_charge == Decimal("420.00")
        assert f"{'Base Charge':<20}: $600.00" in result.output
        assert f"{'Final Bill':<20}: $420.00" in result.output
        assert f"{'Patient Type':<20}: Inpatient" in result.output

    def test_outpatient_normal(self, session, run_session, bills):
        script = admission("Ravi Kumar", "2", ["50.00"], "1") + "2\n"

        result = run_session(session, script)

        assert result.exit_code == 0
        assert bills[0].base_charge == bills[0].final_charge == Decimal("50.00")

    def test_unrecognized_type_and_scheme_fall_back(self, session, run_session, bills):
        """Test unknown type means outpatient and unknown scheme means normal."""
        script = admission("", "7", ["100"], "9") + "2\n"

        result = run_session(session, script)

        assert result.exit_code == 0
        assert bills[0].full_name == ""
        assert bills[0].patient_type.value == "Outpatient"
        assert bills[0].final_charge == Decimal("100")

    def test_ids_are_sequential(self, session, run_session, bills):
        """Test N admissions get ids 5001..5000+N."""
        script = (
            admission("A", "2", ["10"], "1")
            + admission("B", "1", ["1", "10"], "3")
            + admission("C", "2", ["10"], "2")
            + "2\n"
        )

        result = run_session(session, script)

        assert result.exit_code == 0
        assert [b.patient_id for b in bills] == [5001, 5002, 5003]
        assert session.next_patient_id == 5004
        assert session.bills_issued == 3

    def test_departments_notified_in_order(self, quiet_display, run_session):
        """Test default wiring notifies Accounts Dept then Reception Desk."""
        session = BillingSession(display=quiet_display)

        result = run_session(session, admission("Asha Rao", "1", ["3", "200"], "2") + "2\n")

        accounts = "[Accounts Dept] Bill of $420.00 generated for Asha Rao"
        reception = "[Reception Desk] Bill of $420.00 generated for Asha Rao"
        assert accounts in result.output
        assert reception in result.output
        assert result.output.index(accounts) < result.output.index(reception)


class TestInvalidInput:
    """Test malformed numeric input handling."""

    def test_non_numeric_days_terminates_session(self, session, run_session, bills):
        """Test bad days input ends the run without a bill by default."""
        # Arrange
        script = "1\nBob\n1\nabc\n" + admission("Ann", "2", ["10"], "1") + "2\n"

        # Act
        result = run_session(session, script)

        # Assert
        assert isinstance(result.exception, InvalidInputError)
        assert result.exception.field == "Days Admitted"
        assert result.exit_code != 0
        assert bills == []
        assert "BILL DETAILS" not in result.output
        assert session.bills_issued == 0
        assert session.next_patient_id == 5001

    def test_non_numeric_rate_terminates_session(self, session, run_session, bills):
        result = run_session(session, "1\nBob\n1\n3\ncheap\n2\n")

        assert isinstance(result.exception, InvalidInputError)
        assert result.exception.field == "Room Rate per Day"
        assert bills == []

    def test_return_to_menu_when_abort_disabled(self, quiet_display, run_session):
        """Test a cancelled admission keeps the id counter for the next one."""
        # Arrange
        session = BillingSession(display=quiet_display, abort_on_invalid_input=False)
        script = "1\nBob\n1\nabc\n" + admission("Ann", "2", ["10"], "1") + "2\n"

        # Act
        result = run_session(session, script)

        # Assert
        assert result.exit_code == 0, result.output
        assert "Admission cancelled" in result.output
        assert session.bills_issued == 1
        assert f"{'Patient ID':<20}: 5001" in result.output
        assert f"{'Name':<20}: Ann" in result.output

    def test_non_numeric_fee_with_abort_disabled(self, quiet_display, run_session):
        session = BillingSession(display=quiet_display, abort_on_invalid_input=False)

        result = run_session(session, "1\nBob\n2\nfree\n2\n")

        assert result.exit_code == 0
        assert session.bills_issued == 0
        assert "BILL DETAILS" not in result.output


class TestMenuCodes:
    """Test menu codes are matched exactly as typed."""

    def test_padded_exit_code_starts_admission(self, session, run_session, bills):
        """Test " 2" at the main menu is not Exit."""
        result = run_session(session, " 2\nRavi\n2\n50\n1\n2\n")

        assert result.exit_code == 0, result.output
        assert "PATIENT ADMISSION" in result.output
        assert len(bills) == 1

    def test_padded_codes_fall_back(self, session, run_session, bills):
        """Test padded type and scheme codes mean Outpatient and Normal."""
        script = admission("Ravi", " 1", ["80"], "2 ") + "2\n"

        result = run_session(session, script)

        assert result.exit_code == 0, result.output
        assert bills[0].patient_type.value == "Outpatient"
        assert bills[0].strategy is BillingStrategy.NORMAL
        assert bills[0].final_charge == Decimal("80")


class TestFromConfig:
    """Test building a session from configuration."""

    def test_from_config(self):
        config = Config(
            display=DisplayConfig(width=40, currency_symbol="€", clear_screen=False),
            session=SessionConfig(first_patient_id=9001, abort_on_invalid_input=False),
        )

        session = BillingSession.from_config(config)

        assert session.next_patient_id == 9001
        assert session.abort_on_invalid_input is False
        assert session.display.width == 40
        assert session.display.currency_symbol == "€"
        assert session.center.display is session.display
        assert len(session.center.notifier.subscribers) == 2

    def test_allocate_patient_id(self):
        session = BillingSession(first_patient_id=5001)

        assert session.allocate_patient_id() == 5001
        assert session.allocate_patient_id() == 5002
        assert session.next_patient_id == 5003
