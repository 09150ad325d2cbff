"""Non-interactive billing commands for SmartCare Billing.

These commands produce a single bill from command-line options, with the
same printed output and department notifications as the interactive session.
"""

import logging
import sys
from typing import NoReturn, Optional

import click

from smartcare_billing.billing.strategies import BillingStrategy
from smartcare_billing.cli.input_parsing import parse_amount, parse_days
from smartcare_billing.cli.session import BillingSession
from smartcare_billing.models.patient import Inpatient, Outpatient, Patient
from smartcare_billing.utils.exceptions import InvalidInputError

logger = logging.getLogger(__name__)

SCHEME_CHOICE = click.Choice([s.value for s in BillingStrategy], case_sensitive=False)

scheme_option = click.option(
    "--scheme",
    type=SCHEME_CHOICE,
    default=BillingStrategy.NORMAL.value,
    show_default=True,
    help="Billing scheme to apply",
)
patient_id_option = click.option(
    "--patient-id",
    type=int,
    default=None,
    help="Patient id (default: first id from configuration)",
)


@click.group()
def bill() -> None:
    """Bill a single patient without the interactive menu."""
    pass


@bill.command("inpatient")
@click.option("--name", required=True, help="Patient full name")
@click.option("--days", required=True, help="Days admitted")
@click.option("--rate", required=True, help="Room rate per day")
@scheme_option
@patient_id_option
@click.pass_context
def bill_inpatient_command(
    ctx: click.Context,
    name: str,
    days: str,
    rate: str,
    scheme: str,
    patient_id: Optional[int],
) -> None:
    """Bill an indoor patient for a room stay.

    Examples:

        # 3 days at 200.00 per day, corporate insurance
        smartcare-billing bill inpatient --name "Asha Rao" --days 3 \\
            --rate 200.00 --scheme corporate-insurance
    """
    session = _session(ctx)
    try:
        patient: Patient = Inpatient(
            _patient_id(session, patient_id),
            name,
            parse_days(days),
            parse_amount(rate, "Room Rate per Day"),
        )
    except InvalidInputError as e:
        _fail(e)
    session.center.register_bill(patient, BillingStrategy.from_name(scheme))


@bill.command("outpatient")
@click.option("--name", required=True, help="Patient full name")
@click.option("--fee", required=True, help="Consultation fee")
@scheme_option
@patient_id_option
@click.pass_context
def bill_outpatient_command(
    ctx: click.Context,
    name: str,
    fee: str,
    scheme: str,
    patient_id: Optional[int],
) -> None:
    """Bill an outpatient (OPD) consultation.

    Examples:

        smartcare-billing bill outpatient --name "Ravi Kumar" --fee 50.00
    """
    session = _session(ctx)
    try:
        patient: Patient = Outpatient(
            _patient_id(session, patient_id),
            name,
            parse_amount(fee, "Consultation Fee"),
        )
    except InvalidInputError as e:
        _fail(e)
    session.center.register_bill(patient, BillingStrategy.from_name(scheme))


def _session(ctx: click.Context) -> BillingSession:
    return BillingSession.from_config(ctx.obj["config"])


def _patient_id(session: BillingSession, patient_id: Optional[int]) -> int:
    if patient_id is not None:
        return patient_id
    return session.allocate_patient_id()


def _fail(error: InvalidInputError) -> NoReturn:
    click.secho(f"Invalid input: {error}", fg="red", err=True)
    logger.info(f"Bill rejected on invalid input: {error}")
    sys.exit(1)
