"""Hospital department subscribers for bill notifications."""

import click

from smartcare_billing.billing.notifier import BillNotifier


def accounts_dept(message: str) -> None:
    click.echo(f"\n[Accounts Dept] {message}")


def reception_desk(message: str) -> None:
    click.echo(f"[Reception Desk] {message}")


DEFAULT_DEPARTMENTS = (accounts_dept, reception_desk)


def register_departments(notifier: BillNotifier) -> BillNotifier:
    """Subscribe the default departments: Accounts Dept, then Reception Desk.

    Args:
        notifier: Notifier to wire up

    Returns:
        The same notifier, for chaining
    """
    for department in DEFAULT_DEPARTMENTS:
        notifier.subscribe(department)
    return notifier
