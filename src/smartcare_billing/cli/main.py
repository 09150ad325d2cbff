"""Main CLI entry point for SmartCare Billing.

This module provides the main Click command group for the smartcare-billing CLI.
Invoked without a subcommand it starts the interactive billing session.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from smartcare_billing import __version__
from smartcare_billing.cli.bill_commands import bill
from smartcare_billing.cli.session import BillingSession
from smartcare_billing.config import load_config
from smartcare_billing.logging_audit import configure_logging
from smartcare_billing.utils.exceptions import ConfigurationError, InvalidInputError

logger = logging.getLogger(__name__)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="smartcare-billing")
@click.option(
    "--config",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: ./config/config.json)",
)
@click.option("--verbose", is_flag=True, help="Enable verbose logging (DEBUG level)")
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to log file (overrides config file)",
)
@click.option(
    "--redact-pii",
    is_flag=True,
    help="Redact patient names from logs",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    verbose: bool,
    log_file: Optional[Path],
    redact_pii: bool,
) -> None:
    """SmartCare Patient Billing System.
    
    Admit inpatients and outpatients, apply a billing scheme, print an
    itemized bill and notify the Accounts Dept and Reception Desk.
    
    Common usage:
    
        # Start the interactive billing menu
        smartcare-billing
        
        # Bill one outpatient without the menu
        smartcare-billing bill outpatient --name "Ravi Kumar" --fee 50.00
        
        # Use custom configuration file
        smartcare-billing --config custom/config.json run
    
    Use --help with any command for more information.
    """
    ctx.ensure_object(dict)
    
    try:
        config_obj = load_config(config)
        ctx.obj["config"] = config_obj
    except ConfigurationError as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        ctx.exit(1)
    
    # Precedence: CLI flags > config file > defaults
    log_level = "DEBUG" if verbose else config_obj.logging.level
    log_file_path = log_file if log_file else config_obj.logging.log_file
    redact_pii_setting = redact_pii if redact_pii else config_obj.logging.redact_pii
    
    configure_logging(
        level=log_level, log_file=log_file_path, redact_pii=redact_pii_setting
    )
    
    if ctx.invoked_subcommand is None:
        ctx.invoke(run)


@cli.command()
@click.pass_context
def run(ctx: click.Context) -> None:
    """Start the interactive admission and billing menu."""
    session = BillingSession.from_config(ctx.obj["config"])
    try:
        bills_issued = session.run()
    except InvalidInputError as e:
        click.secho(f"\nInvalid input: {e}", fg="red", err=True)
        logger.info(f"Session terminated on invalid input: {e}")
        sys.exit(1)
    logger.info(f"Session ended after {bills_issued} bill(s)")


cli.add_command(bill)


@cli.group()
def config() -> None:
    """Configuration management commands."""
    pass


@config.command()
@click.argument("config_file", type=click.Path(exists=True, path_type=Path))
def validate(config_file: Path) -> None:
    """Validate a configuration file.
    
    Args:
        config_file: Path to configuration file to validate
        
    Example:
        smartcare-billing config validate config/config.json
    """
    try:
        config_obj = load_config(config_file)
    except ConfigurationError as e:
        click.echo(click.style("✗", fg="red", bold=True) + " Configuration validation failed")
        click.echo(f"\n{e}", err=True)
        raise click.exceptions.Exit(1)
    
    click.echo(click.style("✓", fg="green", bold=True) + " Configuration is valid")
    click.echo(f"\nConfiguration file: {config_file}")
    
    click.echo("\nDisplay:")
    click.echo(f"  Width:           {config_obj.display.width}")
    click.echo(f"  Currency symbol: {config_obj.display.currency_symbol}")
    click.echo(f"  Clear screen:    {config_obj.display.clear_screen}")
    
    click.echo("\nSession:")
    click.echo(f"  First patient id: {config_obj.session.first_patient_id}")
    click.echo(f"  Abort on invalid: {config_obj.session.abort_on_invalid_input}")
    
    click.echo("\nLogging:")
    click.echo(f"  Level:       {config_obj.logging.level}")
    click.echo(f"  Log file:    {config_obj.logging.log_file}")
    click.echo(f"  Redact PII:  {config_obj.logging.redact_pii}")


@cli.command()
def version() -> None:
    """Display version information."""
    click.echo(f"smartcare-billing version {__version__}")


if __name__ == "__main__":
    cli()
