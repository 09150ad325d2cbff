"""Entry point for running smartcare_billing as a module.

This allows the package to be executed as:
    python -m smartcare_billing
"""

from smartcare_billing.cli.main import cli

if __name__ == "__main__":
    cli()
