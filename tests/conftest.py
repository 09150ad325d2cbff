"""
Shared pytest configuration and fixtures.

This module provides fixtures and configuration used across all test suites
(unit and integration tests).
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Callable, Generator

import click
import pytest
from click.testing import CliRunner, Result

import smartcare_billing.logging_audit.logger as logger_module
from smartcare_billing.cli.session import BillingSession
from smartcare_billing.utils.display import ConsoleDisplay


@pytest.fixture
def project_root() -> Path:
    """
    Return the project root directory.
    
    Returns:
        Path: Absolute path to the project root directory.
    """
    return Path(__file__).parent.parent


@pytest.fixture
def src_dir(project_root: Path) -> Path:
    """
    Return the src directory path.
    
    Args:
        project_root: Project root directory fixture.
    
    Returns:
        Path: Absolute path to the src directory.
    """
    return project_root / "src"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove SMARTCARE_* overrides inherited from the developer's shell."""
    for key in list(os.environ):
        if key.startswith("SMARTCARE_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def reset_logging() -> Generator[None, None, None]:
    """Restore the root logger after a test that calls configure_logging."""
    root_logger = logging.getLogger()
    original_handlers = list(root_logger.handlers)
    original_level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if handler not in original_handlers:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(original_level)
    logger_module._logging_configured = False
    logger_module._installed_handlers = []


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[dict[str, Any]], Path]:
    """
    Return a factory that writes a configuration dictionary to a JSON file.
    
    Args:
        tmp_path: Pytest's temporary directory fixture.
    
    Returns:
        Callable taking a config dict and returning the file path.
    """
    def _write(config: dict[str, Any], name: str = "config.json") -> Path:
        config_file = tmp_path / name
        config_file.write_text(json.dumps(config), encoding="utf-8")
        return config_file
    
    return _write


@pytest.fixture
def quiet_display() -> ConsoleDisplay:
    """Display that never clears the screen."""
    return ConsoleDisplay(clear_screen=False)


@pytest.fixture
def run_session() -> Callable[[BillingSession, str], Result]:
    """
    Return a helper that drives a BillingSession with scripted console input.
    
    The session runs inside a throwaway click command so prompts read from
    CliRunner's input stream and output is captured in the result.
    """
    def _run(session: BillingSession, input_text: str) -> Result:
        @click.command()
        def _session_command() -> None:
            session.run()
        
        return CliRunner().invoke(_session_command, input=input_text)
    
    return _run
