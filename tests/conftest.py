# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Global pytest fixtures shared across all test modules."""

import logging
from collections.abc import Generator

import pytest

from agent_datamodel.cli import main as cli_main
from agent_datamodel.utils.logging import HANDLER_NAME


@pytest.fixture(autouse=True)
def reset_error_handler() -> Generator[None, None, None]:
    """Clear the CLI error handler so errors do not leak between tests."""
    cli_main.error_handler.reset()
    yield
    cli_main.error_handler.reset()


@pytest.fixture(autouse=True)
def remove_cli_log_handler() -> Generator[None, None, None]:
    """Remove the stderr handler installed by configure_logging() after each test.

    CliRunner swaps sys.stderr per invocation, so a handler left on the root
    logger would point at a closed stream in later tests.
    """
    root = logging.getLogger()
    original_level = root.level
    yield
    for handler in list(root.handlers):
        if handler.get_name() == HANDLER_NAME:
            root.removeHandler(handler)
    root.setLevel(original_level)
