# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt
import pytest
from typer.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """CLI runner for invoking the agent-datamodel app."""
    return CliRunner()
