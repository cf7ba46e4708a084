# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Unit tests for logging configuration."""

import logging

import errorhandler
import pytest

from agent_datamodel.utils.logging import (
    HANDLER_NAME,
    LOG_FORMAT,
    VerbosityLevel,
    configure_logging,
)


def installed_handlers() -> list[logging.Handler]:
    return [h for h in logging.getLogger().handlers if h.get_name() == HANDLER_NAME]


class TestConfigureLogging:
    """Tests for configure_logging."""

    @pytest.mark.parametrize(
        "level,expected",
        [
            (VerbosityLevel.DEBUG, logging.DEBUG),
            (VerbosityLevel.INFO, logging.INFO),
            (VerbosityLevel.WARNING, logging.WARNING),
            (VerbosityLevel.ERROR, logging.ERROR),
            (VerbosityLevel.CRITICAL, logging.CRITICAL),
        ],
    )
    def test_sets_root_level(self, level: VerbosityLevel, expected: int) -> None:
        configure_logging(level)
        assert logging.getLogger().level == expected

    def test_installs_single_handler_across_calls(self) -> None:
        """Repeated configuration replaces the previous handler."""
        configure_logging(VerbosityLevel.INFO)
        configure_logging(VerbosityLevel.DEBUG)

        handlers = installed_handlers()
        assert len(handlers) == 1
        assert handlers[0].formatter is not None
        assert handlers[0].formatter._fmt == LOG_FORMAT

    def test_resets_error_handler(self) -> None:
        """A previously fired error handler is cleared."""
        handler = errorhandler.ErrorHandler()
        try:
            logging.getLogger("agent_datamodel.test").error("boom")
            assert handler.fired

            configure_logging(VerbosityLevel.WARNING, handler)

            assert not handler.fired
        finally:
            handler.remove()
