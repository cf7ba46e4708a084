# -*- coding: utf-8 -*-

# Copyright: (c) 2022, Daniel Schmidt <danischm@cisco.com>

import logging
import sys
from enum import Enum

import errorhandler


class VerbosityLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
HANDLER_NAME = "agent-datamodel"


def configure_logging(
    level: VerbosityLevel, error_handler: errorhandler.ErrorHandler | None = None
) -> None:
    """Configure the root logger with a single stderr handler.

    A handler installed by a previous call is replaced so repeated CLI
    invocations in one process do not duplicate output. The error handler, if given, is reset so that
    errors from a previous run do not leak into the exit code.
    """
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level.value))

    for existing in list(logger.handlers):
        if existing.get_name() == HANDLER_NAME:
            logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    if error_handler is not None:
        error_handler.reset()
