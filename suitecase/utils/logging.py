# -*- coding: utf-8 -*-

# Copyright: (c) 2022, Daniel Schmidt <danischm@cisco.com>

import logging
import sys
from enum import Enum

import errorhandler


class VerbosityLevel(str, Enum):
    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"


_LEVELS = {
    VerbosityLevel.CRITICAL: logging.CRITICAL,
    VerbosityLevel.ERROR: logging.ERROR,
    VerbosityLevel.WARNING: logging.WARNING,
    VerbosityLevel.INFO: logging.INFO,
    VerbosityLevel.DEBUG: logging.DEBUG,
}

_stream_handler: logging.Handler | None = None


def configure_logging(
    level: VerbosityLevel | str, error_handler: errorhandler.ErrorHandler
) -> None:
    """Configure the root logger for CLI runs.

    Installs a single stderr handler (replacing the one installed by an
    earlier call) and resets the error handler so `error_handler.fired`
    only reflects the current run.
    """
    global _stream_handler

    logger = logging.getLogger()
    if _stream_handler is not None:
        logger.removeHandler(_stream_handler)

    _stream_handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    _stream_handler.setFormatter(formatter)
    logger.addHandler(_stream_handler)
    logger.setLevel(_LEVELS[VerbosityLevel(level)])
    error_handler.reset()
