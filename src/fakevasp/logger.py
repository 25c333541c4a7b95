"""
Logging setup based on loguru.

stdout belongs to the emulated transcript, so every sink writes to stderr.
"""

import sys

from loguru import logger

DEFAULT_FORMAT = "{time:HH:mm:ss} | {level: <8} | {extra[name]} - {message}"


def _format(record):
    # records from unbound loggers carry no name; fall back to the module
    record["extra"].setdefault("name", record["name"])
    return DEFAULT_FORMAT + "\n{exception}"


def _stderr_sink(message):
    # looked up per message so redirected stderr (pytest, CliRunner) is honoured
    sys.stderr.write(message)


def setup_logging(level: str = "INFO"):
    """Replace the loguru sinks with a single stderr sink at `level`."""
    logger.remove()
    logger.add(_stderr_sink, level=level.upper(), format=_format)


def get_logger(name: str):
    """Return the shared logger bound to a module name."""
    return logger.bind(name=name)
