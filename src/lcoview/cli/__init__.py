"""Command line interface for lcoview."""

from lcoview.cli.exit_codes import (
    EXIT_CONFIG,
    EXIT_GENERIC,
    EXIT_IOERR,
    EXIT_NOINPUT,
    EXIT_OK,
    EXIT_THRESHOLD,
)
from lcoview.cli.root import cli, create_app, main

__all__ = [
    "EXIT_CONFIG",
    "EXIT_GENERIC",
    "EXIT_IOERR",
    "EXIT_NOINPUT",
    "EXIT_OK",
    "EXIT_THRESHOLD",
    "cli",
    "create_app",
    "main",
]
