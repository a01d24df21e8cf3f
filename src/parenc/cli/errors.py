"""
CLI Error Reporting
===================

Maps exceptions escaping the compiler to a message on stderr and an exit
code. click's own usage errors and aborts never reach this module; click
reports those itself.

| Exception              | Exit code      | Message                         |
|------------------------|----------------|---------------------------------|
| ParencError            | BUILD_ERROR    | the error's own error:/hint:    |
| RecursionError         | BUILD_ERROR    | nesting too deep                |
| OSError                | INVALID_ARGS   | Error: <reason>                 |
| anything else          | INTERNAL_ERROR | Internal error: <reason>        |
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

from parenc.errors import ParencError


class ExitCode(IntEnum):
    """Process exit codes for the parenc tool."""
    SUCCESS = 0
    BUILD_ERROR = 1      # Input rejected by the compiler
    INVALID_ARGS = 2     # Unreadable input or unwritable output
    INTERNAL_ERROR = 3   # Bug in parenc


def describe_error(error: Exception) -> tuple[ExitCode, str]:
    """Return the exit code and stderr message for an exception."""
    if isinstance(error, ParencError):
        return ExitCode.BUILD_ERROR, str(error)
    if isinstance(error, RecursionError):
        return ExitCode.BUILD_ERROR, "Error: expression nested too deeply to compile"
    if isinstance(error, OSError):
        return ExitCode.INVALID_ARGS, f"Error: {error}"
    return ExitCode.INTERNAL_ERROR, f"Internal error: {error!r}"


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Report an exception and exit.

    A traceback is printed only for internal errors, and only in verbose
    mode.

    Raises:
        SystemExit: Always
    """
    code, message = describe_error(error)
    click.echo(message, err=True)
    if verbose and code is ExitCode.INTERNAL_ERROR:
        traceback.print_exception(type(error), error, error.__traceback__)
    sys.exit(code)
