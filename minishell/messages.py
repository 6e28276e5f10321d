"""Writing messages and diagnostics to the standard streams."""

from __future__ import annotations

import os
import sys

SHELL_NAME = "minishell"


def _describe(error: OSError | int) -> str:
    """Return the system description of an error number or OSError."""
    if isinstance(error, OSError):
        if error.strerror:
            return error.strerror
        if error.errno is not None:
            return os.strerror(error.errno)
        return str(error)
    return os.strerror(error)


def write_error(message: str | None) -> None:
    """Write *message* to standard error unchanged; ``None`` writes nothing."""
    if message is None:
        return
    sys.stderr.write(message)
    sys.stderr.flush()


def write_stdout(message: str | None) -> None:
    """Write *message* to standard output unchanged; ``None`` writes nothing."""
    if message is None:
        return
    sys.stdout.write(message)
    sys.stdout.flush()


def print_errno(prefix: str, name: str, error: OSError | int) -> None:
    """Report ``prefix: name: <system error text>`` on standard error."""
    write_error(f"{prefix}: {name}: {_describe(error)}\n")


def print_cmd_error(cmd: str, message: str) -> None:
    """Report ``minishell: cmd: message`` on standard error."""
    write_error(f"{SHELL_NAME}: {cmd}: {message}\n")


def print_cmd_errno(cmd: str, error: OSError | int) -> None:
    """Report ``minishell: cmd: <system error text>`` on standard error."""
    write_error(f"{SHELL_NAME}: {cmd}: {_describe(error)}\n")