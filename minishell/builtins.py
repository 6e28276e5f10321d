"""Commands the shell runs itself instead of starting a program."""

from __future__ import annotations

import os
import re
from collections.abc import Callable, Sequence

from minishell.environment import Shell
from minishell.messages import (
    print_cmd_errno,
    print_cmd_error,
    write_error,
    write_stdout,
)

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_DIGITS = frozenset("0123456789")
_LONG_MAX = 2**63 - 1


class ShellExit(Exception):
    """Raised by ``exit`` to end the shell with an exit code."""

    def __init__(self, code: int) -> None:
        super().__init__(f"exit {code}")
        self.code = code


def builtin_echo(args: Sequence[str]) -> int:
    """Print the arguments separated by spaces; a leading ``-n`` drops the newline."""
    words = list(args[1:])
    newline = True
    if words and words[0] == "-n":
        newline = False
        words = words[1:]
    write_stdout(" ".join(words))
    if newline:
        write_stdout("\n")
    return 0


def builtin_cd(args: Sequence[str], shell: Shell) -> int:
    """Change directory to the argument, or to ``HOME``, and update ``PWD``."""
    if len(args) > 2:
        print_cmd_error("cd", "too many arguments")
        return 1
    if len(args) < 2 or args[1] == "~":
        path = shell.env.get("HOME")
    else:
        path = args[1]
    if path is None:
        write_error("minishell: cd: HOME not set\n")
        return 1
    try:
        os.chdir(path)
    except OSError as error:
        print_cmd_errno("cd", error)
        return 1
    try:
        shell.env.set("PWD", os.getcwd())
    except OSError:
        pass
    return 0


def builtin_pwd() -> int:
    """Print the current working directory."""
    try:
        cwd = os.getcwd()
    except OSError:
        write_error("minishell: pwd: getcwd failed\n")
        return 1
    write_stdout(cwd)
    write_stdout("\n")
    return 0


def is_valid_identifier(key: str) -> bool:
    """Return whether *key* is a valid variable name."""
    return _IDENTIFIER.fullmatch(key) is not None


def _invalid_identifier(builtin: str, key: str) -> None:
    write_error(f"minishell: {builtin}: `{key}': not a valid identifier\n")


def _export_one(arg: str, shell: Shell) -> bool:
    key, eq, value = arg.partition("=")
    if not is_valid_identifier(key if eq else arg):
        _invalid_identifier("export", key if eq else arg)
        return False
    if eq:
        shell.env.set(key, value)
    return True


def builtin_export(args: Sequence[str], shell: Shell) -> int:
    """Set variables given as ``KEY=VALUE``, or list them all without arguments."""
    if len(args) < 2:
        for entry in shell.env:
            write_stdout(f"declare -x {entry}\n")
        return 0
    for arg in args[1:]:
        if not _export_one(arg, shell):
            return 1
    return 0


def builtin_unset(args: Sequence[str], shell: Shell) -> int:
    """Remove the named variables, stopping at the first invalid name."""
    for arg in args[1:]:
        if not is_valid_identifier(arg):
            _invalid_identifier("unset", arg)
            return 1
        shell.env.unset(arg)
    return 0


def builtin_env(shell: Shell) -> int:
    """Print every environment entry on its own line."""
    for entry in shell.env:
        write_stdout(f"{entry}\n")
    return 0


def _is_numeric(arg: str) -> bool:
    digits = arg[1:] if arg[:1] in ("+", "-") else arg
    return bool(digits) and all(char in _DIGITS for char in digits)


def _numeric_error(arg: str) -> None:
    write_error(f"minishell: exit: {arg}: numeric argument required\n")


def validate_exit_arg(arg: str) -> bool:
    """Return whether *arg* is a signed decimal number, reporting it if not."""
    if not _is_numeric(arg):
        _numeric_error(arg)
        return False
    return True


def get_exit_code(arg: str | None, status: int) -> int:
    """Return the exit code *arg* asks for, or *status* when there is none.

    The number is reduced to 0..255; one beyond the range of a 64-bit
    signed integer is reported and gives 2.
    """
    if arg is None:
        return status
    negative = arg[:1] == "-"
    rest = arg[1:] if arg[:1] in ("+", "-") else arg
    value = 0
    for char in rest:
        if char not in _DIGITS:
            break
        value = value * 10 + int(char)
        if value > _LONG_MAX:
            _numeric_error(arg)
            return 2
    if negative:
        value = -value
    return value & 0xFF


def builtin_exit(args: Sequence[str], shell: Shell) -> int:
    """Leave the shell by raising ShellExit.

    With more than one argument nothing happens and 1 is returned.
    """
    write_stdout("exit\n")
    arg = args[1] if len(args) > 1 else None
    if arg is not None:
        if len(args) > 2:
            print_cmd_error("exit", "too many arguments")
            return 1
        if not validate_exit_arg(arg):
            raise ShellExit(2)
    raise ShellExit(get_exit_code(arg, shell.status))


_BUILTINS: dict[str, Callable[[Sequence[str], Shell], int]] = {
    "echo": lambda args, shell: builtin_echo(args),
    "cd": builtin_cd,
    "pwd": lambda args, shell: builtin_pwd(),
    "export": builtin_export,
    "unset": builtin_unset,
    "env": lambda args, shell: builtin_env(shell),
    "exit": builtin_exit,
}


def is_builtin(name: str) -> bool:
    """Return whether *name* is a command the shell runs itself."""
    return name in _BUILTINS


def run_builtin(args: Sequence[str], shell: Shell) -> int:
    """Run the builtin named by ``args[0]`` and return its status.

    Raises ValueError when ``args`` does not name a builtin.
    """
    if not args or args[0] not in _BUILTINS:
        name = args[0] if args else ""
        raise ValueError(f"not a builtin: {name!r}")
    return _BUILTINS[args[0]](args, shell)