"""Locating executables on the search path."""

from __future__ import annotations

import errno
import os
import stat
from collections.abc import Iterable

from minishell.environment import Environment


def search_in_paths(cmd: str, paths: Iterable[str]) -> str | None:
    """Return the first ``dir/cmd`` that exists and is executable, else ``None``."""
    for directory in paths:
        candidate = f"{directory}/{cmd}"
        if os.access(candidate, os.F_OK | os.X_OK):
            return candidate
    return None


def _check_explicit_path(cmd: str) -> str:
    mode = os.stat(cmd).st_mode
    if stat.S_ISDIR(mode):
        raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), cmd)
    return cmd


def find_executable(cmd: str | None, env: Environment | None) -> str | None:
    """Resolve *cmd* to a path to run.

    A command containing ``/`` is used as given if it exists; an OSError
    (such as FileNotFoundError or IsADirectoryError) is raised when it
    cannot be used. Other commands are looked up in the directories of
    ``PATH``; ``None`` is returned when no match is found.
    """
    if cmd is None or env is None:
        return None
    if "/" in cmd:
        return _check_explicit_path(cmd)
    path_value = env.get("PATH")
    if path_value is None:
        return None
    directories = [part for part in path_value.split(":") if part]
    return search_in_paths(cmd, directories)