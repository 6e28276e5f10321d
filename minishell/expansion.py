"""Variable expansion, quote removal and field splitting of words."""

from __future__ import annotations

import re

from minishell.environment import Shell

_NAME = re.compile(r"[A-Za-z0-9_]+")


def _expand_dollar(word: str, pos: int, shell: Shell, out: list[str]) -> int:
    """Expand the ``$`` at *pos*, which is followed by a character.

    Appends the expansion to *out* and returns the position after it.
    """
    pos += 1
    if word[pos] == "?":
        out.append(str(shell.status))
        return pos + 1
    match = _NAME.match(word, pos)
    if match is None:
        out.append("$")
        return pos
    value = shell.env.get(match.group())
    if value is not None:
        out.append(value)
    return match.end()


def expand_variables(word: str, shell: Shell) -> str:
    """Expand ``$NAME`` and ``$?`` in *word*, leaving quotes untouched."""
    out: list[str] = []
    pos = 0
    length = len(word)
    while pos < length:
        if word[pos] == "$" and pos + 1 < length:
            pos = _expand_dollar(word, pos, shell, out)
        else:
            out.append(word[pos])
            pos += 1
    return "".join(out)


def expand_and_process_quotes(word: str, shell: Shell) -> str:
    """Expand variables outside single quotes and remove the quotes.

    Text in single quotes is kept literally; double quotes are dropped
    while variables inside them are still expanded.
    """
    out: list[str] = []
    pos = 0
    length = len(word)
    in_double = False
    while pos < length:
        char = word[pos]
        if char == "'" and not in_double:
            end = word.find("'", pos + 1)
            if end == -1:
                out.append(word[pos + 1:])
                pos = length
            else:
                out.append(word[pos + 1:end])
                pos = end + 1
        elif char == '"':
            in_double = not in_double
            pos += 1
        elif char == "$" and pos + 1 < length:
            pos = _expand_dollar(word, pos, shell, out)
        else:
            out.append(char)
            pos += 1
    return "".join(out)


def field_split(text: str | None) -> list[str] | None:
    """Split *text* on spaces into non-empty fields.

    Returns ``None`` when *text* is empty or holds no space at all.
    """
    if not text or " " not in text:
        return None
    return [field for field in text.split(" ") if field]