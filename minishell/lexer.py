"""Splitting an input line into tokens, with expansion and quote removal."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from minishell.environment import Shell
from minishell.expansion import expand_and_process_quotes

_WHITESPACE = " \t"
_SPECIAL = " \t|<>"
_QUOTES = "'\""


class TokenType(Enum):
    """The kinds of token the lexer produces."""

    WORD = "word"
    PIPE = "|"
    REDIR_IN = "<"
    REDIR_OUT = ">"
    APPEND = ">>"
    HEREDOC = "<<"

    @property
    def is_redirection(self) -> bool:
        return self in _REDIRECTIONS


_REDIRECTIONS = frozenset(
    {TokenType.REDIR_IN, TokenType.REDIR_OUT, TokenType.APPEND, TokenType.HEREDOC}
)


@dataclass(frozen=True)
class Token:
    """One token of an input line."""

    content: str
    type: TokenType = TokenType.WORD


def has_unclosed_quotes(text: str) -> bool:
    """Return whether *text* leaves a single or double quote open."""
    in_single = False
    in_double = False
    for char in text:
        if char == "'" and not in_double:
            in_single = not in_single
        elif char == '"' and not in_single:
            in_double = not in_double
    return in_single or in_double


def parse_word(text: str, pos: int) -> tuple[str, int]:
    """Read a raw word starting at *pos*, quotes included.

    The word ends at an unquoted blank or operator character. Returns the
    word and the position just after it.
    """
    start = pos
    quote_char = ""
    length = len(text)
    while pos < length and (quote_char or text[pos] not in _SPECIAL):
        char = text[pos]
        if not quote_char and char in _QUOTES:
            quote_char = char
        elif quote_char and char == quote_char:
            quote_char = ""
        pos += 1
    return text[start:pos], pos


def remove_quotes(word: str) -> str:
    """Remove the quote characters that delimit quoted parts of *word*."""
    if len(word) < 2:
        return word
    out: list[str] = []
    quote_char = ""
    for char in word:
        if not quote_char and char in _QUOTES:
            quote_char = char
        elif quote_char and char == quote_char:
            quote_char = ""
        else:
            out.append(char)
    return "".join(out)


def should_expand_variable(word: str) -> bool:
    """Return whether *word* holds a ``$`` outside single quotes."""
    in_single = False
    in_double = False
    for char in word:
        if char == "'" and not in_double:
            in_single = not in_single
        elif char == '"' and not in_single:
            in_double = not in_double
        elif char == "$" and not in_single:
            return True
    return False


def _was_fully_quoted(word: str) -> bool:
    return len(word) >= 2 and word[0] in _QUOTES and word[-1] == word[0]


def _word_tokens(word: str, keep_quotes: bool, shell: Shell) -> list[Token]:
    if keep_quotes:
        expanded = word
    elif should_expand_variable(word):
        expanded = expand_and_process_quotes(word, shell)
    else:
        expanded = remove_quotes(word)
    if not expanded:
        return []
    if " " in expanded and not _was_fully_quoted(word) and "=" not in expanded:
        return [Token(field) for field in expanded.split(" ") if field]
    return [Token(expanded)]


def tokenize(text: str, shell: Shell) -> list[Token]:
    """Split *text* into tokens, expanding and unquoting words.

    Words after ``<<`` keep their quotes so the heredoc can tell whether
    its delimiter was quoted. Words whose expansion is empty are dropped.
    """
    tokens: list[Token] = []
    pos = 0
    length = len(text)
    while pos < length:
        while pos < length and text[pos] in _WHITESPACE:
            pos += 1
        if pos >= length:
            break
        char = text[pos]
        nxt = text[pos + 1] if pos + 1 < length else ""
        if char == "|":
            tokens.append(Token("|", TokenType.PIPE))
            pos += 1
        elif char == "<":
            if nxt == "<":
                tokens.append(Token("<<", TokenType.HEREDOC))
                pos += 2
            else:
                tokens.append(Token("<", TokenType.REDIR_IN))
                pos += 1
        elif char == ">":
            if nxt == ">":
                tokens.append(Token(">>", TokenType.APPEND))
                pos += 2
            else:
                tokens.append(Token(">", TokenType.REDIR_OUT))
                pos += 1
        else:
            keep_quotes = bool(tokens) and tokens[-1].type is TokenType.HEREDOC
            word, pos = parse_word(text, pos)
            tokens.extend(_word_tokens(word, keep_quotes, shell))
    return tokens