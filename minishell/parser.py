"""Checking token syntax and grouping tokens into commands."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from minishell.lexer import Token, TokenType


class RedirType(Enum):
    """The kinds of redirection a command may carry."""

    IN = "<"
    OUT = ">"
    APPEND = ">>"
    HEREDOC = "<<"


_REDIR_FOR_TOKEN = {
    TokenType.REDIR_IN: RedirType.IN,
    TokenType.REDIR_OUT: RedirType.OUT,
    TokenType.APPEND: RedirType.APPEND,
    TokenType.HEREDOC: RedirType.HEREDOC,
}


@dataclass(frozen=True)
class Redirection:
    """A redirection and its target file or heredoc delimiter."""

    type: RedirType
    target: str


@dataclass
class Command:
    """One simple command of a pipeline."""

    args: list[str] = field(default_factory=list)
    redirections: list[Redirection] = field(default_factory=list)

    def has_input_redirection(self) -> bool:
        """Return whether standard input is redirected from a file or heredoc."""
        return any(
            r.type in (RedirType.IN, RedirType.HEREDOC) for r in self.redirections
        )

    def has_output_redirection(self) -> bool:
        """Return whether standard output is redirected to a file."""
        return any(
            r.type in (RedirType.OUT, RedirType.APPEND) for r in self.redirections
        )


class ShellSyntaxError(Exception):
    """Raised when a token sequence is not a valid command line."""

    def __init__(self, token: str) -> None:
        super().__init__(f"syntax error near unexpected token `{token}'")
        self.token = token


def validate_syntax(tokens: Sequence[Token]) -> None:
    """Raise ShellSyntaxError for misplaced pipes or missing redirection targets."""
    for index, token in enumerate(tokens):
        following = tokens[index + 1] if index + 1 < len(tokens) else None
        if token.type is TokenType.PIPE and (
            index == 0 or following is None or following.type is TokenType.PIPE
        ):
            raise ShellSyntaxError("|")
        if token.type.is_redirection and (
            following is None or following.type is not TokenType.WORD
        ):
            raise ShellSyntaxError("newline")


def _parse_command(tokens: Sequence[Token], pos: int) -> tuple[Command, int]:
    command = Command()
    while pos < len(tokens) and tokens[pos].type is not TokenType.PIPE:
        token = tokens[pos]
        pos += 1
        if token.type is TokenType.WORD:
            command.args.append(token.content)
        elif pos < len(tokens):
            command.redirections.append(
                Redirection(_REDIR_FOR_TOKEN[token.type], tokens[pos].content)
            )
            pos += 1
    return command, pos


def parse_commands(tokens: Sequence[Token]) -> list[Command]:
    """Group *tokens* into commands separated by pipes, without checking syntax."""
    commands: list[Command] = []
    pos = 0
    while pos < len(tokens):
        command, pos = _parse_command(tokens, pos)
        commands.append(command)
        if pos < len(tokens) and tokens[pos].type is TokenType.PIPE:
            pos += 1
    return commands


def parse_tokens(tokens: Sequence[Token]) -> list[Command]:
    """Validate *tokens* and group them into commands."""
    validate_syntax(tokens)
    return parse_commands(tokens)