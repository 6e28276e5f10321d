import pytest

from minishell.lexer import Token, TokenType
from minishell.parser import (
    Command,
    Redirection,
    RedirType,
    ShellSyntaxError,
    parse_commands,
    parse_tokens,
    validate_syntax,
)

PIPE = Token("|", TokenType.PIPE)
IN = Token("<", TokenType.REDIR_IN)
OUT = Token(">", TokenType.REDIR_OUT)
APP = Token(">>", TokenType.APPEND)
HEREDOC = Token("<<", TokenType.HEREDOC)


def w(text):
    return Token(text)


def test_single_command():
    commands = parse_tokens([w("echo"), w("hi")])
    assert commands == [Command(args=["echo", "hi"])]


def test_pipeline_splits_commands():
    commands = parse_tokens([w("ls"), w("-l"), PIPE, w("wc"), PIPE, w("cat")])
    assert [c.args for c in commands] == [["ls", "-l"], ["wc"], ["cat"]]


def test_redirections_in_order():
    tokens = [w("cat"), IN, w("a"), OUT, w("b"), APP, w("c"), HEREDOC, w("EOF")]
    (command,) = parse_tokens(tokens)
    assert command.args == ["cat"]
    assert command.redirections == [
        Redirection(RedirType.IN, "a"),
        Redirection(RedirType.OUT, "b"),
        Redirection(RedirType.APPEND, "c"),
        Redirection(RedirType.HEREDOC, "EOF"),
    ]


def test_redirection_before_command_name():
    (command,) = parse_tokens([OUT, w("file"), w("echo"), w("x")])
    assert command.args == ["echo", "x"]
    assert command.redirections == [Redirection(RedirType.OUT, "file")]


def test_command_with_only_redirection_has_no_args():
    (command,) = parse_tokens([IN, w("file")])
    assert command.args == []
    assert command.has_input_redirection()


def test_has_input_and_output_redirection():
    both = Command(
        ["x"],
        [Redirection(RedirType.HEREDOC, "E"), Redirection(RedirType.APPEND, "f")],
    )
    neither = Command(["x"])
    assert both.has_input_redirection() and both.has_output_redirection()
    assert not neither.has_input_redirection()
    assert not neither.has_output_redirection()


def test_output_only_is_not_input():
    command = Command(["x"], [Redirection(RedirType.OUT, "f")])
    assert command.has_output_redirection()
    assert not command.has_input_redirection()


@pytest.mark.parametrize(
    "tokens",
    [
        [PIPE, w("a")],
        [w("a"), PIPE],
        [w("a"), PIPE, PIPE, w("b")],
    ],
)
def test_pipe_errors(tokens):
    with pytest.raises(ShellSyntaxError) as info:
        validate_syntax(tokens)
    assert info.value.token == "|"
    assert str(info.value) == "syntax error near unexpected token `|'"


@pytest.mark.parametrize(
    "tokens",
    [
        [w("cat"), IN],
        [w("cat"), OUT, PIPE, w("b")],
        [w("cat"), HEREDOC, APP, w("x")],
    ],
)
def test_redirection_errors(tokens):
    with pytest.raises(ShellSyntaxError) as info:
        parse_tokens(tokens)
    assert info.value.token == "newline"


def test_parse_tokens_empty():
    assert parse_tokens([]) == []


def test_parse_commands_leading_pipe_without_validation():
    commands = parse_commands([PIPE, w("a")])
    assert [c.args for c in commands] == [[], ["a"]]


def test_parse_commands_trailing_pipe_without_validation():
    commands = parse_commands([w("a"), PIPE])
    assert [c.args for c in commands] == [["a"]]


def test_parse_commands_dangling_redirection_is_ignored():
    (command,) = parse_commands([w("a"), OUT])
    assert command.args == ["a"]
    assert command.redirections == []