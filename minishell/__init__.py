"""Tokenizing, expansion, command parsing, PATH lookup and builtins for a small shell."""

__version__ = "0.1.0"

__all__ = [
    "builtins",
    "environment",
    "expansion",
    "lexer",
    "messages",
    "parser",
    "paths",
]