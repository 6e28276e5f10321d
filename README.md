# minishell

The building blocks of a small POSIX-style shell. It turns a command line
into tokens and then into commands. Along the way it expands variables,
removes quotes and splits fields. It also holds the shell's environment,
looks commands up on `PATH` and runs the shell's builtin commands.

## Installing

```
pip install .
```

## Modules

### `minishell.environment`

- `Environment` is an ordered list of `KEY=VALUE` entries.
  - `get(name)` returns the value, or `None` when the name is not set.
  - `set(key, value)` replaces an entry in place, or appends a new one at the end.
  - `unset(key)` returns whether an entry was removed.
  - `as_list()` returns a copy of the entries.
  - Iterating an `Environment` yields its entries in order.
- `Shell` is a dataclass holding `env` and the last exit `status`.
  `Shell.from_mapping(mapping)` builds one from a dict.
- `format_entry(key, value)` joins a key and a value into a `KEY=VALUE` entry.

### `minishell.expansion`

- `expand_variables(word, shell)` expands `$NAME` and `$?` and leaves quotes
  alone. An unset name expands to nothing. A `$` that is not followed by a
  name stays as it is.
- `expand_and_process_quotes(word, shell)` does the same and also removes the
  quotes.
  - Text inside single quotes is kept literally.
  - Variables inside double quotes are still expanded.
- `field_split(text)` splits on spaces into non-empty fields. It returns
  `None` when `text` is empty or holds no space.

### `minishell.lexer`

- `tokenize(text, shell)` returns a list of `Token(content, type)`. The
  `TokenType` is one of `WORD`, `PIPE`, `REDIR_IN`, `REDIR_OUT`, `APPEND` or
  `HEREDOC`.
  - Words are expanded and unquoted as they are read.
  - An unquoted expansion that holds a space, and no `=`, is split into
    several words.
  - A word whose expansion is empty is dropped.
  - The word after `<<` keeps its quotes.
- `has_unclosed_quotes(text)` tells whether a quote is left open.
- The helpers `parse_word`, `remove_quotes` and `should_expand_variable` are
  public too.

### `minishell.parser`

- `parse_tokens(tokens)` checks the syntax, then groups the tokens into a list
  of `Command`.
  - Each `Command` has `args` and `redirections`. A redirection is a
    `Redirection(type, target)` with a `RedirType`.
  - A misplaced `|`, or a redirection with no word after it, raises
    `ShellSyntaxError`.
- `validate_syntax` runs the check on its own.
- `parse_commands` groups the tokens without checking them.
- `Command.has_input_redirection()` and `Command.has_output_redirection()`
  report what the command redirects.

### `minishell.paths`

- `find_executable(cmd, env)` resolves a command.
  - A name containing `/` is used as given. It raises an `OSError` when the
    path does not exist, and `IsADirectoryError` when it is a directory.
  - Any other name is searched for in the directories of `PATH`. The result
    is `None` when it is not found.
- `search_in_paths(cmd, paths)` returns the first `dir/cmd` that exists and
  is executable.

### `minishell.builtins`

- `run_builtin(args, shell)` runs one of `echo`, `cd`, `pwd`, `export`,
  `unset`, `env` and `exit`, and returns its status. It raises `ValueError`
  for any other name.
- `is_builtin(name)` tells whether a name is one of them.
- `exit` prints `exit`, then raises `ShellExit` with the exit code in its
  `code` attribute. Given more than one argument, it returns 1 instead.
- `is_valid_identifier`, `validate_exit_arg` and `get_exit_code` are public
  too, along with the individual `builtin_*` functions.

### `minishell.messages`

Writes the shell's messages and `minishell: cmd: ...` diagnostics to standard
output and standard error.

## Example

```python
from minishell.environment import Shell
from minishell.lexer import tokenize
from minishell.parser import parse_tokens
from minishell.builtins import run_builtin

shell = Shell.from_mapping({"PATH": "/usr/bin:/bin", "GREETING": "hello"})
commands = parse_tokens(tokenize('echo "$GREETING world" | tr a-z A-Z', shell))
# commands[0].args == ["echo", "hello world"]
# commands[1].args == ["tr", "a-z", "A-Z"]

run_builtin(["export", "NAME=value"], shell)
assert shell.env.get("NAME") == "value"
```

## What it does not do

This package is a library and has no command to run.

It does not:

- read lines at a prompt;
- start external programs;
- connect pipeline stages;
- open files for redirections;
- read heredoc bodies;
- handle Ctrl-C or Ctrl-\.

A caller that wants a working shell must put these pieces together and
supply the process handling itself.