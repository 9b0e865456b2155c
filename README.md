# minishparse

A small shell written in Python. It reads one command line at a time, parses
it into a pipeline of argument lists and runs each stage as a program found
on `PATH`.

The parser handles:

- single and double quotes, with unclosed quotes reported as errors
- pipelines (`a | b | c`), rejecting a leading, trailing or doubled pipe
- redirection operators (`<`, `>`, `<<`, `>>`), which are checked for a
  missing operand and spaced out into separate words even when written as
  `cat<file` or `echo hi>>out`
- `$NAME`, `${NAME}`, `$?` and `$#` expansion against the shell's environment
- `~` expansion to `$HOME` when it starts a word

## Installing

```
pip install .
```

## Running the shell

```
minishparse
```

On a terminal it shows the prompt `minishell $ `. When standard input is not
a terminal it reads commands line by line, so it can be fed a script:

```
printf 'echo $HOME | cat\n' | minishparse
```

Each pipeline stage is started as a separate process, the output of one
feeding the input of the next. A command that is not found reports
`minishell: <name>: command not found` and gives status 127; one that exists
but cannot be run gives 126. The status of the last stage becomes the shell's
status, visible through `$?` on the next line. A child killed by an interrupt
gives 130 and one killed by quit gives 131.

Syntax errors (`Error: Open quotation mark !`, `Error: Failure to use pipe !`,
`Error: Redirect syntax error !`) are written to standard error and set the
status to 258. At end of input the shell writes `exit` to standard error,
unless the final status is 1 or 255, and exits with that status. The command
takes no arguments; passing any prints `Invalid argument!` and exits with 1.

## What it does not do

- Redirections are parsed and validated but not carried out: `<`, `>`, `>>`
  and `<<` and their file names are passed to the program as ordinary
  arguments, and no here-document is read.
- Builtins are recognised (`minishparse.builtins.builtin_kind` maps `cd`,
  `pwd`, `echo`, `export`, `env`/`ENV`, `unset` and `exit` to a `Builtin`),
  but the shell loop does not run them itself; it looks them up on `PATH`
  like any other command. So `cd`, `export` and `unset` cannot change the
  shell's own state, and `exit` does not end it.

## Using it from Python

```python
from minishparse.environment import parse_environ
from minishparse.parser import parse_line

env = parse_environ(["HOME=/home/user", "USER=user"])
commands = parse_line('echo "$USER" ~ >out | wc -l', env, 0)
# one list of words per pipeline stage
```

`parse_line` returns an empty list for blank input and raises
`minishparse.syntax.ShellSyntaxError` (carrying `message` and `status`) on a
syntax error.

`minishparse.shell.Shell(environ, stdin, stderr)` wraps the loop:
`read_line()` returns the next line or `None` at end of input, `run_line(line)`
parses and runs one line and returns the status, and `run()` loops until end
of input and returns the final status. Lines with content are appended to
`Shell.history`.

Other modules:

- `minishparse.quotes` – `quote_state` tells whether a position lies inside
  single (`SINGLE`) or double (`DOUBLE`) quotes; `count_quote` counts quotes.
- `minishparse.scan` – `count_real_char`, `has_input`, `strip_outer_quotes`
  and related helpers.
- `minishparse.pipes` – `quoted_split` and `has_pipe_error`.
- `minishparse.cleaner` – `clean_segment` trims a segment, collapses
  unquoted spaces and drops quotes that open inside a word.
- `minishparse.redirects` – `space_redirects` puts spaces around redirection
  operators.
- `minishparse.syntax` – `check_line` and `has_redirection_error`.
- `minishparse.expand` – `expand_dollars` and `lookup_key`.
- `minishparse.tilde` – `expand_tilde` and `expand_tildes`.
- `minishparse.environment` – `parse_environ` builds a mapping from
  `KEY=VALUE` entries; `split_path` returns the `PATH` directories.
- `minishparse.builtins` – `builtin_kind`, `validate_export_key` (raises
  `InvalidIdentifier`) and `cd_error_message`.
- `minishparse.status` – `exit_code` and `report_wait_status` turn a raw
  wait status into a shell exit code.

## Running the tests

```
pip install .[test]
pytest
```