# pipeshell

`pipeshell` runs a pipeline of programs given as separate command-line
arguments. It resolves each program through `PATH`, wires the commands
together with pipes, and applies input and output redirections, including
here-documents.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Running a pipeline

Each word, operator and file name is its own argument, so quote the
operators to keep your own shell from acting on them:

```
pipeshell ls -l "|" wc -l
pipeshell "<" input.txt sort "|" uniq ">" output.txt
pipeshell cat "<<" END "|" tr a-z A-Z ">>" log.txt
```

An argument is classified by how it begins:

| Operator | Meaning                                         |
|----------|-------------------------------------------------|
| `\|`     | send this command's output to the next command  |
| `<`      | read standard input from a file                 |
| `<<`     | read standard input up to a limiter line        |
| `>`      | write standard output to a file, truncating it  |
| `>>`     | append standard output to a file                |

An operator that takes a file takes the next argument as its file name; an
operator with no argument after it is an error (status 1). When a command has
several input or output redirections, they are opened in order and the last
one of each kind wins. Redirections take precedence over the pipe.

A here-document reads from standard input, prints `> ` before each line it
reads, and stops at a line that is exactly the limiter. Output files are
created with mode `0644`.

The exit status is that of the last command in the pipeline; a last command
killed by a signal gives status 0. Errors end the run with a message on
standard error:

| Condition                                  | Message             | Status |
|--------------------------------------------|---------------------|--------|
| program not found in `PATH`, or no program | `command not found` | 127    |
| input file missing                         | `file not found`    | 1      |
| input file unreadable, output unwritable   | `permission denied` | 1      |

## Interactive prompt

```
pipeshell-prompt
```

shows a `minishell> ` prompt and echoes each line read as
`Você digitou: <line>`. End of input prints `exit` and leaves. Line editing
and history are used where the `readline` module is available.

## Library use

```python
from pipeshell.tokens import tokenize, group_commands
from pipeshell.executor import run_pipeline

commands = group_commands(tokenize(["echo", "hello", "|", "tr", "a-z", "A-Z"]))
status = run_pipeline(commands)
```

- `pipeshell.tokens`: `TokenType`, `Token`, `Command`, `tokenize`,
  `group_commands`, and `format_tokens` / `format_command` for readable
  listings.
- `pipeshell.executor`: `run_pipeline` (with an optional environment as a
  mapping or a list of `NAME=value` strings, and an optional standard input
  for here-documents), `find_binary`, `check_file`, `open_redirect`,
  `read_heredoc`, `apply_redirects`, and `ShellError`, which carries
  `message` and `status`.
- `pipeshell.textutil`: `atoi`, `atol`, `atol_checked`, `split`,
  `split_whitespace`, `strtrim`, `substr`, `find_bounded`, `getenv`,
  `is_space`.
- `pipeshell.cformat`: `cformat` and `cprintf`, a small printf supporting
  `%c %s %p %d %i %u %x %X`.
- `pipeshell.linereader`: `LineReader`, which reads lines from a file
  descriptor or stream a fixed number of units at a time (42 by default).

## What it does not do

`pipeshell` is not an interactive shell. The prompt only echoes what is
typed; it does not run it. There is no quoting, variable expansion,
globbing or built-in command such as `cd` or `exit`: every command is a
program found through `PATH`, and the command line arrives already split
into arguments.