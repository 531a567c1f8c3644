"""Run a pipeline of commands with pipes, redirections and here-documents."""

from __future__ import annotations

import os
import subprocess
import sys
import tempfile
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, TextIO

from .linereader import LineReader
from .textutil import getenv, split
from .tokens import Command, TokenType, group_commands, tokenize

STDIN_FILENO = 0

_OPEN_FLAGS = {
    "r": os.O_RDONLY,
    "t": os.O_WRONLY | os.O_CREAT | os.O_TRUNC,
    "a": os.O_WRONLY | os.O_CREAT | os.O_APPEND,
}


class ShellError(Exception):
    """A failure that ends the shell with an exit status."""

    def __init__(self, message: str, status: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.status = status

    def __str__(self) -> str:
        return self.message


def _os_error(context: str, exc: OSError, status: int = 1) -> ShellError:
    reason = exc.strerror or str(exc)
    return ShellError(f"{context}: {reason}", status)


def find_binary(name: str | None, path: str | None) -> str:
    """Return the first ``dir/name`` in the colon-separated ``path`` that is executable."""
    if name and path:
        for directory in split(path, ":"):
            candidate = f"{directory}/{name}"
            if os.access(candidate, os.F_OK | os.X_OK):
                return candidate
    raise ShellError("command not found", 127)


def check_file(path: str, kind: str) -> None:
    """Check that ``path`` may be read (kind ``r``) or written (kinds ``t`` and ``a``)."""
    if kind not in _OPEN_FLAGS:
        raise ValueError(f"unknown redirection kind: {kind!r}")
    if kind == "r":
        if not os.access(path, os.F_OK):
            raise ShellError("file not found", 1)
        if not os.access(path, os.R_OK):
            raise ShellError("permission denied", 1)
    elif os.access(path, os.F_OK) and not os.access(path, os.W_OK):
        raise ShellError("permission denied", 1)


def open_redirect(path: str, kind: str) -> int:
    """Open ``path`` for reading (``r``), truncating (``t``) or appending (``a``).

    Returns the new file descriptor; the caller closes it.
    """
    check_file(path, kind)
    try:
        return os.open(path, _OPEN_FLAGS[kind], 0o644)
    except OSError as exc:
        raise _os_error("read file" if kind == "r" else "write file", exc) from exc


def _as_reader(stdin: Any) -> LineReader:
    if isinstance(stdin, LineReader):
        return stdin
    return LineReader(STDIN_FILENO if stdin is None else stdin)


def read_heredoc(limiter: str, stdin: Any = None, prompt: TextIO | None = None) -> str:
    """Collect lines up to a line that is exactly ``limiter``.

    ``stdin`` is a LineReader, a file descriptor or a readable stream (standard
    input by default). A ``"> "`` prompt is written to ``prompt`` before each line.
    """
    reader = _as_reader(stdin)
    out = sys.stdout if prompt is None else prompt
    end_line = limiter + "\n"
    collected: list[str] = []

    def show_prompt() -> None:
        out.write("> ")
        out.flush()

    show_prompt()
    for line in reader:
        text = line.decode(errors="surrogateescape") if isinstance(line, bytes) else line
        if text == end_line:
            break
        collected.append(text)
        show_prompt()
    return "".join(collected)


def _text_fd(text: str) -> int:
    with tempfile.TemporaryFile() as handle:
        handle.write(text.encode(errors="surrogateescape"))
        handle.seek(0)
        return os.dup(handle.fileno())


def _close(fd: int | None) -> None:
    if fd is not None:
        os.close(fd)


def apply_redirects(
    command: Command,
    stdin: Any = None,
    prompt: TextIO | None = None,
) -> tuple[int | None, int | None]:
    """Open a command's redirections in order; later ones replace earlier ones.

    Returns ``(input_fd, output_fd)``, each None when not redirected.
    """
    fdin: int | None = None
    fdout: int | None = None
    try:
        for redirect in command.redirects:
            if redirect.type in (TokenType.HEREDOC, TokenType.READ):
                _close(fdin)
                fdin = None
                if redirect.type is TokenType.HEREDOC:
                    fdin = _text_fd(read_heredoc(redirect.arg, stdin, prompt))
                else:
                    fdin = open_redirect(redirect.arg, "r")
            elif redirect.type in (TokenType.APPEND, TokenType.TRUNCATE):
                _close(fdout)
                fdout = None
                kind = "a" if redirect.type is TokenType.APPEND else "t"
                fdout = open_redirect(redirect.arg, kind)
    except BaseException:
        _close(fdin)
        _close(fdout)
        raise
    return fdin, fdout


def _env_dict(env: Mapping[str, str] | Iterable[str] | None) -> dict[str, str]:
    if env is None:
        return dict(os.environ)
    if isinstance(env, Mapping):
        return dict(env)
    result: dict[str, str] = {}
    for entry in env:
        name, _, value = entry.partition("=")
        result[name] = value
    return result


def run_pipeline(
    commands: Sequence[Command],
    env: Mapping[str, str] | Iterable[str] | None = None,
    stdin: Any = None,
) -> int:
    """Start every command, connected by pipes, and return the last one's exit status.

    A command killed by a signal yields status 0.
    """
    commands = list(commands)
    if not commands:
        return 0
    environ = _env_dict(env)
    path = getenv("PATH", environ)
    reader = _as_reader(stdin)
    processes: list[subprocess.Popen] = []
    next_in: int | None = None
    try:
        for index, command in enumerate(commands):
            fdin, next_in = next_in, None
            fdout: int | None = None
            try:
                if index + 1 < len(commands):
                    next_in, fdout = os.pipe()
                redirect_in, redirect_out = apply_redirects(command, reader)
                if redirect_in is not None:
                    _close(fdin)
                    fdin = redirect_in
                if redirect_out is not None:
                    _close(fdout)
                    fdout = redirect_out
                argv = command.argv
                command.binary = find_binary(argv[0] if argv else None, path)
                try:
                    process = subprocess.Popen(
                        argv,
                        executable=command.binary,
                        env=environ,
                        stdin=fdin,
                        stdout=fdout,
                    )
                except OSError as exc:
                    raise _os_error("execve", exc) from exc
            finally:
                _close(fdin)
                _close(fdout)
            processes.append(process)
    except BaseException:
        _close(next_in)
        for process in processes:
            process.wait()
        raise
    for process in processes[:-1]:
        process.wait()
    status = processes[-1].wait()
    return status if status >= 0 else 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the pipeline described by ``argv`` and return its exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        commands = group_commands(tokenize(args))
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    try:
        return run_pipeline(commands, os.environ)
    except ShellError as exc:
        print(exc.message, file=sys.stderr)
        return exc.status