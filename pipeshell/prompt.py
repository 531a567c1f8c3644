"""An interactive prompt that echoes back what was typed."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence

PROMPT = "minishell> "


def run_prompt(
    read_line: Callable[[str], str | None],
    write: Callable[[str], object],
) -> list[str]:
    """Read lines until ``read_line`` returns None, echoing each one.

    Returns the history: every non-empty line, in order.
    """
    history: list[str] = []
    while True:
        line = read_line(PROMPT)
        if line is None:
            write("exit\n")
            break
        if line:
            history.append(line)
        write(f"Você digitou: {line}\n")
    return history


def _read_line(prompt: str) -> str | None:
    try:
        return input(prompt)
    except EOFError:
        return None


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the prompt on the terminal, with line editing where available."""
    try:
        import readline  # noqa: F401  (enables history and editing for input())
    except ImportError:
        pass
    run_prompt(_read_line, _write)
    return 0