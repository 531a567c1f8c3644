"""Command-line tokens and their grouping into piped commands."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import IntEnum

from .cformat import cformat


class TokenType(IntEnum):
    """Kind of a token; every kind above PIPE is a redirection."""

    WORD = 0
    PIPE = 1
    HEREDOC = 2
    READ = 3
    APPEND = 4
    TRUNCATE = 5

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def is_redirect(self) -> bool:
        return self > TokenType.PIPE


_LABELS = {
    TokenType.WORD: "WORD",
    TokenType.PIPE: "PIPE",
    TokenType.HEREDOC: "I_HDOC",
    TokenType.READ: "I_READ",
    TokenType.APPEND: "O_APPE",
    TokenType.TRUNCATE: "O_TRUC",
}


@dataclass(frozen=True)
class Token:
    """A word, a pipe, or a redirection together with its target."""

    type: TokenType
    arg: str


@dataclass
class Command:
    """One stage of a pipeline: its words, its redirections and resolved binary."""

    args: list[Token] = field(default_factory=list)
    redirects: list[Token] = field(default_factory=list)
    binary: str | None = None

    @property
    def argv(self) -> list[str]:
        return [token.arg for token in self.args]


def _classify(arg: str) -> TokenType:
    if arg.startswith("|"):
        return TokenType.PIPE
    if arg.startswith("<<"):
        return TokenType.HEREDOC
    if arg.startswith(">>"):
        return TokenType.APPEND
    if arg.startswith("<"):
        return TokenType.READ
    if arg.startswith(">"):
        return TokenType.TRUNCATE
    return TokenType.WORD


def tokenize(args: Iterable[str]) -> list[Token]:
    """Turn command-line arguments into tokens.

    A redirection operator takes the following argument as its target.
    """
    tokens: list[Token] = []
    items = iter(args)
    for arg in items:
        kind = _classify(arg)
        if kind.is_redirect:
            target = next(items, None)
            if target is None:
                raise ValueError(f"missing target after {arg!r}")
            tokens.append(Token(kind, target))
        else:
            tokens.append(Token(kind, arg))
    return tokens


def group_commands(tokens: Iterable[Token]) -> list[Command]:
    """Split tokens at pipes into commands, separating words from redirections."""
    commands: list[Command] = []
    current: Command | None = None
    for token in tokens:
        if current is None:
            current = Command()
            commands.append(current)
        if token.type is TokenType.PIPE:
            current = None
        elif token.type is TokenType.WORD:
            current.args.append(token)
        else:
            current.redirects.append(token)
    return commands


def format_tokens(tokens: Sequence[Token]) -> str:
    """Render a token list as a readable listing."""
    lines = ["list\n"]
    lines.extend(cformat("%s = %s\n", token.type.label, token.arg) for token in tokens)
    lines.append(cformat("%s\n", None))
    return "".join(lines)


def format_command(command: Command) -> str:
    """Render a command's words, redirections and binary."""
    return "".join(
        [
            "\nARGS\n",
            format_tokens(command.args),
            "\nREDIRS\n",
            format_tokens(command.redirects),
            cformat("bin = %s\n", command.binary),
        ]
    )