import pytest

from pipeshell.tokens import (
    Command,
    Token,
    TokenType,
    format_command,
    format_tokens,
    group_commands,
    tokenize,
)


def test_tokenize_types_and_targets():
    tokens = tokenize(["env", "<<", "fim", "|", "ls", ">", "arquivo"])
    assert [t.type for t in tokens] == [
        TokenType.WORD,
        TokenType.HEREDOC,
        TokenType.PIPE,
        TokenType.WORD,
        TokenType.TRUNCATE,
    ]
    assert [t.arg for t in tokens] == ["env", "fim", "|", "ls", "arquivo"]


@pytest.mark.parametrize(
    "op, kind",
    [
        ("<", TokenType.READ),
        ("<<", TokenType.HEREDOC),
        (">", TokenType.TRUNCATE),
        (">>", TokenType.APPEND),
    ],
)
def test_redirect_takes_next_argument(op, kind):
    assert tokenize([op, "file"]) == [Token(kind, "file")]


def test_empty_argument_is_word():
    assert tokenize([""]) == [Token(TokenType.WORD, "")]


def test_missing_redirect_target():
    with pytest.raises(ValueError):
        tokenize(["cat", "<"])


def test_group_commands_splits_on_pipes():
    commands = group_commands(tokenize(["cat", "<", "in", "-n", "|", "wc", "-l", ">>", "out"]))
    assert [c.argv for c in commands] == [["cat", "-n"], ["wc", "-l"]]
    assert commands[0].redirects == [Token(TokenType.READ, "in")]
    assert commands[1].redirects == [Token(TokenType.APPEND, "out")]


def test_group_commands_edge_pipes():
    assert [c.argv for c in group_commands(tokenize(["|", "b"]))] == [[], ["b"]]
    assert [c.argv for c in group_commands(tokenize(["a", "|"]))] == [["a"]]
    assert [c.argv for c in group_commands(tokenize(["a", "|", "|", "b"]))] == [["a"], [], ["b"]]
    assert group_commands([]) == []


def test_format_tokens_listing():
    text = format_tokens(tokenize(["ls", ">", "out"]))
    assert text.splitlines() == ["list", "WORD = ls", "O_TRUC = out", "(null)"]


def test_labels_of_every_type():
    tokens = tokenize(["a", "|", "<<", "h", "<", "r", ">>", "p", ">", "t"])
    assert format_tokens(tokens).splitlines() == [
        "list",
        "WORD = a",
        "PIPE = |",
        "I_HDOC = h",
        "I_READ = r",
        "O_APPE = p",
        "O_TRUC = t",
        "(null)",
    ]
    assert [t.type.is_redirect for t in tokens] == [False, False, True, True, True, True]


def test_format_command_contains_sections():
    command = Command(args=[Token(TokenType.WORD, "ls")])
    text = format_command(command)
    assert "WORD = ls" in text
    assert text.index("ARGS") < text.index("REDIRS")
    assert text.endswith("bin = (null)\n")
    command.binary = "/bin/ls"
    assert format_command(command).endswith("bin = /bin/ls\n")