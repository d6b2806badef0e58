"""
Tests for the line tokenizer.
"""

from lnxconfig.config.lexer import Lexer, Token, tokenize_line


def values(line: str) -> list[str]:
    return [t.value for t in tokenize_line(line)]


def test_splits_on_whitespace() -> None:
    assert values("interface  if0\t10.0.0.1/24   127.0.0.1:5000") == [
        "interface",
        "if0",
        "10.0.0.1/24",
        "127.0.0.1:5000",
    ]


def test_blank_and_comment_only_lines_are_empty() -> None:
    assert values("") == []
    assert values("   \t ") == []
    assert values("# This is a comment") == []
    assert values("   #") == []


def test_trailing_comment_is_dropped() -> None:
    assert values("routing rip # routers use rip") == ["routing", "rip"]


def test_glued_hash_is_not_a_comment() -> None:
    assert values("routing #rip") == ["routing", "#rip"]
    assert values("routing rip#comment") == ["routing", "rip#comment"]


def test_comment_stops_at_first_marker() -> None:
    assert values("route a # b # c") == ["route", "a"]


def test_token_positions() -> None:
    tokens = tokenize_line("  rip advertise-to 10.0.0.1", lineno=7)

    assert tokens[0] == Token("rip", 7, 3)
    assert tokens[1].column == 7
    assert all(t.line == 7 for t in tokens)


def test_non_ascii_whitespace_is_not_a_delimiter() -> None:
    # U+00A0 (no-break space) stays inside the token
    assert values("interface if\u00a00") == ["interface", "if\u00a00"]


def test_rejoined_tokens_keep_semantic_content() -> None:
    line = "neighbor 10.0.0.1   at 127.0.0.1:5000\tvia if0   # link to h1"

    assert " ".join(values(line)) == "neighbor 10.0.0.1 at 127.0.0.1:5000 via if0"


def test_lexer_is_iterable() -> None:
    assert [t.value for t in Lexer("routing static")] == ["routing", "static"]
