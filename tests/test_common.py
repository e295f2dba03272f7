import io

import pytest

from cpp2front.common import (
    Comment,
    CommentKind,
    Diagnostic,
    LineCategory,
    SourceLine,
    SourcePosition,
    bool_to_string,
    is_binary_digit,
    is_digit,
    is_hexadecimal_digit,
    is_identifier_continue,
    is_identifier_start,
    is_nondigit,
    is_separator_or,
    starts_with_identifier,
    strip_path,
)


@pytest.mark.parametrize(
    "cat, expected",
    [
        (LineCategory.EMPTY, "/*   */ "),
        (LineCategory.PREPROCESSOR, "/* # */ "),
        (LineCategory.COMMENT, "/* / */ "),
        (LineCategory.IMPORT, "/* i */ "),
        (LineCategory.CPP1, "/* 1 */ "),
        (LineCategory.CPP2, "/* 2 */ "),
    ],
)
def test_source_line_prefix(cat, expected):
    assert SourceLine("x", cat).prefix() == expected


def test_source_line_default_is_empty():
    assert SourceLine().prefix() == "/*   */ "


def test_position_defaults_and_ordering():
    assert SourcePosition() == SourcePosition(1, 1)
    assert SourcePosition(1, 5) < SourcePosition(2, 1)
    assert SourcePosition(2, 3) < SourcePosition(2, 4)
    assert sorted([SourcePosition(3, 1), SourcePosition(1, 9)])[0] == SourcePosition(1, 9)


def test_position_to_string():
    pos = SourcePosition(3, 4)
    assert pos.to_string() == "(3,4)"
    assert str(pos) == pos.to_string()


def test_comment_holds_fields():
    c = Comment(CommentKind.LINE_COMMENT, SourcePosition(1, 1), SourcePosition(1, 6), "// hi")
    assert c.kind.value == 0
    assert c.text == "// hi"


def test_diagnostic_format_with_position():
    d = Diagnostic(SourcePosition(3, 4), "bad")
    assert d.format("f.cpp2") == "f.cpp2(3,4): error: bad\n"


def test_diagnostic_format_without_line():
    d = Diagnostic(SourcePosition(0, 4), "oops")
    text = d.format("a.cpp2")
    assert text.startswith("a.cpp2:")
    assert "(" not in text
    assert text.endswith(" error: oops\n")


def test_diagnostic_negative_column_omitted():
    d = Diagnostic(SourcePosition(7, -1), "m")
    assert "," not in d.format("z")
    assert d.format("z").startswith("z(7)")


def test_diagnostic_internal_and_print():
    d = Diagnostic(SourcePosition(2, 2), "boom", internal=True)
    out = io.StringIO()
    d.print(out, "x.cpp2")
    assert out.getvalue() == d.format("x.cpp2")
    assert " internal compiler error: boom" in out.getvalue()


def test_digit_classes():
    assert is_binary_digit("0") and is_binary_digit("1")
    assert not is_binary_digit("2")
    assert all(is_hexadecimal_digit(c) for c in "0123456789abcdefABCDEF")
    assert not is_hexadecimal_digit("g")
    assert all(is_digit(c) for c in "0123456789")
    assert not is_digit("a")
    assert not is_digit("\0") and not is_digit("")


def test_identifier_classes():
    assert is_nondigit("_") and is_nondigit("Z")
    assert not is_nondigit("5")
    assert is_identifier_start("a") and not is_identifier_start("1")
    assert is_identifier_continue("1") and is_identifier_continue("_")
    assert not is_identifier_continue("-")


def test_starts_with_identifier():
    word = "abc_12"
    assert starts_with_identifier(word) == len(word)
    assert starts_with_identifier(word + " rest") == len(word)
    assert starts_with_identifier("9abc") == 0
    assert starts_with_identifier("") == 0


def test_is_separator_or():
    assert is_separator_or(is_digit, "'")
    assert is_separator_or(is_digit, "7")
    assert not is_separator_or(is_binary_digit, "7")


def test_bool_to_string():
    assert bool_to_string(True) == "true"
    assert bool_to_string(False) == "false"


def test_strip_path():
    assert strip_path("dir/sub\\file.cpp2") == "file.cpp2"
    assert strip_path("plain.cpp2") == "plain.cpp2"
    assert strip_path("dir/") == ""