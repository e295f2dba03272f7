import pytest

from cpp2front.common import SourcePosition
from cpp2front.tokens import Lexeme, Token, lexeme_name


def make(text="abc", line=1, col=1, kind=Lexeme.Identifier):
    return Token(text, SourcePosition(line, col), kind)


def test_lexeme_names_match_members():
    for lex in Lexeme:
        if lex is Lexeme.RightShift:
            continue
        assert lexeme_name(lex) == lex.name


def test_right_shift_has_no_name():
    assert lexeme_name(Lexeme.RightShift) == "INTERNAL-ERROR"


def test_lexeme_order_first_and_last():
    members = list(Lexeme)
    assert lexeme_name(members[0]) == "SlashEq"
    assert lexeme_name(members[-1]) == "Identifier"
    assert Lexeme.Keyword < Lexeme.Identifier


def test_to_string_text_only():
    tok = make("value")
    assert tok.to_string(True) == "value"
    assert str(tok) == "value"


def test_to_string_with_kind():
    tok = make("value", kind=Lexeme.Identifier)
    assert tok.to_string() == "Identifier: value"
    assert make("+=", kind=Lexeme.PlusEq).to_string(False) == "PlusEq: +="


def test_equality_compares_text():
    a = make("x", 1, 1)
    b = make("x", 5, 9, Lexeme.Keyword)
    c = make("y")
    assert a == b
    assert a == "x"
    assert not (a == c)
    assert hash(a) == hash(b)


def test_length_is_text_length():
    for text in ["a", "<<=", "0x1F"]:
        assert make(text).length() == len(text)


def test_position_col_shift():
    tok = make(line=3, col=5)
    tok.position_col_shift(2)
    assert tok.position == SourcePosition(3, 7)
    tok.position_col_shift(-6)
    assert tok.position == SourcePosition(3, 1)


def test_position_col_shift_rejects_nonpositive():
    tok = make(col=2)
    with pytest.raises(ValueError):
        tok.position_col_shift(-2)
    assert tok.position.colno == 2


def test_visit_calls_start():
    seen = []

    class Visitor:
        def start(self, node, depth):
            seen.append((node, depth))

    tok = make("q")
    tok.visit(Visitor(), 4)
    assert len(seen) == 1
    assert seen[0][0] is tok
    assert seen[0][1] == 4