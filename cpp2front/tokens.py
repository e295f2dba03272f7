"""Token kinds and the token type produced by the lexer."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Any

from cpp2front.common import SourcePosition


class Lexeme(enum.IntEnum):
    """The kind of a token."""

    SlashEq = 0
    Slash = enum.auto()
    LeftShiftEq = enum.auto()
    LeftShift = enum.auto()
    Spaceship = enum.auto()
    LessEq = enum.auto()
    Less = enum.auto()
    RightShiftEq = enum.auto()
    RightShift = enum.auto()
    GreaterEq = enum.auto()
    Greater = enum.auto()
    PlusPlus = enum.auto()
    PlusEq = enum.auto()
    Plus = enum.auto()
    MinusMinus = enum.auto()
    MinusEq = enum.auto()
    Arrow = enum.auto()
    Minus = enum.auto()
    LogicalOrEq = enum.auto()
    LogicalOr = enum.auto()
    PipeEq = enum.auto()
    Pipe = enum.auto()
    LogicalAndEq = enum.auto()
    LogicalAnd = enum.auto()
    MultiplyEq = enum.auto()
    Multiply = enum.auto()
    ModuloEq = enum.auto()
    Modulo = enum.auto()
    AmpersandEq = enum.auto()
    Ampersand = enum.auto()
    CaretEq = enum.auto()
    Caret = enum.auto()
    TildeEq = enum.auto()
    Tilde = enum.auto()
    EqualComparison = enum.auto()
    Assignment = enum.auto()
    NotEqualComparison = enum.auto()
    Not = enum.auto()
    LeftBrace = enum.auto()
    RightBrace = enum.auto()
    LeftParen = enum.auto()
    RightParen = enum.auto()
    LeftBracket = enum.auto()
    RightBracket = enum.auto()
    Scope = enum.auto()
    Colon = enum.auto()
    Semicolon = enum.auto()
    Comma = enum.auto()
    Dot = enum.auto()
    Ellipsis = enum.auto()
    QuestionMark = enum.auto()
    Dollar = enum.auto()
    FloatLiteral = enum.auto()
    BinaryLiteral = enum.auto()
    DecimalLiteral = enum.auto()
    HexadecimalLiteral = enum.auto()
    StringLiteral = enum.auto()
    CharacterLiteral = enum.auto()
    Keyword = enum.auto()
    Identifier = enum.auto()


# RightShift is not produced by the lexer and deliberately has no display name.
_UNNAMED = frozenset({Lexeme.RightShift})


def lexeme_name(lex: Lexeme) -> str:
    """Return the display name of a token kind."""
    if lex in _UNNAMED:
        return "INTERNAL-ERROR"
    return lex.name


@dataclass(eq=False)
class Token:
    """A single token: its text, where it starts, and its kind."""

    text: str
    position: SourcePosition
    type: Lexeme

    def __str__(self) -> str:
        return self.text

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Token):
            return self.text == other.text
        if isinstance(other, str):
            return self.text == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.text)

    def to_string(self, text_only: bool = False) -> str:
        """Return the token text, optionally prefixed by its kind."""
        if text_only:
            return self.text
        return f"{lexeme_name(self.type)}: {self.text}"

    def position_col_shift(self, offset: int) -> None:
        """Move the token's column by ``offset``; the result must stay positive."""
        new_col = self.position.colno + offset
        if new_col <= 0:
            raise ValueError(
                f"column shift by {offset} would move token to column {new_col}"
            )
        self.position = replace(self.position, colno=new_col)

    def length(self) -> int:
        return len(self.text)

    def visit(self, visitor: Any, depth: int) -> None:
        """Report this token to a visitor's ``start`` hook."""
        visitor.start(self, depth)