"""Line-oriented lexer producing tokens and comments from Cpp2 source lines."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Sequence, TextIO

from cpp2front.common import (
    Comment,
    CommentKind,
    Diagnostic,
    LineCategory,
    SourceLine,
    SourcePosition,
    is_binary_digit,
    is_digit,
    is_hexadecimal_digit,
    is_identifier_continue,
    is_separator_or,
    starts_with_identifier,
)
from cpp2front.tokens import Lexeme, Token, lexeme_name

_SPACE = frozenset(" \t\n\v\f\r")
_END = "\0"

# Order matters: alternatives are tried first to last and the first match wins.
_KEYWORDS = (
    "alignas", "alignof", "asm", "as", "auto",
    "bool", "break",
    "case", "catch", "char", "char16_t", "char32_t", "char8_t", "class", "co_await", "co_return",
    "co_yield", "concept", "const", "const_cast", "consteval", "constexpr", "constinit", "continue",
    "decltype", "default", "double", "do", "dynamic_cast",
    "else", "enum", "explicit", "export", "extern",
    "false", "float", "for", "friend",
    "goto",
    "if", "import", "inline", "int", "is",
    "long",
    "module", "mutable",
    "namespace", "new", "noexcept", "nullptr",
    "operator",
    "private", "protected", "public",
    "register", "reinterpret_cast", "requires", "return",
    "short", "signed", "sizeof", "static", "static_assert", "static_cast", "struct", "switch",
    "template", "this", "thread_local", "throws", "throw", "true", "try", "typedef", "typeid", "typename",
    "unsigned", "using",
    "virtual", "void", "volatile",
    "wchar_t", "while",
)
_KEYWORD_RE = re.compile("|".join(_KEYWORDS))

# For each leading character: (rest of the operator, kind), tried in order.
_OPERATORS: dict[str, tuple[tuple[str, Lexeme], ...]] = {
    "<": (("<=", Lexeme.LeftShiftEq), ("<", Lexeme.LeftShift),
          ("=>", Lexeme.Spaceship), ("=", Lexeme.LessEq), ("", Lexeme.Less)),
    ">": (("=", Lexeme.GreaterEq), ("", Lexeme.Greater)),
    "+": (("+", Lexeme.PlusPlus), ("=", Lexeme.PlusEq), ("", Lexeme.Plus)),
    "-": (("-", Lexeme.MinusMinus), ("=", Lexeme.MinusEq),
          (">", Lexeme.Arrow), ("", Lexeme.Minus)),
    "|": (("|=", Lexeme.LogicalOrEq), ("|", Lexeme.LogicalOr),
          ("=", Lexeme.PipeEq), ("", Lexeme.Pipe)),
    "&": (("&=", Lexeme.LogicalAndEq), ("&", Lexeme.LogicalAnd),
          ("=", Lexeme.AmpersandEq), ("", Lexeme.Ampersand)),
    "*": (("=", Lexeme.MultiplyEq), ("", Lexeme.Multiply)),
    "%": (("=", Lexeme.ModuloEq), ("", Lexeme.Modulo)),
    "^": (("=", Lexeme.CaretEq), ("", Lexeme.Caret)),
    "~": (("=", Lexeme.TildeEq), ("", Lexeme.Tilde)),
    "=": (("=", Lexeme.EqualComparison), ("", Lexeme.Assignment)),
    "!": (("=", Lexeme.NotEqualComparison),),
    ".": (("..", Lexeme.Ellipsis), ("", Lexeme.Dot)),
    ":": ((":", Lexeme.Scope), ("", Lexeme.Colon)),
    "{": (("", Lexeme.LeftBrace),),
    "}": (("", Lexeme.RightBrace),),
    "(": (("", Lexeme.LeftParen),),
    ")": (("", Lexeme.RightParen),),
    "[": (("", Lexeme.LeftBracket),),
    "]": (("", Lexeme.RightBracket),),
    ";": (("", Lexeme.Semicolon),),
    ",": (("", Lexeme.Comma),),
    "?": (("", Lexeme.QuestionMark),),
    "$": (("", Lexeme.Dollar),),
}
_SLASH_OPERATORS = (("=", Lexeme.SlashEq), ("", Lexeme.Slash))


@dataclass
class LexState:
    """Lexer state carried from one line to the next."""

    in_comment: bool = False
    current_comment: str = ""
    current_comment_start: SourcePosition = field(default_factory=SourcePosition)


class _LineLexer:
    def __init__(
        self,
        line: str,
        lineno: int,
        state: LexState,
        tokens: list[Token],
        comments: list[Comment],
        errors: list[Diagnostic],
    ) -> None:
        self.line = line
        self.lineno = lineno
        self.state = state
        self.tokens = tokens
        self.comments = comments
        self.errors = errors
        self.i = 0

    # -- helpers ---------------------------------------------------------

    def peek(self, num: int) -> str:
        k = self.i + num
        return self.line[k] if k < len(self.line) else _END

    def store(self, num: int, kind: Lexeme) -> None:
        self.tokens.append(
            Token(
                self.line[self.i:self.i + num],
                SourcePosition(self.lineno, self.i + 1),
                kind,
            )
        )
        self.i += num - 1

    def error(self, colno: int, msg: str) -> None:
        self.errors.append(Diagnostic(SourcePosition(self.lineno, colno), msg))

    def store_operator(self, choices: Sequence[tuple[str, Lexeme]]) -> None:
        for rest, kind in choices:
            if self.line.startswith(rest, self.i + 1):
                self.store(1 + len(rest), kind)
                return

    # -- sequence recognisers: length if present at offset, else 0 -------

    def simple_escape_sequence(self, offset: int) -> int:
        if self.peek(offset) == "\\" and self.peek(offset + 1) not in ("u", "U", "x"):
            return 2
        return 0

    def hexadecimal_escape_sequence(self, offset: int) -> int:
        if (
            self.peek(offset) == "\\"
            and self.peek(offset + 1) == "x"
            and is_hexadecimal_digit(self.peek(offset + 2))
        ):
            j = 3
            while is_hexadecimal_digit(self.peek(j + offset)):
                j += 1
            return j
        return 0

    def universal_character_name(self, offset: int) -> int:
        for letter, digits in (("u", 4), ("U", 8)):
            if self.peek(offset) == "\\" and self.peek(offset + 1) == letter:
                j = 2
                while j <= digits + 1 and is_hexadecimal_digit(self.peek(j + offset)):
                    j += 1
                if j == digits + 2:
                    return j
                self.error(
                    self.i + offset,
                    f"invalid universal character name (\\{letter} must"
                    f" be followed by {digits} hexadecimal digits)",
                )
        return 0

    def escape_sequence(self, offset: int) -> int:
        return self.hexadecimal_escape_sequence(offset) or self.simple_escape_sequence(offset)

    def sc_char(self, offset: int, quote: str) -> int:
        if u := self.universal_character_name(offset):
            return u
        if e := self.escape_sequence(offset):
            return e
        if self.peek(offset) not in (quote, "\\"):
            return 1
        return 0

    def keyword(self) -> int:
        m = _KEYWORD_RE.match(self.line, self.i)
        if m:
            end = m.end()
            if end == len(self.line) or not is_identifier_continue(self.line[end]):
                return end - self.i
        return 0

    # -- main loop -------------------------------------------------------

    def run(self) -> None:
        while self.i < len(self.line):
            c = self.line[self.i]
            p1, p2, p3 = self.peek(1), self.peek(2), self.peek(3)
            if self.state.in_comment:
                self.inside_comment(c, p1)
            elif not self.token(c, p1, p2, p3):
                break
            self.i += 1
        if self.state.in_comment:
            self.state.current_comment += "\n"

    def inside_comment(self, c: str, p1: str) -> None:
        state = self.state
        if c == "*":
            # A '*' that does not close the comment is not kept in its text.
            if p1 == "/":
                state.current_comment += "*/"
                self.comments.append(
                    Comment(
                        CommentKind.STREAM_COMMENT,
                        state.current_comment_start,
                        SourcePosition(self.lineno, self.i + 2),
                        state.current_comment,
                    )
                )
                state.in_comment = False
                self.i += 1
        else:
            state.current_comment += c

    def token(self, c: str, p1: str, p2: str, p3: str) -> bool:
        """Lex at the current position; return False when the rest of the line is a comment."""
        if c == "/":
            if p1 == "*":
                self.state.current_comment = "/*"
                self.state.current_comment_start = SourcePosition(self.lineno, self.i + 1)
                self.state.in_comment = True
                self.i += 1
            elif p1 == "/":
                self.comments.append(
                    Comment(
                        CommentKind.LINE_COMMENT,
                        SourcePosition(self.lineno, self.i),
                        SourcePosition(self.lineno, len(self.line)),
                        self.line[self.i:],
                    )
                )
                self.state.in_comment = False
                return False
            else:
                self.store_operator(_SLASH_OPERATORS)
        elif c in _OPERATORS:
            self.store_operator(_OPERATORS[c])
        elif c == "0":
            self.zero(p1, p2)
            # The position has moved onto the last character examined, which
            # is then lexed again as a fresh token.
            self.default(p1, p2, p3)
        else:
            self.default(p1, p2, p3)
        return True

    def zero(self, p1: str, p2: str) -> None:
        j = 3
        if p1 in ("b", "B"):
            if is_binary_digit(p2):
                while is_separator_or(is_binary_digit, self.peek(j)):
                    j += 1
                self.store(j, Lexeme.BinaryLiteral)
            else:
                self.error(
                    self.i,
                    "binary literal cannot be empty (0B must be followed by binary digits)",
                )
                self.i += 1
        elif p1 in ("x", "X"):
            if is_hexadecimal_digit(p2):
                while is_separator_or(is_hexadecimal_digit, self.peek(j)):
                    j += 1
                self.store(j, Lexeme.HexadecimalLiteral)
            else:
                self.error(
                    self.i,
                    "hexadecimal literal cannot be empty (0X must be followed by hexadecimal digits)",
                )
                self.i += 1

    def encoding_prefix_and(self, c: str, p1: str, p2: str, quote: str) -> int:
        if c == quote:
            return 1
        if c == "u":
            if p1 == quote:
                return 2
            if p1 == "8" and p2 == quote:
                return 3
        return 0

    def default(self, p1: str, p2: str, p3: str) -> None:
        c = self.line[self.i]
        if c == "n" and p1 == "o" and p2 == "t" and p3 in _SPACE:
            self.store(3, Lexeme.Not)
        elif is_digit(c):
            self.number()
        elif j := self.encoding_prefix_and(c, p1, p2, '"'):
            self.string_literal(j)
        elif j := self.encoding_prefix_and(c, p1, p2, "'"):
            self.character_literal(j)
        elif j := self.keyword():
            self.store(j, Lexeme.Keyword)
        elif j := starts_with_identifier(self.line[self.i:]):
            self.identifier(j)
        elif c not in _SPACE:
            self.error(self.i, f"unexpected text '{c}'")

    def number(self) -> None:
        j = 1
        while is_separator_or(is_digit, self.peek(j)):
            j += 1
        if self.peek(j) != ".":
            self.store(j, Lexeme.DecimalLiteral)
            return
        j += 1
        if not is_digit(self.peek(j)):
            self.error(
                self.i,
                "floating point literal " + self.line[self.i:self.i + j]
                + " fractional part cannot be empty (if floating point was intended, use .0)",
            )
        while is_separator_or(is_digit, self.peek(j)):
            j += 1
        self.store(j, Lexeme.FloatLiteral)

    def string_literal(self, j: int) -> None:
        end = len(self.line)
        while self.i + j < end and (step := self.sc_char(j, '"')):
            j += step
        if self.peek(j) != '"':
            self.error(
                self.i,
                'string literal "' + self.line[self.i + 1:self.i + 1 + j]
                + '" is missing its closing "',
            )
        self.store(j + 1, Lexeme.StringLiteral)

    def character_literal(self, j: int) -> None:
        step = self.sc_char(j, "'")
        if step > 0:
            j += step
            if self.peek(j) != "'":
                self.error(
                    self.i,
                    "character literal '" + self.line[self.i + 1:self.i + 1 + j]
                    + "' is missing its closing '",
                )
            self.store(j + 1, Lexeme.CharacterLiteral)
        else:
            self.error(self.i, "character literal is empty")

    def identifier(self, j: int) -> None:
        self.store(j, Lexeme.Identifier)
        text = self.tokens[-1].text
        if text == "NULL":
            self.error(
                self.i,
                "'NULL' is not supported in Cpp2 - for a local pointer variable, leave it "
                "uninitialized instead, and set it to a non-null value when you have one",
            )
        if text == "union":
            self.error(
                self.i,
                "unsafe 'union's are not supported in Cpp2 - use std::variant instead",
            )
        if text == "delete":
            self.error(self.i, "'delete' and owning raw pointers are not supported in Cpp2")
            self.error(
                self.i,
                "  - use unique.new<T>, shared.new<T>, or gc.new<T> instead (in that order)",
            )


def lex_line(
    line: str,
    lineno: int,
    state: LexState,
    tokens: list[Token],
    comments: list[Comment],
    errors: list[Diagnostic],
) -> bool:
    """Tokenize one line, appending to ``tokens``, ``comments`` and ``errors``.

    Returns True if any token was added.
    """
    original = len(tokens)
    _LineLexer(line, lineno, state, tokens, comments, errors).run()
    return len(tokens) != original


class TokenMap:
    """The tokens of a source file, grouped by the line each Cpp2 section starts on."""

    def __init__(self, errors: list[Diagnostic]) -> None:
        self.errors = errors
        self.grammar_map: dict[int, list[Token]] = {}
        self.comments: list[Comment] = []

    def lex(self, lines: Sequence[SourceLine]) -> None:
        """Tokenize the Cpp2 lines; entry 0 of ``lines`` is a placeholder and is skipped."""
        if not lines:
            raise ValueError("no source lines to lex")
        state = LexState()
        lineno = 1
        count = len(lines)
        while lineno < count:
            if lines[lineno].cat != LineCategory.CPP2:
                lineno += 1
                continue
            entry = self.grammar_map.setdefault(lineno, [])
            state.current_comment = ""
            state.current_comment_start = SourcePosition()
            while lineno < count and lines[lineno].cat == LineCategory.CPP2:
                lex_line(lines[lineno].text, lineno, state, entry, self.comments, self.errors)
                lineno += 1

    def get_map(self) -> dict[int, list[Token]]:
        return self.grammar_map

    def get_comments(self) -> list[Comment]:
        return self.comments

    def debug_print(self, out: TextIO) -> None:
        """Write a listing of all sections, tokens and comments."""
        for lineno, entry in self.grammar_map.items():
            out.write(f"--- Section starting at line {lineno}\n")
            for tok in entry:
                pos = tok.position
                out.write(f"    {tok} ({pos.lineno},{pos.colno}) {lexeme_name(tok.type)}\n")
        out.write("--- Comments\n")
        for c in self.comments:
            marker = "// " if c.kind == CommentKind.LINE_COMMENT else "/* "
            out.write(
                f"    {marker}({c.start.lineno},{c.start.colno})"
                f"-({c.end.lineno},{c.end.colno}) {c.text}\n"
            )