"""Common types: source lines, positions, comments, diagnostics and character classes."""

from __future__ import annotations

import enum
import string
from dataclasses import dataclass
from typing import Callable, TextIO

_BINARY_DIGITS = frozenset("01")
_DIGITS = frozenset(string.digits)
_HEX_DIGITS = frozenset(string.hexdigits)
_NONDIGITS = frozenset(string.ascii_letters + "_")


class LineCategory(enum.Enum):
    """What kind of content a source line holds."""

    EMPTY = "empty"
    PREPROCESSOR = "preprocessor"
    COMMENT = "comment"
    IMPORT = "import"
    CPP1 = "cpp1"
    CPP2 = "cpp2"


_PREFIXES = {
    LineCategory.EMPTY: "/*   */ ",
    LineCategory.PREPROCESSOR: "/* # */ ",
    LineCategory.COMMENT: "/* / */ ",
    LineCategory.IMPORT: "/* i */ ",
    LineCategory.CPP1: "/* 1 */ ",
    LineCategory.CPP2: "/* 2 */ ",
}


@dataclass
class SourceLine:
    """One line of program source, tagged with its category."""

    text: str = ""
    cat: LineCategory = LineCategory.EMPTY

    def prefix(self) -> str:
        """Return the debug prefix marking this line's category."""
        return _PREFIXES[self.cat]


@dataclass(frozen=True, order=True)
class SourcePosition:
    """A one-based (line, column) position in the program source."""

    lineno: int = 1
    colno: int = 1

    def to_string(self) -> str:
        return f"({self.lineno},{self.colno})"

    def __str__(self) -> str:
        return self.to_string()


class CommentKind(enum.Enum):
    LINE_COMMENT = 0
    STREAM_COMMENT = 1


@dataclass
class Comment:
    """A comment found in the source, with its extent and text."""

    kind: CommentKind
    start: SourcePosition
    end: SourcePosition
    text: str


@dataclass
class Diagnostic:
    """A user-readable error message tied to a source position."""

    where: SourcePosition
    msg: str
    internal: bool = False

    def format(self, file: str) -> str:
        """Render the message as a single line prefixed with the file name."""
        parts = [file]
        if self.where.lineno > 0:
            parts.append(f"({self.where.lineno}")
            if self.where.colno >= 0:
                parts.append(f",{self.where.colno}")
            parts.append(")")
        parts.append(":")
        if self.internal:
            parts.append(" internal compiler")
        parts.append(f" error: {self.msg}\n")
        return "".join(parts)

    def print(self, out: TextIO, file: str) -> None:
        """Write the formatted message to a text stream."""
        out.write(self.format(file))


def is_binary_digit(c: str) -> bool:
    return c in _BINARY_DIGITS


def is_hexadecimal_digit(c: str) -> bool:
    return c in _HEX_DIGITS


def is_digit(c: str) -> bool:
    return c in _DIGITS


def is_nondigit(c: str) -> bool:
    return c in _NONDIGITS


def is_identifier_start(c: str) -> bool:
    return is_nondigit(c)


def is_identifier_continue(c: str) -> bool:
    return is_digit(c) or is_nondigit(c)


def starts_with_identifier(s: str) -> int:
    """Return the length of the identifier at the start of ``s``, or 0."""
    if not s or not is_identifier_start(s[0]):
        return 0
    length = 1
    for ch in s[1:]:
        if not is_identifier_continue(ch):
            break
        length += 1
    return length


def is_separator_or(pred: Callable[[str], bool], c: str) -> bool:
    """True if ``c`` is a digit separator (') or satisfies ``pred``."""
    return c == "'" or pred(c)


def bool_to_string(b: object) -> str:
    """Render a truth value as the lower-case words ``true`` or ``false``."""
    return str(bool(b)).lower()


def strip_path(file: str) -> str:
    """Return the file name with any leading directory path removed."""
    cut = max(file.rfind("/"), file.rfind("\\"))
    return file[cut + 1:]