# cpp2front

The first stages of a front end for Cpp2, the experimental second syntax
for C++. The package covers source-line types, a tokenizer and a
command-line flag processor.

## Modules

- **`cpp2front.common`** holds the basic types:
  - source lines and their categories (`SourceLine`, `LineCategory`);
  - one-based positions (`SourcePosition`);
  - comments (`Comment`, `CommentKind`);
  - diagnostics (`Diagnostic`, with `format(file)` and `print(out, file)`).

  It also has character helpers: `is_digit`, `is_binary_digit`,
  `is_hexadecimal_digit`, `is_nondigit`, `is_identifier_start`,
  `is_identifier_continue`, `starts_with_identifier` and `is_separator_or`.
  Two small utilities are `bool_to_string` and `strip_path`.
- **`cpp2front.tokens`** defines the `Lexeme` token kinds, `lexeme_name`
  and the `Token` class. A token compares equal to another token or to a
  string when their text matches.
- **`cpp2front.lexer`** is the tokenizer:
  - `lex_line` tokenizes one line. It carries the state of an open `/* */`
    comment from line to line in a `LexState`.
  - `TokenMap` collects the tokens of each run of consecutive Cpp2 lines,
    keyed by the number of the run's first line. It keeps all comments in
    a separate list and can write a listing of both with `debug_print`.
- **`cpp2front.cmdline`** is a command-line flag processor
  (`CmdlineProcessor`).
  - Flags match by unique prefix and may start with `-` or `/`.
  - An argument `--` ends flag matching.
  - Matched arguments are removed and the rest are left in `arguments()`.
  - `make_default_cmdline` returns a processor that already has `-help`
    (synonym `-?`) and `-version` registered.

## Installation

```
pip install .
```

## Tokenizing

```python
import sys

from cpp2front.common import LineCategory, SourceLine
from cpp2front.lexer import TokenMap

lines = [
    SourceLine("", LineCategory.EMPTY),
    SourceLine("main: () -> int = {", LineCategory.CPP2),
    SourceLine("    x: int = 0x1F; // answer", LineCategory.CPP2),
    SourceLine("}", LineCategory.CPP2),
]

errors = []
tokens = TokenMap(errors)
tokens.lex(lines)

for first_line, section in tokens.get_map().items():
    for token in section:
        print(token.to_string())

tokens.debug_print(sys.stdout)
for error in errors:
    error.print(sys.stderr, "example.cpp2")
```

Entry 0 of `lines` is a placeholder, and lexing starts at the second entry.
Lines whose category is not `LineCategory.CPP2` are skipped.

Lexical problems are not raised. They are added as `Diagnostic` objects to
the list you pass in. The lexer reports:

- unterminated string and character literals, and empty character literals;
- empty `0x`/`0b` literals;
- floating-point literals with an empty fractional part;
- malformed `\u`/`\U` escapes;
- stray characters;
- the unsupported identifiers `NULL`, `union` and `delete`.

## Command-line flags

```python
from cpp2front.cmdline import make_default_cmdline

proc = make_default_cmdline()
proc.set_args(["-ver", "hello.cpp2"])   # arguments after the program name
proc.process_flags()                    # "-ver" runs print_version
print([arg.text for arg in proc.arguments()])   # ['hello.cpp2']
print(proc.help_was_requested())                # True
```

## What it does not do

There is no parser, no semantic analysis and no code generation. Nothing
here reads a file from disk or splits it into categorized lines, so you
build the list of `SourceLine` objects yourself. The package installs no
command. `CmdlineProcessor` is a library class for a program that you write
around it.

## Running the tests

```
pip install .[test]
pytest
```