"""Source-line types, tokenizer and command-line flag processing for a Cpp2 front end."""

__version__ = "0.1.1"
__all__ = ["common", "cmdline", "tokens", "lexer"]