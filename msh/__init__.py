"""Lexing, parsing, expansion and formatting for a small shell."""

__version__ = "0.1.0"
__all__ = ["expansion", "formatting", "lexer", "parser", "strings", "syntax_tree"]