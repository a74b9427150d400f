"""Lexer, symbol table and syntax tree nodes for a small subset of Common Lisp."""

__version__ = "0.1.0"

__all__ = ["cli", "hashmap", "lexer", "lines", "syntax_tree"]