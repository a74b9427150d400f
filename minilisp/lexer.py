"""Lexical analysis of Lisp source text into a stream of tokens."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterator
from dataclasses import dataclass


class TokenType(enum.Enum):
    """Kinds of token produced by the lexer."""

    END = 0
    INVALID = 1
    LPAREN = 2
    RPAREN = 3
    SYMBOL = 4
    KEYWORD = 5
    STRING = 6
    FUNCTION = 7
    MACRO = 8
    NUMERIC = 9
    COMMENT = 10


_TOKEN_NAMES = {
    TokenType.END: "End of content",
    TokenType.INVALID: "Invalid token",
    TokenType.LPAREN: "(",
    TokenType.RPAREN: ")",
    TokenType.SYMBOL: "Symbol",
    TokenType.KEYWORD: "Keyword",
    TokenType.STRING: "String",
    TokenType.NUMERIC: "Numeric",
    TokenType.FUNCTION: "Function",
    TokenType.MACRO: "Macro",
    TokenType.COMMENT: "Comment",
}

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"
_NUMERIC_CHARS = _DIGITS + "./"
_SYMBOL_PUNCTUATION = "-_+*/:<=>!?&~^"


@dataclass(frozen=True)
class Token:
    """A single lexeme together with its kind."""

    type: TokenType
    lexeme: str


def token_to_str(type: TokenType) -> str:
    """Return the human-readable name of a token type."""
    return _TOKEN_NAMES[TokenType(type)]


def is_symbol_char(c: str) -> bool:
    """Return True if ``c`` may appear inside a symbol."""
    if len(c) != 1:
        return False
    return (c.isascii() and c.isalnum()) or c in _SYMBOL_PUNCTUATION


class Lexer:
    """Splits a piece of source text into tokens."""

    def __init__(self, content: str) -> None:
        self.content = content
        self.cursor = 0

    def peek(self) -> str:
        """Return the character after the current one, or NUL past the end."""
        following = self.cursor + 1
        if following >= len(self.content):
            return "\0"
        return self.content[following]

    def next(self) -> Token:
        """Return the next token; an END token once the input is exhausted."""
        content = self.content
        while self.cursor < len(content) and content[self.cursor] in _WHITESPACE:
            self.cursor += 1
        if self.cursor >= len(content):
            return Token(TokenType.END, "")
        handler = _HANDLERS.get(content[self.cursor], Lexer._lex_symbol)
        return handler(self)

    def __iter__(self) -> Iterator[Token]:
        while (token := self.next()).type is not TokenType.END:
            yield token

    def _scan(self, start: int, accept: Callable[[str], bool]) -> str:
        content = self.content
        while self.cursor < len(content) and accept(content[self.cursor]):
            self.cursor += 1
        return content[start:self.cursor]

    def _single(self, type: TokenType) -> Token:
        char = self.content[self.cursor]
        self.cursor += 1
        return Token(type, char)

    def _lex_paren(self) -> Token:
        if self.content[self.cursor] == "(":
            return self._single(TokenType.LPAREN)
        return self._single(TokenType.RPAREN)

    def _lex_string(self) -> Token:
        self.cursor += 1
        start = self.cursor
        lexeme = self._scan(start, lambda c: c != '"')
        self.cursor += 1  # skip the closing quote
        return Token(TokenType.STRING, lexeme)

    def _lex_function(self) -> Token:
        return self._single(TokenType.FUNCTION)

    def _lex_numeric(self) -> Token:
        return Token(TokenType.NUMERIC, self._scan(self.cursor, lambda c: c in _NUMERIC_CHARS))

    def _lex_macro(self) -> Token:
        return Token(TokenType.MACRO, self._scan(self.cursor, lambda c: c != "\n"))

    def _lex_keyword(self) -> Token:
        return Token(TokenType.KEYWORD, self._scan(self.cursor, lambda c: c != " "))

    def _lex_comment(self) -> Token:
        return Token(TokenType.COMMENT, self._scan(self.cursor, lambda c: c != "\n"))

    def _lex_symbol(self) -> Token:
        if not is_symbol_char(self.content[self.cursor]):
            return self._single(TokenType.INVALID)
        return Token(TokenType.SYMBOL, self._scan(self.cursor, is_symbol_char))


_HANDLERS: dict[str, Callable[[Lexer], Token]] = {
    "(": Lexer._lex_paren,
    ")": Lexer._lex_paren,
    '"': Lexer._lex_string,
    "+": Lexer._lex_function,
    "-": Lexer._lex_function,
    "*": Lexer._lex_function,
    "/": Lexer._lex_function,
    "#": Lexer._lex_macro,
    ":": Lexer._lex_keyword,
    ";": Lexer._lex_comment,
    **{digit: Lexer._lex_numeric for digit in _DIGITS},
}


def tokenize(line: str) -> list[Token]:
    """Return every token of ``line``, excluding the final END token."""
    return list(Lexer(line))


def describe_token(token: Token) -> str:
    """Format a token as a one-line report."""
    return f"Token: {token_to_str(token.type):<10} | Lexeme: {token.lexeme}"