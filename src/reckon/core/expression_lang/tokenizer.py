"""
Tokenizer for reckon arithmetic expressions.

Converts an expression string into a sequence of typed tokens, always
terminated by a single EOF token.
"""

from __future__ import annotations

from enum import StrEnum, auto

from pydantic import BaseModel, ConfigDict, Field, model_validator

from reckon.core.errors import LexError


class TokenKind(StrEnum):
    """Token types for arithmetic expressions."""

    NUMBER = auto()
    VARIABLE = auto()
    FUNCTION = auto()
    OPERATOR = auto()
    LPAREN = auto()
    RPAREN = auto()

    # End of input
    EOF = auto()


class Token(BaseModel):
    """A single token from the expression tokenizer."""

    kind: TokenKind = Field(description="Token type")
    text: str = Field(description="Lexical spelling, empty only for EOF")
    pos: int = Field(default=0, ge=0, description="Offset of the first character")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_text(self) -> Token:
        if self.kind == TokenKind.EOF:
            if self.text:
                raise ValueError("EOF token must have empty text")
        elif not self.text:
            raise ValueError(f"{self.kind} token must have non-empty text")
        return self

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.text!r}, pos={self.pos})"


FUNCTION_NAMES: frozenset[str] = frozenset({"sin", "cos", "tan"})

_OPERATORS = frozenset("+-*/")


def tokenize(source: str) -> list[Token]:
    """Tokenize an expression string into a list of tokens.

    Numbers are read leniently: any run of digits and dots becomes a NUMBER
    token, so ``1.2.3`` and ``.`` are only rejected when evaluated.

    Raises:
        LexError: On a character that cannot start any token.
    """
    tokens: list[Token] = []
    i = 0
    n = len(source)

    while i < n:
        c = source[i]

        if c.isspace():
            i += 1
            continue

        if c.isdecimal() or c == ".":
            start = i
            while i < n and (source[i].isdecimal() or source[i] == "."):
                i += 1
            tokens.append(Token(kind=TokenKind.NUMBER, text=source[start:i], pos=start))
            continue

        # Identifiers are letters only: no digits, no underscores
        if c.isalpha():
            start = i
            while i < n and source[i].isalpha():
                i += 1
            word = source[start:i]
            kind = TokenKind.FUNCTION if word in FUNCTION_NAMES else TokenKind.VARIABLE
            tokens.append(Token(kind=kind, text=word, pos=start))
            continue

        if c in _OPERATORS:
            tokens.append(Token(kind=TokenKind.OPERATOR, text=c, pos=i))
        elif c == "(":
            tokens.append(Token(kind=TokenKind.LPAREN, text=c, pos=i))
        elif c == ")":
            tokens.append(Token(kind=TokenKind.RPAREN, text=c, pos=i))
        else:
            raise LexError(c, i)
        i += 1

    tokens.append(Token(kind=TokenKind.EOF, text="", pos=n))
    return tokens
