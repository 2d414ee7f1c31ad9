"""
Recursive descent evaluator for reckon arithmetic expressions.

Parsing and evaluation are fused: each grammar rule returns the value of the
text it consumed, so no syntax tree is built.

Grammar (precedence low to high):
    expression  → term (("+" | "-") term)*
    term        → factor (("*" | "/") factor)*
    factor      → NUMBER
                | VARIABLE
                | FUNCTION "(" expression ")"
                | "(" expression ")"

Function arguments are in degrees.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Sequence

from reckon.core.errors import (
    DivisionByZeroError,
    ExpressionSyntaxError,
    MalformedNumberError,
    NestingTooDeepError,
    ReckonError,
    UnknownFunctionError,
    VariableResolutionError,
)
from reckon.core.expression_lang.resolvers import MappingResolver, VariableResolver
from reckon.core.expression_lang.tokenizer import Token, TokenKind, tokenize

logger = logging.getLogger(__name__)

FUNCTIONS: dict[str, Callable[[float], float]] = {
    "sin": lambda degrees: math.sin(math.radians(degrees)),
    "cos": lambda degrees: math.cos(math.radians(degrees)),
    "tan": lambda degrees: math.tan(math.radians(degrees)),
}


class _Calculator:
    """Evaluates one token sequence. Not reusable."""

    def __init__(self, tokens: Sequence[Token], resolver: VariableResolver) -> None:
        self.tokens = tokens
        self.resolver = resolver
        self.pos = 0

    # -- Cursor primitives --

    def peek(self) -> Token:
        return self.tokens[self.pos]

    def previous(self) -> Token:
        return self.tokens[self.pos - 1]

    def is_at_end(self) -> bool:
        return self.peek().kind == TokenKind.EOF

    def check(self, kind: TokenKind) -> bool:
        if self.is_at_end():
            return False
        return self.peek().kind == kind

    def advance(self) -> Token:
        if not self.is_at_end():
            self.pos += 1
        return self.previous()

    def match(self, kind: TokenKind, text: str | None = None) -> bool:
        if self.check(kind) and (text is None or self.peek().text == text):
            self.pos += 1
            return True
        return False

    def consume(self, kind: TokenKind, message: str) -> Token:
        if self.check(kind):
            return self.advance()
        raise ExpressionSyntaxError(message, self.peek().pos)

    # -- Grammar rules --

    def calculate(self) -> float:
        result = self.expression()
        if not self.is_at_end():
            tok = self.peek()
            raise ExpressionSyntaxError(f"unexpected token: {tok.text}", tok.pos)
        return result

    def expression(self) -> float:
        """term (('+' | '-') term)*"""
        result = self.term()
        while True:
            if self.match(TokenKind.OPERATOR, "+"):
                result += self.term()
            elif self.match(TokenKind.OPERATOR, "-"):
                result -= self.term()
            else:
                return result

    def term(self) -> float:
        """factor (('*' | '/') factor)*"""
        result = self.factor()
        while True:
            if self.match(TokenKind.OPERATOR, "*"):
                result *= self.factor()
            elif self.match(TokenKind.OPERATOR, "/"):
                divisor = self.factor()
                if divisor == 0.0:
                    raise DivisionByZeroError()
                result /= divisor
            else:
                return result

    def factor(self) -> float:
        """NUMBER | VARIABLE | FUNCTION '(' expression ')' | '(' expression ')'"""
        if self.match(TokenKind.LPAREN):
            result = self.expression()
            self.consume(TokenKind.RPAREN, "expect ')' after expression")
            return result

        if self.match(TokenKind.NUMBER):
            tok = self.previous()
            try:
                return float(tok.text)
            except ValueError:
                raise MalformedNumberError(tok.text, tok.pos) from None

        if self.match(TokenKind.VARIABLE):
            return self._resolve(self.previous())

        if self.match(TokenKind.FUNCTION):
            name_tok = self.previous()
            self.consume(TokenKind.LPAREN, "expected '(' after function name")
            arg = self.expression()
            self.consume(TokenKind.RPAREN, "expected ')' after function argument")
            return _apply_function(name_tok, arg)

        tok = self.peek()
        raise ExpressionSyntaxError(f"unexpected token: {tok.text}", tok.pos)

    def _resolve(self, tok: Token) -> float:
        try:
            value = float(self.resolver.resolve(tok.text))
        except VariableResolutionError:
            raise
        except (LookupError, TypeError, ValueError) as e:
            raise VariableResolutionError(
                tok.text, f"Cannot resolve variable {tok.text}: {e}", tok.pos
            ) from e
        logger.debug("Resolved %s = %r", tok.text, value)
        return value


def _apply_function(name_tok: Token, arg: float) -> float:
    func = FUNCTIONS.get(name_tok.text)
    if func is None:
        raise UnknownFunctionError(name_tok.text, name_tok.pos)
    return func(arg)


def evaluate(tokens: Sequence[Token], resolver: VariableResolver) -> float:
    """Evaluate a token sequence produced by ``tokenize``.

    Args:
        tokens: Token list ending in exactly one EOF token.
        resolver: Source of variable values, queried on every variable use.

    Returns:
        The value of the expression.

    Raises:
        EvalError: Any subclass, on the first failure. Nesting past the
            interpreter stack limit is NestingTooDeepError.
        ValueError: If the sequence is empty or not EOF-terminated.
        TypeError: If no resolver is given.
    """
    if resolver is None:
        raise TypeError("evaluate() requires a variable resolver")
    if not tokens or tokens[-1].kind != TokenKind.EOF:
        raise ValueError("Token sequence must end with an EOF token")

    try:
        result = _Calculator(tokens, resolver).calculate()
    except RecursionError:
        raise NestingTooDeepError() from None
    logger.debug("Evaluated %d tokens to %r", len(tokens), result)
    return result


def calculate(source: str, resolver: VariableResolver | None = None) -> float:
    """Tokenize and evaluate an expression string.

    Args:
        source: Expression text (e.g., "(x + y) * sin(30) - 1")
        resolver: Variable source; an empty ``MappingResolver`` if omitted.

    Raises:
        LexError: If tokenization fails.
        EvalError: If evaluation fails. Errors with a position carry the
            source text so their message points at the offending token.
    """
    if resolver is None:
        resolver = MappingResolver()
    try:
        return evaluate(tokenize(source), resolver)
    except ReckonError as e:
        e.attach_source(source)
        raise
