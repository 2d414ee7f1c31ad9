"""
Error types for reckon tokenizing, parsing, and evaluation.
"""

from __future__ import annotations

from dataclasses import dataclass


class ReckonError(Exception):
    """Base exception for all reckon errors."""

    def __init__(
        self,
        message: str,
        pos: int | None = None,
        context: ExpressionContext | None = None,
    ) -> None:
        self.message = message
        self.pos = pos
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.message}\n{self.context.format()}"
        return self.message

    def attach_source(self, source: str) -> None:
        """Attach the expression text so the message can point at ``pos``.

        No-op when the error has no position or already carries context.
        """
        if self.pos is None or self.context is not None:
            return
        self.context = ExpressionContext(source=source, pos=self.pos)
        self.args = (self._format_message(),)


class LexError(ReckonError):
    """
    Raised when the tokenizer meets a character it does not support.

    Examples:
    - ``2 $ 3``
    - ``x_1`` (underscores are not part of identifiers)
    """

    def __init__(self, char: str, pos: int) -> None:
        self.char = char
        super().__init__(f"Unexpected character: {char!r}", pos)


class EvalError(ReckonError):
    """Base class for failures while evaluating a token sequence."""


class ExpressionSyntaxError(EvalError):
    """
    Raised when the token sequence violates the grammar.

    Examples:
    - Missing closing parenthesis
    - Operator without a right operand
    - Trailing tokens after a complete expression
    """


class MalformedNumberError(EvalError):
    """Raised when a number token is not a valid float (``1.2.3``, ``.``)."""

    def __init__(self, text: str, pos: int | None = None) -> None:
        self.text = text
        super().__init__(f"Malformed number: {text!r}", pos)


class DivisionByZeroError(EvalError):
    """Raised when the right operand of ``/`` is exactly zero."""

    def __init__(self) -> None:
        super().__init__("Division by zero")


class NestingTooDeepError(EvalError):
    """Raised when parentheses or function calls nest past the stack limit."""

    def __init__(self) -> None:
        super().__init__("expression nested too deeply")


class UnknownFunctionError(EvalError):
    """Raised for a function name outside the supported set."""

    def __init__(self, name: str, pos: int | None = None) -> None:
        self.name = name
        super().__init__(f"Unknown function: {name}", pos)


class VariableResolutionError(EvalError):
    """Raised when a variable's value cannot be obtained from the resolver."""

    def __init__(self, name: str, message: str | None = None, pos: int | None = None) -> None:
        self.name = name
        super().__init__(message or f"Variable not defined: {name}", pos)


class ConfigError(ReckonError):
    """Raised when ``reckon.toml`` holds values that cannot be used."""


@dataclass
class ExpressionContext:
    """
    Location of an error inside the expression text.

    Attributes:
        source: The full expression text
        pos: 0-based character offset of the offending token
    """

    source: str
    pos: int

    def format(self) -> str:
        """
        Format the line holding ``pos`` with a caret under it.

        Returns:
            Two lines like::

                  2 $ 3
                    ^
        """
        line_start = self.source.rfind("\n", 0, self.pos) + 1
        line_end = self.source.find("\n", self.pos)
        if line_end == -1:
            line_end = len(self.source)
        line = self.source[line_start:line_end]
        column = self.pos - line_start
        return f"  {line}\n  {' ' * column}^"
