"""
reckon - arithmetic expression calculator.

Evaluates expressions such as ``(x + y) * sin(30) - 1`` with standard
operator precedence, variables supplied by a pluggable resolver, and
trigonometric functions taking degrees.
"""

from __future__ import annotations

from ._version import get_version
from .core.errors import (
    ConfigError,
    DivisionByZeroError,
    EvalError,
    ExpressionSyntaxError,
    LexError,
    MalformedNumberError,
    NestingTooDeepError,
    ReckonError,
    UnknownFunctionError,
    VariableResolutionError,
)
from .core.expression_lang import (
    MappingResolver,
    PromptingResolver,
    Token,
    TokenKind,
    VariableResolver,
    calculate,
    evaluate,
    tokenize,
)

__version__ = get_version()

__all__ = [
    "__version__",
    # Pipeline
    "tokenize",
    "evaluate",
    "calculate",
    "Token",
    "TokenKind",
    # Resolvers
    "VariableResolver",
    "MappingResolver",
    "PromptingResolver",
    # Errors
    "ReckonError",
    "ConfigError",
    "LexError",
    "EvalError",
    "ExpressionSyntaxError",
    "MalformedNumberError",
    "NestingTooDeepError",
    "DivisionByZeroError",
    "UnknownFunctionError",
    "VariableResolutionError",
]
