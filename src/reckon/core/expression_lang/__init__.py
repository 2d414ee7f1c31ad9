"""
reckon arithmetic expression language.

Tokenizer, evaluator, and variable resolvers for expressions built from
numbers, variables, ``+ - * /``, parentheses, and ``sin``/``cos``/``tan``
(arguments in degrees).

Usage:
    from reckon.core.expression_lang import MappingResolver, evaluate, tokenize

    tokens = tokenize("(x + y) * sin(30) - 1")
    result = evaluate(tokens, MappingResolver({"x": 2.0, "y": 3.0}))
    # result == 1.5
"""

from reckon.core.expression_lang.evaluator import FUNCTIONS, calculate, evaluate
from reckon.core.expression_lang.resolvers import (
    MappingResolver,
    PromptingResolver,
    VariableResolver,
)
from reckon.core.expression_lang.tokenizer import FUNCTION_NAMES, Token, TokenKind, tokenize

__all__ = [
    "FUNCTIONS",
    "FUNCTION_NAMES",
    "MappingResolver",
    "PromptingResolver",
    "Token",
    "TokenKind",
    "VariableResolver",
    "calculate",
    "evaluate",
    "tokenize",
]
