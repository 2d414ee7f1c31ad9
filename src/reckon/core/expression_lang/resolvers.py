"""
Variable resolvers.

The evaluator never looks up variables itself; it asks a resolver injected
by the caller. Two implementations ship with reckon:

- ``MappingResolver``: a fixed table, used by tests and ``--no-prompt``
- ``PromptingResolver``: asks on the console the first time a name is used,
  then answers from its cache

Usage:
    from reckon.core.expression_lang import MappingResolver, calculate

    calculate("x * y - 2", MappingResolver({"x": 3.0, "y": 4.0}))
    # 10.0
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Protocol, runtime_checkable

from rich.console import Console

from reckon.core.errors import VariableResolutionError

logger = logging.getLogger(__name__)


@runtime_checkable
class VariableResolver(Protocol):
    """Supplies numeric values for variable names."""

    def resolve(self, name: str) -> float:
        """Return the value bound to ``name``.

        Raises:
            VariableResolutionError: If no value can be produced.
        """
        ...


class MappingResolver:
    """Resolver backed by a fixed name -> value table."""

    def __init__(self, bindings: Mapping[str, float] | None = None) -> None:
        self._bindings: dict[str, float] = dict(bindings or {})

    def bind(self, name: str, value: float) -> None:
        self._bindings[name] = float(value)

    def resolve(self, name: str) -> float:
        try:
            return self._bindings[name]
        except KeyError:
            raise VariableResolutionError(name) from None

    def __repr__(self) -> str:
        return f"MappingResolver({self._bindings!r})"


class PromptingResolver:
    """Resolver that asks for each variable once and caches the answer.

    Args:
        ask: Callable that shows a prompt and returns the typed line.
            Defaults to ``console.input``.
        console: Rich console used for the default ``ask``.
        preset: Values known up front; these names are never prompted for.
    """

    PROMPT = "Enter value for variable {name}: "

    def __init__(
        self,
        ask: Callable[[str], str] | None = None,
        console: Console | None = None,
        preset: Mapping[str, float] | None = None,
    ) -> None:
        if ask is None:
            ask = (console or Console()).input
        self._ask = ask
        self._cache: dict[str, float] = dict(preset or {})

    @property
    def bindings(self) -> dict[str, float]:
        """Copy of every value known so far."""
        return dict(self._cache)

    def resolve(self, name: str) -> float:
        if name in self._cache:
            return self._cache[name]

        try:
            answer = self._ask(self.PROMPT.format(name=name))
        except EOFError:
            raise VariableResolutionError(
                name, f"No value entered for variable {name}"
            ) from None

        try:
            value = float(answer.strip())
        except ValueError:
            raise VariableResolutionError(
                name, f"Invalid value for variable {name}: {answer.strip()!r}"
            ) from None

        logger.debug("Bound variable %s = %r", name, value)
        self._cache[name] = value
        return value
