"""Shared pytest fixtures for reckon tests."""

import pytest

from reckon.core.expression_lang import MappingResolver


@pytest.fixture
def xy_resolver() -> MappingResolver:
    """Return a resolver binding x=3 and y=4."""
    return MappingResolver({"x": 3.0, "y": 4.0})
