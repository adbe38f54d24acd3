"""
Pytest fixtures for exprforge tests.
"""

import pytest

from exprforge.config import SearchConfig
from exprforge.expression.arithmetic import IntegerSemantics


@pytest.fixture
def int32() -> IntegerSemantics:
    """32-bit semantics, the default width."""
    return IntegerSemantics(32)


@pytest.fixture
def int8() -> IntegerSemantics:
    """8-bit semantics, small enough to overflow easily."""
    return IntegerSemantics(8)


@pytest.fixture
def sample_numbers() -> list[int]:
    """The classic example sequence."""
    return [2, 3, 4]


@pytest.fixture(params=["tree", "vectorized"])
def search_config(request) -> SearchConfig:
    """Default config for each evaluation engine."""
    return SearchConfig(engine=request.param)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove EXPRFORGE_* variables from the environment."""
    for name in ("EXPRFORGE_INT_BITS", "EXPRFORGE_ENGINE", "EXPRFORGE_MAX_OPERANDS"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
