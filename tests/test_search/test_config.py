"""Tests for search configuration."""

import pytest

from exprforge.config import SearchConfig
from exprforge.errors import InvalidInputError


class TestSearchConfig:
    """Test SearchConfig validation."""

    def test_defaults(self):
        """Defaults mirror a native 32-bit int."""
        config = SearchConfig()

        assert config.int_bits == 32
        assert config.engine == "tree"
        assert config.max_operands == 7

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"int_bits": 24},
            {"engine": "gpu"},
            {"max_operands": 0},
        ],
    )
    def test_invalid(self, kwargs):
        """Invalid settings raise InvalidInputError."""
        with pytest.raises(InvalidInputError):
            SearchConfig(**kwargs)

    def test_unlimited_operands(self):
        """max_operands=None disables the length guard."""
        assert SearchConfig(max_operands=None).max_operands is None


class TestFromEnv:
    """Test SearchConfig.from_env."""

    def test_defaults_without_env(self, clean_env):
        """No variables gives the default config."""
        assert SearchConfig.from_env() == SearchConfig()

    def test_reads_env(self, clean_env):
        """EXPRFORGE_* variables override defaults."""
        clean_env.setenv("EXPRFORGE_INT_BITS", "16")
        clean_env.setenv("EXPRFORGE_ENGINE", "Vectorized")
        clean_env.setenv("EXPRFORGE_MAX_OPERANDS", "none")

        config = SearchConfig.from_env()

        assert config.int_bits == 16
        assert config.engine == "vectorized"
        assert config.max_operands is None

    def test_bad_integer(self, clean_env):
        """Non-numeric values are rejected."""
        clean_env.setenv("EXPRFORGE_INT_BITS", "wide")
        with pytest.raises(InvalidInputError):
            SearchConfig.from_env()
