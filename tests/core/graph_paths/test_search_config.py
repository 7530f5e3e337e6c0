"""Tests for shortest path search configuration."""

import pytest

from routegraph.core.exceptions import ConfigurationError
from routegraph.core.graph_paths.config import RelaxationOrder, SearchConfig


def test_defaults():
    """Test the default configuration values."""
    config = SearchConfig()

    assert config.relaxation_order is RelaxationOrder.PRIORITY
    assert config.max_memory_mb is None
    assert config.reject_negative_costs is False


def test_custom_values():
    """Test setting every option."""
    config = SearchConfig(
        relaxation_order=RelaxationOrder.SINGLE_PASS,
        max_memory_mb=256,
        reject_negative_costs=True,
    )

    assert config.relaxation_order is RelaxationOrder.SINGLE_PASS
    assert config.max_memory_mb == 256
    assert config.reject_negative_costs is True


def test_unknown_relaxation_order():
    """Test that relaxation orders must be enum members."""
    with pytest.raises(ConfigurationError, match="Unknown relaxation order"):
        SearchConfig(relaxation_order="priority")  # type: ignore[arg-type]


@pytest.mark.parametrize("limit", [0, -1, -0.5])
def test_non_positive_memory_limit(limit):
    """Test that memory limits must be positive."""
    with pytest.raises(ConfigurationError, match="must be positive"):
        SearchConfig(max_memory_mb=limit)


@pytest.mark.parametrize("limit", ["512", True])
def test_non_numeric_memory_limit(limit):
    """Test that memory limits must be numeric."""
    with pytest.raises(ConfigurationError, match="must be a numeric value"):
        SearchConfig(max_memory_mb=limit)  # type: ignore[arg-type]


def test_reject_negative_costs_must_be_boolean():
    """Test the type of reject_negative_costs."""
    with pytest.raises(ConfigurationError, match="must be a boolean"):
        SearchConfig(reject_negative_costs="yes")  # type: ignore[arg-type]


def test_repr():
    """Test the configuration representation."""
    assert repr(SearchConfig()) == (
        "SearchConfig(relaxation_order=priority, max_memory_mb=None, "
        "reject_negative_costs=False)"
    )
