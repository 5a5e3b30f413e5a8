"""Tests for hyperbridge.__init__: lazy public API."""

import pytest

import hyperbridge


@pytest.mark.parametrize("name", hyperbridge.__all__)
def test_all_names_resolve(name: str) -> None:
    """Every name in __all__ must resolve via __getattr__ without error."""
    obj = getattr(hyperbridge, name)
    assert obj is not None, f"hyperbridge.{name} resolved to None"


def test_unknown_name_raises_attribute_error() -> None:
    with pytest.raises(AttributeError, match="no attribute"):
        hyperbridge.__getattr__("ThisDoesNotExist")


def test_version() -> None:
    assert isinstance(hyperbridge.__version__, str)
