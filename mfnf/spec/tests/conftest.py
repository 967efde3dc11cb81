"""Pytest fixtures for template specification tests."""

from pathlib import Path

import pytest

from mfnf.spec.loader import load_definitions
from mfnf.spec.predicates import PREDICATES
from mfnf.spec.registry import clear_registry, compile_spec

FIXTURES = Path(__file__).parent / "fixtures"


def nop_pred(elems):
    return None


@pytest.fixture(autouse=True)
def reset_registry():
    """Make sure no test leaks a process-wide registry into the next one."""
    clear_registry()
    yield
    clear_registry()


@pytest.fixture
def test_definitions():
    return load_definitions(FIXTURES / "test_spec.yaml")


@pytest.fixture
def test_registry(test_definitions):
    return compile_spec(test_definitions, predicates={**PREDICATES, "nop_pred": nop_pred})
