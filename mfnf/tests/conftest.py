"""Pytest fixtures for package-level tests."""

import pytest

from mfnf.spec.registry import clear_registry


@pytest.fixture(autouse=True)
def packaged_registry(monkeypatch):
    """Validate against the specification shipped with the package."""
    monkeypatch.delenv("MFNF_TEMPLATE_SPEC", raising=False)
    clear_registry()
    yield
    clear_registry()
