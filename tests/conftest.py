"""
Shared pytest fixtures for jason tests.
"""

import pytest

from jason import ValidatorDiagnostics


@pytest.fixture
def diagnostics() -> ValidatorDiagnostics:
    """A fresh diagnostics instance for tests that thread one through several calls."""
    return ValidatorDiagnostics()
