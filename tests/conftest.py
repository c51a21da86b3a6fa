"""
Pytest configuration and shared fixtures for errortree tests.
"""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from errortree import ErrorTree  # noqa: E402


# =============================================================================
# Tree Fixtures
# =============================================================================


@pytest.fixture
def nested_tree() -> ErrorTree:
    """Tree with a leaf under "a" and a nested tree under "c"."""
    return ErrorTree(
        delimiter=".",
        errors={
            "a": ValueError("test0"),
            "c": ErrorTree(errors={"a": ValueError("test1")}),
        },
    )


# =============================================================================
# Markers Configuration
# =============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "property: Property-based tests")
    config.addinivalue_line("markers", "integration: Integration tests")
