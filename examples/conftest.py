"""Shared pytest configuration for lilypad examples.

Provides the ``example_project`` fixture: the directory of the test
file, which holds the example's ``routes/`` tree.
"""

from pathlib import Path

import pytest


@pytest.fixture
def example_project(request: pytest.FixtureRequest) -> Path:
    """Project directory next to the test file."""
    project = Path(request.path).parent
    assert (project / "routes").is_dir(), f"{project} has no routes/ directory"
    return project
