"""Global pytest fixtures for QAUDIT."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

# pylint: disable=unused-argument

pytest_plugins = [
    "tests.fixtures.sqlite",
    "tests.fixtures.datagen",
]

TESTS_ROOT = Path(__file__).parent.resolve()

#: Default mark for every test collected under each top-level directory.
DIRECTORY_MARKS = {
    TESTS_ROOT / "unit": "unit",
    TESTS_ROOT / "integration": "integration",
}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark items by the directory they live in unless already marked."""
    for item in items:
        parents = item.path.resolve().parents
        for root, name in DIRECTORY_MARKS.items():
            if root in parents and item.get_closest_marker(name) is None:
                item.add_marker(getattr(pytest.mark, name))


# Helper to route to an existing engine fixture by name
@pytest.fixture
def engine(request: pytest.FixtureRequest) -> Engine:
    """Indirection fixture to parametrize over engine-providing fixtures.

    Example:
        ```py
        @pytest.mark.parametrize("engine", ["sqlite_engine_memory", "sqlite_engine_file"], indirect=True)
        def test_something(engine): ...
        ```
    """
    return request.getfixturevalue(request.param)
