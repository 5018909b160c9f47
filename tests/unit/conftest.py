"""Default marks for tests under `tests/unit/`."""

from pathlib import Path

import pytest

from tests.conftest import mark_items_under

# pylint: disable=unused-argument

ROOT = Path(__file__).parent.resolve()
MARKER_NAME = "unit"


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add default `unit` marks to items in `tests/unit/`."""
    mark_items_under(ROOT, MARKER_NAME, items)
