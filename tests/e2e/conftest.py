"""Default marks for tests under `tests/e2e/`."""

from pathlib import Path

import pytest

from tests.conftest import mark_items_under

# pylint: disable=unused-argument

ROOT = Path(__file__).parent.resolve()
MARKER_NAME = "e2e"


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add default `e2e` marks to items in `tests/e2e/`."""
    mark_items_under(ROOT, MARKER_NAME, items)
