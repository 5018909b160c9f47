"""Default marks for tests under `tests/functional/`."""

from pathlib import Path

import pytest

from tests.conftest import mark_items_under

# pylint: disable=unused-argument

ROOT = Path(__file__).parent.resolve()
MARKER_NAME = "functional"


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add default `functional` marks to items in `tests/functional/`."""
    mark_items_under(ROOT, MARKER_NAME, items)
