"""Global pytest fixtures for CASECRAFT."""

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


def mark_items_under(root: Path, marker_name: str, items: list[pytest.Item]) -> None:
    """Add the `marker_name` mark to every collected item living under `root`."""
    marker = getattr(pytest.mark, marker_name)
    for item in items:
        if root in item.path.resolve().parents:
            if not any(m.name == marker_name for m in item.iter_markers()):
                item.add_marker(marker)
