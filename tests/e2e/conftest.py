"""Default marks for tests under `tests/e2e/`."""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

E2E_ROOT = Path(__file__).parent.resolve()
MARKER_NAME = "e2e"


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add default `e2e` marks to items in `tests/e2e/`."""
    for item in items:
        if E2E_ROOT in item.path.resolve().parents and not any(
            marker.name == MARKER_NAME for marker in item.iter_markers()
        ):
            item.add_marker(getattr(pytest.mark, MARKER_NAME))
