"""Global pytest fixtures and hooks for STUNT."""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

pytest_plugins = [
    "tests.fixtures.doubles",
]

TESTS_ROOT = Path(__file__).parent.resolve()

# Directory under tests/ -> default mark for the items collected there
DEFAULT_MARKS = {
    "unit": "unit",
    "property": "property",
    "e2e": "e2e",
}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the default mark of each item's top-level test directory."""
    for item in items:
        path = item.path.resolve()
        if TESTS_ROOT not in path.parents:
            continue
        top_level = path.relative_to(TESTS_ROOT).parts[0]
        if (marker_name := DEFAULT_MARKS.get(top_level)) is None:
            continue
        if not any(marker.name == marker_name for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, marker_name))


@pytest.fixture(autouse=True)
def _loose_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the ambient STUNT_BEHAVIOR from leaking into tests."""
    monkeypatch.delenv("STUNT_BEHAVIOR", raising=False)
