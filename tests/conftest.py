"""Shared pytest configuration and marker assignment."""

from __future__ import annotations

from pathlib import Path

import pytest

SUITE_MARKERS = {
    "e2e_tests": pytest.mark.e2e,
    "integration_tests": pytest.mark.integration,
    "unit_tests": pytest.mark.unit,
}


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach the unit/integration/e2e marker matching each test's suite folder."""
    del config
    for item in items:
        parts = Path(str(item.fspath)).parts
        for folder, marker in SUITE_MARKERS.items():
            if folder in parts:
                item.add_marker(marker)
                break
