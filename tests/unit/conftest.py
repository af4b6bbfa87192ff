# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration for unit tests.

Every test collected under tests/unit/ gets the ``unit`` marker, so unit
tests can be selected without per-module ``pytestmark`` declarations:

    pytest -m unit
    pytest -m "not unit"

Related:
    - pyproject.toml: marker definitions
    - tests/conftest.py: shared fixtures (in-memory live state, orchestrator)
"""

import pytest


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Add the unit marker to tests collected from tests/unit.

    A module-level ``pytestmark`` in a conftest does not propagate to the
    test modules beside it, hence the collection hook.
    """
    for item in items:
        if "tests/unit" not in str(item.path):
            continue
        if item.get_closest_marker("unit") is None:
            item.add_marker(pytest.mark.unit)
