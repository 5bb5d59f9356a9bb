"""
tests/ui/conftest.py — pytest configuration for UI tests.

  --tulars-url URL (declared in tests/conftest.py) where the Tulars dev server
                   listens; copied onto UITestCase.BASE_URL here.

Markers: smoke, regression, sanity.  The whole directory is skipped when
playwright is not installed; UITestCase skips its class when nothing
answers at the base URL.
"""

from __future__ import annotations

import importlib.util

import pytest


def pytest_configure(config: pytest.Config) -> None:
    for marker in (
        "smoke: scenario-level UI tests, run on every change",
        "regression: page-object UI tests, full suite",
        "sanity: the one scenario that must never break",
    ):
        config.addinivalue_line("markers", marker)

    from tests.ui.base.ui_test_case import UITestCase

    UITestCase.BASE_URL = config.getoption("--tulars-url")


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    if importlib.util.find_spec("playwright") is not None:
        return
    skip = pytest.mark.skip(reason="playwright not installed: pip install playwright && playwright install chromium")
    for item in items:
        if "tests/ui" in item.path.as_posix():
            item.add_marker(skip)
