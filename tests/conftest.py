"""Root test conftest — shared by all test suites.

Unit test fixtures (the in-memory driver) live in tests/unit/conftest.py.
UI markers and the playwright skip live in tests/ui/conftest.py.
"""

from __future__ import annotations

import pytest

from core.config import BASE_URL


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--tulars-url",
        action="store",
        default=BASE_URL,
        help="Tulars application URL for UI tests (env: TULARS_BASE_URL)",
    )
