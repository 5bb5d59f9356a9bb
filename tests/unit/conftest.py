"""
conftest.py — Shared pytest fixtures for the unit test suite.
"""

import sys
from pathlib import Path

import pytest

# src/ is the Python root for all packages (core, cli, handles, scenario)
_SRC = Path(__file__).parent.parent.parent / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from core.exception import MissingElementError, NavigationError  # noqa: E402
from handles import HANDLE  # noqa: E402
from scenario.steps import ElementSet  # noqa: E402


class FakeTularsDriver:
    """In-memory stand-in for the browser: one tab on load, About opens a second.

    Every call is appended to ``calls`` so tests can check step order.
    """

    def __init__(self, about_opens_tab: bool = True, unreachable: tuple[str, ...] = ()):
        self.about_opens_tab = about_opens_tab
        self.unreachable = unreachable
        self.calls: list[tuple] = []
        self._reset()

    def _reset(self) -> None:
        self.tabs = ["Untitled scene"]
        self.about_open = False

    # Driver protocol

    def visit(self, url):
        self.calls.append(("visit", url))
        if url in self.unreachable:
            raise NavigationError(f"Cannot load {url}: HTTP 404")
        self._reset()

    def query(self, query):
        self.calls.append(("query", query))
        if query.selector == HANDLE.tabs.bar and query.children == HANDLE.tabs.tab:
            texts = list(self.tabs)
        elif query.selector == HANDLE.main_content:
            texts = ["Created by the Tulars team"] if self.about_open else ["Scene editor"]
        elif query.selector == HANDLE.main_menu.about:
            texts = ["About"]
        else:
            texts = []
        if query.contains is not None:
            texts = [t for t in texts if query.contains in t]
        if query.nth is not None:
            texts = texts[query.nth : query.nth + 1]
        return ElementSet(tuple(texts))

    def expect(self, query, predicate):
        self.calls.append(("expect", query, predicate))
        return self.query(query)

    def click(self, query):
        self.calls.append(("click", query))
        if not self.query(query):
            raise MissingElementError(f"Nothing to click: {query.describe()}")
        if query.selector == HANDLE.main_menu.about and not self.about_open:
            self.about_open = True
            if self.about_opens_tab:
                self.tabs.append("About Tulars")


@pytest.fixture
def fake_driver():
    """Fresh in-memory driver with the app's expected behaviour."""
    return FakeTularsDriver()


@pytest.fixture
def broken_driver():
    """Driver whose About click shows the page but forgets to open a tab."""
    return FakeTularsDriver(about_opens_tab=False)
