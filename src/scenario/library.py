"""Named scenarios. Each factory builds a fresh Scenario per test case."""

from __future__ import annotations

from collections.abc import Callable

from core.exception import UnknownScenarioError
from handles import HANDLE
from scenario.steps import Act, Assert, ContainsText, Exists, HaveLength, Navigate, NotExists, Query, Scenario

TABS = Query(HANDLE.tabs.bar, children=HANDLE.tabs.tab)
CREATED_BY = Query(HANDLE.main_content, contains="Created by")


def about_tab_scenario(start_url: str = "/") -> Scenario:
    """Clicking "About" in the main menu opens a second tab titled "About Tulars"."""
    return Scenario(
        name="about-tab",
        description="should open a new tab for the About page",
        steps=(
            Navigate(start_url),
            Assert(TABS, HaveLength(1)),
            Assert(CREATED_BY, NotExists()),
            Act(Query(HANDLE.main_menu.about)),
            Assert(CREATED_BY, Exists()),
            Assert(TABS, HaveLength(2)),
            Assert(Query(HANDLE.tabs.bar, children=HANDLE.tabs.tab, nth=1), ContainsText("About Tulars")),
        ),
    )


SCENARIOS: dict[str, Callable[..., Scenario]] = {
    "about-tab": about_tab_scenario,
}


def get_scenario(name: str, start_url: str = "/") -> Scenario:
    try:
        factory = SCENARIOS[name]
    except KeyError:
        raise UnknownScenarioError(f"Unknown scenario {name!r}; available: {', '.join(sorted(SCENARIOS))}") from None
    return factory(start_url)
