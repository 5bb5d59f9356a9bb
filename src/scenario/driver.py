"""Driver protocol — the browser-side collaborator the runner talks to."""

from __future__ import annotations

from typing import Protocol

from scenario.steps import ElementSet, Predicate, Query


class Driver(Protocol):
    """What ScenarioRunner needs from a browser.

    visit   — load a location fresh; raise NavigationError when unreachable.
    query   — snapshot of the elements currently matched (possibly empty).
    expect  — retry query until predicate holds or the driver's budget runs
              out; return the last snapshot taken.
    click   — click the first match; raise MissingElementError when none.
    """

    def visit(self, url: str) -> None: ...

    def query(self, query: Query) -> ElementSet: ...

    def expect(self, query: Query, predicate: Predicate) -> ElementSet: ...

    def click(self, query: Query) -> None: ...
