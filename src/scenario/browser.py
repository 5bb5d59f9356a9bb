"""PlaywrightDriver — runs scenario steps against a live Playwright page.

Query mapping:
  get(selector)        page.locator(selector)
  children(selector)   .locator(":scope > selector")
  contains(text)       .get_by_text(<case-sensitive substring pattern>)
  nth(i)               .nth(i)

Retry policy: expect() and click() poll the query every poll_interval_ms
until it passes or timeout_ms has elapsed.

Playwright errors surface as NavigationError, DriverError or
MissingElementError, so the runner records them as a failed step.
"""

from __future__ import annotations

import re
import time
from typing import TYPE_CHECKING

from playwright.sync_api import Error as PlaywrightError

from core.config import BASE_URL, POLL_INTERVAL_MS, TIMEOUT_MS
from core.exception import DriverError, MissingElementError, NavigationError
from core.logger import LOGGER
from scenario.steps import ElementSet, Exists, Predicate, Query

if TYPE_CHECKING:
    from playwright.sync_api import Locator, Page


class PlaywrightDriver:
    def __init__(
        self,
        page: Page,
        base_url: str = BASE_URL,
        timeout_ms: int = TIMEOUT_MS,
        poll_interval_ms: int = POLL_INTERVAL_MS,
    ) -> None:
        self.page = page
        self.base_url = base_url.rstrip("/")
        self.timeout_ms = timeout_ms
        self.poll_interval_ms = poll_interval_ms

    # ── Navigation ────────────────────────────────────────────────────────────

    def url_for(self, url: str) -> str:
        """Absolute URLs pass through; paths are joined onto base_url."""
        if re.match(r"^[a-z][a-z0-9+.-]*://", url, re.IGNORECASE):
            return url
        return f"{self.base_url}/{url.lstrip('/')}"

    def visit(self, url: str) -> None:
        target = self.url_for(url)
        try:
            response = self.page.goto(target, wait_until="domcontentloaded")
        except PlaywrightError as exc:
            raise NavigationError(f"Cannot load {target}: {exc}") from exc
        if response is not None and not response.ok:
            raise NavigationError(f"Cannot load {target}: HTTP {response.status}")

    # ── Queries ───────────────────────────────────────────────────────────────

    def locator(self, query: Query) -> Locator:
        loc = self.page.locator(query.selector.value)
        if query.children is not None:
            loc = loc.locator(f":scope > {query.children.value}")
        if query.contains is not None:
            loc = loc.get_by_text(re.compile(re.escape(query.contains)))
        if query.nth is not None:
            loc = loc.nth(query.nth)
        return loc

    def query(self, query: Query) -> ElementSet:
        try:
            texts = self.locator(query).all_inner_texts()
        except PlaywrightError as exc:
            raise DriverError(f"Cannot query {query.describe()}: {exc}") from exc
        return ElementSet(tuple(texts))

    def expect(self, query: Query, predicate: Predicate) -> ElementSet:
        deadline = time.monotonic() + self.timeout_ms / 1000
        attempts = 0
        while True:
            attempts += 1
            elements = self.query(query)
            if predicate.holds(elements) or time.monotonic() >= deadline:
                LOGGER.debug(
                    "%s should %s → %d match(es) after %d attempt(s)",
                    query.describe(),
                    predicate.describe(),
                    len(elements),
                    attempts,
                )
                return elements
            self.page.wait_for_timeout(self.poll_interval_ms)

    # ── Actions ───────────────────────────────────────────────────────────────

    def click(self, query: Query) -> None:
        if not self.expect(query, Exists()):
            raise MissingElementError(f"Nothing to click: {query.describe()} matched no element")
        try:
            self.locator(query).first.click(timeout=self.timeout_ms)
        except PlaywrightError as exc:
            raise MissingElementError(f"Cannot click {query.describe()}: {exc}") from exc
