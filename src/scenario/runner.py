"""
scenario/runner.py — Interpret a Scenario's steps against a Driver.

Steps run strictly in declaration order.  The first failing step ends the
run; the runner never retries, waiting and retrying belong to the driver.

Public API
----------
ScenarioRunner(driver).run(scenario) → ScenarioResult
ScenarioRunner(driver).navigate / query / check / act   (single steps)
"""

from __future__ import annotations

import time
from dataclasses import dataclass

from core.exception import (
    DriverError,
    MissingElementError,
    NavigationError,
    ScenarioFailedError,
    StepAssertionError,
)
from core.logger import LOGGER
from scenario.driver import Driver
from scenario.steps import CLICK, Act, Assert, ElementSet, Navigate, Predicate, Query, Scenario, Step

# Failures local to one scenario; anything else is a bug and propagates.
STEP_FAILURES = (DriverError, NavigationError, StepAssertionError, MissingElementError)


@dataclass
class ScenarioResult:
    scenario: str
    status: str  # "passed" | "failed"
    steps_run: int = 0
    total_steps: int = 0
    failed_step: str = ""
    error: str = ""
    duration_ms: float = 0.0

    @property
    def passed(self) -> bool:
        return self.status == "passed"

    def raise_for_status(self) -> None:
        if not self.passed:
            raise ScenarioFailedError(self)


class ScenarioRunner:
    def __init__(self, driver: Driver) -> None:
        self.driver = driver

    # ── Single steps ──────────────────────────────────────────────────────────

    def navigate(self, url: str) -> None:
        self.driver.visit(url)

    def query(self, query: Query) -> ElementSet:
        return self.driver.query(query)

    def check(self, query: Query, predicate: Predicate) -> ElementSet:
        elements = self.driver.expect(query, predicate)
        if not predicate.holds(elements):
            raise StepAssertionError(
                f"expected {query.describe()} to {predicate.describe()}, "
                f"found {len(elements)} element(s): {list(elements.texts)!r}"
            )
        return elements

    def act(self, query: Query, action: str = CLICK) -> None:
        if action != CLICK:
            raise ValueError(f"Unsupported action {action!r}")
        self.driver.click(query)

    def execute(self, step: Step) -> None:
        if isinstance(step, Navigate):
            self.navigate(step.url)
        elif isinstance(step, Assert):
            self.check(step.query, step.predicate)
        elif isinstance(step, Act):
            self.act(step.query, step.action)
        else:
            raise TypeError(f"Not a scenario step: {step!r}")

    # ── Whole scenario ────────────────────────────────────────────────────────

    def run(self, scenario: Scenario) -> ScenarioResult:
        result = ScenarioResult(scenario=scenario.name, status="passed", total_steps=len(scenario.steps))
        t0 = time.monotonic()
        LOGGER.info("Scenario %s: %d step(s)", scenario.name, len(scenario.steps))

        for index, step in enumerate(scenario.steps, start=1):
            LOGGER.info("  [%d/%d] %s", index, len(scenario.steps), step.describe())
            try:
                self.execute(step)
            except STEP_FAILURES as exc:
                result.status = "failed"
                result.failed_step = f"step {index}: {step.describe()}"
                result.error = str(exc)
                LOGGER.error("Scenario %s failed at %s: %s", scenario.name, result.failed_step, exc)
                break
            result.steps_run = index

        result.duration_ms = round((time.monotonic() - t0) * 1000, 1)
        if result.passed:
            LOGGER.info("Scenario %s passed in %.0f ms", scenario.name, result.duration_ms)
        return result
