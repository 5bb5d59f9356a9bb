"""
test_runner.py — Unit tests for scenario/runner.py and scenario/library.py

Runs scenarios against the in-memory FakeTularsDriver from conftest.py, so
the step sequence is checked without a browser.  Browser failures are
checked through a PlaywrightDriver over a mocked page.
"""

import io
import logging
from unittest.mock import MagicMock

import pytest
from playwright.sync_api import Error as PlaywrightError

from core.exception import MissingElementError, ScenarioFailedError, StepAssertionError, UnknownScenarioError
from core.logger import LogStream
from handles import HANDLE
from scenario import SCENARIOS, ScenarioRunner, about_tab_scenario, get_scenario
from scenario.browser import PlaywrightDriver
from scenario.library import CREATED_BY, TABS
from scenario.steps import Act, Assert, ContainsText, ElementSet, Exists, HaveLength, Navigate, NotExists, Query, Scenario

# ── The about-tab scenario ─────────────────────────────────────────────────────


class TestAboutTabScenario:
    def test_steps_are_the_literal_sequence(self):
        steps = about_tab_scenario().steps
        assert steps == (
            Navigate("/"),
            Assert(Query(HANDLE.tabs.bar, children=HANDLE.tabs.tab), HaveLength(1)),
            Assert(Query(HANDLE.main_content, contains="Created by"), NotExists()),
            Act(Query(HANDLE.main_menu.about), "click"),
            Assert(Query(HANDLE.main_content, contains="Created by"), Exists()),
            Assert(Query(HANDLE.tabs.bar, children=HANDLE.tabs.tab), HaveLength(2)),
            Assert(Query(HANDLE.tabs.bar, children=HANDLE.tabs.tab, nth=1), ContainsText("About Tulars")),
        )

    def test_passes_against_expected_app(self, fake_driver):
        result = ScenarioRunner(fake_driver).run(about_tab_scenario())
        assert result.passed
        assert result.steps_run == result.total_steps == 7
        assert result.failed_step == ""
        result.raise_for_status()

    def test_steps_execute_in_declared_order(self, fake_driver):
        ScenarioRunner(fake_driver).run(about_tab_scenario())
        kinds = [c[0] for c in fake_driver.calls if c[0] in ("visit", "expect", "click")]
        assert kinds == ["visit", "expect", "expect", "click", "expect", "expect", "expect"]

    def test_fails_when_about_does_not_open_a_tab(self, broken_driver):
        result = ScenarioRunner(broken_driver).run(about_tab_scenario())
        assert result.status == "failed"
        assert result.steps_run == 5
        assert result.failed_step.startswith("step 6:")
        assert "have.length 2" in result.error
        with pytest.raises(ScenarioFailedError, match="about-tab"):
            result.raise_for_status()

    def test_stops_at_first_failure(self, broken_driver):
        ScenarioRunner(broken_driver).run(about_tab_scenario())
        # step 7 never runs
        nth_queries = [c for c in broken_driver.calls if c[0] == "expect" and c[1].nth == 1]
        assert nth_queries == []

    def test_navigation_failure_fails_scenario(self, fake_driver):
        fake_driver.unreachable = ("/gone",)
        result = ScenarioRunner(fake_driver).run(about_tab_scenario("/gone"))
        assert result.status == "failed"
        assert result.steps_run == 0
        assert "HTTP 404" in result.error

    def test_fresh_scenario_per_call(self):
        assert about_tab_scenario() == about_tab_scenario()
        assert about_tab_scenario() is not about_tab_scenario()


# ── Single steps ───────────────────────────────────────────────────────────────


class TestSingleSteps:
    def test_query_is_idempotent_without_act(self, fake_driver):
        runner = ScenarioRunner(fake_driver)
        runner.navigate("/")
        assert runner.query(TABS) == runner.query(TABS)

    def test_query_on_no_match_returns_empty_set(self, fake_driver):
        runner = ScenarioRunner(fake_driver)
        runner.navigate("/")
        assert runner.query(CREATED_BY) == ElementSet()

    def test_only_exists_on_empty_set_fails(self, fake_driver):
        runner = ScenarioRunner(fake_driver)
        runner.navigate("/")
        runner.check(CREATED_BY, NotExists())
        with pytest.raises(StepAssertionError, match="to exist, found 0"):
            runner.check(CREATED_BY, Exists())

    def test_click_on_missing_element_raises(self, fake_driver):
        runner = ScenarioRunner(fake_driver)
        runner.navigate("/")
        with pytest.raises(MissingElementError):
            runner.act(Query(HANDLE.main_menu.load_scene))

    def test_act_rejects_unknown_action(self, fake_driver):
        with pytest.raises(ValueError):
            ScenarioRunner(fake_driver).act(Query(HANDLE.main_menu.about), "hover")

    def test_execute_rejects_non_steps(self, fake_driver):
        with pytest.raises(TypeError):
            ScenarioRunner(fake_driver).execute("visit /")

    def test_missing_element_fails_scenario(self, fake_driver):
        sc = Scenario(name="load", steps=(Navigate("/"), Act(Query(HANDLE.main_menu.load_scene))))
        result = ScenarioRunner(fake_driver).run(sc)
        assert result.status == "failed"
        assert result.failed_step.startswith("step 2:")

    def test_browser_error_fails_scenario(self):
        page = MagicMock(name="page")
        page.locator.return_value.all_inner_texts.side_effect = PlaywrightError("Execution context was destroyed")
        driver = PlaywrightDriver(page, base_url="http://app.test", timeout_ms=0, poll_interval_ms=1)
        result = ScenarioRunner(driver).run(about_tab_scenario())
        assert result.status == "failed"
        assert result.steps_run == 1
        assert result.failed_step.startswith("step 2:")
        assert "Execution context was destroyed" in result.error


# ── Library / logging ──────────────────────────────────────────────────────────


class TestLibrary:
    def test_registered_names(self):
        assert set(SCENARIOS) == {"about-tab"}

    def test_get_scenario_uses_start_url(self):
        assert get_scenario("about-tab", "/editor").steps[0] == Navigate("/editor")

    def test_unknown_scenario(self):
        with pytest.raises(UnknownScenarioError, match="about-tab"):
            get_scenario("nope")


class TestStepLog:
    def test_each_step_is_logged_to_registered_stream(self, fake_driver):
        buf = io.StringIO()
        stream_id = LogStream.Register(buf)
        try:
            ScenarioRunner(fake_driver).run(about_tab_scenario())
        finally:
            LogStream.Unregister(stream_id)
        out = buf.getvalue()
        assert "[1/7] visit('/')" in out
        assert "[4/7]" in out and ".click()" in out
        assert "Scenario about-tab passed" in out

    def test_failure_logged_at_error(self, broken_driver, caplog):
        with caplog.at_level(logging.ERROR, logger="tulars_e2e"):
            ScenarioRunner(broken_driver).run(about_tab_scenario())
        assert any("failed at step 6" in r.getMessage() for r in caplog.records)

    def test_capture_detaches_after_block(self, fake_driver):
        with LogStream.Capture(io.StringIO()) as buf:
            ScenarioRunner(fake_driver).run(about_tab_scenario())
        ScenarioRunner(fake_driver).run(Scenario(name="after", steps=(Navigate("/"),)))
        assert "Scenario about-tab passed" in buf.getvalue()
        assert "Scenario after" not in buf.getvalue()
