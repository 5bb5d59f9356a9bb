"""scenario — declarative UI scenarios and the runner that interprets them."""

from scenario.library import SCENARIOS, about_tab_scenario, get_scenario
from scenario.runner import ScenarioResult, ScenarioRunner
from scenario.steps import (
    Act,
    Assert,
    ContainsText,
    ElementSet,
    Exists,
    HaveLength,
    Navigate,
    NotExists,
    Query,
    Scenario,
)

__all__ = [
    "SCENARIOS",
    "Act",
    "Assert",
    "ContainsText",
    "ElementSet",
    "Exists",
    "HaveLength",
    "Navigate",
    "NotExists",
    "Query",
    "Scenario",
    "ScenarioResult",
    "ScenarioRunner",
    "about_tab_scenario",
    "get_scenario",
]
