"""Exceptions raised by the handle registry, the scenario runner and drivers."""


class Error(Exception):
    """Base class for exceptions raised by this project."""

    pass


class NavigationError(Error):
    """Raised when the driver cannot load the requested location."""

    pass


class StepAssertionError(Error):
    """Raised when a predicate does not hold within the driver's retry budget."""

    pass


class MissingElementError(Error):
    """Raised when an action step finds no element to act on."""

    pass


class DriverError(Error):
    """Raised when the browser fails while reading the page."""

    pass


class UnknownHandleError(Error):
    """Raise when a dotted handle path is not part of the registry"""

    pass


class UnknownScenarioError(Error):
    """Raise when a scenario name is not registered"""

    pass


class HandleFileError(Error):
    """Raise when a generated handle file cannot be read"""

    pass


class ScenarioFailedError(Error):
    """Raised by ScenarioResult.raise_for_status for a failed run."""

    def __init__(self, result):
        self.result = result
        super().__init__(f"Scenario {result.scenario!r} failed at {result.failed_step}: {result.error}")
