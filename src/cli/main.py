"""
tulars-e2e — CLI entry point.

Usage:
  tulars-e2e handles                         # list every registered handle
  tulars-e2e resolve tabs.bar                # print one selector
  tulars-e2e elm                             # write app/CypressHandles.elm
  tulars-e2e elm --check                     # exit 1 when it has drifted
  tulars-e2e elm --stdout --module Test.Handles
  tulars-e2e run about-tab --base-url http://localhost:8000 [--headed]
"""

from __future__ import annotations

import logging
from contextlib import ExitStack
from pathlib import Path
from typing import Annotated

import typer
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from core import config
from core.exception import Error, HandleFileError, UnknownHandleError, UnknownScenarioError
from core.logger import LogStream, set_console_level
from handles import iter_handles, resolve as resolve_handle
from handles.elm import check_elm_module, render_elm_module
from scenario import SCENARIOS, ScenarioRunner, get_scenario
from scenario.browser import PlaywrightDriver

from . import __version__
from .display import console, err, info, ok, print_diff, print_handles, print_scenario_result, print_source, spinner

# ── App ───────────────────────────────────────────────────────────────────────

app = typer.Typer(
    name="tulars-e2e",
    help="Tulars end-to-end test tooling",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# ── Shared options ────────────────────────────────────────────────────────────

BASE_URL_OPT = typer.Option(config.BASE_URL, "--base-url", "-u", help="Application URL", envvar="TULARS_BASE_URL")
VERBOSE_OPT = typer.Option(False, "--verbose", "-v", help="Log every driver poll")


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"tulars-e2e [bold]v{__version__}[/bold]")
        raise typer.Exit()


@app.callback()
def root(
    version: bool = typer.Option(
        False, "--version", "-V", help="Print version and exit", is_eager=True, callback=_version_callback
    ),
) -> None:
    """[bold]tulars-e2e[/bold] — data-cy handles and UI scenarios for Tulars"""


# ── Handles ───────────────────────────────────────────────────────────────────


@app.command()
def handles() -> None:
    """List every handle path with its token and selector."""
    print_handles((path, sel.token, sel.value) for path, sel in iter_handles())


@app.command()
def resolve(path: Annotated[str, typer.Argument(help="Dotted handle path, e.g. tabs.bar")]) -> None:
    """Print the selector registered under [bold]PATH[/bold]."""
    try:
        selector = resolve_handle(path)
    except UnknownHandleError as exc:
        err(str(exc))
        raise typer.Exit(1) from exc
    console.print(selector.value, markup=False)


@app.command()
def elm(
    path: Path = typer.Option(config.ELM_HANDLES_PATH, "--path", "-p", help="Elm module file", envvar="ELM_HANDLES_PATH"),
    check: bool = typer.Option(False, "--check", help="Compare the file with the registry instead of writing it"),
    stdout: bool = typer.Option(False, "--stdout", help="Print the module instead of writing it"),
    module: str = typer.Option(config.ELM_MODULE_NAME, "--module", "-m", help="Elm module name"),
) -> None:
    """
    Render the handle registry as the application's Elm module.

    With [bold]--check[/bold], exit 1 when the file on disk has drifted
    from the registry.
    """
    if check:
        try:
            diff = check_elm_module(path, module)
        except HandleFileError as exc:
            err(str(exc))
            raise typer.Exit(1) from exc
        if diff:
            err(f"{path} is out of sync with the handle registry; run: tulars-e2e elm")
            print_diff(diff)
            raise typer.Exit(1)
        ok(f"{path} is in sync")
        return

    source = render_elm_module(module)
    if stdout:
        print_source(source)
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(source)
    ok(f"Wrote [bold]{path}[/bold]")


# ── Scenarios ─────────────────────────────────────────────────────────────────


def _run_in_chromium(sc, base_url: str, headed: bool, timeout_ms: int):
    with sync_playwright() as pw:
        browser = pw.chromium.launch(headless=not headed)
        try:
            page = browser.new_context(viewport=config.VIEWPORT).new_page()
            driver = PlaywrightDriver(page, base_url=base_url, timeout_ms=timeout_ms)
            with spinner(sc.description or sc.name):
                return ScenarioRunner(driver).run(sc)
        finally:
            browser.close()


@app.command()
def run(
    scenario: Annotated[str, typer.Argument(help=f"Scenario name: {' | '.join(SCENARIOS)}")] = "about-tab",
    base_url: str = BASE_URL_OPT,
    start_url: str = typer.Option("/", "--start", help="Path the scenario navigates to first"),
    headed: bool = typer.Option(not config.HEADLESS, "--headed/--headless", help="Show the browser window"),
    timeout: int = typer.Option(config.TIMEOUT_MS, "--timeout", "-t", help="Per-assertion retry budget (ms)"),
    log_file: Path | None = typer.Option(None, "--log-file", help="Also write the step log here"),
    verbose: bool = VERBOSE_OPT,
) -> None:
    """
    Run a named scenario in Chromium against [bold]--base-url[/bold].

    Exit status is 0 when every step passed, 1 otherwise.
    """
    try:
        sc = get_scenario(scenario, start_url)
    except UnknownScenarioError as exc:
        err(str(exc))
        raise typer.Exit(1) from exc

    if verbose:
        set_console_level(logging.DEBUG)

    info(f"Running [bold]{sc.name}[/bold] against {base_url}")
    try:
        with ExitStack() as stack:
            if log_file is not None:
                stack.enter_context(LogStream.Capture(stack.enter_context(log_file.open("a"))))
            result = _run_in_chromium(sc, base_url, headed=headed, timeout_ms=timeout)
    except (Error, PlaywrightError) as exc:
        # browser launch and page crashes included
        err(str(exc))
        raise typer.Exit(1) from exc

    console.print()
    print_scenario_result(result)
    raise typer.Exit(0 if result.passed else 1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
