"""
handles/elm.py — Render the handle registry as the application's Elm module.

The application tags its elements through ``CypressHandles.handle``; the
tests select them through ``handles.HANDLE``.  Both come from the registry:
the Elm module is generated, never edited by hand.

Public API
----------
render_elm_module(module_name) → str
check_elm_module(path, module_name) → list[str]   (unified diff, empty when in sync)
"""

from __future__ import annotations

import dataclasses
import difflib
from pathlib import Path

from core.config import ELM_MODULE_NAME
from core.exception import HandleFileError
from core.logger import LOGGER
from handles.registry import HANDLE, Selector, to_camel

_INDENT = "    "


def _record_lines(node, indent: str, sep: str, leaf) -> list[str]:
    """Lay out one record the way elm-format does: leading commas, closing brace aligned."""
    lines: list[str] = []
    for i, f in enumerate(dataclasses.fields(node)):
        lead = "{ " if i == 0 else ", "
        name = to_camel(f.name)
        value = getattr(node, f.name)
        if isinstance(value, Selector):
            lines.append(f"{indent}{lead}{name} {sep} {leaf(value)}")
        else:
            lines.append(f"{indent}{lead}{name} {sep}")
            lines.extend(_record_lines(value, indent + _INDENT, sep, leaf))
    lines.append(f"{indent}}}")
    return lines


def render_elm_module(module_name: str = ELM_MODULE_NAME) -> str:
    """Return the full source of the Elm handle module."""
    annotation = _record_lines(HANDLE, _INDENT, ":", lambda _sel: "Attribute msg")
    definition = _record_lines(
        HANDLE,
        _INDENT,
        "=",
        lambda sel: f'attribute "{sel.attribute}" "{sel.token}"',
    )
    lines = [
        f"module {module_name} exposing (handle)",
        "",
        "{-| Element handles for end-to-end tests.",
        "",
        "Generated by `tulars-e2e elm`. Do not edit by hand: change",
        "`handles/registry.py` and regenerate.",
        "",
        "-}",
        "",
        "import Html exposing (Attribute)",
        "import Html.Attributes exposing (attribute)",
        "",
        "",
        "handle :",
        *annotation,
        "handle =",
        *definition,
    ]
    return "\n".join(lines) + "\n"


def check_elm_module(path: Path, module_name: str = ELM_MODULE_NAME) -> list[str]:
    """Diff the Elm module at *path* against the rendered registry."""
    try:
        current = Path(path).read_text()
    except OSError as exc:
        raise HandleFileError(f"Cannot read Elm handle module {path}: {exc}") from exc

    expected = render_elm_module(module_name)
    diff = list(
        difflib.unified_diff(
            current.splitlines(),
            expected.splitlines(),
            fromfile=str(path),
            tofile="generated",
            lineterm="",
        )
    )
    if diff:
        LOGGER.warning("Elm handle module %s is out of sync with the registry", path)
    return diff
