"""Central list of element references used by every UI test.

Each leaf is a Selector keyed off the dedicated test attribute
(``data-cy`` by default), never off CSS classes or DOM structure.

Keep the keys sorted alphabetically: it cuts down on merge conflicts and
keeps the generated Elm module (see handles.elm) in a stable order.

Usage::

    from handles import HANDLE

    runner.check(Query(HANDLE.tabs.bar, children=HANDLE.tabs.tab), HaveLength(1))
"""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Iterator
from dataclasses import dataclass

from core.config import TEST_ATTRIBUTE
from core.exception import UnknownHandleError

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


@dataclass(frozen=True)
class Selector:
    """One attribute-based selector, e.g. ``[data-cy="tab-bar"]``."""

    token: str
    attribute: str = TEST_ATTRIBUTE

    @property
    def value(self) -> str:
        return f'[{self.attribute}="{self.token}"]'

    def __str__(self) -> str:
        return self.value


def att(token: str, attribute: str = TEST_ATTRIBUTE) -> Selector:
    """Wrap a handle token in the test-attribute query pattern."""
    return Selector(token=token, attribute=attribute)


# ── Registry structure ────────────────────────────────────────────────────────


@dataclass(frozen=True)
class MainMenu:
    about: Selector = att("main-menu__about")
    load_scene: Selector = att("main-menu__load-scene")


@dataclass(frozen=True)
class Tabs:
    bar: Selector = att("tab-bar")
    tab: Selector = att("tab-bar__tab")


@dataclass(frozen=True)
class Handles:
    main_content: Selector = att("main-content")
    main_menu: MainMenu = MainMenu()
    tabs: Tabs = Tabs()


HANDLE = Handles()


# ── Walking / lookup ──────────────────────────────────────────────────────────


def iter_handles(node=HANDLE, prefix: str = "") -> Iterator[tuple[str, Selector]]:
    """Yield ``(dotted_path, selector)`` for every leaf, depth-first in field order."""
    for f in dataclasses.fields(node):
        value = getattr(node, f.name)
        path = f"{prefix}{f.name}"
        if isinstance(value, Selector):
            yield path, value
        else:
            yield from iter_handles(value, prefix=f"{path}.")


def to_snake(name: str) -> str:
    """``loadScene`` → ``load_scene``; snake_case input is returned unchanged."""
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def to_camel(name: str) -> str:
    """``load_scene`` → ``loadScene``."""
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def resolve(path: str) -> Selector:
    """Look up a dotted path such as ``tabs.bar`` or ``mainMenu.loadScene``.

    Only for string input from outside Python (the CLI). Code should use
    attribute access on HANDLE so typos fail at the call site.
    """
    node = HANDLE
    for part in path.split("."):
        name = to_snake(part)
        if not dataclasses.is_dataclass(node) or isinstance(node, Selector) or name not in {
            f.name for f in dataclasses.fields(node)
        }:
            raise UnknownHandleError(f"Unknown handle path: {path!r}")
        node = getattr(node, name)
    if not isinstance(node, Selector):
        raise UnknownHandleError(f"Handle path {path!r} names a group, not a selector")
    return node
