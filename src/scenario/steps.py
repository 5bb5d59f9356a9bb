"""
scenario/steps.py — Value types a scenario is made of.

A Scenario is a plain tuple of steps.  Steps only say *what* to check;
the driver decides *how* the browser checks it, so the same tuple runs
against Playwright or against an in-memory fake in unit tests.

    Navigate(url)                 load a location fresh
    Assert(query, predicate)      predicate must hold for the query's element-set
    Act(query, action)            act on the first matched element ("click")
"""

from __future__ import annotations

from dataclasses import dataclass, field

from handles.registry import Selector

CLICK = "click"
ACTIONS = frozenset({CLICK})


# ── Queries and element-sets ──────────────────────────────────────────────────


@dataclass(frozen=True)
class Query:
    """get(selector) → children(children) → contains(contains) → nth(nth)."""

    selector: Selector
    children: Selector | None = None
    contains: str | None = None
    nth: int | None = None

    def describe(self) -> str:
        parts = [f"get({self.selector})"]
        if self.children is not None:
            parts.append(f"children({self.children})")
        if self.contains is not None:
            parts.append(f"contains({self.contains!r})")
        if self.nth is not None:
            parts.append(f"eq({self.nth})")
        return ".".join(parts)


@dataclass(frozen=True)
class ElementSet:
    """Snapshot of the elements a query matched: one inner text per element."""

    texts: tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.texts)

    def __bool__(self) -> bool:
        return bool(self.texts)


# ── Predicates ────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class HaveLength:
    count: int

    def holds(self, elements: ElementSet) -> bool:
        return len(elements) == self.count

    def describe(self) -> str:
        return f"have.length {self.count}"


@dataclass(frozen=True)
class Exists:
    def holds(self, elements: ElementSet) -> bool:
        return len(elements) > 0

    def describe(self) -> str:
        return "exist"


@dataclass(frozen=True)
class NotExists:
    def holds(self, elements: ElementSet) -> bool:
        return len(elements) == 0

    def describe(self) -> str:
        return "not.exist"


@dataclass(frozen=True)
class ContainsText:
    text: str

    def holds(self, elements: ElementSet) -> bool:
        return any(self.text in t for t in elements.texts)

    def describe(self) -> str:
        return f"contain {self.text!r}"


Predicate = HaveLength | Exists | NotExists | ContainsText


# ── Steps ─────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Navigate:
    url: str

    def describe(self) -> str:
        return f"visit({self.url!r})"


@dataclass(frozen=True)
class Assert:
    query: Query
    predicate: Predicate

    def describe(self) -> str:
        return f"{self.query.describe()}.should({self.predicate.describe()!r})"


@dataclass(frozen=True)
class Act:
    query: Query
    action: str = CLICK

    def __post_init__(self) -> None:
        if self.action not in ACTIONS:
            raise ValueError(f"Unsupported action {self.action!r}; expected one of {sorted(ACTIONS)}")

    def describe(self) -> str:
        return f"{self.query.describe()}.{self.action}()"


Step = Navigate | Assert | Act


@dataclass(frozen=True)
class Scenario:
    name: str
    steps: tuple[Step, ...]
    description: str = field(default="", compare=False)
