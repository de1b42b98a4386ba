"""Selector model: fragment kinds, fragments and combinations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FragmentKind(Enum):
    """The six kinds of compound-selector parts, in canonical order."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def is_singleton(self) -> bool:
        return self in SINGLETON_KINDS


_RANKS: dict[FragmentKind, int] = {
    kind: position for position, kind in enumerate(FragmentKind, start=1)
}

SINGLETON_KINDS = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)

# Render templates keyed by kind; every kind must have an entry.
_TEMPLATES: dict[FragmentKind, str] = {
    FragmentKind.ELEMENT: "{}",
    FragmentKind.ID: "#{}",
    FragmentKind.CLASS: ".{}",
    FragmentKind.ATTRIBUTE: "[{}]",
    FragmentKind.PSEUDO_CLASS: ":{}",
    FragmentKind.PSEUDO_ELEMENT: "::{}",
}

COMBINATORS = frozenset({" ", ">", "+", "~"})


def render_fragment(kind: FragmentKind, value: str) -> str:
    """Return the textual form of a fragment of *kind* holding *value*."""
    return _TEMPLATES[kind].format(value)


@dataclass(frozen=True)
class Fragment:
    """One typed piece of a compound selector."""

    kind: FragmentKind
    value: str

    @property
    def rank(self) -> int:
        return self.kind.rank

    def render(self) -> str:
        return render_fragment(self.kind, self.value)


@dataclass(frozen=True)
class Combination:
    """Two already-rendered selectors joined by a combinator token.

    Combinations carry no rank and are skipped by the ordering check.
    """

    left: str
    combinator: str
    right: str

    @property
    def rank(self) -> None:
        return None

    def render(self) -> str:
        return f"{self.left} {self.combinator} {self.right}"


@dataclass
class SingletonCounts:
    """Occurrence counters for the kinds allowed at most once."""

    element: int = 0
    id: int = 0
    pseudo_element: int = 0

    def bump(self, kind: FragmentKind) -> int:
        """Increment the counter for *kind* and return the new count."""
        if kind is FragmentKind.ELEMENT:
            self.element += 1
            return self.element
        if kind is FragmentKind.ID:
            self.id += 1
            return self.id
        if kind is FragmentKind.PSEUDO_ELEMENT:
            self.pseudo_element += 1
            return self.pseudo_element
        raise ValueError(f"{kind.value} is not a singleton kind")
