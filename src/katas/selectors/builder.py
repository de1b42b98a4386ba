"""Fluent CSS selector builder and its facade.

Example:
    css_selector_builder.id("main").class_("container").class_("editable")
    -> "#main.container.editable"

    css_selector_builder.combine(
        css_selector_builder.element("div").id("main"),
        "+",
        css_selector_builder.element("table").id("data"),
    )
    -> "div#main + table#data"
"""

from __future__ import annotations

import logging
from typing import Union

from katas.selectors.errors import (
    DuplicateSingleton,
    InvalidCombinator,
    OrderingViolation,
)
from katas.selectors.model import (
    COMBINATORS,
    Combination,
    Fragment,
    FragmentKind,
    SingletonCounts,
)

__all__ = ["SelectorBuilder", "CssSelectorBuilder", "css_selector_builder"]

log = logging.getLogger(__name__)

Part = Union[Fragment, Combination]


class SelectorBuilder:
    """Accumulates selector parts in call order and renders them.

    Each fragment method validates ordering and cardinality after appending,
    and returns the builder itself so calls can be chained.
    """

    def __init__(self, *, strict_combinators: bool = False) -> None:
        self.strict_combinators = strict_combinators
        self._parts: list[Part] = []
        self._counts = SingletonCounts()

    # --- fragment methods -----------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        return self._add(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self._add(FragmentKind.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._add(FragmentKind.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        return self._add(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._add(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._add(FragmentKind.PSEUDO_ELEMENT, value)

    def add(self, kind: FragmentKind, value: str) -> SelectorBuilder:
        """Append a fragment of an arbitrary *kind*."""
        return self._add(kind, value)

    # --- combination ----------------------------------------------------------

    def combine(
        self,
        left: SelectorBuilder | str,
        combinator: str,
        right: SelectorBuilder | str,
    ) -> SelectorBuilder:
        """Append *left* and *right* joined by *combinator*."""
        if self.strict_combinators and combinator not in COMBINATORS:
            raise InvalidCombinator(combinator)
        self._parts.append(
            Combination(left=str(left), combinator=combinator, right=str(right))
        )
        return self

    # --- rendering ------------------------------------------------------------

    @property
    def parts(self) -> list[Part]:
        """Return a copy of the accumulated parts."""
        return list(self._parts)

    def stringify(self) -> str:
        return "".join(part.render() for part in self._parts)

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.stringify()!r})"

    # --- validation -----------------------------------------------------------

    def _add(self, kind: FragmentKind, value: str) -> SelectorBuilder:
        self._parts.append(Fragment(kind=kind, value=value))
        self._check_order()
        if kind.is_singleton and self._counts.bump(kind) > 1:
            log.debug("duplicate %s fragment %r", kind.value, value)
            raise DuplicateSingleton(kind.value)
        return self

    def _check_order(self) -> None:
        for current, following in zip(self._parts, self._parts[1:]):
            if current.rank is None or following.rank is None:
                continue
            if current.rank > following.rank:
                log.debug(
                    "%s placed after %s",
                    following.kind.value,  # type: ignore[union-attr]
                    current.kind.value,  # type: ignore[union-attr]
                )
                raise OrderingViolation()


class CssSelectorBuilder:
    """Facade that starts a fresh SelectorBuilder for every chain."""

    def __init__(self, *, strict_combinators: bool = False) -> None:
        self.strict_combinators = strict_combinators

    def _new(self) -> SelectorBuilder:
        return SelectorBuilder(strict_combinators=self.strict_combinators)

    def element(self, value: str) -> SelectorBuilder:
        return self._new().element(value)

    def id(self, value: str) -> SelectorBuilder:
        return self._new().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._new().class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        return self._new().attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._new().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._new().pseudo_element(value)

    def combine(
        self,
        left: SelectorBuilder | str,
        combinator: str,
        right: SelectorBuilder | str,
    ) -> SelectorBuilder:
        return self._new().combine(left, combinator, right)


css_selector_builder = CssSelectorBuilder()
