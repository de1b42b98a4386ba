"""Lark-based parser that turns selector text back into builders."""

from __future__ import annotations

import logging
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput

from katas.selectors.builder import SelectorBuilder
from katas.selectors.errors import SelectorSyntaxError
from katas.selectors.model import FragmentKind

__all__ = ["parse_selector"]

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

log = logging.getLogger(__name__)

_Compound = list[tuple[FragmentKind, str]]


class SelectorTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a parse tree into compounds of (kind, value) pairs."""

    def element(self, items: list[Token]) -> tuple[FragmentKind, str]:
        return (FragmentKind.ELEMENT, str(items[0]))

    def id(self, items: list[Token]) -> tuple[FragmentKind, str]:
        return (FragmentKind.ID, str(items[0]))

    def class_(self, items: list[Token]) -> tuple[FragmentKind, str]:
        return (FragmentKind.CLASS, str(items[0]))

    def attr(self, items: list[Token]) -> tuple[FragmentKind, str]:
        return (FragmentKind.ATTRIBUTE, str(items[0]))

    def pseudo_class(self, items: list[Token]) -> tuple[FragmentKind, str]:
        return (FragmentKind.PSEUDO_CLASS, str(items[0]))

    def pseudo_element(self, items: list[Token]) -> tuple[FragmentKind, str]:
        return (FragmentKind.PSEUDO_ELEMENT, str(items[0]))

    def compound(self, items: list[tuple[FragmentKind, str]]) -> _Compound:
        return list(items)

    def selector(self, items: list[object]) -> list[object]:
        return list(items)

    def start(self, items: list[object]) -> list[object]:
        return items[0]  # type: ignore[return-value]


def _build_compound(compound: _Compound, strict_combinators: bool) -> SelectorBuilder:
    builder = SelectorBuilder(strict_combinators=strict_combinators)
    for kind, value in compound:
        builder.add(kind, value)
    return builder


def _assemble(items: list[object], strict_combinators: bool) -> SelectorBuilder:
    """Replay parsed compounds through builders, folding combinators left."""
    compounds = items[0::2]
    # Whitespace-only tokens are the descendant combinator.
    combinators = [str(token).strip() or " " for token in items[1::2]]

    result = _build_compound(compounds[0], strict_combinators)  # type: ignore[arg-type]
    for combinator, compound in zip(combinators, compounds[1:]):
        right = _build_compound(compound, strict_combinators)  # type: ignore[arg-type]
        result = SelectorBuilder(strict_combinators=strict_combinators).combine(
            result, combinator, right
        )
    return result


def parse_selector(text: str, *, strict_combinators: bool = False) -> SelectorBuilder:
    """Parse selector text such as ``a#main.nav > li:hover`` into a builder.

    Raises SelectorSyntaxError for malformed text, and the builder's own
    errors for parts that are out of order or repeated.
    """
    source = text.strip()
    if not source:
        raise SelectorSyntaxError("Empty selector")

    parser = Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        start="start",
    )
    try:
        tree = parser.parse(source)
    except UnexpectedInput as e:
        raise SelectorSyntaxError(
            f"Invalid selector {source!r}: {e}",
            line=getattr(e, "line", None),
            column=getattr(e, "column", None),
        ) from e

    items = SelectorTransformer().transform(tree)
    log.debug("parsed %r into %d compound(s)", source, (len(items) + 1) // 2)
    return _assemble(items, strict_combinators)
