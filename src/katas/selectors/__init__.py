from katas.selectors.builder import CssSelectorBuilder, SelectorBuilder, css_selector_builder
from katas.selectors.errors import (
    DuplicateSingleton,
    InvalidCombinator,
    OrderingViolation,
    SelectorError,
    SelectorSyntaxError,
)
from katas.selectors.model import Combination, Fragment, FragmentKind, render_fragment
from katas.selectors.parser import parse_selector

__all__ = [
    "CssSelectorBuilder",
    "SelectorBuilder",
    "css_selector_builder",
    "DuplicateSingleton",
    "InvalidCombinator",
    "OrderingViolation",
    "SelectorError",
    "SelectorSyntaxError",
    "Combination",
    "Fragment",
    "FragmentKind",
    "render_fragment",
    "parse_selector",
]
