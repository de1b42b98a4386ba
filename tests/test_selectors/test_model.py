"""Tests for selector fragments, kinds and singleton counters."""

import pytest

from katas.selectors import (
    Combination,
    Fragment,
    FragmentKind,
    SelectorSyntaxError,
    render_fragment,
)
from katas.selectors.model import SINGLETON_KINDS, SingletonCounts


class TestFragmentKind:
    def test_ranks_follow_canonical_order(self):
        assert [kind.rank for kind in FragmentKind] == [1, 2, 3, 4, 5, 6]

    def test_element_lowest_pseudo_element_highest(self):
        assert FragmentKind.ELEMENT.rank == 1
        assert FragmentKind.PSEUDO_ELEMENT.rank == 6

    def test_singleton_kinds(self):
        assert SINGLETON_KINDS == {
            FragmentKind.ELEMENT,
            FragmentKind.ID,
            FragmentKind.PSEUDO_ELEMENT,
        }
        assert FragmentKind.ID.is_singleton
        assert not FragmentKind.CLASS.is_singleton


class TestRenderFragment:
    @pytest.mark.parametrize(
        "kind, value, expected",
        [
            (FragmentKind.ELEMENT, "div", "div"),
            (FragmentKind.ID, "main", "#main"),
            (FragmentKind.CLASS, "container", ".container"),
            (FragmentKind.ATTRIBUTE, 'href$=".png"', '[href$=".png"]'),
            (FragmentKind.PSEUDO_CLASS, "focus", ":focus"),
            (FragmentKind.PSEUDO_ELEMENT, "before", "::before"),
        ],
    )
    def test_render(self, kind, value, expected):
        assert render_fragment(kind, value) == expected
        assert Fragment(kind=kind, value=value).render() == expected


class TestFragment:
    def test_rank_comes_from_kind(self):
        assert Fragment(kind=FragmentKind.ATTRIBUTE, value="x").rank == 4

    def test_fragment_is_frozen(self):
        frag = Fragment(kind=FragmentKind.ID, value="main")
        with pytest.raises(AttributeError):
            frag.value = "other"  # type: ignore[misc]


class TestCombination:
    def test_render_pads_combinator(self):
        combo = Combination(left="div", combinator="+", right="p")
        assert combo.render() == "div + p"

    def test_has_no_rank(self):
        assert Combination(left="a", combinator=">", right="b").rank is None


class TestSingletonCounts:
    def test_bump_returns_running_count(self):
        counts = SingletonCounts()
        assert counts.bump(FragmentKind.ELEMENT) == 1
        assert counts.bump(FragmentKind.ELEMENT) == 2
        assert counts.bump(FragmentKind.ID) == 1
        assert counts.pseudo_element == 0

    def test_bump_rejects_repeatable_kind(self):
        with pytest.raises(ValueError):
            SingletonCounts().bump(FragmentKind.CLASS)


class TestSelectorSyntaxError:
    def test_carries_position(self):
        err = SelectorSyntaxError("bad", line=1, column=4)
        assert (err.line, err.column) == (1, 4)
        assert str(err) == "bad"
        assert isinstance(err, ValueError)
