"""CLI commands: katas build / katas parse -- CSS selector builder."""

from __future__ import annotations

import sys

import click

from katas.config import KatasConfig
from katas.selectors import FragmentKind, SelectorBuilder, SelectorError, parse_selector

# Accepted spellings for the kind half of a kind=value part.
_KIND_NAMES: dict[str, FragmentKind] = {
    "element": FragmentKind.ELEMENT,
    "id": FragmentKind.ID,
    "class": FragmentKind.CLASS,
    "attr": FragmentKind.ATTRIBUTE,
    "attribute": FragmentKind.ATTRIBUTE,
    "pseudo-class": FragmentKind.PSEUDO_CLASS,
    "pseudo-element": FragmentKind.PSEUDO_ELEMENT,
}


def _split_part(part: str) -> tuple[FragmentKind, str]:
    name, sep, value = part.partition("=")
    kind = _KIND_NAMES.get(name.strip().lower())
    if not sep or kind is None:
        raise click.BadParameter(
            f"{part!r} is not kind=value; kinds are: {', '.join(_KIND_NAMES)}",
            param_hint="PART",
        )
    return kind, value


@click.command()
@click.argument("parts", nargs=-1, required=True)
@click.pass_obj
def build(config: KatasConfig, parts: tuple[str, ...]) -> None:
    """Build a compound selector from kind=value PARTS, in order.

    Example: katas build element=a 'attr=href$=".png"' pseudo-class=focus
    """
    fragments = [_split_part(part) for part in parts]
    builder = SelectorBuilder(strict_combinators=config.strict_combinators)
    try:
        for kind, value in fragments:
            builder.add(kind, value)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(builder.stringify())


@click.command()
@click.argument("selector")
@click.pass_obj
def parse(config: KatasConfig, selector: str) -> None:
    """Parse SELECTOR, validate its parts and print it re-rendered."""
    try:
        builder = parse_selector(
            selector, strict_combinators=config.strict_combinators
        )
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(builder.stringify())
