"""Katas CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging

import click

from katas import __version__
from katas.config import KatasConfig


@click.group()
@click.version_option(version=__version__, prog_name="katas")
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level",
)
@click.option(
    "--strict-combinators/--no-strict-combinators",
    default=False,
    help="Reject combinators other than ' ', '>', '+' and '~'",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str, strict_combinators: bool) -> None:
    """Katas - small exercises for basic language constructs."""
    config = KatasConfig(
        log_level=log_level.upper(), strict_combinators=strict_combinators
    )
    logging.basicConfig(level=config.log_level)
    ctx.obj = config


# Import and register subcommands
from katas.cli.demo import demo  # noqa: E402
from katas.cli.selector import build, parse  # noqa: E402

cli.add_command(demo)
cli.add_command(build)
cli.add_command(parse)
