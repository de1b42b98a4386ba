"""CLI command: katas demo -- log common directory path lookups."""

from __future__ import annotations

import click

from katas.closures import logger
from katas.conditions import get_common_directory_path

SAMPLE_PATHS: list[list[str]] = [
    ["/web/images/image1.png", "/web/images/image2.png"],
    ["/web/assets/style.css", "/web/scripts/app.js", "home/setting.conf"],
    ["/web/assets/style.css", "/.bin/mocha", "/read.me"],
    ["/web/favicon.ico", "/web-scripts/dump", "/verbalizer/logs"],
]


@click.command()
def demo() -> None:
    """Run get_common_directory_path on sample paths, logging each call."""
    gcdp = logger(get_common_directory_path, click.echo)
    for paths in SAMPLE_PATHS:
        result = gcdp(paths)
        click.echo(f"=> {result!r}")
