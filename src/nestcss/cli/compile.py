"""CLI command: nestcss compile -- compile a JSON style tree to CSS."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from nestcss.cli.loading import build_config, load_style
from nestcss.compiler import Compiler
from nestcss.errors import StyleError


@click.command(name="compile")
@click.argument("stylefile", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--selector", "-s", default=None, help="Root selector; emits a standalone stylesheet."
)
@click.option(
    "--breakpoints",
    "-b",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON file replacing the default breakpoint registry.",
)
@click.option("--palette", is_flag=True, help="Resolve bare identifiers via the built-in palette.")
@click.option(
    "--output", "-o", type=click.Path(dir_okay=False), default=None, help="Write CSS to a file."
)
def compile_cmd(
    stylefile: str,
    selector: str | None,
    breakpoints: str | None,
    palette: bool,
    output: str | None,
) -> None:
    """Compile a JSON style tree to CSS.

    Without --selector the result is a rule body for embedding in a host
    rule; nested scopes use the '&' placeholder.
    """
    node = load_style(stylefile)
    compiler = Compiler(build_config(breakpoints, palette))

    try:
        result = compiler.stylesheet(selector, node) if selector else compiler.css(node)
    except StyleError as exc:
        click.echo(f"Style error: {exc}", err=True)
        sys.exit(1)

    if output:
        Path(output).write_text(result + "\n", encoding="utf-8")
        click.echo(f"Wrote {len(result)} bytes to {output}")
    else:
        click.echo(result)
