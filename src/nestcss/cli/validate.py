"""CLI command: nestcss validate -- lint a JSON style tree."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from nestcss.cli.loading import build_config, load_style
from nestcss.model.diagnostic import Severity
from nestcss.validation import validate as run_validate


@click.command()
@click.argument("stylefile", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--breakpoints",
    "-b",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON file replacing the default breakpoint registry.",
)
def validate(stylefile: str, breakpoints: str | None) -> None:
    """Validate a JSON style tree.

    Prints diagnostics (errors, warnings, info) and exits with code 0 if
    no errors are found, or code 1 if there are errors.
    """
    style_path = Path(stylefile)
    node = load_style(stylefile)
    diagnostics = run_validate(node, build_config(breakpoints))

    if not diagnostics:
        click.echo(f"OK: {style_path.name} is valid (0 diagnostics)")
        sys.exit(0)

    errors = [d for d in diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in diagnostics if d.severity is Severity.WARNING]
    infos = [d for d in diagnostics if d.severity is Severity.INFO]

    for diag in diagnostics:
        click.echo(str(diag))

    click.echo()
    click.echo(
        f"Summary: {len(errors)} error(s), {len(warnings)} warning(s), {len(infos)} info"
    )

    if errors:
        sys.exit(1)
    sys.exit(0)
