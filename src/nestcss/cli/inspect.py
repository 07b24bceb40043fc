"""CLI command: nestcss inspect -- display how a style tree is classified."""

from __future__ import annotations

import click

from nestcss.cli.loading import build_config, load_style
from nestcss.model.style import KeyKind
from nestcss.validation import iter_entries


@click.command()
@click.argument("stylefile", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--breakpoints",
    "-b",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON file replacing the default breakpoint registry.",
)
def inspect(stylefile: str, breakpoints: str | None) -> None:
    """Show every key of a style tree with the kind it compiles as."""
    config = build_config(breakpoints)
    node = load_style(stylefile)

    counts = {kind: 0 for kind in KeyKind}
    for entry in iter_entries(node, config):
        counts[entry.kind] += 1
        indent = "  " * len(entry.path)
        line = f"{indent}{entry.key}  [{entry.kind.value}]"
        if entry.kind is KeyKind.PROPERTY and not isinstance(entry.value, (dict, list)):
            line += f" = {entry.value!r}"
        click.echo(line)

    click.echo()
    click.echo(
        "Summary: " + ", ".join(f"{n} {kind.value}" for kind, n in counts.items())
    )
