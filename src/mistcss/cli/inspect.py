"""CLI command: mistcss inspect -- display the schemas parsed from a stylesheet."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from mistcss.parser import ParseError
from mistcss.schema import parse
from mistcss.schema.naming import component_name


@click.command()
@click.argument("stylesheet", type=click.Path(exists=True, dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Print schemas as JSON")
def inspect(stylesheet: str, as_json: bool) -> None:
    """Parse a stylesheet and display its component schemas.

    Only the first schema is rendered by `mistcss build`; later ones are
    listed here for reference.
    """
    path = Path(stylesheet)

    try:
        source = path.read_text(encoding="utf-8")
        result = parse(source, name=component_name(path.name) or None)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)
    except (OSError, UnicodeDecodeError) as exc:
        click.echo(f"Error {path}: {exc}", err=True)
        sys.exit(1)

    if as_json:
        data = {
            "schemas": [s.to_dict() for s in result.schemas],
            "diagnostics": [str(d) for d in result.diagnostics],
        }
        click.echo(json.dumps(data, indent=2))
        return

    if not result.schemas:
        click.echo(f"{path.name}: no component selectors")

    for index, schema in enumerate(result.schemas):
        marker = "" if index == 0 else "  (not rendered)"
        click.echo(f"Component: {schema.name}{marker}")
        click.echo(f"  Base:     {' '.join(schema.base_classes)}")
        for prop in schema.prop_order:
            if prop in schema.boolean_modifiers:
                click.echo(f"  {prop}: boolean -> {schema.boolean_modifiers[prop]}")
            else:
                values = ", ".join(
                    f"{v}={t}" for v, t in schema.variant_groups[prop].items()
                )
                click.echo(f"  {prop}: variant ({values})")
        if schema.state_modifiers:
            states = ", ".join(f":{s.pseudo} on {s.token}" for s in schema.state_modifiers)
            click.echo(f"  States:   {states}")
        click.echo()

    for diag in result.diagnostics:
        click.echo(str(diag))
