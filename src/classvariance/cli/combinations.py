"""CLI command: classvariance combinations -- list every variant combination."""

from __future__ import annotations

import json
import sys

import click

from classvariance.loader import ConfigError, load_config
from classvariance.resolver import CVA


@click.command()
@click.argument("config", type=click.Path(exists=True))
@click.option("--json", "as_json", is_flag=True, help="Emit one JSON object per line")
def combinations(config: str, as_json: bool) -> None:
    """List all combinations of declared variant values with their classes."""
    try:
        resolver = CVA(config=load_config(config))
    except ConfigError as exc:
        click.echo(f"Config error: {exc}", err=True)
        sys.exit(1)

    resolved = resolver.resolve_all()
    for combo, classes in resolved:
        if as_json:
            click.echo(json.dumps({"selection": combo, "class": classes}))
            continue
        label = " ".join(f"{name}={value}" for name, value in combo.items()) or "(none)"
        click.echo(f"{label}: {classes}")

    if not as_json:
        click.echo()
        click.echo(f"Total: {len(resolved)} combination(s)")
