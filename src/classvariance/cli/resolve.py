"""CLI command: classvariance resolve -- print the class string for a selection."""

from __future__ import annotations

import sys

import click

from classvariance.loader import ConfigError, load_config
from classvariance.resolver import CVA


def _parse_selection(pairs: tuple[str, ...]) -> dict[str, str]:
    selection: dict[str, str] = {}
    for pair in pairs:
        if "=" not in pair:
            raise click.BadParameter(f"expected name=value, got {pair!r}", param_hint="--set")
        name, _, value = pair.partition("=")
        selection[name.strip()] = value.strip()
    return selection


@click.command()
@click.argument("config", type=click.Path(exists=True))
@click.option("-s", "--set", "pairs", multiple=True, help="Variant selection as name=value")
@click.option("--class", "extra", default=None, help="Extra classes to append")
def resolve(config: str, pairs: tuple[str, ...], extra: str | None) -> None:
    """Resolve a selection against a JSON variant config.

    Variants left unset fall back to the config's defaults.
    """
    try:
        resolver = CVA(config=load_config(config))
    except ConfigError as exc:
        click.echo(f"Config error: {exc}", err=True)
        sys.exit(1)

    selection = _parse_selection(pairs)
    if extra:
        selection["class"] = extra
    click.echo(resolver(selection))
