"""CLI command: classvariance validate -- lint a JSON variant config."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from classvariance.loader import ConfigError, load_config
from classvariance.model.diagnostic import Severity
from classvariance.validation import count_by_severity
from classvariance.validation import validate as lint


@click.command()
@click.argument("config", type=click.Path(exists=True))
def validate(config: str) -> None:
    """Lint a JSON variant config.

    Reports defaults and compound rules that can never apply.  Warnings
    leave the exit code at 0; any error sets it to 1.
    """
    name = Path(config).name
    try:
        findings = lint(load_config(config))
    except ConfigError as exc:
        click.echo(f"Config error: {exc}", err=True)
        sys.exit(1)

    if not findings:
        click.echo(f"OK: {name} is valid (0 diagnostics)")
        return

    # errors first, then warnings, then info
    order = list(Severity)
    for finding in sorted(findings, key=lambda d: order.index(d.severity)):
        click.echo(str(finding))
        if finding.fix:
            click.echo(f"  fix: {finding.fix}")

    counts = count_by_severity(findings)
    click.echo()
    click.echo(
        f"Summary: {counts[Severity.ERROR]} error(s), "
        f"{counts[Severity.WARNING]} warning(s), {counts[Severity.INFO]} info"
    )
    if counts[Severity.ERROR]:
        sys.exit(1)
