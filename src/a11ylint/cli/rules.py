"""CLI command: a11ylint rules -- list registered rules."""

from __future__ import annotations

import json

import click

from a11ylint.rules.registry import default_registry


@click.command()
def rules() -> None:
    """List the available rules and their default configuration."""
    registry = default_registry()
    for rule in sorted(registry, key=lambda r: r.name):
        click.echo(f"{rule.name}  {json.dumps(rule.default_config, sort_keys=True)}")
