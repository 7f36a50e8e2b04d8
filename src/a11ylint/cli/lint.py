"""CLI command: a11ylint lint -- parse and lint stylesheet files."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from a11ylint.config import ERROR, WARNING, ConfigError, LintConfig
from a11ylint.linter import lint_file
from a11ylint.model.issue import Severity
from a11ylint.parser import ParseError
from a11ylint.rules.registry import default_registry


@click.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--severity",
    type=click.Choice(["warning", "error"]),
    default="warning",
    show_default=True,
    help="Severity reported for every enabled rule.",
)
@click.option(
    "--disable",
    multiple=True,
    metavar="RULE",
    help="Disable a rule by name (repeatable).",
)
def lint(files: tuple[str, ...], severity: str, disable: tuple[str, ...]) -> None:
    """Lint CSS/SCSS files for accessibility issues.

    Prints one line per issue and exits with code 1 if any file fails to
    parse or any error-severity issue is found, 0 otherwise.
    """
    registry = default_registry()
    level = ERROR if severity == "error" else WARNING
    config = LintConfig.default(registry.names(), level=level)
    for name in disable:
        config = config.with_rule(name, 0)

    failed = False
    errors = warnings = 0
    for file in files:
        path = Path(file)
        try:
            issues = lint_file(path, config=config, registry=registry)
        except ParseError as exc:
            click.echo(f"{path}: Parse error: {exc}", err=True)
            failed = True
            continue
        except OSError as exc:
            click.echo(f"{path}: Cannot read file: {exc}", err=True)
            failed = True
            continue
        except ConfigError as exc:
            click.echo(f"Config error: {exc}", err=True)
            sys.exit(1)

        for issue in issues:
            click.echo(f"{path}:{issue}")
        errors += sum(1 for i in issues if i.severity is Severity.ERROR)
        warnings += sum(1 for i in issues if i.severity is Severity.WARNING)

    click.echo()
    click.echo(f"Summary: {errors} error(s), {warnings} warning(s) in {len(files)} file(s)")

    if failed or errors:
        sys.exit(1)
    sys.exit(0)
