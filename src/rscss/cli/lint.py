"""CLI command: rscss lint -- lint CSS files."""

from __future__ import annotations

import dataclasses
import json
import sys
from pathlib import Path

import click

from rscss.cli.options import build_config, format_options
from rscss.config import RULE_NAMES
from rscss.lint import LintResult, lint_file
from rscss.model.diagnostic import Severity
from rscss.naming.formats import Role
from rscss.stylesheet import ParseError


@click.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@format_options
@click.option(
    "--rule",
    "rules",
    multiple=True,
    type=click.Choice(RULE_NAMES),
    help=(
        "Run only this rule (repeatable). Selected rules run even if the "
        "config file turns them off, at the configured severity or error"
    ),
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Output format",
)
def lint(
    files: tuple[str, ...],
    config_path: str | None,
    max_depth: int | None,
    whitelist: tuple[str, ...],
    component_format: str | None,
    element_format: str | None,
    variant_format: str | None,
    helper_format: str | None,
    rules: tuple[str, ...],
    output_format: str,
) -> None:
    """Lint CSS files against the RSCSS naming rules.

    Prints one line per diagnostic and exits with code 1 if any error is
    found or a file cannot be read or parsed, 0 otherwise.
    """
    config = build_config(
        config_path,
        max_depth,
        whitelist,
        {
            Role.COMPONENT: component_format,
            Role.ELEMENT: element_format,
            Role.VARIANT: variant_format,
            Role.HELPER: helper_format,
        },
    )
    if rules:
        config = dataclasses.replace(
            config,
            rules={name: config.rules.get(name, Severity.ERROR) for name in rules},
        )

    results: list[LintResult] = []
    failed = False
    for path in files:
        try:
            results.append(lint_file(Path(path), config))
        except ParseError as exc:
            where = f"{path}:{exc.line}:{exc.column}" if exc.line else path
            click.echo(f"{where}: Parse error: {exc}", err=True)
            failed = True
        except (OSError, UnicodeDecodeError) as exc:
            click.echo(f"{path}: cannot read: {exc}", err=True)
            failed = True

    if output_format == "json":
        click.echo(json.dumps([r.to_dict() for r in results], indent=2))
    else:
        for result in results:
            for diag in result.diagnostics:
                click.echo(f"{result.filename}:{diag}")
        errors = sum(len(r.errors) for r in results)
        warnings = sum(len(r.warnings) for r in results)
        click.echo(
            f"Summary: {errors} error(s), {warnings} warning(s) in {len(results)} file(s)"
        )

    if failed or any(r.has_errors for r in results):
        sys.exit(1)
    sys.exit(0)
