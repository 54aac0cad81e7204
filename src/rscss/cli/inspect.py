"""CLI command: rscss inspect -- show how a selector is segmented and classified."""

from __future__ import annotations

import sys

import click

from rscss.cli.options import build_config, format_options
from rscss.model.diagnostic import render_message
from rscss.naming.classifier import classify
from rscss.naming.formats import Role
from rscss.selector.segmenter import segment
from rscss.validation.validator import run_stages


@click.command()
@click.argument("selector")
@format_options
def inspect(
    selector: str,
    config_path: str | None,
    max_depth: int | None,
    whitelist: tuple[str, ...],
    component_format: str | None,
    element_format: str | None,
    variant_format: str | None,
    helper_format: str | None,
) -> None:
    """Show segments, token roles and class-format diagnostics for SELECTOR."""
    rule_config = build_config(
        config_path,
        max_depth,
        whitelist,
        {
            Role.COMPONENT: component_format,
            Role.ELEMENT: element_format,
            Role.VARIANT: variant_format,
            Role.HELPER: helper_format,
        },
    ).rule_config
    parsed = segment(selector)

    click.echo(f"Selector: {parsed.text}")
    click.echo(f"Depth: {parsed.depth} (max {rule_config.max_depth})")
    click.echo()

    click.echo("Segments:")
    for index, ((combinator, seg), level) in enumerate(zip(parsed.parts, parsed.levels())):
        shown = combinator.name.lower() if combinator else "-"
        click.echo(f'  [{index}] level={level} combinator={shown} "{seg.text}"')
        for token in seg.tokens:
            result = classify(token, level, rule_config)
            status = "valid" if result.is_valid else "INVALID"
            click.echo(f"      {token.text}  {result.role.value}  {status}")
    click.echo()

    findings = run_stages(parsed, rule_config)
    if not findings:
        click.echo("OK: no diagnostics")
        sys.exit(0)
    click.echo("Diagnostics:")
    for finding in findings:
        click.echo(f"  {finding.kind.value}: {render_message(finding.kind, finding.data)}")
    sys.exit(1)
