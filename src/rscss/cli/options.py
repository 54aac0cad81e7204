"""Options shared by the CLI commands and how they become a LintConfig."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Callable, Mapping

import click

from rscss.config import ConfigError, LintConfig, read_config
from rscss.naming.formats import Role, Shape

_SHAPE_NAMES = [s.value for s in Shape if s is not Shape.CUSTOM]


def format_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add --config, the per-role format options, --max-depth and --whitelist."""
    for role in reversed(list(Role)):
        func = click.option(
            f"--{role.value}",
            f"{role.value}_format",
            default=None,
            metavar="FORMAT",
            help=(
                f"Naming format for {role.value}s: one of "
                f"{', '.join(_SHAPE_NAMES)}, or a regular expression"
            ),
        )(func)
    func = click.option(
        "--whitelist",
        multiple=True,
        help="Component name accepted regardless of format (repeatable)",
    )(func)
    func = click.option(
        "--max-depth", type=click.IntRange(min=1), default=None, help="Maximum selector depth"
    )(func)
    func = click.option(
        "--config",
        "config_path",
        type=click.Path(exists=True, dir_okay=False),
        default=None,
        help="JSON config file with 'rules' and 'options'",
    )(func)
    return func


def _format_value(value: str) -> str | dict[str, str]:
    if value in _SHAPE_NAMES:
        return value
    return {"type": "custom", "pattern": value}


def build_config(
    config_path: str | None,
    max_depth: int | None,
    whitelist: tuple[str, ...],
    formats: dict[Role, str | None],
) -> LintConfig:
    """Merge the config file (if any) with command-line overrides.

    Exits with status 2 when the result is not a valid configuration.
    """
    try:
        data: dict[str, Any] = read_config(Path(config_path)) if config_path else {}
        raw_options = data.get("options") or {}
        if not isinstance(raw_options, Mapping):
            raise ConfigError("must be an object", "options")
        options = dict(raw_options)
        for role, value in formats.items():
            if value is not None:
                options[role.value] = _format_value(value)
        if max_depth is not None:
            options["maxDepth"] = max_depth
        if whitelist:
            options["componentWhitelist"] = list(whitelist)
        data["options"] = options
        return LintConfig.from_dict(data)
    except ConfigError as exc:
        click.echo(f"Config error: {exc}", err=True)
        sys.exit(2)
