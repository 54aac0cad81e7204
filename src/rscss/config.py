"""Rule configuration: naming formats, depth limit, whitelist, and rule severities."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from rscss.errors import ConfigError
from rscss.model.diagnostic import Severity
from rscss.naming.formats import DEFAULT_FORMATS, FormatSpec, Role, Shape

__all__ = [
    "ConfigError",
    "RuleConfig",
    "LintConfig",
    "DEFAULT_MAX_DEPTH",
    "RECOMMENDED",
    "RULE_NAMES",
    "parse_format",
    "load_config",
    "read_config",
]

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 4

RULE_NAMES: tuple[str, ...] = ("class-format", "no-descendant-combinator")

RECOMMENDED: tuple[str, ...] = RULE_NAMES

_OPTION_KEYS = frozenset({
    "component",
    "element",
    "variant",
    "helper",
    "maxDepth",
    "componentWhitelist",
    "whitelistCountsAsComponent",
})

_SEVERITIES = {
    "error": Severity.ERROR,
    "warn": Severity.WARNING,
    "warning": Severity.WARNING,
}


def parse_format(value: Any, option: str = "format") -> FormatSpec:
    """Resolve a format option: a shape name or ``{"type": "custom", "pattern": ...}``."""
    if isinstance(value, str):
        try:
            shape = Shape(value)
        except ValueError:
            names = ", ".join(s.value for s in Shape if s is not Shape.CUSTOM)
            raise ConfigError(
                f"unknown format {value!r}; use one of {names} or a custom object",
                option,
            ) from None
        if shape is Shape.CUSTOM:
            raise ConfigError("'custom' needs an object with a pattern", option)
        return FormatSpec.builtin(shape)
    if isinstance(value, Mapping):
        if value.get("type") != "custom":
            raise ConfigError("format objects must have type 'custom'", option)
        pattern = value.get("pattern")
        if not isinstance(pattern, str) or not pattern:
            raise ConfigError("custom format needs a non-empty 'pattern' string", option)
        extra = set(value) - {"type", "pattern"}
        if extra:
            raise ConfigError(f"unexpected keys {sorted(extra)}", option)
        try:
            spec = FormatSpec.custom(pattern)
        except ConfigError as exc:
            raise ConfigError(str(exc), option) from exc
        logger.debug("Compiled custom %s pattern %r", option, pattern)
        return spec
    raise ConfigError(f"expected a format name or object, got {type(value).__name__}", option)


@dataclass(frozen=True)
class RuleConfig:
    """Options of the class-format rules, fixed for a whole lint pass."""

    formats: dict[Role, FormatSpec] = field(default_factory=lambda: dict(DEFAULT_FORMATS))
    max_depth: int = DEFAULT_MAX_DEPTH
    component_whitelist: frozenset[str] = frozenset()
    # Whether whitelisted names count toward the one-component-per-segment limit.
    whitelist_counts_as_component: bool = True

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None) -> RuleConfig:
        """Build a config from plugin-style options.

        Example::

            {"component": "pascal",
             "variant": {"type": "custom", "pattern": "^[a-z]+$"},
             "maxDepth": 3,
             "componentWhitelist": ["app"],
             "whitelistCountsAsComponent": False}
        """
        if not options:
            return cls()
        if not isinstance(options, Mapping):
            raise ConfigError(f"options must be an object, got {type(options).__name__}")
        unknown = set(options) - _OPTION_KEYS
        if unknown:
            raise ConfigError(f"unknown option(s): {', '.join(sorted(unknown))}")

        formats = dict(DEFAULT_FORMATS)
        for role in Role:
            if role.value in options:
                formats[role] = parse_format(options[role.value], role.value)

        max_depth = options.get("maxDepth", DEFAULT_MAX_DEPTH)
        if isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth < 1:
            raise ConfigError(f"must be a positive integer, got {max_depth!r}", "maxDepth")

        whitelist = options.get("componentWhitelist", [])
        if isinstance(whitelist, str) or not isinstance(whitelist, (list, tuple, set, frozenset)):
            raise ConfigError("must be a list of class names", "componentWhitelist")
        if not all(isinstance(name, str) for name in whitelist):
            raise ConfigError("entries must be strings", "componentWhitelist")

        counts = options.get("whitelistCountsAsComponent", True)
        if not isinstance(counts, bool):
            raise ConfigError(
                f"must be true or false, got {counts!r}", "whitelistCountsAsComponent"
            )

        return cls(
            formats=formats,
            max_depth=max_depth,
            component_whitelist=frozenset(whitelist),
            whitelist_counts_as_component=counts,
        )


@dataclass(frozen=True)
class LintConfig:
    """Which rules run, how severe their findings are, and their options."""

    rule_config: RuleConfig = field(default_factory=RuleConfig)
    rules: dict[str, Severity] = field(
        default_factory=lambda: {name: Severity.ERROR for name in RECOMMENDED}
    )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LintConfig:
        """Build from ``{"rules": {name: "error"|"warn"|"off"}, "options": {...}}``.

        Rules not mentioned keep their recommended severity.
        """
        if not isinstance(data, Mapping):
            raise ConfigError(f"config must be an object, got {type(data).__name__}")
        unknown = set(data) - {"rules", "options"}
        if unknown:
            raise ConfigError(f"unknown config key(s): {', '.join(sorted(unknown))}")

        rules = {name: Severity.ERROR for name in RECOMMENDED}
        rule_levels = data.get("rules", {})
        if not isinstance(rule_levels, Mapping):
            raise ConfigError("must be an object", "rules")
        for name, level in rule_levels.items():
            if name not in RULE_NAMES:
                raise ConfigError(f"unknown rule {name!r}", "rules")
            if level == "off":
                rules.pop(name, None)
            elif level in _SEVERITIES:
                rules[name] = _SEVERITIES[level]
            else:
                raise ConfigError(
                    f"severity for {name!r} must be error, warn or off, got {level!r}",
                    "rules",
                )

        return cls(rule_config=RuleConfig.from_options(data.get("options")), rules=rules)


def read_config(path: Path) -> dict[str, Any]:
    """Read the raw JSON object of a config file."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"cannot read {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{path} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must hold a JSON object")
    logger.debug("Loaded config from %s", path)
    return data


def load_config(path: Path) -> LintConfig:
    """Load a JSON config file."""
    return LintConfig.from_dict(read_config(path))
