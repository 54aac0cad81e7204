"""Stylesheet model: SelectorSource, StyleRule, and Stylesheet dataclasses."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator

from rscss.model.diagnostic import Location

# At-rules whose blocks hold ordinary style rules.
GROUPING_AT_RULES = frozenset({
    "media",
    "supports",
    "layer",
    "container",
    "document",
    "scope",
})

_AT_NAME_RE = re.compile(r"@([A-Za-z0-9_-]+)")


@dataclass(frozen=True)
class SelectorSource:
    """One selector of a selector list, with where it starts in the source."""

    text: str
    location: Location = field(default_factory=Location)


@dataclass(frozen=True)
class StyleRule:
    """A rule block: a qualified rule (selectors) or an at-rule (``@media ...``)."""

    prelude: str
    location: Location
    selectors: list[SelectorSource] = field(default_factory=list)
    children: list[StyleRule] = field(default_factory=list)

    @property
    def at_keyword(self) -> str | None:
        """Lower-cased at-rule name without the ``@``, or None for qualified rules."""
        match = _AT_NAME_RE.match(self.prelude)
        return match.group(1).lower() if match else None

    @property
    def is_at_rule(self) -> bool:
        return self.prelude.startswith("@")


@dataclass(frozen=True)
class Stylesheet:
    """All top-level rules of a stylesheet, in source order."""

    rules: list[StyleRule]

    def iter_selectors(self) -> Iterator[SelectorSource]:
        """Yield every selector that should be linted, in source order.

        Descends into grouping at-rules and nested rules; skips the blocks
        of other at-rules such as ``@keyframes`` and ``@font-face``.
        """
        yield from _walk(self.rules)


def _walk(rules: list[StyleRule]) -> Iterator[SelectorSource]:
    for rule in rules:
        if rule.is_at_rule:
            if rule.at_keyword in GROUPING_AT_RULES:
                yield from _walk(rule.children)
            continue
        yield from rule.selectors
        yield from _walk(rule.children)
