"""Lint rules over single selectors.

Each rule is a function taking a SelectorSource and the RuleConfig and
returning a list of Diagnostic objects describing any issues found.
"""

from __future__ import annotations

from typing import Callable

from rscss.config import RuleConfig
from rscss.model.diagnostic import Diagnostic, DiagnosticCollector
from rscss.selector.segmenter import segment
from rscss.stylesheet.model import SelectorSource
from rscss.validation.validator import check_descendant, validate_selector


def class_format(source: SelectorSource, config: RuleConfig) -> list[Diagnostic]:
    """Structure and naming of RSCSS class selectors."""
    collector = DiagnosticCollector("class-format")
    validate_selector(source.text, config, collector, source.location)
    return collector.diagnostics


def no_descendant_combinator(source: SelectorSource, config: RuleConfig) -> list[Diagnostic]:
    """Descendant combinators only, independent of naming."""
    collector = DiagnosticCollector("no-descendant-combinator")
    for finding in check_descendant(segment(source.text), config):
        collector.report(source.location, finding.kind, finding.data)
    return collector.diagnostics


RuleFunc = Callable[[SelectorSource, RuleConfig], list[Diagnostic]]

ALL_RULES: dict[str, RuleFunc] = {
    "class-format": class_format,
    "no-descendant-combinator": no_descendant_combinator,
}
