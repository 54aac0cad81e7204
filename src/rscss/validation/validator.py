"""Selector validator: ordered checks over one segmented selector.

The checks run in a fixed order and every structural check is terminal:

1. DESCENDANT_CHECK      any descendant combinator
2. DEPTH_CHECK           more child levels than ``max_depth``
3. MULTI_COMPONENT_CHECK two valid component names in one compound segment
4. TOKEN_VALIDATION      every class token against its role's format

As soon as one of the first three stages finds a problem, its single finding
is the result for the selector. Token validation reports every invalid token.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from rscss.config import RuleConfig
from rscss.model.diagnostic import DiagnosticKind, DiagnosticSink, Location
from rscss.model.selector import Selector
from rscss.naming.classifier import classify
from rscss.naming.formats import Role
from rscss.selector.segmenter import segment


class Stage(Enum):
    """Validation stages in evaluation order."""

    DESCENDANT_CHECK = "descendant_check"
    DEPTH_CHECK = "depth_check"
    MULTI_COMPONENT_CHECK = "multi_component_check"
    TOKEN_VALIDATION = "token_validation"


@dataclass(frozen=True)
class Finding:
    """A violation found in a selector, before it is tied to a location."""

    kind: DiagnosticKind
    data: dict[str, str] = field(default_factory=dict)


_INVALID_NAME_KINDS = {
    Role.COMPONENT: DiagnosticKind.INVALID_COMPONENT_NAME,
    Role.ELEMENT: DiagnosticKind.INVALID_ELEMENT_NAME,
    Role.VARIANT: DiagnosticKind.INVALID_VARIANT_NAME,
    Role.HELPER: DiagnosticKind.INVALID_HELPER_NAME,
}


def check_descendant(selector: Selector, config: RuleConfig) -> list[Finding]:
    """Descendant combinators are not allowed; use ``>`` instead."""
    if selector.has_descendant_combinator():
        return [
            Finding(
                DiagnosticKind.UNEXPECTED_DESCENDANT_COMBINATOR,
                {"selector": selector.text},
            )
        ]
    return []


def check_depth(selector: Selector, config: RuleConfig) -> list[Finding]:
    """A selector may not nest deeper than ``config.max_depth`` levels."""
    if selector.depth > config.max_depth:
        return [
            Finding(
                DiagnosticKind.MAX_DEPTH_EXCEEDED,
                {"selector": selector.text, "maxDepth": str(config.max_depth)},
            )
        ]
    return []


def check_multi_component(selector: Selector, config: RuleConfig) -> list[Finding]:
    """Each compound segment names at most one component.

    Variants and helpers sharing the segment do not count.
    """
    component_spec = config.formats[Role.COMPONENT]
    for level, seg in zip(selector.levels(), selector.segments):
        count = 0
        for token in seg.tokens:
            result = classify(token, level, config)
            if result.role is not Role.COMPONENT or not result.is_valid:
                continue
            if config.whitelist_counts_as_component or component_spec.matches(token.name):
                count += 1
        if count > 1:
            return [
                Finding(DiagnosticKind.ONLY_ONE_COMPONENT_NAME, {"selector": selector.text})
            ]
    return []


def check_tokens(selector: Selector, config: RuleConfig) -> list[Finding]:
    """Report every class token whose name does not fit its role."""
    findings: list[Finding] = []
    for level, seg in zip(selector.levels(), selector.segments):
        for token in seg.tokens:
            result = classify(token, level, config)
            if not result.is_valid:
                findings.append(
                    Finding(_INVALID_NAME_KINDS[result.role], {"selector": token.text})
                )
    return findings


StageFunc = Callable[[Selector, RuleConfig], list[Finding]]

STAGES: tuple[tuple[Stage, StageFunc], ...] = (
    (Stage.DESCENDANT_CHECK, check_descendant),
    (Stage.DEPTH_CHECK, check_depth),
    (Stage.MULTI_COMPONENT_CHECK, check_multi_component),
    (Stage.TOKEN_VALIDATION, check_tokens),
)


def run_stages(selector: Selector, config: RuleConfig) -> list[Finding]:
    """Run :data:`STAGES` in order, stopping at the first structural finding."""
    for stage, check in STAGES:
        findings = check(selector, config)
        if findings or stage is Stage.TOKEN_VALIDATION:
            return findings
    return []


def check_selector(selector_text: str, config: RuleConfig | None = None) -> list[Finding]:
    """Segment and validate one selector. Pure: same input, same findings."""
    return run_stages(segment(selector_text), config or RuleConfig())


def validate_selector(
    selector_text: str,
    config: RuleConfig,
    sink: DiagnosticSink,
    location: Location | None = None,
) -> int:
    """Validate one selector and report each finding to *sink*.

    Returns the number of findings reported.
    """
    findings = check_selector(selector_text, config)
    where = location or Location()
    for finding in findings:
        sink.report(where, finding.kind, finding.data)
    return len(findings)
