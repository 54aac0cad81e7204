"""Diagnostic model: structured findings reported for selectors."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Protocol


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"


class DiagnosticKind(Enum):
    """Every kind of violation the rules can report."""

    UNEXPECTED_DESCENDANT_COMBINATOR = "unexpectedDescendantCombinator"
    MAX_DEPTH_EXCEEDED = "maxDepthExceeded"
    ONLY_ONE_COMPONENT_NAME = "onlyOneComponentName"
    INVALID_COMPONENT_NAME = "invalidComponentName"
    INVALID_ELEMENT_NAME = "invalidElementName"
    INVALID_VARIANT_NAME = "invalidVariantName"
    INVALID_HELPER_NAME = "invalidHelperName"


MESSAGES: dict[DiagnosticKind, str] = {
    DiagnosticKind.INVALID_COMPONENT_NAME: (
        'Invalid component name "{{selector}}". Components must be two or more '
        'words separated by hyphens (e.g., "component-name").'
    ),
    DiagnosticKind.INVALID_ELEMENT_NAME: (
        'Invalid element name "{{selector}}". Elements must be one word (e.g., "element").'
    ),
    DiagnosticKind.INVALID_VARIANT_NAME: (
        'Invalid variant name "{{selector}}". Variants must start with a hyphen '
        '(e.g., "-variant").'
    ),
    DiagnosticKind.INVALID_HELPER_NAME: (
        'Invalid helper name "{{selector}}". Helpers must start with an underscore '
        '(e.g., "_helper").'
    ),
    DiagnosticKind.UNEXPECTED_DESCENDANT_COMBINATOR: (
        'Unexpected descendant combinator in "{{selector}}". Use direct child '
        "combinator (>) instead."
    ),
    DiagnosticKind.MAX_DEPTH_EXCEEDED: (
        'Selector "{{selector}}" exceeds the maximum depth of {{maxDepth}}.'
    ),
    DiagnosticKind.ONLY_ONE_COMPONENT_NAME: (
        'Only one component name is allowed per selector in "{{selector}}".'
    ),
}

_PLACEHOLDER_RE = re.compile(r"\{\{\s*(\w+)\s*\}\}")


def render_message(kind: DiagnosticKind, data: Mapping[str, str]) -> str:
    """Fill the ``{{name}}`` placeholders of *kind*'s template from *data*.

    Placeholders without a value are left as written.
    """

    def substitute(match: re.Match[str]) -> str:
        return data.get(match.group(1), match.group(0))

    return _PLACEHOLDER_RE.sub(substitute, MESSAGES[kind])


@dataclass(frozen=True, order=True)
class Location:
    """1-based position of a selector in its source."""

    line: int = 1
    column: int = 1

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about one selector.

    Attributes:
        rule: Name of the rule that produced this diagnostic.
        kind: Which violation was found.
        location: Where the offending selector starts.
        data: Interpolation values for the message template.
        severity: How serious the issue is.
    """

    rule: str
    kind: DiagnosticKind
    location: Location = field(default_factory=Location)
    data: dict[str, str] = field(default_factory=dict)
    severity: Severity = Severity.ERROR

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    @property
    def message(self) -> str:
        return render_message(self.kind, self.data)

    def to_dict(self) -> dict[str, object]:
        return {
            "rule": self.rule,
            "kind": self.kind.value,
            "severity": self.severity.value,
            "line": self.location.line,
            "column": self.location.column,
            "message": self.message,
            "data": dict(self.data),
        }

    def __str__(self) -> str:
        return (
            f"{self.location} {self.severity.value} {self.message} "
            f"[{self.rule}/{self.kind.value}]"
        )


class DiagnosticSink(Protocol):
    """Receiver of findings: one call per violation."""

    def report(
        self, location: Location, kind: DiagnosticKind, data: Mapping[str, str]
    ) -> None: ...


class DiagnosticCollector:
    """A DiagnosticSink that turns each report into a Diagnostic for *rule*."""

    def __init__(self, rule: str, severity: Severity = Severity.ERROR) -> None:
        self.rule = rule
        self.severity = severity
        self.diagnostics: list[Diagnostic] = []

    def report(
        self, location: Location, kind: DiagnosticKind, data: Mapping[str, str]
    ) -> None:
        self.diagnostics.append(
            Diagnostic(
                rule=self.rule,
                kind=kind,
                location=location,
                data=dict(data),
                severity=self.severity,
            )
        )
