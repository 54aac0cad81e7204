"""Linter: runs the enabled rules over every selector of a stylesheet."""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from pathlib import Path

from rscss.config import LintConfig
from rscss.model.diagnostic import Diagnostic, Severity
from rscss.stylesheet import parse_stylesheet
from rscss.validation.rules import ALL_RULES

__all__ = ["LintResult", "lint_source", "lint_file"]

logger = logging.getLogger(__name__)


@dataclass
class LintResult:
    """Diagnostics found in one stylesheet."""

    filename: str
    diagnostics: list[Diagnostic] = field(default_factory=list)
    selector_count: int = 0

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.is_error]

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.is_warning]

    @property
    def has_errors(self) -> bool:
        return any(d.is_error for d in self.diagnostics)

    def to_dict(self) -> dict[str, object]:
        return {
            "filename": self.filename,
            "selectors": self.selector_count,
            "errors": len(self.errors),
            "warnings": len(self.warnings),
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }


def lint_source(
    source: str,
    config: LintConfig | None = None,
    filename: str = "<string>",
) -> LintResult:
    """Lint CSS *source*.

    Raises :class:`rscss.stylesheet.ParseError` if the stylesheet structure
    cannot be read. Diagnostics are sorted by location; diagnostics at the
    same location keep rule order.
    """
    config = config or LintConfig()
    stylesheet = parse_stylesheet(source)
    result = LintResult(filename=filename)

    for selector in stylesheet.iter_selectors():
        result.selector_count += 1
        for name, severity in config.rules.items():
            for diag in ALL_RULES[name](selector, config.rule_config):
                if severity is not Severity.ERROR:
                    diag = dataclasses.replace(diag, severity=severity)
                result.diagnostics.append(diag)

    result.diagnostics.sort(key=lambda d: d.location)
    logger.debug(
        "Linted %s: %d selector(s), %d diagnostic(s)",
        filename,
        result.selector_count,
        len(result.diagnostics),
    )
    return result


def lint_file(path: Path, config: LintConfig | None = None) -> LintResult:
    """Lint a UTF-8 encoded CSS file."""
    source = path.read_text(encoding="utf-8")
    return lint_source(source, config=config, filename=str(path))
