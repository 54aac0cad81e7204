"""RSCSS class naming linter for CSS stylesheets."""

from rscss.config import ConfigError, LintConfig, RuleConfig, load_config
from rscss.lint import LintResult, lint_file, lint_source
from rscss.model.diagnostic import Diagnostic, DiagnosticKind, Location, Severity
from rscss.naming.formats import FormatSpec, Role, Shape
from rscss.selector.segmenter import segment
from rscss.stylesheet.errors import ParseError
from rscss.validation.validator import check_selector

__version__ = "0.3.0"

__all__ = [
    "ConfigError",
    "Diagnostic",
    "DiagnosticKind",
    "FormatSpec",
    "LintConfig",
    "LintResult",
    "Location",
    "ParseError",
    "Role",
    "RuleConfig",
    "Severity",
    "Shape",
    "check_selector",
    "lint_file",
    "lint_source",
    "load_config",
    "segment",
]
