from rscss.model.diagnostic import (
    Diagnostic,
    DiagnosticCollector,
    DiagnosticKind,
    DiagnosticSink,
    Location,
    Severity,
    render_message,
)
from rscss.model.selector import ClassToken, Combinator, CompoundSegment, Selector, Sigil

__all__ = [
    "ClassToken",
    "Combinator",
    "CompoundSegment",
    "Diagnostic",
    "DiagnosticCollector",
    "DiagnosticKind",
    "DiagnosticSink",
    "Location",
    "Selector",
    "Severity",
    "Sigil",
    "render_message",
]
