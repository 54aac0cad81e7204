"""Lark-based reader that finds the rules and selectors of a CSS stylesheet.

Syntax example:
    /* card */
    .article-card > .title, .article-card > .meta { color: red; }
    @media (min-width: 40em) {
      .article-card { display: flex; }
    }

Only the rule structure is parsed. Declarations and at-rule preludes are
kept as raw text; selector lists are split at top-level commas.
"""

from __future__ import annotations

import logging
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput

from rscss.model.diagnostic import Location
from rscss.stylesheet.errors import ParseError
from rscss.stylesheet.model import SelectorSource, StyleRule, Stylesheet

__all__ = ["parse_stylesheet", "split_selector_list"]

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_CLOSERS = {"[": "]", "(": ")"}


class _Chunk:
    """Raw text of one prelude or declaration and where it starts."""

    def __init__(self, text: str, line: int, column: int):
        self.text = text
        self.line = line
        self.column = column


class _Statement:
    """Marker for a ``;``-terminated statement (declaration, ``@import``, ...)."""


class CssTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into StyleRule objects."""

    def __init__(self, source: str):
        super().__init__()
        self._source = source

    def chunk(self, items: list[Token]) -> _Chunk:
        first, last = items[0], items[-1]
        text = self._source[first.start_pos : last.end_pos]
        return _Chunk(text, first.line, first.column)

    def statement(self, items: list[object]) -> _Statement:
        return _Statement()

    def block(self, items: list[object]) -> list[StyleRule]:
        return [item for item in items if isinstance(item, StyleRule)]

    def rule(self, items: list[object]) -> StyleRule:
        chunk, children = items
        assert isinstance(chunk, _Chunk)
        location = Location(chunk.line, chunk.column)
        if chunk.text.startswith("@"):
            selectors: list[SelectorSource] = []
        else:
            selectors = split_selector_list(chunk.text, location)
        return StyleRule(
            prelude=chunk.text.strip(),
            location=location,
            selectors=selectors,
            children=children,  # type: ignore[arg-type]
        )

    def start(self, items: list[object]) -> Stylesheet:
        return Stylesheet(rules=[item for item in items if isinstance(item, StyleRule)])


def _advance(location: Location, text: str) -> Location:
    """Location just past *text* when it starts at *location*."""
    newlines = text.count("\n")
    if not newlines:
        return Location(location.line, location.column + len(text))
    return Location(location.line + newlines, len(text) - text.rfind("\n"))


def split_selector_list(prelude: str, location: Location | None = None) -> list[SelectorSource]:
    """Split a rule prelude into its selectors.

    Commas inside brackets, parentheses and strings do not split. Comments
    are removed from the selector text; each selector is trimmed and keeps
    the location of its first character. Empty entries are dropped.
    """
    origin = location or Location()
    selectors: list[SelectorSource] = []
    parts: list[str] = []  # text of the current selector, comments removed
    start: int | None = None  # offset of its first non-space character
    closers: list[str] = []
    quote = ""

    def flush() -> None:
        text = "".join(parts).strip()
        if text and start is not None:
            selectors.append(SelectorSource(text, _advance(origin, prelude[:start])))

    i = 0
    while i < len(prelude):
        ch = prelude[i]
        if not quote and prelude.startswith("/*", i):
            end = prelude.find("*/", i + 2)
            i = len(prelude) if end == -1 else end + 2
            continue
        if start is None and not ch.isspace() and (quote or closers or ch != ","):
            start = i
        if ch == "\\":
            parts.append(prelude[i : i + 2])
            i += 2
            continue
        if quote:
            if ch == quote:
                quote = ""
        elif ch in "\"'":
            quote = ch
        elif ch in _CLOSERS:
            closers.append(_CLOSERS[ch])
        elif closers and ch == closers[-1]:
            closers.pop()
        elif ch == "," and not closers:
            flush()
            parts = []
            start = None
            i += 1
            continue
        parts.append(ch)
        i += 1
    flush()
    return selectors


def parse_stylesheet(source: str) -> Stylesheet:
    """Parse CSS source into a Stylesheet of rules in source order."""
    parser = Lark(
        GRAMMAR_PATH.read_text(),
        parser="lalr",
        start="start",
    )
    try:
        tree = parser.parse(source)
    except UnexpectedInput as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ParseError(
            str(e),
            line=line if line and line > 0 else None,
            column=column if column and column > 0 else None,
        ) from e
    stylesheet = CssTransformer(source).transform(tree)
    logger.debug("Parsed stylesheet with %d top-level rule(s)", len(stylesheet.rules))
    return stylesheet
