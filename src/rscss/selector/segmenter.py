"""Hand-written segmenter that splits a selector at its combinators.

Syntax examples:
    .my-component > .title          -> [None .my-component, Child .title]
    .card .title                    -> [None .card, Descendant .title]
    .item + .item:not(.a .b)        -> [None .item, AdjacentSibling .item:not(.a .b)]

Brackets, parentheses and quoted strings are opaque: nothing inside them is
treated as a combinator or a class token.
"""

from __future__ import annotations

import re

from rscss.model.selector import ClassToken, Combinator, CompoundSegment, Selector

__all__ = ["segment", "extract_class_tokens"]

_WHITESPACE = " \t\n\r\f"

_COMBINATORS = {
    ">": Combinator.CHILD,
    "+": Combinator.ADJACENT_SIBLING,
    "~": Combinator.GENERAL_SIBLING,
}

_CLOSERS = {"[": "]", "(": ")"}

_QUOTES = "\"'"

# A dot followed by a class name: letter, underscore or hyphen first.
_CLASS_RE = re.compile(r"\.([A-Za-z_-][A-Za-z0-9_-]*)")


def _mask_nested(raw: str) -> tuple[str, bool]:
    """Blank out bracket, parenthesis and string contents in *raw*.

    Escapes outside them are replaced with name characters so that
    ``.a\\.b`` stays one class name.

    Returns the masked text (same length as *raw*) and whether every
    opened construct was closed again.
    """
    chars = list(raw)
    closers: list[str] = []
    quote = ""
    i = 0
    while i < len(raw):
        ch = raw[i]
        nested = bool(closers or quote)
        if ch == "\\":
            # An escaped character is part of the name it sits in.
            filler = " " if nested else "x"
            chars[i : i + 2] = filler * len(chars[i : i + 2])
            i += 2
            continue
        if quote:
            if ch == quote:
                quote = ""
            chars[i] = " "
        elif ch in _QUOTES:
            quote = ch
            chars[i] = " "
        elif ch in _CLOSERS:
            closers.append(_CLOSERS[ch])
            if nested:
                chars[i] = " "
        elif closers and ch == closers[-1]:
            closers.pop()
            if closers:
                chars[i] = " "
        elif nested:
            chars[i] = " "
        i += 1
    return "".join(chars), not closers and not quote


def extract_class_tokens(raw: str) -> tuple[ClassToken, ...]:
    """Return the class tokens of one compound segment, in source order.

    A segment with an unterminated bracket, parenthesis or string yields no
    tokens at all.
    """
    masked, balanced = _mask_nested(raw)
    if not balanced:
        return ()
    return tuple(
        ClassToken(name=raw[m.start(1) : m.end(1)]) for m in _CLASS_RE.finditer(masked)
    )


def _split_compounds(text: str) -> list[tuple[Combinator | None, str]]:
    """Split *text* into (combinator, compound text) pairs at top level."""
    parts: list[tuple[Combinator | None, str]] = []
    explicit: Combinator | None = None
    combinator: Combinator | None = None
    start: int | None = None
    closers: list[str] = []
    quote = ""

    i = 0
    while i < len(text):
        ch = text[i]

        # Inside a string or a bracketed / parenthesised group.
        if quote or closers:
            if ch == "\\":
                i += 2
                continue
            if quote:
                if ch == quote:
                    quote = ""
            elif ch in _QUOTES:
                quote = ch
            elif ch in _CLOSERS:
                closers.append(_CLOSERS[ch])
            elif ch == closers[-1]:
                closers.pop()
            i += 1
            continue

        if ch in _WHITESPACE or ch in _COMBINATORS:
            if start is not None:
                parts.append((combinator, text[start:i]))
                start = None
            # A leading combinator has no compound to relate to; whitespace
            # alone between two compounds is a descendant combinator.
            if ch in _COMBINATORS and parts and explicit is None:
                explicit = _COMBINATORS[ch]
            i += 1
            continue

        if start is None:
            if not parts:
                combinator = None
            elif explicit is not None:
                combinator = explicit
            else:
                combinator = Combinator.DESCENDANT
            explicit = None
            start = i

        if ch == "\\":
            i += 2
            continue
        if ch in _QUOTES:
            quote = ch
        elif ch in _CLOSERS:
            closers.append(_CLOSERS[ch])
        i += 1

    if start is not None:
        parts.append((combinator, text[start:]))
    return parts


def segment(selector_text: str) -> Selector:
    """Segment a raw selector into compound segments and their combinators.

    Never raises: malformed fragments end up as a segment without class
    tokens, and empty input yields a single empty segment.
    """
    text = selector_text.strip()
    pairs = _split_compounds(text)
    if not pairs:
        return Selector(text=text, parts=((None, CompoundSegment(text="")),))
    return Selector(
        text=text,
        parts=tuple(
            (combinator, CompoundSegment(text=raw, tokens=extract_class_tokens(raw)))
            for combinator, raw in pairs
        ),
    )
