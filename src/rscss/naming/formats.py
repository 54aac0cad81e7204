"""Naming formats: the built-in shapes, custom patterns, and name matching."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

from rscss.errors import ConfigError

__all__ = ["Role", "Shape", "FormatSpec", "DEFAULT_FORMATS", "name_matches"]


class Role(Enum):
    """Structural role of a class token."""

    COMPONENT = "component"
    ELEMENT = "element"
    VARIANT = "variant"
    HELPER = "helper"

    @property
    def sigil(self) -> str:
        """Leading character the role is written with, if any."""
        return _ROLE_SIGILS.get(self, "")


_ROLE_SIGILS = {Role.VARIANT: "-", Role.HELPER: "_"}


class Shape(Enum):
    """Built-in naming shapes plus the custom-pattern variant.

    Values are the option names accepted in rule options.
    """

    TWO_WORDS = "twoWords"
    ONE_WORD = "oneWord"
    UNDERSCORED = "underScored"
    DASH_FIRST = "dashFirst"
    PASCAL = "pascal"
    CUSTOM = "custom"


_SHAPE_PATTERNS: dict[Shape, str] = {
    Shape.TWO_WORDS: r"[a-z][a-z0-9]*(-[a-z0-9]+)+",
    Shape.ONE_WORD: r"[a-z][a-z0-9]*",
    Shape.DASH_FIRST: r"-[a-z][a-z0-9]*(-[a-z0-9]+)*",
    Shape.UNDERSCORED: r"_[a-z][a-z0-9]*(-[a-z0-9]+)*",
    Shape.PASCAL: r"[A-Z][a-zA-Z0-9]*",
}

# Shapes whose names always begin with a fixed sigil character.
_SHAPE_LEADS: dict[Shape, str] = {
    Shape.DASH_FIRST: "-",
    Shape.UNDERSCORED: "_",
}


@dataclass(frozen=True)
class FormatSpec:
    """A naming format resolved to a compiled regular expression.

    Build one with :meth:`builtin` or :meth:`custom`; the expression is
    compiled once, here, and reused for every token.
    """

    shape: Shape
    pattern: str
    regex: re.Pattern[str] = field(compare=False, repr=False)

    @classmethod
    def builtin(cls, shape: Shape) -> FormatSpec:
        if shape is Shape.CUSTOM:
            raise ConfigError("a custom format needs a pattern; use FormatSpec.custom()")
        pattern = _SHAPE_PATTERNS[shape]
        return cls(shape=shape, pattern=pattern, regex=re.compile(pattern))

    @classmethod
    def custom(cls, pattern: str) -> FormatSpec:
        try:
            regex = re.compile(pattern)
        except re.error as exc:
            raise ConfigError(f"invalid pattern {pattern!r}: {exc}") from exc
        return cls(shape=Shape.CUSTOM, pattern=pattern, regex=regex)

    @property
    def lead(self) -> str:
        """The sigil every matching name starts with, or "" if none is fixed."""
        return _SHAPE_LEADS.get(self.shape, "")

    def matches(self, name: str) -> bool:
        """True if *name* matches this format in full (case sensitive)."""
        return self.regex.fullmatch(name) is not None

    def __str__(self) -> str:
        if self.shape is Shape.CUSTOM:
            return f"custom({self.pattern})"
        return self.shape.value


DEFAULT_FORMATS: dict[Role, FormatSpec] = {
    Role.COMPONENT: FormatSpec.builtin(Shape.TWO_WORDS),
    Role.ELEMENT: FormatSpec.builtin(Shape.ONE_WORD),
    Role.VARIANT: FormatSpec.builtin(Shape.DASH_FIRST),
    Role.HELPER: FormatSpec.builtin(Shape.UNDERSCORED),
}


def name_matches(
    name: str,
    role: Role,
    spec: FormatSpec,
    whitelist: frozenset[str] = frozenset(),
) -> bool:
    """Check *name* (no leading dot) against the format configured for *role*.

    Variant and helper names are written with their sigil. When the format
    does not itself start with that sigil (a ``twoWords`` variant, or any
    custom pattern) the sigil is stripped and only the rest is matched.
    Component names listed in *whitelist* are always accepted.
    """
    if role is Role.COMPONENT and name in whitelist:
        return True
    sigil = role.sigil
    if sigil and spec.lead != sigil and name.startswith(sigil):
        name = name[len(sigil):]
    return spec.matches(name)
