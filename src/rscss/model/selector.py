"""Selector model: Combinator, ClassToken, CompoundSegment, and Selector."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Combinator(Enum):
    """Relation between a compound segment and the one before it."""

    CHILD = ">"
    DESCENDANT = " "
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"


class Sigil(Enum):
    """Leading marker character of a class name."""

    NONE = ""
    UNDERSCORE = "_"
    HYPHEN = "-"


@dataclass(frozen=True)
class ClassToken:
    """A single ``.name`` class selector found inside a compound segment."""

    name: str  # without the leading dot

    @property
    def sigil(self) -> Sigil:
        if self.name.startswith("_"):
            return Sigil.UNDERSCORE
        if self.name.startswith("-"):
            return Sigil.HYPHEN
        return Sigil.NONE

    @property
    def text(self) -> str:
        return f".{self.name}"


@dataclass(frozen=True)
class CompoundSegment:
    """The raw text between two combinators and the class tokens it carries."""

    text: str
    tokens: tuple[ClassToken, ...] = ()


@dataclass(frozen=True)
class Selector:
    """A segmented selector.

    ``parts`` pairs each compound segment with the combinator preceding it.
    The first pair always has ``None`` as its combinator and there is always
    at least one pair.
    """

    text: str
    parts: tuple[tuple[Combinator | None, CompoundSegment], ...]

    @property
    def segments(self) -> list[CompoundSegment]:
        return [segment for _, segment in self.parts]

    @property
    def combinators(self) -> list[Combinator]:
        return [c for c, _ in self.parts if c is not None]

    @property
    def depth(self) -> int:
        """Nesting depth: the number of child combinators plus one."""
        return sum(1 for c in self.combinators if c is Combinator.CHILD) + 1

    def has_descendant_combinator(self) -> bool:
        return Combinator.DESCENDANT in self.combinators

    def levels(self) -> list[int]:
        """Nesting level of each segment, in order.

        Only child combinators open a new level; sibling combinators keep
        the level of the segment they follow.
        """
        levels: list[int] = []
        level = 0
        for combinator, _ in self.parts:
            if combinator is Combinator.CHILD:
                level += 1
            levels.append(level)
        return levels
