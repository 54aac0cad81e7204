"""Token classifier: decides the structural role of a class token."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rscss.model.selector import ClassToken, Sigil
from rscss.naming.formats import Role, name_matches

if TYPE_CHECKING:
    from rscss.config import RuleConfig

__all__ = ["Classification", "HELPER_LIKE_NAMES", "classify"]

# Plain words that name helpers and therefore must carry the ``_`` sigil.
HELPER_LIKE_NAMES = frozenset({
    "helper",
    "utility",
    "util",
    "clearfix",
    "hidden",
    "visible",
    "left",
    "right",
    "center",
})


@dataclass(frozen=True)
class Classification:
    """Role of a token and whether its spelling fits that role's format."""

    role: Role
    is_valid: bool


def classify(token: ClassToken, segment_position: int, config: RuleConfig) -> Classification:
    """Classify *token* found in a segment at nesting level *segment_position*.

    Checked in order, first match wins:

    1. ``_name`` is a helper.
    2. ``-name`` is a variant.
    3. A helper-like plain word (``hidden``, ``clearfix``, ...) is a helper
       and always invalid, since it lacks the ``_`` sigil.
    4. At level 0 the token is a component.
    5. Deeper down it is an element.
    """
    if token.sigil is Sigil.UNDERSCORE:
        role = Role.HELPER
    elif token.sigil is Sigil.HYPHEN:
        role = Role.VARIANT
    elif token.name.lower() in HELPER_LIKE_NAMES:
        return Classification(role=Role.HELPER, is_valid=False)
    elif segment_position == 0:
        role = Role.COMPONENT
    else:
        role = Role.ELEMENT
    return Classification(role=role, is_valid=is_valid_name(token.name, role, config))


def is_valid_name(name: str, role: Role, config: RuleConfig) -> bool:
    return name_matches(
        name, role, config.formats[role], whitelist=config.component_whitelist
    )
