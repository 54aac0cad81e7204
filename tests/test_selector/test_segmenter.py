"""Tests for the selector segmenter."""

import pytest

from rscss.model.selector import ClassToken, Combinator, Selector, Sigil
from rscss.selector import extract_class_tokens, segment


def _shape(selector: Selector) -> list[tuple[Combinator | None, str]]:
    return [(combinator, seg.text) for combinator, seg in selector.parts]


def _names(selector: Selector) -> list[list[str]]:
    return [[t.name for t in seg.tokens] for seg in selector.segments]


# ---------------------------------------------------------------------------
# Combinators
# ---------------------------------------------------------------------------


class TestCombinators:
    def test_child(self):
        assert _shape(segment("a > b")) == [(None, "a"), (Combinator.CHILD, "b")]

    def test_descendant(self):
        assert _shape(segment("a b")) == [(None, "a"), (Combinator.DESCENDANT, "b")]

    def test_child_then_descendant(self):
        assert _shape(segment("a > b c")) == [
            (None, "a"),
            (Combinator.CHILD, "b"),
            (Combinator.DESCENDANT, "c"),
        ]

    def test_child_without_spaces(self):
        assert _shape(segment(".a>.b")) == [(None, ".a"), (Combinator.CHILD, ".b")]

    def test_adjacent_sibling(self):
        assert _shape(segment(".a + .b")) == [
            (None, ".a"),
            (Combinator.ADJACENT_SIBLING, ".b"),
        ]

    def test_general_sibling(self):
        assert _shape(segment(".a~.b")) == [
            (None, ".a"),
            (Combinator.GENERAL_SIBLING, ".b"),
        ]

    def test_newline_is_descendant(self):
        assert _shape(segment(".a\n  .b")) == [(None, ".a"), (Combinator.DESCENDANT, ".b")]

    def test_extra_whitespace_around_marker(self):
        sel = segment("  .a   >\t.b  ")
        assert sel.text == ".a   >\t.b"
        assert sel.combinators == [Combinator.CHILD]

    def test_single_segment(self):
        sel = segment(".my-component.-primary")
        assert _shape(sel) == [(None, ".my-component.-primary")]
        assert sel.combinators == []


# ---------------------------------------------------------------------------
# Depth and levels
# ---------------------------------------------------------------------------


class TestDepth:
    @pytest.mark.parametrize(
        "text, depth",
        [
            (".a", 1),
            (".a > .b", 2),
            (".a > .b > .c", 3),
            (".a > .b > .c > .d", 4),
            (".a + .b", 1),
            (".a > .b ~ .c", 2),
        ],
    )
    def test_depth_counts_child_combinators(self, text, depth):
        assert segment(text).depth == depth

    def test_levels_ignore_sibling_combinators(self):
        assert segment(".a > .b + .c > .d").levels() == [0, 1, 1, 2]

    def test_has_descendant(self):
        assert segment(".a > .b .c").has_descendant_combinator()
        assert not segment(".a > .b + .c").has_descendant_combinator()


# ---------------------------------------------------------------------------
# Class tokens
# ---------------------------------------------------------------------------


class TestClassTokens:
    def test_compound_tokens(self):
        assert _names(segment(".comp.-variant._helper")) == [["comp", "-variant", "_helper"]]

    def test_tag_names_are_not_tokens(self):
        assert _names(segment(".my-component > a.-home")) == [["my-component"], ["-home"]]

    def test_pseudo_classes_kept_in_text(self):
        sel = segment(".element:hover::before")
        assert sel.segments[0].text == ".element:hover::before"
        assert _names(sel) == [["element"]]

    def test_id_and_class(self):
        assert _names(segment("#main.page-body")) == [["page-body"]]

    def test_attribute_values_are_ignored(self):
        assert _names(segment('a[href$=".pdf"]')) == [[]]

    def test_attribute_selector_only(self):
        sel = segment('[aria-hidden="true"]')
        assert _names(sel) == [[]]

    def test_pseudo_arguments_are_opaque(self):
        sel = segment(".item:not(.a .b)")
        assert _shape(sel) == [(None, ".item:not(.a .b)")]
        assert _names(sel) == [["item"]]

    def test_combinator_inside_brackets(self):
        sel = segment('.a-b[data-x="a > b"] > .c')
        assert sel.combinators == [Combinator.CHILD]
        assert _names(sel) == [["a-b"], ["c"]]

    def test_escaped_dot_stays_in_name(self):
        assert _names(segment(r".a\.b")) == [[r"a\.b"]]

    def test_escape_then_class(self):
        assert _names(segment(r".md\:grid.-wide")) == [[r"md\:grid", "-wide"]]

    def test_nth_child_plus(self):
        sel = segment(".list-view > .item:nth-child(2n + 1)")
        assert sel.combinators == [Combinator.CHILD]
        assert _names(sel) == [["list-view"], ["item"]]

    def test_duplicate_tokens_are_kept(self):
        assert _names(segment("._helper._helper")) == [["_helper", "_helper"]]

    def test_name_must_not_start_with_digit(self):
        assert extract_class_tokens(".1col.ok") == (ClassToken("ok"),)


# ---------------------------------------------------------------------------
# Malformed input
# ---------------------------------------------------------------------------


class TestMalformed:
    def test_empty_selector(self):
        sel = segment("")
        assert len(sel.parts) == 1
        assert sel.parts[0][0] is None
        assert sel.segments[0].tokens == ()

    def test_whitespace_only(self):
        assert _shape(segment("   ")) == [(None, "")]

    def test_unterminated_bracket_is_opaque(self):
        sel = segment(".a-b[data-x .c > .d")
        assert _shape(sel) == [(None, ".a-b[data-x .c > .d")]
        assert _names(sel) == [[]]

    def test_unterminated_bracket_after_child(self):
        sel = segment(".a-b > .c[x")
        assert _shape(sel) == [(None, ".a-b"), (Combinator.CHILD, ".c[x")]
        assert _names(sel) == [["a-b"], []]

    def test_unterminated_string(self):
        sel = segment('.a-b[title="oops')
        assert _names(sel) == [[]]

    def test_leading_combinator_dropped(self):
        assert _shape(segment("> .title")) == [(None, ".title")]

    def test_trailing_combinator_dropped(self):
        assert _shape(segment(".a-b >")) == [(None, ".a-b")]

    def test_doubled_combinator_keeps_first(self):
        assert segment(".a > + .b").combinators == [Combinator.CHILD]

    def test_lone_dot(self):
        assert _names(segment(". > .b")) == [[], ["b"]]


# ---------------------------------------------------------------------------
# ClassToken
# ---------------------------------------------------------------------------


class TestClassToken:
    def test_sigils(self):
        assert ClassToken("_x").sigil is Sigil.UNDERSCORE
        assert ClassToken("-x").sigil is Sigil.HYPHEN
        assert ClassToken("x").sigil is Sigil.NONE

    def test_text_has_dot(self):
        assert ClassToken("badcomponent").text == ".badcomponent"
