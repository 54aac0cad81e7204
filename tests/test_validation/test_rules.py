"""Tests for the selector rules and diagnostic rendering."""

import pytest

from rscss.config import RULE_NAMES, RuleConfig
from rscss.model.diagnostic import Diagnostic, DiagnosticKind, Location, Severity, render_message
from rscss.stylesheet import SelectorSource
from rscss.validation import ALL_RULES, class_format, no_descendant_combinator


def _source(text: str, line: int = 1, column: int = 1) -> SelectorSource:
    return SelectorSource(text, Location(line, column))


# ---------------------------------------------------------------------------
# class-format
# ---------------------------------------------------------------------------


class TestClassFormatRule:
    def test_clean(self):
        assert class_format(_source(".good-component"), RuleConfig()) == []

    def test_invalid_component(self):
        diags = class_format(_source(".badcomponent", 2, 3), RuleConfig())
        assert diags == [
            Diagnostic(
                rule="class-format",
                kind=DiagnosticKind.INVALID_COMPONENT_NAME,
                location=Location(2, 3),
                data={"selector": ".badcomponent"},
            )
        ]
        assert diags[0].is_error
        assert diags[0].message == (
            'Invalid component name ".badcomponent". Components must be two or more '
            'words separated by hyphens (e.g., "component-name").'
        )

    def test_depth_message(self):
        config = RuleConfig(max_depth=1)
        (diag,) = class_format(_source(".a-b > .c"), config)
        assert diag.kind is DiagnosticKind.MAX_DEPTH_EXCEEDED
        assert diag.message == 'Selector ".a-b > .c" exceeds the maximum depth of 1.'


# ---------------------------------------------------------------------------
# no-descendant-combinator
# ---------------------------------------------------------------------------


class TestNoDescendantCombinatorRule:
    @pytest.mark.parametrize(
        "selector",
        [
            ".parent > .child",
            ".component",
            "._helper",
            ".element + .element",
            ".header ~ .content",
            ".component:hover",
            ".element::before",
            ".component[data-active]",
            '.element[type="text"]',
            ".nav > .item > .link:hover",
            ".form > .field > .input[required]",
        ],
    )
    def test_valid(self, selector):
        assert no_descendant_combinator(_source(selector), RuleConfig()) == []

    @pytest.mark.parametrize(
        "selector",
        [
            ".parent .child",
            ".parent .child .grandchild",
            ".parent > .child .grandchild",
            ".component .element > .nested",
            ".component .element:hover",
            ".component .element::before",
            ".component .element[data-active]",
        ],
    )
    def test_invalid(self, selector):
        (diag,) = no_descendant_combinator(_source(selector), RuleConfig())
        assert diag.rule == "no-descendant-combinator"
        assert diag.kind is DiagnosticKind.UNEXPECTED_DESCENDANT_COMBINATOR
        assert diag.data == {"selector": selector}

    def test_ignores_naming(self):
        assert no_descendant_combinator(_source(".Bad > .Worse"), RuleConfig()) == []


# ---------------------------------------------------------------------------
# Registry and messages
# ---------------------------------------------------------------------------


class TestRegistry:
    def test_all_rules_named(self):
        assert tuple(ALL_RULES) == RULE_NAMES


class TestMessages:
    @pytest.mark.parametrize("kind", list(DiagnosticKind))
    def test_every_kind_has_template(self, kind):
        message = render_message(kind, {"selector": ".x", "maxDepth": "2"})
        assert "{{" not in message
        assert ".x" in message

    def test_missing_value_left_in_place(self):
        message = render_message(DiagnosticKind.MAX_DEPTH_EXCEEDED, {"selector": ".x"})
        assert "{{maxDepth}}" in message

    def test_str(self):
        diag = Diagnostic(
            rule="class-format",
            kind=DiagnosticKind.INVALID_ELEMENT_NAME,
            location=Location(4, 7),
            data={"selector": ".Title"},
            severity=Severity.WARNING,
        )
        assert str(diag) == (
            '4:7 WARNING Invalid element name ".Title". Elements must be one word '
            '(e.g., "element"). [class-format/invalidElementName]'
        )

    def test_to_dict(self):
        diag = Diagnostic(
            rule="class-format",
            kind=DiagnosticKind.INVALID_HELPER_NAME,
            data={"selector": ".hidden"},
        )
        data = diag.to_dict()
        assert data["kind"] == "invalidHelperName"
        assert data["severity"] == "ERROR"
        assert (data["line"], data["column"]) == (1, 1)
        assert data["data"] == {"selector": ".hidden"}
