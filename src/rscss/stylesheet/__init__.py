from rscss.stylesheet.errors import ParseError
from rscss.stylesheet.model import GROUPING_AT_RULES, SelectorSource, StyleRule, Stylesheet
from rscss.stylesheet.parser import parse_stylesheet, split_selector_list

__all__ = [
    "GROUPING_AT_RULES",
    "ParseError",
    "SelectorSource",
    "StyleRule",
    "Stylesheet",
    "parse_stylesheet",
    "split_selector_list",
]
