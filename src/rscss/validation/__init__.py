from rscss.validation.rules import ALL_RULES, RuleFunc, class_format, no_descendant_combinator
from rscss.validation.validator import (
    STAGES,
    Finding,
    Stage,
    check_selector,
    run_stages,
    validate_selector,
)

__all__ = [
    "ALL_RULES",
    "Finding",
    "RuleFunc",
    "STAGES",
    "Stage",
    "check_selector",
    "class_format",
    "no_descendant_combinator",
    "run_stages",
    "validate_selector",
]
