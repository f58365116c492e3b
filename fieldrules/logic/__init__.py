"""Rule parsing, validator composition and evaluation."""

from fieldrules.logic.errors import RuleConfigurationError
from fieldrules.logic.rule_parser import RuleToken, parse_rules, coerce_argument
from fieldrules.logic.evaluator import build_validator, validate_value

__all__ = [
    "RuleConfigurationError",
    "RuleToken",
    "parse_rules",
    "coerce_argument",
    "build_validator",
    "validate_value",
]
