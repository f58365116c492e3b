"""
Field Rules

Compiles pipe-delimited rule strings (e.g. ``required||max:255||min:3``)
into validators and checks single field values against them.
"""

from fieldrules.models import FieldDescriptor, ValidationOutcome
from fieldrules.logic.errors import RuleConfigurationError
from fieldrules.logic.rule_parser import RuleToken, parse_rules
from fieldrules.logic.evaluator import build_validator, validate_value
from fieldrules.config.field_registry import FieldRegistry, get_registry

__all__ = [
    "FieldDescriptor",
    "ValidationOutcome",
    "RuleConfigurationError",
    "RuleToken",
    "parse_rules",
    "build_validator",
    "validate_value",
    "FieldRegistry",
    "get_registry",
]
