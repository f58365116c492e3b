"""
Type Validators

Base validators that rule strings are folded onto, one per declared field
type. Additional types can be registered at runtime.
"""

import logging
from typing import Optional, Type

from fieldrules.logic.errors import RuleConfigurationError
from fieldrules.logic.validators.base import BaseValidator, Rule, Violation
from fieldrules.logic.validators.text import StringValidator
from fieldrules.logic.validators.number import NumberValidator
from fieldrules.logic.validators.boolean import BooleanValidator
from fieldrules.logic.validators.any_type import AnyValidator
from fieldrules.logic.validators.custom import CUSTOM_RULES

logger = logging.getLogger(__name__)

# Registry of built-in base types
_VALIDATORS = {
    "string": StringValidator,
    "number": NumberValidator,
    "boolean": BooleanValidator,
    "any": AnyValidator,
}


def get_validator(name: str) -> Optional[Type[BaseValidator]]:
    """Get a validator class by type name. Returns None if not found."""
    return _VALIDATORS.get(name)


def create_validator(name: str) -> BaseValidator:
    """Create a fresh, rule-less validator for a type name."""
    validator_cls = get_validator(name)
    if validator_cls is None:
        raise RuleConfigurationError(f"unknown field type '{name}'")
    return validator_cls()


def register_validator(name: str, validator_cls: Type[BaseValidator]):
    """Register a custom base type."""
    _VALIDATORS[name] = validator_cls
    logger.info(f"Registered validator type '{name}' ({validator_cls.__name__})")


__all__ = [
    "BaseValidator",
    "Rule",
    "Violation",
    "StringValidator",
    "NumberValidator",
    "BooleanValidator",
    "AnyValidator",
    "CUSTOM_RULES",
    "get_validator",
    "create_validator",
    "register_validator",
]
