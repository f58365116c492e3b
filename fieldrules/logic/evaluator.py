"""
Rule Evaluator

Compiles rule strings into composed validators and evaluates single values
against a field descriptor.
"""

import logging
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from fieldrules.models import FieldDescriptor, ValidationOutcome
from fieldrules.logic.errors import RuleConfigurationError
from fieldrules.logic.rule_parser import parse_rules
from fieldrules.logic.validators import BaseValidator, CUSTOM_RULES, create_validator

logger = logging.getLogger(__name__)

FieldLike = Union[FieldDescriptor, Dict[str, Any]]


def build_validator(validation: Optional[str], type_name: str) -> BaseValidator:
    """
    Fold a rule string onto a fresh base validator.

    Args:
        validation: Rule string, e.g. ``required||max:255``
        type_name: Declared field type selecting the base validator

    Returns:
        The composed validator

    Raises:
        RuleConfigurationError: Unknown type or rule, bad argument
    """
    validator = create_validator(type_name)

    for token in parse_rules(validation):
        custom = CUSTOM_RULES.get(token.name)
        if custom is not None:
            validator = custom(validator, token.raw_arg)
        else:
            validator = validator.apply_rule(token.name, token.argument)

    return validator


def as_descriptor(field: FieldLike) -> FieldDescriptor:
    if isinstance(field, FieldDescriptor):
        return field
    try:
        return FieldDescriptor.model_validate(field)
    except ValidationError as e:
        raise RuleConfigurationError(f"invalid field descriptor: {e}") from e


def evaluate(validator: BaseValidator, value: Any, field: FieldDescriptor) -> Optional[ValidationOutcome]:
    """Apply an already composed validator and translate its violation."""
    violation = validator.validate(value, label=field.display_name)
    if violation is None:
        return None

    logger.debug(f"Field '{field.key}' failed {violation.kind}: {violation.message}")
    return ValidationOutcome(
        message=violation.message,
        kind=violation.kind,
        key=field.key,
        label=field.label,
    )


def validate_value(value: Any, field: FieldLike) -> Optional[ValidationOutcome]:
    """
    Validate one value against a field descriptor.

    Fields without a rule string are always valid.

    Returns:
        None if valid, otherwise the first violated rule as a ValidationOutcome.

    Raises:
        RuleConfigurationError: The descriptor's rule string cannot be compiled.
    """
    field = as_descriptor(field)
    if not field.validation:
        return None

    validator = build_validator(field.validation, field.type)
    return evaluate(validator, value, field)
