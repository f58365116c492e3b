"""
Base Validator

Abstract base class for all type validators. A validator starts empty and
rules are folded onto it one at a time through apply_rule(); validate() then
checks a single value and reports the first violation.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Tuple

from fieldrules.config.constants import CUSTOM_KIND
from fieldrules.logic.errors import RuleConfigurationError

logger = logging.getLogger(__name__)


class Violation(NamedTuple):
    """First rule a value failed: machine-checkable kind plus message."""
    kind: str
    message: str


# check(value, label) -> Violation or None
Check = Callable[[Any, str], Optional[Violation]]

SCALAR_TYPES = (str, int, float, bool)


class Rule(NamedTuple):
    """
    A named rule a validator understands.

    ``apply`` is called as apply(validator) when ``arg_types`` is None,
    otherwise as apply(validator, argument).
    """
    apply: Callable
    arg_types: Optional[Tuple[type, ...]] = None
    optional_arg: bool = False


def _accepts(argument: Any, arg_types: Tuple[type, ...]) -> bool:
    # bool is an int subclass; only accept it where asked for explicitly
    if isinstance(argument, bool) and bool not in arg_types:
        return False
    return isinstance(argument, arg_types)


def format_values(values: List[Any]) -> str:
    return ", ".join(str(v) for v in values)


def contains_value(values: List[Any], value: Any) -> bool:
    """Membership that keeps bool apart from int (True is not 1)."""
    for candidate in values:
        if isinstance(candidate, bool) or isinstance(value, bool):
            if candidate is value:
                return True
        elif candidate == value:
            return True
    return False


class BaseValidator(ABC):
    """
    Abstract base class for type validators.

    Subclasses implement _coerce() for their base type check and extend
    RULES with their own rule table. Rules not in the table are rejected
    with a RuleConfigurationError.
    """

    type_name = "any"

    def __init__(self):
        self._required = False
        self._forbidden = False
        self._allowed: List[Any] = []
        self._valid: List[Any] = []
        self._invalid: List[Any] = []
        self._checks: List[Tuple[str, Check]] = []

    # ------------------------------------------------------------------
    # Rule folding
    # ------------------------------------------------------------------

    def apply_rule(self, name: str, argument: Any = None) -> "BaseValidator":
        """
        Fold one named rule onto this validator.

        Raises:
            RuleConfigurationError: Unknown rule, wrong arity or argument type.
        """
        rule = self.RULES.get(name)
        if rule is None:
            raise RuleConfigurationError(
                f"unknown rule for type '{self.type_name}'", rule=name
            )

        if rule.arg_types is None:
            if argument is not None:
                raise RuleConfigurationError("takes no argument", rule=name)
            return rule.apply(self)

        if argument is None:
            if rule.optional_arg:
                return rule.apply(self, None)
            raise RuleConfigurationError("requires an argument", rule=name)

        if not _accepts(argument, rule.arg_types):
            expected = " or ".join(t.__name__ for t in rule.arg_types)
            raise RuleConfigurationError(
                f"expects {expected}, got {type(argument).__name__} {argument!r}",
                rule=name,
            )
        return rule.apply(self, argument)

    def _add_check(self, name: str, check: Check, multi: bool = False) -> "BaseValidator":
        # A repeated single-instance rule replaces the earlier one
        if not multi:
            self._checks = [(n, c) for n, c in self._checks if n != name]
        self._checks.append((name, check))
        return self

    def custom(self, predicate: Callable[[Any], Optional[str]], description: str = "custom") -> "BaseValidator":
        """
        Add a bespoke predicate. It returns an error message or None.
        Custom predicates accumulate instead of replacing each other.
        """
        def check(value, label):
            message = predicate(value)
            if message is not None:
                return Violation(CUSTOM_KIND, message)
            return None

        return self._add_check(description, check, multi=True)

    # ------------------------------------------------------------------
    # Shared rules
    # ------------------------------------------------------------------

    def required(self) -> "BaseValidator":
        self._required = True
        return self

    def optional(self) -> "BaseValidator":
        self._required = False
        return self

    def forbidden(self) -> "BaseValidator":
        self._forbidden = True
        return self

    def valid(self, value: Any) -> "BaseValidator":
        self._valid.append(value)
        return self

    def allow(self, value: Any = None) -> "BaseValidator":
        # Bare "allow" admits the empty string
        self._allowed.append("" if value is None else value)
        return self

    def invalid(self, value: Any) -> "BaseValidator":
        self._invalid.append(value)
        return self

    RULES: Dict[str, Rule] = {
        "required": Rule(required),
        "optional": Rule(optional),
        "forbidden": Rule(forbidden),
        "valid": Rule(valid, SCALAR_TYPES),
        "allow": Rule(allow, SCALAR_TYPES, optional_arg=True),
        "invalid": Rule(invalid, SCALAR_TYPES),
    }

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    @property
    def rule_names(self) -> List[str]:
        """Names of the folded checks, in evaluation order."""
        return [name for name, _ in self._checks]

    @abstractmethod
    def _coerce(self, value: Any, label: str) -> Tuple[Any, Optional[Violation]]:
        """
        Convert a present value to the base type.

        Returns:
            Tuple of (converted value, violation). If the value cannot be
            converted, violation describes the base type failure.
        """
        pass

    def validate(self, value: Any, label: str = "value") -> Optional[Violation]:
        """
        Validate a single value.

        Args:
            value: The value to check; None means absent.
            label: Display name used in messages.

        Returns:
            The first Violation, or None if the value is valid.
        """
        if value is None:
            if self._required:
                return Violation("any.required", f'"{label}" is required')
            return None

        if self._forbidden:
            return Violation("any.unknown", f'"{label}" is not allowed')

        if contains_value(self._allowed, value):
            return None

        value, violation = self._coerce(value, label)
        if violation is not None:
            return violation

        if contains_value(self._allowed, value):
            return None

        if self._valid:
            if contains_value(self._valid, value):
                return None
            if len(self._valid) == 1:
                message = f'"{label}" must be [{format_values(self._valid)}]'
            else:
                message = f'"{label}" must be one of [{format_values(self._valid)}]'
            return Violation("any.only", message)

        if contains_value(self._invalid, value):
            return Violation("any.invalid", f'"{label}" contains an invalid value')

        for name, check in self._checks:
            violation = check(value, label)
            if violation is not None:
                return violation

        return None
