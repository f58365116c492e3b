"""Number Validator"""

import re
import math
from decimal import Decimal
from typing import Any, Optional, Tuple

from fieldrules.config.constants import PORT_MIN, PORT_MAX
from fieldrules.logic.errors import RuleConfigurationError
from fieldrules.logic.validators.base import BaseValidator, Rule, Violation

INTEGER_PATTERN = re.compile(r'^[+-]?\d+$')
DECIMAL_PATTERN = re.compile(r'^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$')

NUMERIC = (int, float)


def _decimal_places(value) -> int:
    exponent = Decimal(str(value)).normalize().as_tuple().exponent
    return max(0, -exponent)


class NumberValidator(BaseValidator):
    """Validates numeric values. Numeric strings are converted first."""

    type_name = "number"

    def _coerce(self, value: Any, label: str) -> Tuple[Any, Optional[Violation]]:
        base_error = Violation("number.base", f'"{label}" must be a number')

        if isinstance(value, bool):
            return value, base_error

        if isinstance(value, str):
            text = value.strip()
            if INTEGER_PATTERN.match(text):
                value = int(text)
            elif DECIMAL_PATTERN.match(text):
                value = float(text)
            else:
                return value, base_error

        if not isinstance(value, NUMERIC):
            return value, base_error

        if isinstance(value, float):
            if math.isnan(value):
                return value, base_error
            if math.isinf(value):
                return value, Violation("number.infinity", f'"{label}" cannot be infinity')

        return value, None

    def _compare(self, name: str, limit, test, message: str) -> "NumberValidator":
        def check(value, label):
            if not test(value, limit):
                return Violation(f"number.{name}", f'"{label}" {message} {limit}')
            return None

        return self._add_check(name, check)

    def minimum(self, limit) -> "NumberValidator":
        return self._compare("min", limit, lambda v, n: v >= n, "must be greater than or equal to")

    def maximum(self, limit) -> "NumberValidator":
        return self._compare("max", limit, lambda v, n: v <= n, "must be less than or equal to")

    def greater(self, limit) -> "NumberValidator":
        return self._compare("greater", limit, lambda v, n: v > n, "must be greater than")

    def less(self, limit) -> "NumberValidator":
        return self._compare("less", limit, lambda v, n: v < n, "must be less than")

    def integer(self) -> "NumberValidator":
        def check(value, label):
            if isinstance(value, float) and not value.is_integer():
                return Violation("number.integer", f'"{label}" must be an integer')
            return None

        return self._add_check("integer", check)

    def positive(self) -> "NumberValidator":
        def check(value, label):
            if value <= 0:
                return Violation("number.positive", f'"{label}" must be a positive number')
            return None

        return self._add_check("positive", check)

    def negative(self) -> "NumberValidator":
        def check(value, label):
            if value >= 0:
                return Violation("number.negative", f'"{label}" must be a negative number')
            return None

        return self._add_check("negative", check)

    def multiple(self, base) -> "NumberValidator":
        if base <= 0:
            raise RuleConfigurationError("base must be a positive number", rule="multiple")

        def check(value, label):
            if Decimal(str(value)) % Decimal(str(base)) != 0:
                return Violation("number.multiple", f'"{label}" must be a multiple of {base}')
            return None

        return self._add_check("multiple", check)

    def precision(self, limit: int) -> "NumberValidator":
        if limit < 0:
            raise RuleConfigurationError("limit must be a non-negative integer", rule="precision")

        def check(value, label):
            if _decimal_places(value) > limit:
                return Violation(
                    "number.precision",
                    f'"{label}" must have no more than {limit} decimal places',
                )
            return None

        return self._add_check("precision", check)

    def port(self) -> "NumberValidator":
        def check(value, label):
            if isinstance(value, float) and not value.is_integer():
                return Violation("number.port", f'"{label}" must be a valid port')
            if not PORT_MIN <= value <= PORT_MAX:
                return Violation("number.port", f'"{label}" must be a valid port')
            return None

        return self._add_check("port", check)

    RULES = {
        **BaseValidator.RULES,
        "min": Rule(minimum, NUMERIC),
        "max": Rule(maximum, NUMERIC),
        "greater": Rule(greater, NUMERIC),
        "less": Rule(less, NUMERIC),
        "integer": Rule(integer),
        "positive": Rule(positive),
        "negative": Rule(negative),
        "multiple": Rule(multiple, NUMERIC),
        "precision": Rule(precision, (int,)),
        "port": Rule(port),
    }
