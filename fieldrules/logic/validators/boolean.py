"""Boolean Validator"""

from typing import Any, List, Optional, Tuple

from fieldrules.logic.validators.base import BaseValidator, Rule, Violation


class BooleanValidator(BaseValidator):
    """
    Validates boolean values.

    Accepts real booleans and the strings "true"/"false" (case-insensitive
    unless the sensitive rule is set). truthy/falsy add extra accepted values.
    """

    type_name = "boolean"

    def __init__(self):
        super().__init__()
        self._truthy: List[Any] = [True, "true"]
        self._falsy: List[Any] = [False, "false"]
        self._sensitive = False

    def _matches(self, value: Any, candidates: List[Any]) -> bool:
        for candidate in candidates:
            if isinstance(candidate, bool) or isinstance(value, bool):
                if value is candidate:
                    return True
            elif isinstance(value, str) and isinstance(candidate, str) and not self._sensitive:
                if value.lower() == candidate.lower():
                    return True
            elif value == candidate:
                return True
        return False

    def _coerce(self, value: Any, label: str) -> Tuple[Any, Optional[Violation]]:
        if self._matches(value, self._truthy):
            return True, None
        if self._matches(value, self._falsy):
            return False, None
        return value, Violation("boolean.base", f'"{label}" must be a boolean')

    def truthy(self, value: Any) -> "BooleanValidator":
        self._truthy.append(value)
        return self

    def falsy(self, value: Any) -> "BooleanValidator":
        self._falsy.append(value)
        return self

    def sensitive(self) -> "BooleanValidator":
        self._sensitive = True
        return self

    RULES = {
        **BaseValidator.RULES,
        "truthy": Rule(truthy, (str, int)),
        "falsy": Rule(falsy, (str, int)),
        "sensitive": Rule(sensitive),
    }
