"""Any Validator"""

from typing import Any, Optional, Tuple

from fieldrules.logic.validators.base import BaseValidator, Violation


class AnyValidator(BaseValidator):
    """Accepts any present value; only the shared rules apply."""

    type_name = "any"

    def _coerce(self, value: Any, label: str) -> Tuple[Any, Optional[Violation]]:
        return value, None
