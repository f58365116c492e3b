"""Configuration errors raised while compiling rule strings."""

from typing import Optional


class RuleConfigurationError(ValueError):
    """
    A rule string (or the field descriptor carrying it) cannot be compiled.

    Raised at build/load time, never for a value that merely fails a rule.
    """

    def __init__(self, reason: str, rule: Optional[str] = None):
        self.rule = rule
        self.reason = reason
        if rule:
            super().__init__(f"Invalid rule '{rule}': {reason}")
        else:
            super().__init__(reason)
