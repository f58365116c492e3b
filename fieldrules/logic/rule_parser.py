"""
Rule String Parser

Turns a rule string such as ``required||max:255||regex:/^[a-z]+$/`` into an
ordered list of rule tokens. Arguments are kept raw on the token and coerced
on demand, so multi-value rules (custom_list) can read the raw text.
"""

import re
import logging
from typing import Any, List, NamedTuple, Optional

from fieldrules.config.constants import RULE_SEPARATOR, ARGUMENT_SEPARATOR
from fieldrules.logic.errors import RuleConfigurationError

logger = logging.getLogger(__name__)

RULE_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_]+$")
NUMBER_PATTERN = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")
LEADING_INTEGER_PATTERN = re.compile(r"^[+-]?\d+")
REGEX_LITERAL_PATTERN = re.compile(r"^/(.+)/$", re.DOTALL)
MAX_NUMBER_DIGITS = 100


class RuleToken(NamedTuple):
    """One ``name[:arg]`` segment of a rule string."""
    name: str
    raw_arg: Optional[str] = None

    @property
    def argument(self) -> Any:
        """The coerced argument, or None when the rule has none."""
        if self.raw_arg is None:
            return None
        return coerce_argument(self.raw_arg, rule=self.name)


def _parse_number(raw: str, rule: Optional[str] = None) -> Optional[int]:
    # Only the leading integer digits count: "2.9" -> 2, "1e3" -> 1
    if not NUMBER_PATTERN.match(raw):
        return None
    prefix = LEADING_INTEGER_PATTERN.match(raw)
    if not prefix:
        return None
    digits = prefix.group(0)
    if len(digits.lstrip("+-")) > MAX_NUMBER_DIGITS:
        raise RuleConfigurationError(f"number argument longer than {MAX_NUMBER_DIGITS} digits", rule=rule)
    return int(digits)


def _parse_boolean(raw: str) -> Optional[bool]:
    if raw == "true":
        return True
    if raw == "false":
        return False
    return None


def _parse_regex(raw: str, rule: Optional[str] = None) -> Optional[re.Pattern]:
    match = REGEX_LITERAL_PATTERN.match(raw)
    if not match:
        return None
    try:
        return re.compile(match.group(1))
    except re.error as e:
        raise RuleConfigurationError(f"bad regular expression {raw}: {e}", rule=rule)


def coerce_argument(raw: str, rule: Optional[str] = None) -> Any:
    """
    Coerce a raw rule argument by content.

    Checked in order, first match wins:
    number -> int of its leading digits, "true"/"false" -> bool, /body/ -> compiled pattern,
    anything else stays a string.
    """
    number = _parse_number(raw, rule)
    if number is not None:
        return number

    flag = _parse_boolean(raw)
    if flag is not None:
        return flag

    pattern = _parse_regex(raw, rule)
    if pattern is not None:
        return pattern

    return raw


def parse_rules(validation: Optional[str]) -> List[RuleToken]:
    """
    Split a rule string into ordered tokens.

    Args:
        validation: Rule string, e.g. ``required||min:3``. Empty or None
            yields no tokens.

    Returns:
        List of RuleToken in the order the rules appear.

    Raises:
        RuleConfigurationError: A segment has an empty or malformed rule name.
    """
    if not validation:
        return []

    tokens = []
    for segment in validation.split(RULE_SEPARATOR):
        name, sep, raw_arg = segment.partition(ARGUMENT_SEPARATOR)
        name = name.strip()

        if not RULE_NAME_PATTERN.match(name):
            raise RuleConfigurationError(
                f"malformed rule name in '{validation}'", rule=segment
            )

        # "max:" carries no argument
        tokens.append(RuleToken(name, raw_arg if sep and raw_arg else None))

    logger.debug(f"Parsed {len(tokens)} rule(s) from '{validation}'")
    return tokens
