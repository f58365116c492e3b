"""
Custom Predicates

Rules that are not part of any base type: custom_list, ipv4, ipv6 and ip.
They work on the stringified value, so they can be folded onto a validator
of any declared type. Each constructor takes (validator, raw_arg) and
returns the validator with the predicate attached.
"""

import ipaddress
from typing import Any, Callable, Dict, Optional, Tuple

from fieldrules.config.constants import (
    LIST_SEPARATOR,
    CUSTOM_LIST_MESSAGE,
    IPV4_MESSAGE,
    IPV6_MESSAGE,
    IP_MESSAGE,
)
from fieldrules.logic.errors import RuleConfigurationError
from fieldrules.logic.validators.base import BaseValidator


def find_invalid_parts(value: Any, allowed: Tuple[str, ...]) -> list:
    """Split a comma-separated value and return the parts not in allowed."""
    parts = str(value).split(LIST_SEPARATOR)
    return [part for part in parts if part not in allowed]


def is_ip_address(value: Any, version: Optional[int] = None) -> bool:
    """
    True if value is a plain IP address (no CIDR suffix).

    Args:
        value: Candidate, stringified before parsing
        version: 4 or 6 to restrict the family, None for either
    """
    try:
        address = ipaddress.ip_address(str(value))
    except ValueError:
        return False
    return version is None or address.version == version


def custom_list(validator: BaseValidator, raw_arg: Optional[str]) -> BaseValidator:
    if not raw_arg:
        raise RuleConfigurationError("requires a comma-separated list", rule="custom_list")

    allowed = tuple(raw_arg.split(LIST_SEPARATOR))

    def predicate(value):
        invalid = find_invalid_parts(value, allowed)
        if invalid:
            return CUSTOM_LIST_MESSAGE.format(
                invalid=", ".join(invalid), allowed=", ".join(allowed)
            )
        return None

    return validator.custom(predicate, "custom_list")


def _ip_rule(name: str, version: Optional[int], message: str) -> Callable:
    def constructor(validator: BaseValidator, raw_arg: Optional[str]) -> BaseValidator:
        if raw_arg is not None:
            raise RuleConfigurationError("takes no argument", rule=name)

        def predicate(value):
            return None if is_ip_address(value, version) else message

        return validator.custom(predicate, name)

    return constructor


# Closed table of rules handled outside the base validators
CUSTOM_RULES: Dict[str, Callable[[BaseValidator, Optional[str]], BaseValidator]] = {
    "custom_list": custom_list,
    "ipv4": _ip_rule("ipv4", 4, IPV4_MESSAGE),
    "ipv6": _ip_rule("ipv6", 6, IPV6_MESSAGE),
    "ip": _ip_rule("ip", None, IP_MESSAGE),
}
