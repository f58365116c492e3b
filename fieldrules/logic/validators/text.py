"""Text Validator"""

import re
import ipaddress
from typing import Any, Optional, Tuple
from urllib.parse import urlparse

from fieldrules.logic.errors import RuleConfigurationError
from fieldrules.logic.validators.base import BaseValidator, Rule, Violation, contains_value

EMAIL_PATTERN = re.compile(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$')
HOSTNAME_LABEL_PATTERN = re.compile(r'^(?!-)[A-Za-z0-9-]{1,63}(?<!-)$')
URI_SCHEME_PATTERN = re.compile(r'^[A-Za-z][A-Za-z0-9+.-]*$')
ALPHANUM_PATTERN = re.compile(r'^[a-zA-Z0-9]+$')
TOKEN_PATTERN = re.compile(r'^[a-zA-Z0-9_]+$')
HEX_PATTERN = re.compile(r'^[a-fA-F0-9]+$')


def _is_hostname(value: str) -> bool:
    try:
        ipaddress.ip_address(value)
        return True
    except ValueError:
        pass

    if len(value) > 255:
        return False
    labels = value[:-1].split(".") if value.endswith(".") else value.split(".")
    return all(HOSTNAME_LABEL_PATTERN.match(part) for part in labels)


def _is_uri(value: str) -> bool:
    if any(c.isspace() for c in value):
        return False
    parsed = urlparse(value)
    if not parsed.scheme or not URI_SCHEME_PATTERN.match(parsed.scheme):
        return False
    return bool(parsed.netloc or parsed.path)


def _check_limit(rule: str, limit: int) -> None:
    if limit < 0:
        raise RuleConfigurationError("limit must be a non-negative integer", rule=rule)


class StringValidator(BaseValidator):
    """Validates text values with length, pattern and format rules."""

    type_name = "string"

    def __init__(self):
        super().__init__()
        self._trim = False

    def _coerce(self, value: Any, label: str) -> Tuple[Any, Optional[Violation]]:
        if not isinstance(value, str):
            return value, Violation("string.base", f'"{label}" must be a string')

        if self._trim:
            value = value.strip()

        if value == "" and not contains_value(self._allowed, ""):
            return value, Violation("string.empty", f'"{label}" is not allowed to be empty')

        return value, None

    def min_length(self, limit: int) -> "StringValidator":
        _check_limit("min", limit)

        def check(value, label):
            if len(value) < limit:
                return Violation(
                    "string.min",
                    f'"{label}" length must be at least {limit} characters long',
                )
            return None

        return self._add_check("min", check)

    def max_length(self, limit: int) -> "StringValidator":
        _check_limit("max", limit)

        def check(value, label):
            if len(value) > limit:
                return Violation(
                    "string.max",
                    f'"{label}" length must be less than or equal to {limit} characters long',
                )
            return None

        return self._add_check("max", check)

    def exact_length(self, limit: int) -> "StringValidator":
        _check_limit("length", limit)

        def check(value, label):
            if len(value) != limit:
                return Violation(
                    "string.length",
                    f'"{label}" length must be {limit} characters long',
                )
            return None

        return self._add_check("length", check)

    def pattern(self, regex: Any) -> "StringValidator":
        # Bare pattern text is accepted as well as the /.../ literal form
        if isinstance(regex, str):
            try:
                regex = re.compile(regex)
            except re.error as e:
                raise RuleConfigurationError(f"bad regular expression: {e}", rule="regex")

        def check(value, label):
            if not regex.search(value):
                return Violation(
                    "string.pattern.base",
                    f'"{label}" with value "{value}" fails to match the required pattern: /{regex.pattern}/',
                )
            return None

        # regex and pattern are the same rule
        return self._add_check("pattern", check, multi=True)

    def _format_check(self, name: str, predicate, message: str) -> "StringValidator":
        def check(value, label):
            if not predicate(value):
                return Violation(f"string.{name}", f'"{label}" {message}')
            return None

        return self._add_check(name, check)

    def alphanum(self) -> "StringValidator":
        return self._format_check(
            "alphanum", ALPHANUM_PATTERN.match,
            "must only contain alpha-numeric characters",
        )

    def token(self) -> "StringValidator":
        return self._format_check(
            "token", TOKEN_PATTERN.match,
            "must only contain alpha-numeric and underscore characters",
        )

    def email(self) -> "StringValidator":
        return self._format_check("email", EMAIL_PATTERN.match, "must be a valid email")

    def uri(self) -> "StringValidator":
        return self._format_check("uri", _is_uri, "must be a valid uri")

    def hostname(self) -> "StringValidator":
        return self._format_check("hostname", _is_hostname, "must be a valid hostname")

    def hex(self) -> "StringValidator":
        return self._format_check(
            "hex", HEX_PATTERN.match,
            "must only contain hexadecimal characters",
        )

    def lowercase(self) -> "StringValidator":
        return self._format_check(
            "lowercase", lambda v: v == v.lower(),
            "must only contain lowercase characters",
        )

    def uppercase(self) -> "StringValidator":
        return self._format_check(
            "uppercase", lambda v: v == v.upper(),
            "must only contain uppercase characters",
        )

    def trim(self) -> "StringValidator":
        self._trim = True
        return self

    RULES = {
        **BaseValidator.RULES,
        "min": Rule(min_length, (int,)),
        "max": Rule(max_length, (int,)),
        "length": Rule(exact_length, (int,)),
        "regex": Rule(pattern, (re.Pattern, str)),
        "pattern": Rule(pattern, (re.Pattern, str)),
        "alphanum": Rule(alphanum),
        "token": Rule(token),
        "email": Rule(email),
        "uri": Rule(uri),
        "hostname": Rule(hostname),
        "hex": Rule(hex),
        "lowercase": Rule(lowercase),
        "uppercase": Rule(uppercase),
        "trim": Rule(trim),
    }
