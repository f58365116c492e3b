"""Tests for the type validators and custom predicates."""

import re
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from fieldrules.logic.errors import RuleConfigurationError
from fieldrules.logic import validators as validators_module
from fieldrules.logic.validators import (
    get_validator,
    create_validator,
    register_validator,
    CUSTOM_RULES,
)
from fieldrules.logic.validators.any_type import AnyValidator
from fieldrules.logic.validators.boolean import BooleanValidator
from fieldrules.logic.validators.number import NumberValidator
from fieldrules.logic.validators.text import StringValidator
from fieldrules.logic.validators.custom import find_invalid_parts, is_ip_address
from fieldrules.logic.validators.base import contains_value


class TestStringValidator:
    def setup_method(self):
        self.v = StringValidator()

    def test_absent_is_valid_unless_required(self):
        assert self.v.validate(None) is None
        self.v.apply_rule("required")
        violation = self.v.validate(None, label="Name")
        assert violation.kind == "any.required"
        assert violation.message == '"Name" is required'

    def test_non_string(self):
        assert self.v.validate(42).kind == "string.base"

    def test_empty_string(self):
        assert self.v.validate("").kind == "string.empty"

    def test_bare_allow_admits_empty(self):
        self.v.apply_rule("allow").apply_rule("min", 3)
        assert self.v.validate("") is None

    def test_min_and_max(self):
        self.v.apply_rule("min", 3).apply_rule("max", 5)
        violation = self.v.validate("ab", label="Name")
        assert violation.kind == "string.min"
        assert violation.message == '"Name" length must be at least 3 characters long'
        assert self.v.validate("abcdef").kind == "string.max"
        assert self.v.validate("abcd") is None

    def test_length(self):
        self.v.apply_rule("length", 2)
        assert self.v.validate("abc").kind == "string.length"
        assert self.v.validate("ab") is None

    def test_repeated_rule_replaces_earlier(self):
        self.v.apply_rule("min", 5).apply_rule("min", 2)
        assert self.v.validate("abc") is None
        assert self.v.rule_names == ["min"]

    def test_regex(self):
        self.v.apply_rule("regex", re.compile(r"^[a-z]+$"))
        violation = self.v.validate("abc123", label="User")
        assert violation.kind == "string.pattern.base"
        assert "/^[a-z]+$/" in violation.message
        assert self.v.validate("abc") is None

    def test_pattern_accepts_plain_text(self):
        self.v.apply_rule("pattern", "^x")
        assert self.v.validate("xy") is None
        assert self.v.validate("yx") is not None

    def test_formats(self):
        cases = [
            ("email", "a@example.com", "not-an-email"),
            ("alphanum", "abc123", "abc-123"),
            ("token", "abc_123", "abc-123"),
            ("hex", "deadBEEF", "xyz"),
            ("lowercase", "abc", "Abc"),
            ("uppercase", "ABC", "Abc"),
            ("uri", "https://example.com/path", "example.com"),
            ("hostname", "api.example.com", "-bad-.example"),
        ]
        for rule, good, bad in cases:
            v = StringValidator().apply_rule(rule)
            assert v.validate(good) is None, rule
            assert v.validate(bad).kind == f"string.{rule}", rule

    def test_hostname_accepts_ip(self):
        v = StringValidator().apply_rule("hostname")
        assert v.validate("192.168.0.1") is None

    def test_trim(self):
        self.v.apply_rule("trim").apply_rule("max", 3)
        assert self.v.validate("  abc  ") is None
        assert self.v.validate("   ").kind == "string.empty"

    def test_valid_set(self):
        self.v.apply_rule("valid", "a").apply_rule("valid", "b")
        assert self.v.validate("a") is None
        violation = self.v.validate("c", label="Mode")
        assert violation.kind == "any.only"
        assert violation.message == '"Mode" must be one of [a, b]'

    def test_invalid_set(self):
        self.v.apply_rule("invalid", "root")
        assert self.v.validate("root").kind == "any.invalid"

    def test_forbidden(self):
        self.v.apply_rule("forbidden")
        assert self.v.validate("x").kind == "any.unknown"
        assert self.v.validate(None) is None

    def test_unknown_rule(self):
        with pytest.raises(RuleConfigurationError):
            self.v.apply_rule("frobnicate")

    def test_number_rule_not_on_string(self):
        with pytest.raises(RuleConfigurationError):
            self.v.apply_rule("port")

    def test_missing_argument(self):
        with pytest.raises(RuleConfigurationError):
            self.v.apply_rule("max")

    def test_unexpected_argument(self):
        with pytest.raises(RuleConfigurationError):
            self.v.apply_rule("required", 3)

    def test_wrong_argument_type(self):
        with pytest.raises(RuleConfigurationError):
            self.v.apply_rule("max", "abc")
        with pytest.raises(RuleConfigurationError):
            self.v.apply_rule("max", True)

    def test_negative_limit(self):
        with pytest.raises(RuleConfigurationError):
            self.v.apply_rule("min", -1)


class TestNumberValidator:
    def setup_method(self):
        self.v = NumberValidator()

    def test_valid_number(self):
        assert self.v.validate(25) is None
        assert self.v.validate(2.5) is None

    def test_string_number(self):
        self.v.apply_rule("max", 100)
        assert self.v.validate("42") is None
        assert self.v.validate("420").kind == "number.max"

    def test_not_a_number(self):
        violation = self.v.validate("abc", label="Port")
        assert violation.kind == "number.base"
        assert violation.message == '"Port" must be a number'
        assert self.v.validate(True).kind == "number.base"
        assert self.v.validate(float("nan")).kind == "number.base"

    def test_infinity(self):
        assert self.v.validate(float("inf")).kind == "number.infinity"

    def test_bounds(self):
        self.v.apply_rule("min", 10).apply_rule("max", 120)
        violation = self.v.validate(5, label="Age")
        assert violation.kind == "number.min"
        assert violation.message == '"Age" must be greater than or equal to 10'
        assert self.v.validate(150).kind == "number.max"
        assert self.v.validate(25) is None

    def test_greater_and_less(self):
        self.v.apply_rule("greater", 0).apply_rule("less", 10)
        assert self.v.validate(0).kind == "number.greater"
        assert self.v.validate(10).kind == "number.less"
        assert self.v.validate(5) is None

    def test_integer(self):
        self.v.apply_rule("integer")
        assert self.v.validate(2.5).kind == "number.integer"
        assert self.v.validate(2.0) is None
        assert self.v.validate("3") is None

    def test_sign(self):
        assert NumberValidator().apply_rule("positive").validate(0).kind == "number.positive"
        assert NumberValidator().apply_rule("negative").validate(1).kind == "number.negative"

    def test_multiple(self):
        self.v.apply_rule("multiple", 5)
        assert self.v.validate(15) is None
        assert self.v.validate(7).kind == "number.multiple"

    def test_multiple_requires_positive_base(self):
        with pytest.raises(RuleConfigurationError):
            self.v.apply_rule("multiple", 0)

    def test_precision(self):
        self.v.apply_rule("precision", 2)
        assert self.v.validate(1.25) is None
        assert self.v.validate(1.255).kind == "number.precision"

    def test_port(self):
        self.v.apply_rule("port")
        assert self.v.validate(8080) is None
        assert self.v.validate(70000).kind == "number.port"
        assert self.v.validate(80.5).kind == "number.port"

    def test_valid_after_conversion(self):
        self.v.apply_rule("valid", 5)
        assert self.v.validate("5") is None


class TestBooleanValidator:
    def setup_method(self):
        self.v = BooleanValidator()

    def test_booleans(self):
        assert self.v.validate(True) is None
        assert self.v.validate(False) is None

    def test_boolean_strings(self):
        assert self.v.validate("true") is None
        assert self.v.validate("FALSE") is None

    def test_not_boolean(self):
        violation = self.v.validate("yes", label="Debug")
        assert violation.kind == "boolean.base"
        assert violation.message == '"Debug" must be a boolean'
        assert self.v.validate(1).kind == "boolean.base"

    def test_sensitive(self):
        self.v.apply_rule("sensitive")
        assert self.v.validate("true") is None
        assert self.v.validate("TRUE").kind == "boolean.base"

    def test_truthy_falsy(self):
        self.v.apply_rule("truthy", "yes").apply_rule("falsy", 0)
        assert self.v.validate("Yes") is None
        assert self.v.validate(0) is None

    def test_valid_true_only(self):
        self.v.apply_rule("valid", True)
        assert self.v.validate("true") is None
        assert self.v.validate(False).kind == "any.only"


class TestAnyValidator:
    def test_accepts_anything(self):
        v = AnyValidator()
        assert v.validate([1, 2]) is None
        assert v.validate(object()) is None

    def test_shared_rules(self):
        v = AnyValidator().apply_rule("required").apply_rule("valid", 1)
        assert v.validate(None).kind == "any.required"
        assert v.validate(2).kind == "any.only"
        assert v.validate(2).message == '"value" must be [1]'


class TestStrictMembership:
    def test_contains_value_keeps_bool_apart(self):
        assert contains_value([1], 1)
        assert contains_value([1], 1.0)
        assert not contains_value([1], True)
        assert not contains_value([0], False)
        assert not contains_value([True], 1)
        assert contains_value([True], True)

    def test_string_allow_does_not_admit_boolean(self):
        v = StringValidator().apply_rule("allow", 1)
        assert v.validate(True).kind == "string.base"
        assert v.validate(1) is None

    def test_any_valid_does_not_admit_boolean(self):
        v = AnyValidator().apply_rule("valid", 1)
        assert v.validate(True).kind == "any.only"
        assert v.validate(1) is None

    def test_any_invalid_does_not_reject_boolean(self):
        v = AnyValidator().apply_rule("invalid", 0)
        assert v.validate(False) is None
        assert v.validate(0).kind == "any.invalid"

    def test_number_allow_zero_keeps_boolean_out(self):
        v = NumberValidator().apply_rule("allow", 0)
        assert v.validate(False).kind == "number.base"


class TestCustomPredicates:
    def test_custom_list(self):
        v = CUSTOM_RULES["custom_list"](StringValidator(), "red,green,blue")
        assert v.validate("red,green") is None

        violation = v.validate("red,purple")
        assert violation.kind == "any.custom"
        assert violation.message == "Invalid Element(s): purple. Allowed: red, green, blue"

    def test_custom_list_numeric_elements_stay_strings(self):
        v = CUSTOM_RULES["custom_list"](NumberValidator(), "1,2,3")
        assert v.validate(2) is None
        assert v.validate("4") is not None

    def test_custom_list_requires_argument(self):
        with pytest.raises(RuleConfigurationError):
            CUSTOM_RULES["custom_list"](StringValidator(), None)

    def test_find_invalid_parts(self):
        assert find_invalid_parts("a,x,b,y", ("a", "b")) == ["x", "y"]

    def test_ipv4(self):
        v = CUSTOM_RULES["ipv4"](StringValidator(), None)
        assert v.validate("192.168.1.1") is None
        assert v.validate("192.168.1.1/24").message == "Invalid IPv4 address"
        assert v.validate("::1").message == "Invalid IPv4 address"

    def test_ipv6(self):
        v = CUSTOM_RULES["ipv6"](StringValidator(), None)
        assert v.validate("::1") is None
        assert v.validate("2001:db8::/32").message == "Invalid IPv6 address"
        assert v.validate("10.0.0.1").message == "Invalid IPv6 address"

    def test_ip(self):
        v = CUSTOM_RULES["ip"](StringValidator(), None)
        assert v.validate("::1") is None
        assert v.validate("10.0.0.1") is None
        assert v.validate("not-an-ip").message == "Invalid IP address"

    def test_ip_rules_take_no_argument(self):
        with pytest.raises(RuleConfigurationError):
            CUSTOM_RULES["ipv4"](StringValidator(), "strict")

    def test_is_ip_address(self):
        assert is_ip_address("127.0.0.1", 4)
        assert not is_ip_address("127.0.0.1", 6)
        assert not is_ip_address(None)

    def test_predicates_accumulate(self):
        v = StringValidator()
        CUSTOM_RULES["ip"](v, None)
        CUSTOM_RULES["ipv4"](v, None)
        assert v.rule_names == ["ip", "ipv4"]
        assert v.validate("::1").message == "Invalid IPv4 address"


class TestValidatorRegistry:
    def test_get_string(self):
        assert get_validator("string") is StringValidator

    def test_get_unknown(self):
        assert get_validator("nonexistent") is None

    def test_create_returns_fresh_instances(self):
        first = create_validator("string").apply_rule("min", 3)
        second = create_validator("string")
        assert first is not second
        assert second.rule_names == []

    def test_create_unknown(self):
        with pytest.raises(RuleConfigurationError):
            create_validator("nonexistent")

    def test_register(self, monkeypatch):
        class SlugValidator(StringValidator):
            type_name = "slug"

        monkeypatch.setitem(validators_module._VALIDATORS, "slug", StringValidator)
        register_validator("slug", SlugValidator)
        assert isinstance(create_validator("slug"), SlugValidator)
