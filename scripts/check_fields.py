#!/usr/bin/env python3
"""
Field Rules Check Utility

Compiles every rule string in a fields file and optionally validates
sample values against it.

Usage:
    python scripts/check_fields.py fields.json --value hostname=10.0.0.1
"""

import sys
import os
import argparse
import logging

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from fieldrules.config.settings import FIELDS_FILE, LOG_LEVEL, VERBOSE
from fieldrules.config.field_registry import FieldRegistry
from fieldrules.logic.errors import RuleConfigurationError

logging.basicConfig(
    level=logging.DEBUG if VERBOSE else LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def parse_value_pair(pair: str):
    """Split a KEY=VALUE argument."""
    key, sep, value = pair.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got '{pair}'")
    return key, value


def check_fields(registry: FieldRegistry) -> bool:
    """Print the compile status of every field. Returns True if all compiled."""
    print(f"\n=== Fields: {registry.fields_file} ===\n")

    for key in registry.field_keys:
        field = registry.get_field(key)
        print(f"  [OK] {key} ({field.type}): {field.validation or '-'}")

    for key, error in registry.errors.items():
        print(f"  [!!] {key}: {error}")

    for error in registry.config_errors:
        print(f"  [!!] {error}")

    total = registry.field_count + len(registry.errors)
    print(f"\n  {registry.field_count}/{total} fields compiled\n")
    return not registry.errors and not registry.config_errors


def check_values(registry: FieldRegistry, pairs) -> bool:
    """Validate KEY=VALUE pairs. Returns True if every value is valid."""
    ok = True
    for key, value in pairs:
        try:
            outcome = registry.validate(key, value)
        except KeyError:
            print(f"  [--] {key}: unknown field")
            ok = False
            continue

        if outcome is None:
            print(f"  [OK] {key}={value!r}")
        else:
            print(f"  [!!] {key}={value!r}: {outcome.message} ({outcome.kind})")
            ok = False
    return ok


def main(argv=None):
    parser = argparse.ArgumentParser(description="Compile and check field rule strings")
    parser.add_argument("fields_file", nargs="?", default=FIELDS_FILE, help="Path to fields JSON")
    parser.add_argument(
        "--value",
        action="append",
        default=[],
        type=parse_value_pair,
        metavar="KEY=VALUE",
        help="Validate a value for a field (repeatable)",
    )
    args = parser.parse_args(argv)

    registry = FieldRegistry(args.fields_file, strict=False)
    try:
        registry.load()
    except RuleConfigurationError as e:
        print(f"  [!!] {e}")
        return 1

    compiled = check_fields(registry)
    valid = check_values(registry, args.value) if args.value else True

    return 0 if compiled and valid else 1


if __name__ == "__main__":
    sys.exit(main())
