"""
Field Registry - Loads field descriptors and compiles their rule strings.

Reads a JSON file of field descriptors, compiles every rule string as soon
as the field is loaded so a bad rule string fails at load time, and
validates values by field key with the precompiled validators.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from fieldrules.models import FieldDescriptor, ValidationOutcome
from fieldrules.logic.errors import RuleConfigurationError
from fieldrules.logic.evaluator import as_descriptor, build_validator, evaluate
from fieldrules.logic.validators import BaseValidator

logger = logging.getLogger(__name__)

# Required keys for each field entry
REQUIRED_FIELD_KEYS = {"key", "type"}


def _validate_fields_config(entries: List[Any]) -> List[str]:
    """Validate the raw field entries of a fields file. Returns list of errors."""
    errors = []

    keys = set()
    for i, entry in enumerate(entries):
        if not isinstance(entry, dict):
            errors.append(f"Field {i} is not an object")
            continue

        missing = REQUIRED_FIELD_KEYS - set(entry.keys())
        if missing:
            errors.append(f"Field {i} missing keys: {sorted(missing)}")

        key = entry.get("key", "")
        if key in keys:
            errors.append(f"Duplicate field key: '{key}'")
        keys.add(key)

    return errors


class FieldRegistry:
    """
    Loads and manages compiled field descriptors.

    Usage:
        registry = FieldRegistry("/path/to/fields.json")
        registry.load()
        outcome = registry.validate("hostname", "10.0.0.1")
    """

    def __init__(self, fields_file: str = None, strict: bool = None):
        if fields_file is None:
            from fieldrules.config.settings import FIELDS_FILE
            fields_file = FIELDS_FILE
        if strict is None:
            from fieldrules.config.settings import STRICT_FIELDS
            strict = STRICT_FIELDS

        self.fields_file = Path(fields_file)
        self.strict = strict
        self._fields: Dict[str, FieldDescriptor] = {}
        self._validators: Dict[str, Optional[BaseValidator]] = {}
        self.errors: Dict[str, str] = {}
        self.config_errors: List[str] = []

    def _reject(self, message: str, key: str = None):
        if self.strict:
            raise RuleConfigurationError(message)
        logger.error(message)
        if key is None:
            self.config_errors.append(message)
        else:
            self.errors[key] = message

    def load(self) -> List[str]:
        """
        Read the fields file and compile every field.

        Returns:
            List of loaded field keys

        Raises:
            RuleConfigurationError: In strict mode, on the first bad field.
        """
        self._fields.clear()
        self._validators.clear()
        self.errors.clear()
        self.config_errors.clear()

        if not self.fields_file.exists():
            logger.warning(f"Fields file not found: {self.fields_file}")
            return []

        try:
            with open(self.fields_file, "r") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise RuleConfigurationError(f"Invalid JSON in {self.fields_file}: {e}") from e

        entries = config.get("fields", []) if isinstance(config, dict) else config
        if not isinstance(entries, list):
            raise RuleConfigurationError(f"Expected a list of fields in {self.fields_file}")

        errors = _validate_fields_config(entries)
        if errors:
            self._reject(f"Invalid fields config at {self.fields_file}: {errors}")

        loaded = []
        for entry in entries:
            if not isinstance(entry, dict) or not REQUIRED_FIELD_KEYS <= set(entry.keys()):
                continue
            if entry["key"] in self._fields:
                continue

            try:
                self.register_field(entry)
            except RuleConfigurationError as e:
                self._reject(f"Field '{entry['key']}' in {self.fields_file}: {e}", key=entry["key"])
                continue
            loaded.append(entry["key"])

        logger.info(f"Loaded {len(loaded)} field(s) from {self.fields_file}: {loaded}")
        return loaded

    def register_field(self, field: Union[FieldDescriptor, Dict[str, Any]]) -> FieldDescriptor:
        """
        Compile and register a single field, replacing any field with the same key.

        Raises:
            RuleConfigurationError: The descriptor or its rule string is invalid.
        """
        descriptor = as_descriptor(field)

        validator = None
        if descriptor.validation:
            validator = build_validator(descriptor.validation, descriptor.type)

        self._fields[descriptor.key] = descriptor
        self._validators[descriptor.key] = validator
        logger.debug(f"Registered field '{descriptor.key}' ({descriptor.type}): {descriptor.validation!r}")
        return descriptor

    def unregister_field(self, key: str) -> bool:
        """Remove a field. Returns True if found and removed."""
        if key not in self._fields:
            return False

        del self._fields[key]
        del self._validators[key]
        logger.info(f"Unregistered field: {key}")
        return True

    def get_field(self, key: str) -> Optional[FieldDescriptor]:
        """Get a field descriptor by key."""
        return self._fields.get(key)

    def list_fields(self) -> List[Dict[str, Any]]:
        """List all fields as plain dicts."""
        return [field.model_dump() for field in self._fields.values()]

    def validate(self, key: str, value: Any) -> Optional[ValidationOutcome]:
        """
        Validate a value for a registered field.

        Raises:
            KeyError: No field with that key is registered.
        """
        field = self._fields.get(key)
        if field is None:
            raise KeyError(key)

        validator = self._validators[key]
        if validator is None:
            return None
        return evaluate(validator, value, field)

    @property
    def field_count(self) -> int:
        return len(self._fields)

    @property
    def field_keys(self) -> List[str]:
        return list(self._fields.keys())


# Global registry instance
_global_registry: Optional[FieldRegistry] = None


def get_registry(fields_file: str = None) -> FieldRegistry:
    """Get or create the global field registry."""
    global _global_registry
    if _global_registry is None:
        _global_registry = FieldRegistry(fields_file)
        _global_registry.load()
    return _global_registry
