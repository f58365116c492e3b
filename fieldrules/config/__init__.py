"""Settings and constants.

The field registry lives in fieldrules.config.field_registry and is imported
from there directly.
"""

from fieldrules.config.settings import (
    PROJECT_ROOT,
    FIELDS_FILE,
    STRICT_FIELDS,
    LOG_LEVEL,
    VERBOSE,
)
from fieldrules.config.constants import (
    RULE_SEPARATOR,
    ARGUMENT_SEPARATOR,
    LIST_SEPARATOR,
    IPV4_MESSAGE,
    IPV6_MESSAGE,
    IP_MESSAGE,
    CUSTOM_KIND,
)

__all__ = [
    # Settings
    "PROJECT_ROOT",
    "FIELDS_FILE",
    "STRICT_FIELDS",
    "LOG_LEVEL",
    "VERBOSE",
    # Constants
    "RULE_SEPARATOR",
    "ARGUMENT_SEPARATOR",
    "LIST_SEPARATOR",
    "IPV4_MESSAGE",
    "IPV6_MESSAGE",
    "IP_MESSAGE",
    "CUSTOM_KIND",
]
