"""
Global settings loaded from environment variables.

All settings have sensible defaults so the package works out of the box.
Override via environment variables.
"""

import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================
PROJECT_ROOT = Path(__file__).parent.parent.parent.resolve()
FIELDS_FILE = os.getenv("FIELDS_FILE", str(PROJECT_ROOT / "fields.json"))

# =============================================================================
# Field Registry
# =============================================================================
# Strict loading raises on the first bad field instead of skipping it
STRICT_FIELDS = os.getenv("STRICT_FIELDS", "true").lower() in ("true", "1", "yes")

# =============================================================================
# Logging
# =============================================================================
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
VERBOSE = os.getenv("VERBOSE", "false").lower() in ("true", "1", "yes")
