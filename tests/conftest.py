"""Test fixtures for the rule compiler."""

import sys
import json
import pytest
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent.resolve()
sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def project_root():
    return PROJECT_ROOT


@pytest.fixture
def sample_fields_config():
    """A minimal valid fields configuration."""
    return {
        "fields": [
            {
                "key": "name",
                "type": "string",
                "label": "Name",
                "validation": "required||max:255||min:3",
            },
            {
                "key": "server_ip",
                "type": "string",
                "label": "Server IP",
                "validation": "required||ipv4",
            },
            {
                "key": "notes",
                "type": "string",
                "label": "Notes",
                "validation": "",
            },
        ],
    }


@pytest.fixture
def write_fields(tmp_path):
    """Write a fields config to a temporary JSON file and return its path."""
    def _write(config, name="fields.json"):
        path = tmp_path / name
        path.write_text(json.dumps(config))
        return path

    return _write
