"""Pytest configuration and fixtures."""

import json

import pytest


@pytest.fixture
def sample_package_json():
    """Sample package.json content for testing."""
    return """
{
  "name": "test-project",
  "description": "A project used in tests",
  "scripts": {
    "build": "tsc -p .",
    "test": "jest",
    "test:watch": "jest --watch",
    "lint": "eslint src"
  }
}
"""


@pytest.fixture
def write_manifest(tmp_path):
    """Write a package.json into tmp_path and return its path."""

    def _write(data, filename="package.json"):
        manifest = tmp_path / filename
        if isinstance(data, str):
            manifest.write_text(data)
        else:
            manifest.write_text(json.dumps(data))
        return manifest

    return _write


@pytest.fixture
def temp_manifest_file(write_manifest, sample_package_json):
    """Create a temporary package.json for testing."""
    return write_manifest(sample_package_json)
