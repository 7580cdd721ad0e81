"""Pytest configuration and fixtures."""

import pytest
import tempfile
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def two_space_json():
    """Manifest indented with 2 spaces, LF endings and a final newline."""
    return (
        '{\n'
        '  "name": "magic-json",\n'
        '  "version": "1.1.5",\n'
        '  "keywords": [\n'
        '    "json",\n'
        '    "indentation"\n'
        '  ],\n'
        '  "repository": {\n'
        '    "type": "git",\n'
        '    "url": "https://example.com/magic-json"\n'
        '  }\n'
        '}\n'
    )


@pytest.fixture
def tab_crlf_json():
    """Document indented with tabs, CRLF endings and no final newline."""
    return (
        '[\r\n'
        '\t{\r\n'
        '\t\t"id": 1,\r\n'
        '\t\t"tags": [\r\n'
        '\t\t\t"a",\r\n'
        '\t\t\t"b"\r\n'
        '\t\t]\r\n'
        '\t},\r\n'
        '\t{\r\n'
        '\t\t"id": 2,\r\n'
        '\t\t"tags": []\r\n'
        '\t}\r\n'
        ']'
    )


@pytest.fixture
def json_file(temp_dir, two_space_json):
    """Write the two-space manifest to disk and return its path."""
    path = temp_dir / "package.json"
    path.write_bytes(two_space_json.encode("utf-8"))
    return path
