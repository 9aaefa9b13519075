"""Shared fixtures for the npminspect test-suite."""

import json
import logging
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from npminspect.ecosystems.npm.registry import StaticRegistry


EXPRESS_RESPONSES = {
    ("express", "version"): "4.19.2",
    ("express", "license"): "MIT",
    ("express", "description"): "Fast, unopinionated, minimalist web framework",
    ("express", "repository.url"): "git+https://github.com/expressjs/express.git",
    ("express", "homepage"): "http://expressjs.com/",
    ("express", "dist.unpackedSize"): "220092",
    ("express", "author.name"): "TJ Holowaychuk",
    ("express", "main"): "",
    ("express", "keywords"): "[ 'express', 'framework', 'web' ]",
    ("express", "versions"): "[ '4.17.3', '4.18.0', '4.18.1', '4.18.2', '4.19.0', '4.19.1', '4.19.2' ]",
    ("express", "dependencies"): "{\n  accepts: '~1.3.8',\n  'body-parser': '1.20.2',\n  debug: '2.6.9' }",
}

AXIOS_RESPONSES = {
    ("axios", "version"): "1.7.2",
    ("axios", "license"): "MIT",
    ("axios", "dist.unpackedSize"): "2048",
    ("axios", "versions"): "[ '1.7.0', '1.7.1', '1.7.2' ]",
    ("axios", "dependencies"): "{ 'follow-redirects': '^1.15.6', 'form-data': '^4.0.0', 'proxy-from-env': '^1.1.0' }",
}


@pytest.fixture
def registry():
    """Registry fake answering for express and axios."""
    return StaticRegistry({**EXPRESS_RESPONSES, **AXIOS_RESPONSES})


@pytest.fixture
def write_manifest(tmp_path):
    """Write a package.json into tmp_path and return its path."""

    def _write(data, name="package.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def restore_logging():
    """CLI commands reconfigure the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
