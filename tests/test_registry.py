"""Tests for the `npm view` registry adapter."""

import logging
import subprocess
import sys
from unittest.mock import MagicMock, patch

import pytest

from npminspect.ecosystems.npm.registry import NpmViewClient, StaticRegistry, query_registry


class TestNpmViewClient:
    """NpmViewClient runs npm without a shell and never raises."""

    def setup_method(self):
        self.client = NpmViewClient(executable="npm")

    def test_build_command_with_field(self):
        assert self.client.build_command("express", "version") == ["npm", "view", "express", "version"]

    def test_build_command_without_field(self):
        assert self.client.build_command("express") == ["npm", "view", "express"]

    @patch("npminspect.ecosystems.npm.registry.subprocess.run")
    def test_query_strips_stdout(self, mock_run):
        mock_run.return_value = MagicMock(stdout="4.19.2\n", returncode=0)

        assert self.client.query("express", "version") == "4.19.2"
        args, kwargs = mock_run.call_args
        assert args[0] == ["npm", "view", "express", "version"]
        assert kwargs["check"] is True
        assert kwargs["capture_output"] is True
        assert kwargs["timeout"] is None

    @patch("npminspect.ecosystems.npm.registry.subprocess.run")
    def test_timeout_is_forwarded(self, mock_run):
        mock_run.return_value = MagicMock(stdout="x")
        NpmViewClient(timeout=5).query("express", "version")
        assert mock_run.call_args.kwargs["timeout"] == 5

    @patch("npminspect.ecosystems.npm.registry.subprocess.run")
    def test_non_zero_exit_returns_empty(self, mock_run):
        mock_run.side_effect = subprocess.CalledProcessError(
            1, ["npm", "view", "nope-404", "version"], stderr="npm ERR! code E404\n"
        )
        assert self.client.query("nope-404", "version") == ""

    @patch("npminspect.ecosystems.npm.registry.subprocess.run")
    def test_missing_executable_returns_empty(self, mock_run, caplog):
        mock_run.side_effect = FileNotFoundError(2, "No such file or directory", "npm")

        with caplog.at_level(logging.WARNING):
            assert self.client.query("express", "version") == ""

        assert "executable not found" in caplog.text
        assert "[express version]" in caplog.text

    @patch("npminspect.ecosystems.npm.registry.subprocess.run")
    def test_timeout_returns_empty(self, mock_run, caplog):
        mock_run.side_effect = subprocess.TimeoutExpired(["npm", "view", "express"], 3)

        with caplog.at_level(logging.WARNING):
            assert self.client.query("express") == ""

        assert "timeout after 3s" in caplog.text

    @patch("npminspect.ecosystems.npm.registry.subprocess.run")
    def test_os_error_returns_empty(self, mock_run):
        mock_run.side_effect = PermissionError(13, "Permission denied")
        assert self.client.query("express", "version") == ""

    @patch("npminspect.ecosystems.npm.registry.subprocess.run")
    def test_output_is_decoded_as_utf8(self, mock_run):
        mock_run.return_value = MagicMock(stdout="Á\n")
        assert self.client.query("express", "description") == "Á"
        assert mock_run.call_args.kwargs["encoding"] == "utf-8"
        assert mock_run.call_args.kwargs["errors"] == "replace"

    @pytest.mark.skipif(sys.platform == "win32", reason="needs a POSIX shell script")
    def test_undecodable_output_does_not_raise(self, tmp_path):
        fake_npm = tmp_path / "npm"
        fake_npm.write_text("#!/bin/sh\nprintf '\\377\\376 bad\\n'\n")
        fake_npm.chmod(0o755)

        result = NpmViewClient(executable=str(fake_npm)).query("express", "description")
        assert result.endswith("bad")
        assert "\ufffd" in result


class TestStaticRegistry:
    """The in-memory fake behaves like a failing npm for unknown lookups."""

    def test_known_and_unknown(self):
        registry = StaticRegistry({("a", "version"): "1.0.0"})
        assert registry.query("a", "version") == "1.0.0"
        assert registry.query("a", "license") == ""
        assert registry.calls == [("a", "version"), ("a", "license")]

    def test_query_registry_uses_given_client(self):
        registry = StaticRegistry({("a", None): "raw"})
        assert query_registry("a", client=registry) == "raw"
