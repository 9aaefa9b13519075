"""Tests for package-lock.json summaries."""

import json

import pytest

from npminspect.core.lock_checker import check_project, locked_version, summarise_lockfile
from npminspect.utils.exceptions import ManifestNotFoundError, ManifestParseError

LOCK = {
    "name": "demo",
    "lockfileVersion": 3,
    "packages": {
        "": {"name": "demo", "dependencies": {"chalk": "^5.3.0"}},
        "node_modules/chalk": {"version": "5.3.0"},
        "node_modules/minimist": {"version": "1.2.8"},
    },
}


class TestSummariseLockfile:

    def test_summary(self):
        summary = summarise_lockfile(LOCK, "chalk")
        assert summary.lockfile_version == 3
        assert summary.total_packages == 2
        assert summary.tracked_version == "5.3.0"

    def test_other_tracked_package(self):
        assert summarise_lockfile(LOCK, "minimist").tracked_version == "1.2.8"

    def test_missing_fields(self):
        summary = summarise_lockfile({}, "chalk")
        assert summary.lockfile_version == "N/A"
        assert summary.total_packages == "Unknown"
        assert summary.tracked_version == "N/A"

    def test_locked_version_absent(self):
        assert locked_version(LOCK, "left-pad") is None

    def test_to_dict(self):
        assert summarise_lockfile(LOCK).to_dict() == {
            "lockfile_version": 3,
            "total_packages": 2,
            "tracked_package": "chalk",
            "tracked_version": "5.3.0",
        }


class TestCheckProject:

    def test_both_present(self, tmp_path, write_manifest):
        manifest = write_manifest({"name": "demo", "version": "1.0.0"})
        lock = tmp_path / "package-lock.json"
        lock.write_text(json.dumps(LOCK), encoding="utf-8")

        assert check_project(manifest, lock).total_packages == 2

    def test_missing_manifest(self, tmp_path):
        with pytest.raises(ManifestNotFoundError):
            check_project(tmp_path / "package.json", tmp_path / "package-lock.json")

    def test_invalid_manifest(self, tmp_path):
        manifest = tmp_path / "package.json"
        manifest.write_text("{", encoding="utf-8")
        with pytest.raises(ManifestParseError):
            check_project(manifest, tmp_path / "package-lock.json")

    def test_missing_lockfile(self, tmp_path, write_manifest):
        manifest = write_manifest({"name": "demo", "version": "1.0.0"})
        with pytest.raises(ManifestNotFoundError) as exc_info:
            check_project(manifest, tmp_path / "package-lock.json")
        assert exc_info.value.kind == "package-lock.json"
        assert "npm install" in str(exc_info.value)
