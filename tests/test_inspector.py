"""Tests for InspectorService against an in-memory registry."""

import pytest

from npminspect.core.inspector import InspectorService, kb, take_last
from npminspect.ecosystems.npm.registry import StaticRegistry
from npminspect.utils.exceptions import UsageError


class TestHelpers:

    def test_kb(self):
        assert kb("2048") == "2.00"
        assert kb("220092") == "214.93"

    def test_kb_not_numeric(self):
        assert kb("") == ""
        assert kb("n/a") == ""
        assert kb("inf") == ""

    def test_take_last(self):
        assert take_last(["1", "2", "3"], 2) == ["2", "3"]
        assert take_last(["1"], 5) == ["1"]

    def test_take_last_rejects_non_positive(self):
        with pytest.raises(UsageError):
            take_last(["1"], 0)


class TestInspectorService:

    @pytest.fixture(autouse=True)
    def setup_service(self, registry):
        self.registry = registry
        self.service = InspectorService(registry)

    def test_package_info(self):
        data = self.service.package_info("express")
        assert data == {
            "name": "express",
            "version": "4.19.2",
            "license": "MIT",
            "description": "Fast, unopinionated, minimalist web framework",
            "repository": "git+https://github.com/expressjs/express.git",
            "homepage": "http://expressjs.com/",
            "unpackedSizeKB": "214.93",
        }

    def test_package_info_requires_name(self):
        with pytest.raises(UsageError) as exc_info:
            self.service.package_info(None)
        assert exc_info.value.usage == "Usage: info <package>"

    def test_unknown_package_is_blank(self):
        data = self.service.package_info("does-not-exist")
        assert data["version"] == ""
        assert data["unpackedSizeKB"] == ""

    def test_recent_versions(self):
        assert self.service.recent_versions("express", 3) == ["4.19.0", "4.19.1", "4.19.2"]

    def test_recent_versions_unparseable(self):
        registry = StaticRegistry({("odd", "versions"): "1.0.0"})
        assert InspectorService(registry).recent_versions("odd", 5) == []

    def test_dependencies(self):
        assert self.service.dependencies("express", 2) == [
            {"name": "accepts", "range": "~1.3.8"},
            {"name": "body-parser", "range": "1.20.2"},
        ]

    def test_dependencies_none(self):
        assert self.service.dependencies("does-not-exist") == []

    def test_dependencies_rejects_non_positive_max(self):
        with pytest.raises(UsageError):
            self.service.dependencies("express", 0)

    def test_compare(self):
        comparison = self.service.compare("express", "axios")
        assert comparison["a"] == {
            "name": "express",
            "version": "4.19.2",
            "license": "MIT",
            "depsCount": 3,
            "sizeKB": "214.93",
        }
        assert comparison["b"]["depsCount"] == 3
        assert comparison["b"]["sizeKB"] == "2.00"

    def test_compare_requires_two(self):
        with pytest.raises(UsageError) as exc_info:
            self.service.compare("express", None)
        assert exc_info.value.usage == "Usage: compare <pkgA> <pkgB>"

    def test_compare_rows(self):
        rows = self.service.compare_rows(self.service.compare("express", "axios"))
        assert [row["field"] for row in rows] == ["version", "license", "depsCount", "size(KB)"]
        assert rows[0] == {"field": "version", "express": "4.19.2", "axios": "1.7.2"}

    def test_package_report(self):
        report = self.service.package_report("express", versions=2)
        assert report["versions"] == ["4.19.1", "4.19.2"]
        assert report["dependencies"] == ["accepts", "body-parser", "debug"]
        assert report["details"]["Author"] == "TJ Holowaychuk"
        # empty fields are left out
        assert "Main File" not in report["details"]

    def test_one_query_per_field(self):
        self.service.package_info("express")
        fields = [field for _, field in self.registry.calls]
        assert len(fields) == len(set(fields))
