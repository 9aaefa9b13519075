"""
Registry inspector service for npminspect.

Collects package metadata through a ``RegistryQuery`` and shapes it into plain
dictionaries the CLI layer renders as tables or JSON documents.
"""
import logging
import math
from typing import Dict, List, Optional

from npminspect.ecosystems.npm.quasi_json import parse_dependencies, parse_versions
from npminspect.ecosystems.npm.registry import RegistryQuery
from npminspect.utils.exceptions import UsageError

logger = logging.getLogger(__name__)


def kb(value: str) -> str:
    """Format a byte count as kilobytes with two decimals, or ``""``."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return ""
    if not math.isfinite(number):
        return ""
    return f"{number / 1024:.2f}"


def take_last(items: List[str], limit: int) -> List[str]:
    """Return the last ``limit`` items; ``limit`` must be positive."""
    if limit <= 0:
        raise UsageError(f"--limit must be a positive number, got {limit}")
    return items[-limit:]


class InspectorService:
    """Registry lookups behind the info/versions/deps/compare/check commands."""

    def __init__(self, registry: RegistryQuery):
        self.registry = registry

    def view(self, package: str, field: Optional[str] = None) -> str:
        return self.registry.query(package, field)

    def package_info(self, package: str) -> Dict[str, str]:
        """Key fields of a package's latest release."""
        if not package:
            raise UsageError("Missing package name", usage="Usage: info <package>")

        return {
            "name": package,
            "version": self.view(package, "version"),
            "license": self.view(package, "license"),
            "description": self.view(package, "description"),
            "repository": self.view(package, "repository.url"),
            "homepage": self.view(package, "homepage"),
            "unpackedSizeKB": kb(self.view(package, "dist.unpackedSize")),
        }

    def all_versions(self, package: str) -> List[str]:
        return parse_versions(self.view(package, "versions"))

    def recent_versions(self, package: str, limit: int = 5) -> List[str]:
        """The newest ``limit`` published versions, oldest first."""
        if not package:
            raise UsageError("Missing package name", usage="Usage: versions <package> [--limit=N]")
        return take_last(self.all_versions(package), limit)

    def dependency_map(self, package: str) -> Dict[str, str]:
        return parse_dependencies(self.view(package, "dependencies"))

    def dependencies(self, package: str, max_deps: int = 10) -> List[Dict[str, str]]:
        """The first ``max_deps`` runtime dependencies as name/range rows."""
        if not package:
            raise UsageError("Missing package name", usage="Usage: deps <package> [--max=N]")
        if max_deps <= 0:
            raise UsageError(f"--max must be a positive number, got {max_deps}")

        entries = list(self.dependency_map(package).items())[:max_deps]
        return [{"name": name, "range": version_range} for name, version_range in entries]

    def summary(self, package: str) -> Dict[str, object]:
        return {
            "version": self.view(package, "version"),
            "license": self.view(package, "license"),
            "depsCount": len(self.dependency_map(package)),
            "sizeKB": kb(self.view(package, "dist.unpackedSize")),
        }

    def compare(self, first: str, second: str) -> Dict[str, Dict[str, object]]:
        """Side-by-side summary of two packages."""
        if not first or not second:
            raise UsageError("Two package names are required", usage="Usage: compare <pkgA> <pkgB>")

        return {
            "a": {"name": first, **self.summary(first)},
            "b": {"name": second, **self.summary(second)},
        }

    def compare_rows(self, comparison: Dict[str, Dict[str, object]]) -> List[Dict[str, object]]:
        """Pivot a comparison into one row per field."""
        first, second = comparison["a"], comparison["b"]
        labels = [("version", "version"), ("license", "license"), ("depsCount", "depsCount"), ("sizeKB", "size(KB)")]
        rows = []
        for key, label in labels:
            rows.append({"field": label, first["name"]: first[key], second["name"]: second[key]})
        return rows

    def package_report(self, package: str, versions: int = 3) -> Dict[str, object]:
        """Everything the batch checker shows for one package."""
        if not package:
            raise UsageError("Missing package name", usage="Usage: check [package ...]")

        details = {
            "Latest Version": self.view(package, "version"),
            "Description": self.view(package, "description"),
            "License": self.view(package, "license"),
            "Author": self.view(package, "author.name"),
            "Homepage": self.view(package, "homepage"),
            "Repository": self.view(package, "repository.url"),
            "Main File": self.view(package, "main"),
            "Keywords": self.view(package, "keywords"),
        }
        dependency_names = list(self.dependency_map(package))
        logger.debug("Collected report for %s (%d dependencies)", package, len(dependency_names))

        return {
            "name": package,
            "details": {label: value for label, value in details.items() if value},
            "versions": take_last(self.all_versions(package), versions),
            "unpackedSizeKB": kb(self.view(package, "dist.unpackedSize")),
            "dependencies": dependency_names,
        }
