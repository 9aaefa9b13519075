"""
Manifest inspection and guardrails for ``package.json``.

Provides the overview, validation, entry-point and version-bump operations.
All checks work on the decoded manifest dictionary; only ``bump_manifest``
touches the file system.
"""
import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Union

from npminspect.ecosystems.npm.reader import load_manifest, save_manifest
from npminspect.utils.exceptions import ManifestValidationError, UsageError

logger = logging.getLogger(__name__)

SEMVER_PATTERN = re.compile(r"\d+\.\d+\.\d+")
BUMP_KINDS = ("patch", "minor", "major")


class FindingLevel(Enum):
    OK = "ok"
    WARN = "warn"


@dataclass
class Finding:
    level: FindingLevel
    message: str


@dataclass
class ValidationReport:
    findings: List[Finding] = field(default_factory=list)

    def ok(self, message: str) -> None:
        self.findings.append(Finding(FindingLevel.OK, message))

    def warn(self, message: str) -> None:
        self.findings.append(Finding(FindingLevel.WARN, message))

    def fail(self, message: str) -> None:
        raise ManifestValidationError(message, findings=self.findings)

    @property
    def warnings(self) -> List[Finding]:
        return [f for f in self.findings if f.level is FindingLevel.WARN]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "findings": [{"level": f.level.value, "message": f.message} for f in self.findings],
            "warnings": len(self.warnings),
        }


def is_present(value: Any) -> bool:
    """Truthiness as package.json authors expect it: ``{}`` and ``[]`` count as set."""
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, (int, float)):
        return value != 0
    return True


def is_valid_name(name: Any) -> bool:
    """Simplified npm naming rules."""
    return (
        isinstance(name, str)
        and len(name) > 0
        and name == name.lower()
        and not re.search(r"\s", name)
        and not re.match(r"[._]", name)
    )


def is_semver(version: Any) -> bool:
    """``X.Y.Z`` only; pre-release and build suffixes are rejected."""
    return isinstance(version, str) and SEMVER_PATTERN.fullmatch(version) is not None


def module_type(pkg: Dict[str, Any]) -> str:
    return pkg.get("type") or "commonjs"


def engines_node(pkg: Dict[str, Any]) -> Any:
    engines = pkg.get("engines")
    if isinstance(engines, dict) and is_present(engines.get("node")):
        return engines["node"]
    return None


class ManifestService:
    """Operations behind the overview/validate/entries/bump commands."""

    def overview(self, pkg: Dict[str, Any]) -> Dict[str, str]:
        """Quick overview of the fields that matter when publishing."""
        node_range = engines_node(pkg)
        private = pkg.get("private", False)
        return {
            "Name": str(pkg.get("name", "(unnamed)")),
            "Version": str(pkg.get("version") or "(none)"),
            "Type": module_type(pkg),
            "Private": str(private).lower() if isinstance(private, bool) else str(private),
            "Engines": f"node {node_range}" if node_range else "(not set)",
            "Exports Map": "present" if is_present(pkg.get("exports")) else "-",
            "Main Entry": str(pkg["main"]) if pkg.get("main") is not None else "(not set)",
        }

    def validate(self, pkg: Dict[str, Any]) -> ValidationReport:
        """Run the guardrail checks in order.

        Raises:
            ManifestValidationError: on the first fatal check, carrying the
                findings gathered before it.
        """
        report = ValidationReport()

        name = pkg.get("name")
        if not is_present(name):
            report.fail('Missing "name"')
        if not is_valid_name(name):
            report.fail(f'Invalid "name": "{name}" (lowercase, no spaces, no leading . or _)')

        version = pkg.get("version")
        if not is_present(version):
            report.fail('Missing "version"')
        if not is_semver(version):
            report.fail(f'Invalid "version" (must be X.Y.Z): "{version}"')

        if pkg.get("private") is not True:
            report.warn('"private" is not true. For applications, set "private": true to avoid accidental publish.')
        else:
            report.ok('"private" is true')

        node_range = engines_node(pkg)
        if node_range is None:
            report.warn('Missing "engines.node". Example: ">=18"')
        else:
            report.ok(f'engines.node set to "{node_range}"')

        report.ok(f'type: "{module_type(pkg)}"')

        exports = pkg.get("exports")
        if is_present(exports):
            if not isinstance(exports, (dict, list)):
                report.fail('"exports" must be an object mapping subpaths to entrypoints')
            report.ok('"exports" exists (modern resolution)')
            dot = exports.get(".") if isinstance(exports, dict) else None
            if not isinstance(dot, dict):
                report.warn('Missing exports["."]; add { "import": "...", "require": "..." }')
            elif not is_present(dot.get("import")) and not is_present(dot.get("require")):
                report.warn('Provide at least one of "import" or "require" under exports["."]')
        else:
            report.warn('No "exports" found. Fine for apps; recommended for libraries.')

        if "sideEffects" not in pkg:
            report.warn('Consider "sideEffects": false for libraries to enable tree-shaking.')

        report.ok("Basic validation passed.")
        return report

    def entries(self, pkg: Dict[str, Any]) -> Dict[str, str]:
        """How Node and bundlers will resolve the package entry point."""
        has_exports = is_present(pkg.get("exports"))
        if has_exports:
            interpretation = 'Node prefers "exports" over "main" for subpath imports.'
        elif is_present(pkg.get("main")):
            interpretation = 'Without "exports", Node/bundlers use "main".'
        else:
            interpretation = 'No "exports" or "main": resolver may fall back to index.js by convention.'

        return {
            "type": module_type(pkg),
            "main": str(pkg["main"]) if pkg.get("main") is not None else "(not set)",
            "exports": "present" if has_exports else "(not set)",
            "interpretation": interpretation,
        }


def bump_version(version: Any, kind: str) -> str:
    """Return ``version`` bumped by ``kind`` (patch, minor or major)."""
    if not is_semver(version):
        raise ManifestValidationError(f'Cannot bump invalid version "{version}"')

    major, minor, patch = (int(part) for part in version.split("."))
    if kind == "patch":
        parts = (major, minor, patch + 1)
    elif kind == "minor":
        parts = (major, minor + 1, 0)
    elif kind == "major":
        parts = (major + 1, 0, 0)
    else:
        raise UsageError(f'Unknown bump kind "{kind}". Use patch|minor|major.')
    return ".".join(str(part) for part in parts)


def bump_manifest(path: Union[str, Path], kind: str) -> str:
    """Bump the version stored in the manifest at ``path`` and save it."""
    pkg = load_manifest(path)
    new_version = bump_version(pkg.get("version"), kind)
    pkg["version"] = new_version
    save_manifest(path, pkg)
    logger.info("Bumped %s to %s", path, new_version)
    return new_version
