"""
Lockfile checks for npminspect.

Summarises ``package-lock.json`` so users can see what a deterministic
install (``npm ci``) would pin.
"""
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from npminspect.ecosystems.npm.reader import load_lockfile, load_manifest
from npminspect.utils.exceptions import ManifestNotFoundError


@dataclass
class LockSummary:
    lockfile_version: Union[int, str]
    total_packages: Union[int, str]
    tracked_package: str
    tracked_version: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def locked_version(lock: Dict[str, Any], package: str) -> Optional[str]:
    """Version pinned for ``package`` under ``packages["node_modules/<name>"]``."""
    packages = lock.get("packages") or {}
    entry = packages.get(f"node_modules/{package}")
    if isinstance(entry, dict) and entry.get("version"):
        return str(entry["version"])
    return None


def summarise_lockfile(lock: Dict[str, Any], tracked_package: str = "chalk") -> LockSummary:
    """Summarise a decoded lockfile.

    The root project is stored under the ``""`` key and is not counted.
    """
    packages = lock.get("packages") or {}
    total: Union[int, str] = len(packages) - 1 if len(packages) > 0 else "Unknown"

    return LockSummary(
        lockfile_version=lock.get("lockfileVersion") or "N/A",
        total_packages=total,
        tracked_package=tracked_package,
        tracked_version=locked_version(lock, tracked_package) or "N/A",
    )


def check_project(
    manifest_path: Union[str, Path],
    lockfile_path: Union[str, Path],
    tracked_package: str = "chalk",
) -> LockSummary:
    """Verify both manifests exist and summarise the lockfile.

    Raises:
        ManifestNotFoundError: package.json or package-lock.json is missing.
        ManifestParseError: package.json is not valid JSON.
    """
    load_manifest(manifest_path)

    lock = load_lockfile(lockfile_path)
    if lock is None:
        raise ManifestNotFoundError(str(Path(lockfile_path).resolve()), kind="package-lock.json")

    return summarise_lockfile(lock, tracked_package)
