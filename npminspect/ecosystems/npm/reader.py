"""Utilities for reading and writing NPM manifests."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from npminspect.utils.exceptions import ManifestNotFoundError, ManifestParseError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load_manifest(path: PathLike) -> Dict[str, Any]:
    """Read and decode a ``package.json`` file.

    Raises
    ------
    ManifestNotFoundError
        The file does not exist.
    ManifestParseError
        The file is not a JSON object.
    """

    manifest_path = Path(path)
    if not manifest_path.exists():
        raise ManifestNotFoundError(str(manifest_path.resolve()))

    try:
        data = json.loads(manifest_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ManifestParseError(str(manifest_path), original_exception=e) from e

    if not isinstance(data, dict):
        raise ManifestParseError(str(manifest_path), original_exception=ValueError("top-level value is not an object"))
    return data


def save_manifest(path: PathLike, data: Dict[str, Any]) -> None:
    """Write ``data`` back with 2-space indentation and a trailing newline."""
    manifest_path = Path(path)
    manifest_path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    logger.info("Wrote %s", manifest_path)


def load_lockfile(path: PathLike) -> Optional[Dict[str, Any]]:
    """Read a ``package-lock.json`` file, returning ``None`` if unusable."""
    lock_path = Path(path)
    if not lock_path.exists():
        return None

    try:
        data = json.loads(lock_path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, IOError) as e:
        logger.warning("Could not parse %s: %s", lock_path, e)
        return None

    return data if isinstance(data, dict) else None
