"""Registry queries through the ``npm view`` command."""

from __future__ import annotations

import logging
import subprocess
from typing import Dict, Optional, Protocol, Tuple

from npminspect.utils.subprocess_error_handler import handle_subprocess_errors


class RegistryQuery(Protocol):
    """Anything that can answer ``npm view``-style field lookups."""

    def query(self, package: str, field: Optional[str] = None) -> str:
        ...


class NpmViewClient:
    """Run ``npm view <package> [field]`` and return its trimmed stdout.

    Failures never propagate: a missing executable, a timeout or a non-zero
    exit status is logged and surfaces as an empty string.
    """

    def __init__(self, executable: str = "npm", timeout: Optional[float] = None):
        self.executable = executable
        self.timeout = timeout
        self.logger = logging.getLogger(self.__class__.__name__)

    def build_command(self, package: str, field: Optional[str] = None) -> list:
        cmd = [self.executable, "view", package]
        if field:
            cmd.append(field)
        return cmd

    @handle_subprocess_errors(tool="npm view", return_on_error="")
    def query(self, package: str, field: Optional[str] = None) -> str:
        cmd = self.build_command(package, field)
        self.logger.debug("Running %s", " ".join(cmd))
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=True,
            timeout=self.timeout,
        )
        return result.stdout.strip()


class StaticRegistry:
    """In-memory registry keyed by ``(package, field)``.

    Unknown lookups answer ``""`` just like a failed ``npm view`` call. Used by
    the test-suite and handy for offline demos.
    """

    def __init__(self, responses: Optional[Dict[Tuple[str, Optional[str]], str]] = None):
        self.responses = dict(responses or {})
        self.calls = []

    def query(self, package: str, field: Optional[str] = None) -> str:
        self.calls.append((package, field))
        return self.responses.get((package, field), "")


def query_registry(package: str, field: Optional[str] = None, client: Optional[RegistryQuery] = None) -> str:
    """Convenience wrapper around :class:`NpmViewClient`."""
    client = client or NpmViewClient()
    return client.query(package, field)
