"""
Utility modules for npminspect.

This package contains the exception hierarchy and the decorator that keeps
external tool failures at the registry boundary.
"""

from npminspect.utils.exceptions import (
    ExternalToolError,
    InspectorError,
    ManifestError,
    ManifestNotFoundError,
    ManifestParseError,
    ManifestValidationError,
    ToolExitError,
    ToolNotFoundError,
    ToolTimeoutError,
    UsageError,
)
from npminspect.utils.subprocess_error_handler import handle_subprocess_errors

__all__ = [
    "handle_subprocess_errors",
    "InspectorError",
    "UsageError",
    "ManifestError",
    "ManifestNotFoundError",
    "ManifestParseError",
    "ManifestValidationError",
    "ExternalToolError",
    "ToolNotFoundError",
    "ToolTimeoutError",
    "ToolExitError",
]
