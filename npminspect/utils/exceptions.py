"""
Exception hierarchy for npminspect.

Two families live here:

- ``InspectorError`` and its children describe failures the user must see
  (bad arguments, missing or invalid manifests). The CLI layer turns them into
  a single printed line and a non-zero exit status.
- ``ExternalToolError`` and its children describe failures of the external
  ``npm`` executable. They are built and logged by
  ``handle_subprocess_errors`` and normally never leave the registry boundary.

Each exception includes:
- Clear error message
- Context (file path or tool command)
- Suggested user action
"""

from typing import List, Optional, Sequence


class InspectorError(Exception):
    """
    Base exception for all user-facing npminspect errors.
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        suggested_action: Optional[str] = None,
    ):
        """
        Initialize InspectorError.

        Args:
            message: Human-readable error message
            path: File the error relates to, if any
            suggested_action: Suggested action for the user to resolve the issue
        """
        self.message = message
        self.path = path
        self.suggested_action = suggested_action

        error_parts = [message]

        if path:
            error_parts.append(f"Path: {path}")

        if suggested_action:
            error_parts.append(f"Action: {suggested_action}")

        super().__init__(" | ".join(error_parts))


class UsageError(InspectorError):
    """Raised when a command is invoked with missing or unknown arguments."""

    def __init__(self, message: str, usage: Optional[str] = None):
        self.usage = usage
        super().__init__(message=message, suggested_action=usage)


class ManifestError(InspectorError):
    """Base class for manifest (package.json / package-lock.json) errors."""


class ManifestNotFoundError(ManifestError):
    """Raised when a manifest file does not exist."""

    def __init__(self, path: str, kind: str = "package.json"):
        self.kind = kind
        if kind == "package-lock.json":
            suggested_action = "Run 'npm install' to generate it and commit it"
        else:
            suggested_action = "Run the command from the project root or pass --manifest"
        super().__init__(
            message=f"{kind} not found",
            path=path,
            suggested_action=suggested_action,
        )


class ManifestParseError(ManifestError):
    """Raised when a manifest file is not valid JSON."""

    def __init__(self, path: str, original_exception: Optional[Exception] = None):
        self.original_exception = original_exception
        message = "Invalid JSON in package.json"
        if original_exception:
            message += f": {original_exception}"
        super().__init__(message=message, path=path)


class ManifestValidationError(ManifestError):
    """
    Raised when a manifest fails a fatal validation check.

    ``findings`` holds the checks that already ran so the caller can still
    report them before the failure line.
    """

    def __init__(self, message: str, findings: Optional[Sequence] = None):
        self.findings: List = list(findings or [])
        super().__init__(message=message)


class ExternalToolError(Exception):
    """
    Base exception for failures of an external executable.
    """

    def __init__(
        self,
        message: str,
        tool: Optional[str] = None,
        command: Optional[str] = None,
        original_exception: Optional[Exception] = None,
        suggested_action: Optional[str] = None,
    ):
        """
        Initialize ExternalToolError.

        Args:
            message: Human-readable error message
            tool: Name of the external tool (e.g., "npm view")
            command: Command line that failed
            original_exception: The original exception that was caught
            suggested_action: Suggested action for the user to resolve the issue
        """
        self.message = message
        self.tool = tool
        self.command = command
        self.original_exception = original_exception
        self.suggested_action = suggested_action

        error_parts = [message]

        if tool:
            error_parts.append(f"Tool: {tool}")

        if command:
            error_parts.append(f"Command: {command}")

        if suggested_action:
            error_parts.append(f"Action: {suggested_action}")

        if original_exception:
            error_parts.append(f"Original error: {str(original_exception)}")

        super().__init__(" | ".join(error_parts))


class ToolNotFoundError(ExternalToolError):
    """Raised when the executable cannot be found on PATH."""

    def __init__(
        self,
        message: str,
        tool: Optional[str] = None,
        command: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(
            message=message,
            tool=tool,
            command=command,
            original_exception=original_exception,
            suggested_action="Install Node.js/npm or set registry.command in the config",
        )


class ToolTimeoutError(ExternalToolError):
    """Raised when the executable exceeds the configured timeout."""

    def __init__(
        self,
        message: str,
        tool: Optional[str] = None,
        command: Optional[str] = None,
        timeout_duration: Optional[float] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.timeout_duration = timeout_duration

        suggested_action = "Check network connectivity and retry"
        if timeout_duration:
            suggested_action += f" (timeout after {timeout_duration}s)"

        super().__init__(
            message=message,
            tool=tool,
            command=command,
            original_exception=original_exception,
            suggested_action=suggested_action,
        )


class ToolExitError(ExternalToolError):
    """
    Raised when the executable exits with a non-zero status.

    For ``npm view`` this typically indicates:
    - Package does not exist (E404)
    - Registry unreachable
    """

    def __init__(
        self,
        message: str,
        tool: Optional[str] = None,
        command: Optional[str] = None,
        returncode: Optional[int] = None,
        stderr: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.returncode = returncode
        self.stderr = stderr

        suggested_action = "Verify the package name and registry access"
        if stderr:
            first_line = stderr.strip().splitlines()[0] if stderr.strip() else ""
            if first_line:
                suggested_action += f" ({first_line})"

        super().__init__(
            message=message,
            tool=tool,
            command=command,
            original_exception=original_exception,
            suggested_action=suggested_action,
        )


__all__ = [
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
