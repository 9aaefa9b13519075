"""
Reusable decorator for handling external tool failures.

Every ``npm`` invocation goes through a method decorated with
``handle_subprocess_errors`` so that a missing executable, a timeout or a
non-zero exit status is logged once and converted into a fallback value.
"""

import functools
import logging
import subprocess
from typing import Any, Callable, Optional

from .exceptions import (
    ExternalToolError,
    ToolExitError,
    ToolNotFoundError,
    ToolTimeoutError,
)


def handle_subprocess_errors(
    tool: str,
    return_on_error: Any = None,
    suppress_errors: bool = True,
):
    """
    Decorator that automatically handles external tool exceptions.

    Usage:
        @handle_subprocess_errors(tool="npm view", return_on_error="")
        def query(self, package, field=None):
            result = subprocess.run(cmd, capture_output=True, text=True, check=True)
            return result.stdout.strip()

    Args:
        tool: Name of the external tool (e.g., "npm view")
        return_on_error: Value to return when an error occurs (default: None)
        suppress_errors: If True, return fallback value; if False, raise custom exception

    Returns:
        Decorated function that handles all exceptions automatically
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            logger = getattr(self, "logger", logging.getLogger(func.__name__))
            context = _extract_context(args, kwargs)

            try:
                return func(self, *args, **kwargs)

            except FileNotFoundError as e:
                error = ToolNotFoundError(
                    message=f"{tool} executable not found",
                    tool=tool,
                    command=_command_of(e),
                    original_exception=e,
                )
                return _handle_error(error, logger, "warning", context, suppress_errors, return_on_error)

            except subprocess.TimeoutExpired as e:
                error = ToolTimeoutError(
                    message=f"Timeout while running {tool}",
                    tool=tool,
                    command=_command_of(e),
                    timeout_duration=e.timeout,
                    original_exception=e,
                )
                return _handle_error(error, logger, "warning", context, suppress_errors, return_on_error)

            except subprocess.CalledProcessError as e:
                error = ToolExitError(
                    message=f"{tool} exited with status {e.returncode}",
                    tool=tool,
                    command=_command_of(e),
                    returncode=e.returncode,
                    stderr=e.stderr if isinstance(e.stderr, str) else None,
                )
                # A missing package is routine for a lookup tool
                return _handle_error(error, logger, "debug", context, suppress_errors, return_on_error)

            except OSError as e:
                error = ExternalToolError(
                    message=f"Could not run {tool}",
                    tool=tool,
                    original_exception=e,
                    suggested_action="Check file permissions and the configured executable",
                )
                return _handle_error(error, logger, "error", context, suppress_errors, return_on_error)

        return wrapper

    return decorator


def _command_of(error: Exception) -> Optional[str]:
    """Render the failing command line from a subprocess exception."""
    cmd = getattr(error, "cmd", None) or getattr(error, "filename", None)
    if cmd is None:
        return None
    if isinstance(cmd, (list, tuple)):
        return " ".join(str(part) for part in cmd)
    return str(cmd)


def _extract_context(args: tuple, kwargs: dict) -> str:
    """
    Extract contextual information from function arguments.

    Returns:
        Context string (e.g., "express version" or "express")
    """
    package = kwargs.get("package") or (args[0] if args else None)
    field = kwargs.get("field") or (args[1] if len(args) > 1 else None)

    if package and field:
        return f"{package} {field}"
    elif package:
        return str(package)
    return ""


def _handle_error(
    error: ExternalToolError,
    logger: logging.Logger,
    log_level: str,
    context: str,
    suppress: bool,
    return_value: Any,
):
    """
    Handle an error by logging and returning/raising.

    Raises:
        The wrapped error if suppress=False
    """
    log_message = str(error)
    if context:
        log_message = f"[{context}] {log_message}"

    if log_level == "debug":
        logger.debug(log_message)
    elif log_level == "warning":
        logger.warning(log_message)
    else:
        logger.error(log_message)

    if suppress:
        return return_value
    raise error


__all__ = ["handle_subprocess_errors"]
