"""
Helpers shared by every command: settings construction, error reporting
and JSON output.
"""
from typing import Any, NoReturn, Optional

import typer
import yaml
from rich.text import Text

from npminspect.core.config_manager import ConfigManager, Settings
from npminspect.core.logging_config import setup_logging
from npminspect.ecosystems.npm.registry import NpmViewClient, RegistryQuery
from npminspect.rich_utils.formatters import fail, to_json
from npminspect.rich_utils.ui_helpers import get_error_console
from npminspect.utils.exceptions import InspectorError, UsageError

ConfigOption = typer.Option(None, "-c", "--config", help="Path to config YAML")
JsonOption = typer.Option(False, "--json", help="Output JSON")
PlainOption = typer.Option(False, "--plain", help="Disable colors and emoji")


def flag(value: bool) -> Optional[bool]:
    """Map an unset boolean flag to ``None`` so the config value wins."""
    return True if value else None


def load_settings(config_path: Optional[str], **overrides: Any) -> Settings:
    """Build the invocation's ``Settings`` and configure logging."""
    try:
        settings = ConfigManager().build_settings(config_path, **overrides)
    except (FileNotFoundError, yaml.YAMLError, ValueError, TypeError) as e:
        get_error_console().print(Text(f"Configuration error: {e}", style="bold red"))
        raise typer.Exit(code=1)

    setup_logging(settings.log_level, settings.log_file)
    return settings


def make_registry(settings: Settings) -> RegistryQuery:
    return NpmViewClient(executable=settings.npm_executable, timeout=settings.timeout)


def emit_json(payload: Any) -> None:
    typer.echo(to_json(payload))


def exit_with_error(error: InspectorError, settings: Optional[Settings] = None) -> NoReturn:
    """Print a single failure line (plus usage when known) and exit 1."""
    plain = settings.plain if settings else False
    console = get_error_console(plain)
    if isinstance(error, UsageError) and error.usage:
        console.print(Text(error.usage))
    else:
        fail(console, str(error), plain=plain)
    raise typer.Exit(code=1)
