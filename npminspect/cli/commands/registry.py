"""
Registry commands: info, versions, deps, compare and check.

Thin wrappers around InspectorService that handle CLI arguments and choose
between table and JSON output.
"""
import logging
from typing import List, Optional

import typer
from rich.text import Text

from npminspect.cli.commands.common import (
    ConfigOption,
    JsonOption,
    PlainOption,
    emit_json,
    exit_with_error,
    flag,
    load_settings,
    make_registry,
)
from npminspect.core.inspector import InspectorService
from npminspect.rich_utils.formatters import banner, divider, heading, print_table, symbols
from npminspect.rich_utils.ui_helpers import get_console
from npminspect.utils.exceptions import InspectorError

logger = logging.getLogger(__name__)


def info_command(
    package: Optional[str] = typer.Argument(None, help="Package name"),
    json_output: bool = JsonOption,
    plain: bool = PlainOption,
    config_path: Optional[str] = ConfigOption,
):
    """Show key fields (version, license, repo, size)."""
    settings = load_settings(config_path, **{"output.json": flag(json_output), "output.plain": flag(plain)})
    service = InspectorService(make_registry(settings))

    try:
        data = service.package_info(package)
    except InspectorError as e:
        exit_with_error(e, settings)

    if settings.json_output:
        emit_json({"ok": True, "command": "info", "data": data})
        return
    rows = [{"field": field, "value": value} for field, value in data.items()]
    print_table(get_console(settings.plain), rows, plain=settings.plain)


def versions_command(
    package: Optional[str] = typer.Argument(None, help="Package name"),
    limit: Optional[int] = typer.Option(None, "--limit", help="Versions limit (default 5)"),
    json_output: bool = JsonOption,
    plain: bool = PlainOption,
    config_path: Optional[str] = ConfigOption,
):
    """Show recent versions."""
    settings = load_settings(
        config_path,
        **{"output.json": flag(json_output), "output.plain": flag(plain), "versions.limit": limit},
    )
    service = InspectorService(make_registry(settings))

    try:
        recent = service.recent_versions(package, settings.limit)
    except InspectorError as e:
        exit_with_error(e, settings)

    if settings.json_output:
        emit_json({"ok": True, "command": "versions", "package": package, "versions": recent})
        return
    print_table(get_console(settings.plain), [{"version": v} for v in recent], plain=settings.plain)


def deps_command(
    package: Optional[str] = typer.Argument(None, help="Package name"),
    max_deps: Optional[int] = typer.Option(None, "--max", help="Dependencies limit (default 10)"),
    json_output: bool = JsonOption,
    plain: bool = PlainOption,
    config_path: Optional[str] = ConfigOption,
):
    """List dependencies."""
    settings = load_settings(
        config_path,
        **{"output.json": flag(json_output), "output.plain": flag(plain), "dependencies.max": max_deps},
    )
    service = InspectorService(make_registry(settings))

    try:
        listing = service.dependencies(package, settings.max_deps)
    except InspectorError as e:
        exit_with_error(e, settings)

    if settings.json_output:
        emit_json({"ok": True, "command": "deps", "package": package, "dependencies": listing})
        return
    console = get_console(settings.plain)
    if not listing:
        console.print("(no dependencies)")
        return
    print_table(console, listing, plain=settings.plain)


def compare_command(
    first: Optional[str] = typer.Argument(None, metavar="PKG_A", help="First package"),
    second: Optional[str] = typer.Argument(None, metavar="PKG_B", help="Second package"),
    json_output: bool = JsonOption,
    plain: bool = PlainOption,
    config_path: Optional[str] = ConfigOption,
):
    """Compare two packages."""
    settings = load_settings(config_path, **{"output.json": flag(json_output), "output.plain": flag(plain)})
    service = InspectorService(make_registry(settings))

    try:
        comparison = service.compare(first, second)
    except InspectorError as e:
        exit_with_error(e, settings)

    if settings.json_output:
        emit_json({"ok": True, "command": "compare", **comparison})
        return
    print_table(get_console(settings.plain), service.compare_rows(comparison), plain=settings.plain)


def check_command(
    packages: Optional[List[str]] = typer.Argument(None, help="Packages to check (default from config)"),
    json_output: bool = JsonOption,
    plain: bool = PlainOption,
    config_path: Optional[str] = ConfigOption,
):
    """Research several packages before installing them."""
    settings = load_settings(config_path, **{"output.json": flag(json_output), "output.plain": flag(plain)})
    service = InspectorService(make_registry(settings))
    targets = list(packages) if packages else list(settings.checker_packages)

    reports = []
    failures = []
    for package in targets:
        # One bad lookup must not abort the rest of the batch
        try:
            reports.append(service.package_report(package, settings.checker_versions))
        except InspectorError as e:
            logger.info("Skipping %s: %s", package, e)
            failures.append({"name": package, "error": str(e)})

    if settings.json_output:
        emit_json({"ok": not failures, "command": "check", "packages": reports, "errors": failures})
        if failures:
            raise typer.Exit(code=1)
        return

    console = get_console(settings.plain)
    sym = symbols(settings.plain)
    banner(console, "NPM Package Information Checker", "Learning to Research Packages", plain=settings.plain)

    for report in reports:
        divider(console)
        heading(console, f" Package: {report['name']}", style="bold green")
        divider(console)
        for label, value in report["details"].items():
            line = Text(f"{label}: ", style="yellow")
            line.append(str(value), style="default")
            console.print(line)

        heading(console, f"\nRecent Versions (last {settings.checker_versions}):", style="bold magenta")
        if report["versions"]:
            for index, version in enumerate(report["versions"]):
                arrow = sym["arrow"] if index == len(report["versions"]) - 1 else " "
                console.print(f"  {arrow} {version}")
        else:
            console.print("  Could not retrieve version history")

        heading(console, "\nPackage Size:", style="bold blue")
        if report["unpackedSizeKB"]:
            console.print(f"  Unpacked Size: {report['unpackedSizeKB']} KB")
        else:
            console.print("  Size information not available")

        heading(console, "\nDependencies:", style="bold green")
        names = report["dependencies"]
        if names:
            console.print(f"  Total Dependencies: {len(names)}")
            if len(names) <= 10:
                console.print("  Packages:")
                for name in names:
                    console.print(f"    - {name}")
        else:
            console.print("  No dependencies")
        console.print()

    for failure in failures:
        console.print(Text(f"{sym['fail']} {failure['name']}: {failure['error']}", style="red"))

    heading(console, "Useful Commands to Try:", style="bold green")
    for command in (
        "npm view <package-name>",
        "npm view <package-name> versions",
        "npm view <package-name> dependencies",
        "npm docs <package-name>",
        "npm repo <package-name>",
    ):
        console.print(Text(f"  {command}", style="cyan"))

    if failures:
        raise typer.Exit(code=1)
