"""
Lockfile command.

Checks that both package.json and package-lock.json exist and summarises what
the lockfile pins, with a reminder of why ``npm ci`` matters.
"""
from typing import Optional

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
)
from npminspect.core.lock_checker import check_project
from npminspect.rich_utils.formatters import banner, divider, heading, ok
from npminspect.rich_utils.ui_helpers import get_console
from npminspect.utils.exceptions import InspectorError


def lock_command(
    package: Optional[str] = typer.Option(None, "-p", "--package", help="Dependency whose locked version to show"),
    manifest_path: Optional[str] = typer.Option(None, "-m", "--manifest", help="Path to package.json"),
    lockfile_path: Optional[str] = typer.Option(None, "-l", "--lockfile", help="Path to package-lock.json"),
    json_output: bool = JsonOption,
    plain: bool = PlainOption,
    config_path: Optional[str] = ConfigOption,
):
    """Check package-lock.json and summarise what it pins."""
    settings = load_settings(
        config_path,
        **{
            "output.json": flag(json_output),
            "output.plain": flag(plain),
            "manifest.path": manifest_path,
            "lockfile.path": lockfile_path,
            "lockfile.tracked_package": package,
        },
    )

    try:
        summary = check_project(settings.manifest_path, settings.lockfile_path, settings.tracked_package)
    except InspectorError as e:
        if settings.json_output:
            emit_json({"ok": False, "command": "lock", "error": e.message})
            raise typer.Exit(code=1)
        exit_with_error(e, settings)

    if settings.json_output:
        emit_json({"ok": True, "command": "lock", "data": summary.to_dict()})
        return

    console = get_console(settings.plain)
    banner(console, "Lockfile Checker Tool", "Understanding Deterministic Builds", plain=settings.plain)
    heading(console, "Status Check:\n", style="bold yellow")
    ok(console, "package.json found.", plain=settings.plain)
    ok(console, "package-lock.json found.", plain=settings.plain)

    heading(console, "\nCommand Comparison:\n", style="bold blue")
    console.print(Text("- npm install:", style="magenta"))
    console.print("  Resolves ranges from package.json (^, ~) and may update package-lock.json.")
    console.print("  Different machines can install slightly different versions.")
    console.print(Text("- npm ci (Clean Install):", style="magenta"))
    console.print("  Installs exactly what package-lock.json pins and fails on a mismatch.")
    console.print("  Faster and reproducible; use it in CI/CD.")

    heading(console, "\nLockfile Content Summary:", style="bold green")
    console.print(f"- Lockfile Version: {summary.lockfile_version}")
    console.print(f"- Total Packages Locked: {summary.total_packages}")
    console.print(f"- Key Dependency ({summary.tracked_package}) Version Locked: {summary.tracked_version}")
    console.print("- Integrity Check: PASS (Lockfile is present and seems valid)")
    console.print()
    divider(console)
