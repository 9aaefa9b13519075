"""
Manifest commands: overview, validate, entries and bump.

Thin wrappers around ManifestService. Every command reads ``package.json``
from ``--manifest`` (default from config) and exits 1 when it is missing,
invalid or fails validation.
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
from npminspect.core.config_manager import Settings
from npminspect.core.manifest_service import (
    BUMP_KINDS,
    Finding,
    FindingLevel,
    ManifestService,
    bump_manifest,
)
from npminspect.ecosystems.npm.reader import load_manifest
from npminspect.rich_utils.formatters import banner, build_box, fail, heading, kv, ok, symbols, warn
from npminspect.rich_utils.ui_helpers import get_console, get_error_console
from npminspect.utils.exceptions import InspectorError, ManifestValidationError, UsageError

ManifestOption = typer.Option(None, "-m", "--manifest", help="Path to package.json")


def _settings(config_path, manifest_path, json_output, plain) -> Settings:
    return load_settings(
        config_path,
        **{"output.json": flag(json_output), "output.plain": flag(plain), "manifest.path": manifest_path},
    )


def _load(settings: Settings, command: str) -> dict:
    try:
        return load_manifest(settings.manifest_path)
    except InspectorError as e:
        if settings.json_output:
            emit_json({"ok": False, "command": command, "error": e.message})
            raise typer.Exit(code=1)
        exit_with_error(e, settings)


def _print_finding(console, finding: Finding, plain: bool) -> None:
    if finding.level is FindingLevel.OK:
        ok(console, finding.message, plain=plain)
    else:
        warn(console, finding.message, plain=plain)


def _banner(console, settings: Settings) -> None:
    banner(console, "package.json Inspector", "Anatomy • Mutations • Guardrails", plain=settings.plain)


def overview_command(
    manifest_path: Optional[str] = ManifestOption,
    json_output: bool = JsonOption,
    plain: bool = PlainOption,
    config_path: Optional[str] = ConfigOption,
):
    """Pretty quick overview of package.json."""
    settings = _settings(config_path, manifest_path, json_output, plain)
    pkg = _load(settings, "overview")
    summary = ManifestService().overview(pkg)

    if settings.json_output:
        emit_json({"ok": True, "command": "overview", "data": summary})
        return

    console = get_console(settings.plain)
    sym = symbols(settings.plain)
    _banner(console, settings)

    title = Text(f"{sym['pkg']}  ")
    title.append(summary["Name"], style="bold")
    lines = [title] + [kv(label, value, plain=settings.plain) for label, value in summary.items() if label != "Name"]
    tips = [
        f"{sym['info']}  Try: npminspect validate  {sym['dot']}  npminspect entries",
        f"{sym['gear']}  Mutate: npm pkg set type=\"module\" engines.node=\">=18\"",
        f"{sym['ver']}  Versioning: npminspect bump patch  {sym['dot']}  minor  {sym['dot']}  major",
    ]
    console.print(build_box("Quick Overview", lines, width=settings.width, plain=settings.plain))
    console.print(build_box("Tips", tips, width=settings.width, plain=settings.plain))


def validate_command(
    manifest_path: Optional[str] = ManifestOption,
    json_output: bool = JsonOption,
    plain: bool = PlainOption,
    config_path: Optional[str] = ConfigOption,
):
    """Validate package.json against basic publishing guardrails."""
    settings = _settings(config_path, manifest_path, json_output, plain)
    pkg = _load(settings, "validate")
    console = get_console(settings.plain)

    if not settings.json_output:
        _banner(console, settings)
        heading(console, "\nValidating package.json...\n")

    try:
        report = ManifestService().validate(pkg)
    except ManifestValidationError as e:
        if settings.json_output:
            emit_json({
                "ok": False,
                "command": "validate",
                "findings": [{"level": f.level.value, "message": f.message} for f in e.findings],
                "error": e.message,
            })
        else:
            for finding in e.findings:
                _print_finding(console, finding, settings.plain)
            fail(get_error_console(settings.plain), e.message, plain=settings.plain)
        raise typer.Exit(code=1)

    if settings.json_output:
        emit_json({"ok": True, "command": "validate", **report.to_dict()})
        return
    for finding in report.findings:
        _print_finding(console, finding, settings.plain)


def entries_command(
    manifest_path: Optional[str] = ManifestOption,
    json_output: bool = JsonOption,
    plain: bool = PlainOption,
    config_path: Optional[str] = ConfigOption,
):
    """Explain how the package entry point resolves."""
    settings = _settings(config_path, manifest_path, json_output, plain)
    pkg = _load(settings, "entries")
    entries = ManifestService().entries(pkg)

    if settings.json_output:
        emit_json({"ok": True, "command": "entries", "data": entries})
        return

    console = get_console(settings.plain)
    _banner(console, settings)
    heading(console, "\nEntry Resolution Overview\n")
    console.print(kv("Type", entries["type"], plain=settings.plain))
    console.print(kv("Main", entries["main"], plain=settings.plain))
    console.print(kv("Exports", entries["exports"], plain=settings.plain))
    console.print("\nInterpretation:")
    console.print(Text(f" {symbols(settings.plain)['dot']} {entries['interpretation']}"))
    console.print()


def bump_command(
    kind: Optional[str] = typer.Argument(None, help="patch | minor | major"),
    manifest_path: Optional[str] = ManifestOption,
    json_output: bool = JsonOption,
    plain: bool = PlainOption,
    config_path: Optional[str] = ConfigOption,
):
    """Bump the version in package.json and write it back."""
    settings = _settings(config_path, manifest_path, json_output, plain)

    try:
        if kind not in BUMP_KINDS:
            raise UsageError(f'Unknown bump kind "{kind}". Use patch|minor|major.')
        new_version = bump_manifest(settings.manifest_path, kind)
    except InspectorError as e:
        if settings.json_output:
            emit_json({"ok": False, "command": "bump", "error": e.message})
            raise typer.Exit(code=1)
        exit_with_error(e, settings)

    if settings.json_output:
        emit_json({"ok": True, "command": "bump", "kind": kind, "version": new_version})
        return
    ok(get_console(settings.plain), f"Bumped version to {new_version}", plain=settings.plain)
