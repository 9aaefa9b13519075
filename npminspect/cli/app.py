"""
Main CLI application for npminspect.

Defines the Typer application structure and command routing,
keeping the CLI layer thin over the core services.
"""
import typer

from npminspect.cli.commands.lockfile import lock_command
from npminspect.cli.commands.manifest import bump_command, entries_command, overview_command, validate_command
from npminspect.cli.commands.registry import (
    check_command,
    compare_command,
    deps_command,
    info_command,
    versions_command,
)


# Initialize Typer app
app = typer.Typer(help="npminspect - explore npm packages, package.json and package-lock.json")

# Registry commands (npm view)
app.command("info", help="Show key fields (version, license, repo, size).")(info_command)
app.command("versions", help="Show recent versions.")(versions_command)
app.command("deps", help="List dependencies.")(deps_command)
app.command("compare", help="Compare two packages.")(compare_command)
app.command("check", help="Research several packages before installing them.")(check_command)

# Manifest commands (package.json / package-lock.json)
app.command("overview", help="Quick overview of package.json.")(overview_command)
app.command("validate", help="Validate package.json guardrails.")(validate_command)
app.command("entries", help="Explain entry point resolution.")(entries_command)
app.command("bump", help="Bump the package.json version (patch|minor|major).")(bump_command)
app.command("lock", help="Check package-lock.json and summarise it.")(lock_command)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context):
    """npminspect - explore npm packages, package.json and package-lock.json.

    Examples:

      npminspect info express

      npminspect versions react --limit=7

      npminspect deps fastify --max=15

      npminspect compare axios node-fetch --json
    """
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
