import os
import sys

from rich.console import Console


def is_ci_environment():
    return (
        os.getenv('CI') is not None or
        os.getenv('GITHUB_ACTIONS') is not None or
        not sys.stdout.isatty()
    )


def get_console(plain: bool = False) -> Console:
    """Detect environment and create console.

    ``plain`` forces the same colorless, emoji-free output used in CI.
    """
    if plain or is_ci_environment():
        # CI/automated environment or --plain - no colors, no interactive elements
        return Console(force_terminal=False, no_color=True, emoji=False, highlight=False)

    # Interactive terminal - full Rich capabilities
    return Console(highlight=False)


def get_error_console(plain: bool = False) -> Console:
    """Console bound to stderr for failure lines."""
    if plain or is_ci_environment():
        return Console(stderr=True, force_terminal=False, no_color=True, emoji=False, highlight=False)
    return Console(stderr=True, highlight=False)
