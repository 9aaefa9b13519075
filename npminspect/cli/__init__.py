"""
CLI module for npminspect.

Provides the command-line interface; commands delegate to the core services.
"""
from npminspect.cli.app import app as _app

# Export app function for pyproject.toml entry point
def app():
    """Entry point function for pyproject.toml scripts."""
    _app()

__all__ = ['app']
