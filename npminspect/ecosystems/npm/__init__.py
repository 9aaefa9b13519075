"""NPM ecosystem helpers."""

from .quasi_json import parse_array, parse_dependencies, parse_object, parse_versions
from .reader import load_lockfile, load_manifest, save_manifest
from .registry import NpmViewClient, RegistryQuery, StaticRegistry, query_registry

__all__ = [
    "parse_array",
    "parse_object",
    "parse_versions",
    "parse_dependencies",
    "load_manifest",
    "save_manifest",
    "load_lockfile",
    "NpmViewClient",
    "RegistryQuery",
    "StaticRegistry",
    "query_registry",
]
