"""
Configuration management for npminspect.

Handles loading, merging and discovery of configuration files and turns the
result, together with CLI flags, into one immutable ``Settings`` value that
every command receives explicitly.
"""
import importlib.resources as importlib_resources
import os
from dataclasses import dataclass
from typing import Any, Optional, Tuple

import yaml

USER_CONFIG_FILE = "npminspect.config.yaml"


@dataclass(frozen=True)
class Settings:
    """Resolved configuration for a single CLI invocation."""
    json_output: bool = False
    plain: bool = False
    width: int = 64
    limit: int = 5
    max_deps: int = 10
    npm_executable: str = "npm"
    timeout: Optional[float] = None
    manifest_path: str = "package.json"
    lockfile_path: str = "package-lock.json"
    tracked_package: str = "chalk"
    checker_packages: Tuple[str, ...] = ("express", "axios", "lodash")
    checker_versions: int = 3
    log_level: str = "WARNING"
    log_file: Optional[str] = None


def _optional_float(value: Any) -> Optional[float]:
    return float(value) if value is not None else None


class ConfigManager:
    """Manages npminspect configuration loading and merging operations."""

    def load_config(self, path: str) -> dict:
        """Load configuration from YAML file."""
        with open(path, "r") as f:
            return yaml.safe_load(f) or {}

    def deep_merge(self, default: dict, user: dict) -> dict:
        """Deep merge user config into default config."""
        result = default.copy()
        for key, value in user.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self.deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def load_package_default_config(self) -> dict:
        """Load default config from package."""
        config_files = importlib_resources.files("npminspect.config")
        default_config_path = config_files / "default.yaml"
        with default_config_path.open("r") as f:
            return yaml.safe_load(f) or {}

    def load_and_merge_config(self, user_config_path: str) -> dict:
        """Load user config and merge with package default."""
        default_config = self.load_package_default_config()
        user_config = self.load_config(user_config_path)
        return self.deep_merge(default_config, user_config)

    def discover_and_load_config(self, config_arg: Optional[str]) -> dict:
        """Discover config file with priority order."""

        # Priority 1: --config argument
        if config_arg:
            if os.path.exists(config_arg):
                return self.load_and_merge_config(config_arg)
            else:
                raise FileNotFoundError(f"Config file not found: {config_arg}")

        # Priority 2: npminspect.config.yaml in current directory
        if os.path.exists(USER_CONFIG_FILE):
            return self.load_and_merge_config(USER_CONFIG_FILE)

        # Priority 3: Package default config
        return self.load_package_default_config()

    def merge_config_and_args(self, config: dict, **overrides: Any) -> dict:
        """Merge configuration with CLI arguments.

        ``overrides`` use dotted keys (``"output.json"``); ``None`` values mean
        the flag was not given and leave the config untouched.
        """
        for dotted_key, value in overrides.items():
            if value is None:
                continue
            section, _, key = dotted_key.partition(".")
            if not isinstance(config.get(section), dict):
                config[section] = {}
            config[section][key] = value
        return config

    def to_settings(self, config: dict) -> Settings:
        """Flatten a merged config dictionary into ``Settings``."""
        output = config.get("output") or {}
        registry = config.get("registry") or {}
        manifest = config.get("manifest") or {}
        lockfile = config.get("lockfile") or {}
        checker = config.get("checker") or {}
        logging_config = config.get("logging") or {}
        defaults = Settings()

        return Settings(
            json_output=bool(output.get("json", defaults.json_output)),
            plain=bool(output.get("plain", defaults.plain)),
            width=int(output.get("width", defaults.width)),
            limit=int((config.get("versions") or {}).get("limit", defaults.limit)),
            max_deps=int((config.get("dependencies") or {}).get("max", defaults.max_deps)),
            npm_executable=str(registry.get("command") or defaults.npm_executable),
            timeout=_optional_float(registry.get("timeout", defaults.timeout)),
            manifest_path=str(manifest.get("path") or defaults.manifest_path),
            lockfile_path=str(lockfile.get("path") or defaults.lockfile_path),
            tracked_package=str(lockfile.get("tracked_package") or defaults.tracked_package),
            checker_packages=tuple(checker.get("packages") or defaults.checker_packages),
            checker_versions=int(checker.get("versions", defaults.checker_versions)),
            log_level=str(logging_config.get("level") or defaults.log_level).upper(),
            log_file=logging_config.get("file", defaults.log_file),
        )

    def build_settings(self, config_path: Optional[str] = None, **overrides: Any) -> Settings:
        """Discover, merge and apply CLI overrides in one step."""
        config = self.discover_and_load_config(config_path)
        config = self.merge_config_and_args(config, **overrides)
        return self.to_settings(config)
