"""Configuration loading for the Copilot session logger.

Settings come from three places, later ones winning:
1. Built-in defaults
2. An optional .toml or .json config file
3. The --workspaceRoot startup flag
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from . import __version__

# Python 3.11+ has tomllib in stdlib; older interpreters use tomli
try:
    import tomllib  # Python 3.11+
except ImportError:  # pragma: no cover
    import tomli as tomllib  # Python <3.11


DEFAULT_LOG_DIR = "copilot-session_log"
DEFAULT_TEMPLATE_NAME = "_TEMPLATE.md"
DEFAULT_MODEL_NAME = "GPT-5.2"

CONFIG_CANDIDATES = [
    "copilot_session.toml",
    "copilot_session.json",
    ".copilot_session.toml",
    ".copilot_session.json",
]


@dataclass
class LoggerConfig:
    """Startup configuration shared by every tool call."""

    # Startup-time override; None means "use the cwd at call time"
    workspace_root: Optional[Path] = None

    log_dir_name: str = DEFAULT_LOG_DIR
    template_name: str = DEFAULT_TEMPLATE_NAME
    model_name: str = DEFAULT_MODEL_NAME

    server_name: str = "copilot-session-logger"
    server_version: str = __version__

    def resolve_workspace_root(self, explicit: Optional[str] = None) -> Path:
        """Pick the workspace root for one call.

        Precedence: explicit per-call value, then the startup override,
        then the current working directory.
        """
        if explicit:
            return Path(os.path.abspath(explicit))
        if self.workspace_root is not None:
            return Path(os.path.abspath(self.workspace_root))
        return Path(os.getcwd())

    def get_log_root(self, workspace_root: Path) -> Path:
        return workspace_root / self.log_dir_name


def load_toml_config(path: Path) -> dict[str, Any]:
    """Load configuration from TOML file."""
    with open(path, "rb") as f:
        return tomllib.load(f)


def load_json_config(path: Path) -> dict[str, Any]:
    """Load configuration from JSON file."""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def dict_to_config(data: dict[str, Any], workspace_root: Optional[Path] = None) -> LoggerConfig:
    """Convert dictionary to LoggerConfig."""
    config = LoggerConfig(workspace_root=workspace_root)

    section = data.get("logger", {})
    if "log_dir" in section:
        config.log_dir_name = section["log_dir"]
    if "template" in section:
        config.template_name = section["template"]
    if "model" in section:
        config.model_name = section["model"]

    return config


def find_config_file(directory: Path) -> Optional[Path]:
    """Find a configuration file in the given directory.

    Search order:
    1. copilot_session.toml
    2. copilot_session.json
    3. .copilot_session.toml
    4. .copilot_session.json
    """
    for name in CONFIG_CANDIDATES:
        path = directory / name
        if path.exists():
            return path

    return None


def load_config(
    config_path: Optional[Path] = None,
    workspace_root: Optional[Path] = None,
) -> LoggerConfig:
    """Load logger configuration.

    Args:
        config_path: Optional explicit path to config file
        workspace_root: Startup workspace root override, if any

    Returns:
        LoggerConfig instance
    """
    if config_path is None:
        config_path = find_config_file(workspace_root or Path(os.getcwd()))

    if config_path is None:
        return LoggerConfig(workspace_root=workspace_root)

    suffix = config_path.suffix.lower()

    if suffix == ".toml":
        return dict_to_config(load_toml_config(config_path), workspace_root)

    elif suffix == ".json":
        return dict_to_config(load_json_config(config_path), workspace_root)

    else:
        raise ValueError(f"Unsupported config file type: {suffix}")
