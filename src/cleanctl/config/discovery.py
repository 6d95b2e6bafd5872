"""Configuration record discovery and loading.

The record lives at ``~/.clean/cleanrc``. The CLEANCTL_CONFIG env var and
the ``--config`` CLI flag override that location.
"""

from __future__ import annotations

import os
from pathlib import Path

from cleanctl.config.models import ProjectConfig
from cleanctl.domain.errors import ConfigurationNotFound, StorageUnavailable

CONFIG_DIRNAME = ".clean"
CONFIG_FILENAME = "cleanrc"
CONFIG_ENV_VAR = "CLEANCTL_CONFIG"


def default_config_path() -> Path:
    """Where the record lives when nothing overrides it."""
    return Path.home() / CONFIG_DIRNAME / CONFIG_FILENAME


def find_config(override: str | Path | None = None) -> Path:
    """Resolve the record location: *override*, then CLEANCTL_CONFIG, then home.

    The returned path may not exist yet (``cleanctl init`` creates it).
    """
    if override:
        return Path(override)
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return default_config_path()


def load_config(path: Path | None = None) -> ProjectConfig:
    """Load and validate the record at *path* (default: :func:`find_config`).

    Raises:
        ConfigurationNotFound: the record is missing or malformed.
        StorageUnavailable: the record exists but cannot be read.
    """
    if path is None:
        path = find_config()
    if not path.is_file():
        msg = f"No configuration record at {path}; run 'cleanctl init' first"
        raise ConfigurationNotFound(msg)
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Cannot read configuration record {path}: {exc}"
        raise StorageUnavailable(msg) from exc
    try:
        return ProjectConfig.parse(raw)
    except ValueError as exc:
        msg = f"Malformed configuration record {path}: {exc}"
        raise ConfigurationNotFound(msg) from exc


def save_config(path: Path, config: ProjectConfig) -> None:
    """Write the record, creating its directory when needed.

    Raises:
        StorageUnavailable: the record cannot be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(config.render(), encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot write configuration record {path}: {exc}"
        raise StorageUnavailable(msg) from exc
