"""CleanSettings: everything one cleanctl run needs to know.

A value given on the command line wins over a ``CLEANCTL_*`` environment
variable, which wins over the ``directory=...`` line of the cleanrc record.
Fields nobody sets keep their defaults.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from cleanctl.config.discovery import find_config, load_config
from cleanctl.domain.errors import ScaffoldError

logger = logging.getLogger(__name__)


class CleanrcSettingsSource(PydanticBaseSettingsSource):
    """Read ``base_dir`` from the one-line cleanrc record.

    A missing or malformed record contributes nothing; operations that
    need the base directory report it as a configuration error later.
    """

    def __init__(self, settings_cls: type[BaseSettings], record_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if record_path and record_path.is_file():
            try:
                self._data = {"base_dir": load_config(record_path).directory}
            except ScaffoldError:
                logger.debug("Ignoring unusable config record %s", record_path, exc_info=True)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        return self._data


# Record path handed from from_cli to settings_customise_sources.
_tls = threading.local()


class CleanSettings(BaseSettings):
    """Settings for one cleanctl invocation, frozen after construction.

    Attributes:
        config_path: Location of the cleanrc record (may not exist yet).
        base_dir: Project base directory from the record, or None when
            no usable record exists.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "CLEANCTL_",
    }

    config_path: Path = Field(default_factory=find_config)
    base_dir: str | None = None

    # Global flags
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the cleanrc source between env vars and defaults."""
        record_path = getattr(_tls, "record_path", None)
        return (
            init_settings,
            env_settings,
            CleanrcSettingsSource(settings_cls, record_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | Path | None = None,
        **cli_flags: Any,
    ) -> CleanSettings:
        """Construct settings from a CLI invocation.

        Resolves the record location (explicit *config_path*, then
        CLEANCTL_CONFIG, then ``~/.clean/cleanrc``) and merges CLI flags
        as highest-priority overrides.
        """
        record_path = find_config(config_path)
        _tls.record_path = record_path
        try:
            return cls(config_path=record_path, **cli_flags)
        finally:
            _tls.record_path = None
