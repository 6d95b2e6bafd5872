"""The project configuration record.

A single line ``directory=<absolute path>/`` followed by a newline. It
records the base working directory that every ``add`` command resolves
unit paths against.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator

RECORD_KEY = "directory"


class ProjectConfig(BaseModel):
    """Parsed configuration record."""

    model_config = {"frozen": True}

    directory: str

    @field_validator("directory")
    @classmethod
    def _ensure_trailing_separator(cls, value: str) -> str:
        value = value.strip()
        if not value:
            msg = "directory must not be empty"
            raise ValueError(msg)
        return value if value.endswith(("/", "\\")) else f"{value}/"

    @classmethod
    def parse(cls, raw: str) -> ProjectConfig:
        """Parse the record text.

        Raises:
            ValueError: the text is not a ``directory=...`` record.
        """
        line = raw.split("\n", 1)[0].rstrip("\r")
        key, sep, value = line.partition("=")
        if not sep or key.strip() != RECORD_KEY:
            msg = f"Expected '{RECORD_KEY}=<path>', got {line!r}"
            raise ValueError(msg)
        return cls(directory=value)

    def render(self) -> str:
        return f"{RECORD_KEY}={self.directory}\n"
