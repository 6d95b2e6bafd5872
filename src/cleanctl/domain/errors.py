"""Error kinds raised by the scaffolding engine.

Each error carries a stable ``code`` that the service layer copies into
step outcomes and ServiceError payloads. "Already present" is not an
error: the idempotency guard reports it as an ``unchanged`` step.
"""

from __future__ import annotations


class ScaffoldError(Exception):
    """Base class for engine failures."""

    code = "SCAFFOLD_ERROR"


class StorageUnavailable(ScaffoldError):
    """Reading or writing a unit (or the configuration record) failed."""

    code = "STORAGE_UNAVAILABLE"


class StructureNotFound(ScaffoldError):
    """An interface or struct declaration could not be located."""

    code = "STRUCTURE_NOT_FOUND"


class ConfigurationNotFound(ScaffoldError):
    """No usable configuration record, or no source root in its base path."""

    code = "CONFIG_NOT_FOUND"


class TemplateUnusable(ScaffoldError):
    """A unit template (usually a project override) failed to load or render."""

    code = "TEMPLATE_ERROR"
