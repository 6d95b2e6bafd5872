"""Shared pytest fixtures and test helpers for cleanctl tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from cleanctl.config.settings import CleanSettings
from cleanctl.infrastructure.project import Project


@pytest.fixture(autouse=True)
def _no_user_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep every test away from the real ``~/.clean/cleanrc``."""
    monkeypatch.setenv("CLEANCTL_CONFIG", str(tmp_path / "unset" / "cleanrc"))
    monkeypatch.delenv("CLEANCTL_BASE_DIR", raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """A project directory inside a GOPATH-style ``src`` tree (import prefix ``shop/``)."""
    root = tmp_path / "go" / "src" / "shop"
    root.mkdir(parents=True)
    return root


@pytest.fixture
def config_record(tmp_path: Path, project_root: Path) -> Path:
    """A cleanrc record pointing at :func:`project_root`."""
    record = tmp_path / "home" / ".clean" / "cleanrc"
    record.parent.mkdir(parents=True)
    record.write_text(f"directory={project_root}/\n", encoding="utf-8")
    return record


@pytest.fixture
def settings(config_record: Path) -> CleanSettings:
    return CleanSettings.from_cli(config_path=config_record)


@pytest.fixture
def project(settings: CleanSettings) -> Project:
    """Project bound to :func:`project_root` through the config record."""
    return Project(settings)


@pytest.fixture
def _isolated_config(config_record: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Point the CLI at :func:`config_record` via CLEANCTL_CONFIG.

    Use via ``@pytest.mark.usefixtures("_isolated_config")`` on command
    test classes.
    """
    monkeypatch.setenv("CLEANCTL_CONFIG", str(config_record))


# ---------------------------------------------------------------------------
# Shared test helpers (used across service test modules)
# ---------------------------------------------------------------------------


def declare(project: Project, owner: str) -> dict[str, Any]:
    """Declare an interactor via ScaffoldService, asserting success."""
    from cleanctl.services.scaffold import ScaffoldService

    result = ScaffoldService(project).declare_interactor(owner)
    assert result.ok, result.error
    return result.data


def attach(project: Project, use_case: str, owner: str) -> dict[str, Any]:
    """Attach a use-case via ScaffoldService, asserting success."""
    from cleanctl.services.scaffold import ScaffoldService

    result = ScaffoldService(project).attach_usecase(use_case, owner)
    assert result.ok, result.error
    return result.data


def statuses(data: dict[str, Any]) -> dict[str, str]:
    """Map kind -> status from a scaffold result payload."""
    return {step["kind"]: step["status"] for step in data["steps"]}


def unit_text(project_root: Path, rel: str) -> str:
    """Read a generated unit relative to the project root, keeping newlines as-is."""
    with (project_root / rel).open(encoding="utf-8", newline="") as fh:
        return fh.read()
