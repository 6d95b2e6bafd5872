"""Tests for CleanSettings — unified settings with the cleanrc source."""

from pathlib import Path

import pytest

from cleanctl.config.settings import CleanSettings


class TestCleanSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no record and no env vars, all fields use code defaults."""
        settings = CleanSettings.from_cli(config_path=tmp_path / "missing")
        assert settings.base_dir is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.log_json is False

    def test_frozen(self, tmp_path: Path) -> None:
        settings = CleanSettings.from_cli(config_path=tmp_path / "missing")
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestCleanrcSource:
    def test_loads_base_dir(self, config_record: Path, project_root: Path) -> None:
        settings = CleanSettings.from_cli(config_path=config_record)
        assert settings.base_dir == f"{project_root}/"
        assert settings.config_path == config_record

    def test_env_config_location(
        self, config_record: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("CLEANCTL_CONFIG", str(config_record))
        settings = CleanSettings.from_cli()
        assert settings.config_path == config_record
        assert settings.base_dir is not None

    def test_malformed_record_ignored(self, tmp_path: Path) -> None:
        record = tmp_path / "cleanrc"
        record.write_text("garbage\n", encoding="utf-8")
        settings = CleanSettings.from_cli(config_path=record)
        assert settings.base_dir is None

    def test_undecodable_record_ignored(self, tmp_path: Path) -> None:
        record = tmp_path / "cleanrc"
        record.write_bytes(b"directory=/go/src/\xff/\n")
        assert CleanSettings.from_cli(config_path=record).base_dir is None

    def test_record_not_leaked_between_constructions(
        self, config_record: Path, tmp_path: Path
    ) -> None:
        CleanSettings.from_cli(config_path=config_record)
        settings = CleanSettings.from_cli(config_path=tmp_path / "missing")
        assert settings.base_dir is None


class TestPriority:
    def test_env_beats_record(
        self, config_record: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("CLEANCTL_BASE_DIR", "/go/src/from-env/")
        settings = CleanSettings.from_cli(config_path=config_record)
        assert settings.base_dir == "/go/src/from-env/"

    def test_cli_flags_beat_env(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("CLEANCTL_QUIET", "true")
        settings = CleanSettings.from_cli(config_path=tmp_path / "missing", quiet=False)
        assert settings.quiet is False

    def test_env_flag(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLEANCTL_VERBOSE", "1")
        settings = CleanSettings.from_cli(config_path=tmp_path / "missing")
        assert settings.verbose is True
