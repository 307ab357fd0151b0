"""Tests for ShellSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from hkgshell.config.settings import ShellSettings


class TestShellSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = ShellSettings.from_cli(start_dir=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.verbose is False
        assert settings.build.semver is None
        assert settings.build.minutes_env == "BUILD_MINUTES"
        assert settings.menu.enabled is True

    def test_frozen(self, tmp_path: Path) -> None:
        settings = ShellSettings.from_cli(start_dir=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "hkgshell.toml"
        toml.write_text('[build]\nsemver = "1.4.0"\n[menu]\nenabled = false\n')
        settings = ShellSettings.from_cli(start_dir=tmp_path)
        assert settings.build.semver == "1.4.0"
        assert settings.menu.enabled is False
        assert settings.config_path == toml.resolve()

    def test_walk_up_discovery(self, tmp_path: Path) -> None:
        (tmp_path / "hkgshell.toml").write_text('[build]\nminutes_env = "STAMP"\n')
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        settings = ShellSettings.from_cli(start_dir=nested)
        assert settings.build.minutes_env == "STAMP"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[menu]\nenabled = false\n")
        settings = ShellSettings.from_cli(config_path=str(custom))
        assert settings.menu.enabled is False
        assert settings.config_path == custom

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "hkgshell.toml").write_text("[build\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            ShellSettings.from_cli(start_dir=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "hkgshell.toml").write_text('[build]\nsemver = "1.0.0"\n')
        monkeypatch.setenv("HKGSHELL_BUILD__SEMVER", "2.0.0")
        settings = ShellSettings.from_cli(start_dir=tmp_path)
        assert settings.build.semver == "2.0.0"

    def test_cli_flags_override_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HKGSHELL_VERBOSE", "true")
        settings = ShellSettings.from_cli(start_dir=tmp_path, verbose=False)
        assert settings.verbose is False

    def test_env_flag_without_cli(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HKGSHELL_LOG_JSON", "1")
        settings = ShellSettings.from_cli(start_dir=tmp_path)
        assert settings.log_json is True
