"""Tests for the ``menu`` command group."""

import json

from click.testing import CliRunner

from hkgshell.cli import cli


class TestMenuList:
    def test_lists_entries(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["menu", "list"])
        assert result.exit_code == 0
        assert "Concept-Centric Layout" in result.output
        assert "toggle_sidebar" in result.output
        assert "7 items" in result.output

    def test_quiet_ids(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "menu", "list"])
        assert result.stdout.strip().splitlines() == [
            "about",
            "set_layout_concept",
            "set_layout_sphere",
            "set_layout_grid",
            "toggle_xray",
            "reset_camera",
            "toggle_sidebar",
        ]


class TestMenuActivate:
    def test_sphere(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "menu", "activate", "set_layout_sphere"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert data["event"] == "set-layout"
        assert data["payload"] == "sphere"

    def test_unknown_is_not_an_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["menu", "activate", "nonexistent"])
        assert result.exit_code == 0
        assert "nothing" in result.output

    def test_disabled_menu_fails(self, cli_runner: CliRunner, tmp_path) -> None:
        (tmp_path / "hkgshell.toml").write_text("[menu]\nenabled = false\n")
        result = cli_runner.invoke(cli, ["menu", "list"])
        assert result.exit_code == 1
        assert "No native menu" in result.output
