"""Tests for the hookit command line."""

import sys
from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from hookit.cli import _parse_value, cli

EXAMPLES = Path(__file__).parent.parent / "examples"


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def example_config(monkeypatch):
    # Only the config file's location may make routes_plugin importable
    blocked = {"", ".", str(EXAMPLES), str(EXAMPLES.resolve()), str(Path.cwd())}
    monkeypatch.setattr(sys, "path", [p for p in sys.path if p not in blocked])
    monkeypatch.delitem(sys.modules, "routes_plugin", raising=False)
    return str(EXAMPLES / "hookit.yaml")


class TestParseValue:
    def test_yaml_values(self):
        assert _parse_value("['/', '/admin']") == ["/", "/admin"]
        assert _parse_value("3") == 3
        assert _parse_value("plain") == "plain"

    def test_invalid_yaml_is_kept_as_string(self):
        assert _parse_value("[unclosed") == "[unclosed"


class TestInit:
    def test_writes_starter_config(self, runner, tmp_path):
        config_path = tmp_path / "hookit.yaml"

        result = runner.invoke(cli, ["--config", str(config_path), "init"])

        assert result.exit_code == 0
        assert "Wrote" in result.output
        assert yaml.safe_load(config_path.read_text())["hooks"][0]["name"] == "example"

    def test_refuses_to_overwrite(self, runner, tmp_path):
        config_path = tmp_path / "hookit.yaml"
        config_path.write_text("hooks: []\n")

        result = runner.invoke(cli, ["--config", str(config_path), "init"])

        assert result.exit_code != 0
        assert "already exists" in result.output
        assert config_path.read_text() == "hooks: []\n"

    def test_force_overwrites(self, runner, tmp_path):
        config_path = tmp_path / "hookit.yaml"
        config_path.write_text("hooks: []\n")

        result = runner.invoke(cli, ["--config", str(config_path), "init", "--force"])

        assert result.exit_code == 0
        assert "example" in config_path.read_text()


class TestConfigCommand:
    def test_shows_declarations(self, runner, example_config):
        result = runner.invoke(cli, ["--config", example_config, "config"])

        assert result.exit_code == 0
        assert "routes" in result.output
        assert "helpers" in result.output
        assert "routes_plugin" in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(cli, ["--config", str(tmp_path / "none.yaml"), "config"])

        assert result.exit_code == 0
        assert "not found" in result.output


class TestList:
    def test_lists_hook_points(self, runner, example_config):
        result = runner.invoke(cli, ["--config", example_config, "list"])

        assert result.exit_code == 0
        assert "routes" in result.output
        assert "sync" in result.output
        assert "helpers" in result.output
        assert "example" in result.output

    def test_empty_config(self, runner, tmp_path):
        result = runner.invoke(cli, ["--config", str(tmp_path / "none.yaml"), "list"])

        assert result.exit_code == 0
        assert "No hook points registered" in result.output

    def test_bad_config_exits_with_error(self, runner, tmp_path):
        config_path = tmp_path / "hookit.yaml"
        config_path.write_text(yaml.dump({"hooks": [{"name": "a"}, {"name": "a"}]}))

        result = runner.invoke(cli, ["--config", str(config_path), "list"])

        assert result.exit_code == 1
        assert "Duplicate hook" in result.output


class TestRun:
    def test_runs_sync_hook(self, runner, example_config):
        result = runner.invoke(cli, ["--config", example_config, "run", "routes", "['/']"])

        assert result.exit_code == 0
        assert "routes resolved" in result.output
        assert "/health" in result.output
        assert "/metrics" in result.output

    def test_runs_async_hook_with_resolver(self, runner, example_config):
        result = runner.invoke(cli, ["--config", example_config, "run", "helpers"])

        assert result.exit_code == 0
        assert "asset_url" in result.output
        assert "format_date" in result.output

    def test_runs_from_config_directory(self, runner, example_config, monkeypatch):
        monkeypatch.chdir(EXAMPLES)

        result = runner.invoke(cli, ["--config", "hookit.yaml", "run", "routes", "['/']"])

        assert result.exit_code == 0, result.output
        assert "/health" in result.output

    def test_plugin_import_failure_is_rendered(self, runner, tmp_path, monkeypatch):
        (tmp_path / "hookit_cli_broken.py").write_text("raise RuntimeError('no settings')\n")
        config_path = tmp_path / "hookit.yaml"
        config_path.write_text(yaml.dump({
            "hooks": [{"name": "words"}],
            "plugins": [{"module": "hookit_cli_broken"}],
        }))
        monkeypatch.setattr(sys, "path", list(sys.path))
        monkeypatch.delitem(sys.modules, "hookit_cli_broken", raising=False)

        result = runner.invoke(cli, ["--config", str(config_path), "run", "words"])

        assert result.exit_code == 1
        assert "no settings" in result.output
        assert isinstance(result.exception, SystemExit)
        assert "Traceback" not in result.output

    def test_handler_errors_are_listed(self, runner, example_config):
        # The example handlers cannot unpack an int accumulator
        result = runner.invoke(cli, ["--config", example_config, "run", "routes", "42"])

        assert result.exit_code == 0
        assert "TypeError" in result.output

    def test_unknown_hook(self, runner, example_config):
        result = runner.invoke(cli, ["--config", example_config, "run", "missing"])

        assert result.exit_code == 1
        assert "Hook missing doesn't exist" in result.output

    def test_verbose_flag(self, runner, example_config):
        result = runner.invoke(cli, ["--config", example_config, "--verbose", "run", "helpers"])

        assert result.exit_code == 0
