"""Tests for the command line."""

from unittest.mock import patch

import pytest
from click.testing import CliRunner

from dadi.cli import main
from dadi.config import Config, ConfigError, SectionConfig
from dadi.errors import InvalidFile


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def config(tmp_path):
    return Config(root_path=tmp_path, sections=[SectionConfig("Todo", persist=True)])


class TestToday:
    @patch("dadi.cli.open_today")
    @patch("dadi.cli.load_config")
    def test_default_command_is_today(self, mock_load, mock_open, runner, config):
        mock_load.return_value = config

        result = runner.invoke(main, [])

        assert result.exit_code == 0
        mock_open.assert_called_once_with(config)

    @patch("dadi.cli.open_today")
    @patch("dadi.cli.load_config")
    def test_journal_error_exits(self, mock_load, mock_open, runner, config):
        mock_load.return_value = config
        mock_open.side_effect = InvalidFile("/j/notes.txt", "not a markdown entry")

        result = runner.invoke(main, ["today"])

        assert result.exit_code == 1
        assert "Error: not a markdown entry: /j/notes.txt" in result.output

    @patch("dadi.cli.load_config")
    def test_config_error_exits(self, mock_load, runner):
        mock_load.side_effect = ConfigError("Config file not found: /x")

        result = runner.invoke(main, ["today"])

        assert result.exit_code == 1
        assert "Config file not found" in result.output


class TestCollate:
    @patch("dadi.cli.collate_days")
    @patch("dadi.cli.load_config")
    def test_default_days(self, mock_load, mock_collate, runner, config):
        mock_load.return_value = config

        result = runner.invoke(main, ["collate"])

        assert result.exit_code == 0
        mock_collate.assert_called_once_with(config, 7)

    @patch("dadi.cli.collate_days")
    @patch("dadi.cli.load_config")
    def test_explicit_days(self, mock_load, mock_collate, runner, config):
        mock_load.return_value = config
        runner.invoke(main, ["collate", "30"])
        mock_collate.assert_called_once_with(config, 30)

    def test_rejects_zero_days(self, runner):
        result = runner.invoke(main, ["collate", "0"])
        assert result.exit_code == 2


class TestErrors:
    @patch("dadi.cli.load_config")
    def test_unparsable_editor_exits(self, mock_load, runner, config, monkeypatch):
        mock_load.return_value = config
        monkeypatch.setenv("EDITOR", 'vim "unclosed')

        result = runner.invoke(main, ["today"])

        assert result.exit_code == 1
        assert "Error: Cannot parse $EDITOR" in result.output
        assert not list(config.root_path.iterdir())

    def test_unreadable_config_exits(self, runner, tmp_path, monkeypatch):
        monkeypatch.setattr("dadi.config.CONFIG_FILE", tmp_path)

        result = runner.invoke(main, ["today"])

        assert result.exit_code == 1
        assert "Cannot read config file" in result.output
