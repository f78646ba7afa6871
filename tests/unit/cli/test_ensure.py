"""Tests for CLI Ensure utility class."""

from pathlib import Path

import pytest

from cmdy.cli.ensure import Ensure
from cmdy.core.config_store import FakeConfigStore
from cmdy.core.types import CmdyConfig, CommandSet


class TestEnsureNotNone:
    """Tests for Ensure.not_none method."""

    def test_returns_value_when_not_none(self) -> None:
        assert Ensure.not_none("hello", "Value is None") == "hello"

    def test_exits_when_none(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            Ensure.not_none(None, "Value is None")
        assert exc_info.value.code == 1

    def test_error_message_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Ensure.not_none outputs error message with red Error prefix to stderr."""
        with pytest.raises(SystemExit):
            Ensure.not_none(None, "Custom error message")

        captured = capsys.readouterr()
        assert "Error:" in captured.err
        assert "Custom error message" in captured.err

    def test_falsy_values_are_not_none(self) -> None:
        assert Ensure.not_none(0, "Value is None") == 0
        assert Ensure.not_none("", "Value is None") == ""
        assert Ensure.not_none(False, "Value is None") is False


class TestEnsureNotEmpty:
    """Tests for Ensure.not_empty method."""

    def test_passes_for_non_empty(self) -> None:
        Ensure.not_empty(["make"], "No commands")
        Ensure.not_empty("name", "No name")

    @pytest.mark.parametrize("value", [None, "", [], ()])
    def test_exits_for_empty(self, value: str | list | tuple | None) -> None:
        with pytest.raises(SystemExit) as exc_info:
            Ensure.not_empty(value, "Empty")
        assert exc_info.value.code == 1


class TestEnsureDirectoryExists:
    """Tests for Ensure.directory_exists method."""

    def test_passes_for_directory(self, tmp_path: Path) -> None:
        Ensure.directory_exists(tmp_path)

    def test_exits_for_missing_path(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit):
            Ensure.directory_exists(tmp_path / "missing")
        assert "Directory not found" in capsys.readouterr().err

    def test_exits_for_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        file_path = tmp_path / "file.txt"
        file_path.write_text("x", encoding="utf-8")

        with pytest.raises(SystemExit):
            Ensure.directory_exists(file_path)
        assert "Not a directory" in capsys.readouterr().err


class TestEnsureConfigLoaded:
    """Tests for Ensure.config_loaded and config_loaded_or_empty."""

    def test_returns_config(self) -> None:
        config = CmdyConfig(command_sets=(CommandSet("Build", ("make",)),))

        assert Ensure.config_loaded(FakeConfigStore(config)) == config

    def test_missing_config_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            Ensure.config_loaded(FakeConfigStore())

        assert exc_info.value.code == 1
        assert "No config found at /fake/cmdy/config.json" in capsys.readouterr().err

    def test_missing_config_is_empty_when_allowed(self) -> None:
        assert Ensure.config_loaded_or_empty(FakeConfigStore()) == CmdyConfig.empty()

    def test_malformed_config_exits_even_when_missing_is_allowed(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit):
            Ensure.config_loaded_or_empty(FakeConfigStore(parse_error="bad json"))

        assert "bad json" in capsys.readouterr().err
