"""Tests for context creation."""

from pathlib import Path

import pytest

from cmdy.core.command_runner import RealCommandRunner
from cmdy.core.config_store import RealConfigStore
from cmdy.core.context import CmdyContext, create_context
from cmdy.core.log_writer import FileLogWriter
from tests.fakes.command_runner import FakeCommandRunner


def test_create_context_uses_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CMDY_HOME", str(tmp_path))
    (tmp_path / "settings.toml").write_text(
        f'log_path = "{tmp_path / "logs" / "run.log"}"\nshell = "bash"\n', encoding="utf-8"
    )
    monkeypatch.chdir(tmp_path)

    ctx = create_context()

    assert ctx.cwd == tmp_path
    assert isinstance(ctx.config_store, RealConfigStore)
    assert ctx.config_store.path() == tmp_path / "config.json"
    assert isinstance(ctx.log_writer, FileLogWriter)
    assert ctx.log_writer.path() == tmp_path / "logs" / "run.log"
    assert isinstance(ctx.runner, RealCommandRunner)
    assert ctx.runner.shell == "bash"


def test_create_context_rejects_malformed_settings(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("CMDY_HOME", str(tmp_path))
    (tmp_path / "settings.toml").write_text("shell = [", encoding="utf-8")

    with pytest.raises(ValueError):
        create_context()


def test_for_test_defaults_to_fakes() -> None:
    ctx = CmdyContext.for_test()

    assert isinstance(ctx.runner, FakeCommandRunner)
    assert ctx.cwd == Path("/test/default/cwd")
    assert not ctx.config_store.exists()


def test_executor_uses_context_runner() -> None:
    runner = FakeCommandRunner()
    ctx = CmdyContext.for_test(runner=runner)

    ctx.executor.run(["make"], Path("/w"), "Build")

    assert runner.commands_run == ["make"]
