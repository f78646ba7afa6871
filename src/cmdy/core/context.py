"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from cmdy.core.command_runner import CommandRunner, RealCommandRunner
from cmdy.core.config_store import ConfigStore, RealConfigStore
from cmdy.core.executor import Executor
from cmdy.core.log_writer import FileLogWriter, LogWriter
from cmdy.core.prompter import ClickPrompter, Prompter
from cmdy.core.settings import Settings, load_settings
from cmdy.core.time.abc import Time
from cmdy.core.time.real import RealTime


@dataclass(frozen=True)
class CmdyContext:
    """Immutable context holding all dependencies for cmdy operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    config_store: ConfigStore
    runner: CommandRunner
    log_writer: LogWriter
    prompter: Prompter
    time: Time
    settings: Settings
    cwd: Path  # Current working directory at CLI invocation

    @property
    def executor(self) -> Executor:
        return Executor(self.runner, self.time)

    @staticmethod
    def for_test(
        config_store: ConfigStore | None = None,
        runner: CommandRunner | None = None,
        log_writer: LogWriter | None = None,
        prompter: Prompter | None = None,
        time: Time | None = None,
        settings: Settings | None = None,
        cwd: Path | None = None,
    ) -> "CmdyContext":
        """Create test context with optional pre-configured dependencies.

        Anything not provided is replaced by an empty fake, so tests never
        touch the real config, log, or shell by accident.

        Example:
            >>> runner = FakeCommandRunner(exit_codes={"false": 1})
            >>> ctx = CmdyContext.for_test(runner=runner, cwd=Path("/tmp"))
        """
        from tests.fakes.command_runner import FakeCommandRunner
        from tests.fakes.log_writer import FakeLogWriter
        from tests.fakes.prompter import FakePrompter
        from tests.fakes.time import FakeTime

        from cmdy.core.config_store import FakeConfigStore

        return CmdyContext(
            config_store=config_store if config_store is not None else FakeConfigStore(),
            runner=runner if runner is not None else FakeCommandRunner(),
            log_writer=log_writer if log_writer is not None else FakeLogWriter(),
            prompter=prompter if prompter is not None else FakePrompter(),
            time=time if time is not None else FakeTime(),
            settings=settings
            if settings is not None
            else Settings(
                config_path=Path("/fake/cmdy/config.json"),
                log_path=Path("/fake/cmdy/cmdy.log"),
                shell="sh",
            ),
            cwd=cwd if cwd is not None else Path("/test/default/cwd"),
        )


def create_context() -> CmdyContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Raises:
        ValueError: If the settings file is malformed
    """
    settings = load_settings()
    return CmdyContext(
        config_store=RealConfigStore(settings.config_path),
        runner=RealCommandRunner(settings.shell),
        log_writer=FileLogWriter(settings.log_path),
        prompter=ClickPrompter(),
        time=RealTime(),
        settings=settings,
        cwd=Path.cwd(),
    )
