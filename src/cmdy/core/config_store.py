"""Command-set config storage.

Provides the ConfigStore interface used by the CLI to read and write
directories and command sets, with a JSON file implementation for production
and an in-memory implementation for tests.
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from cmdy.core.errors import ConfigNotFoundError, ConfigParseError
from cmdy.core.types import CmdyConfig, CommandSet

logger = logging.getLogger(__name__)


class ConfigStore(ABC):
    """Abstract interface for command-set config access.

    Loaded once per CLI invocation and passed explicitly through CmdyContext.
    """

    @abstractmethod
    def exists(self) -> bool:
        """Check if the config exists."""
        ...

    @abstractmethod
    def load(self) -> CmdyConfig:
        """Load the config.

        Returns:
            CmdyConfig with all directories and command sets

        Raises:
            ConfigNotFoundError: If the config doesn't exist
            ConfigParseError: If the config is malformed
        """
        ...

    @abstractmethod
    def save(self, config: CmdyConfig) -> None:
        """Persist the config, replacing the previous contents."""
        ...

    @abstractmethod
    def path(self) -> Path:
        """Get the path to the config file (for error messages)."""
        ...

    def load_or_empty(self) -> CmdyConfig:
        """Load the config, or an empty one if it doesn't exist yet.

        Raises:
            ConfigParseError: If the config exists but is malformed
        """
        if not self.exists():
            return CmdyConfig.empty()
        return self.load()


def parse_config(data: Any, source: Path) -> CmdyConfig:
    """Validate decoded JSON and build a CmdyConfig.

    Missing top-level keys default to empty lists.

    Raises:
        ConfigParseError: If types are wrong or set names repeat
    """
    if not isinstance(data, dict):
        raise ConfigParseError(f"Expected a JSON object at the top level of {source}")

    directories = data.get("directories", [])
    if not isinstance(directories, list) or not all(isinstance(d, str) for d in directories):
        raise ConfigParseError(f"'directories' must be a list of strings in {source}")

    raw_sets = data.get("command_sets", [])
    if not isinstance(raw_sets, list):
        raise ConfigParseError(f"'command_sets' must be a list in {source}")

    config = CmdyConfig(directories=tuple(directories), command_sets=())
    for index, raw in enumerate(raw_sets):
        if not isinstance(raw, dict):
            raise ConfigParseError(f"command_sets[{index}] must be an object in {source}")
        name = raw.get("name")
        commands = raw.get("commands", [])
        if not isinstance(name, str) or not name:
            raise ConfigParseError(f"command_sets[{index}] is missing a 'name' in {source}")
        if not isinstance(commands, list) or not all(isinstance(c, str) for c in commands):
            raise ConfigParseError(
                f"'commands' of command set '{name}' must be a list of strings in {source}"
            )
        if config.find_command_set(name) is not None:
            raise ConfigParseError(f"Duplicate command set name '{name}' in {source}")
        config = config.with_command_set(CommandSet(name=name, commands=tuple(commands)))
    return config


def serialize_config(config: CmdyConfig) -> str:
    data = {
        "directories": list(config.directories),
        "command_sets": [
            {"name": command_set.name, "commands": list(command_set.commands)}
            for command_set in config.command_sets
        ],
    }
    return json.dumps(data, indent=2) + "\n"


class RealConfigStore(ConfigStore):
    """Production implementation that reads/writes the JSON config file."""

    def __init__(self, config_path: Path) -> None:
        self._config_path = config_path

    def exists(self) -> bool:
        return self._config_path.exists()

    def load(self) -> CmdyConfig:
        if not self._config_path.exists():
            raise ConfigNotFoundError(f"Config not found at {self._config_path}")

        try:
            text = self._config_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigParseError(f"Failed to read {self._config_path}: {e}") from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ConfigParseError(f"Failed to parse {self._config_path}: {e}") from e

        config = parse_config(data, self._config_path)
        logger.debug(
            "Loaded config: path=%s, directories=%d, command_sets=%d",
            self._config_path,
            len(config.directories),
            len(config.command_sets),
        )
        return config

    def save(self, config: CmdyConfig) -> None:
        self._config_path.parent.mkdir(parents=True, exist_ok=True)
        self._config_path.write_text(serialize_config(config), encoding="utf-8")
        logger.debug("Saved config: path=%s", self._config_path)

    def path(self) -> Path:
        return self._config_path


class FakeConfigStore(ConfigStore):
    """Test implementation that keeps the config in memory."""

    def __init__(self, config: CmdyConfig | None = None, *, parse_error: str | None = None) -> None:
        """Initialize in-memory store.

        Args:
            config: Initial config state (None = config doesn't exist)
            parse_error: If set, load() raises ConfigParseError with this message
        """
        self._config = config
        self._parse_error = parse_error
        self._save_count = 0

    @property
    def config(self) -> CmdyConfig | None:
        """Current stored config, for test assertions."""
        return self._config

    @property
    def save_count(self) -> int:
        """Number of save() calls, for test assertions."""
        return self._save_count

    def exists(self) -> bool:
        return self._config is not None or self._parse_error is not None

    def load(self) -> CmdyConfig:
        if self._parse_error is not None:
            raise ConfigParseError(self._parse_error)
        if self._config is None:
            raise ConfigNotFoundError(f"Config not found at {self.path()}")
        return self._config

    def save(self, config: CmdyConfig) -> None:
        self._config = config
        self._save_count += 1

    def path(self) -> Path:
        return Path("/fake/cmdy/config.json")
