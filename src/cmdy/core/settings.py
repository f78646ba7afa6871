"""User-level settings locating the config file, log file and shell.

Settings live in $CMDY_HOME/settings.toml (default ~/.cmdy/settings.toml).
A missing file means all defaults. Loaded once at the CLI entry point and
stored in CmdyContext.
"""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

import tomlkit

SETTINGS_KEYS = ("config_path", "log_path", "shell")

DEFAULT_SHELL = "sh"


@dataclass(frozen=True)
class Settings:
    """Immutable settings data.

    All fields are read-only after construction.
    """

    config_path: Path
    log_path: Path
    shell: str

    def get(self, key: str) -> str:
        match key:
            case "config_path":
                return str(self.config_path)
            case "log_path":
                return str(self.log_path)
            case "shell":
                return self.shell
            case _:
                raise KeyError(key)


def cmdy_home() -> Path:
    """Directory holding settings, config and log by default.

    Honors the CMDY_HOME environment variable.
    """
    override = os.environ.get("CMDY_HOME")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".cmdy"


def settings_path() -> Path:
    return cmdy_home() / "settings.toml"


def default_settings() -> Settings:
    home = cmdy_home()
    return Settings(
        config_path=home / "config.json",
        log_path=home / "cmdy.log",
        shell=DEFAULT_SHELL,
    )


def load_settings(path: Path | None = None) -> Settings:
    """Load settings, falling back to defaults for missing keys.

    Args:
        path: Settings file path (defaults to $CMDY_HOME/settings.toml)

    Returns:
        Settings instance with loaded values

    Raises:
        ValueError: If the file is not valid TOML or a value has the wrong type
    """
    settings_file = path if path is not None else settings_path()
    defaults = default_settings()
    if not settings_file.exists():
        return defaults

    try:
        data = tomllib.loads(settings_file.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Failed to parse {settings_file}: {e}") from e

    for key in SETTINGS_KEYS:
        if key in data and not isinstance(data[key], str):
            raise ValueError(f"'{key}' must be a string in {settings_file}")

    config_path = data.get("config_path")
    log_path = data.get("log_path")
    return Settings(
        config_path=Path(config_path).expanduser() if config_path else defaults.config_path,
        log_path=Path(log_path).expanduser() if log_path else defaults.log_path,
        shell=data.get("shell") or defaults.shell,
    )


def save_setting(key: str, value: str, path: Path | None = None) -> None:
    """Write a single settings key, preserving the rest of the file.

    Uses tomlkit so existing comments and formatting survive.

    Raises:
        KeyError: If key is not a known settings key
    """
    if key not in SETTINGS_KEYS:
        raise KeyError(key)

    settings_file = path if path is not None else settings_path()
    if settings_file.exists():
        doc = tomlkit.parse(settings_file.read_text(encoding="utf-8"))
    else:
        doc = tomlkit.document()
        doc.add(tomlkit.comment("cmdy settings"))

    doc[key] = value

    settings_file.parent.mkdir(parents=True, exist_ok=True)
    settings_file.write_text(tomlkit.dumps(doc), encoding="utf-8")
