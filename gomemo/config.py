"""Configuration management for go-memo."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from loguru import logger

CONFIG_DIRNAME = "go-memo"
MEMO_DIRNAME = "memo"
CONFIG_FILENAME = "config.toml"
CONFIG_SECTION = "go-memo"


class ConfigError(RuntimeError):
    """Base error for configuration related issues."""


class InvalidConfigError(ConfigError):
    """Raised when ``config.toml`` is malformed or holds invalid values."""


class DirectoryCreationError(ConfigError):
    """Raised when the config or memo directory cannot be created."""

    def __init__(self, path: Path, reason: OSError) -> None:
        super().__init__(f"Could not create directory {path}: {reason}")
        self.path = path


@dataclass(frozen=True, slots=True)
class Settings:
    """Snapshot of the environment variables go-memo depends on."""

    xdg_config_home: str | None = None
    home: str | None = None
    editor: str | None = None

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            xdg_config_home=env.get("XDG_CONFIG_HOME"),
            home=env.get("HOME"),
            editor=env.get("EDITOR"),
        )


@dataclass(frozen=True, slots=True)
class MemoConfig:
    """Values read from the optional ``config.toml``."""

    memo_dir: Path | None = None


@dataclass(frozen=True, slots=True)
class MemoPaths:
    """Directories resolved for a run."""

    config_dir: Path
    memo_dir: Path


def config_root(settings: Settings) -> Path:
    """Return the base configuration directory (before ``go-memo``)."""

    if settings.xdg_config_home:
        return Path(settings.xdg_config_home)
    if settings.home:
        return Path(settings.home) / ".config"
    raise ConfigError(
        "Cannot locate a configuration directory: neither XDG_CONFIG_HOME "
        "nor HOME is set."
    )


def config_dir(settings: Settings) -> Path:
    return config_root(settings) / CONFIG_DIRNAME


def load_config(config_dir: Path) -> MemoConfig:
    """Load ``config.toml`` from ``config_dir`` if it exists.

    A missing file yields the defaults. Relative ``memo_dir`` values are
    resolved against ``config_dir``.

    Raises
    ------
    InvalidConfigError
        If the file is not valid TOML or settings have the wrong type.
    """

    config_path = config_dir / CONFIG_FILENAME
    if not config_path.is_file():
        return MemoConfig()

    try:
        with config_path.open("rb") as fh:
            raw = tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise InvalidConfigError(f"Invalid TOML in {config_path}: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise InvalidConfigError(f"Could not read {config_path}: {exc}") from exc

    section = raw.get(CONFIG_SECTION, {})
    if not isinstance(section, dict):
        raise InvalidConfigError(f"'{CONFIG_SECTION}' must be a table")

    memo_dir: Path | None = None
    memo_dir_raw = section.get("memo_dir")
    if isinstance(memo_dir_raw, str):
        memo_dir_str = memo_dir_raw.strip()
        if memo_dir_str:
            md = Path(memo_dir_str).expanduser()
            memo_dir = md if md.is_absolute() else config_dir / md
    elif memo_dir_raw is not None:
        raise InvalidConfigError("'memo_dir' must be a string when provided")

    return MemoConfig(memo_dir=memo_dir)


def ensure_directory(path: Path) -> Path:
    """Create ``path`` and its parents unless it already exists."""

    if path.is_dir():
        return path
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreationError(path, exc) from exc
    logger.debug("Created directory {}", path)
    return path


def locate_paths(settings: Settings) -> MemoPaths:
    """Resolve and create the config and memo directories."""

    base_dir = ensure_directory(config_dir(settings))
    config = load_config(base_dir)
    memo_dir = ensure_directory(config.memo_dir or base_dir / MEMO_DIRNAME)
    return MemoPaths(config_dir=base_dir, memo_dir=memo_dir)
