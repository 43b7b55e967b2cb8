"""Configuration management for audiocc."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

from audiocc.platform.logging import logger
from audiocc.shared.errors import ConfigError

DEFAULT_BITRATE: str = "V0"


def _default_workers() -> int:
    return os.cpu_count() or 1


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion."""
    return field(default=default, metadata={"path": True})


@dataclass(frozen=True)
class Config:
    """Run configuration passed explicitly into every component."""

    # Without write, nothing on disk is changed; intent is only logged
    write: bool = False
    # Reprocess even when path-derived and embedded metadata already match
    force: bool = False
    # Top-level folder is the artist; destinations become Artist/Year/Album
    collection: bool = False
    # Skip bundles whose folder name already carries a year and album
    fast: bool = False
    artist: str = ""
    bitrate: str = DEFAULT_BITRATE
    fix: bool = False
    workers: int = field(default_factory=_default_workers)
    log_file: Path | None = _path_field()

    def __post_init__(self) -> None:
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                object.__setattr__(self, f.name, Path(value) if value else None)
        if self.workers < 1:
            raise ConfigError(f"workers must be at least 1, got {self.workers}")
        if not self.bitrate:
            raise ConfigError("bitrate cannot be empty")

    def with_overrides(self, **overrides: Any) -> Config:
        """Return a copy with every non-None override applied."""

        applied = {key: value for key, value in overrides.items() if value is not None}
        unknown = set(applied) - {f.name for f in fields(self)}
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")
        return replace(self, **applied)

    @classmethod
    def load(cls, path: Path | None) -> Config:
        """Load configuration from a TOML file.

        Args:
            path: TOML file to read. A missing file yields the defaults.

        Returns:
            Config: Loaded configuration object.

        Raises:
            ConfigError: If the file is unreadable, malformed or has unknown keys.
        """
        if path is None or not path.exists():
            return cls()

        try:
            with open(path, "rb") as f:
                config_dict = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.error("Failed to load configuration: %s", e)
            raise ConfigError(f"Cannot read configuration {path}: {e}") from e

        known = {f.name for f in fields(cls)}
        unknown = set(config_dict) - known
        if unknown:
            raise ConfigError(
                f"Unknown keys in {path}: {', '.join(sorted(unknown))}"
            )

        try:
            instance = cls(**config_dict)
        except TypeError as e:
            raise ConfigError(f"Invalid configuration in {path}: {e}") from e
        logger.debug("Configuration loaded from %s", path)
        return instance


__all__ = ["Config", "DEFAULT_BITRATE"]
