"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import final

from audiocc.config.config import Config


@final
@dataclass(slots=True)
class OrganizeArgs:
    """Parsed command line for one collection run."""

    directory: Path
    config: Config
    config_path: Path
    verbose: bool
    quiet: bool


__all__ = ["OrganizeArgs"]
