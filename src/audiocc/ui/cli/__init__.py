"""Command line interface package."""

from audiocc.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
