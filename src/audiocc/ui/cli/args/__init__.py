"""Command line argument handling package."""

from audiocc.ui.cli.args.parser import ArgumentParser
from audiocc.ui.cli.args.options import OrganizeArgs

__all__ = ["ArgumentParser", "OrganizeArgs"]
