"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from audiocc.config.config import DEFAULT_BITRATE, Config
from audiocc.config.paths import default_config_path
from audiocc.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from audiocc.shared.errors import ConfigError
from audiocc.ui.cli.args.options import OrganizeArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Boolean flags default to None so that only flags given on the command
        line override the configuration file.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="audiocc",
            description="audiocc - infer metadata from folder and file names, re-encode and reorganize an audio collection.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "directory",
            type=str,
            help="Collection root to process",
            metavar="DIRECTORY",
        )
        _ = parser.add_argument(
            "--write",
            action="store_true",
            default=None,
            help="Apply changes to disk (default is a dry run)",
        )
        _ = parser.add_argument(
            "--force",
            action="store_true",
            default=None,
            help="Reprocess files whose tags already match their folder",
        )
        _ = parser.add_argument(
            "--collection",
            action="store_true",
            default=None,
            help="Treat top-level folders as artists and build Artist/Year/Album",
        )
        _ = parser.add_argument(
            "--fast",
            action="store_true",
            default=None,
            help="Skip folders whose name already has a year and album",
        )
        _ = parser.add_argument(
            "--artist",
            type=str,
            help="Force this artist on every file",
            metavar="NAME",
        )
        _ = parser.add_argument(
            "--bitrate",
            type=str,
            help=f"Encoder quality: V0..V9, a bitrate such as 320k, or copy (default {DEFAULT_BITRATE})",
            metavar="Q",
        )
        _ = parser.add_argument(
            "--fix",
            action="store_true",
            default=None,
            help="Ask the encoder to ignore decoding errors in damaged files",
        )
        _ = parser.add_argument(
            "--workers",
            type=int,
            help="Number of files encoded in parallel (default: CPU count)",
            metavar="N",
        )
        _ = parser.add_argument(
            "--config",
            type=str,
            help="TOML configuration file",
            metavar="PATH",
        )
        _ = parser.add_argument(
            "--log-file",
            type=str,
            help="Write a rotating debug log to this file",
            metavar="PATH",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed processing information",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> OrganizeArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            OrganizeArgs: Processed command line arguments.

        Raises:
            SystemExit: If the directory does not exist or the configuration is invalid.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        # Set log level based on verbosity flags
        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        config_path = Path(parsed_args.config) if parsed_args.config else default_config_path()
        try:
            configuration = Config.load(config_path).with_overrides(
                write=parsed_args.write,
                force=parsed_args.force,
                collection=parsed_args.collection,
                fast=parsed_args.fast,
                artist=parsed_args.artist,
                bitrate=parsed_args.bitrate,
                fix=parsed_args.fix,
                workers=parsed_args.workers,
                log_file=Path(parsed_args.log_file) if parsed_args.log_file else None,
            )
        except ConfigError as e:
            logger.error("%s", e)
            sys.exit(1)

        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        directory = Path(parsed_args.directory)
        if not directory.is_dir():
            logger.error("Directory does not exist: %s", directory)
            sys.exit(1)

        return OrganizeArgs(
            directory=directory,
            config=configuration,
            config_path=config_path,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )
