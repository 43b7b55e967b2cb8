"""Command line interface for audiocc."""

import sys
from typing import final

from rich.console import Console

from audiocc.application.services import OrganizeRequest, OrganizeService
from audiocc.platform.logging import logger
from audiocc.shared.errors import AudioccError
from audiocc.ui.cli.args import ArgumentParser
from audiocc.ui.cli.display import render_run_summary


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(
        args_list: list[str] | None = None,
        service: OrganizeService | None = None,
    ) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
            service: Service override (for testing).
        """
        try:
            args = ArgumentParser.process_args(args_list)
            if not args.config.write:
                logger.info("Dry run: no files will be changed")

            report = (service or OrganizeService()).organize(
                OrganizeRequest(root=args.directory, config=args.config)
            )
            if not args.quiet:
                render_run_summary(Console(), report)
            if report.has_failures:
                sys.exit(1)
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except AudioccError as e:
            logger.error("%s", e)
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` inside command processing, so this return is only
        reached when the run completes cleanly.
    """
    CommandProcessor.process_command()
    return 0
