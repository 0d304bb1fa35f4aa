"""
binkit CLI argument parser.

This module implements the command-line interface for binkit using argparse.
"""

import argparse
import importlib
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ..core.exceptions import DownloadCommandError
from .utils import COMMAND_DESCRIPTIONS, PROG, main_usage

# Get version from package
try:
    from importlib.metadata import version

    __version__ = version("binkit")
except Exception:
    __version__ = "0.1.0"

logger = logging.getLogger(__name__)


class CommandLineError(Exception):
    """Raised instead of exiting when command-line arguments can't be parsed."""

    pass


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports errors to the caller instead of exiting."""

    def error(self, message):
        raise CommandLineError(message)


class CLI:
    """binkit command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser with all subcommands.

        Returns:
            Configured ArgumentParser instance
        """
        parser = _ArgumentParser(
            prog=PROG,
            description="binkit - Manage binaries",
            epilog=f'Use "{PROG} COMMAND help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"binkit {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )
        parser.add_argument(
            "--catalog",
            type=Path,
            metavar="PATH",
            help="Path to binary catalog (default: $BINKIT_CATALOG or ~/.binkit/catalog.yaml)",
        )

        # Subcommands
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        subparsers.add_parser(
            "help",
            help="Show usage",
            description="Show usage of all commands",
        )

        for command, description in COMMAND_DESCRIPTIONS.items():
            self._add_lifecycle_command(subparsers, command, description)

        return parser

    def _add_lifecycle_command(self, subparsers, command: str, description: str):
        """Add a '<command> <BINARY> <VERSION>' subcommand."""
        parser = subparsers.add_parser(
            command,
            help=description.rstrip("."),
            description=description,
            epilog=f"Use '{PROG} {command} help' to list available binaries",
        )
        # Both optional at parse time: "help" takes no version, and a missing
        # version must be reported as an invalid version.
        parser.add_argument(
            "name", nargs="?", metavar="BINARY", help="Binary name from the catalog"
        )
        parser.add_argument(
            "version", nargs="?", metavar="VERSION", help="Binary version (X.Y.Z)"
        )

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace

        Raises:
            CommandLineError: If arguments are invalid
        """
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        try:
            parsed_args = self.parse_args(args)
        except CommandLineError as e:
            print(f"{PROG}: {e}. See '{PROG} help'.")
            return 1

        # Configure logging
        self._configure_logging(parsed_args)

        # Check if command specified
        if not parsed_args.command:
            self.parser.print_help(file=sys.stdout)
            return 1

        # Dispatch to command handler
        try:
            return self._dispatch_command(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except DownloadCommandError as e:
            logger.error(f"{PROG}: {parsed_args.command}: {e}")
            return e.exit_status
        except Exception as e:
            logger.error(f"{PROG}: {parsed_args.command}: {e}")
            if parsed_args.verbose:
                import traceback

                traceback.print_exc()
            return 1

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Args:
            args: Parsed arguments with verbose/quiet flags
        """
        if args.verbose:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(levelname)s: %(message)s"
        else:
            level = logging.INFO
            format_str = "%(message)s"

        logging.basicConfig(
            level=level,
            format=format_str,
            stream=sys.stdout,
            force=True,  # Reconfigure if already configured
        )

    def _dispatch_command(self, args) -> int:
        """
        Dispatch to appropriate command handler.

        Args:
            args: Parsed arguments with command field

        Returns:
            Exit code from command handler
        """
        if args.command == "help":
            print(main_usage())
            return 0

        # argparse restricts choices to "help" and COMMAND_DESCRIPTIONS
        module = importlib.import_module(f"binkit.cli.commands.{args.command}")
        return module.run(args)


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
