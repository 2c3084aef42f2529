"""
NDKKit CLI argument parser.

This module implements the command-line interface for NDKKit using argparse.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ndkkit.core.environment import EXPORT_BACKENDS

# Get version from package
try:
    from importlib.metadata import version

    __version__ = version("ndkkit")
except Exception:
    __version__ = "0.1.0"

logger = logging.getLogger(__name__)


class CLI:
    """NDKKit command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser with all subcommands.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="ndkkit",
            description="NDKKit - Android NDK install step for build pipelines",
            epilog='Use "ndkkit COMMAND --help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"NDKKit {__version__}"
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
            "--config",
            type=Path,
            metavar="PATH",
            help="Path to configuration file (default: ./ndkkit.yaml)",
        )
        parser.add_argument(
            "--project-root",
            type=Path,
            metavar="PATH",
            default=Path.cwd(),
            help="Project root directory (default: current directory)",
        )

        # Subcommands
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        self._add_install_command(subparsers)
        self._add_detect_command(subparsers)

        return parser

    def _add_sdk_arguments(self, parser):
        """Add SDK location and NDK version options shared by commands."""
        parser.add_argument(
            "--ndk-version",
            metavar="VERSION",
            help="NDK revision to install, e.g. 23.1.7779620 "
            "(empty clears ANDROID_NDK_HOME) [env: ndk_version]",
        )
        parser.add_argument(
            "--android-home",
            metavar="DIR",
            help="Android SDK location [env: ANDROID_HOME]",
        )
        parser.add_argument(
            "--android-sdk-root",
            metavar="DIR",
            help="Android SDK location [env: ANDROID_SDK_ROOT]",
        )
        parser.add_argument(
            "--component",
            action="append",
            dest="components",
            metavar="PACKAGE",
            help="sdkmanager package that must be installed, e.g. "
            "'platforms;android-33' (can be used multiple times)",
        )

    def _add_install_command(self, subparsers):
        """Add 'install' subcommand."""
        parser = subparsers.add_parser(
            "install",
            help="Install the requested NDK and SDK components",
            description="Reconcile the installed NDK with the requested revision, "
            "accept SDK licenses and install declared SDK components",
        )
        self._add_sdk_arguments(parser)
        parser.add_argument(
            "--gradlew-path",
            type=Path,
            metavar="PATH",
            help="Gradle wrapper to make executable [env: gradlew_path]",
        )
        parser.add_argument(
            "--skip-licenses",
            action="store_true",
            help="Do not run 'sdkmanager --licenses'",
        )
        parser.add_argument(
            "--export",
            dest="export_backend",
            choices=list(EXPORT_BACKENDS),
            metavar="BACKEND",
            help="How to export variables for later steps "
            "(envman|file|none) [default: envman]",
        )
        parser.add_argument(
            "--export-file",
            type=Path,
            metavar="PATH",
            help="Env file written by the 'file' export backend",
        )

    def _add_detect_command(self, subparsers):
        """Add 'detect' subcommand."""
        parser = subparsers.add_parser(
            "detect",
            help="Show the installed NDK",
            description="Show the current NDK location, its revision and the "
            "state of declared SDK components without changing anything",
        )
        self._add_sdk_arguments(parser)

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace
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
        parsed_args = self.parse_args(args)

        # Configure logging
        self._configure_logging(parsed_args)

        # Check if command specified
        if not parsed_args.command:
            self.parser.print_help()
            return 1

        # Dispatch to command handler
        try:
            return self._dispatch_command(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except Exception as e:
            logger.error(f"Error: {e}")
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
        # Command module mapping
        command_map = {
            "install": "ndkkit.cli.commands.install",
            "detect": "ndkkit.cli.commands.detect",
        }

        module_name = command_map.get(args.command)
        if not module_name:
            logger.error(f"Unknown command: {args.command}")
            return 1

        try:
            # Dynamic import of command module
            import importlib

            module = importlib.import_module(module_name)
        except ImportError as e:
            logger.error(f"Failed to load command module: {e}")
            if args.verbose:
                import traceback

                traceback.print_exc()
            return 1

        return module.run(args)


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
