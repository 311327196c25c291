"""Main entry point for the checksums tool.

This module provides the command-line entry point with:
- Argument parsing and configuration resolution
- Logging setup
- Rendering of configuration errors and exit codes
"""

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

import structlog

from checksums import __version__
from checksums.models import Configuration
from checksums.services.config import ConfigurationService, add_config_arguments, join_depth_values
from checksums.services.errors import ConfigError, FileSystemError, get_error_service
from checksums.services.filesystem import FileSystemService
from checksums.services.logging import setup_logging


log = structlog.stdlib.get_logger()

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130


def build_cli_parser() -> argparse.ArgumentParser:
    """Build the full command-line parser, including logging options."""
    parser = argparse.ArgumentParser(
        prog="checksums",
        description="Tool for making/verifying checksums of directory trees",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  checksums                      Verify checksums in the current directory
  checksums -c -a SHA3 ./data    Create SHA3 checksums for ./data
  checksums -d -1 /srv/files     Verify the whole tree under /srv/files
        """
    )

    _ = parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    add_config_arguments(parser)

    _ = parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Set the logging level (default: WARNING)"
    )

    _ = parser.add_argument(
        "--log-dir",
        type=Path,
        default=None,
        help="Directory for log files (default: console only)"
    )

    return parser


def report(config: Configuration, files: list[Path]) -> None:
    """Print the resolved configuration and the files selected for processing."""
    print(f"Directory: {config.directory}")
    print(f"Algorithm: {config.algorithm}")
    print(f"Mode:      {config.mode.value}")
    print(f"Depth:     {config.depth}")
    for path in files:
        print(path.relative_to(config.directory))


def run(argv: Sequence[str] | None = None) -> int:
    """Run the tool and return its exit code.

    Args:
        argv: Arguments without the program name (defaults to ``sys.argv[1:]``)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = build_cli_parser()
    ns = parser.parse_args(join_depth_values(argv))

    _ = setup_logging(log_level=ns.log_level, log_dir=ns.log_dir)
    log.info("Starting checksums", version=__version__)

    error_service = get_error_service()
    try:
        config = ConfigurationService(parser).resolve_namespace(ns)
        files = FileSystemService().list_files(config.directory, config.depth)
        report(config, files)
        return EXIT_OK

    except ConfigError as e:
        friendly = error_service.handle_error(e, operation="resolve", component="config")
        print(error_service.create_user_message(friendly), file=sys.stderr)
        return EXIT_USAGE

    except FileSystemError as e:
        friendly = error_service.handle_error(e, operation="walk", component="filesystem")
        print(error_service.create_user_message(friendly), file=sys.stderr)
        return EXIT_FAILURE

    except KeyboardInterrupt:
        log.info("Interrupted by user")
        return EXIT_INTERRUPTED


def main() -> None:
    """Main entry point for the application."""
    exit_code = run()
    log.info("Application exiting", exit_code=exit_code)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
