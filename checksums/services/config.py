"""Configuration service for resolving command-line arguments."""

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

import structlog

from ..models import Algorithm, Configuration, DepthPolicy, Mode
from .errors import ConfigError, InvalidDirectory, MalformedDepth, UnsupportedAlgorithm

log = structlog.stdlib.get_logger()

DEFAULT_DIRECTORY = "."
DEFAULT_ALGORITHM = "SHA1"
DEFAULT_DEPTH = "0"


def validate_directory(raw: str) -> Path:
    """Resolve ``raw`` to the canonical path of an existing directory.

    Raises:
        InvalidDirectory: If the path cannot be canonicalized or is not a directory
    """
    try:
        path = Path(raw).resolve(strict=True)
    except (OSError, RuntimeError) as e:
        # RuntimeError: symlink loop on older interpreters
        reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
        raise InvalidDirectory(raw, reason) from e

    if path.is_file():
        raise InvalidDirectory(raw, "DIRECTORY cannot be a file")
    if not path.is_dir():
        raise InvalidDirectory(raw, "DIRECTORY is not a directory")
    return path


def validate_algorithm(raw: str) -> Algorithm:
    """Look up ``raw`` in the set of supported algorithms.

    Raises:
        UnsupportedAlgorithm: If no algorithm has that name
    """
    try:
        return Algorithm.parse(raw)
    except ValueError as e:
        raise UnsupportedAlgorithm(raw, Algorithm.supported_names()) from e


def validate_depth(raw: str) -> DepthPolicy:
    """Parse ``raw`` as a signed integer depth.

    Raises:
        MalformedDepth: If ``raw`` is not a base-10 integer
    """
    try:
        return DepthPolicy.parse(raw)
    except ValueError as e:
        raise MalformedDepth(raw, str(e)) from e


def join_depth_values(argv: Sequence[str] | None = None) -> list[str]:
    """Attach the value following ``-d``/``--depth`` to the flag itself.

    argparse reads a separate value that starts with ``-`` (``-1x``, ``-a234``)
    as another option. Rewriting ``-d VALUE`` as ``--depth=VALUE`` lets any
    such value reach ``validate_depth``.

    Args:
        argv: Arguments without the program name (defaults to ``sys.argv[1:]``)

    Returns:
        The rewritten argument list
    """
    args = list(sys.argv[1:] if argv is None else argv)
    joined: list[str] = []
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--":
            joined.extend(args[i:])
            break
        if arg in ("-d", "--depth") and i + 1 < len(args):
            joined.append(f"--depth={args[i + 1]}")
            i += 2
            continue
        joined.append(arg)
        i += 1
    return joined


def add_config_arguments(parser: argparse.ArgumentParser) -> None:
    """Register the configuration arguments on ``parser``.

    Values are kept as raw strings; ``ConfigurationService.resolve`` validates them.
    ``--create`` and ``--verify`` share one destination, so the last one given wins.
    """
    _ = parser.add_argument(
        "directory",
        metavar="DIRECTORY",
        nargs="?",
        default=DEFAULT_DIRECTORY,
        help="Directory to hash/verify (default: .)"
    )

    _ = parser.add_argument(
        "-a", "--algorithm",
        default=DEFAULT_ALGORITHM,
        help=f"Hashing algorithm to use (default: SHA1). Supported: {', '.join(Algorithm.supported_names())}"
    )

    _ = parser.add_argument(
        "-c", "--create",
        dest="mode",
        action="store_const",
        const=Mode.CREATE,
        help="Make checksums"
    )

    _ = parser.add_argument(
        "-v", "--verify",
        dest="mode",
        action="store_const",
        const=Mode.VERIFY,
        help="Verify checksums (default)"
    )

    _ = parser.add_argument(
        "-d", "--depth",
        default=DEFAULT_DEPTH,
        help="Max recursion depth, -1 for infinite (default: 0)"
    )

    parser.set_defaults(mode=Mode.VERIFY)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the configuration fields only."""
    parser = argparse.ArgumentParser(
        prog="checksums",
        description="Tool for making/verifying checksums of directory trees",
    )
    add_config_arguments(parser)
    return parser


class ConfigurationService:
    """Service for turning raw arguments into a validated ``Configuration``."""

    def __init__(self, parser: argparse.ArgumentParser | None = None) -> None:
        self.parser: argparse.ArgumentParser = parser or build_parser()

    def resolve(self, argv: Sequence[str] | None = None) -> Configuration:
        """Parse ``argv`` and resolve it into a configuration.

        Args:
            argv: Arguments without the program name (defaults to ``sys.argv[1:]``)

        Returns:
            The resolved configuration

        Raises:
            ConfigError: For the first field that fails validation
        """
        ns = self.parser.parse_args(join_depth_values(argv))
        return self.resolve_namespace(ns)

    def resolve_namespace(self, ns: argparse.Namespace) -> Configuration:
        """Validate already-parsed raw values.

        Fields are validated in order: directory, algorithm, depth. The first
        failure is raised and nothing is constructed.
        """
        try:
            directory = validate_directory(ns.directory)
            algorithm = validate_algorithm(ns.algorithm)
            depth = validate_depth(ns.depth)
        except ConfigError as e:
            log.warning("Configuration rejected", field=e.field, value=e.value, reason=e.reason)
            raise

        mode: Mode = ns.mode if ns.mode is not None else Mode.VERIFY
        config = Configuration(
            directory=directory,
            algorithm=algorithm,
            mode=mode,
            depth=depth,
        )

        log.info(
            "Configuration resolved",
            directory=str(config.directory),
            algorithm=config.algorithm.value,
            mode=config.mode.value,
            depth=str(config.depth),
        )
        return config


def resolve(argv: Sequence[str] | None = None) -> Configuration:
    """Resolve a configuration with a default ``ConfigurationService``."""
    return ConfigurationService().resolve(argv)
