"""File system service for depth-limited directory walks."""

from collections.abc import Iterator
from pathlib import Path

import structlog

from ..models import DepthPolicy
from .errors import FileSystemError

log = structlog.stdlib.get_logger()


class FileSystemService:
    """Service for walking directory trees under a recursion depth policy."""

    def walk(self, directory: Path, depth: DepthPolicy) -> Iterator[Path]:
        """Yield the regular files below ``directory`` that ``depth`` allows.

        Files directly inside ``directory`` are always yielded. Subdirectories
        are entered only while the policy can recurse, each with the policy's
        next level. Entries are visited in sorted order and symlinked
        directories are not followed.

        Args:
            directory: Directory to walk
            depth: Recursion policy for the levels below ``directory``

        Yields:
            Paths of regular files

        Raises:
            FileSystemError: If ``directory`` is not a readable directory
        """
        if not directory.is_dir():
            log.error("Path is not a directory", directory=str(directory))
            raise FileSystemError(f"Path is not a directory: {directory}", path=str(directory))

        try:
            entries = sorted(directory.iterdir())
        except OSError as e:
            log.error("Failed to list directory", directory=str(directory), error=str(e))
            raise FileSystemError(f"Cannot read directory: {directory}", original_error=e, path=str(directory)) from e

        subdirectories: list[Path] = []
        for entry in entries:
            if entry.is_symlink() and entry.is_dir():
                log.debug("Skipping symlinked directory", path=str(entry))
            elif entry.is_dir():
                subdirectories.append(entry)
            elif entry.is_file():
                yield entry

        next_depth = depth.next_level()
        if next_depth is None:
            if subdirectories:
                log.debug("Depth exhausted", directory=str(directory), skipped=len(subdirectories))
            return

        for subdirectory in subdirectories:
            yield from self.walk(subdirectory, next_depth)

    def list_files(self, directory: Path, depth: DepthPolicy) -> list[Path]:
        """Collect the files ``walk`` yields.

        Args:
            directory: Directory to walk
            depth: Recursion policy

        Returns:
            List of file paths
        """
        files = list(self.walk(directory, depth))
        log.debug(
            "Listed files in directory",
            directory=str(directory),
            depth=str(depth),
            count=len(files),
        )
        return files
