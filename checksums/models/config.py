"""Configuration data models."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .algorithm import Algorithm
from .depth import DepthPolicy


class Mode(Enum):
    """Whether a run creates new checksums or verifies existing ones."""
    CREATE = "create"
    VERIFY = "verify"


@dataclass(frozen=True)
class Configuration:
    """Resolved run configuration."""
    directory: Path  # Canonical, absolute
    algorithm: Algorithm = Algorithm.SHA1
    mode: Mode = Mode.VERIFY
    depth: DepthPolicy = DepthPolicy.LAST_LEVEL

    @property
    def verify(self) -> bool:
        return self.mode is Mode.VERIFY
