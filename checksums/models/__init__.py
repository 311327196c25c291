"""Data models for the checksums tool."""

from .algorithm import Algorithm
from .config import Configuration, Mode
from .depth import DepthKind, DepthPolicy

__all__ = [
    "Algorithm",
    "Configuration",
    "DepthKind",
    "DepthPolicy",
    "Mode",
]
