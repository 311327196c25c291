"""Recursion depth policy for directory walks."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class DepthKind(Enum):
    """The three states a depth policy can be in."""
    INFINITE = "infinite"
    LAST_LEVEL = "last_level"
    N_REMAINING = "n_remaining"


@dataclass(frozen=True)
class DepthPolicy:
    """How many more directory levels a walk may descend into.

    Build values with ``from_int`` or ``parse``; ``INFINITE`` and
    ``LAST_LEVEL`` are available as class attributes. An ``N_REMAINING``
    policy always holds a positive count.
    """
    kind: DepthKind
    remaining: int = 0

    INFINITE: ClassVar["DepthPolicy"]
    LAST_LEVEL: ClassVar["DepthPolicy"]

    def __post_init__(self) -> None:
        if self.kind is DepthKind.N_REMAINING:
            if self.remaining <= 0:
                raise ValueError(f"remaining levels must be positive, got {self.remaining}")
        elif self.remaining != 0:
            raise ValueError(f"{self.kind.value} depth cannot carry a level count")

    @classmethod
    def from_int(cls, value: int) -> "DepthPolicy":
        """Convert a signed level count: negative is infinite, zero is the last level."""
        if value < 0:
            return cls.INFINITE
        if value == 0:
            return cls.LAST_LEVEL
        return cls(DepthKind.N_REMAINING, value)

    @classmethod
    def parse(cls, text: str) -> "DepthPolicy":
        """Parse a base-10 signed integer and convert it with ``from_int``.

        Args:
            text: Raw depth value, e.g. ``"-1"``, ``"0"`` or ``"3"``

        Returns:
            The matching depth policy

        Raises:
            ValueError: If ``text`` is not a well-formed integer
        """
        if not _INTEGER_PATTERN.fullmatch(text):
            raise ValueError(f"invalid digit found in string: {text!r}")
        return cls.from_int(int(text))

    def can_recurse(self) -> bool:
        """Check whether a walk may enter one more level below this one."""
        return self.kind is not DepthKind.LAST_LEVEL

    def next_level(self) -> "DepthPolicy | None":
        """Get the policy for the next level down, or None if recursion is exhausted."""
        if self.kind is DepthKind.INFINITE:
            return self
        if self.kind is DepthKind.N_REMAINING:
            return DepthPolicy.from_int(self.remaining - 1)
        return None

    def __str__(self) -> str:
        if self.kind is DepthKind.N_REMAINING:
            return f"{self.remaining} remaining"
        if self.kind is DepthKind.INFINITE:
            return "infinite"
        return "last level"


DepthPolicy.INFINITE = DepthPolicy(DepthKind.INFINITE)
DepthPolicy.LAST_LEVEL = DepthPolicy(DepthKind.LAST_LEVEL)
