"""Supported checksum algorithm identifiers."""

from enum import Enum


class Algorithm(Enum):
    """Closed set of checksum algorithms the tool can use."""
    SHA1 = "SHA1"
    SHA2 = "SHA2"
    SHA3 = "SHA3"
    BLAKE = "BLAKE"
    BLAKE2 = "BLAKE2"
    CRC64 = "CRC64"
    CRC32 = "CRC32"
    CRC16 = "CRC16"
    CRC8 = "CRC8"
    MD5 = "MD5"

    @classmethod
    def parse(cls, name: str) -> "Algorithm":
        """Look up an algorithm by name.

        Matching ignores case and hyphens, so ``"sha-1"``, ``"Sha1"`` and
        ``"SHA1"`` all name the same algorithm.

        Raises:
            ValueError: If the name matches no supported algorithm
        """
        key = name.strip().replace("-", "").upper()
        try:
            return cls(key)
        except ValueError:
            raise ValueError(
                f"Unrecognised algorithm {name!r}, expected one of: {', '.join(cls.supported_names())}"
            ) from None

    @classmethod
    def supported_names(cls) -> list[str]:
        return [member.value for member in cls]

    def __str__(self) -> str:
        return self.value
