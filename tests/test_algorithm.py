"""Tests for algorithm name parsing."""

import pytest
from hypothesis import given, strategies as st

from checksums.models import Algorithm


@given(st.sampled_from(list(Algorithm)))
def test_parse_ignores_case(algorithm: Algorithm) -> None:
    assert Algorithm.parse(algorithm.value.lower()) is algorithm
    assert Algorithm.parse(algorithm.value.swapcase()) is algorithm


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("sha-1", Algorithm.SHA1),
        ("SHA-2", Algorithm.SHA2),
        ("blake-2", Algorithm.BLAKE2),
        ("CRC-64", Algorithm.CRC64),
    ],
)
def test_parse_hyphenated(name: str, expected: Algorithm) -> None:
    assert Algorithm.parse(name) is expected


@pytest.mark.parametrize("name", ["", "sha", "sha256", "crc", "md6", "SHA1x"])
def test_parse_rejects_unknown(name: str) -> None:
    with pytest.raises(ValueError, match="expected one of"):
        Algorithm.parse(name)


def test_supported_names() -> None:
    assert Algorithm.supported_names() == [
        "SHA1", "SHA2", "SHA3", "BLAKE", "BLAKE2", "CRC64", "CRC32", "CRC16", "CRC8", "MD5",
    ]
    assert str(Algorithm.BLAKE2) == "BLAKE2"
