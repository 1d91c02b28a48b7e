"""Value distributions of packed pruning tables."""

from __future__ import annotations

import logging
from collections import Counter

from cubecore.errors import DataError
from cubecore.tables import INFO_DISTRIBUTION_LEN

logger = logging.getLogger(__name__)

_MAX_CHECKED_VALUE = 20


def entries_per_byte(bits: int) -> int:
    """Number of table entries packed in one byte for ``bits`` bits each."""
    if bits not in (1, 2, 4, 8):
        raise ValueError(f"unsupported entry size of {bits} bits")
    return 8 // bits


def get_distribution(table, entries: int, bits: int) -> list[int]:
    """Count how many of the first ``entries`` entries hold each value."""
    epb = entries_per_byte(bits)
    mask = (1 << bits) - 1
    nbytes = entries // epb
    if len(table) < -(-entries // epb):
        raise DataError("table is shorter than its number of entries")

    counts = [0] * INFO_DISTRIBUTION_LEN

    def add(value: int, amount: int) -> None:
        if value >= INFO_DISTRIBUTION_LEN:
            raise DataError(f"table value {value} is out of range")
        counts[value] += amount

    for byte, amount in Counter(bytes(table[:nbytes])).items():
        for j in range(epb):
            add((byte >> (j * bits)) & mask, amount)

    for i in range(nbytes * epb, entries):
        shift = bits * (i % epb)
        add((table[i // epb] >> shift) & mask, 1)

    return counts


def distribution_equal(expected, actual, maxvalue: int) -> bool:
    """Compare two distributions on the values from 0 to ``maxvalue`` (at most 20)."""
    wrong = 0
    for i in range(min(maxvalue, _MAX_CHECKED_VALUE) + 1):
        if expected[i] != actual[i]:
            wrong += 1
            logger.info(
                "[checkdata] Value for depth %d: expected %d, found %d",
                i, expected[i], actual[i],
            )
    return wrong == 0