"""Validation of generated h48 solver data against known value distributions."""

from __future__ import annotations

import logging

from cubecore.distribution import distribution_equal, get_distribution
from cubecore.errors import DataError, NissyError
from cubecore.tables import (
    INFO_DISTRIBUTION_LEN,
    INFOSIZE,
    TableInfo,
    TableType,
    read_table_info,
)

logger = logging.getLogger(__name__)

_MAX_H = 11
_MAX_K = 8

# Expected pruning value distributions, keyed by (h, k).
_EXPECTED: dict[tuple[int, int], tuple[int, tuple[int, ...]]] = {
    (0, 2): (3, (5473562, 34776317, 68566704, 8750867)),
    (0, 4): (
        12,
        (
            1, 1, 4, 34, 331, 3612, 41605, 474128, 4953846,
            34776317, 68566704, 8749194, 1673,
        ),
    ),
    (1, 2): (3, (6012079, 45822302, 142018732, 41281787)),
    (2, 2): (3, (6391286, 55494785, 252389935, 155993794)),
    (3, 2): (3, (6686828, 63867852, 392789689, 477195231)),
    (4, 2): (3, (77147213, 543379415, 1139570251, 120982321)),
    (5, 2): (3, (82471284, 687850732, 2345840746, 645995638)),
    (6, 2): (3, (85941099, 804752968, 4077248182, 2556374551)),
    (7, 2): (3, (88529761, 897323475, 6126260791, 7936519573)),
    (8, 2): (3, (1051579940, 8136021316, 19024479822, 18851861220)),
    (9, 2): (3, (1102038189, 9888265242, 38299375805, 10904855164)),
    (10, 2): (3, (1133240039, 11196285614, 64164702961, 43894840186)),
    (11, 2): (3, (1150763161, 12045845660, 91163433330, 136418095449)),
}


def expected_h48(h: int, k: int) -> tuple[int, list[int]]:
    """Return the highest checked value and the expected distribution.

    Combinations without a known distribution give a maximum of 0 and an
    all-zero distribution.
    """
    if not 0 <= h <= _MAX_H:
        raise ValueError(f"h must be between 0 and {_MAX_H}, got {h}")
    if not 0 <= k <= _MAX_K:
        raise ValueError(f"k must be between 0 and {_MAX_K}, got {k}")
    maxvalue, values = _EXPECTED.get((h, k), (0, ()))
    table = list(values) + [0] * (INFO_DISTRIBUTION_LEN - len(values))
    return maxvalue, table


def _check_pruning(info: TableInfo, table) -> None:
    try:
        maxvalue, expected = expected_h48(info.h48h, info.bits)
    except ValueError as err:
        raise DataError(f"no expected distribution for '{info.solver}'") from err

    logger.info(
        "[checkdata] Checking distribution for '%s' from table preamble",
        info.solver,
    )
    if not distribution_equal(expected, info.distribution, maxvalue):
        raise DataError(
            "distribution from the table preamble does not match the expected one"
        )

    logger.info(
        "[checkdata] Checking distribution for '%s' from actual table",
        info.solver,
    )
    try:
        actual = get_distribution(table, info.entries, info.bits)
    except ValueError as err:
        raise DataError(f"cannot read table '{info.solver}': {err}") from err
    if not distribution_equal(expected, actual, maxvalue):
        raise DataError(
            "distribution from the actual table does not match the expected one"
        )


def check_data_h48(data) -> list[TableInfo]:
    """Check every pruning table in a chain of h48 tables.

    Returns the headers of all tables read, in order. Raises ``DataError``
    if the data is corrupt or a distribution differs from the expected one.
    """
    if data is None:
        raise DataError("data is missing")
    view = memoryview(data).cast("B")

    infos: list[TableInfo] = []
    while True:
        try:
            info = read_table_info(view)
        except NissyError as err:
            logger.info("[checkdata] Data is corrupt")
            raise DataError("data is corrupt") from err
        infos.append(info)

        table = view[INFOSIZE:]
        view = view[info.next:]

        if info.type == TableType.PRUNING:
            _check_pruning(info, table)
        else:
            logger.info("[checkdata] Skipping '%s'", info.solver)

        if info.next == 0:
            break

    return infos