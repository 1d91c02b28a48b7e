"""Coordinates and packed pruning-table entries for the h48 solver tables."""

from __future__ import annotations

from cubecore.distribution import entries_per_byte
from cubecore.tables import INFOSIZE, TableInfo, TableType

COMB_12_4 = 495
COMB_8_4 = 70

COCLASS_MASK = 0xFFFF << 16
TTREP_MASK = 0xFF << 8

MAX_H = 11

_SOLVER_TEMPLATE = "h48 solver h =  , k = 2"


def h48_esize(h: int) -> int:
    """Number of edge coordinate values for one corner class at level ``h``."""
    if not 0 <= h <= MAX_H:
        raise ValueError(f"h must be between 0 and {MAX_H}, got {h}")
    return (COMB_12_4 * COMB_8_4) << h


def coclass(x: int) -> int:
    """Corner symmetry class stored in a cocsep table entry."""
    return (x & COCLASS_MASK) >> 16


def ttrep(x: int) -> int:
    """Transformation to the class representative stored in a cocsep entry."""
    return (x & TTREP_MASK) >> 8


def _locate(i: int, k: int) -> tuple[int, int, int]:
    if i < 0:
        raise ValueError("the entry index must not be negative")
    epb = entries_per_byte(k)
    shift = k * (i % epb)
    mask = ((1 << k) - 1) << shift
    return i // epb, shift, mask


def get_h48_pval(table, i: int, k: int) -> int:
    """Read the ``k``-bit value of entry ``i`` of a packed table."""
    index, shift, mask = _locate(i, k)
    return (table[index] & mask) >> shift


def set_h48_pval(table, i: int, k: int, val: int) -> None:
    """Store ``val`` as the ``k``-bit value of entry ``i`` of the writable ``table``."""
    index, shift, mask = _locate(i, k)
    if not 0 <= val < (1 << k):
        raise ValueError(f"value {val} does not fit in {k} bits")
    table[index] = (table[index] & ~mask & 0xFF) | (val << shift)


def make_info_h48k2(h: int, base: int, entries: int, tablesize: int) -> TableInfo:
    """Return the header describing an h48 pruning table with 2-bit entries."""
    if not 0 <= h <= MAX_H:
        raise ValueError(f"h must be between 0 and {MAX_H}, got {h}")
    solver = list(_SOLVER_TEMPLATE)
    solver[15] = str(h % 10)
    if h >= 10:
        solver[14] = str(h // 10)
    return TableInfo(
        solver="".join(solver),
        type=TableType.PRUNING,
        infosize=INFOSIZE,
        fullsize=tablesize + INFOSIZE,
        hash=0,
        entries=entries,
        classes=0,
        h48h=h,
        bits=2,
        base=base,
        maxvalue=3,
        next=0,
    )