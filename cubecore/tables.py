"""Reading and writing the fixed-size header that precedes each data table."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass, field

from cubecore.errors import BufferSizeError, NissyError

INFOSIZE = 512
INFO_SOLVER_STRLEN = 100
INFO_DISTRIBUTION_LEN = 21

INFO_OFFSET_SOLVER = 0
INFO_OFFSET_TYPE = INFO_OFFSET_SOLVER + INFO_SOLVER_STRLEN
INFO_OFFSET_INFOSIZE = INFO_OFFSET_TYPE + 8
INFO_OFFSET_FULLSIZE = INFO_OFFSET_INFOSIZE + 8
INFO_OFFSET_HASH = INFO_OFFSET_FULLSIZE + 8
INFO_OFFSET_ENTRIES = INFO_OFFSET_HASH + 8
INFO_OFFSET_CLASSES = INFO_OFFSET_ENTRIES + 8
INFO_OFFSET_NEXT = INFO_OFFSET_CLASSES + 8
INFO_OFFSET_H48H = INFO_OFFSET_NEXT + 8
INFO_OFFSET_BITS = INFO_OFFSET_H48H + 1
INFO_OFFSET_BASE = INFO_OFFSET_BITS + 1
INFO_OFFSET_MAXVALUE = INFO_OFFSET_BASE + 1
INFO_OFFSET_DISTRIBUTION = INFO_OFFSET_MAXVALUE + 1

_U64 = struct.Struct("<Q")
_U64_MASK = (1 << 64) - 1
_DISTRIBUTION = struct.Struct(f"<{INFO_DISTRIBUTION_LEN}Q")

_U64_FIELDS = (
    ("type", INFO_OFFSET_TYPE),
    ("infosize", INFO_OFFSET_INFOSIZE),
    ("fullsize", INFO_OFFSET_FULLSIZE),
    ("hash", INFO_OFFSET_HASH),
    ("entries", INFO_OFFSET_ENTRIES),
    ("classes", INFO_OFFSET_CLASSES),
    ("next", INFO_OFFSET_NEXT),
)
_U8_FIELDS = (
    ("h48h", INFO_OFFSET_H48H),
    ("bits", INFO_OFFSET_BITS),
    ("base", INFO_OFFSET_BASE),
    ("maxvalue", INFO_OFFSET_MAXVALUE),
)


class TableType(enum.IntEnum):
    """Kind of data held by a table."""

    PRUNING = 0
    SPECIAL = 1


@dataclass
class TableInfo:
    """Description of one table, as stored in its header."""

    solver: str = ""
    type: int = TableType.PRUNING
    infosize: int = INFOSIZE
    fullsize: int = 0
    hash: int = 0
    entries: int = 0
    classes: int = 0
    h48h: int = 0
    bits: int = 0
    base: int = 0
    maxvalue: int = 0
    next: int = 0
    distribution: list[int] = field(
        default_factory=lambda: [0] * INFO_DISTRIBUTION_LEN
    )


def read_table_info(buf) -> TableInfo:
    """Parse the header at the start of ``buf``."""
    if buf is None:
        raise NissyError("error reading table: buffer is missing")
    if len(buf) < INFOSIZE:
        raise BufferSizeError(
            f"error reading table: buffer size {len(buf)} is smaller "
            f"than the header size {INFOSIZE}"
        )

    values = {
        name: _U64.unpack_from(buf, offset)[0] for name, offset in _U64_FIELDS
    }
    values.update({name: buf[offset] for name, offset in _U8_FIELDS})

    raw_type = values["type"]
    if raw_type in TableType._value2member_map_:
        values["type"] = TableType(raw_type)

    raw_solver = bytes(buf[INFO_OFFSET_SOLVER:INFO_OFFSET_SOLVER + INFO_SOLVER_STRLEN])
    solver = raw_solver.split(b"\0", 1)[0].decode("latin-1")
    distribution = list(_DISTRIBUTION.unpack_from(buf, INFO_OFFSET_DISTRIBUTION))

    return TableInfo(solver=solver, distribution=distribution, **values)


def read_table_info_n(buf, n: int) -> TableInfo:
    """Follow the ``next`` links and return the header of the ``n``-th table."""
    if n < 1:
        raise ValueError("n must be at least 1")
    view = memoryview(buf) if buf is not None else None
    info = read_table_info(view)
    for _ in range(n - 1):
        view = view[info.next:]
        info = read_table_info(view)
    return info


def write_table_info(info: TableInfo, buf) -> None:
    """Write the header for ``info`` at the start of the writable ``buf``."""
    if len(buf) < info.fullsize or len(buf) < INFOSIZE:
        raise BufferSizeError(
            f"error writing table: buffer size {len(buf)} is too small "
            f"(table requires {max(info.fullsize, INFOSIZE)})"
        )

    distribution = list(info.distribution)[:INFO_DISTRIBUTION_LEN]
    distribution += [0] * (INFO_DISTRIBUTION_LEN - len(distribution))
    _DISTRIBUTION.pack_into(
        buf, INFO_OFFSET_DISTRIBUTION, *(int(v) & _U64_MASK for v in distribution)
    )

    for name, offset in _U64_FIELDS:
        _U64.pack_into(buf, offset, int(getattr(info, name)) & _U64_MASK)

    solver = info.solver.encode("latin-1").split(b"\0", 1)[0][:INFO_SOLVER_STRLEN]
    solver = solver.ljust(INFO_SOLVER_STRLEN, b"\0")
    buf[INFO_OFFSET_SOLVER:INFO_OFFSET_SOLVER + INFO_SOLVER_STRLEN] = solver

    for name, offset in _U8_FIELDS:
        buf[offset] = int(getattr(info, name)) & 0xFF