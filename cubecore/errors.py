"""Error types, warnings and option flags shared across the library."""

from __future__ import annotations

import enum


class NissyError(Exception):
    """Base class for every error raised by the library.

    Each subclass carries the numeric ``code`` used to identify the error
    kind when results are exchanged as plain integers.
    """

    code: int = -60
    default_message: str = "a required argument is missing"

    def __init__(self, message: str | None = None) -> None:
        self.message = message if message is not None else self.default_message
        super().__init__(self.message)


class UnsolvableWarning(UserWarning):
    """The operation succeeded but the resulting cube cannot be solved."""

    code: int = -1
    default_message: str = "resulting cube is not solvable"

    def __init__(self, message: str | None = None) -> None:
        self.message = message if message is not None else self.default_message
        super().__init__(self.message)


class InvalidCubeError(NissyError):
    """The given cube is ill-formed or written in an unknown format."""

    code = -10
    default_message = "the given cube is invalid"


class UnsolvableCubeError(NissyError):
    """The cube is valid but cannot be solved by the chosen solver."""

    code = -11
    default_message = "the given cube is not solvable with this solver"


class InvalidMovesError(NissyError):
    """The given move sequence is invalid."""

    code = -20
    default_message = "the given moves are invalid"


class InvalidTransformationError(NissyError):
    """The given transformation is invalid."""

    code = -30
    default_message = "the given transformation is invalid"


class InvalidSolverError(NissyError):
    """The named solver is not known."""

    code = -50
    default_message = "the given solver is not known"


class BufferSizeError(NissyError):
    """A buffer is too small to hold the requested data."""

    code = -61
    default_message = "the given buffer is too small"


class DataError(NissyError):
    """The provided data table is invalid or incompatible."""

    code = -70
    default_message = "the given data is invalid"


class OptionsError(NissyError):
    """One or more of the given options are invalid."""

    code = -80
    default_message = "the given options are invalid"


class UnknownError(NissyError):
    """An unexpected internal error."""

    code = -999
    default_message = "an unknown error occurred"


class NissFlag(enum.IntFlag):
    """Which sides of the cube a solver may search on."""

    NORMAL = 1
    INVERSE = 2
    MIXED = 4
    LINEAR = NORMAL | INVERSE
    ALL = NORMAL | INVERSE | MIXED


class SolverStatus(enum.IntEnum):
    """Status a running solver can be asked to honour."""

    RUN = 0
    STOP = 1
    PAUSE = 2


_BY_CODE: dict[int, type[NissyError] | type[UnsolvableWarning]] = {
    cls.code: cls
    for cls in (
        UnsolvableWarning,
        InvalidCubeError,
        UnsolvableCubeError,
        InvalidMovesError,
        InvalidTransformationError,
        InvalidSolverError,
        NissyError,
        BufferSizeError,
        DataError,
        OptionsError,
        UnknownError,
    )
}


def error_for_code(code: int) -> NissyError | UnsolvableWarning:
    """Return an instance of the error or warning that ``code`` stands for.

    Raises ``ValueError`` for codes that do not denote an error or warning,
    including every non-negative value (those mean success).
    """
    try:
        cls = _BY_CODE[code]
    except KeyError:
        raise ValueError(f"{code} is not a known error code") from None
    return cls()