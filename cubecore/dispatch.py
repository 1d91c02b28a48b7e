"""Selection of the solver family that handles a solver name."""

from __future__ import annotations

import enum


class SolverFamily(enum.Enum):
    """Solver families, identified by the prefix of the solver name."""

    H48 = "h48"
    COORD = "coord_"

    @property
    def prefix(self) -> str:
        return self.value


def match_solver(name: str | None) -> SolverFamily | None:
    """Return the family whose prefix starts ``name``, or None if none does."""
    if name is None:
        return None
    for family in SolverFamily:
        if name.startswith(family.prefix):
            return family
    return None