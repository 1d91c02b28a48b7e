"""Cube representation as piece arrays, with composition, inversion and coordinates.

Corners are stored in the order UFR, UBL, DFL, DBR, UFL, UBR, DFR, DBL and
edges in the order UF, UB, DB, DF, UR, UL, DL, DR, FR, FL, BL, BR. Each
entry is a byte: the low bits hold the piece index, bit 4 holds the edge
orientation and bits 5-6 hold the corner orientation (0x20 clockwise,
0x40 counter-clockwise).
"""

from __future__ import annotations

from dataclasses import dataclass
from math import comb

EOSHIFT = 4
COSHIFT = 5

PBITS = 0xF
ESEPBIT_1 = 0x4
ESEPBIT_2 = 0x8
CSEPBIT = 0x4
EOBIT = 0x10
COBITS = 0xF0
COBITS_2 = 0x60
CTWIST_CW = 0x20
CTWIST_CCW = 0x40
EFLIP = 0x10

POW_2_11 = 2048

NCORNERS = 8
NEDGES = 12


def _binomial(n: int, k: int) -> int:
    if n < 0 or k < 0:
        return 0
    return comb(n, k)


def _flip_co(piece: int) -> int:
    return ((piece << 1) | (piece >> 1)) & COBITS_2


@dataclass(frozen=True)
class Cube:
    """A cube given by its corner and edge bytes."""

    corner: tuple[int, ...]
    edge: tuple[int, ...]

    def __post_init__(self) -> None:
        corner = tuple(self.corner)
        edge = tuple(self.edge)
        if len(corner) != NCORNERS:
            raise ValueError(f"a cube has {NCORNERS} corners, got {len(corner)}")
        if len(edge) != NEDGES:
            raise ValueError(f"a cube has {NEDGES} edges, got {len(edge)}")
        if any(not 0 <= b <= 0xFF for b in corner + edge):
            raise ValueError("piece values must fit in one byte")
        object.__setattr__(self, "corner", corner)
        object.__setattr__(self, "edge", edge)

    def pieces(self) -> tuple[tuple[int, ...], tuple[int, ...]]:
        """Return the corner and edge bytes."""
        return self.corner, self.edge

    def _composed_edges(self, other: Cube) -> tuple[int, ...]:
        result = []
        for piece2 in other.edge:
            piece1 = self.edge[piece2 & PBITS]
            orien = (piece2 ^ piece1) & EOBIT
            result.append((piece1 & PBITS) | orien)
        return tuple(result)

    def _composed_corners(self, other: Cube) -> tuple[int, ...]:
        result = []
        for piece2 in other.corner:
            piece1 = self.corner[piece2 & PBITS]
            aux = ((piece2 & COBITS) + (piece1 & COBITS)) & 0xFF
            auy = (aux + CTWIST_CW) >> 2
            orien = (aux + auy) & COBITS_2
            result.append((piece1 & PBITS) | orien)
        return tuple(result)

    def compose(self, other: Cube) -> Cube:
        """Return the cube obtained by applying ``other`` after ``self``."""
        return Cube(self._composed_corners(other), self._composed_edges(other))

    def compose_edges(self, other: Cube) -> Cube:
        """Compose only the edges; the corners of the result are zero."""
        return Cube((0,) * NCORNERS, self._composed_edges(other))

    def compose_corners(self, other: Cube) -> Cube:
        """Compose only the corners; the edges of the result are zero."""
        return Cube(self._composed_corners(other), (0,) * NEDGES)

    def inverse(self) -> Cube:
        """Return the inverse cube."""
        edge = [0] * NEDGES
        for i, piece in enumerate(self.edge):
            edge[piece & PBITS] = i | (piece & EOBIT)
        corner = [0] * NCORNERS
        for i, piece in enumerate(self.corner):
            corner[piece & PBITS] = i | _flip_co(piece)
        return Cube(tuple(corner), tuple(edge))

    def invert_co(self) -> Cube:
        """Swap clockwise and counter-clockwise corner twists."""
        corner = tuple((p & PBITS) | _flip_co(p) for p in self.corner)
        return Cube(corner, self.edge)

    def coord_co(self) -> int:
        """Corner orientation coordinate, 0 <= co < 3^7."""
        return sum(3**i * (p >> COSHIFT) for i, p in enumerate(self.corner[:7]))

    def coord_csep(self) -> int:
        """Corner separation (tetrad) coordinate, 0 <= csep < 2^7."""
        return sum(
            2**i * ((p & CSEPBIT) >> 2) for i, p in enumerate(self.corner[:7])
        )

    def coord_cocsep(self) -> int:
        """Combined corner orientation and separation coordinate."""
        return (self.coord_co() << 7) + self.coord_csep()

    def coord_eo(self) -> int:
        """Edge orientation coordinate, 0 <= eo < 2^11."""
        return sum(2**i * (p >> EOSHIFT) for i, p in enumerate(self.edge[1:]))

    def coord_esep(self) -> int:
        """Edge separation coordinate, 0 <= esep < C(12,4)*C(8,4)."""
        j = 0
        k = 4
        l = 4
        ret1 = 0
        ret2 = 0
        for i, piece in enumerate(self.edge):
            if piece & ESEPBIT_2:
                ret1 += _binomial(11 - i, k)
                k -= 1
            else:
                if piece & ESEPBIT_1:
                    if j < 8:
                        ret2 += _binomial(7 - j, l)
                    l -= 1
                j += 1
        return ret1 * 70 + ret2

    def with_eo(self, eo: int) -> Cube:
        """Return a copy whose edge orientation has coordinate ``eo``."""
        if eo < 0:
            raise ValueError("the edge orientation coordinate must not be negative")
        edge = list(self.edge)
        total = 0
        for i in range(1, NEDGES):
            flip = eo & 1
            eo >>= 1
            total += flip
            edge[i] = (edge[i] & ~EOBIT & 0xFF) | (EOBIT * flip)
        edge[0] = (edge[0] & ~EOBIT & 0xFF) | (EOBIT * (total % 2))
        return Cube(self.corner, tuple(edge))

    def with_corners_of(self, other: Cube) -> Cube:
        """Return a copy whose corners are taken from ``other``."""
        return Cube(other.corner, self.edge)

    def with_edges_of(self, other: Cube) -> Cube:
        """Return a copy whose edges are taken from ``other``."""
        return Cube(self.corner, other.edge)


_SOLVED = Cube(tuple(range(NCORNERS)), tuple(range(NEDGES)))
_ZERO = Cube((0,) * NCORNERS, (0,) * NEDGES)


def solved_cube() -> Cube:
    """Return the solved cube."""
    return _SOLVED


def zero_cube() -> Cube:
    """Return the all-zero cube used to mark errors."""
    return _ZERO


def invcoord_co(coord: int) -> Cube:
    """Return the solved cube with corner orientation coordinate ``coord``."""
    corner = list(range(NCORNERS))
    total = 0
    c = coord
    for i in range(7):
        total += c % 3
        corner[i] |= (c % 3) << COSHIFT
        c //= 3
    corner[7] |= ((3 - (total % 3)) % 3) << COSHIFT
    return Cube(tuple(corner), _SOLVED.edge)


def invcoord_esep_array(set1: int, set2: int) -> list[int]:
    """Return the twelve edge bytes for the given separation subset indices."""
    slices = [0, 0, 0]
    result = []
    j = 0
    k = 4
    l = 4
    for i in range(NEDGES):
        v = _binomial(11 - i, k)
        w = _binomial(7 - j, l) if j < 8 else 0
        bit2 = set2 >= v
        bit1 = set1 >= w
        if bit2:
            set2 -= v
            k -= 1
            s = 2
        else:
            if bit1:
                set1 -= w
                l -= 1
            j += 1
            s = 1 if bit1 else 0
        result.append((slices[s] | (s << 2)) & 0xFF)
        slices[s] += 1
    return result


def invcoord_esep(esep: int) -> Cube:
    """Return a cube with edge separation coordinate ``esep``."""
    edges = invcoord_esep_array(esep % 70, esep // 70)
    return Cube(_SOLVED.corner, tuple(edges))


def invcoord_eoesep(i: int) -> Cube:
    """Return a cube with the combined edge separation and orientation ``i``."""
    esep = i >> 11
    eo = i % POW_2_11
    return invcoord_esep(esep).with_eo(eo)