import pytest
from hypothesis import given
from hypothesis import strategies as st

from cubecore.cube import (
    Cube,
    invcoord_co,
    invcoord_eoesep,
    invcoord_esep,
    invcoord_esep_array,
    solved_cube,
    zero_cube,
)


@st.composite
def parts(draw):
    cp = draw(st.permutations(range(8)))
    co = draw(st.lists(st.integers(0, 2), min_size=7, max_size=7))
    co.append((3 - sum(co) % 3) % 3)
    ep = draw(st.permutations(range(12)))
    eo = draw(st.lists(st.integers(0, 1), min_size=11, max_size=11))
    eo.append(sum(eo) % 2)
    corner = tuple(p | (o << 5) for p, o in zip(cp, co))
    edge = tuple(p | (o << 4) for p, o in zip(ep, eo))
    return corner, edge


def test_basic_equality():
    solved = solved_cube()
    zero = zero_cube()
    assert solved == solved_cube()
    assert (solved == zero) is False
    assert (zero == solved) is False


def test_pieces_of_solved():
    corner, edge = solved_cube().pieces()
    assert corner == (0, 1, 2, 3, 4, 5, 6, 7)
    assert edge == (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11)


def test_pieces_of_zero():
    corner, edge = zero_cube().pieces()
    assert corner == (0,) * 8
    assert edge == (0,) * 12


def test_wrong_lengths_rejected():
    with pytest.raises(ValueError):
        Cube(corner=(0,) * 7, edge=(0,) * 12)
    with pytest.raises(ValueError):
        Cube(corner=(0,) * 8, edge=(0,) * 13)
    with pytest.raises(ValueError):
        Cube(corner=(256,) + (0,) * 7, edge=(0,) * 12)


def test_inverse_of_solved():
    assert solved_cube().inverse() == solved_cube()


@given(parts())
def test_inverse_twice_is_identity(p):
    c = Cube(corner=p[0], edge=p[1])
    assert c.inverse().inverse() == c


@given(parts())
def test_compose_with_inverse_is_solved(p):
    c = Cube(corner=p[0], edge=p[1])
    assert c.compose(c.inverse()) == solved_cube()
    assert c.inverse().compose(c) == solved_cube()


@given(parts())
def test_solved_is_neutral(p):
    c = Cube(corner=p[0], edge=p[1])
    assert solved_cube().compose(c) == c
    assert c.compose(solved_cube()) == c


@given(parts(), parts(), parts())
def test_compose_is_associative(pa, pb, pc):
    a = Cube(corner=pa[0], edge=pa[1])
    b = Cube(corner=pb[0], edge=pb[1])
    c = Cube(corner=pc[0], edge=pc[1])
    assert a.compose(b).compose(c) == a.compose(b.compose(c))


@given(parts(), parts())
def test_inverse_of_product(pa, pb):
    a = Cube(corner=pa[0], edge=pa[1])
    b = Cube(corner=pb[0], edge=pb[1])
    assert a.compose(b).inverse() == b.inverse().compose(a.inverse())


@given(parts(), parts())
def test_partial_compositions(pa, pb):
    a = Cube(corner=pa[0], edge=pa[1])
    b = Cube(corner=pb[0], edge=pb[1])
    full = a.compose(b)
    edges = a.compose_edges(b)
    corners = a.compose_corners(b)
    assert edges.edge == full.edge
    assert edges.corner == (0,) * 8
    assert corners.corner == full.corner
    assert corners.edge == (0,) * 12


@given(parts())
def test_invert_co_twice_is_identity(p):
    c = Cube(corner=p[0], edge=p[1])
    assert c.invert_co().invert_co() == c


def test_invert_co_swaps_twists():
    c = Cube(corner=(0x20, 0x41, 2, 3, 4, 5, 6, 7), edge=tuple(range(12)))
    assert c.invert_co().corner == (0x40, 0x21, 2, 3, 4, 5, 6, 7)


def test_coordinates_of_solved():
    s = solved_cube()
    assert s.coord_eo() == 0
    assert s.coord_co() == 0
    assert s.coord_esep() == 0
    assert s.coord_csep() == 112


@given(parts())
def test_cocsep_combines_co_and_csep(p):
    c = Cube(corner=p[0], edge=p[1])
    assert c.coord_cocsep() == (c.coord_co() << 7) + c.coord_csep()


@given(parts())
def test_coordinate_ranges(p):
    c = Cube(corner=p[0], edge=p[1])
    assert 0 <= c.coord_co() < 2187
    assert 0 <= c.coord_csep() < 128
    assert 0 <= c.coord_eo() < 2048
    assert 0 <= c.coord_esep() < 495 * 70


def test_invcoord_co_all_values():
    for coord in range(2187):
        cube = invcoord_co(coord)
        assert cube.coord_co() == coord
        assert sum(p >> 5 for p in cube.corner) % 3 == 0
        assert tuple(p & 0xF for p in cube.corner) == tuple(range(8))


def test_invcoord_co_zero_is_solved():
    assert invcoord_co(0) == solved_cube()


@given(parts())
def test_invcoord_esep_round_trip(p):
    c = Cube(corner=p[0], edge=p[1])
    i = c.coord_esep()
    assert invcoord_esep(i).coord_esep() == i


def test_invcoord_esep_zero_is_solved():
    assert invcoord_esep(0) == solved_cube()
    assert invcoord_esep_array(0, 0) == list(range(12))


def test_invcoord_esep_all_values_distinct():
    seen = {invcoord_esep(i).coord_esep() for i in range(0, 495 * 70, 97)}
    assert seen == set(range(0, 495 * 70, 97))


def test_invcoord_eoesep_zero_is_solved():
    assert invcoord_eoesep(0) == solved_cube()


@given(st.integers(0, 495 * 70 - 1), st.integers(0, 2047))
def test_invcoord_eoesep_round_trip(esep, eo):
    c = invcoord_eoesep((esep << 11) + eo)
    assert c.coord_esep() == esep
    assert c.coord_eo() == eo


def test_with_eo_all_values():
    for eo in range(2048):
        c = solved_cube().with_eo(eo)
        assert c.coord_eo() == eo
        assert sum(p >> 4 for p in c.edge) % 2 == 0
        assert tuple(p & 0xF for p in c.edge) == tuple(range(12))


@given(parts(), st.integers(0, 2047))
def test_with_eo_keeps_permutation(p, eo):
    c = Cube(corner=p[0], edge=p[1])
    d = c.with_eo(eo)
    assert tuple(x & 0xF for x in d.edge) == tuple(x & 0xF for x in c.edge)
    assert d.corner == c.corner


def test_with_eo_rejects_negative():
    with pytest.raises(ValueError):
        solved_cube().with_eo(-1)


@given(parts(), parts())
def test_copy_corners_and_edges(pa, pb):
    a = Cube(corner=pa[0], edge=pa[1])
    b = Cube(corner=pb[0], edge=pb[1])
    ab = a.with_corners_of(b)
    assert ab.corner == b.corner
    assert ab.edge == a.edge
    ba = a.with_edges_of(b)
    assert ba.edge == b.edge
    assert ba.corner == a.corner