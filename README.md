# cubecore

Building blocks for a Rubik's cube solver: an immutable cube model with
composition, inversion and coordinates, the binary header that precedes each
data table, value distributions of packed tables, and validation of h48
pruning tables against their known distributions.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `cubecore.errors`

- `NissyError` and its subclasses `InvalidCubeError`, `UnsolvableCubeError`,
  `InvalidMovesError`, `InvalidTransformationError`, `InvalidSolverError`,
  `BufferSizeError`, `DataError`, `OptionsError` and `UnknownError`. Each has
  a numeric `code` attribute and a default message.
- `UnsolvableWarning`, a `UserWarning` for results that cannot be solved.
- `NissFlag` (`NORMAL`, `INVERSE`, `MIXED`, `LINEAR`, `ALL`) and
  `SolverStatus` (`RUN`, `STOP`, `PAUSE`).
- `error_for_code(code)` returns an instance of the error or warning for a
  negative status code and raises `ValueError` for any other value.

### `cubecore.cube`

`Cube` is a frozen dataclass of 8 corner bytes and 12 edge bytes. The low
bits of a byte hold the piece index, bit 4 the edge orientation and bits 5-6
the corner twist.

- `Cube.compose(other)`, `Cube.compose_edges(other)`,
  `Cube.compose_corners(other)`, `Cube.inverse()`, `Cube.invert_co()`.
- Coordinates: `coord_co`, `coord_csep`, `coord_cocsep`, `coord_eo`,
  `coord_esep`.
- Copies with changes: `with_eo(eo)`, `with_corners_of(other)`,
  `with_edges_of(other)`; `pieces()` returns the corner and edge tuples.
- Module functions: `solved_cube()`, `zero_cube()`, `invcoord_co(coord)`,
  `invcoord_esep_array(set1, set2)`, `invcoord_esep(esep)`,
  `invcoord_eoesep(i)`.

### `cubecore.tables`

`TableInfo` describes a table (solver name, `TableType`, sizes, entry count,
bits per entry, `next` offset, value distribution, ...). `read_table_info(buf)`
parses the 512-byte header at the start of a buffer, `read_table_info_n(buf, n)`
follows the `next` offsets to the `n`-th header, and
`write_table_info(info, buf)` writes a header into a writable buffer such as a
`bytearray`. Too small buffers raise `BufferSizeError`.

### `cubecore.dispatch`

`match_solver(name)` returns the `SolverFamily` (`H48` for names starting
with `h48`, `COORD` for names starting with `coord_`) or `None`.

### `cubecore.distribution`

`entries_per_byte(bits)`, `get_distribution(table, entries, bits)` counts how
many packed entries hold each value (raising `DataError` for a short table or
an out-of-range value), and `distribution_equal(expected, actual, maxvalue)`
compares two distributions up to `maxvalue` (at most 20).

### `cubecore.h48table`

`h48_esize(h)`, `coclass(x)`, `ttrep(x)`, packed entry access with
`get_h48_pval(table, i, k)` and `set_h48_pval(table, i, k, val)`, and
`make_info_h48k2(h, base, entries, tablesize)` for the header of a 2-bit
h48 table.

### `cubecore.h48check`

`expected_h48(h, k)` returns the highest checked value and the known
distribution for a table. `check_data_h48(data)` walks a chain of tables,
checks the header and the actual contents of every pruning table, and returns
the list of headers read; any mismatch or corruption raises `DataError`.

Progress and mismatches are reported through the standard `logging` module.

## Example

```python
from cubecore.cube import invcoord_co, solved_cube
from cubecore.dispatch import SolverFamily, match_solver

cube = invcoord_co(1234)
assert cube.coord_co() == 1234
assert cube.compose(cube.inverse()) == solved_cube()

assert match_solver("h48h0k4") is SolverFamily.H48
assert match_solver("unknown") is None
```

## What this package does not do

It does not read or write cubes as text, parse or apply moves, apply
rotations or mirror transformations, generate pruning tables, or solve cubes.
It has no command-line program.