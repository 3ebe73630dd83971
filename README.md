# navalgrid

A small battleship board. It places ships on a square grid and checks each placement first. It can also mark area-of-effect ability patterns on the board.

## Installation

```
pip install .
```

## Command line

```
navalgrid [novice|intermediate|master]
```

The command prints one demonstration board. If no level is given, it uses `master`.

- `novice`: two ships of length 3, one horizontal and one vertical.
- `intermediate`: four ships of length 3, one in each orientation.
- `master`: the same four ships, overlaid with a cone, a cross and an octahedron ability. The board is printed with coordinate labels, followed by the three 5×5 ability patterns.

If a ship cannot be placed, the command prints an error message and exits with status 1.

The same output is available as strings from `novice_report()`, `intermediate_report()` and `master_report()` in `navalgrid.cli`. Each of these raises `PlacementError` if a ship does not fit.

## Library use

```python
from navalgrid.board import Board, Orientation, PlacementError
from navalgrid.abilities import cone, cross, octahedron, render_pattern

board = Board(10)
board.place(1, 7, 3, Orientation.HORIZONTAL)
board.place(6, 0, 3, Orientation.VERTICAL)

if not board.can_place(6, 0, 3, Orientation.VERTICAL):
    print("occupied")

try:
    board.place(9, 9, 3, Orientation.HORIZONTAL)
except PlacementError as err:
    print(err)

marked = board.apply_ability(cross(5), 2, 2)  # number of cells marked
print(board.render(indexed=True))
print(render_pattern(octahedron(5)))
print(board[2, 2], board.rows[1])
```

### Board

- `Board(size=10)` creates a square grid of water. A size below 1 raises `ValueError`.
- `can_place(row, column, length, orientation)` returns `False` in any of these cases: the start is off the board, the orientation is unknown, or any cell of the ship is off the board or not water.
- `place(...)` marks the ship's cells. It raises `PlacementError`, a subclass of `ValueError`, when `can_place` would return `False`.
- `apply_ability(pattern, row, column)` centres a square pattern on `(row, column)`. Every cell where the pattern holds `1` is marked as affected. Parts of the pattern that fall off the board are ignored. The method returns the number of cells it marked.
- `render(indexed=False)` returns the board as text. With `indexed=True`, the header and the row labels show coordinates. Otherwise every label is `1`.
- `board[row, column]` reads one cell. A cell off the board raises `IndexError`. `board.rows` is a snapshot of the grid as tuples.

Cells hold these values:

- `0` is water.
- `3` is a ship.
- `5` is a cell hit by an ability.

### Orientation

Each orientation sets the step from one ship cell to the next:

| Orientation | Step |
|---|---|
| `Orientation.VERTICAL` (0) | down |
| `Orientation.HORIZONTAL` (1) | right |
| `Orientation.DESCENDING_DIAGONAL` (2) | down and left |
| `Orientation.ASCENDING_DIAGONAL` (3) | down and right |

The placement methods also accept the plain integer values.

### Abilities

`cone(size=5)`, `cross(size=5)` and `octahedron(size=5)` return square patterns as lists of lists of `0` and `1`. A size below 1 raises `ValueError`.

- The cone opens downward from the centre row.
- The cross runs through the centre cell.
- The octahedron is a diamond around the centre cell.

`render_pattern(pattern)` returns the pattern as text, one line per row.

## Limits

There is no interactive game: no turns, no shots at ships, no opponent, and no saved games. The package places ships and marks ability areas only.

## Tests

```
pip install .[test]
pytest
```