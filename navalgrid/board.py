"""A square naval-battle board with ship placement and ability overlays."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from enum import IntEnum

WATER = 0
SHIP = 3
AFFECTED = 5

DEFAULT_SIZE = 10


class Orientation(IntEnum):
    """Direction in which a ship extends from its starting cell."""

    VERTICAL = 0
    HORIZONTAL = 1
    DESCENDING_DIAGONAL = 2
    ASCENDING_DIAGONAL = 3

    @property
    def step(self) -> tuple[int, int]:
        """Row and column increments between consecutive ship cells."""
        return _STEPS[self]


_STEPS = {
    Orientation.VERTICAL: (1, 0),
    Orientation.HORIZONTAL: (0, 1),
    Orientation.DESCENDING_DIAGONAL: (1, -1),
    Orientation.ASCENDING_DIAGONAL: (1, 1),
}


class PlacementError(ValueError):
    """Raised when a ship cannot be placed where it was asked to go."""


class Board:
    """A square grid of water, ship and affected cells."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size < 1:
            raise ValueError(f"board size must be positive, got {size}")
        self.size = size
        self._grid = [[WATER] * size for _ in range(size)]

    def __getitem__(self, position: tuple[int, int]) -> int:
        row, column = position
        if not self._inside(row, column):
            raise IndexError(f"cell {position} is outside the board")
        return self._grid[row][column]

    @property
    def rows(self) -> tuple[tuple[int, ...], ...]:
        """A snapshot of the grid, row by row."""
        return tuple(tuple(line) for line in self._grid)

    def _inside(self, row: int, column: int) -> bool:
        return 0 <= row < self.size and 0 <= column < self.size

    @staticmethod
    def _footprint(
        row: int, column: int, length: int, orientation: Orientation
    ) -> Iterator[tuple[int, int]]:
        d_row, d_column = orientation.step
        for k in range(length):
            yield row + k * d_row, column + k * d_column

    def can_place(
        self, row: int, column: int, length: int, orientation: int
    ) -> bool:
        """Whether a ship fits on the board without touching another ship."""
        try:
            orientation = Orientation(orientation)
        except ValueError:
            return False
        if not self._inside(row, column):
            return False
        cells = list(self._footprint(row, column, length, orientation))
        return all(
            self._inside(r, c) and self._grid[r][c] == WATER for r, c in cells
        )

    def place(
        self, row: int, column: int, length: int, orientation: int
    ) -> None:
        """Put a ship on the board, or raise PlacementError if it does not fit."""
        if not self.can_place(row, column, length, orientation):
            raise PlacementError(
                f"cannot place ship of length {length} at ({row}, {column}) "
                f"with orientation {orientation}"
            )
        for r, c in self._footprint(row, column, length, Orientation(orientation)):
            self._grid[r][c] = SHIP

    def apply_ability(
        self, pattern: Sequence[Sequence[int]], row: int, column: int
    ) -> int:
        """Mark the cells a pattern covers, centred on (row, column).

        Cells of the pattern that fall off the board are ignored. Returns the
        number of board cells marked.
        """
        offset = len(pattern) // 2
        marked = 0
        for i, line in enumerate(pattern):
            for j, value in enumerate(line):
                r, c = row - offset + i, column - offset + j
                if value == 1 and self._inside(r, c):
                    self._grid[r][c] = AFFECTED
                    marked += 1
        return marked

    def render(self, indexed: bool = False) -> str:
        """The board as text, with a header line and one line per row.

        With ``indexed`` the header and row labels carry coordinates;
        otherwise every label is ``1``.
        """
        if indexed:
            header = " " + "".join(f"{j} " for j in range(self.size))
            labels = [str(i) for i in range(self.size)]
        else:
            header = "1 " * self.size
            labels = ["1"] * self.size
        lines = [" " + header] if indexed else [" " + header]
        for label, line in zip(labels, self._grid):
            lines.append(f"{label} " + "".join(f"{cell} " for cell in line))
        return "\n".join(lines) + "\n"