"""Square area-of-effect patterns used by special abilities."""

from __future__ import annotations

from collections.abc import Callable, Sequence

ABILITY_SIZE = 5

Pattern = list[list[int]]


def _build(size: int, covers: Callable[[int, int, int], bool]) -> Pattern:
    if size < 1:
        raise ValueError(f"pattern size must be positive, got {size}")
    centre = size // 2
    return [
        [1 if covers(i, j, centre) else 0 for j in range(size)]
        for i in range(size)
    ]


def cone(size: int = ABILITY_SIZE) -> Pattern:
    """A cone that opens downward from the centre row to the bottom edge."""
    return _build(size, lambda i, j, c: i >= c and abs(j - c) <= i - c)


def cross(size: int = ABILITY_SIZE) -> Pattern:
    """A cross through the centre cell."""
    return _build(size, lambda i, j, c: i == c or j == c)


def octahedron(size: int = ABILITY_SIZE) -> Pattern:
    """A diamond centred on the middle cell."""
    return _build(size, lambda i, j, c: abs(i - c) + abs(j - c) <= c)


def render_pattern(pattern: Sequence[Sequence[int]]) -> str:
    """The pattern as text, one line per row."""
    return "".join(
        "".join(f"{value} " for value in line) + "\n" for line in pattern
    )