"""Command-line demonstrations of ship placement and ability overlays."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

from navalgrid.abilities import cone, cross, octahedron, render_pattern
from navalgrid.board import Board, Orientation, PlacementError

_Ship = tuple[str, int, int, int, Orientation]


def _place_all(board: Board, ships: Iterable[_Ship]) -> None:
    for label, row, column, length, orientation in ships:
        try:
            board.place(row, column, length, orientation)
        except PlacementError as exc:
            raise PlacementError(
                f"Erro: Posicionamento inválido para o navio {label}!"
            ) from exc


def novice_report() -> str:
    """Two ships, one horizontal and one vertical."""
    board = Board()
    _place_all(
        board,
        [
            ("horizontal", 1, 2, 3, Orientation.HORIZONTAL),
            ("vertical", 2, 3, 3, Orientation.VERTICAL),
        ],
    )
    return (
        "*** Jogo de Batalha Naval ***\n"
        "Tabuleiro com navios posicionados:\n"
        "\n" + board.render()
    )


def intermediate_report() -> str:
    """Four ships, including both diagonals."""
    board = Board()
    _place_all(
        board,
        [
            ("horizontal", 1, 7, 3, Orientation.HORIZONTAL),
            ("vertical", 6, 0, 3, Orientation.VERTICAL),
            ("diagonal 1", 1, 1, 3, Orientation.ASCENDING_DIAGONAL),
            ("diagonal 2", 7, 7, 3, Orientation.DESCENDING_DIAGONAL),
        ],
    )
    return (
        "\n*** Jogo de Batalha Naval ***\n"
        "Tabuleiro com navios posicionados:\n"
        "\n" + board.render()
    )


def master_report() -> str:
    """Four ships overlaid with cone, cross and octahedron abilities."""
    board = Board()
    _place_all(
        board,
        [
            ("1", 1, 7, 3, Orientation.HORIZONTAL),
            ("2", 6, 0, 3, Orientation.VERTICAL),
            ("3", 1, 1, 3, Orientation.ASCENDING_DIAGONAL),
            ("4", 7, 7, 3, Orientation.DESCENDING_DIAGONAL),
        ],
    )
    abilities = [
        ("Cone", cone(), (4, 4)),
        ("Cruz", cross(), (2, 2)),
        ("Octaedro", octahedron(), (7, 7)),
    ]
    for _, pattern, (row, column) in abilities:
        board.apply_ability(pattern, row, column)

    parts = [
        "\n*** Jogo de Batalha Naval com Habilidades ***\n",
        "\nTabuleiro com navios e áreas de efeito:\n",
        "\n" + board.render(indexed=True),
    ]
    for name, pattern, _ in abilities:
        parts.append(f"\nMatriz de Habilidade {name}:\n")
        parts.append(render_pattern(pattern))
    return "".join(parts)


_REPORTS = {
    "novice": novice_report,
    "intermediate": intermediate_report,
    "master": master_report,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Print the chosen demonstration; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="navalgrid", description="Show a naval-battle board."
    )
    parser.add_argument(
        "level", nargs="?", choices=sorted(_REPORTS), default="master"
    )
    args = parser.parse_args(argv)
    try:
        print(_REPORTS[args.level](), end="")
    except PlacementError as exc:
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())