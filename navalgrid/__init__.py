"""Battleship board with validated ship placement, ability patterns and demo reports."""

__version__ = "0.1.0"

__all__ = ["board", "abilities", "cli"]