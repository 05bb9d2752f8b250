"""Core cellular automaton logic."""

from .cell import Cell, UnrecognizedCellError, to_cell, to_char
from .grid import CellRow, Grid, GridShapeError
from .board import Board, LINE_SEPARATOR
from .universe import Universe, next_cell_state
from .patterns import Pattern, PatternLibrary

__all__ = [
    "Cell",
    "UnrecognizedCellError",
    "to_cell",
    "to_char",
    "CellRow",
    "Grid",
    "GridShapeError",
    "Board",
    "LINE_SEPARATOR",
    "Universe",
    "next_cell_state",
    "Pattern",
    "PatternLibrary",
]
