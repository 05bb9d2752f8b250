"""Cell states and their text glyphs."""

from enum import IntEnum
from typing import Optional, Tuple

LIVE_GLYPH = "*"
DEAD_GLYPH = "."


class Cell(IntEnum):
    """State of a single cell.

    The integer values double as the storage encoding in cell buffers.
    """

    DEAD = 0
    LIVE = 1


class UnrecognizedCellError(ValueError):
    """Raised when a character is not a known cell glyph."""

    def __init__(self, character: str, position: Optional[Tuple[int, int]] = None) -> None:
        self.character = character
        self.position = position
        message = f"Unrecognized character {character!r}"
        if position is not None:
            message += f" at row {position[0]}, column {position[1]}"
        super().__init__(message)


_GLYPHS = {Cell.LIVE: LIVE_GLYPH, Cell.DEAD: DEAD_GLYPH}
_CELLS = {glyph: cell for cell, glyph in _GLYPHS.items()}


def to_cell(char: str, position: Optional[Tuple[int, int]] = None) -> Cell:
    """Decode a glyph into a cell.

    Args:
        char: Single character, '*' or '.'
        position: Optional (row, column) used in the error message

    Returns:
        The decoded cell

    Raises:
        UnrecognizedCellError: If the character is not a cell glyph
    """
    try:
        return _CELLS[char]
    except KeyError:
        raise UnrecognizedCellError(char, position) from None


def to_char(cell: Cell) -> str:
    """Encode a cell as its glyph."""
    return _GLYPHS[Cell(cell)]
