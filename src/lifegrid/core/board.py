"""Board: a single generation of cells with text encoding and neighbour counts."""

import logging
from typing import Sequence, Tuple
import numpy as np
import torch
import torch.nn.functional as F

from .cell import Cell, to_cell, to_char
from .grid import CellRow, Grid, rows_from_cells

LOG = logging.getLogger(__name__)

LINE_SEPARATOR = "\n"

_NEIGHBOUR_OFFSETS = [(dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)]


class Board:
    """A fixed-size board of cells.

    Coordinates are ``(x, y)`` where ``x`` is the row index and ``y`` the
    column index. Cells outside the board are never wrapped; for neighbour
    counting they are treated as dead.
    """

    DEFAULT_ROW_COUNT = 3
    DEFAULT_COLUMN_COUNT = 3

    def __init__(self, rows: int = DEFAULT_ROW_COUNT, columns: int = DEFAULT_COLUMN_COUNT) -> None:
        """Initialize a board of dead cells.

        Args:
            rows: Number of rows
            columns: Number of columns
        """
        self._cells = Grid(rows, columns)

    @classmethod
    def load_from_text(cls, text: str) -> "Board":
        """Decode a board from the text grid format.

        Lines are separated by ``LINE_SEPARATOR``; each character is ``*``
        (live) or ``.`` (dead). The empty string decodes to an empty board.

        Args:
            text: Encoded grid

        Returns:
            New Board instance

        Raises:
            UnrecognizedCellError: If a character is not a cell glyph
            GridShapeError: If lines have different lengths
        """
        lines = text.split(LINE_SEPARATOR) if text else []
        decoded = [
            [to_cell(char, (row, column)) for column, char in enumerate(line)]
            for row, line in enumerate(lines)
        ]
        board = cls.load_from_rows(rows_from_cells(decoded))
        LOG.debug("Loaded %dx%d board from text", board.height, board.width)
        return board

    @classmethod
    def load_from_rows(cls, rows: Sequence[CellRow]) -> "Board":
        """Build a board from existing rows.

        Raises:
            GridShapeError: If the rows have different lengths
        """
        cells = Grid.from_rows(rows)
        board = cls(0, 0)
        board._cells = cells
        return board

    @classmethod
    def load_from_array(cls, array: np.ndarray) -> "Board":
        """Build a board from a 2D array of 0/1 values."""
        board = cls(0, 0)
        board._cells = Grid.from_array(array)
        return board

    def to_text(self) -> str:
        """Encode the board in the text grid format, without a trailing separator."""
        return LINE_SEPARATOR.join("".join(to_char(cell) for cell in row) for row in self._cells)

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._cells.columns

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._cells.rows

    @property
    def shape(self) -> Tuple[int, int]:
        """Board dimensions as (height, width)."""
        return (self.height, self.width)

    @property
    def population(self) -> int:
        """Number of live cells."""
        return int(np.count_nonzero(self._cells.to_array()))

    def get_cell(self, x: int, y: int) -> Cell:
        """Get the cell at row ``x``, column ``y``.

        Raises:
            IndexError: If the coordinates are outside the board
        """
        return self._cells.get(x, y)

    def set_cell(self, x: int, y: int, cell: Cell) -> None:
        """Set the cell at row ``x``, column ``y``.

        Raises:
            IndexError: If the coordinates are outside the board
        """
        self._cells.set(x, y, cell)

    def get_contents(self) -> Grid:
        """Get an independent deep copy of the board's grid."""
        return self._cells.clone()

    def to_array(self) -> np.ndarray:
        """Get the cells as a (height, width) array of 0/1 values."""
        return self._cells.to_array()

    def _is_outside(self, x: int, y: int) -> bool:
        return not (0 <= x < self.height and 0 <= y < self.width)

    def get_live_neighbours_at(self, x: int, y: int) -> int:
        """Count living neighbours of a cell.

        The cell itself is not counted, and neighbours falling outside the
        board count as dead.

        Args:
            x: Row coordinate
            y: Column coordinate

        Returns:
            Number of living neighbours (0-8)
        """
        count = 0
        for dx, dy in _NEIGHBOUR_OFFSETS:
            nx, ny = x + dx, y + dy
            if self._is_outside(nx, ny):
                continue
            if self._cells.get(nx, ny) == Cell.LIVE:
                count += 1
        return count

    def count_all_live_neighbours(self) -> np.ndarray:
        """Count neighbours for all cells using a torch convolution.

        Zero padding gives the same bounded border behaviour as
        :meth:`get_live_neighbours_at`.

        Returns:
            (height, width) ``int8`` array of neighbour counts
        """
        if self.height == 0 or self.width == 0:
            return np.zeros(self.shape, dtype=np.int8)

        torch.set_num_threads(1)
        cells = torch.from_numpy(self.to_array().astype(np.float32)).reshape(1, 1, self.height, self.width)
        neighbours = F.conv2d(cells, _kernel(), padding=1)
        return neighbours[0, 0].numpy().astype(np.int8)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"Board({self.height}, {self.width})"


def _kernel() -> torch.Tensor:
    return torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
