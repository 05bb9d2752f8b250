"""Conway's Game of Life universe."""

import logging
import numpy as np

from .board import Board
from .cell import Cell
from .grid import Grid

LOG = logging.getLogger(__name__)


def next_cell_state(cell: Cell, live_neighbours: int) -> Cell:
    """Apply Conway's rules to one cell.

    - Live cell with 2-3 neighbours survives
    - Dead cell with exactly 3 neighbours becomes alive
    - All other cells die or stay dead
    """
    if cell == Cell.LIVE:
        return Cell.LIVE if live_neighbours in (2, 3) else Cell.DEAD
    return Cell.LIVE if live_neighbours == 3 else Cell.DEAD


class Universe:
    """Evolves a board one generation at a time.

    Each generation is computed in full from the current board into a new
    board of the same size, which then replaces the current one.
    """

    def __init__(self, rows: int, columns: int, vectorized: bool = False) -> None:
        """Initialize a universe of dead cells.

        Args:
            rows: Number of rows
            columns: Number of columns
            vectorized: Compute generations from the whole-board neighbour
                count instead of counting cell by cell
        """
        self._board = Board(rows, columns)
        self._generation = 0
        self.vectorized = vectorized

    @classmethod
    def load_from_text(cls, text: str, vectorized: bool = False) -> "Universe":
        """Create a universe whose first generation is decoded from text.

        Raises:
            UnrecognizedCellError: If a character is not a cell glyph
            GridShapeError: If lines have different lengths
        """
        board = Board.load_from_text(text)
        universe = cls(0, 0, vectorized=vectorized)
        universe._board = board
        return universe

    @property
    def generation(self) -> int:
        """Number of generations created since construction."""
        return self._generation

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._board.width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._board.height

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self._board.population

    @property
    def grid(self) -> str:
        """Current board in the text grid format."""
        return self._board.to_text()

    @property
    def cells(self) -> Grid:
        """Independent copy of the current board's grid."""
        return self._board.get_contents()

    def create_next_generation(self) -> None:
        """Advance the universe by one generation."""
        current = self._board
        if self.vectorized:
            next_board = self._compute_vectorized(current)
        else:
            next_board = self._compute(current)

        self._board = next_board
        self._generation += 1
        LOG.debug("Generation %d: population %d", self._generation, next_board.population)

    def _compute(self, current: Board) -> Board:
        next_board = Board(current.height, current.width)
        # Top to bottom, left to right
        for row in range(current.height):
            for column in range(current.width):
                cell = current.get_cell(row, column)
                neighbours = current.get_live_neighbours_at(row, column)
                next_board.set_cell(row, column, next_cell_state(cell, neighbours))
        return next_board

    def _compute_vectorized(self, current: Board) -> Board:
        cells = current.to_array()
        neighbours = current.count_all_live_neighbours()

        survive = (cells == Cell.LIVE) & ((neighbours == 2) | (neighbours == 3))
        birth = (cells == Cell.DEAD) & (neighbours == 3)

        return Board.load_from_array((survive | birth).astype(np.int8))

    def run(self, generations: int) -> None:
        """Advance the universe by several generations.

        Raises:
            ValueError: If generations is negative
        """
        if generations < 0:
            raise ValueError(f"Generations must be non-negative, got {generations}")
        for _ in range(generations):
            self.create_next_generation()

    def set_live_cell_at(self, row: int, column: int) -> None:
        self._board.set_cell(row, column, Cell.LIVE)

    def set_dead_cell_at(self, row: int, column: int) -> None:
        self._board.set_cell(row, column, Cell.DEAD)

    def get_cell_at(self, row: int, column: int) -> Cell:
        return self._board.get_cell(row, column)

    def __str__(self) -> str:
        return self.grid
