"""Fixed-size cell containers backed by numpy buffers."""

from typing import Iterable, Iterator, List, Sequence
import numpy as np

from .cell import Cell


class GridShapeError(ValueError):
    """Raised when rows of different lengths are combined into a grid."""


class CellRow:
    """A fixed-length row of cells.

    Cells are stored in a contiguous ``int8`` buffer using the integer
    values of :class:`Cell`. The length never changes after construction.
    """

    def __init__(self, count: int) -> None:
        """Initialize a row of dead cells.

        Args:
            count: Number of cells in the row

        Raises:
            ValueError: If count is negative
        """
        if count < 0:
            raise ValueError(f"Row length must be non-negative, got {count}")
        self._count = count
        self._cells = np.zeros(count, dtype=np.int8)

    @classmethod
    def from_cells(cls, cells: Sequence[Cell]) -> "CellRow":
        """Create a row holding a copy of the given cells, in order."""
        row = cls(len(cells))
        for index, cell in enumerate(cells):
            row.set(index, cell)
        return row

    @property
    def count(self) -> int:
        """Number of cells in the row."""
        return self._count

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._count:
            raise IndexError(f"Cell index {index} out of range for row of {self._count} cells")

    def get(self, index: int) -> Cell:
        """Get the cell at an index.

        Raises:
            IndexError: If index is outside [0, count)
        """
        self._check_index(index)
        return Cell(int(self._cells[index]))

    def set(self, index: int, cell: Cell) -> None:
        """Set the cell at an index.

        Raises:
            IndexError: If index is outside [0, count)
        """
        self._check_index(index)
        self._cells[index] = Cell(cell)

    def clone(self) -> "CellRow":
        """Return an independent copy of this row."""
        row = CellRow(self._count)
        row._cells[:] = self._cells
        return row

    def __getitem__(self, index: int) -> Cell:
        return self.get(index)

    def __setitem__(self, index: int, cell: Cell) -> None:
        self.set(index, cell)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Cell]:
        for value in self._cells:
            yield Cell(int(value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CellRow):
            return NotImplemented
        return bool(np.array_equal(self._cells, other._cells))

    def __repr__(self) -> str:
        return f"CellRow({self._count})"


class Grid:
    """A fixed-size 2D grid made of equally long cell rows."""

    def __init__(self, rows: int, columns: int) -> None:
        """Initialize a grid of dead cells.

        Args:
            rows: Number of rows
            columns: Number of columns in every row
        """
        if rows < 0 or columns < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {rows}x{columns}")
        self._rows = rows
        self._columns = columns
        self._data: List[CellRow] = [CellRow(columns) for _ in range(rows)]

    @classmethod
    def from_rows(cls, rows: Sequence[CellRow]) -> "Grid":
        """Build a grid from existing rows.

        The column count is taken from the first row (0 when there are no
        rows). The rows are copied, so the grid never shares storage with
        its input.

        Args:
            rows: Rows in top-to-bottom order

        Returns:
            New Grid instance

        Raises:
            GridShapeError: If the rows do not all have the same length
        """
        row_count = len(rows)
        columns = rows[0].count if row_count else 0

        if any(row.count != columns for row in rows):
            raise GridShapeError("All rows must have the same column count")

        grid = cls(row_count, columns)
        grid._data = [row.clone() for row in rows]
        return grid

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Grid":
        """Build a grid from a 2D array of 0/1 values.

        Raises:
            ValueError: If the array is not 2D or holds other values
        """
        array = np.asarray(array)
        if array.ndim != 2:
            raise ValueError(f"Expected a 2D array, got {array.ndim} dimensions")
        if not np.isin(array, (int(Cell.DEAD), int(Cell.LIVE))).all():
            raise ValueError("Array values must be 0 (dead) or 1 (live)")

        rows, columns = array.shape
        grid = cls(rows, columns)
        for index, row in enumerate(grid._data):
            row._cells[:] = array[index]
        return grid

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def columns(self) -> int:
        """Number of columns."""
        return self._columns

    def _row_at(self, row: int) -> CellRow:
        if not 0 <= row < self._rows:
            raise IndexError(f"Row index {row} out of range for grid of {self._rows} rows")
        return self._data[row]

    def get(self, row: int, column: int) -> Cell:
        """Get the cell at (row, column).

        Raises:
            IndexError: If either coordinate is out of range
        """
        return self._row_at(row).get(column)

    def set(self, row: int, column: int, cell: Cell) -> None:
        """Set the cell at (row, column).

        Raises:
            IndexError: If either coordinate is out of range
        """
        self._row_at(row).set(column, cell)

    def clone(self) -> "Grid":
        """Return a deep copy; no row is shared with this grid."""
        grid = Grid(self._rows, self._columns)
        grid._data = [row.clone() for row in self._data]
        return grid

    def to_array(self) -> np.ndarray:
        """Convert to a (rows, columns) ``int8`` array."""
        if not self._data:
            return np.zeros((0, self._columns), dtype=np.int8)
        return np.stack([row._cells for row in self._data])

    def __iter__(self) -> Iterator[CellRow]:
        return iter(self._data)

    def __len__(self) -> int:
        return self._rows

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (self._rows, self._columns) == (other._rows, other._columns) and all(
            mine == theirs for mine, theirs in zip(self._data, other._data)
        )

    def __repr__(self) -> str:
        return f"Grid({self._rows}, {self._columns})"


def rows_from_cells(rows: Iterable[Sequence[Cell]]) -> List[CellRow]:
    """Wrap plain cell sequences as CellRow instances."""
    return [CellRow.from_cells(cells) for cells in rows]
