"""Tests for the CellRow and Grid containers."""

import numpy as np
import pytest
from lifegrid.core.cell import Cell
from lifegrid.core.grid import CellRow, Grid, GridShapeError


class TestCellRow:
    """Test cases for the CellRow class."""

    def test_initialization(self):
        """Test row initialization."""
        row = CellRow(4)
        assert row.count == 4
        assert len(row) == 4
        assert list(row) == [Cell.DEAD] * 4

    def test_empty_row(self):
        row = CellRow(0)
        assert row.count == 0
        assert list(row) == []

    def test_negative_length(self):
        with pytest.raises(ValueError):
            CellRow(-1)

    def test_cell_operations(self):
        """Test basic cell get/set operations."""
        row = CellRow(3)

        row.set(1, Cell.LIVE)
        assert row.get(1) is Cell.LIVE
        assert row.get(0) is Cell.DEAD

        row[2] = Cell.LIVE
        assert row[2] is Cell.LIVE

        row[1] = Cell.DEAD
        assert row[1] is Cell.DEAD

    def test_out_of_range(self):
        """Indices outside [0, count) raise IndexError."""
        row = CellRow(3)

        with pytest.raises(IndexError):
            row.get(3)

        with pytest.raises(IndexError):
            row.set(3, Cell.LIVE)

        # Negative indices are never read from the end
        with pytest.raises(IndexError):
            row.get(-1)

        with pytest.raises(IndexError):
            row[-1] = Cell.LIVE

    def test_from_cells(self):
        cells = [Cell.LIVE, Cell.DEAD, Cell.LIVE]
        row = CellRow.from_cells(cells)

        assert row.count == 3
        assert list(row) == cells

    def test_clone_is_independent(self):
        row = CellRow.from_cells([Cell.LIVE, Cell.DEAD])
        copy = row.clone()

        assert copy == row
        assert copy is not row

        copy.set(0, Cell.DEAD)
        assert row.get(0) is Cell.LIVE

    def test_iteration_is_restartable(self):
        row = CellRow.from_cells([Cell.DEAD, Cell.LIVE])
        assert list(row) == list(row) == [Cell.DEAD, Cell.LIVE]


class TestGrid:
    """Test cases for the Grid class."""

    def test_initialization(self):
        """Test grid initialization."""
        grid = Grid(2, 5)
        assert grid.rows == 2
        assert grid.columns == 5
        assert len(grid) == 2
        assert all(row.count == 5 for row in grid)
        assert all(cell is Cell.DEAD for row in grid for cell in row)

    def test_negative_dimensions(self):
        with pytest.raises(ValueError):
            Grid(-1, 3)

        with pytest.raises(ValueError):
            Grid(0, -3)

    def test_cell_operations(self):
        grid = Grid(3, 4)

        grid.set(2, 3, Cell.LIVE)
        assert grid.get(2, 3) is Cell.LIVE
        assert grid.get(2, 0) is Cell.DEAD

    def test_out_of_range(self):
        grid = Grid(3, 4)

        with pytest.raises(IndexError):
            grid.get(3, 0)

        with pytest.raises(IndexError):
            grid.get(0, 4)

        with pytest.raises(IndexError):
            grid.set(-1, 0, Cell.LIVE)

        with pytest.raises(IndexError):
            grid.set(0, -1, Cell.LIVE)

    def test_from_rows(self):
        rows = [
            CellRow.from_cells([Cell.LIVE, Cell.DEAD]),
            CellRow.from_cells([Cell.DEAD, Cell.LIVE]),
        ]
        grid = Grid.from_rows(rows)

        assert grid.rows == 2
        assert grid.columns == 2
        assert grid.get(0, 0) is Cell.LIVE
        assert grid.get(1, 1) is Cell.LIVE
        assert grid.get(0, 1) is Cell.DEAD

    def test_from_rows_copies_input(self):
        source = CellRow.from_cells([Cell.DEAD, Cell.DEAD])
        grid = Grid.from_rows([source])

        source.set(0, Cell.LIVE)
        assert grid.get(0, 0) is Cell.DEAD

    def test_from_rows_empty(self):
        grid = Grid.from_rows([])
        assert grid.rows == 0
        assert grid.columns == 0
        assert list(grid) == []

    def test_from_rows_shape_mismatch(self):
        rows = [CellRow(3), CellRow(2)]

        with pytest.raises(GridShapeError, match="same column count"):
            Grid.from_rows(rows)

    def test_clone_is_deep(self):
        grid = Grid(2, 2)
        grid.set(0, 0, Cell.LIVE)

        copy = grid.clone()
        assert copy == grid

        copy.set(1, 1, Cell.LIVE)
        assert grid.get(1, 1) is Cell.DEAD

        for original_row, copied_row in zip(grid, copy):
            assert original_row is not copied_row

    def test_iteration_order(self):
        grid = Grid(3, 1)
        grid.set(1, 0, Cell.LIVE)

        assert [row.get(0) for row in grid] == [Cell.DEAD, Cell.LIVE, Cell.DEAD]

    def test_to_array_and_from_array(self):
        grid = Grid(2, 3)
        grid.set(0, 2, Cell.LIVE)
        grid.set(1, 0, Cell.LIVE)

        array = grid.to_array()
        assert array.shape == (2, 3)
        assert array.tolist() == [[0, 0, 1], [1, 0, 0]]

        restored = Grid.from_array(array)
        assert restored == grid

    def test_to_array_degenerate(self):
        assert Grid(0, 0).to_array().shape == (0, 0)
        assert Grid(3, 0).to_array().shape == (3, 0)

    def test_from_array_invalid(self):
        with pytest.raises(ValueError):
            Grid.from_array(np.zeros(3, dtype=np.int8))

        with pytest.raises(ValueError):
            Grid.from_array(np.array([[0, 2]]))

    def test_equality(self):
        assert Grid(2, 2) == Grid(2, 2)
        assert Grid(2, 2) != Grid(2, 3)
        assert Grid(2, 2) != "not a grid"

        other = Grid(2, 2)
        other.set(0, 1, Cell.LIVE)
        assert Grid(2, 2) != other
