"""Common Conway's Game of Life patterns in the text grid format."""

from typing import Any, Dict, List, Optional, Tuple

from .board import LINE_SEPARATOR, Board
from .cell import Cell
from .universe import Universe


def _lines(*rows: str) -> str:
    return LINE_SEPARATOR.join(rows)


class Pattern:
    """Represents a named Game of Life pattern.

    The pattern shape is held as an encoded grid, where ``*`` marks live
    cells and ``.`` dead ones.
    """

    def __init__(self, name: str, text: str, description: str = "") -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            text: Encoded grid of the pattern
            description: Optional description

        Raises:
            UnrecognizedCellError: If the text holds an unknown glyph
            GridShapeError: If the text lines have different lengths
        """
        self.name = name
        self.description = description
        self._board = Board.load_from_text(text)

    @property
    def text(self) -> str:
        """Encoded grid of the pattern."""
        return self._board.to_text()

    @property
    def size(self) -> Tuple[int, int]:
        """Pattern size as (rows, columns)."""
        return self._board.shape

    @property
    def live_cells(self) -> List[Tuple[int, int]]:
        """(row, column) coordinates of the live cells, in row-major order."""
        return [
            (row, column)
            for row in range(self._board.height)
            for column in range(self._board.width)
            if self._board.get_cell(row, column) == Cell.LIVE
        ]

    def to_board(self) -> Board:
        """Get an independent board holding the pattern."""
        return Board.load_from_text(self.text)

    def apply_to(self, universe: Universe, row_offset: int = 0, column_offset: int = 0) -> None:
        """Set the pattern's live cells in a universe.

        Cells outside the pattern's live cells are left untouched.

        Args:
            universe: Target universe
            row_offset: Row of the pattern's top edge
            column_offset: Column of the pattern's left edge

        Raises:
            ValueError: If the pattern does not fit at the given offset
        """
        rows, columns = self.size
        if (
            row_offset < 0
            or column_offset < 0
            or row_offset + rows > universe.height
            or column_offset + columns > universe.width
        ):
            raise ValueError(
                f"Pattern '{self.name}' ({rows}x{columns}) does not fit at "
                f"({row_offset}, {column_offset}) in a {universe.height}x{universe.width} universe"
            )

        for row, column in self.live_cells:
            universe.set_live_cell_at(row + row_offset, column + column_offset)

    def to_dict(self) -> Dict[str, Any]:
        """Convert pattern to a dictionary."""
        return {"name": self.name, "text": self.text, "description": self.description}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Pattern":
        """Create pattern from a dictionary produced by :meth:`to_dict`."""
        return cls(name=data["name"], text=data["text"], description=data.get("description", ""))

    @classmethod
    def from_universe(cls, universe: Universe, name: str, description: str = "") -> "Pattern":
        """Create pattern from the current state of a universe."""
        return cls(name, universe.grid, description)

    def __repr__(self) -> str:
        return f"Pattern({self.name!r}, {self.size[0]}x{self.size[1]})"


class PatternLibrary:
    """Manages an in-memory collection of patterns."""

    CATEGORIES = {
        "Still Life": ["Block", "Beehive", "Loaf", "Boat"],
        "Oscillators": ["Blinker", "Toad", "Beacon", "Pulsar"],
        "Spaceships": ["Glider", "Lightweight Spaceship"],
        "Methuselahs": ["R-pentomino", "Diehard", "Acorn"],
    }

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        """Load built-in common patterns."""
        # Still life patterns
        self.add_pattern(Pattern("Block", _lines("**", "**"), "2x2 still life block"))
        self.add_pattern(Pattern("Beehive", _lines(".**.", "*..*", ".**."), "Beehive still life"))
        self.add_pattern(Pattern("Loaf", _lines(".**.", "*..*", ".*.*", "..*."), "Loaf still life"))
        self.add_pattern(Pattern("Boat", _lines("**.", "*.*", ".*."), "Boat still life"))

        # Oscillators
        self.add_pattern(Pattern("Blinker", _lines("***"), "Period-2 oscillator"))
        self.add_pattern(Pattern("Toad", _lines(".***", "***."), "Period-2 oscillator"))
        self.add_pattern(Pattern("Beacon", _lines("**..", "**..", "..**", "..**"), "Period-2 oscillator"))

        pulsar_arms = "..***...***.."
        pulsar_spokes = "*....*.*....*"
        blank = "............."
        self.add_pattern(
            Pattern(
                "Pulsar",
                _lines(
                    pulsar_arms,
                    blank,
                    pulsar_spokes,
                    pulsar_spokes,
                    pulsar_spokes,
                    pulsar_arms,
                    blank,
                    pulsar_arms,
                    pulsar_spokes,
                    pulsar_spokes,
                    pulsar_spokes,
                    blank,
                    pulsar_arms,
                ),
                "Period-3 oscillator",
            )
        )

        # Spaceships
        self.add_pattern(Pattern("Glider", _lines(".*.", "..*", "***"), "Smallest spaceship, period-4"))
        self.add_pattern(
            Pattern(
                "Lightweight Spaceship",
                _lines("*..*.", "....*", "*...*", ".****"),
                "LWSS - Period-4 spaceship",
            )
        )

        # Methuselahs
        self.add_pattern(
            Pattern(
                "R-pentomino",
                _lines(".**", "**.", ".*."),
                "Famous methuselah that stabilizes after 1103 generations",
            )
        )
        self.add_pattern(
            Pattern(
                "Diehard",
                _lines("......*.", "**......", ".*...***"),
                "Dies after exactly 130 generations",
            )
        )
        self.add_pattern(
            Pattern(
                "Acorn",
                _lines(".*.....", "...*...", "**..***"),
                "Takes 5206 generations to stabilize",
            )
        )

    def add_pattern(self, pattern: Pattern) -> None:
        """Add a pattern to the library, replacing any with the same name."""
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name.

        Returns:
            Pattern instance or None if not found
        """
        return self._patterns.get(name)

    def list_patterns(self) -> List[str]:
        """Get the sorted list of all pattern names."""
        return sorted(self._patterns)

    def get_patterns_by_category(self) -> Dict[str, List[str]]:
        """Get patterns organized by category.

        Patterns added after construction are listed under "Custom".
        """
        categories = {name: list(patterns) for name, patterns in self.CATEGORIES.items()}
        builtin = {name for patterns in self.CATEGORIES.values() for name in patterns}
        categories["Custom"] = [name for name in self._patterns if name not in builtin]

        # Remove empty categories
        return {category: names for category, names in categories.items() if names}
