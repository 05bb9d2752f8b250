"""Conway's Game of Life on a bounded board with a plain-text grid format."""

__version__ = "0.1.0"

from .core.cell import Cell
from .core.board import Board
from .core.universe import Universe
from .core.patterns import Pattern, PatternLibrary

__all__ = ["Cell", "Board", "Universe", "Pattern", "PatternLibrary"]
