from enum import Enum
from typing import List, NamedTuple


class Cell(Enum):
    EMPTY = 0
    RED = 1
    BLUE = 2

    def next(self) -> "Cell":
        """Tap order: empty -> red -> blue -> empty."""
        if self is Cell.EMPTY:
            return Cell.RED
        if self is Cell.RED:
            return Cell.BLUE
        return Cell.EMPTY

    @property
    def symbol(self) -> str:
        return CELL_SYMBOLS[self]


class CellPosition(NamedTuple):
    row: int
    col: int


class Difficulty(Enum):
    """Named tiers: (grid size, reveal fraction, levels in tier)."""
    TINY = (4, 0.50, 20)
    SMALL = (6, 0.45, 20)
    MEDIUM = (8, 0.40, 15)
    LARGE = (10, 0.35, 10)

    def __init__(self, grid_size: int, reveal_fraction: float, levels_count: int):
        self.grid_size = grid_size
        self.reveal_fraction = reveal_fraction
        self.levels_count = levels_count

    @property
    def index(self) -> int:
        return list(Difficulty).index(self)

    @property
    def display_name(self) -> str:
        return f"{self.name.title()} ({self.grid_size}x{self.grid_size})"

    @classmethod
    def from_name(cls, name: str) -> "Difficulty":
        try:
            return cls[name.strip().upper()]
        except KeyError:
            valid = ", ".join(d.name.lower() for d in cls)
            raise ValueError(f"Unknown difficulty '{name}'. Expected one of: {valid}")


Grid = List[List[Cell]]
LockedMask = List[List[bool]]

# --- Constants ---
CELL_SYMBOLS = {Cell.EMPTY: ".", Cell.RED: "R", Cell.BLUE: "B"}
LINE_VALUES = (Cell.RED, Cell.BLUE)

BINARY_GRID_RULES = """Binary Grid Rules:
- Fill every cell with either a red or a blue ball
- Tap an empty cell to place red, tap again for blue, and again to clear
- Locked cells cannot be changed
- Rule 1: no three consecutive balls of the same color in any row or column
- Rule 2: each row and column holds an equal number of red and blue balls
- Rule 3: no two rows are identical and no two columns are identical
"""


def empty_grid(size: int) -> Grid:
    return [[Cell.EMPTY] * size for _ in range(size)]


def copy_grid(grid: Grid) -> Grid:
    return [list(row) for row in grid]


def column(grid: Grid, col: int) -> List[Cell]:
    return [row[col] for row in grid]


def format_grid(grid: Grid, locked: LockedMask = None) -> str:
    """
    Format a grid for text display.

    Args:
        grid: square grid of Cells.
        locked: optional mask; locked cells are shown in upper case,
            player cells in lower case.

    Returns:
        Formatted multi-line string.
    """
    lines = []
    for r, row in enumerate(grid):
        symbols = []
        for c, cell in enumerate(row):
            symbol = cell.symbol
            if locked is not None and not locked[r][c]:
                symbol = symbol.lower()
            symbols.append(symbol)
        lines.append(" ".join(symbols))
    return "\n".join(lines)


class GenerationFailure(RuntimeError):
    """Backtracking search ran out of alternatives without a complete grid."""
