from typing import Tuple
import logging

from ..common import Cell, Grid, LockedMask, copy_grid
from ..random_stream import SeededRandomStream

logger = logging.getLogger(__name__)

CARVE_ATTEMPT_FACTOR = 10  # draws allowed per cell before giving up


def hidden_cell_target(size: int, reveal_fraction: float) -> int:
    """Number of cells to hide: round(N^2 * (1 - r)), halves rounding up."""
    return int(size * size * (1.0 - reveal_fraction) + 0.5)


def carve_puzzle(solution: Grid, reveal_fraction: float,
                 rng: SeededRandomStream) -> Tuple[Grid, LockedMask]:
    """
    Hides a random subset of solution cells.

    Hidden cells become EMPTY and unlocked; every other cell keeps its
    solution value and is locked. Draws stop at the target count or after
    CARVE_ATTEMPT_FACTOR * N^2 draws, whichever comes first.

    Returns:
        (puzzle grid, locked mask)
    """
    if not 0.0 < reveal_fraction <= 1.0:
        raise ValueError(f"reveal_fraction must be in (0, 1], got {reveal_fraction}")

    size = len(solution)
    total_cells = size * size
    grid = copy_grid(solution)
    locked = [[True] * size for _ in range(size)]

    target = hidden_cell_target(size, reveal_fraction)
    max_attempts = total_cells * CARVE_ATTEMPT_FACTOR
    hidden = 0
    attempts = 0

    while hidden < target and attempts < max_attempts:
        row = rng.next_below(size)
        col = rng.next_below(size)
        if locked[row][col]:
            grid[row][col] = Cell.EMPTY
            locked[row][col] = False
            hidden += 1
        attempts += 1

    if hidden < target:
        logger.warning(f"Carving stopped after {attempts} draws: hid {hidden} of {target} requested cells.")
    else:
        logger.debug(f"Carved {hidden}/{total_cells} cells in {attempts} draws.")
    return grid, locked
