from dataclasses import dataclass
from typing import List

from ..puzzle.common import Difficulty

# Seconds per cell allowed for 3 and 2 stars
STAR_THRESHOLDS = ((3, 2.0), (2, 4.0))


@dataclass(frozen=True)
class BinaryGridLevel:
    """A numbered level; its id is the puzzle identifier used for generation."""
    id: int
    difficulty: Difficulty
    level_in_difficulty: int

    @property
    def display_name(self) -> str:
        return f"{self.difficulty.name.title()} {self.level_in_difficulty}"


def build_level_catalogue() -> List[BinaryGridLevel]:
    """All levels, tier by tier, with consecutive ids starting at 0."""
    levels = []
    level_id = 0
    for difficulty in Difficulty:
        for level_num in range(1, difficulty.levels_count + 1):
            levels.append(BinaryGridLevel(id=level_id, difficulty=difficulty, level_in_difficulty=level_num))
            level_id += 1
    return levels


def levels_for(difficulty: Difficulty) -> List[BinaryGridLevel]:
    return [level for level in build_level_catalogue() if level.difficulty is difficulty]


def calculate_stars(elapsed_time: float, grid_size: int) -> int:
    """1 to 3 stars; faster solves on bigger grids are allowed more time."""
    cells = grid_size * grid_size
    for stars, seconds_per_cell in STAR_THRESHOLDS:
        if elapsed_time <= seconds_per_cell * cells:
            return stars
    return 1
