from typing import Optional, Tuple, Union
import hashlib
import logging
import secrets

from .common import Difficulty, Grid, LockedMask, GenerationFailure
from .puzzle_types import BinaryGridPuzzle
from .random_stream import SeededRandomStream
from .generators import solution_gen, carver

logger = logging.getLogger(__name__)

PuzzleIdentifier = Union[int, str]


class PuzzleGenerator:
    """Generates binary grid puzzles, reproducibly when given an identifier."""

    # Seed derivation for identified puzzles
    LEVEL_SEED_MULTIPLIER = 54321
    DIFFICULTY_SEED_MULTIPLIER = 1000
    SEED_MASK = (1 << 64) - 1

    def derive_seed(self, difficulty: Difficulty, identifier: Optional[PuzzleIdentifier] = None) -> int:
        """Seed for (identifier, difficulty); a fresh random seed in free play."""
        if identifier is None:
            return secrets.randbits(64)
        if isinstance(identifier, bool) or not isinstance(identifier, (int, str)):
            raise ValueError(f"Puzzle identifier must be an int or str, got {type(identifier).__name__}")
        if isinstance(identifier, str):
            # Stable across processes, unlike hash()
            digest = hashlib.blake2b(identifier.encode("utf-8"), digest_size=8).digest()
            key = int.from_bytes(digest, "big")
        else:
            key = identifier
        seed = key * self.LEVEL_SEED_MULTIPLIER + difficulty.index * self.DIFFICULTY_SEED_MULTIPLIER
        return seed & self.SEED_MASK

    def generate_puzzle(self, difficulty: Difficulty,
                        identifier: Optional[PuzzleIdentifier] = None) -> BinaryGridPuzzle:
        """Synthesizes a solution and carves it according to the difficulty tier."""
        if not isinstance(difficulty, Difficulty):
            raise ValueError(f"Unsupported difficulty: {difficulty!r}")
        seed = self.derive_seed(difficulty, identifier)
        logger.info(f"Generating {difficulty.display_name} puzzle. Identifier: {identifier!r}")
        rng = SeededRandomStream(seed)

        try:
            solution = solution_gen.synthesize_solution(difficulty.grid_size, rng)
        except GenerationFailure:
            logger.error(f"Solution synthesis failed for {difficulty.display_name} (seed {seed}).", exc_info=True)
            raise

        grid, locked = carver.carve_puzzle(solution, difficulty.reveal_fraction, rng)
        puzzle = BinaryGridPuzzle(difficulty=difficulty, grid=grid, locked=locked,
                                  solution=solution, seed=seed, identifier=identifier)
        logger.info(f"Generated {puzzle!r}")
        return puzzle


def generate(difficulty: Difficulty,
             identifier: Optional[PuzzleIdentifier] = None) -> Tuple[Grid, LockedMask]:
    """Returns (grid, locked mask) for a new puzzle; reproducible when `identifier` is given."""
    puzzle = PuzzleGenerator().generate_puzzle(difficulty, identifier)
    return puzzle.grid, puzzle.locked
