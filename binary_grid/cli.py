import argparse
import logging
from typing import List, Optional

from .puzzle.common import BINARY_GRID_RULES, Difficulty, format_grid
from .puzzle.generator import PuzzleGenerator
from .core.levels import build_level_catalogue

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="binary-grid", description="Generate a binary grid (Takuzu) puzzle.")
    parser.add_argument("--difficulty", default="tiny", type=str.lower,
                        choices=[d.name.lower() for d in Difficulty], help="Tier name")
    parser.add_argument("--level", type=int, default=None,
                        help="Level id from the catalogue; overrides --difficulty and makes the puzzle reproducible")
    parser.add_argument("--identifier", default=None,
                        help="Any puzzle identifier (free play when omitted)")
    parser.add_argument("--solution", action="store_true", help="Also print the solution")
    parser.add_argument("--rules", action="store_true", help="Print the rules and exit")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(asctime)s - %(levelname)s - %(message)s')

    if args.rules:
        print(BINARY_GRID_RULES)
        return 0

    identifier = args.identifier
    if args.level is not None:
        levels = {level.id: level for level in build_level_catalogue()}
        if args.level not in levels:
            parser.error(f"unknown level id {args.level}; valid ids are 0..{len(levels) - 1}")
        level = levels[args.level]
        difficulty = level.difficulty
        identifier = level.id
        print(f"Level {level.id}: {level.display_name}")
    else:
        difficulty = Difficulty.from_name(args.difficulty)
        if identifier is not None and identifier.lstrip("-").isdigit():
            identifier = int(identifier)

    puzzle = PuzzleGenerator().generate_puzzle(difficulty, identifier)
    print(f"{difficulty.display_name}, seed {puzzle.seed}, {puzzle.hidden_count} cells to fill")
    print(format_grid(puzzle.grid, puzzle.locked))
    if args.solution:
        print()
        print(format_grid(puzzle.solution_grid()))
    return 0
