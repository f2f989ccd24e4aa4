# tests/test_levels.py
import pytest

from binary_grid.cli import main
from binary_grid.core.levels import build_level_catalogue, calculate_stars, levels_for
from binary_grid.puzzle.common import Difficulty


def test_catalogue_ids_are_consecutive():
    levels = build_level_catalogue()
    assert [level.id for level in levels] == list(range(len(levels)))
    assert len(levels) == sum(d.levels_count for d in Difficulty)
    assert levels[0].difficulty is Difficulty.TINY
    assert levels[0].display_name == "Tiny 1"


def test_levels_for_tier():
    medium = levels_for(Difficulty.MEDIUM)
    assert len(medium) == Difficulty.MEDIUM.levels_count
    assert [level.level_in_difficulty for level in medium] == list(range(1, len(medium) + 1))


@pytest.mark.parametrize("elapsed, size, stars", [
    (10, 4, 3),
    (32, 4, 3),
    (33, 4, 2),
    (64, 4, 2),
    (65, 4, 1),
    (100, 10, 3),
    (1000, 10, 1),
])
def test_calculate_stars(elapsed, size, stars):
    assert calculate_stars(elapsed, size) == stars


def test_difficulty_from_name():
    assert Difficulty.from_name(" Large ") is Difficulty.LARGE
    with pytest.raises(ValueError):
        Difficulty.from_name("huge")


def test_cli_prints_rules(capsys):
    assert main(["--rules"]) == 0
    assert "no three consecutive" in capsys.readouterr().out


def test_cli_level_is_reproducible(capsys):
    main(["--level", "3", "--solution"])
    first = capsys.readouterr().out
    main(["--level", "3", "--solution"])
    assert capsys.readouterr().out == first
    assert "Level 3: Tiny 4" in first


def test_cli_rejects_unknown_level(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--level", "9999"])
    assert exc.value.code == 2
    assert "unknown level id 9999" in capsys.readouterr().err


def test_cli_rejects_unknown_difficulty(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--difficulty", "huge"])
    assert exc.value.code == 2
    assert "invalid choice" in capsys.readouterr().err


def test_cli_accepts_difficulty_in_any_case(capsys):
    assert main(["--difficulty", "SMALL", "--identifier", "7"]) == 0
    assert "Small" in capsys.readouterr().out
