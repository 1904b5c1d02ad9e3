import pytest

from grid_enhance.exceptions import InfiniteCountError
from grid_enhance.levels.loader import parse_puzzle
from grid_enhance.step import step
from tests.test_utils import SAMPLE_INPUT, make_sample_puzzle, make_table

STEP_ONE_DISPLAY = "\n".join(
    [
        ".##.##.",
        "#..#.#.",
        "##.#..#",
        "####..#",
        ".#..##.",
        "..##..#",
        "...#.#.",
        "background: .",
    ]
)


@pytest.mark.parametrize("steps, expected", [(0, 10), (1, 24), (2, 35), (50, 3351)])
def test_sample_lit_counts(steps: int, expected: int) -> None:
    grid = make_sample_puzzle().run(steps)

    assert grid.background_lit is False
    assert grid.count_lit() == expected, f"after {steps} steps:\n{grid}"


def test_sample_first_step_display() -> None:
    grid = make_sample_puzzle().run(1)
    assert grid.to_display_string() == STEP_ONE_DISPLAY
    assert str(grid) == STEP_ONE_DISPLAY


def test_loaded_sample_matches_fixture() -> None:
    puzzle = parse_puzzle(SAMPLE_INPUT)
    assert puzzle == make_sample_puzzle()
    assert puzzle.run(2).count_lit() == 35


def test_puzzle_str_lists_table_then_grid() -> None:
    puzzle = make_sample_puzzle()
    text = str(puzzle)

    assert text.startswith(SAMPLE_INPUT.split("\n")[0] + "\n\n#..#.\n")
    assert text.endswith("..###\nbackground: .")


def test_flashing_background_count_is_rejected() -> None:
    puzzle = make_sample_puzzle()
    grid = step(puzzle.grid, make_table([0]))

    assert grid.background_lit is True
    with pytest.raises(InfiniteCountError) as excinfo:
        grid.count_lit()
    assert excinfo.value.tracked_lit == grid.count_tracked_lit() == 6

    # the next generation goes dark again and can be counted
    after = step(grid, make_table([0]))
    assert after.background_lit is False
    assert after.count_lit() == 19
