from pyrsistent import pmap

from grid_enhance.puzzle import Puzzle
from grid_enhance.state import Grid
from grid_enhance.step import iter_generations, run, step
from grid_enhance.types import EnhancementTable
from tests.test_utils import make_sample_puzzle, make_table


def test_step_does_not_mutate_input() -> None:
    puzzle = make_sample_puzzle()
    grid = puzzle.grid
    snapshot = dict(grid.pixels)

    first = step(grid, puzzle.enhancement)
    second = step(grid, puzzle.enhancement)

    assert first == second
    assert first is not second
    assert grid.pixels == pmap(snapshot)
    assert grid.background_lit is False


def test_tracked_region_grows_by_one_per_step() -> None:
    puzzle = make_sample_puzzle()
    generations = iter_generations(puzzle.grid, puzzle.enhancement)
    previous = next(generations)

    for _ in range(6):
        current = next(generations)
        assert previous.bounds is not None
        assert current.bounds == previous.bounds.expand(1)
        previous = current


def test_run_zero_steps_returns_initial_grid() -> None:
    puzzle = make_sample_puzzle()
    assert puzzle.run(0) is puzzle.grid


def test_run_matches_repeated_step() -> None:
    puzzle = make_sample_puzzle()
    grid = puzzle.grid
    for _ in range(4):
        grid = step(grid, puzzle.enhancement)

    assert run(puzzle.grid, puzzle.enhancement, 4) == grid
    assert puzzle.run(4) == grid


def test_earlier_generations_survive_later_steps() -> None:
    puzzle = make_sample_puzzle()
    first = puzzle.run(1)
    rendered = first.to_display_string()

    step(step(first, puzzle.enhancement), puzzle.enhancement)

    assert first.to_display_string() == rendered


def test_empty_grid_stays_untracked() -> None:
    puzzle = Puzzle(enhancement=make_table([0, 511]), grid=Grid())
    grid = puzzle.run(3)

    assert grid.pixels == pmap()
    assert grid.background_lit is True
    assert grid.bounds is None


def test_run_accepts_custom_step_fn() -> None:
    puzzle = make_sample_puzzle()
    calls = []

    def flip_background(grid: Grid, table: EnhancementTable) -> Grid:
        calls.append(grid)
        return Grid(pixels=grid.pixels, background_lit=not grid.background_lit)

    grid = run(puzzle.grid, puzzle.enhancement, 3, step_fn=flip_background)

    assert len(calls) == 3
    assert calls[0] is puzzle.grid
    assert grid.pixels == puzzle.grid.pixels
    assert grid.background_lit is True


def test_iter_generations_uses_given_step_fn() -> None:
    generations = iter_generations(
        Grid(), make_table(), step_fn=lambda grid, table: Grid(background_lit=True)
    )

    assert [next(generations).background_lit for _ in range(3)] == [False, True, True]
