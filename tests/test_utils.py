from typing import Iterable, List, Sequence

from pyrsistent import pmap, pvector

from grid_enhance.components import Position
from grid_enhance.puzzle import Puzzle
from grid_enhance.state import Grid
from grid_enhance.types import TABLE_SIZE, EnhancementTable

SAMPLE_TABLE = (
    "..#.#..#####.#.#.#.###.##.....###.##.#..###.####..#####..#....#..#..##..##"
    "#..######.###...####..#..#####..##..#.#####...##.#.#..#.##..#.#......#.###"
    ".######.###.####...#.##.##..#..#..#####.....#.#....###..#.##......#.....#."
    ".#..#..##..#...##.######.####.####.#.#...#.......#..#.#.#...####.##.#....."
    ".#..#...##.#.##..#...##.#.##..###.#......#.#.......#.#.#.####.###.##...#.."
    "...####.#..#..#.##.#....##..#.####....##...##..#...#......#.#.......#....."
    "..##..####..#...#.#.#...##..#.#..###..#####........#..####......#..#"
)

SAMPLE_IMAGE = [
    "#..#.",
    "#....",
    "##..#",
    "..#..",
    "..###",
]

SAMPLE_INPUT = SAMPLE_TABLE + "\n\n" + "\n".join(SAMPLE_IMAGE) + "\n"


def make_grid(rows: Sequence[str], background_lit: bool = False) -> Grid:
    """Grid with every symbol of rows tracked, origin at the top-left."""
    pixels = {
        Position(row, col): symbol == "#"
        for row, line in enumerate(rows)
        for col, symbol in enumerate(line)
    }
    return Grid(pixels=pmap(pixels), background_lit=background_lit)


def make_table(lit_indices: Iterable[int] = ()) -> EnhancementTable:
    """512-entry table lit only at lit_indices."""
    lit = set(lit_indices)
    return pvector(index in lit for index in range(TABLE_SIZE))


def parse_table(symbols: str) -> EnhancementTable:
    return pvector(symbol == "#" for symbol in symbols)


def make_sample_puzzle() -> Puzzle:
    """Standard sample fixture: 35 lit after 2 steps, 3351 after 50."""
    return Puzzle(enhancement=parse_table(SAMPLE_TABLE), grid=make_grid(SAMPLE_IMAGE))


def lit_positions(grid: Grid) -> List[Position]:
    return sorted(
        (pos for pos, lit in grid.pixels.items() if lit),
        key=lambda pos: (pos.row, pos.col),
    )
