"""Background transition system.

Every untracked pixel shares one value, and so do all nine cells of its
neighborhood. Its next value is therefore one of two fixed table entries:
index 0 (all dark) or index 511 (all lit).
"""

from grid_enhance.state import Grid
from grid_enhance.types import ALL_DARK_INDEX, ALL_LIT_INDEX, EnhancementTable


def background_system(grid: Grid, table: EnhancementTable) -> bool:
    """Return the background value of the generation after ``grid``."""
    if grid.background_lit:
        return table[ALL_LIT_INDEX]
    return table[ALL_DARK_INDEX]
