from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional

from ..grid import Grid

logger = logging.getLogger(__name__)

# A roll is accessible with fewer than this many rolls around it
CROWDED = 4


class TileType(Enum):
    PAPER_ROLL = "@"
    EMPTY = "."

    def __str__(self) -> str:
        return self.value


def _tile_for_char(c: str) -> TileType:
    try:
        return TileType(c)
    except ValueError:
        raise ValueError(f"Unknown tile: {c!r}") from None


def parse_map(text: str) -> Grid[TileType]:
    return Grid.from_text(text, _tile_for_char)


def accessible_paper_rolls(grid: Grid[TileType]) -> List[int]:
    return [
        idx
        for idx in grid.positions_of(TileType.PAPER_ROLL)
        if len(grid.get_neighbors(idx, TileType.PAPER_ROLL, True)) < CROWDED
    ]


def part_one(text: str) -> Optional[int]:
    return len(accessible_paper_rolls(parse_map(text)))


def part_two(text: str) -> Optional[int]:
    grid = parse_map(text)
    removed = 0
    passes = 0
    while True:
        # Query the whole grid first, then remove in one batch
        accessible = accessible_paper_rolls(grid)
        if not accessible:
            break
        for idx in accessible:
            grid.tiles[idx] = TileType.EMPTY
        removed += len(accessible)
        passes += 1
        logger.debug("pass %d removed %d rolls", passes, len(accessible))
    return removed
