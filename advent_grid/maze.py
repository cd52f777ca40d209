from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .grid import Grid
from .pathfinder import PathFinder
from .types import Direction, MazeTile, Node, Position

logger = logging.getLogger(__name__)

CHAR_TO_TILE = {
    "#": MazeTile.WALL,
    ".": MazeTile.OPEN,
    "S": MazeTile.OPEN,  # start (placed on open floor)
    "E": MazeTile.OPEN,  # end (placed on open floor)
}


@dataclass
class Maze:
    grid: Grid[MazeTile]
    start: Position
    end: Position


@dataclass
class MazeSolution:
    path: Optional[List[Node]]
    cost: Optional[int]
    turns: int
    ascii: str

    @property
    def found(self) -> bool:
        return self.path is not None


def _tile_for_char(c: str) -> MazeTile:
    try:
        return CHAR_TO_TILE[c]
    except KeyError:
        raise ValueError(f"Unknown maze tile: {c!r}") from None


def parse_maze(text: str) -> Maze:
    grid = Grid.from_text(text, _tile_for_char)
    glyphs = "".join(line.strip() for line in text.splitlines() if line.strip() != "")
    starts = [i for i, c in enumerate(glyphs) if c == "S"]
    ends = [i for i, c in enumerate(glyphs) if c == "E"]
    if len(starts) != 1 or len(ends) != 1:
        raise ValueError("Maze must define exactly one 'S' and one 'E'")
    grid.start, grid.end = starts[0], ends[0]
    return Maze(grid=grid, start=grid.idx2pos(grid.start), end=grid.idx2pos(grid.end))


def load_maze_from_file(path: str | Path) -> Maze:
    text = Path(path).read_text(encoding="utf-8")
    return parse_maze(text)


def count_turns(path: List[Node]) -> int:
    return sum(1 for a, b in zip(path, path[1:]) if a.direction != b.direction)


def solve_maze(
    maze: Maze,
    turn_penalty: int = 0,
    heading: Direction = Direction.EAST,
    goal_heading: Optional[Direction] = None,
) -> MazeSolution:
    finder = PathFinder(turn_penalty)
    start = Node(maze.start, heading)
    goal = Node(maze.end, goal_heading)
    path = finder.find_path(start, goal, maze.grid, MazeTile.OPEN)
    if path is None:
        logger.info("maze has no path from %s to %s", maze.start, maze.end)
        return MazeSolution(path=None, cost=None, turns=0, ascii=maze.grid.render())
    overlay = [maze.grid.pos2idx(node.position) for node in path]
    return MazeSolution(
        path=path,
        cost=finder.path_cost(path),
        turns=count_turns(path),
        ascii=maze.grid.render(overlay),
    )
