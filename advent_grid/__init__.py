"""Grid and direction-aware A* toolkit shared by the puzzle solvers.

Exposes the coordinate model, the tile grid and the pathfinder.
"""

from .types import (
    Direction,
    MazeTile,
    Node,
    OutOfBoundsError,
    Position,
)
from .grid import Grid
from .pathfinder import PathFinder, SearchState
from .maze import Maze, MazeSolution, parse_maze, load_maze_from_file, solve_maze

__all__ = [
    "Direction",
    "MazeTile",
    "Node",
    "OutOfBoundsError",
    "Position",
    "Grid",
    "PathFinder",
    "SearchState",
    "Maze",
    "MazeSolution",
    "parse_maze",
    "load_maze_from_file",
    "solve_maze",
]
