from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, TypeVar

from .grid import Grid
from .types import Direction, Node

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(order=True)
class SearchState:
    """Open-set entry. Ordered on `cost` alone; heapq pops the lowest first."""

    cost: int
    g: int = field(compare=False)
    node: Node = field(compare=False)


def reconstruct_path(came_from: Dict[Node, Node], current: Node) -> List[Node]:
    path = [current]
    while current in came_from:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path


class PathFinder:
    """A* over (cell, heading) states of a Grid.

    Every step costs 1, plus `turn_penalty` when the heading changes.
    Holds no state between calls to `find_path`.
    """

    def __init__(self, turn_penalty: int = 0):
        if turn_penalty < 0:
            raise ValueError("turn_penalty must be non-negative")
        self.turn_penalty = turn_penalty

    def heuristic(self, node: Node, goal: Node) -> int:
        manhattan = node.position.manhattan_distance(goal.position)
        return manhattan + self.estimate_min_turns(node, goal) * self.turn_penalty

    def estimate_min_turns(self, node: Node, goal: Node) -> int:
        # 0 or 1: any heading other than the dominant axis towards the
        # goal needs at least one turn before arriving
        if node.position == goal.position:
            return 0
        return 0 if node.direction == self.direction_to_goal(node, goal) else 1

    @staticmethod
    def direction_to_goal(node: Node, goal: Node) -> Direction:
        dx = goal.position.x - node.position.x
        dy = goal.position.y - node.position.y
        if abs(dx) > abs(dy):
            return Direction.EAST if dx > 0 else Direction.WEST
        return Direction.NORTH if dy < 0 else Direction.SOUTH

    def step_cost(self, current: Node, nxt: Node) -> int:
        if current.direction != nxt.direction:
            return 1 + self.turn_penalty
        return 1

    def path_cost(self, path: Sequence[Node]) -> int:
        return sum(self.step_cost(a, b) for a, b in zip(path, path[1:]))

    def neighbors(self, grid: Grid[T], node: Node, traversable: T) -> List[Node]:
        here = grid.pos2idx(node.position)
        out = []
        for idx in grid.get_neighbors(here, traversable, include_corners=False):
            pos = grid.idx2pos(idx)
            out.append(Node(pos, node.position.get_direction(pos)))
        return out

    def find_path(self, start: Node, goal: Node, grid: Grid[T], traversable: T) -> Optional[List[Node]]:
        """Cheapest path from `start` to `goal`, both ends inclusive.

        The goal is reached when position and heading both match; a goal
        heading of None accepts any heading. Returns None when every
        reachable state has been exhausted.
        """
        open_heap: List[SearchState] = [SearchState(0, 0, start)]
        came_from: Dict[Node, Node] = {}
        g_score: Dict[Node, int] = {start: 0}
        expansions = 0

        while open_heap:
            state = heapq.heappop(open_heap)
            current = state.node
            if state.g != g_score[current]:
                continue

            if current.matches(goal):
                path = reconstruct_path(came_from, current)
                logger.debug(
                    "path found: %d steps, cost %d, %d expansions", len(path) - 1, g_score[current], expansions
                )
                return path

            expansions += 1
            for neighbor in self.neighbors(grid, current, traversable):
                tentative_g = g_score[current] + self.step_cost(current, neighbor)
                if neighbor not in g_score or tentative_g < g_score[neighbor]:
                    came_from[neighbor] = current
                    g_score[neighbor] = tentative_g
                    f = tentative_g + self.heuristic(neighbor, goal)
                    heapq.heappush(open_heap, SearchState(f, tentative_g, neighbor))

        logger.debug("no path from %s to %s after %d expansions", start, goal, expansions)
        return None
