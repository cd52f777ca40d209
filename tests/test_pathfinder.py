import heapq

import pytest

from advent_grid.grid import Grid
from advent_grid.maze import count_turns
from advent_grid.pathfinder import PathFinder, SearchState
from advent_grid.types import Direction, MazeTile, Node, Position


def maze(text):
    return Grid.from_text(text, MazeTile)


def open_grid(width, height):
    return Grid(width, height, [MazeTile.OPEN] * (width * height))


def positions(path):
    return [n.position.as_tuple() for n in path]


def test_l_shaped_route_with_turn_penalty():
    finder = PathFinder(turn_penalty=2)
    start = Node(Position(0, 0), Direction.EAST)
    goal = Node(Position(2, 2), None)
    path = finder.find_path(start, goal, open_grid(3, 3), MazeTile.OPEN)
    assert path is not None
    assert len(path) - 1 == 4
    assert positions(path) == [(0, 0), (1, 0), (2, 0), (2, 1), (2, 2)]
    assert count_turns(path) == 1
    assert finder.path_cost(path) == 4 + 2 * 1


def test_path_runs_start_to_goal_inclusive():
    start = Node(Position(0, 0), Direction.EAST)
    goal = Node(Position(3, 0), Direction.EAST)
    path = PathFinder().find_path(start, goal, open_grid(4, 1), MazeTile.OPEN)
    assert path[0] == start
    assert path[-1] == goal
    assert [n.direction for n in path[1:]] == [Direction.EAST] * 3


@pytest.mark.parametrize("target", [(4, 3), (0, 4), (3, 0), (2, 2)])
def test_zero_penalty_matches_manhattan_distance(target):
    start = Node(Position(0, 0), Direction.EAST)
    goal = Node(Position(*target), None)
    path = PathFinder(0).find_path(start, goal, open_grid(5, 5), MazeTile.OPEN)
    assert len(path) - 1 == start.position.manhattan_distance(goal.position)


def test_penalty_adds_exactly_once_per_turn():
    grid = maze(
        """
        ...
        ##.
        ##.
        """
    )
    start = Node(Position(0, 0), Direction.EAST)
    goal = Node(Position(2, 2), Direction.SOUTH)
    cheap = PathFinder(0)
    dear = PathFinder(5)
    p0 = cheap.find_path(start, goal, grid, MazeTile.OPEN)
    p5 = dear.find_path(start, goal, grid, MazeTile.OPEN)
    assert positions(p0) == positions(p5)
    assert dear.path_cost(p5) - cheap.path_cost(p0) == 5


def test_high_penalty_prefers_fewest_turns():
    start = Node(Position(0, 0), Direction.SOUTH)
    goal = Node(Position(3, 3), None)
    finder = PathFinder(10)
    path = finder.find_path(start, goal, open_grid(4, 4), MazeTile.OPEN)
    assert len(path) - 1 == 6
    assert count_turns(path) == 1
    assert finder.path_cost(path) == 16


def test_goal_heading_is_honoured():
    start = Node(Position(0, 0), Direction.EAST)
    goal = Node(Position(2, 0), Direction.NORTH)
    path = PathFinder(0).find_path(start, goal, open_grid(3, 3), MazeTile.OPEN)
    assert path[-1] == goal
    assert path[-2].position == Position(2, 1)
    assert len(path) - 1 == 4


def test_start_equals_goal():
    start = Node(Position(1, 1), Direction.NORTH)
    assert PathFinder(3).find_path(start, start, open_grid(3, 3), MazeTile.OPEN) == [start]


def test_goal_on_wall_has_no_path():
    grid = maze("..#\n...\n")
    start = Node(Position(0, 0), Direction.EAST)
    goal = Node(Position(2, 0), None)
    assert PathFinder(1).find_path(start, goal, grid, MazeTile.OPEN) is None


def test_enclosed_goal_has_no_path():
    grid = maze(
        """
        .....
        ..#..
        .#.#.
        ..#..
        """
    )
    start = Node(Position(0, 0), Direction.EAST)
    goal = Node(Position(2, 2), None)
    assert PathFinder(0).find_path(start, goal, grid, MazeTile.OPEN) is None


def test_search_does_not_mutate_grid():
    grid = maze("...\n.#.\n...\n")
    before = list(grid.tiles)
    PathFinder(1).find_path(Node(Position(0, 0), Direction.EAST), Node(Position(2, 2), None), grid, MazeTile.OPEN)
    assert grid.tiles == before


def test_detours_around_walls():
    grid = maze(
        """
        .#...
        .#.#.
        ...#.
        """
    )
    start = Node(Position(0, 0), Direction.SOUTH)
    goal = Node(Position(4, 2), None)
    path = PathFinder(0).find_path(start, goal, grid, MazeTile.OPEN)
    assert len(path) - 1 == 10
    for a, b in zip(path, path[1:]):
        assert a.position.manhattan_distance(b.position) == 1
        assert grid.tile_at(b.position) == MazeTile.OPEN


def test_negative_penalty_rejected():
    with pytest.raises(ValueError):
        PathFinder(-1)


def test_heuristic_terms():
    finder = PathFinder(turn_penalty=7)
    goal = Node(Position(5, 1), None)
    assert finder.direction_to_goal(Node(Position(0, 0), Direction.EAST), goal) == Direction.EAST
    assert finder.heuristic(Node(Position(0, 0), Direction.EAST), goal) == 6
    assert finder.heuristic(Node(Position(0, 0), Direction.NORTH), goal) == 6 + 7
    # already standing on the goal: nothing left to estimate
    assert finder.heuristic(Node(Position(5, 1), Direction.WEST), goal) == 0
    # ties favour the vertical axis
    assert finder.direction_to_goal(Node(Position(0, 0), Direction.EAST), Node(Position(2, 2), None)) == Direction.SOUTH
    assert finder.direction_to_goal(Node(Position(2, 2), Direction.EAST), Node(Position(0, 0), None)) == Direction.NORTH


def test_step_cost():
    finder = PathFinder(4)
    a = Node(Position(0, 0), Direction.EAST)
    assert finder.step_cost(a, Node(Position(1, 0), Direction.EAST)) == 1
    assert finder.step_cost(a, Node(Position(0, 1), Direction.SOUTH)) == 5
    assert finder.path_cost([a]) == 0


def test_search_state_lowest_cost_first():
    node = Node(Position(0, 0), Direction.EAST)
    heap = []
    for cost in (5, 1, 3):
        heapq.heappush(heap, SearchState(cost, 0, node))
    assert [heapq.heappop(heap).cost for _ in range(3)] == [1, 3, 5]
    assert SearchState(1, 9, node) < SearchState(2, 0, node)
