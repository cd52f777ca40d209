from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List

from .config import configure_logging, default_turn_penalty
from .days import get_day
from .maze import load_maze_from_file, solve_maze
from .types import Direction


def _heading(value: str) -> Direction:
    try:
        return Direction.from_char(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def _cmd_solve(args: argparse.Namespace) -> int:
    solver = get_day(args.day)
    text = Path(args.input).read_text(encoding="utf-8")
    parts = [args.part] if args.part else [1, 2]
    for part in parts:
        fn = solver.part_one if part == 1 else solver.part_two
        answer = fn(text)
        print(f"Day {args.day:02d} part {part}: {answer if answer is not None else '-'}")
    return 0


def _cmd_path(args: argparse.Namespace) -> int:
    maze = load_maze_from_file(args.maze)
    solution = solve_maze(
        maze,
        turn_penalty=args.turn_penalty if args.turn_penalty is not None else default_turn_penalty(),
        heading=args.heading,
        goal_heading=args.goal_heading,
    )
    if not solution.found:
        print("No path found.")
        return 1
    print(f"Path in {len(solution.path) - 1} steps, {solution.turns} turns, cost {solution.cost}:")
    for i, node in enumerate(solution.path):
        print(f"{i:3d}. ({node.position.x}, {node.position.y}) {node.direction}")
    if args.show:
        print()
        print(solution.ascii)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Grid puzzle solvers and direction-aware A* pathfinding.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_solve = sub.add_parser("solve", help="Solve a puzzle day from an input file")
    p_solve.add_argument("day", type=int, help="Puzzle day number")
    p_solve.add_argument("input", type=str, help="Path to puzzle input")
    p_solve.add_argument("--part", type=int, choices=(1, 2), default=None)
    p_solve.set_defaults(func=_cmd_solve)

    p_path = sub.add_parser("path", help="Find the cheapest path through a maze file")
    p_path.add_argument("maze", type=str, help="Path to maze file ('#' wall, '.' open, 'S' start, 'E' end)")
    p_path.add_argument("--turn-penalty", type=int, default=None, help="Defaults to $ADVENT_GRID_TURN_PENALTY, else 0")
    p_path.add_argument("--heading", type=_heading, default=Direction.EAST, help="Start heading: ^ > v <")
    p_path.add_argument("--goal-heading", type=_heading, default=None, help="Required heading at the end")
    p_path.add_argument("--show", action="store_true", help="Print the maze with the path overlaid")
    p_path.set_defaults(func=_cmd_path)
    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        configure_logging(args.verbose)
        return args.func(args)
    except (FileNotFoundError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
