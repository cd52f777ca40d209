from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple


class OutOfBoundsError(ValueError):
    """A coordinate or index falls outside the declared grid dimensions."""


class Direction(Enum):
    NORTH = "^"
    EAST = ">"
    SOUTH = "v"
    WEST = "<"

    def rotate(self) -> "Direction":
        """Next heading clockwise: N -> E -> S -> W -> N."""
        return _CLOCKWISE[(_CLOCKWISE.index(self) + 1) % len(_CLOCKWISE)]

    @classmethod
    def from_char(cls, c: str) -> "Direction":
        try:
            return cls(c)
        except ValueError:
            raise ValueError(f"Invalid dir char: {c!r}") from None

    def to_char(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


_CLOCKWISE = (Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST)


class MazeTile(Enum):
    OPEN = "."
    WALL = "#"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Position:
    x: int
    y: int

    @classmethod
    def from_idx(cls, idx: int, width: int, height: int) -> "Position":
        if width <= 0 or idx < 0:
            raise OutOfBoundsError(f"Idx out of bounds: {idx} (width: {width}, height: {height})")
        x = idx % width
        y = idx // width
        if x >= width or y >= height:
            raise OutOfBoundsError(f"Idx out of bounds: {idx} => (x: {x}, y: {y})")
        return cls(x, y)

    def to_idx(self, width: int, height: int) -> int:
        if not (0 <= self.x < width and 0 <= self.y < height):
            raise OutOfBoundsError(f"Pos out of bounds: (x: {self.x}, y: {self.y})")
        return self.y * width + self.x

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def right(self, offset: int = 1) -> "Position":
        return Position(self.x + offset, self.y)

    def left(self, offset: int = 1) -> "Position":
        return Position(self.x - offset, self.y)

    def up(self, offset: int = 1) -> "Position":
        return Position(self.x, self.y - offset)

    def down(self, offset: int = 1) -> "Position":
        return Position(self.x, self.y + offset)

    def add(self, other: "Position") -> "Position":
        return Position(self.x + other.x, self.y + other.y)

    def get_direction(self, next: "Position") -> Direction:
        """Coarse heading from self towards `next`.

        Only meaningful for axis-aligned steps: a diagonal target is
        reported as East or West.
        """
        if self.x == next.x:
            return Direction.NORTH if next.y < self.y else Direction.SOUTH
        return Direction.EAST if next.x > self.x else Direction.WEST

    def neighbors(self, include_corners: bool) -> List["Position"]:
        # Row-major order; bounds are the caller's concern
        out: List[Position] = []
        for y in range(self.y - 1, self.y + 2):
            for x in range(self.x - 1, self.x + 2):
                if not include_corners and x != self.x and y != self.y:
                    continue
                if x == self.x and y == self.y:
                    continue
                out.append(Position(x, y))
        return out

    def dist(self, other: "Position") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def manhattan_distance(self, other: "Position") -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)


@dataclass(frozen=True)
class Node:
    """A search state: standing at `position`, having just moved `direction`.

    A goal node with ``direction=None`` accepts any heading.
    """

    position: Position
    direction: Optional[Direction]

    def matches(self, goal: "Node") -> bool:
        if self.position != goal.position:
            return False
        return goal.direction is None or self.direction == goal.direction
