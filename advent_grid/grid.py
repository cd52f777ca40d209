from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, List, Optional, TypeVar

from .types import Position

T = TypeVar("T")


@dataclass
class Grid(Generic[T]):
    """Fixed-size rectangular grid of tiles stored row-major.

    Tiles may be mutated in place; the dimensions may not. ``start`` and
    ``end`` are indices assigned by the caller and carry no meaning here.
    """

    width: int
    height: int
    tiles: List[T]
    start: int = 0
    end: int = 0

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("width and height must be non-negative")
        if len(self.tiles) != self.width * self.height:
            raise ValueError(
                f"Expected {self.width * self.height} tiles for {self.width}x{self.height}, got {len(self.tiles)}"
            )

    @classmethod
    def from_text(cls, text: str, tile_for_char: Callable[[str], T]) -> "Grid[T]":
        """Build a grid from equal-width lines of glyphs.

        `tile_for_char` maps one glyph to a tile and should raise
        ValueError for glyphs it does not know.
        """
        lines = [line.strip() for line in text.splitlines() if line.strip() != ""]
        if not lines:
            raise ValueError("Empty grid content")
        width = len(lines[0])
        tiles: List[T] = []
        for y, line in enumerate(lines):
            if len(line) != width:
                raise ValueError(f"Line {y} has width {len(line)}, expected {width}")
            tiles.extend(tile_for_char(c) for c in line)
        return cls(width=width, height=len(lines), tiles=tiles)

    def pos2idx(self, position: Position) -> int:
        return position.to_idx(self.width, self.height)

    def idx2pos(self, idx: int) -> Position:
        return Position.from_idx(idx, self.width, self.height)

    def is_valid_pos(self, position: Position) -> bool:
        return 0 <= position.x < self.width and 0 <= position.y < self.height

    def tile_at(self, position: Position) -> T:
        return self.tiles[self.pos2idx(position)]

    def set_tile(self, position: Position, value: T) -> None:
        self.tiles[self.pos2idx(position)] = value

    def positions_of(self, value: T) -> List[int]:
        return [idx for idx, tile in enumerate(self.tiles) if tile == value]

    def dist(self, a: int, b: int) -> int:
        # Fixed-point: tenths of a cell
        return int(self.idx2pos(a).dist(self.idx2pos(b)) * 10)

    def get_neighbors(self, idx: int, neighbor_type: T, include_corners: bool) -> List[int]:
        """Indices adjacent to `idx` whose tile equals `neighbor_type`."""
        candidates = (p for p in self.idx2pos(idx).neighbors(include_corners) if self.is_valid_pos(p))
        indices = (self.pos2idx(p) for p in candidates)
        return [i for i in indices if self.tiles[i] == neighbor_type]

    def render(self, path: Optional[Iterable[int]] = None) -> str:
        marked = set(path) if path is not None else set()
        rows = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                idx = y * self.width + x
                row.append("@" if idx in marked else str(self.tiles[idx]))
            rows.append("".join(row))
        return "\n".join(rows)

    def display(self, path: Optional[Iterable[int]] = None) -> None:
        print(self.render(path))
        print()
