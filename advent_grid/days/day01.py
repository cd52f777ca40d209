from __future__ import annotations

from typing import Iterator, Optional, Tuple

DIAL_START = 50
DIAL_SIZE = 100


def parse_rotation(value: str) -> Tuple[int, int]:
    """Split ``L68`` into (sign, amount)."""
    if not value:
        raise ValueError("expects a rotation, got an empty line")
    sign = {"L": -1, "R": 1}.get(value[0])
    if sign is None:
        raise ValueError(f"invalid rotation char: {value[0]!r}")
    try:
        amount = int(value[1:])
    except ValueError:
        raise ValueError(f"invalid rotation amount: {value!r}") from None
    return sign, amount


def _rotations(text: str) -> Iterator[Tuple[int, int]]:
    for line in text.splitlines():
        line = line.strip()
        if line:
            yield parse_rotation(line)


def part_one(text: str) -> Optional[int]:
    zeroed = 0
    pos = DIAL_START
    for sign, amount in _rotations(text):
        pos += sign * amount
        if pos % DIAL_SIZE == 0:
            zeroed += 1
    return zeroed


def part_two(text: str) -> Optional[int]:
    # Every click counts, not only where a rotation stops
    zeroed = 0
    pos = DIAL_START
    for sign, amount in _rotations(text):
        for _ in range(amount):
            pos += sign
            if pos % DIAL_SIZE == 0:
                zeroed += 1
    return zeroed
