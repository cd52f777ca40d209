from __future__ import annotations

from typing import Iterator, List, Optional


def _banks(text: str) -> Iterator[List[int]]:
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        if not line.isdigit():
            raise ValueError(f"battery bank must be digits: {line!r}")
        yield [int(c) for c in line]


def max_joltage(bank: List[int], count: int) -> int:
    """Largest number formed by picking `count` digits of `bank` in order.

    A bank too short to supply `count` batteries contributes nothing.
    """
    if count > len(bank):
        return 0
    value = 0
    lo = 0
    for remaining in range(count, 0, -1):
        # leave room for the digits still to pick
        hi = len(bank) - remaining + 1
        best = max(range(lo, hi), key=lambda i: (bank[i], -i))
        value = value * 10 + bank[best]
        lo = best + 1
    return value


def part_one(text: str) -> Optional[int]:
    return sum(max_joltage(bank, 2) for bank in _banks(text))


def part_two(text: str) -> Optional[int]:
    return sum(max_joltage(bank, 12) for bank in _banks(text))
