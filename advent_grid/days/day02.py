from __future__ import annotations

from typing import Iterator, List, Optional, Tuple


def parse_id_range(value: str) -> Tuple[int, int]:
    start, sep, end = value.strip().partition("-")
    if not sep:
        raise ValueError(f"should be a dash in middle: {value!r}")
    return int(start), int(end)


def _ids(text: str) -> Iterator[int]:
    for chunk in text.strip().split(","):
        if not chunk.strip():
            continue
        start, end = parse_id_range(chunk)
        yield from range(start, end + 1)


def is_symmetric(n: int) -> bool:
    s = str(n)
    if len(s) % 2:
        return False
    mid = len(s) // 2
    return s[:mid] == s[mid:]


def divisors(n: int) -> List[int]:
    return [d for d in range(1, n) if n % d == 0]


def is_repeated_pattern(n: int) -> bool:
    """True when n is some digit pattern repeated at least twice."""
    s = str(n)
    for size in divisors(len(s)):
        if s == s[:size] * (len(s) // size):
            return True
    return False


def part_one(text: str) -> Optional[int]:
    return sum(i for i in _ids(text) if is_symmetric(i))


def part_two(text: str) -> Optional[int]:
    return sum(i for i in _ids(text) if is_repeated_pattern(i))
