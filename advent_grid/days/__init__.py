"""Puzzle solvers built on the grid core.

Each module exposes ``part_one(text)`` and ``part_two(text)`` returning an
``int`` answer, or ``None`` when a part has no answer.
"""

from types import ModuleType
from typing import Dict

from . import day01, day02, day03, day04

DAYS: Dict[int, ModuleType] = {
    1: day01,
    2: day02,
    3: day03,
    4: day04,
}


def get_day(day: int) -> ModuleType:
    try:
        return DAYS[day]
    except KeyError:
        raise ValueError(f"No solver for day {day}") from None


__all__ = ["DAYS", "get_day"]
