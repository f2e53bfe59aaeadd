"""Record type and option enumerations shared by the calculator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


@dataclass
class NumberInfo:
    """One stored number: its position, value, parity and the operation text."""

    index: int
    value: float
    even: bool
    operation: str = " "


class FilterOption(IntEnum):
    """Filters that can be applied to the history."""

    EVEN = 1
    ODD = 2
    ADDITION = 3
    SUBTRACTION = 4
    MULTIPLICATION = 5
    DIVISION = 6


class Operation(IntEnum):
    """Entries of the main menu."""

    UNDEFINED = -1
    EXIT = 0
    ADDITION = 1
    SUBTRACTION = 2
    MULTIPLICATION = 3
    DIVISION = 4
    SAVE = 5
    LOAD = 6
    PRINT = 7
    FILTER = 8

    @classmethod
    def parse(cls, value) -> "Operation":
        """Turn user input into an operation; anything unknown is UNDEFINED."""
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            return cls.UNDEFINED


def format_number(value) -> str:
    """Format a number the way a default output stream shows a float."""
    return f"{float(value):g}"