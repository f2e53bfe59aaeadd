"""Persisting, loading and filtering the calculator history."""

from __future__ import annotations

import os
import re
import sys
from typing import Iterable, TextIO

from .records import FilterOption, NumberInfo, format_number


class HistoryError(Exception):
    """Raised when a history file cannot be written or read."""


_LINE = re.compile(r"\s*(\S+)\s+(\S+)\s+(\S+)(.*)", re.DOTALL)

_SYMBOLS = {
    FilterOption.ADDITION: " + ",
    FilterOption.SUBTRACTION: " - ",
    FilterOption.MULTIPLICATION: " * ",
    FilterOption.DIVISION: " / ",
}


def save_history(entries: Iterable[NumberInfo], path) -> None:
    """Write entries to a text file, one per line."""
    try:
        with open(path, "w", encoding="utf-8") as handle:
            for entry in entries:
                flag = "1 " if entry.even else "0 "
                handle.write(
                    f"{entry.index} {format_number(entry.value)} {flag}{entry.operation}\n"
                )
    except OSError as exc:
        raise HistoryError(
            f"Error opening file {os.fspath(path)} for writing."
        ) from exc


def load_history(path) -> list[NumberInfo]:
    """Read entries previously written by save_history."""
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except OSError as exc:
        raise HistoryError("The file couldn't be loaded.") from exc

    history = []
    for line in lines:
        if not line.strip():
            continue
        match = _LINE.fullmatch(line)
        if match is None or match.group(3) not in ("0", "1"):
            raise HistoryError(f"Malformed history line: {line!r}")
        index, value, even, operation = match.groups()
        try:
            history.append(
                NumberInfo(int(index), float(value), even == "1", operation)
            )
        except ValueError as exc:
            raise HistoryError(f"Malformed history line: {line!r}") from exc
    return history


def split_even_odd(entries: Iterable[NumberInfo]) -> tuple[list[int], list[int]]:
    """Split values by their parity flag, truncated to integers."""
    even: list[int] = []
    odd: list[int] = []
    for entry in entries:
        (even if entry.even else odd).append(int(entry.value))
    return even, odd


def find_operations(entries: Iterable[NumberInfo], symbol: str) -> list[str]:
    """Return the operation texts containing the given symbol."""
    return [entry.operation for entry in entries if symbol in entry.operation]


def apply_filter(entries: Iterable[NumberInfo], option, out: TextIO | None = None) -> None:
    """Print the part of the history selected by a filter option."""
    out = out if out is not None else sys.stdout
    entries = list(entries)
    option = FilterOption(option)

    if option in (FilterOption.EVEN, FilterOption.ODD):
        even, odd = split_even_odd(entries)
        label, numbers = ("Even", even) if option is FilterOption.EVEN else ("Odd", odd)
        print(f"{label} numbers: " + "".join(f"{n} " for n in numbers), file=out)
        return

    symbol = _SYMBOLS[option]
    print(f"Operations with the selected type: {symbol}", file=out)
    found = find_operations(entries, symbol)
    for text in found:
        print(text, file=out)
    if not found:
        print("No operations of this type were found.", file=out)