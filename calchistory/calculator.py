"""Interactive calculator that records every number it sees."""

from __future__ import annotations

import os
import sys
from typing import Iterable, TextIO

from . import history
from .records import FilterOption, NumberInfo, format_number


def is_even(num) -> bool:
    """Parity of a number after truncating it to an integer."""
    return int(num) % 2 == 0


class Calculator:
    """Asks for operands, computes results and keeps a history of them.

    ``reader`` is an iterable of input lines; values are read as
    whitespace-separated tokens.
    """

    def __init__(
        self,
        reader: Iterable[str] | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
        history_path="history.txt",
    ):
        source = reader if reader is not None else sys.stdin
        self._tokens = (token for line in source for token in line.split())
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self.history_path = history_path
        self.storage: list[NumberInfo] = []

    def _say(self, text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=self.out, flush=True)

    def _complain(self, text: str) -> None:
        print(text, file=self.err, flush=True)

    def _read_int(self) -> int:
        try:
            token = next(self._tokens)
        except StopIteration:
            raise EOFError("no more input") from None
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"not an integer: {token!r}") from None

    def ask_numbers(self) -> tuple[int, int]:
        """Prompt for two integers, recording each one."""
        self._say("Please, type the first number: ", end="")
        first = self._read_int()
        self.save_number(first)
        self._say("Please, type the second number:", end="")
        second = self._read_int()
        self.save_number(second)
        return first, second

    def _binary(self, symbol: str, func):
        first, second = self.ask_numbers()
        result = func(first, second)
        self.save_number(result)
        self.save_operation(symbol, first, second, result)
        return result

    def add(self) -> int:
        return self._binary("+", lambda a, b: a + b)

    def subtract(self) -> int:
        return self._binary("-", lambda a, b: a - b)

    def multiply(self) -> int:
        return self._binary("*", lambda a, b: a * b)

    def divide(self) -> float:
        """Divide the first number by the second; zero divisors give 0."""
        first, second = self.ask_numbers()
        if second == 0:
            self._complain("Error: Division by zero!")
            self.save_number(0)
            return 0.0
        result = first / second
        self.save_number(result)
        self.save_operation("/", first, second, result)
        return result

    def save_number(self, num) -> None:
        self.storage.append(
            NumberInfo(index=len(self.storage), value=float(num), even=is_even(num))
        )

    def save_operation(self, symbol: str, num1: int, num2: int, result) -> None:
        """Attach the text of an operation to the most recent entry."""
        if result == int(result):
            shown = str(int(result))
        else:
            shown = format_number(result)
        self.storage[-1].operation = f"{num1} {symbol} {num2} = {shown}"

    def print_storage(self) -> None:
        self._say("History:")
        for entry in self.storage:
            kind = "Even " if entry.even else "Odd "
            self._say(
                f"Index: {entry.index}, Value: {format_number(entry.value)}, "
                f"Classification: {kind}{entry.operation}"
            )

    def save_history(self) -> None:
        try:
            history.save_history(self.storage, self.history_path)
        except history.HistoryError as exc:
            self._complain(str(exc))

    def load_history(self) -> None:
        """Append a previously saved history to the current one."""
        try:
            self.storage.extend(history.load_history(self.history_path))
        except history.HistoryError as exc:
            self._complain(str(exc))

    def filter(self) -> None:
        """Ask for a filter and print the matching part of the history."""
        self._say("Please, select now what filter you desire to apply: ")
        self._say("0. Exit")
        self._say("1. Filter even numbers")
        self._say("2. Filter odd numbers")
        self._say("3. Filter results from a specific operation type")
        self._say("Please, type which filter you want to apply: ", end="")
        option = self._read_int()

        if not 0 <= option <= 3:
            self._complain("Invalid filter option.")
            return
        if option == 0:
            self._say("Exiting the filter functionality.")
            return
        if option in (1, 2):
            history.apply_filter(self.storage, FilterOption(option), self.out)
            return

        self._say("Please, type the operation type you want to filter: ")
        self._say("0. Exit")
        self._say("1. Addition")
        self._say("2. Subtraction")
        self._say("3. Multiplication")
        self._say("4. Division")
        self._say("Please, type which filter you want to apply: ", end="")
        op_type = self._read_int()

        if not 0 <= op_type <= 4:
            self._complain("Invalid operation type.")
            return
        if op_type == 0:
            self._say("Exiting the filter functionality.")
            return
        history.apply_filter(self.storage, FilterOption(op_type + 2), self.out)

    def __repr__(self) -> str:
        return (
            f"Calculator(entries={len(self.storage)}, "
            f"history_path={os.fspath(self.history_path)!r})"
        )