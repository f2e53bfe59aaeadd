"""Menu-driven command line front end."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, TextIO

from .calculator import Calculator
from .records import Operation, format_number

_INTRO = """\
Now, you will be asked to select an operation of the following list.
Please, input the index (number) of the operation to apply:
1. Addition
2. Subtraction
3. Multiplication
4. Division
5. Save History
6. Load previous History
7. Print the History
8. Filtering
0. Exit
Then, you will type two numbers to apply the chosen operation.
Clarification: in the division, the first number will be the dividend and the second number will be the divisor."""

_ARITHMETIC = {
    Operation.ADDITION: ("Addition", "addition", Calculator.add),
    Operation.SUBTRACTION: ("Subtraction", "subtraction", Calculator.subtract),
    Operation.MULTIPLICATION: ("Multiplication", "multiplication", Calculator.multiply),
    Operation.DIVISION: ("Division", "division", Calculator.divide),
}


def _dispatch(calc: Calculator, operation: Operation, out: TextIO) -> bool:
    """Carry out one menu choice; return True when the session ends."""
    if operation in _ARITHMETIC:
        title, noun, method = _ARITHMETIC[operation]
        print(f"You selected {title}.", file=out)
        result = method(calc)
        print(f"The result of the {noun} is: {format_number(result)}", file=out)
    elif operation is Operation.SAVE:
        calc.save_history()
        print(
            f"The history so far has been successfully saved in {calc.history_path} file.",
            file=out,
        )
    elif operation is Operation.LOAD:
        calc.load_history()
        print("The previous history has been loaded into current data", file=out)
    elif operation is Operation.PRINT:
        calc.print_storage()
    elif operation is Operation.FILTER:
        print("You selected the Filter functionality.", file=out)
        calc.filter()
    elif operation is Operation.EXIT:
        print("Exiting the program.", file=out)
        calc.print_storage()
        calc.save_history()
        return True
    else:
        print("Undefined operation. Please, select a valid operation.", file=out)
    return False


def run(
    reader: Iterable[str] | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
    history_path="history.txt",
) -> int:
    """Run the menu loop until the user exits or input runs out."""
    source = reader if reader is not None else sys.stdin
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr
    tokens = (token for line in source for token in line.split())
    calc = Calculator(tokens, out, err, history_path)

    print(_INTRO, file=out)
    while True:
        print("Please, select your operation: ", end="", file=out, flush=True)
        try:
            operation = Operation.parse(next(tokens))
        except StopIteration:
            return 0
        try:
            if _dispatch(calc, operation, out):
                return 0
        except EOFError:
            return 0
        except ValueError:
            print("Invalid input. Please, type whole numbers.", file=err)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="calchistory", description="Calculator that keeps a history."
    )
    parser.add_argument(
        "--history", default="history.txt", help="file used to save and load history"
    )
    args = parser.parse_args(argv)
    return run(history_path=args.history)


if __name__ == "__main__":
    raise SystemExit(main())