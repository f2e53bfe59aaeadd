# calchistory

An interactive console calculator for whole numbers. Every number you type and
every result it works out goes into a history. You can print the history, filter
it, save it to a text file and load it back later.

## Installation

```
pip install .
```

## Usage

Start the calculator:

```
calchistory
```

By default the history is saved to and loaded from `history.txt` in the current
directory. Another file can be chosen:

```
calchistory --history my-history.txt
```

A menu is shown. Type the number of an operation:

| Choice | Operation                 |
|--------|---------------------------|
| 1      | Addition                  |
| 2      | Subtraction               |
| 3      | Multiplication            |
| 4      | Division                  |
| 5      | Save history              |
| 6      | Load previous history     |
| 7      | Print the history         |
| 8      | Filtering                 |
| 0      | Exit                      |

Input is read as whitespace-separated tokens, so several answers may be typed on
one line. Any other choice is reported as an undefined operation.

The arithmetic operations ask for two whole numbers. Both operands and the result
are recorded. In a division the first number is the dividend and the second is the
divisor; the result may be fractional. Dividing by zero prints an error and records
`0` without an operation text. If an operand is not a whole number, an error is
printed and the menu is shown again.

Each history entry holds its index, its value, whether it is even or odd (decided
on the value truncated to a whole number), and, for results, the operation that
produced it, for example `7 + 5 = 12`.

Option 8 asks which filter to apply: only the even values, only the odd values,
or only the operations of one kind (addition, subtraction, multiplication or
division). Filtered values are shown truncated to whole numbers.

Option 6 appends the saved entries to the current history, keeping the indices
they were saved with. Choosing Exit prints the history and saves it before the
program ends. If input runs out, the program ends without saving.

### History file format

One entry per line: the index, the value (at most six significant digits), `1` or
`0` for even or odd, and the operation text, separated by spaces.

## Using it from Python

```python
import io
from calchistory.calculator import Calculator

out = io.StringIO()
calc = Calculator(reader=["7 5"], out=out, history_path="history.txt")
print(calc.add())          # 12
calc.print_storage()
print(out.getvalue())
```

`Calculator` takes an iterable of input lines (`reader`), streams for normal
output and errors (`out`, `err`, defaulting to standard output and standard
error) and the history file path. Its `storage` list holds `NumberInfo` records.
Methods: `add`, `subtract`, `multiply`, `divide`, `ask_numbers`, `save_number`,
`save_operation`, `print_storage`, `save_history`, `load_history` and `filter`.

The `calchistory.history` module has the file and filter helpers on their own:

- `save_history(entries, path)` and `load_history(path)` write and read the
  history file; both raise `HistoryError` when the file cannot be used, and
  `load_history` also raises it for a malformed line.
- `split_even_odd(entries)` returns the even and odd values as two lists of
  integers.
- `find_operations(entries, symbol)` returns the operation texts containing a
  symbol such as `" + "`.
- `apply_filter(entries, option, out)` prints the part of the history chosen by a
  `FilterOption`.

`calchistory.records` holds `NumberInfo`, the `FilterOption` and `Operation`
enumerations (`Operation.parse` turns input into a menu entry, unknown input
giving `UNDEFINED`) and `format_number`.

`calchistory.cli.run(reader, out, err, history_path)` runs the menu loop on the
given streams and returns `0` when it ends.

## What it does not do

Only whole numbers are accepted as operands, and only the four basic operations
are offered. There is no undo or deletion of history entries; the history is
kept in memory and only reaches disk when it is saved.