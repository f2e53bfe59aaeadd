import io

import pytest

from calchistory.calculator import Calculator, is_even


def make(text, tmp_path):
    out, err = io.StringIO(), io.StringIO()
    calc = Calculator(io.StringIO(text), out, err, tmp_path / "history.txt")
    return calc, out, err


@pytest.mark.parametrize(("num", "expected"), [(4, True), (-3, False), (0, True), (2.5, True), (7.0, False)])
def test_is_even(num, expected):
    assert is_even(num) is expected


def test_add_records_operands_and_result(tmp_path):
    calc, _, _ = make("3 5\n", tmp_path)
    assert calc.add() == 3 + 5
    assert [e.index for e in calc.storage] == [0, 1, 2]
    assert [e.value for e in calc.storage][:2] == [3.0, 5.0]
    assert calc.storage[-1].operation == "3 + 5 = 8"
    assert calc.storage[0].operation == " "


def test_subtract_and_multiply(tmp_path):
    calc, _, _ = make("10 4\n6 7\n", tmp_path)
    assert calc.subtract() == 10 - 4
    assert calc.multiply() == 6 * 7
    assert calc.storage[2].operation.startswith("10 - 4 = ")
    assert calc.storage[-1].operation.startswith("6 * 7 = ")
    assert len(calc.storage) == 6


def test_divide_fraction(tmp_path):
    calc, _, _ = make("7 2", tmp_path)
    assert calc.divide() == 7 / 2
    assert calc.storage[-1].operation == "7 / 2 = 3.5"


def test_divide_exact_shows_integer(tmp_path):
    calc, _, _ = make("6 3", tmp_path)
    calc.divide()
    assert calc.storage[-1].operation == "6 / 3 = 2"


def test_divide_by_zero(tmp_path):
    calc, _, err = make("9 0", tmp_path)
    assert calc.divide() == 0
    assert "Error: Division by zero!" in err.getvalue()
    assert calc.storage[-1].value == 0.0
    assert calc.storage[-1].operation == " "


def test_missing_input_raises_eof(tmp_path):
    calc, _, _ = make("1", tmp_path)
    with pytest.raises(EOFError):
        calc.add()


def test_non_integer_input_raises(tmp_path):
    calc, _, _ = make("a 2", tmp_path)
    with pytest.raises(ValueError):
        calc.ask_numbers()


def test_save_operation_without_entries(tmp_path):
    calc, _, _ = make("", tmp_path)
    with pytest.raises(IndexError):
        calc.save_operation("+", 1, 2, 3)


def test_print_storage(tmp_path):
    calc, out, _ = make("3 5", tmp_path)
    calc.add()
    out.truncate(0)
    out.seek(0)
    calc.print_storage()
    lines = out.getvalue().splitlines()
    assert lines[0] == "History:"
    assert lines[1] == "Index: 0, Value: 3, Classification: Odd  "
    assert len(lines) == 4


def test_save_and_load_round_trip(tmp_path):
    calc, _, _ = make("3 5", tmp_path)
    calc.add()
    calc.save_history()
    other, _, _ = make("", tmp_path)
    other.load_history()
    assert [e.value for e in other.storage] == [e.value for e in calc.storage]
    assert [e.even for e in other.storage] == [e.even for e in calc.storage]


def test_load_missing_reports(tmp_path):
    calc, _, err = make("", tmp_path)
    calc.load_history()
    assert "The file couldn't be loaded." in err.getvalue()
    assert calc.storage == []


def test_save_failure_reports(tmp_path):
    calc = Calculator(io.StringIO(""), io.StringIO(), err := io.StringIO(), tmp_path)
    calc.save_history()
    assert "for writing." in err.getvalue()


def test_filter_operation_type(tmp_path):
    calc, out, _ = make("3 5 3 1", tmp_path)
    calc.add()
    calc.filter()
    assert out.getvalue().splitlines()[-1] == "3 + 5 = 8"


def test_filter_invalid_option(tmp_path):
    calc, _, err = make("7", tmp_path)
    calc.filter()
    assert "Invalid filter option." in err.getvalue()


def test_filter_invalid_operation_type(tmp_path):
    calc, _, err = make("3 9", tmp_path)
    calc.filter()
    assert "Invalid operation type." in err.getvalue()


def test_filter_exit(tmp_path):
    calc, out, _ = make("0", tmp_path)
    calc.filter()
    assert out.getvalue().splitlines()[-1].endswith("Exiting the filter functionality.")