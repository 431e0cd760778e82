import io

import pytest

from autoslocos.inputs import (
    Console,
    has_non_space,
    is_integer,
    is_numeric,
    is_valid_float,
    is_valid_string,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", False),
        ("a", False),
        ("+", False),
        ("-", False),
        ("5", True),
        ("+5", True),
        ("-12", True),
        ("007", True),
        ("1a", False),
        ("--1", False),
        (" 1", False),
    ],
)
def test_is_integer(text, expected):
    assert is_integer(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [("", False), ("   ", False), (" x ", True), ("abc", True)],
)
def test_has_non_space(text, expected):
    assert has_non_space(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1.5", True),
        ("1,5", True),
        ("15", True),
        ("1.5.2", False),
        ("1.5,2", False),
        ("-1.5", False),
        ("a", False),
        ("", True),
    ],
)
def test_is_valid_float(text, expected):
    assert is_valid_float(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [("123", True), ("", True), ("-1", False), ("12a", False)],
)
def test_is_numeric(text, expected):
    assert is_numeric(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [("", False), ("    ", False), (" a", True), ("pista", True)],
)
def test_is_valid_string(text, expected):
    assert is_valid_string(text) is expected


def _console(text):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


def test_read_line_strips_line_ending():
    console, _ = _console("hola\r\nmundo\n")
    assert console.read_line() == "hola"
    assert console.read_line() == "mundo"


def test_read_line_raises_at_end():
    console, _ = _console("")
    with pytest.raises(EOFError):
        console.read_line()


def test_write_goes_to_stdout():
    console, out = _console("")
    console.write("abc")
    assert out.getvalue() == "abc"


def test_ask_int_retries_until_integer():
    console, out = _console("x\n\n7\n")
    assert console.ask_int("Ingrese una opcion: ") == 7
    assert out.getvalue().count("Ingrese una opcion: ") == 3


def test_ask_int_accepts_signs():
    console, _ = _console("-4\n")
    assert console.ask_int("n") == -4


def test_ask_int_runs_out_of_input():
    console, _ = _console("nope\n")
    with pytest.raises(EOFError):
        console.ask_int("n")


def test_ask_int_in_range_rejects_out_of_range():
    console, out = _console("0\n10\n3\n")
    assert console.ask_int_in_range("opcion", 1, 9) == 3
    assert out.getvalue().count("Opcion invalida") == 2


def test_pause_consumes_one_line():
    console, _ = _console("\nnext\n")
    console.pause()
    assert console.read_line() == "next"


def test_pause_tolerates_end_of_input():
    console, out = _console("")
    console.pause()
    assert "continuar" in out.getvalue()


def test_clear_writes_nothing_to_non_terminal():
    console, out = _console("")
    console.clear()
    assert out.getvalue() == ""