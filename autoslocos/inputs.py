"""Text validation helpers and a small console wrapper for interactive prompts."""

from __future__ import annotations

import sys
from typing import TextIO

_DIGITS = frozenset("0123456789")

PAUSE_MESSAGE = "Presione Enter para continuar . . ."
INVALID_OPTION = "\nOpcion invalida, intente de nuevo\n"


def _all_digits(text: str) -> bool:
    return all(ch in _DIGITS for ch in text)


def is_integer(text: str) -> bool:
    """Return True if ``text`` is an optionally signed run of decimal digits."""
    if not text:
        return False
    if len(text) == 1:
        return text in _DIGITS
    body = text[1:] if text[0] in "+-" else text
    return _all_digits(body)


def has_non_space(text: str) -> bool:
    """Return True if ``text`` holds any character other than a blank."""
    return any(ch != " " for ch in text)


def is_valid_float(text: str) -> bool:
    """Return True if ``text`` is digits with at most one '.' or ',' separator."""
    separators = 0
    for ch in text:
        if ch in ".,":
            separators += 1
            if separators > 1:
                return False
        elif ch not in _DIGITS:
            return False
    return True


def is_numeric(text: str) -> bool:
    """Return True if every character of ``text`` is a decimal digit."""
    return _all_digits(text)


def is_valid_string(text: str) -> bool:
    """Return True if ``text`` is non-empty and not made only of blanks."""
    return bool(text) and has_non_space(text)


class Console:
    """Line-oriented input and output over a pair of text streams."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def read_line(self) -> str:
        """Read one line without its line ending; raise EOFError at end of input."""
        line = self.stdin.readline()
        if line == "":
            raise EOFError("no more input")
        return line.rstrip("\r\n")

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def ask_int(self, prompt: str) -> int:
        """Prompt until the user enters an integer and return it."""
        while True:
            self.write(prompt + "\n")
            answer = self.read_line()
            if is_integer(answer):
                self.write("\n")
                return int(answer)

    def ask_int_in_range(self, prompt: str, low: int, high: int) -> int:
        """Prompt until the user enters an integer between ``low`` and ``high``."""
        while True:
            value = self.ask_int(prompt)
            if low <= value <= high:
                return value
            self.write(INVALID_OPTION)

    def pause(self) -> None:
        """Wait for the user to press Enter; end of input ends the wait."""
        self.write(PAUSE_MESSAGE + "\n")
        try:
            self.read_line()
        except EOFError:
            pass

    def clear(self) -> None:
        """Clear the screen when writing to a terminal."""
        isatty = getattr(self.stdout, "isatty", None)
        if isatty is not None and isatty():
            self.write("\033[2J\033[H")