"""Core library routines that compiled programs call: printing and strings."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

DEFAULT_PRECISION = 6

_HEX_LETTERS = {10: "A", 11: "B", 12: "C", 13: "D", 14: "E", 15: "F"}


def _byte_char(code: int) -> str:
    """The character a C ``char`` holding ``code`` stands for."""
    return chr(code & 0xFF)


def _c_string(text: str) -> str:
    """Cut ``text`` at its first NUL, as a C string would end there."""
    return text.split("\0", 1)[0]


def _hex_digit(num: int) -> str:
    return _HEX_LETTERS.get(num) or _byte_char(num + ord("0"))


def format_int(value: int) -> str:
    """Return the decimal text that ``print_int`` writes for ``value``.

    Negative values are not handled as numbers: like the runtime routine,
    they come out as the single byte ``value + '0'``.
    """
    if value < 0:
        return _byte_char(value + ord("0"))
    return str(value)


def format_hex(value: int) -> str:
    """Return the upper-case hexadecimal text that ``print_hex`` writes."""
    if value == 0:
        return "0"
    if value <= 15:
        return _hex_digit(value)
    digits = []
    while value > 15:
        value, digit = divmod(value, 16)
        digits.append(_hex_digit(digit))
    digits.append(_hex_digit(value))
    return "".join(reversed(digits))


def _format_char(arg: Any) -> str:
    if isinstance(arg, int):
        return _byte_char(arg)
    text = str(arg)
    return text[:1]


def format_print(fmt: str, *args: Any) -> str:
    """Return the line ``print`` writes for a format and its arguments.

    Each character of ``fmt`` takes one argument: ``s`` a string, ``d`` a
    decimal integer, ``b`` a boolean, ``c`` a character and ``x`` a hex
    integer. Other characters are skipped. A newline ends the line.
    """
    values: Iterator[Any] = iter(args)

    def take(spec: str) -> Any:
        try:
            return next(values)
        except StopIteration:
            raise ValueError(f"missing argument for format '{spec}'") from None

    parts = []
    for spec in _c_string(fmt):
        if spec == "s":
            parts.append(_c_string(str(take(spec))))
        elif spec == "d":
            parts.append(format_int(int(take(spec))))
        elif spec == "b":
            parts.append("true" if take(spec) else "false")
        elif spec == "c":
            parts.append(_format_char(take(spec)))
        elif spec == "x":
            parts.append(format_hex(int(take(spec))))
    parts.append("\n")
    return "".join(parts)


def print_values(fmt: str, *args: Any, stream: TextIO | None = None) -> None:
    """Write the ``format_print`` line to ``stream`` (standard output by default)."""
    out = sys.stdout if stream is None else stream
    out.write(format_print(fmt, *args))


def format_double(num: float, precision: int = DEFAULT_PRECISION) -> str:
    """Return ``num`` with exactly ``precision`` truncated decimal digits."""
    parts = []
    if num < 0.0:
        parts.append("-")
        num = -num
    whole = int(num)
    num -= whole
    parts.append(str(whole))
    parts.append(".")
    for _ in range(precision):
        num *= 10.0
        digit = int(num)
        parts.append(str(digit))
        num -= digit
    return "".join(parts)


def stringcmp(first: str, second: str) -> int:
    """Return 1 if the two strings are equal, otherwise 0."""
    left = _c_string(first)
    right = _c_string(second)
    if len(left) != len(right):
        return 0
    for a, b in zip(left, right):
        if a != b:
            return 0
    return 1


def strcat_char(text: str, char: str | int) -> str:
    """Return ``text`` with one character appended."""
    return _c_string(_c_string(text) + _format_char(char))


def strcat_str(first: str, second: str) -> str:
    """Return the concatenation of two strings."""
    return _c_string(first) + _c_string(second)