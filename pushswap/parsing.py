"""Reading and validating the numbers handed to the sorter."""

from __future__ import annotations

from collections.abc import Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_SPACES = " \f\n\r\t\v"
_WORD_SEPARATORS = " \t"


class InputError(ValueError):
    """Raised when the argument list is not a valid set of distinct integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def parse_int(text: str) -> int:
    """Read a leading integer the lenient way: skip blanks, one sign, then digits.

    Anything after the digits is ignored; no digits at all gives 0.
    """
    rest = text.lstrip(_SPACES)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if not "0" <= char <= "9":
            break
        digits.append(char)
    return sign * int("".join(digits)) if digits else 0


def split_words(text: str) -> list[str]:
    """Split on spaces and tabs only, dropping empty pieces."""
    words: list[str] = []
    current: list[str] = []
    for char in text:
        if char in _WORD_SEPARATORS:
            if current:
                words.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        words.append("".join(current))
    return words


def is_number(text: str) -> bool:
    """True for an optional sign followed by one or more ASCII digits."""
    body = text[1:] if text[:1] in ("-", "+") else text
    return bool(body) and all("0" <= char <= "9" for char in body)


def has_duplicates(args: Sequence[str]) -> bool:
    """True when two arguments read as the same integer."""
    seen: set[int] = set()
    for arg in args:
        number = parse_int(arg)
        if number in seen:
            return True
        seen.add(number)
    return False


def check_input(args: Sequence[str]) -> bool:
    """True when every argument is a distinct integer within 32-bit range."""
    if has_duplicates(args):
        return False
    return all(
        is_number(arg) and INT_MIN <= parse_int(arg) <= INT_MAX for arg in args
    )


def validate_input(args: Sequence[str]) -> None:
    """Raise InputError unless check_input accepts the arguments."""
    if not check_input(args):
        raise InputError()