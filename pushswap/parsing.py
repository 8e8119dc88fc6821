"""Reading the numbers of the puzzle from command-line arguments."""

from __future__ import annotations

from typing import Iterable, Sequence

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_MAX_PREFIX = 214748364
_WHITESPACE = "\t\n\v\f\r "


class InputError(ValueError):
    """The arguments do not form a valid list of distinct integers."""


def check_digit_spaces(args: Iterable[str]) -> bool:
    """True when every argument holds only digits and spaces.

    One sign is allowed after the leading spaces, and it must be followed
    by a digit or by the end of the argument.
    """
    for arg in args:
        rest = arg.lstrip(" ")
        if rest[:1] in ("+", "-"):
            rest = rest[1:]
        if rest and not rest[0].isdigit():
            return False
        if any(not ("0" <= ch <= "9") and ch != " " for ch in rest):
            return False
    return True


def _tokens(arg: str) -> list[str]:
    return [token for token in arg.split(" ") if token]


def count_numbers(args: Iterable[str]) -> int:
    """Count the space-separated words; an argument with none counts as one."""
    return sum(max(1, len(_tokens(arg))) for arg in args)


def split_arguments(args: Iterable[str]) -> list[str]:
    """Split every argument on spaces into one flat list of tokens.

    Raises InputError when an argument holds characters other than digits,
    spaces and a leading sign, or when an argument is empty or all spaces.
    """
    args = list(args)
    if not check_digit_spaces(args):
        raise InputError("arguments may hold only digits, spaces and a sign")
    tokens: list[str] = []
    for arg in args:
        words = _tokens(arg)
        if not words:
            raise InputError("empty argument")
        tokens.extend(words)
    return tokens


def atoi(text: str) -> int:
    """Read a leading decimal integer, as a 32-bit signed value.

    Leading whitespace is skipped, one sign is read, and digits are taken
    up to the first non-digit. Text without digits reads as 0.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = False
    if rest[:1] in ("+", "-"):
        negative = rest[0] == "-"
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not ("0" <= ch <= "9"):
            break
        value = value * 10 + (ord(ch) - ord("0"))
    if negative:
        value = -value
    value &= 0xFFFFFFFF
    return value - 2**32 if value > _INT_MAX else value


def is_in_int_range(token: str) -> bool:
    """Decide whether a token fits a 32-bit signed int by its digits.

    Tokens shorter than ten characters always pass; eleven characters pass
    only with a minus sign; longer ones never do. Otherwise the token is
    judged by its leading digits and by its last character.
    """
    size = len(token)
    negative = token[:1] == "-"
    if size > 11 or (size == 11 and not negative):
        return False
    if size < 10:
        return True
    last = size - 1
    if negative:
        token = token[1:]
        last -= 1
    if atoi(token[:last]) > _MAX_PREFIX:
        return False
    limit = "8" if negative else "7"
    return token[last] <= limit


def is_sorted(values: Sequence[int]) -> bool:
    """True when the values never decrease."""
    return all(x <= y for x, y in zip(values, values[1:]))


def parse_numbers(args: Iterable[str]) -> list[int]:
    """Turn the arguments into the list of numbers, top of stack first.

    Raises InputError on bad characters, empty arguments, repeated numbers
    and numbers out of the int range. Returns an empty list when the
    numbers are already in order, since there is nothing to sort.
    """
    numbers: list[int] = []
    seen: set[int] = set()
    for token in split_arguments(args):
        value = atoi(token)
        if value in seen:
            raise InputError(f"duplicate number {token!r}")
        if not is_in_int_range(token):
            raise InputError(f"number out of range {token!r}")
        seen.add(value)
        numbers.append(value)
    if is_sorted(numbers):
        return []
    return numbers