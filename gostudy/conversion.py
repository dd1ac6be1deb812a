"""Conversion of numbers between bases 2 to 16 written with digits 0-9 and A-F."""

from __future__ import annotations

CHARSET = "0123456789ABCDEF"


def _check_base(base: int) -> None:
    if not 2 <= base <= len(CHARSET):
        raise ValueError(f"base must be between 2 and {len(CHARSET)}, got {base}")


def base_to_dec(value: str, base: int) -> int:
    """Return the integer written as ``value`` in ``base`` (upper-case digits)."""
    result = 0
    for char in value:
        index = CHARSET.find(char)
        if index < 0:
            raise ValueError(f"invalid digit {char!r} in {value!r}")
        result = result * base + index
    return result


def base_to_dec_alt(value: str, base: int) -> int:
    """Like :func:`base_to_dec`, but reads each digit as hexadecimal in either case."""
    result = 0
    multiplier = 1
    for char in reversed(value):
        try:
            digit = int(char, 16)
        except ValueError:
            raise ValueError(f"invalid digit {char!r} in {value!r}") from None
        result += multiplier * digit
        multiplier *= base
    return result


def dec_to_base(dec: int, base: int) -> str:
    """Return ``dec`` written in ``base``; zero and negative numbers give ""."""
    _check_base(base)
    result = ""
    while dec > 0:
        dec, rem = divmod(dec, base)
        result = CHARSET[rem] + result
    return result


def dec_to_base_alt(dec: int, base: int) -> str:
    """Same as :func:`dec_to_base`, collecting digits low first and reversing."""
    _check_base(base)
    digits: list[str] = []
    while dec > 0:
        dec, rem = divmod(dec, base)
        digits.append(CHARSET[rem])
    return "".join(reversed(digits))


def base_to_base(value: str, base: int, new_base: int) -> str:
    """Convert ``value`` written in ``base`` into ``new_base``."""
    return dec_to_base(base_to_dec(value, base), new_base)