"""Small integer and string exercises: factoring, Fibonacci, FizzBuzz and friends."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from typing import TextIO


def factor(primes: Iterable[int], number: int) -> list[int]:
    """Factor ``number`` using ``primes``.

    Each prime is divided out as often as it goes.  Any remainder greater
    than one that the primes cannot divide is appended as a final factor.
    """
    if number == 0:
        raise ValueError("cannot factor zero")
    result: list[int] = []
    for prime in primes:
        if abs(prime) < 2:
            raise ValueError(f"invalid prime: {prime}")
        while number % prime == 0:
            result.append(prime)
            number //= prime
    if number > 1:
        result.append(number)
    return result


def fibonacci(n: int) -> int:
    """Return the nth Fibonacci number, with fibonacci(0) == 0 and fibonacci(1) == 1."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(2, n + 1):
        previous, current = current, previous + current
    return current


def find_two_that_sum(numbers: Sequence[int], target: int) -> tuple[int, int]:
    """Return indices of two distinct entries adding up to ``target``.

    The first matching pair in scan order is returned; ``(-1, -1)`` means
    no pair exists.  ``numbers`` is never modified.
    """
    for i, first in enumerate(numbers):
        for j, second in enumerate(numbers):
            if i != j and first + second == target:
                return i, j
    return -1, -1


def _fizz_buzz_word(i: int) -> str:
    if i % 3 == 0 and i % 5 == 0:
        return "Fizz Buzz"
    if i % 3 == 0:
        return "Fizz"
    if i % 5 == 0:
        return "Buzz"
    return str(i)


def fizz_buzz_line(n: int) -> str:
    """Return the FizzBuzz sequence from 1 to ``n`` joined by ", "."""
    return ", ".join(_fizz_buzz_word(i) for i in range(1, n + 1))


def fizz_buzz(n: int, file: TextIO | None = None) -> None:
    """Print the FizzBuzz sequence from 1 to ``n`` as a single line."""
    print(fizz_buzz_line(n), file=file if file is not None else sys.stdout)


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of ``a`` and ``b`` (Euclid's algorithm)."""
    while b != 0:
        a, b = b, a % b
    return a


def num_in_list(items: Iterable[int], num: int) -> bool:
    """Return True if ``num`` occurs in ``items``."""
    return any(item == num for item in items)


def reverse(word: str) -> str:
    """Return ``word`` with its characters in reverse order."""
    return word[::-1]


def sum_numbers(numbers: Iterable[int]) -> int:
    """Return the sum of ``numbers``."""
    return sum(numbers)