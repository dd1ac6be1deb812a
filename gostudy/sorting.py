"""In-place bubble sort and insertion sort for integers, strings and people."""

from __future__ import annotations

import bisect
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Person:
    """A person, ordered by age, then last name, then first name."""

    age: int
    first_name: str
    last_name: str

    def sort_key(self) -> tuple[int, str, str]:
        """Return the key that orders people by age, last name, first name."""
        return (self.age, self.last_name, self.first_name)


def _less(a: T, b: T, key: Callable[[T], Any] | None) -> bool:
    """Return whether ``a`` orders strictly before ``b``."""
    if key is None:
        return a < b  # type: ignore[operator]
    return key(a) < key(b)


def bubble_sort(items: list[T], key: Callable[[T], Any] | None = None) -> None:
    """Sort ``items`` in place with bubble sort, comparing ``key(item)``.

    Stops early once a sweep makes no swap. O(N^2).
    """
    length = len(items)
    for sweep in range(length):
        swapped = False
        for i in range(length - 1 - sweep):
            if _less(items[i + 1], items[i], key):
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        if not swapped:
            break


def bubble_sort_int(items: list[int]) -> None:
    """Sort a list of integers in place with bubble sort."""
    bubble_sort(items)


def bubble_sort_string(items: list[str]) -> None:
    """Sort a list of strings in place with bubble sort."""
    bubble_sort(items)


def bubble_sort_person(people: list[Person]) -> None:
    """Sort people in place with bubble sort by age, last name, first name."""
    bubble_sort(people, Person.sort_key)


def _insertion_sorted(
    items: list[T], key: Callable[[T], Any] | None = None
) -> list[T]:
    # Each item goes before the first already-placed item greater than it,
    # which keeps equal items in their original order.
    result: list[T] = []
    for item in items:
        bisect.insort_right(result, item, key=key)
    return result


def insertion_sort_int(items: list[int]) -> None:
    """Sort a list of integers in place with insertion sort."""
    items[:] = _insertion_sorted(items)


def insertion_sort_string(items: list[str]) -> None:
    """Sort a list of strings in place with insertion sort."""
    items[:] = _insertion_sorted(items)


def insertion_sort_person(people: list[Person]) -> None:
    """Sort people in place with insertion sort by age, last name, first name."""
    people[:] = _insertion_sorted(people, Person.sort_key)


def insertion_sort(items: list[T], key: Callable[[T], Any] | None = None) -> None:
    """Sort ``items`` in place with insertion sort, comparing ``key(item)``.

    Each item is moved into the sorted prefix before the first element
    greater than it; the prefix is searched with binary search.
    """
    for i in range(1, len(items)):
        probe = items[i] if key is None else key(items[i])
        position = bisect.bisect_right(items, probe, 0, i, key=key)
        if position < i:
            items.insert(position, items.pop(i))