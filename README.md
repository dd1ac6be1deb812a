# gostudy

A small collection of classic algorithm exercises with plain, readable
implementations. It has no dependencies outside the standard library.

## Install

```
pip install .
pip install ".[test]"   # to run the tests
```

## What is inside

### `gostudy.basics`

- `factor(primes, number)`: divides each prime out of `number` as often as
  it goes. Any remainder greater than one is added as a last factor.
  Raises `ValueError` for a zero `number` or a "prime" whose absolute value
  is below 2.
- `fibonacci(n)`: the nth Fibonacci number, computed iteratively
  (`fibonacci(0) == 0`, `fibonacci(1) == 1`).
- `find_two_that_sum(numbers, target)`: indices `(i, j)` of two different
  entries that add up to `target`, the first pair in scan order, or
  `(-1, -1)` if there is none. The input is not changed.
- `fizz_buzz_line(n)`: the FizzBuzz sequence from 1 to `n` joined by
  `", "`, with `"Fizz Buzz"` for multiples of 15.
- `fizz_buzz(n, file=None)`: prints that line to `file` (standard output
  by default).
- `gcd(a, b)`: greatest common divisor by Euclid's algorithm.
- `num_in_list(items, num)`: whether `num` occurs in `items`.
- `reverse(word)`: the characters of `word` in reverse order.
- `sum_numbers(numbers)`: the sum of the numbers.

### `gostudy.conversion`

Numbers in bases 2 to 16 written with the digits `0123456789ABCDEF`.

- `base_to_dec(value, base)`: the integer that `value` stands for. Digits
  must be upper case; an unknown digit raises `ValueError`.
- `base_to_dec_alt(value, base)`: the same, but each digit is read as
  hexadecimal, so lower-case `a`–`f` are accepted too.
- `dec_to_base(dec, base)` and `dec_to_base_alt(dec, base)`: `dec` written
  in `base`. Zero and negative numbers give an empty string. A base outside
  2–16 raises `ValueError`.
- `base_to_base(value, base, new_base)`: converts from one base to another.

### `gostudy.bigo`

Functions that show different growth rates:

- `add(a, b)`: O(1).
- `sum_to_max(maximum)`: adds 1 to `maximum` term by term, O(N).
- `sum_to_max_v2(maximum)`: the same in closed form, O(1).
- `sum_vals(vals)`: sums the values, O(N).
- `find(items, x)`: index of the first `x`, or -1.
- `grid(x, y)`: `y` rows of `x` characters that alternate `x`/`o`; the
  alternation carries on from one row into the next.
- `print_list(word, n, file=None)`: prints the decimal code points of
  `word`'s characters run together, on `n` lines.
- `cube(n)`: every `(x, y, z)` triple with coordinates below `n`, one per
  line.

### `gostudy.sorting`

All sorts work on a list in place.

- `Person(age, first_name, last_name)`: a frozen dataclass. `sort_key()`
  gives `(age, last_name, first_name)`, the order the person sorts use.
- `bubble_sort(items, key=None)`: bubble sort that stops early once a sweep
  makes no swap; `key` is applied to items before comparing.
- `bubble_sort_int`, `bubble_sort_string`, `bubble_sort_person`.
- `insertion_sort(items, key=None)`: insertion sort that finds each item's
  place in the sorted prefix by binary search.
- `insertion_sort_int`, `insertion_sort_string`, `insertion_sort_person`.

All of these sorts are stable.

### `gostudy.gcd_demo`

- `run(stdin, stdout)`: reads a count `n` and then `n` pairs of integers
  from `stdin` and writes the GCD of each pair on its own line. Numbers may
  be split by any whitespace, and missing numbers are read as zero.
- `main(argv=None)`: calls `run` on standard input and standard output.

## Examples

```python
from gostudy.conversion import base_to_base, dec_to_base
from gostudy.basics import factor, fizz_buzz_line
from gostudy.sorting import Person, bubble_sort_person

base_to_base("E", 16, 2)        # "1110"
dec_to_base(3735928559, 16)     # "DEADBEEF"
factor([2, 3, 5], 28)           # [2, 2, 7]
fizz_buzz_line(5)               # "1, 2, Fizz, 4, Buzz"

people = [Person(30, "Ann", "Lee"), Person(12, "Bob", "Ray")]
bubble_sort_person(people)      # sorts the list in place, youngest first
```

## GCD command

Installing the package adds the `gostudy-gcd` command, which runs
`gostudy.gcd_demo.main`:

```
printf '2\n10 5\n30 9\n' | gostudy-gcd
```

This prints `5` and then `3`. The command takes no options other than
`--help`. It does not prompt for input.

## Tests

```
pytest
```