"""
ranking.py — exact integer ranking primitives
=============================================

Small building blocks the coordinates are made of:

* ``binom``: binomial coefficient, used to rank which slots a slice occupies.
* ``positional_value``: reads a digit sequence as a base-b numeral
  (orientation coordinates).
* ``rank_lower`` / ``rank_higher``: factorial-number-system ranks of a
  sequence of distinct values. ``rank_lower`` is the usual lexicographic rank
  (count later elements that are *smaller*); ``rank_higher`` mirrors it and
  counts later elements that are *larger*. The sorted-slice coordinates use
  the mirrored form, so a slice whose edges were collected in descending
  order ranks 0. The two are not interchangeable: unranking a slice order
  must undo ``rank_higher``, not ``rank_lower``.
* ``permutation_parity``: 0 for even permutations, 1 for odd.

Everything here is pure and allocation-light; it runs on the hot path of
move/pruning table construction.

--------------------------------------------------------------------------

Copyright (c) 2025 Facundo Gauna & Ulises Carnevale. Licensed under MIT License.
"""

from __future__ import annotations

from typing import Sequence

from cube_errors import InvalidArgument


# n choose k
def binom(n: int, k: int) -> int:
    """
    Exact value of (n choose k) for 0 <= k <= n, computed as
    n * (n - 1) * ... * (n - k + 1) / k!.
    """
    if isinstance(n, bool) or isinstance(k, bool) or not isinstance(n, int) or not isinstance(k, int):
        raise InvalidArgument(f"binom expects integers, got n={n!r}, k={k!r}")
    if n < 0 or k < 0:
        raise InvalidArgument(f"binom expects non-negative arguments, got n={n}, k={k}")
    if k > n:
        raise InvalidArgument(f"binom expects k <= n, got n={n}, k={k}")

    num = 1
    for i in range(k):
        num *= n - i
    denom = 1
    for i in range(2, k + 1):
        denom *= i
    return num // denom


def positional_value(digits: Sequence[int], base: int) -> int:
    """Interpret ``digits`` as a base-``base`` numeral, most significant first."""
    ret = 0
    for d in digits:
        ret = base * ret + d
    return ret


def rank_lower(values: Sequence[int]) -> int:
    """
    Lexicographic rank of a sequence of distinct values.

    Scanning from the last position backward, the number of later positions
    holding a smaller value is the coefficient of that position's factorial
    place value.
    """
    size = len(values)
    factorial = 1
    ret = 0
    for i in range(size - 1, -1, -1):
        low_count = 0
        for j in range(i + 1, size):
            if values[j] < values[i]:
                low_count += 1
        ret += low_count * factorial
        factorial *= size - i
    return ret


def rank_higher(values: Sequence[int]) -> int:
    """Same as ``rank_lower`` but counting later positions holding a *larger* value."""
    size = len(values)
    factorial = 1
    ret = 0
    for i in range(size - 1, -1, -1):
        high_count = 0
        for j in range(i + 1, size):
            if values[j] > values[i]:
                high_count += 1
        ret += high_count * factorial
        factorial *= size - i
    return ret


def permutation_parity(values: Sequence[int]) -> int:
    """Parity of a permutation: number of inversions modulo 2."""
    s = 0
    for i in range(len(values) - 1, 0, -1):
        for j in range(i - 1, -1, -1):
            if values[j] > values[i]:
                s += 1
    return s % 2
