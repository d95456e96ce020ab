"""Sequences of length ``m`` chosen from numbers or letters by backtracking.

Every function returns its sequences in lexicographic order of the
sorted pool, as the exercises print them.
"""

from collections import Counter
from collections.abc import Iterable, Iterator, Sequence
from itertools import combinations, combinations_with_replacement, permutations, product

LOTTO_SIZE = 6
VOWELS = frozenset("aeiou")


def _check_length(m: int) -> None:
    if m < 0:
        raise ValueError("the sequence length must not be negative")


def _position_walk(
    pool: Sequence, m: int, *, reuse: bool, nondecreasing: bool
) -> Iterator[tuple]:
    """Pick ``m`` entries of ``pool`` by position, in position order.

    Without ``reuse`` a position is taken at most once; with
    ``nondecreasing`` no entry may be smaller than the one before it.
    """
    used = [False] * len(pool)
    chosen: list = []

    def walk() -> Iterator[tuple]:
        if len(chosen) == m:
            yield tuple(chosen)
            return
        for position, value in enumerate(pool):
            if not reuse and used[position]:
                continue
            if nondecreasing and chosen and chosen[-1] > value:
                continue
            used[position] = True
            chosen.append(value)
            yield from walk()
            chosen.pop()
            used[position] = False

    yield from walk()


def _multiset_walk(
    values: Iterable[int], m: int, *, reuse: bool, nondecreasing: bool
) -> Iterator[tuple[int, ...]]:
    """Yield each distinct sequence of ``m`` values once.

    Without ``reuse`` a value appears no more often than in ``values``.
    """
    counts = Counter(values)
    keys = sorted(counts)
    chosen: list[int] = []

    def walk(first: int) -> Iterator[tuple[int, ...]]:
        if len(chosen) == m:
            yield tuple(chosen)
            return
        for index in range(first, len(keys)):
            key = keys[index]
            if not reuse and counts[key] == 0:
                continue
            counts[key] -= 1
            chosen.append(key)
            yield from walk(index if nondecreasing else 0)
            chosen.pop()
            counts[key] += 1

    yield from walk(0)


def permutations_of_range(n: int, m: int) -> list[tuple[int, ...]]:
    """Sequences of ``m`` different numbers from 1..n."""
    _check_length(m)
    return list(permutations(range(1, n + 1), m))


def combinations_of_range(n: int, m: int) -> list[tuple[int, ...]]:
    """Increasing sequences of ``m`` numbers from 1..n."""
    _check_length(m)
    return list(combinations(range(1, n + 1), m))


def products_of_range(n: int, m: int) -> list[tuple[int, ...]]:
    """Sequences of ``m`` numbers from 1..n, repeats allowed."""
    _check_length(m)
    return list(product(range(1, n + 1), repeat=m))


def nondecreasing_of_range(n: int, m: int) -> list[tuple[int, ...]]:
    """Non-decreasing sequences of ``m`` numbers from 1..n."""
    _check_length(m)
    return list(combinations_with_replacement(range(1, n + 1), m))


def permutations_of(values: Iterable[int], m: int) -> list[tuple[int, ...]]:
    """Sequences of ``m`` entries of ``values``, each entry used once."""
    _check_length(m)
    return list(permutations(sorted(values), m))


def combinations_of(values: Iterable[int], m: int) -> list[tuple[int, ...]]:
    """Non-decreasing sequences of ``m`` entries of ``values``, each entry used once."""
    _check_length(m)
    return list(_position_walk(sorted(values), m, reuse=False, nondecreasing=True))


def products_of(values: Iterable[int], m: int) -> list[tuple[int, ...]]:
    """Sequences of ``m`` entries of ``values``, entries used any number of times."""
    _check_length(m)
    return list(product(sorted(values), repeat=m))


def nondecreasing_of(values: Iterable[int], m: int) -> list[tuple[int, ...]]:
    """Non-decreasing sequences of ``m`` entries of ``values``, repeats allowed."""
    _check_length(m)
    return list(_position_walk(sorted(values), m, reuse=True, nondecreasing=True))


def distinct_permutations(values: Iterable[int], m: int) -> list[tuple[int, ...]]:
    """Distinct sequences of ``m`` entries of ``values``, each entry used once."""
    _check_length(m)
    return list(_multiset_walk(values, m, reuse=False, nondecreasing=False))


def distinct_combinations(values: Iterable[int], m: int) -> list[tuple[int, ...]]:
    """Distinct non-decreasing sequences of ``m`` entries, each entry used once."""
    _check_length(m)
    return list(_multiset_walk(values, m, reuse=False, nondecreasing=True))


def distinct_products(values: Iterable[int], m: int) -> list[tuple[int, ...]]:
    """Distinct sequences of ``m`` values from ``values``, repeats allowed."""
    _check_length(m)
    return list(_multiset_walk(values, m, reuse=True, nondecreasing=False))


def distinct_nondecreasing(values: Iterable[int], m: int) -> list[tuple[int, ...]]:
    """Distinct non-decreasing sequences of ``m`` values from ``values``."""
    _check_length(m)
    return list(_multiset_walk(values, m, reuse=True, nondecreasing=True))


def lotto(values: Sequence[int]) -> list[tuple[int, ...]]:
    """Non-decreasing picks of six entries of ``values``, in the order given."""
    return list(_position_walk(list(values), LOTTO_SIZE, reuse=False, nondecreasing=True))


def passwords(length: int, letters: Iterable[str]) -> list[str]:
    """Passwords of ``length`` ascending letters with a vowel and two consonants."""
    _check_length(length)
    pool = sorted(letters)
    found = []
    for picked in _position_walk(pool, length, reuse=False, nondecreasing=True):
        vowels = sum(1 for letter in picked if letter in VOWELS)
        if vowels == 0 or length - vowels < 2:
            continue
        found.append("".join(picked))
    return found