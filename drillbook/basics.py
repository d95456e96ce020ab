"""Warm-up exercises: loops, arithmetic checks and counting with tables."""

from collections import Counter
from collections.abc import Iterable, Sequence


def sum_multiples_of_3_or_5(n: int) -> int:
    """Sum every integer from 1 to ``n`` that is divisible by 3 or by 5."""
    return sum(i for i in range(1, n + 1) if i % 3 == 0 or i % 5 == 0)


def has_pair_summing_to_100(values: Sequence[int]) -> bool:
    """Tell whether two different entries of ``values`` add up to 100."""
    return any(
        first + second == 100
        for position, first in enumerate(values)
        for second in values[position + 1:]
    )


def is_perfect_square(n: int) -> bool:
    """Tell whether ``n`` is the square of an integer of at least 2."""
    root = 2
    while root * root <= n:
        if root * root == n:
            return True
        root += 1
    return False


def largest_power_of_two(n: int) -> int:
    """Return the largest power of two not above ``n`` (1 when ``n`` < 2)."""
    power = 1
    while power * 2 <= n:
        power *= 2
    return power


def first_two_chars(word: str) -> tuple[str, str]:
    """Return the first and second characters of ``word``."""
    if len(word) < 2:
        raise ValueError("word must have at least two characters")
    return word[0], word[1]


def count_pairs_with_sum(values: Iterable[int], target: int) -> int:
    """Count pairs of distinct entries whose sum is ``target``.

    Each pair is counted when its second member is met, so the input is
    expected to hold distinct values.
    """
    seen: Counter[int] = Counter()
    count = 0
    for value in values:
        if value > target:
            continue
        seen[value] += 1
        complement = target - value
        if complement == value:
            continue
        if seen[complement]:
            count += 1
    return count