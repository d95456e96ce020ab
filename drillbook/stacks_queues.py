"""Exercises on stacks, queues and double-ended queues."""

from collections import deque
from collections.abc import Iterable, Sequence


def stack_sequence(targets: Iterable[int]) -> list[str] | None:
    """Return the push/pop steps that produce ``targets`` from 1, 2, 3, ...

    Pushes are ``"+"`` and pops ``"-"``. ``None`` means the sequence
    cannot be produced with one stack.
    """
    steps: list[str] = []
    stack: list[int] = []
    next_number = 1
    for target in targets:
        while next_number <= target:
            stack.append(next_number)
            next_number += 1
            steps.append("+")
        if stack and stack[-1] == target:
            stack.pop()
            steps.append("-")
        else:
            return None
    return steps


def zero_sum(values: Iterable[int]) -> int:
    """Sum the numbers left after every 0 cancels the latest kept number."""
    kept: list[int] = []
    for value in values:
        if value == 0:
            if not kept:
                raise IndexError("0 given with no number to cancel")
            kept.pop()
        else:
            kept.append(value)
    return sum(kept)


def last_card(n: int) -> int:
    """Discard the top card, move the next to the bottom; return the last one."""
    if n < 1:
        raise ValueError("n must be at least 1")
    cards = deque(range(1, n + 1))
    while len(cards) > 1:
        cards.popleft()
        if len(cards) == 1:
            break
        cards.append(cards.popleft())
    return cards[0]


def rotating_queue_moves(n: int, picks: Sequence[int]) -> int:
    """Count the rotations needed to take ``picks`` in order from queue 1..n."""
    queue = deque(range(1, n + 1))
    moves = 0
    for pick in picks:
        try:
            index = queue.index(pick)
        except ValueError:
            raise ValueError(f"{pick} is not in the queue") from None
        if index <= len(queue) // 2:
            queue.rotate(-index)
            moves += index
        else:
            queue.rotate(len(queue) - index)
            moves += len(queue) - index
        queue.popleft()
    return moves


def _is_good_word(word: str) -> bool:
    stack: list[str] = []
    for letter in word:
        if letter not in "AB":
            break
        if stack and stack[-1] == letter:
            stack.pop()
        else:
            stack.append(letter)
    return not stack


def count_good_words(words: Iterable[str]) -> int:
    """Count words whose equal letters pair up with non-crossing arcs."""
    return sum(1 for word in words if _is_good_word(word))


_CLOSERS = {")": "(", "]": "["}


def is_balanced(line: str) -> bool:
    """Tell whether round and square brackets balance up to the first ``.``."""
    stack: list[str] = []
    for char in line:
        if char == ".":
            break
        if char in "([":
            stack.append(char)
        elif char in _CLOSERS:
            if not stack or stack[-1] != _CLOSERS[char]:
                return False
            stack.pop()
    return not stack