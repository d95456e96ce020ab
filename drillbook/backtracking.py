"""Backtracking searches: subsets, schedules, eggs, bishops, princesses and queens."""

from collections import deque
from collections.abc import Sequence
from itertools import combinations

PRINCESS_BOARD_SIDE = 5
PRINCESS_GROUP_SIZE = 7
PRINCESS_MIN_S = 4


def count_subsequence_sums(values: Sequence[int], target: int) -> int:
    """Count the non-empty subsequences of ``values`` whose sum is ``target``."""
    return sum(
        1
        for size in range(1, len(values) + 1)
        for picked in combinations(values, size)
        if sum(picked) == target
    )


def max_consulting_profit(schedule: Sequence[tuple[int, int]]) -> int:
    """Return the best pay from consultations that all end before the last day passes.

    ``schedule`` lists ``(duration, pay)`` for each day, starting with day 1.
    A consultation taken on a day occupies ``duration`` days from that day.
    """
    days = len(schedule)
    for duration, _ in schedule:
        if duration < 1:
            raise ValueError("every consultation must last at least one day")
    best = [0] * (days + 1)
    for day in range(days - 1, -1, -1):
        duration, pay = schedule[day]
        skip = best[day + 1]
        finish = day + duration
        best[day] = max(skip, pay + best[finish]) if finish <= days else skip
    return best[0]


def max_broken_eggs(eggs: Sequence[tuple[int, int]]) -> int:
    """Return the most eggs that can be broken by hitting them in turn.

    ``eggs`` lists ``(durability, weight)`` pairs. Each egg, from left to
    right, if still whole, hits one other whole egg; each loses durability
    equal to the other's weight and breaks at zero or below.
    """
    durability = [strength for strength, _ in eggs]
    weights = [weight for _, weight in eggs]
    count = len(eggs)

    def hit(holding: int) -> int:
        if holding == count:
            return sum(1 for strength in durability if strength <= 0)
        if durability[holding] <= 0:
            return hit(holding + 1)
        best: int | None = None
        for target in range(count):
            if target == holding or durability[target] <= 0:
                continue
            durability[holding] -= weights[target]
            durability[target] -= weights[holding]
            result = hit(holding + 1)
            durability[holding] += weights[target]
            durability[target] += weights[holding]
            if best is None or result > best:
                best = result
        return hit(holding + 1) if best is None else best

    return hit(0)


def max_bishops(board: Sequence[Sequence[int]]) -> int:
    """Return the most bishops that fit on the ``1`` cells without attacking each other."""
    size = len(board)
    if any(len(row) != size for row in board):
        raise ValueError("the board must be square")
    diagonals = [
        [(r, k - r) for r in range(size - 1, -1, -1) if 0 <= k - r < size]
        for k in range(2 * size - 1)
    ]
    used: set[int] = set()

    def place(lines: list[list[tuple[int, int]]], index: int) -> int:
        if index == len(lines):
            return 0
        best: int | None = None
        for r, c in lines[index]:
            if not board[r][c] or r - c in used:
                continue
            used.add(r - c)
            result = 1 + place(lines, index + 1)
            used.discard(r - c)
            if best is None or result > best:
                best = result
        return place(lines, index + 1) if best is None else best

    # Bishops on cells of different colours never share a diagonal.
    return place(diagonals[0::2], 0) + place(diagonals[1::2], 0)


def _is_connected(cells: Sequence[int]) -> bool:
    members = set(cells)
    start = cells[0]
    seen = {start}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        row, col = divmod(cell, PRINCESS_BOARD_SIDE)
        for dr, dc in ((0, 1), (1, 0), (0, -1), (-1, 0)):
            r, c = row + dr, col + dc
            if not (0 <= r < PRINCESS_BOARD_SIDE and 0 <= c < PRINCESS_BOARD_SIDE):
                continue
            nxt = r * PRINCESS_BOARD_SIDE + c
            if nxt in members and nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    return len(seen) == len(members)


def seven_princesses(board: Sequence[str]) -> int:
    """Count groups of seven adjacent seats holding at least four ``S`` students.

    ``board`` is five rows of five characters, each ``S`` or ``Y``.
    """
    if len(board) != PRINCESS_BOARD_SIDE or any(
        len(row) != PRINCESS_BOARD_SIDE for row in board
    ):
        raise ValueError("the board must be 5 rows of 5 seats")
    if any(seat not in "SY" for row in board for seat in row):
        raise ValueError("seats must hold 'S' or 'Y'")
    is_s = [seat == "S" for row in board for seat in row]
    max_y = PRINCESS_GROUP_SIZE - PRINCESS_MIN_S
    chosen: list[int] = []

    def choose(first: int, y_count: int) -> int:
        if len(chosen) == PRINCESS_GROUP_SIZE:
            return 1 if _is_connected(chosen) else 0
        total = 0
        for cell in range(first, PRINCESS_BOARD_SIDE * PRINCESS_BOARD_SIDE):
            extra = 0 if is_s[cell] else 1
            if y_count + extra > max_y:
                continue
            chosen.append(cell)
            total += choose(cell + 1, y_count + extra)
            chosen.pop()
        return total

    return choose(0, 0)


def n_queens(n: int) -> int:
    """Count the ways to place ``n`` non-attacking queens on an ``n`` by ``n`` board."""
    if n < 0:
        raise ValueError("n must not be negative")
    columns: set[int] = set()
    rising: set[int] = set()
    falling: set[int] = set()

    def place(row: int) -> int:
        if row == n:
            return 1
        total = 0
        for col in range(n):
            if col in columns or row + col in rising or row - col in falling:
                continue
            columns.add(col)
            rising.add(row + col)
            falling.add(row - col)
            total += place(row + 1)
            columns.discard(col)
            rising.discard(row + col)
            falling.discard(row - col)
        return total

    return place(0)