"""Shortest-path searches on lines, buildings and chess boards."""

from collections import deque

POSITION_LIMIT = 100_000

_KNIGHT_STEPS = ((1, -2), (2, -1), (2, 1), (1, 2), (-1, 2), (-2, 1), (-2, -1), (-1, -2))


def hide_and_seek(n: int, k: int) -> int:
    """Return the fewest seconds to walk from ``n`` to ``k``.

    Each second the walker moves one step left or right, or jumps to
    twice the position. Positions stay within 0..100000.
    """
    for value in (n, k):
        if not 0 <= value <= POSITION_LIMIT:
            raise ValueError(f"position {value} is outside 0..{POSITION_LIMIT}")
    if n == k:
        return 0
    distance = {n: 0}
    queue = deque([n])
    while queue:
        current = queue.popleft()
        for nxt in (current - 1, current + 1, current * 2):
            if not 0 <= nxt <= POSITION_LIMIT:
                continue
            if nxt == k:
                return distance[current] + 1
            if nxt in distance:
                continue
            distance[nxt] = distance[current] + 1
            queue.append(nxt)
    raise RuntimeError(f"position {k} could not be reached from {n}")


def start_link(floors: int, start: int, goal: int, up: int, down: int) -> int | None:
    """Return the fewest button presses to go from ``start`` to ``goal``.

    The lift has ``floors`` floors numbered from 1 and two buttons that
    move ``up`` floors up or ``down`` floors down. ``None`` means the goal
    cannot be reached and the stairs are needed.
    """
    for floor in (start, goal):
        if not 1 <= floor <= floors:
            raise ValueError(f"floor {floor} is outside 1..{floors}")
    if start == goal:
        return 0
    presses = {start: 0}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for nxt in (current + up, current - down):
            if not 1 <= nxt <= floors or nxt in presses:
                continue
            presses[nxt] = presses[current] + 1
            queue.append(nxt)
    return presses.get(goal)


def knight_moves(
    size: int, start: tuple[int, int], goal: tuple[int, int]
) -> int | None:
    """Return the fewest knight moves from ``start`` to ``goal`` on a square board.

    Squares are ``(x, y)`` pairs in ``0..size-1``. ``None`` means the goal
    cannot be reached.
    """
    for x, y in (start, goal):
        if not (0 <= x < size and 0 <= y < size):
            raise ValueError(f"square ({x}, {y}) is off a board of size {size}")
    moves = {start: 0}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        if current == goal:
            break
        x, y = current
        for dx, dy in _KNIGHT_STEPS:
            nxt = (x + dx, y + dy)
            if nxt in moves or not (0 <= nxt[0] < size and 0 <= nxt[1] < size):
                continue
            moves[nxt] = moves[current] + 1
            queue.append(nxt)
    return moves.get(goal)