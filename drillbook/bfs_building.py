"""Shortest escape from a three-dimensional building."""

from collections import deque
from collections.abc import Sequence

_STEPS_3D = ((0, 0, 1), (0, 1, 0), (0, 0, -1), (0, -1, 0), (1, 0, 0), (-1, 0, 0))


def escape_building(levels: Sequence[Sequence[str]]) -> int | None:
    """Return the fewest minutes to walk from ``S`` to ``E``.

    ``levels`` lists the floors of the building, each a list of rows.
    ``#`` is rock and every other cell is open. Each minute the walker
    moves north, south, east, west, up or down one cell. ``None`` means
    the walker is trapped.
    """
    depth = len(levels)
    rows = len(levels[0]) if depth else 0
    cols = len(levels[0][0]) if rows else 0
    if any(len(level) != rows for level in levels) or any(
        len(line) != cols for level in levels for line in level
    ):
        raise ValueError("all levels must have the same shape")

    def cells_holding(mark: str) -> list[tuple[int, int, int]]:
        return [
            (z, x, y)
            for z, level in enumerate(levels)
            for x, line in enumerate(level)
            for y, char in enumerate(line)
            if char == mark
        ]

    starts = cells_holding("S")
    exits = cells_holding("E")
    if len(starts) != 1 or len(exits) != 1:
        raise ValueError("the building needs exactly one 'S' and one 'E'")
    start, goal = starts[0], exits[0]

    minutes = {start: 0}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        z, x, y = current
        for dz, dx, dy in _STEPS_3D:
            nz, nx, ny = z + dz, x + dx, y + dy
            if not (0 <= nz < depth and 0 <= nx < rows and 0 <= ny < cols):
                continue
            nxt = (nz, nx, ny)
            if nxt in minutes or levels[nz][nx][ny] == "#":
                continue
            if nxt == goal:
                return minutes[current] + 1
            minutes[nxt] = minutes[current] + 1
            queue.append(nxt)
    return None


def describe_escape(minutes: int | None) -> str:
    """Render the result of :func:`escape_building` as a sentence."""
    if minutes is None:
        return "Trapped!"
    return f"Escaped in {minutes} minute(s)."