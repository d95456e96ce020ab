"""Flood-fill exercises on two and three dimensional grids."""

from collections import deque
from collections.abc import Callable, Hashable, Iterable, Iterator, Sequence

_STEPS_2D = ((0, 1), (1, 0), (0, -1), (-1, 0))
_STEPS_3D = ((0, 0, 1), (0, 1, 0), (0, 0, -1), (0, -1, 0), (1, 0, 0), (-1, 0, 0))


def _neighbours(row: int, col: int, rows: int, cols: int) -> Iterator[tuple[int, int]]:
    for dr, dc in _STEPS_2D:
        r, c = row + dr, col + dc
        if 0 <= r < rows and 0 <= c < cols:
            yield r, c


def _region_sizes(
    rows: int,
    cols: int,
    label: Callable[[int, int], Hashable | None],
) -> list[int]:
    """Return the sizes of 4-connected regions of cells sharing a label.

    Cells labelled ``None`` belong to no region.
    """
    seen = [[False] * cols for _ in range(rows)]
    sizes = []
    for row in range(rows):
        for col in range(cols):
            if seen[row][col]:
                continue
            kind = label(row, col)
            if kind is None:
                continue
            seen[row][col] = True
            queue = deque([(row, col)])
            size = 0
            while queue:
                r, c = queue.popleft()
                size += 1
                for nr, nc in _neighbours(r, c, rows, cols):
                    if not seen[nr][nc] and label(nr, nc) == kind:
                        seen[nr][nc] = True
                        queue.append((nr, nc))
            sizes.append(size)
    return sizes


def count_cabbage_groups(
    width: int, height: int, positions: Iterable[tuple[int, int]]
) -> int:
    """Count the groups of adjacent cabbages in a ``width`` by ``height`` field.

    Positions are ``(x, y)`` pairs with ``x`` below ``width`` and ``y``
    below ``height``.
    """
    planted = set()
    for x, y in positions:
        if not (0 <= x < width and 0 <= y < height):
            raise ValueError(f"cabbage ({x}, {y}) lies outside the field")
        planted.add((y, x))
    return len(_region_sizes(height, width, lambda r, c: True if (r, c) in planted else None))


def paintings(board: Sequence[Sequence[int]]) -> tuple[int, int]:
    """Return the number of paintings (regions of 1) and the largest area."""
    rows = len(board)
    cols = len(board[0]) if rows else 0
    sizes = _region_sizes(rows, cols, lambda r, c: True if board[r][c] == 1 else None)
    return len(sizes), max(sizes, default=0)


def color_regions(board: Sequence[str]) -> tuple[int, int]:
    """Count colour regions as seen normally and with red-green colour blindness."""
    rows = len(board)
    cols = len(board[0]) if rows else 0
    if any(len(line) != cols for line in board):
        raise ValueError("all rows must have the same length")
    normal = _region_sizes(rows, cols, lambda r, c: board[r][c])
    blind = _region_sizes(
        rows, cols, lambda r, c: "R" if board[r][c] == "G" else board[r][c]
    )
    return len(normal), len(blind)


def ripen_tomatoes_3d(boxes: Sequence[Sequence[Sequence[int]]]) -> int:
    """Return the days until every tomato in stacked boxes is ripe.

    Cells hold 1 for a ripe tomato, 0 for an unripe one and -1 for an
    empty cell. Ripeness spreads to the six neighbours each day. The
    result is -1 when some tomato can never ripen.
    """
    state = [[list(row) for row in layer] for layer in boxes]
    height = len(state)
    rows = len(state[0]) if height else 0
    cols = len(state[0][0]) if rows else 0
    queue = deque(
        (h, r, c)
        for h in range(height)
        for r in range(rows)
        for c in range(cols)
        if state[h][r][c] == 1
    )
    days = 0
    while queue:
        h, r, c = queue.popleft()
        for dh, dr, dc in _STEPS_3D:
            nh, nr, nc = h + dh, r + dr, c + dc
            if not (0 <= nh < height and 0 <= nr < rows and 0 <= nc < cols):
                continue
            if state[nh][nr][nc] != 0:
                continue
            state[nh][nr][nc] = state[h][r][c] + 1
            days = max(days, state[nh][nr][nc] - 1)
            queue.append((nh, nr, nc))
    if any(cell == 0 for layer in state for row in layer for cell in row):
        return -1
    return days