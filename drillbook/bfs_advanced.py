"""Breadth-first search exercises that combine several searches or layers."""

from collections import deque
from collections.abc import Iterable, Iterator, Sequence

from drillbook.bfs_grid import _region_sizes

RAIN_LIMIT = 100

_STEPS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def _dimensions(board: Sequence[Sequence[object]]) -> tuple[int, int]:
    rows = len(board)
    cols = len(board[0]) if rows else 0
    if any(len(line) != cols for line in board):
        raise ValueError("all rows must have the same length")
    return rows, cols


def _neighbours(row: int, col: int, rows: int, cols: int) -> Iterator[tuple[int, int]]:
    for dr, dc in _STEPS:
        r, c = row + dr, col + dc
        if 0 <= r < rows and 0 <= c < cols:
            yield r, c


def _label_islands(board: Sequence[Sequence[int]], rows: int, cols: int) -> list[list[int]]:
    """Give every land cell the number of its island (from 1); water stays 0."""
    labels = [[0] * cols for _ in range(rows)]
    island = 0
    for row in range(rows):
        for col in range(cols):
            if board[row][col] == 0 or labels[row][col]:
                continue
            island += 1
            labels[row][col] = island
            queue = deque([(row, col)])
            while queue:
                r, c = queue.popleft()
                for nr, nc in _neighbours(r, c, rows, cols):
                    if board[nr][nc] != 0 and not labels[nr][nc]:
                        labels[nr][nc] = island
                        queue.append((nr, nc))
    return labels


def shortest_bridge(board: Sequence[Sequence[int]]) -> int:
    """Return the fewest water cells a bridge needs to join two islands.

    Land cells are non-zero and water cells are 0. At least two islands
    are required.
    """
    rows, cols = _dimensions(board)
    labels = _label_islands(board, rows, cols)
    islands = max((max(line) for line in labels), default=0)
    if islands < 2:
        raise ValueError("the board needs at least two islands")
    best: int | None = None
    for island in range(1, islands + 1):
        start = [
            (r, c) for r in range(rows) for c in range(cols) if labels[r][c] == island
        ]
        distance = {cell: 0 for cell in start}
        queue = deque(start)
        found: int | None = None
        while queue and found is None:
            r, c = queue.popleft()
            for nr, nc in _neighbours(r, c, rows, cols):
                other = labels[nr][nc]
                if other and other != island:
                    found = distance[(r, c)]
                    break
                if other or (nr, nc) in distance:
                    continue
                distance[(nr, nc)] = distance[(r, c)] + 1
                queue.append((nr, nc))
        if found is not None and (best is None or found < best):
            best = found
    assert best is not None
    return best


def break_wall_path(board: Sequence[str]) -> int | None:
    """Return the length of the shortest path from the top-left to the bottom-right.

    Cells are ``"0"`` (open) or ``"1"`` (wall), and at most one wall may be
    broken on the way. The length counts both end cells. ``None`` means no
    such path exists.
    """
    rows, cols = _dimensions(board)
    if rows == 0 or cols == 0:
        raise ValueError("the board must not be empty")
    goal = (rows - 1, cols - 1)
    start = (0, 0, False)
    distance = {start: 1}
    queue = deque([start])
    while queue:
        r, c, broken = queue.popleft()
        if (r, c) == goal:
            return distance[(r, c, broken)]
        for nr, nc in _neighbours(r, c, rows, cols):
            if board[nr][nc] == "1":
                if broken:
                    continue
                state = (nr, nc, True)
            else:
                state = (nr, nc, broken)
            if state in distance:
                continue
            distance[state] = distance[(r, c, broken)] + 1
            queue.append(state)
    return None


def safe_areas(heights: Sequence[Sequence[int]]) -> int:
    """Return the most separate dry regions over rain levels 0 to 100.

    At rain level ``r`` every cell of height ``r`` or less is flooded.
    """
    rows, cols = _dimensions(heights)
    return max(
        len(
            _region_sizes(
                rows, cols, lambda r, c, level=level: True if heights[r][c] > level else None
            )
        )
        for level in range(RAIN_LIMIT + 1)
    )


def separated_areas(
    rows: int, cols: int, rectangles: Iterable[tuple[int, int, int, int]]
) -> list[int]:
    """Return the sizes, ascending, of the regions left uncovered by rectangles.

    Each rectangle ``(x1, y1, x2, y2)`` covers the cells with ``x1 <= x < x2``
    and ``y1 <= y < y2``, where ``x`` counts columns and ``y`` counts rows.
    """
    covered: set[tuple[int, int]] = set()
    for x1, y1, x2, y2 in rectangles:
        if not (0 <= x1 <= x2 <= cols and 0 <= y1 <= y2 <= rows):
            raise ValueError(f"rectangle {(x1, y1, x2, y2)} lies outside the paper")
        covered.update((y, x) for y in range(y1, y2) for x in range(x1, x2))
    sizes = _region_sizes(rows, cols, lambda r, c: None if (r, c) in covered else True)
    return sorted(sizes)


def housing_complexes(board: Sequence[str]) -> list[int]:
    """Return the house counts, ascending, of each complex of adjacent ``"1"`` cells."""
    rows, cols = _dimensions(board)
    return sorted(_region_sizes(rows, cols, lambda r, c: True if board[r][c] == "1" else None))


def escape_fire(board: Sequence[str]) -> int | None:
    """Return the fewest moves for ``@`` to leave the building before the fire.

    ``#`` is a wall, ``*`` is fire and ``.`` is open floor. Fire spreads to
    every neighbouring non-wall cell each move, and a cell that fire
    reaches at the same time or sooner cannot be entered. ``None`` means
    escape is impossible.
    """
    rows, cols = _dimensions(board)
    starts = [(r, c) for r in range(rows) for c in range(cols) if board[r][c] == "@"]
    if len(starts) != 1:
        raise ValueError("the board must hold exactly one '@'")

    fire = {
        (r, c): 0 for r in range(rows) for c in range(cols) if board[r][c] == "*"
    }
    queue = deque(fire)
    while queue:
        r, c = queue.popleft()
        for nr, nc in _neighbours(r, c, rows, cols):
            if (nr, nc) in fire or board[nr][nc] == "#":
                continue
            fire[(nr, nc)] = fire[(r, c)] + 1
            queue.append((nr, nc))

    start = starts[0]
    moves = {start: 0}
    queue = deque([start])
    while queue:
        r, c = queue.popleft()
        step = moves[(r, c)] + 1
        for dr, dc in _STEPS:
            nr, nc = r + dr, c + dc
            if not (0 <= nr < rows and 0 <= nc < cols):
                return step
            if (nr, nc) in moves or board[nr][nc] == "#":
                continue
            fire_time = fire.get((nr, nc))
            if fire_time is not None and step >= fire_time:
                continue
            moves[(nr, nc)] = step
            queue.append((nr, nc))
    return None