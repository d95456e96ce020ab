"""Divide-and-conquer and recursive drawing exercises."""

from collections import Counter
from collections.abc import Hashable, Iterator, Sequence

_OPENING = "어느 한 컴퓨터공학과 학생이 유명한 교수님을 찾아가 물었다."
_QUESTION = '"재귀함수가 뭔가요?"'
_TALE = (
    '"잘 들어보게. 옛날옛날 한 산 꼭대기에 이세상 모든 지식을 통달한 선인이 있었어.',
    "마을 사람들은 모두 그 선인에게 수많은 질문을 했고, 모두 지혜롭게 대답해 주었지.",
    '그의 답은 대부분 옳았다고 하네. 그런데 어느 날, 그 선인에게 한 선비가 찾아와서 물었어."',
)
_ANSWER = '"재귀함수는 자기 자신을 호출하는 함수라네"'
_CLOSING = "라고 답변하였지."


def _is_power(n: int, base: int) -> bool:
    if n < 1:
        return False
    while n % base == 0:
        n //= base
    return n == 1


def _square_size(grid: Sequence[Sequence[object]]) -> int:
    size = len(grid)
    if size == 0:
        raise ValueError("the grid must not be empty")
    if any(len(row) != size for row in grid):
        raise ValueError("the grid must be square")
    return size


def _uniform_blocks(grid: Sequence[Sequence[Hashable]], factor: int) -> Iterator[Hashable]:
    """Split the grid into ``factor`` x ``factor`` parts until each is uniform.

    Yields the value of every uniform block.
    """
    size = _square_size(grid)
    if not _is_power(size, factor):
        raise ValueError(f"the side {size} is not a power of {factor}")

    def split(row: int, col: int, span: int) -> Iterator[Hashable]:
        first = grid[row][col]
        if all(
            grid[r][c] == first
            for r in range(row, row + span)
            for c in range(col, col + span)
        ):
            yield first
            return
        part = span // factor
        for dr in range(factor):
            for dc in range(factor):
                yield from split(row + dr * part, col + dc * part, part)

    yield from split(0, 0, size)


def mod_pow(a: int, b: int, m: int) -> int:
    """Return ``a`` to the power ``b`` modulo ``m`` for ``b`` of at least 1."""
    if b < 1:
        raise ValueError("the exponent must be at least 1")
    if m < 1:
        raise ValueError("the modulus must be at least 1")
    return pow(a, b, m)


def z_order(n: int, r: int, c: int) -> int:
    """Return the visiting order of cell ``(r, c)`` in a Z-shaped walk of a 2**n grid."""
    if n < 0:
        raise ValueError("n must not be negative")
    side = 1 << n
    if not (0 <= r < side and 0 <= c < side):
        raise ValueError(f"cell ({r}, {c}) lies outside a grid of side {side}")
    index = 0
    for level in range(n - 1, -1, -1):
        half = 1 << level
        quadrant = 2 * (r >= half) + (c >= half)
        index += quadrant * half * half
        r %= half
        c %= half
    return index


def hanoi_moves(n: int) -> list[tuple[int, int]]:
    """Return the moves that carry ``n`` disks from peg 1 to peg 3."""
    if n < 0:
        raise ValueError("the number of disks must not be negative")
    moves: list[tuple[int, int]] = []

    def carry(count: int, source: int, target: int) -> None:
        if count == 0:
            return
        spare = 6 - source - target
        carry(count - 1, source, spare)
        moves.append((source, target))
        carry(count - 1, spare, target)

    carry(n, 1, 3)
    return moves


def philosopher_walk(side: int, step: int) -> tuple[int, int]:
    """Return where the walker stands after ``step`` steps on a Hilbert walk.

    ``side`` is a power of two and coordinates count from 1.
    """
    if not _is_power(side, 2):
        raise ValueError(f"the side {side} is not a power of two")
    if not 1 <= step <= side * side:
        raise ValueError(f"step {step} is outside 1..{side * side}")

    def locate(size: int, value: int) -> tuple[int, int]:
        if size == 1:
            return 1, 1
        half = size // 2
        quadrant, offset = divmod(value - 1, half * half)
        x, y = locate(half, offset + 1)
        if quadrant == 0:
            return y, x
        if quadrant == 1:
            return x, half + y
        if quadrant == 2:
            return half + x, half + y
        return 2 * half - y + 1, half - x + 1

    return locate(side, step)


def recursion_story(n: int) -> str:
    """Return the nested story about recursion told ``n`` levels deep."""
    if n < 0:
        raise ValueError("n must not be negative")
    lines = [_OPENING]
    for depth in range(n):
        indent = "____" * depth
        lines.append(indent + _QUESTION)
        lines.extend(indent + sentence for sentence in _TALE)
    indent = "____" * n
    lines.extend(indent + text for text in (_QUESTION, _ANSWER, _CLOSING))
    lines.extend("____" * depth + _CLOSING for depth in range(n - 1, -1, -1))
    return "\n".join(lines) + "\n"


def count_papers(grid: Sequence[Sequence[int]]) -> tuple[int, int, int]:
    """Count the uniform pieces of -1, 0 and 1 when cutting a 3**k grid in nine."""
    if any(value not in (-1, 0, 1) for row in grid for value in row):
        raise ValueError("cells must hold -1, 0 or 1")
    counts = Counter(_uniform_blocks(grid, 3))
    return counts[-1], counts[0], counts[1]


def quad_tree(board: Sequence[str]) -> str:
    """Compress a square board of ``0`` and ``1`` into quad-tree notation."""
    size = _square_size(board)
    if not _is_power(size, 2):
        raise ValueError(f"the side {size} is not a power of two")

    def encode(row: int, col: int, span: int) -> str:
        first = board[row][col]
        if all(
            board[r][c] == first
            for r in range(row, row + span)
            for c in range(col, col + span)
        ):
            return first
        half = span // 2
        parts = (
            encode(row + dr, col + dc, half)
            for dr in (0, half)
            for dc in (0, half)
        )
        return "(" + "".join(parts) + ")"

    return encode(0, 0, size)


def star_pattern(n: int) -> list[str]:
    """Draw the recursive square star pattern of side ``n`` (a power of 3)."""
    if n < 3 or not _is_power(n, 3):
        raise ValueError(f"{n} is not a power of 3 of at least 3")

    def build(size: int) -> list[str]:
        if size == 1:
            return ["*"]
        part = build(size // 3)
        blank = " " * (size // 3)
        rows = []
        for band in range(3):
            for line in part:
                middle = blank if band == 1 else line
                rows.append(line + middle + line)
        return rows

    return build(n)


def triangle_stars(n: int) -> list[str]:
    """Draw the recursive star triangle of height ``n`` (3 times a power of 2).

    Every line is ``2 * n`` characters wide.
    """
    if n < 3 or n % 3 or not _is_power(n // 3, 2):
        raise ValueError(f"{n} is not 3 times a power of two")

    def build(size: int) -> list[str]:
        if size == 3:
            return ["  *  ", " * * ", "*****"]
        part = build(size // 2)
        pad = " " * (size // 2)
        top = [pad + line + pad for line in part]
        bottom = [line + " " + line for line in part]
        return top + bottom

    return [line + " " for line in build(n)]


def color_paper(grid: Sequence[Sequence[int]]) -> tuple[int, int]:
    """Count the white (0) and blue (1) squares when cutting a 2**k grid in four."""
    if any(value not in (0, 1) for row in grid for value in row):
        raise ValueError("cells must hold 0 or 1")
    counts = Counter(_uniform_blocks(grid, 2))
    return counts[0], counts[1]


def count_sums_123(n: int) -> int:
    """Count the ordered ways to write ``n`` as a sum of 1, 2 and 3."""
    if n < 0:
        raise ValueError("n must not be negative")
    ways = [1, 1, 2]
    while len(ways) <= n:
        ways.append(ways[-1] + ways[-2] + ways[-3])
    return ways[n]