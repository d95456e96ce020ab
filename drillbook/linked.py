"""Exercises on linked sequences: the Josephus circle and cursor editors."""

from collections import deque
from collections.abc import Iterable


def josephus(n: int, k: int) -> list[int]:
    """Return the order in which people 1..n leave a circle counting by ``k``."""
    if k < 1:
        raise ValueError("k must be at least 1")
    circle = deque(range(1, n + 1))
    order = []
    while circle:
        circle.rotate(-(k - 1))
        order.append(circle.popleft())
    return order


def format_josephus(order: Iterable[int]) -> str:
    """Render a removal order as ``<a, b, c>``."""
    return "<" + ", ".join(str(person) for person in order) + ">"


def keylogger(keys: str) -> str:
    """Replay keystrokes: ``<`` and ``>`` move the cursor, ``-`` deletes."""
    left: list[str] = []
    right: list[str] = []
    for key in keys:
        if key == "<":
            if left:
                right.append(left.pop())
        elif key == ">":
            if right:
                left.append(right.pop())
        elif key == "-":
            if left:
                left.pop()
        else:
            left.append(key)
    return "".join(left) + "".join(reversed(right))


def edit_text(text: str, commands: Iterable[str]) -> str:
    """Apply editor commands to ``text`` with the cursor starting at its end.

    Commands are ``L`` (left), ``D`` (right), ``B`` (delete before the
    cursor) and ``P x`` (insert ``x`` before the cursor).
    """
    left = list(text)
    right: list[str] = []
    for command in commands:
        op, _, argument = command.strip().partition(" ")
        if op == "L":
            if left:
                right.append(left.pop())
        elif op == "D":
            if right:
                left.append(right.pop())
        elif op == "B":
            if left:
                left.pop()
        elif op == "P":
            argument = argument.strip()
            if len(argument) != 1:
                raise ValueError(f"P needs exactly one character: {command!r}")
            left.append(argument)
        else:
            raise ValueError(f"unknown editor command: {command!r}")
    return "".join(left) + "".join(reversed(right))