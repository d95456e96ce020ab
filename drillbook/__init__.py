"""Solutions to classic algorithm drills: stacks, queues, BFS, recursion and backtracking."""

__version__ = "0.1.0"