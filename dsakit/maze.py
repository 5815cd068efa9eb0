"""Path finding in a grid maze: recursive and stack-based search, and BFS.

A maze is a grid of rows where ``0`` marks an open cell and any other
value marks a wall. Positions are ``(x, y)`` pairs with ``x`` the row and
``y`` the column.
"""

from __future__ import annotations

from collections import deque
from typing import NamedTuple, Optional, Sequence, Set, Tuple

Maze = Sequence[Sequence[int]]

# Up, down, left, right.
_DIRECTIONS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class Position(NamedTuple):
    """A cell of the maze, addressed by row ``x`` and column ``y``."""

    x: int
    y: int

    def neighbours(self):
        """Yield the four adjacent positions, in up, down, left, right order."""
        for dx, dy in _DIRECTIONS:
            yield Position(self.x + dx, self.y + dy)


def is_valid_move(maze: Maze, visited: Set[Tuple[int, int]], x: int, y: int) -> bool:
    """Return whether ``(x, y)`` is inside the maze, open, and not yet visited."""
    return (
        0 <= x < len(maze)
        and 0 <= y < len(maze[x])
        and not maze[x][y]
        and (x, y) not in visited
    )


def solve_maze_recursive(maze: Maze, start: Tuple[int, int], end: Tuple[int, int]) -> bool:
    """Return whether ``end`` can be reached from ``start`` by depth-first recursion."""
    target = Position(*end)
    visited: Set[Tuple[int, int]] = set()

    def solve(current: Position) -> bool:
        if current == target:
            return True
        if not is_valid_move(maze, visited, current.x, current.y):
            return False
        visited.add(current)
        return any(solve(step) for step in current.neighbours())

    return solve(Position(*start))


def solve_maze_stack(maze: Maze, start: Tuple[int, int], end: Tuple[int, int]) -> bool:
    """Return whether ``end`` can be reached from ``start`` using an explicit stack."""
    target = Position(*end)
    visited: Set[Tuple[int, int]] = set()
    stack = [Position(*start)]

    while stack:
        current = stack.pop()
        if current == target:
            return True
        for step in current.neighbours():
            if is_valid_move(maze, visited, step.x, step.y):
                stack.append(step)
                visited.add(step)

    return False


def shortest_distance(
    maze: Maze, start: Tuple[int, int], end: Tuple[int, int]
) -> Optional[int]:
    """Return the fewest steps from ``start`` to ``end``, or None if unreachable."""
    target = Position(*end)
    visited: Set[Tuple[int, int]] = set()
    queue = deque([(Position(*start), 0)])

    while queue:
        current, distance = queue.popleft()
        if current == target:
            return distance
        for step in current.neighbours():
            if is_valid_move(maze, visited, step.x, step.y):
                queue.append((step, distance + 1))
                visited.add(step)

    return None