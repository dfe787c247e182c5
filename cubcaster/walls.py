"""Map grid validation: the map must be closed by walls."""

from __future__ import annotations

from collections.abc import Sequence

_MAP_CELLS = frozenset("10NSWE")
_SPACE_NEIGHBOURS = frozenset("\t 1")
_WALL_ROW_CELLS = frozenset("1 \t")


def acceptable_char(c: str) -> bool:
    """True for a floor, wall or player cell."""
    return c in _MAP_CELLS


def _cell(rows: Sequence[str], row: int, col: int) -> str:
    """Return the cell at (row, col), or '' when it lies outside the grid."""
    if 0 <= row < len(rows) and 0 <= col < len(rows[row]):
        return rows[row][col]
    return ""


def space(rows: Sequence[str], x: int, y: int) -> bool:
    """Check that a space at row x, column y touches only walls or spaces."""
    neighbours = []
    if x >= 1:
        neighbours.append(_cell(rows, x - 1, y))
    if y >= 1:
        neighbours.append(_cell(rows, x, y - 1))
    neighbours.append(_cell(rows, x, y + 1))
    neighbours.append(_cell(rows, x + 1, y))
    return all(not ch or ch in _SPACE_NEIGHBOURS for ch in neighbours)


def zero(rows: Sequence[str], x: int, y: int) -> bool:
    """Check that a floor cell at row x, column y is enclosed."""
    if x == 0 or not acceptable_char(_cell(rows, x - 1, y)):
        return False
    if y == 0:
        return False
    if not acceptable_char(_cell(rows, x, y - 1)):
        return False
    if y + 1 >= len(rows[x]) and not acceptable_char(_cell(rows, x, y + 1)):
        return False
    if x + 1 >= len(rows) and not acceptable_char(_cell(rows, x + 1, y)):
        return False
    return True


def _is_wall_row(row: str) -> bool:
    return all(ch in _WALL_ROW_CELLS for ch in row)


def wall_outline(rows: Sequence[str]) -> bool:
    """True when the map's first and last rows are walls and no floor leaks out."""
    if not rows:
        return False
    if not _is_wall_row(rows[0]):
        return False
    last = len(rows) - 1
    for x in range(1, last):
        for y, ch in enumerate(rows[x]):
            if ch == " " and not space(rows, x, y):
                return False
            if ch == "0" and not zero(rows, x, y):
                return False
    return last == 0 or _is_wall_row(rows[last])


def map_height(rows: Sequence[str]) -> int:
    """Number of rows in the map."""
    return len(rows)


def map_width(rows: Sequence[str]) -> int:
    """Length of the longest row in the map."""
    return max((len(row) for row in rows), default=0)