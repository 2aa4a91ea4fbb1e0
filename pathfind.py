"""Single-source shortest paths over the carved passages of a maze board.

Every passage has unit cost. The queue holds ``(distance, cell)`` entries; an
entry is pushed each time a cell's distance improves and stale entries are
skipped when popped, so no decrease-key is needed.
"""

from __future__ import annotations

import heapq
from typing import Iterator, List, Optional, Tuple

from errors import InvalidBoard, InvalidSource
from grid import (
    DIRECTIONS,
    BoardLike,
    BoardPos,
    CellId,
    board_to_cell,
    cell_dimensions,
    cell_to_board,
    is_cell_center,
    is_cell_open,
    is_open,
    neighbour,
    wall_between,
)


class DistanceTable:
    """Per-cell distances from one source. ``None`` marks an unreached cell."""

    def __init__(self, source: CellId, distances: List[List[Optional[int]]]):
        self.source = source
        self._distances = distances

    @property
    def width(self) -> int:
        return len(self._distances[0]) if self._distances else 0

    @property
    def height(self) -> int:
        return len(self._distances)

    def at(self, cell: CellId) -> Optional[int]:
        return self._distances[cell.y][cell.x]

    def at_board(self, pos: BoardPos) -> Optional[int]:
        return self.at(board_to_cell(pos))

    def rows(self) -> List[List[Optional[int]]]:
        return [list(row) for row in self._distances]

    def cells(self) -> Iterator[Tuple[CellId, Optional[int]]]:
        for y, row in enumerate(self._distances):
            for x, dist in enumerate(row):
                yield CellId(x, y), dist

    def reached_count(self) -> int:
        return sum(1 for _, dist in self.cells() if dist is not None)

    def farthest(self) -> Tuple[CellId, int]:
        """Reached cell with the largest distance; first in row-major order on ties."""
        best_cell, best = self.source, 0
        for cell, dist in self.cells():
            if dist is not None and dist > best:
                best_cell, best = cell, dist
        return best_cell, best


def _check_board(board: BoardLike) -> None:
    if not board or not board[0]:
        raise InvalidBoard("Board is empty")
    if len(board) % 2 != 1 or len(board[0]) % 2 != 1:
        raise InvalidBoard(
            f"Invalid board dimensions {len(board[0])}x{len(board)}. "
            "Are you sure this is a generated maze?"
        )
    width = len(board[0])
    for y, row in enumerate(board):
        if len(row) != width:
            raise InvalidBoard(f"Row {y} has width {len(row)}, expected {width}")


def reachable_neighbours(board: BoardLike, cell: CellId) -> List[CellId]:
    """Cells adjacent to ``cell`` joined to it by an open passage."""
    width, height = cell_dimensions(board)
    result = []
    for direction in DIRECTIONS:
        other = neighbour(cell, direction)
        if not (0 <= other.x < width and 0 <= other.y < height):
            continue
        if is_open(board, wall_between(cell, other)) and is_cell_open(board, cell_to_board(other)):
            result.append(other)
    return result


def shortest_paths(board: BoardLike, source: BoardPos) -> DistanceTable:
    """Distance from ``source`` to every cell of ``board``.

    Raises:
        InvalidBoard: the board is empty, ragged, or not odd in both axes.
        InvalidSource: ``source`` is not a cell centre on the board.
    """
    _check_board(board)
    source = BoardPos(*source)
    if not is_cell_center(source):
        raise InvalidSource(f'Source point {tuple(source)} is not a "cell" (2m+1, 2n+1 form)')
    width, height = cell_dimensions(board)
    src = board_to_cell(source)
    if not (0 <= src.x < width and 0 <= src.y < height):
        raise InvalidSource(f"Source point {tuple(source)} is outside the board")

    distances: List[List[Optional[int]]] = [[None] * width for _ in range(height)]
    distances[src.y][src.x] = 0
    queue: List[Tuple[int, CellId]] = [(0, src)]

    while queue:
        dist, current = heapq.heappop(queue)
        if dist != distances[current.y][current.x]:
            continue  # stale
        for other in reachable_neighbours(board, current):
            new_dist = dist + 1
            known = distances[other.y][other.x]
            if known is None or new_dist < known:
                distances[other.y][other.x] = new_dist
                heapq.heappush(queue, (new_dist, other))

    return DistanceTable(src, distances)


def distance_between(board: BoardLike, a: BoardPos, b: BoardPos) -> Optional[int]:
    return shortest_paths(board, a).at_board(BoardPos(*b))


def all_reached(table: DistanceTable) -> bool:
    return table.reached_count() == table.width * table.height
