"""Choose the start and end of a generated maze.

The carved passages form a tree, so the distance between two cells is the
length of their unique path. Two strategies find a pair at maximum distance:

* ``double_sweep``: run the path finder from any cell, take the farthest cell
  ``A``, run again from ``A`` and take the farthest cell ``B``.
* ``dead_ends``: run the path finder from every candidate cell recorded during
  generation and keep the farthest pair seen.

Both give the exact diameter on a tree; the first needs two runs in total.
"""

from __future__ import annotations

from typing import NamedTuple, Sequence

from errors import MazeError
from grid import Board, BoardLike, CellId, Tile, cell_to_board
from pathfind import shortest_paths

DOUBLE_SWEEP = "double_sweep"
DEAD_ENDS = "dead_ends"
STRATEGIES = (DOUBLE_SWEEP, DEAD_ENDS)


class Endpoints(NamedTuple):
    start: CellId
    end: CellId
    distance: int


def _double_sweep(board: BoardLike, candidates: Sequence[CellId]) -> Endpoints:
    first, _ = shortest_paths(board, cell_to_board(candidates[0])).farthest()
    second, distance = shortest_paths(board, cell_to_board(first)).farthest()
    return Endpoints(first, second, distance)


def _every_dead_end(board: BoardLike, candidates: Sequence[CellId]) -> Endpoints:
    best = Endpoints(candidates[0], candidates[0], -1)
    for source in candidates:
        target, longest = shortest_paths(board, cell_to_board(source)).farthest()
        if longest > best.distance:
            best = Endpoints(source, target, longest)
    return best


def select_endpoints(board: BoardLike, candidates: Sequence[CellId],
                     strategy: str = DOUBLE_SWEEP) -> Endpoints:
    """Pick the two cells with the largest path distance between them.

    ``candidates`` must not be empty. ``double_sweep`` only uses its first
    entry as the starting point of the first sweep.
    """
    if not candidates:
        raise ValueError("at least one candidate cell is required")
    if strategy == DOUBLE_SWEEP:
        return _double_sweep(board, candidates)
    if strategy == DEAD_ENDS:
        return _every_dead_end(board, candidates)
    raise MazeError(f"Unknown endpoint strategy: {strategy!r} (expected one of {STRATEGIES})")


def stamp_endpoints(board: Board, endpoints: Endpoints) -> None:
    """Write the Start and End tiles onto a board that is still being built."""
    start = cell_to_board(endpoints.start)
    end = cell_to_board(endpoints.end)
    board[start.y][start.x] = Tile.START
    board[end.y][end.x] = Tile.END
