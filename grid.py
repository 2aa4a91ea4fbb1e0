"""Board tiles and the two coordinate systems used by the maze.

A maze built from a ``W x H`` cell grid lives on a ``(2W+1) x (2H+1)`` board.
Cell ``(x, y)`` sits at board position ``(2x+1, 2y+1)``; the board positions
between two neighbouring cells are either walls or carved passages.

Cell coordinates (:class:`CellId`) and board coordinates (:class:`BoardPos`)
are kept as separate types and only converted through the functions below.
"""

from __future__ import annotations

from enum import Enum
from typing import List, NamedTuple, Sequence, Tuple


class Tile(Enum):
    EMPTY = "."
    WALL = "#"
    START = ">"
    END = "<"


class BoardPos(NamedTuple):
    """Index directly into the board grid: ``board[y][x]``."""
    x: int
    y: int


class CellId(NamedTuple):
    """Coordinate on the coarse cell grid."""
    x: int
    y: int


Board = List[List[Tile]]
FrozenBoard = Tuple[Tuple[Tile, ...], ...]
BoardLike = Sequence[Sequence[Tile]]

# 固定的方向顺序: +Y, -Y, +X, -X
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (0, 1),   # +Y
    (0, -1),  # -Y
    (1, 0),   # +X
    (-1, 0),  # -X
)


def cell_to_board(cell: CellId) -> BoardPos:
    return BoardPos(2 * cell.x + 1, 2 * cell.y + 1)


def board_to_cell(pos: BoardPos) -> CellId:
    """Inverse of :func:`cell_to_board`. Only meaningful for odd/odd positions."""
    return CellId((pos.x - 1) // 2, (pos.y - 1) // 2)


def is_cell_center(pos: BoardPos) -> bool:
    return pos.x % 2 == 1 and pos.y % 2 == 1


def neighbour(cell: CellId, direction: Tuple[int, int]) -> CellId:
    dx, dy = direction
    return CellId(cell.x + dx, cell.y + dy)


def wall_between(a: CellId, b: CellId) -> BoardPos:
    """Board position strictly between two axis-aligned adjacent cells."""
    pa, pb = cell_to_board(a), cell_to_board(b)
    return BoardPos((pa.x + pb.x) // 2, (pa.y + pb.y) // 2)


def cell_dimensions(board: BoardLike) -> Tuple[int, int]:
    """Cell grid ``(width, height)`` of a board with odd dimensions."""
    return (len(board[0]) - 1) // 2, (len(board) - 1) // 2


def in_bounds(board: BoardLike, pos: BoardPos) -> bool:
    return 0 <= pos.y < len(board) and 0 <= pos.x < len(board[pos.y])


def tile_at(board: BoardLike, pos: BoardPos) -> Tile:
    return board[pos.y][pos.x]


def is_open(board: BoardLike, pos: BoardPos) -> bool:
    """True if ``pos`` is on the board and an empty tile."""
    return in_bounds(board, pos) and tile_at(board, pos) is Tile.EMPTY


def is_cell_open(board: BoardLike, pos: BoardPos) -> bool:
    """Cell centres may also hold the start or end tile."""
    return in_bounds(board, pos) and tile_at(board, pos) is not Tile.WALL


def new_board(width: int, height: int) -> Board:
    """All-wall board for a ``width x height`` cell grid."""
    return [[Tile.WALL] * (2 * width + 1) for _ in range(2 * height + 1)]


def freeze_board(board: BoardLike) -> FrozenBoard:
    return tuple(tuple(row) for row in board)
