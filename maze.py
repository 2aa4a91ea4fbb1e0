"""The finished maze and its plain-text board format.

Text format: one line per board row, all rows the same width.

    .  empty        #  wall
    >  start        <  end

A space is read as an empty tile. The player overlay ``@`` is only ever added
by :meth:`Maze.display_text` and is not part of the format.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import List, Optional, Tuple, Union

from errors import (
    InconsistentRowWidth,
    InvalidTile,
    MultipleEndPoints,
    MultipleStartPoints,
)
from grid import BoardLike, BoardPos, FrozenBoard, Tile, freeze_board, is_cell_center
from pathfind import shortest_paths

PLAYER_MARK = "@"

_TILES = {tile.value: tile for tile in Tile}
_TILES[" "] = Tile.EMPTY


@dataclass(frozen=True)
class Maze:
    """Read-only result of generating or loading a maze.

    ``width`` and ``height`` are board dimensions, not cell-grid dimensions.
    ``path_len`` is the number of passages on the shortest path from start to
    end, or ``-1`` when it has not been computed.
    """
    board: FrozenBoard
    start: Optional[BoardPos]
    end: Optional[BoardPos]
    path_len: int = -1
    width: int = 0
    height: int = 0
    seed: Optional[int] = None

    def tile(self, pos: BoardPos) -> Tile:
        return self.board[pos.y][pos.x]

    def to_text(self) -> str:
        return "".join("".join(t.value for t in row) + "\n" for row in self.board)

    def display_text(self, player: Optional[Tuple[int, int]] = None) -> str:
        """Board text with ``@`` drawn over the player's position."""
        if player is None:
            return self.to_text()
        px, py = player
        lines = []
        for y, row in enumerate(self.board):
            chars = [t.value for t in row]
            if y == py and 0 <= px < len(chars):
                chars[px] = PLAYER_MARK
            lines.append("".join(chars) + "\n")
        return "".join(lines)


def build_maze(board: BoardLike, start: Optional[BoardPos], end: Optional[BoardPos],
               path_len: int = -1, seed: Optional[int] = None) -> Maze:
    frozen = freeze_board(board)
    return Maze(
        board=frozen,
        start=start,
        end=end,
        path_len=path_len,
        width=len(frozen[0]) if frozen else 0,
        height=len(frozen),
        seed=seed,
    )


def load_maze_from_string(text: str) -> Maze:
    """Parse the text format. Empty lines are skipped.

    Raises:
        InconsistentRowWidth, MultipleStartPoints, MultipleEndPoints, InvalidTile
    """
    board: List[List[Tile]] = []
    start: Optional[BoardPos] = None
    end: Optional[BoardPos] = None
    width = -1

    for line in text.splitlines():
        if not line:
            continue
        if width == -1:
            width = len(line)
        elif len(line) != width:
            raise InconsistentRowWidth(width, len(line), len(board))

        y = len(board)
        row = []
        for x, char in enumerate(line):
            tile = _TILES.get(char)
            if tile is None:
                raise InvalidTile(char)
            if tile is Tile.START:
                if start is not None:
                    raise MultipleStartPoints()
                start = BoardPos(x, y)
            elif tile is Tile.END:
                if end is not None:
                    raise MultipleEndPoints()
                end = BoardPos(x, y)
            row.append(tile)
        board.append(row)

    return build_maze(board, start, end)


def load_maze_from_file(path: Union[str, Path]) -> Maze:
    return load_maze_from_string(Path(path).read_text(encoding="utf-8"))


def compute_path_len(maze: Maze) -> Maze:
    """Copy of ``maze`` with ``path_len`` filled in from a shortest-path run.

    Leaves ``path_len`` at ``-1`` if the start or end is missing, is not a
    cell centre, or the end cannot be reached.
    """
    if maze.start is None or maze.end is None:
        return maze
    if not (is_cell_center(maze.start) and is_cell_center(maze.end)):
        return maze
    dist = shortest_paths(maze.board, maze.start).at_board(maze.end)
    return replace(maze, path_len=-1 if dist is None else dist)
