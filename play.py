"""Scoring and movement rules for playing a maze.

Nothing here mutates a :class:`maze.Maze`; the player's position is tracked
by the caller and only drawn on top of the board.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from errors import MazeError
from grid import BoardPos, Tile
from maze import Maze


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


@dataclass(frozen=True)
class MoveResult:
    position: BoardPos
    moved: bool
    won: bool = False


@dataclass
class Score:
    score: int
    won: bool
    map_name: str


def calc_score(steps: int, best_steps: int) -> float:
    """1,000,000 for a perfect run, falling off logistically with extra steps."""
    diff = float(steps - best_steps)
    coef = (1 - math.exp(-diff / 15)) / (1 + math.exp(-diff / 15))
    return 1000000 * (1 - coef)


def calc_score_endless(steps: int, best_steps: int, round_: int) -> float:
    multiplier = 1 + round_ ** 2 / 32
    return multiplier * calc_score(steps, best_steps)


def endless_dimensions(round_: int) -> Tuple[int, int]:
    """Cell-grid size used for the given endless round (1-based)."""
    width = 5 + round_
    return width, width * 4 // 5


def try_move(maze: Maze, position: Tuple[int, int], direction: Direction) -> MoveResult:
    """Move one board tile; walls and the board edge stop the player."""
    dx, dy = direction.value
    target = BoardPos(position[0] + dx, position[1] + dy)
    if not (0 <= target.x < maze.width and 0 <= target.y < maze.height):
        return MoveResult(BoardPos(*position), moved=False)
    tile = maze.tile(target)
    if tile is Tile.WALL:
        return MoveResult(BoardPos(*position), moved=False)
    return MoveResult(target, moved=True, won=tile is Tile.END)


def best_steps(maze: Maze) -> int:
    """Fewest tile moves from start to end. Each passage spans two board tiles.

    Raises:
        MazeError: the path length has not been computed (see ``maze.compute_path_len``)
    """
    if maze.path_len < 0:
        raise MazeError("Path length is not known for this maze; run compute_path_len first")
    return 2 * maze.path_len


def finish(maze: Maze, steps: int, map_name: str, endless_round: int = 0) -> Score:
    """Score for reaching the end of ``maze`` in ``steps`` moves."""
    if endless_round:
        value = calc_score_endless(steps, best_steps(maze), endless_round)
    else:
        value = calc_score(steps, best_steps(maze))
    return Score(score=int(value), won=True, map_name=map_name)
