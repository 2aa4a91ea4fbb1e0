from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from errors import MazeError
from grid import BoardPos
from maze import compute_path_len, load_maze_from_string
from play import (
    Direction,
    best_steps,
    calc_score,
    calc_score_endless,
    endless_dimensions,
    finish,
    try_move,
)

CORRIDOR = """\
#######
#>...<#
#######
"""


def test_perfect_run_scores_a_million():
    assert calc_score(10, 10) == pytest.approx(1000000)


def test_score_falls_with_extra_steps():
    assert calc_score(20, 10) < calc_score(12, 10) < calc_score(10, 10)
    assert calc_score(1000, 10) == pytest.approx(0, abs=1)


def test_endless_multiplier():
    assert calc_score_endless(10, 10, 4) == pytest.approx(1000000 * 1.5)
    assert calc_score_endless(10, 10, 0) == pytest.approx(calc_score(10, 10))


def test_endless_dimensions():
    assert endless_dimensions(1) == (6, 4)
    assert endless_dimensions(5) == (10, 8)


def test_walls_block_movement():
    maze = load_maze_from_string(CORRIDOR)
    result = try_move(maze, maze.start, Direction.UP)
    assert not result.moved
    assert result.position == maze.start


def test_walk_to_the_end():
    maze = compute_path_len(load_maze_from_string(CORRIDOR))
    pos, steps = maze.start, 0
    result = None
    for _ in range(4):
        result = try_move(maze, pos, Direction.RIGHT)
        assert result.moved
        pos, steps = result.position, steps + 1
    assert result.won
    assert pos == maze.end
    assert steps == best_steps(maze) == 4
    score = finish(maze, steps, "corridor")
    assert score.won and score.score == 1000000
    assert score.map_name == "corridor"


def test_board_edge_blocks_movement():
    maze = load_maze_from_string("#.#\n#>#\n#<#\n")
    result = try_move(maze, BoardPos(1, 0), Direction.UP)
    assert not result.moved
    assert result.position == BoardPos(1, 0)


def test_endless_finish_uses_multiplier():
    maze = compute_path_len(load_maze_from_string(CORRIDOR))
    score = finish(maze, 4, "Endless", endless_round=4)
    assert score.score == 1500000


def test_unknown_path_len_cannot_be_scored():
    maze = load_maze_from_string(CORRIDOR)
    assert maze.path_len == -1
    with pytest.raises(MazeError):
        best_steps(maze)
    with pytest.raises(MazeError):
        finish(maze, 4, "corridor")
