from pathlib import Path
import sys
from itertools import combinations

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from endpoints import DEAD_ENDS, DOUBLE_SWEEP, Endpoints, select_endpoints, stamp_endpoints
from errors import MazeError
from generator import MazeConfig, MazeGenerator, generate_maze
from grid import CellId, Tile, cell_to_board, new_board
from pathfind import shortest_paths


def _diameter(board, width, height):
    cells = [CellId(x, y) for y in range(height) for x in range(width)]
    best = 0
    for a in cells:
        table = shortest_paths(board, cell_to_board(a))
        best = max(best, max(d for _, d in table.cells() if d is not None))
    return best


@pytest.mark.parametrize("seed", range(6))
@pytest.mark.parametrize("width,height", [(2, 3), (5, 5), (8, 4)])
def test_both_strategies_find_the_diameter(seed, width, height):
    carved = MazeGenerator(MazeConfig(width=width, height=height, seed=seed)).carve()
    expected = _diameter(carved.board, width, height)

    sweep = select_endpoints(carved.board, carved.candidates, DOUBLE_SWEEP)
    every = select_endpoints(carved.board, carved.candidates, DEAD_ENDS)
    assert sweep.distance == expected
    assert every.distance == expected


def test_selected_pair_distance_is_exact():
    carved = MazeGenerator(MazeConfig(width=9, height=9, seed=17)).carve()
    chosen = select_endpoints(carved.board, carved.candidates)
    table = shortest_paths(carved.board, cell_to_board(chosen.start))
    assert table.at(chosen.end) == chosen.distance


def test_no_pair_is_farther_than_chosen():
    maze = generate_maze(4, 4, seed=31, strategy=DEAD_ENDS)
    cells = [CellId(x, y) for y in range(4) for x in range(4)]
    tables = {c: shortest_paths(maze.board, cell_to_board(c)) for c in cells}
    for a, b in combinations(cells, 2):
        assert tables[a].at(b) <= maze.path_len


def test_strategies_agree_on_path_len():
    for seed in range(10):
        a = generate_maze(7, 6, seed=seed, strategy=DOUBLE_SWEEP)
        b = generate_maze(7, 6, seed=seed, strategy=DEAD_ENDS)
        assert a.path_len == b.path_len


def test_corridor_endpoints_are_the_two_ends():
    board = new_board(4, 1)
    for x in range(1, 8):
        board[1][x] = Tile.EMPTY
    chosen = select_endpoints(board, [CellId(1, 0)])
    assert {chosen.start, chosen.end} == {CellId(0, 0), CellId(3, 0)}
    assert chosen.distance == 3


def test_stamp_endpoints():
    board = new_board(2, 1)
    for x in range(1, 4):
        board[1][x] = Tile.EMPTY
    stamp_endpoints(board, Endpoints(CellId(0, 0), CellId(1, 0), 1))
    assert board[1][1] is Tile.START
    assert board[1][3] is Tile.END
    assert board[1][2] is Tile.EMPTY


def test_requires_candidates():
    with pytest.raises(ValueError):
        select_endpoints(new_board(2, 2), [])


def test_unknown_strategy():
    board = new_board(1, 2)
    board[1][1] = board[2][1] = board[3][1] = Tile.EMPTY
    with pytest.raises(MazeError):
        select_endpoints(board, [CellId(0, 0)], "nearest")
