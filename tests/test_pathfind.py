from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from errors import InvalidBoard, InvalidSource
from grid import BoardPos, CellId
from maze import load_maze_from_string
from pathfind import all_reached, distance_between, shortest_paths

# 5x5 棋盘上的一条直线走廊
SHORT_CORRIDOR = """\
#####
#>.<#
#####
#####
#####
"""

# 3x9 棋盘上的一条竖直走廊，四个单元格
LONG_CORRIDOR = """\
###
#>#
#.#
#.#
#.#
#.#
#.#
#<#
###
"""

# 两个相连的单元格和两个被隔开的单元格
SPLIT_BOARD = """\
#####
#>.<#
#####
#.#.#
#####
"""

LOOP_BOARD = """\
#######
#>....#
#.###.#
#....<#
#######
"""


def test_short_corridor_distance():
    maze = load_maze_from_string(SHORT_CORRIDOR)
    table = shortest_paths(maze.board, maze.start)
    # 两个单元格，距离为 1
    assert table.at_board(maze.end) == 1
    assert table.at(CellId(0, 0)) == 0


def test_long_corridor_distance_is_cell_count_minus_one():
    maze = load_maze_from_string(LONG_CORRIDOR)
    table = shortest_paths(maze.board, maze.start)
    assert table.at_board(maze.end) == 3
    assert [row[0] for row in table.rows()] == [0, 1, 2, 3]
    assert table.farthest() == (CellId(0, 3), 3)
    assert all_reached(table)


def test_unreached_cells_are_not_an_error():
    maze = load_maze_from_string(SPLIT_BOARD)
    table = shortest_paths(maze.board, maze.start)
    assert table.at(CellId(1, 0)) == 1
    assert table.at(CellId(0, 1)) is None
    assert table.at(CellId(1, 1)) is None
    assert table.reached_count() == 2
    assert not all_reached(table)


def test_shortest_of_two_routes():
    maze = load_maze_from_string(LOOP_BOARD)
    assert distance_between(maze.board, maze.start, maze.end) == 3


def test_source_must_be_cell_centre():
    maze = load_maze_from_string(SHORT_CORRIDOR)
    with pytest.raises(InvalidSource):
        shortest_paths(maze.board, BoardPos(2, 1))
    with pytest.raises(InvalidSource):
        shortest_paths(maze.board, BoardPos(7, 1))


def test_board_must_have_odd_dimensions():
    maze = load_maze_from_string("####\n#>.#\n####\n")
    with pytest.raises(InvalidBoard):
        shortest_paths(maze.board, BoardPos(1, 1))
    with pytest.raises(InvalidBoard):
        shortest_paths((), BoardPos(1, 1))


def test_start_tile_on_connector_blocks_passage():
    maze = load_maze_from_string("#####\n#.>.#\n#####\n")
    table = shortest_paths(maze.board, BoardPos(1, 1))
    assert table.at(CellId(0, 0)) == 0
    assert table.at(CellId(1, 0)) is None


def test_start_and_end_on_cell_centres_are_passable():
    maze = load_maze_from_string("#######\n#>.<..#\n#######\n")
    table = shortest_paths(maze.board, maze.start)
    assert table.rows() == [[0, 1, 2]]
