"""
兼容性导入模块。

早期版本通过 ``MazeGeneration`` 模块暴露迷宫生成器。
此文件从 ``generator``、``maze`` 和 ``pathfind`` 中导入公共接口，
并在 ``__all__`` 中导出它们。
"""

from generator import MazeConfig, MazeGenerator, generate_maze
from grid import BoardPos, CellId, Tile, cell_to_board, wall_between
from maze import Maze, load_maze_from_file, load_maze_from_string
from pathfind import DistanceTable, shortest_paths

__all__ = [
    "BoardPos",
    "CellId",
    "DistanceTable",
    "Maze",
    "MazeConfig",
    "MazeGenerator",
    "Tile",
    "cell_to_board",
    "generate_maze",
    "load_maze_from_file",
    "load_maze_from_string",
    "shortest_paths",
    "wall_between",
]
