#!/usr/bin/env python3

import argparse
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from endpoints import DOUBLE_SWEEP, STRATEGIES, Endpoints, select_endpoints, stamp_endpoints
from errors import InvalidDimensions, MazeError
from grid import (
    DIRECTIONS,
    Board,
    CellId,
    Tile,
    cell_to_board,
    neighbour,
    new_board,
    wall_between,
)
from maze import Maze, build_maze

LAYOUT_PATH = Path("maze_layout.txt")


@dataclass
class MazeConfig:
    """迷宫生成参数。width/height 是单元格网格的尺寸，不是棋盘尺寸。"""
    width: int = 10
    height: int = 8
    seed: Optional[int] = None        # None 表示从系统熵中抽取种子
    strategy: str = DOUBLE_SWEEP      # 起点/终点选择策略
    verbose: bool = False


@dataclass
class CarveResult:
    """Output of the carving pass, before start and end are stamped."""
    board: Board
    origin: CellId
    dead_ends: List[CellId] = field(default_factory=list)
    passages: int = 0

    @property
    def candidates(self) -> List[CellId]:
        """Cells that may be an end of the longest path: the origin and every dead end."""
        return [self.origin] + [c for c in self.dead_ends if c != self.origin]


class MazeGenerator:
    """Randomized depth-first backtracker.

    The generator owns its own :class:`random.Random`; the same
    ``(width, height, seed)`` always carves the same board.
    """

    def __init__(self, config: MazeConfig):
        if config.width < 1 or config.height < 1:
            raise InvalidDimensions(
                f"Maze dimensions must be positive, got {config.width}x{config.height}"
            )
        if config.width * config.height < 2:
            raise InvalidDimensions("A maze needs at least two cells to place a start and an end")
        if config.strategy not in STRATEGIES:
            raise MazeError(f"Unknown endpoint strategy: {config.strategy!r}")
        self.config = config
        self.width = config.width
        self.height = config.height
        self.seed = config.seed if config.seed is not None else random.SystemRandom().getrandbits(63)
        self.rng = random.Random(self.seed)

    def in_bounds(self, cell: CellId) -> bool:
        return 0 <= cell.x < self.width and 0 <= cell.y < self.height

    def is_unvisited(self, board: Board, cell: CellId) -> bool:
        """A cell is unvisited while its centre is still a wall."""
        pos = cell_to_board(cell)
        return board[pos.y][pos.x] is Tile.WALL

    def unvisited_neighbours(self, board: Board, cell: CellId) -> List[CellId]:
        """Unvisited neighbours of ``cell``, in the fixed order +Y, -Y, +X, -X."""
        return [
            target
            for target in (neighbour(cell, d) for d in DIRECTIONS)
            if self.in_bounds(target) and self.is_unvisited(board, target)
        ]

    def _open(self, board: Board, cell: CellId) -> None:
        pos = cell_to_board(cell)
        board[pos.y][pos.x] = Tile.EMPTY

    def _carve(self, board: Board, current: CellId, target: CellId) -> None:
        wall = wall_between(current, target)
        board[wall.y][wall.x] = Tile.EMPTY
        self._open(board, target)

    def carve(self) -> CarveResult:
        """Carve a spanning tree of passages over every cell."""
        board = new_board(self.width, self.height)
        current = CellId(self.rng.randrange(self.width), self.rng.randrange(self.height))
        self._open(board, current)
        result = CarveResult(board=board, origin=current)

        to_visit = self.width * self.height - 1
        stack = [current]

        while to_visit > 0:
            targets = self.unvisited_neighbours(board, current)
            if not targets:
                # 死胡同: 记录下来，然后回溯到还有未访问邻居的单元格
                result.dead_ends.append(current)
                while stack:
                    current = stack[-1]
                    targets = self.unvisited_neighbours(board, current)
                    if targets:
                        break
                    stack.pop()
                if not targets:
                    break

            target = targets[self.rng.randrange(len(targets))]
            self._carve(board, current, target)
            result.passages += 1
            to_visit -= 1
            stack.append(target)
            current = target

        # 最后一个被访问的单元格同样没有未访问的邻居
        if current not in result.dead_ends:
            result.dead_ends.append(current)
        return result

    def generate(self) -> Maze:
        carved = self.carve()
        endpoints = select_endpoints(carved.board, carved.candidates, self.config.strategy)
        stamp_endpoints(carved.board, endpoints)
        if self.config.verbose:
            self._log_generation(carved, endpoints)
        return build_maze(
            carved.board,
            start=cell_to_board(endpoints.start),
            end=cell_to_board(endpoints.end),
            path_len=endpoints.distance,
            seed=self.seed,
        )

    def _log_generation(self, carved: CarveResult, endpoints: Endpoints) -> None:
        """打印一次生成的摘要信息"""
        print(f"\n=== 迷宫生成完成 ===")
        print(f"单元格网格: {self.width}x{self.height}")
        print(f"棋盘尺寸: {2 * self.width + 1}x{2 * self.height + 1}")
        print(f"随机种子: {self.seed}")
        print(f"起始单元格: {tuple(carved.origin)}")
        print(f"打通的通道: {carved.passages}")
        print(f"死胡同数量: {len(carved.dead_ends)}")
        print(f"选择策略: {self.config.strategy}")
        print(f"起点: {tuple(cell_to_board(endpoints.start))}  终点: {tuple(cell_to_board(endpoints.end))}")
        print(f"最短路径长度: {endpoints.distance}")


def generate_maze(width: int, height: int, seed: Optional[int] = None,
                  strategy: str = DOUBLE_SWEEP, verbose: bool = False) -> Maze:
    """Generate a perfect maze over a ``width x height`` cell grid.

    Args:
        width: number of cell columns (the board is ``2*width+1`` wide)
        height: number of cell rows (the board is ``2*height+1`` tall)
        seed: PRNG seed; ``None`` draws one from OS entropy and records it on the maze
        strategy: ``"double_sweep"`` or ``"dead_ends"``
        verbose: print a summary of the generation

    Raises:
        InvalidDimensions: ``width`` or ``height`` below 1, or a single-cell grid.
    """
    config = MazeConfig(width=width, height=height, seed=seed, strategy=strategy, verbose=verbose)
    return MazeGenerator(config).generate()


def export_maze_layout(maze: Maze, path: Path = LAYOUT_PATH) -> None:
    """将迷宫以文本格式写入文件"""
    path.write_text(maze.to_text(), encoding="utf-8")
    print(f"迷宫布局已导出到 {path}，棋盘 {maze.width}x{maze.height}，最短路径 {maze.path_len}")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a random perfect maze")
    parser.add_argument("width", type=int, help="Number of cell columns")
    parser.add_argument("height", type=int, help="Number of cell rows")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--strategy", choices=STRATEGIES, default=DOUBLE_SWEEP,
                        help="How the start and end are chosen")
    parser.add_argument("--output", type=Path, default=LAYOUT_PATH, help="Where to write the maze")
    parser.add_argument("--quiet", action="store_true", help="Only write the file")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    try:
        maze = generate_maze(args.width, args.height, seed=args.seed,
                             strategy=args.strategy, verbose=not args.quiet)
        export_maze_layout(maze, args.output)
    except MazeError as e:
        print(f"迷宫生成失败: {e}")
        return 1
    except OSError as e:
        print(f"写入文件失败: {e}")
        return 1
    if not args.quiet:
        print(maze.to_text())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
