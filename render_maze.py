#!/usr/bin/env python3
"""渲染迷宫的可视化工具。

读取 `generator.py` 导出的文本文件，用 matplotlib 画出迷宫图像，
或者在终端打印带玩家标记的 ASCII 视图。渲染从不修改迷宫本身。
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np

from errors import MazeError
from generator import LAYOUT_PATH
from grid import Tile
from maze import Maze, compute_path_len, load_maze_from_file

# 各种格子类型对应的数值和颜色
TILE_VALUES = {
    Tile.WALL: 0,
    Tile.EMPTY: 1,
    Tile.START: 2,
    Tile.END: 3,
}

TILE_STYLES = {
    Tile.START: {"color": "green", "marker": "o", "label": "起点"},
    Tile.END: {"color": "red", "marker": "s", "label": "终点"},
}


def board_to_array(maze: Maze) -> np.ndarray:
    """把棋盘转换为整数矩阵（行为 y，列为 x）。"""
    return np.array(
        [[TILE_VALUES[tile] for tile in row] for row in maze.board],
        dtype=np.uint8,
    )


def render_ascii_maze(maze: Maze, player: Optional[Tuple[int, int]] = None) -> int:
    """在终端打印迷宫，可选地在玩家位置叠加 ``@``。

    Returns:
        0 表示成功
    """
    print(f"\n=== 迷宫 {maze.width}x{maze.height}，最短路径 {maze.path_len} ===")
    print(maze.display_text(player), end="")
    return 0


def render_maze_image(maze: Maze, output: Optional[Path] = None, show: bool = True):
    """用 matplotlib 绘制迷宫。

    Args:
        maze: 要绘制的迷宫
        output: 如果给出，把图像保存到该路径
        show: 是否弹出窗口显示；为 False 时图像在返回前关闭

    Returns:
        matplotlib 的 Figure 对象
    """
    grid = board_to_array(maze)
    walls = (grid == TILE_VALUES[Tile.WALL]).astype(np.uint8)

    fig, ax = plt.subplots(figsize=(max(4, maze.width / 3), max(4, maze.height / 3)))
    ax.imshow(walls, cmap="Greys", interpolation="nearest")

    # 起点和终点用不同的标记
    for tile, style in TILE_STYLES.items():
        ys, xs = np.nonzero(grid == TILE_VALUES[tile])
        if len(xs):
            ax.scatter(xs, ys, c=style["color"], marker=style["marker"],
                       s=60, label=style["label"])

    ax.set_title(f"迷宫 {maze.width}x{maze.height}  最短路径: {maze.path_len}")
    ax.set_xticks([])
    ax.set_yticks([])
    if ax.get_legend_handles_labels()[0]:
        ax.legend(loc="upper right")
    fig.tight_layout()

    if output is not None:
        fig.savefig(output)
        print(f"图像已保存到 {output}")
    if show:
        plt.show()
    else:
        plt.close(fig)
    return fig


def main() -> int:
    """主函数：提供图像和ASCII两种渲染选项。

    Returns:
        0 表示成功，其他值表示错误
    """
    import sys

    try:
        maze = compute_path_len(load_maze_from_file(LAYOUT_PATH))
    except OSError as e:
        print(f"错误：无法读取 {LAYOUT_PATH}: {e}")
        print("请先运行 python3 generator.py <width> <height> 生成迷宫")
        return 1
    except MazeError as e:
        print(f"错误：迷宫文件格式不正确: {e}")
        return 1

    if len(sys.argv) > 1:
        choice = sys.argv[1]
    elif sys.stdin.isatty():
        print("=== 迷宫渲染工具 ===")
        print("1. 图像 (推荐)")
        print("2. ASCII")
        print("3. 两种都显示")
        try:
            choice = input("请选择渲染方式 (1/2/3，默认为1): ").strip() or "1"
        except (KeyboardInterrupt, EOFError):
            print("\n使用默认图像渲染")
            choice = "1"
    else:
        choice = "2"
        print("非交互模式，使用ASCII渲染")

    if choice == "2":
        return render_ascii_maze(maze, player=maze.start)
    if choice == "3":
        render_ascii_maze(maze, player=maze.start)
    render_maze_image(maze)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
