#!/usr/bin/env python3
"""Simple validator for the maze generator.

The script runs :func:`generator.generate_maze` with the provided parameters
(or loads an exported maze file) and performs a series of sanity checks:

* The board is ``(2*width+1) x (2*height+1)`` tiles.
* Exactly one start and one end tile exist, on cell centres.
* Exactly ``width*height - 1`` passages are carved.
* Every cell is reachable from the start.
* The shortest start-to-end distance equals the recorded path length.
* Regenerating with the same seed gives the same board.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Sequence

import generator
from errors import MazeError
from grid import BoardPos, Tile, cell_dimensions, is_cell_center
from maze import Maze, compute_path_len, load_maze_from_file
from pathfind import all_reached, shortest_paths


def count_passages(maze: Maze) -> int:
    """Open tiles that sit between two cells (exactly one odd coordinate)."""
    return sum(
        1
        for y, row in enumerate(maze.board)
        for x, tile in enumerate(row)
        if (x % 2) != (y % 2) and tile is not Tile.WALL
    )


def check_maze(maze: Maze) -> List[str]:
    """Return a list of problems found in ``maze``; empty means it is valid."""
    problems = []
    if maze.height % 2 != 1 or maze.width % 2 != 1:
        return [f"board dimensions {maze.width}x{maze.height} are not both odd"]
    width, height = cell_dimensions(maze.board)

    tiles = [tile for row in maze.board for tile in row]
    start_count = tiles.count(Tile.START)
    end_count = tiles.count(Tile.END)
    if start_count != 1:
        problems.append(f"expected 1 start, got {start_count}")
    if end_count != 1:
        problems.append(f"expected 1 end, got {end_count}")
    if maze.start is None or maze.end is None:
        return problems + ["start or end position missing"]
    for name, pos in (("start", maze.start), ("end", maze.end)):
        if not is_cell_center(pos):
            problems.append(f"{name} {tuple(pos)} is not a cell centre")
    if problems:
        return problems

    passages = count_passages(maze)
    if passages != width * height - 1:
        problems.append(f"expected {width * height - 1} passages, got {passages}")

    table = shortest_paths(maze.board, maze.start)
    if not all_reached(table):
        problems.append(
            f"only {table.reached_count()} of {width * height} cells reachable from the start"
        )
    dist = table.at_board(BoardPos(*maze.end))
    if dist != maze.path_len:
        problems.append(f"path length {maze.path_len} does not match shortest distance {dist}")
    return problems


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Validate a generated maze")
    parser.add_argument("width", type=int, nargs="?", default=10, help="Number of cell columns")
    parser.add_argument("height", type=int, nargs="?", default=8, help="Number of cell rows")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--strategy", choices=generator.STRATEGIES, default=generator.DOUBLE_SWEEP)
    parser.add_argument("--file", type=Path, default=None,
                        help="Validate an exported maze file instead of generating one")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        if args.file is not None:
            maze = compute_path_len(load_maze_from_file(args.file))
        else:
            maze = generator.generate_maze(args.width, args.height,
                                           seed=args.seed, strategy=args.strategy)
    except (MazeError, OSError) as e:
        print(f"Could not build maze: {e}")
        return 1

    problems = check_maze(maze)
    if args.file is None and not problems:
        again = generator.generate_maze(args.width, args.height,
                                        seed=maze.seed, strategy=args.strategy)
        if again.board != maze.board:
            problems.append(f"seed {maze.seed} did not reproduce the same board")

    for problem in problems:
        print(f"FAIL: {problem}")
    if problems:
        return 1
    print(f"All checks passed. Board {maze.width}x{maze.height}, "
          f"seed {maze.seed}, path length {maze.path_len}.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
