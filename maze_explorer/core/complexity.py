from collections import deque
from typing import Dict, List, Tuple
from maze_explorer.core.grid import Grid, Cell, Direction


class MazeAnalyzer:
    @staticmethod
    def calculate_stats(grid: Grid) -> Dict[str, float]:
        dead_ends = 0
        intersections = 0 # 0, 1 walls
        corridors = 0 # 2 walls

        for walls in grid.cells.values():
            count = walls.count()
            if count == 3: dead_ends += 1
            elif count == 2: corridors += 1
            elif count <= 1: intersections += 1

        total = len(grid)
        return {
            "cells": total,
            "passages": grid.passage_count(),
            "dead_ends": dead_ends,
            "corridors": corridors,
            "intersections": intersections,
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
        }

    @staticmethod
    def reachable_from(grid: Grid, start: Tuple[int, int] = (0, 0)) -> int:
        """Number of cells reachable from start through open walls."""
        seen = {Cell(*start)}
        queue = deque(seen)
        while queue:
            current = queue.popleft()
            for neighbor in grid.open_neighbors(current):
                if neighbor not in seen:
                    seen.add(neighbor)
                    queue.append(neighbor)
        return len(seen)

    @staticmethod
    def asymmetric_walls(grid: Grid) -> List[Tuple[Cell, Cell]]:
        """
        Returns every adjacent pair whose shared wall reads differently
        from the two sides. Empty for a consistent grid.
        """
        broken = []
        for cell, walls in grid.cells.items():
            for direction in (Direction.RIGHT, Direction.DOWN):
                neighbor = direction.step(cell)
                if neighbor not in grid:
                    continue
                if getattr(walls, direction.near) != getattr(grid[neighbor], direction.far):
                    broken.append((cell, neighbor))
        return broken

    @staticmethod
    def is_perfect(grid: Grid) -> bool:
        # Connected with exactly cells - 1 passages <=> spanning tree.
        if MazeAnalyzer.asymmetric_walls(grid):
            return False
        total = len(grid)
        if grid.passage_count() != total - 1:
            return False
        return MazeAnalyzer.reachable_from(grid) == total
