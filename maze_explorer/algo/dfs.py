import logging
import random
from typing import Iterator, List, Optional, Set
from maze_explorer.core.grid import Grid, Cell
from maze_explorer.algo.base import Generator

logger = logging.getLogger(__name__)

class RecursiveBacktracker(Generator):
    def run(self) -> Iterator[str]:
        if not self.grid.is_fully_walled():
            raise ValueError("Maze generation requires a fully walled grid")

        rng = random.Random(self.seed)

        # Start at (0,0)
        start = Cell(0, 0)
        visited: Set[Cell] = {start}
        stack: List[Cell] = [start]

        while stack:
            current = stack.pop()

            unvisited = [n for n, _ in self.grid.neighbors(current) if n not in visited]
            if not unvisited:
                # Dead end: drop it and backtrack
                continue

            chosen = rng.choice(unvisited)

            # Current stays on the stack until all its neighbours are carved
            stack.append(current)
            self.grid.open_between(current, chosen)
            visited.add(chosen)
            stack.append(chosen)
            self.step_count += 1

            if self.step_count % self.progress_interval == 0:
                yield f"Carving... Stack: {len(stack)}"

        logger.debug(f"Carved {self.step_count} passages over {len(visited)} cells")
        yield "Done"


def generate_maze(grid: Grid, seed: Optional[int] = None):
    """Turns a fully walled grid into a perfect maze, in place."""
    RecursiveBacktracker(grid, seed=seed).run_all()
