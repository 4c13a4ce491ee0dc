import heapq
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple
from maze_explorer.core.grid import Grid, Cell

logger = logging.getLogger(__name__)

ClosedSet = Dict[Cell, 'SearchNode']


@dataclass(frozen=True)
class SearchNode:
    parent: Cell
    move_cost: int
    heuristic_cost: int

    @property
    def total_cost(self) -> int:
        return self.move_cost + self.heuristic_cost


class AStar:
    """
    A* from (0, 0) to (width - 1, height - 1) with a Manhattan heuristic and
    unit step cost.

    The frontier is a heap of (total_cost, insertion_seq, cell). A cell keeps
    the sequence number of its first insertion when a cheaper node replaces
    it, so among equal totals the earliest discovered cell always wins.
    Superseded heap entries are skipped when popped.
    """

    def __init__(self, grid: Grid, width: Optional[int] = None, height: Optional[int] = None):
        width = grid.width if width is None else width
        height = grid.height if height is None else height
        if width <= 0 or height <= 0:
            raise ValueError(f"Search bounds must be positive, got {width}x{height}")
        if width > grid.width or height > grid.height:
            raise ValueError(
                f"Search bounds {width}x{height} exceed grid {grid.width}x{grid.height}")

        self.grid = grid
        self.start = Cell(0, 0)
        self.goal = Cell(width - 1, height - 1)
        self.closed: ClosedSet = {}
        self.path: List[Cell] = []
        self.path_cost: Optional[int] = None
        self.visited_count = 0

    def heuristic(self, a, b) -> int:
        return abs(a[0] - b[0]) + abs(a[1] - b[1])

    def solve(self) -> Optional[Tuple[ClosedSet, Cell]]:
        start, goal = self.start, self.goal

        frontier: Dict[Cell, SearchNode] = {start: SearchNode(start, 0, 0)}
        first_seen: Dict[Cell, int] = {start: 0}
        heap = [(0, 0, start)]
        seq = 1
        closed: ClosedSet = {}

        while heap:
            total, _, current = heapq.heappop(heap)
            node = frontier.get(current)
            if node is None or node.total_cost != total:
                continue # superseded

            if current == goal:
                closed[current] = node
                del frontier[current]
                self._finish(closed)
                return closed, goal

            for neighbor in self.grid.open_neighbors(current):
                if neighbor in closed:
                    continue
                candidate = SearchNode(
                    parent=current,
                    move_cost=node.move_cost + 1,
                    heuristic_cost=self.heuristic(neighbor, goal),
                )
                existing = frontier.get(neighbor)
                if existing is None:
                    frontier[neighbor] = candidate
                    first_seen[neighbor] = seq
                    heapq.heappush(heap, (candidate.total_cost, seq, neighbor))
                    seq += 1
                elif existing.total_cost > candidate.total_cost:
                    frontier[neighbor] = candidate
                    heapq.heappush(heap, (candidate.total_cost, first_seen[neighbor], neighbor))

            closed[current] = node
            del frontier[current]

        self._finish(closed)
        logger.debug(f"No route from {start} to {goal} after expanding {len(closed)} cells")
        return None

    def _finish(self, closed: ClosedSet):
        self.closed = closed
        self.visited_count = len(closed)
        if self.goal in closed:
            self.path = reconstruct_path(closed, self.goal)
            self.path_cost = closed[self.goal].move_cost
            logger.debug(f"Route found: cost {self.path_cost}, expanded {self.visited_count} cells")
        else:
            self.path = []
            self.path_cost = None


def reconstruct_path(closed: ClosedSet, goal: Tuple[int, int]) -> List[Cell]:
    """Walks parent links from goal back to the self-parented start. Returns start-first."""
    current = Cell(*goal)
    path = [current]
    while True:
        parent = closed[current].parent
        if parent == current:
            break
        path.append(parent)
        current = parent
    path.reverse()
    return path


def find_path(grid: Grid, width: int, height: int) -> Optional[Tuple[ClosedSet, Cell]]:
    return AStar(grid, width, height).solve()
