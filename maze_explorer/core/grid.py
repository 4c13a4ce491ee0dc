from enum import Enum
from typing import Dict, Iterator, NamedTuple, Tuple


class Cell(NamedTuple):
    x: int
    y: int


class Direction(Enum):
    # (dx, dy, near-side wall, far-side wall)
    UP = (0, -1, 'top', 'bottom')
    DOWN = (0, 1, 'bottom', 'top')
    LEFT = (-1, 0, 'left', 'right')
    RIGHT = (1, 0, 'right', 'left')

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def near(self) -> str:
        return self.value[2]

    @property
    def far(self) -> str:
        return self.value[3]

    def step(self, cell: Tuple[int, int]) -> Cell:
        return Cell(cell[0] + self.dx, cell[1] + self.dy)

    @classmethod
    def between(cls, a: Tuple[int, int], b: Tuple[int, int]) -> 'Direction':
        """Direction of travel from a to b. Only 4-adjacent cells have one."""
        delta = (b[0] - a[0], b[1] - a[1])
        for direction in cls:
            if (direction.dx, direction.dy) == delta:
                return direction
        raise ValueError(f"Cells {tuple(a)} and {tuple(b)} are not adjacent")


class WallSet:
    """The four boundary flags of one cell. True means impassable."""
    SIDES = ('top', 'bottom', 'left', 'right')

    __slots__ = SIDES

    def __init__(self, top: bool = True, bottom: bool = True, left: bool = True, right: bool = True):
        self.top = top
        self.bottom = bottom
        self.left = left
        self.right = right

    def is_closed(self) -> bool:
        return self.top and self.bottom and self.left and self.right

    def count(self) -> int:
        return sum(1 for side in self.SIDES if getattr(self, side))

    def as_dict(self) -> Dict[str, bool]:
        return {side: getattr(self, side) for side in self.SIDES}

    def __eq__(self, other):
        if not isinstance(other, WallSet):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self):
        flags = ", ".join(f"{side}={getattr(self, side)}" for side in self.SIDES)
        return f"WallSet({flags})"


class Grid:
    """
    Dense rectangular map of Cell -> WallSet.
    Walls are only ever cleared in pairs (see open_between), so the wall
    between two neighbours always reads the same from both sides.
    """

    __slots__ = ('width', 'height', 'cells')

    def __init__(self, width: int, height: int):
        if not isinstance(width, int) or not isinstance(height, int):
            raise ValueError(f"Grid dimensions must be integers, got {width!r}x{height!r}")
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.cells: Dict[Cell, WallSet] = {
            Cell(x, y): WallSet() for y in range(height) for x in range(width)
        }

    def __len__(self) -> int:
        return len(self.cells)

    def __contains__(self, cell) -> bool:
        return cell in self.cells

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __getitem__(self, cell: Tuple[int, int]) -> WallSet:
        return self.cells[cell]

    def walls(self, cell: Tuple[int, int]) -> Dict[str, bool]:
        return self.cells[cell].as_dict()

    def is_open(self, cell: Tuple[int, int], direction: Direction) -> bool:
        if getattr(self.cells[cell], direction.near):
            return False
        return direction.step(cell) in self.cells

    def open_between(self, a: Tuple[int, int], b: Tuple[int, int]):
        """
        Clears the wall of a facing b and the wall of b facing a.
        Both cells must be in the grid and 4-adjacent.
        """
        if a not in self.cells or b not in self.cells:
            raise ValueError(f"Cannot open wall between {tuple(a)} and {tuple(b)}: cell outside grid")
        direction = Direction.between(a, b)
        setattr(self.cells[a], direction.near, False)
        setattr(self.cells[b], direction.far, False)

    def neighbors(self, cell: Tuple[int, int]) -> Iterator[Tuple[Cell, Direction]]:
        """
        Yields (neighbor, direction) for every in-bounds 4-neighbour.
        Does NOT check walls.
        """
        for direction in Direction:
            neighbor = direction.step(cell)
            if neighbor in self.cells:
                yield neighbor, direction

    def open_neighbors(self, cell: Tuple[int, int]) -> Iterator[Cell]:
        """Yields neighbours reachable through an open wall, in UP, DOWN, LEFT, RIGHT order."""
        for direction in Direction:
            if self.is_open(cell, direction):
                yield direction.step(cell)

    def is_fully_walled(self) -> bool:
        return all(walls.is_closed() for walls in self.cells.values())

    def passage_count(self) -> int:
        # Each passage is seen once, from its left or upper cell.
        count = 0
        for cell in self.cells:
            if self.is_open(cell, Direction.RIGHT):
                count += 1
            if self.is_open(cell, Direction.DOWN):
                count += 1
        return count


def create_grid(width: int, height: int) -> Grid:
    return Grid(width, height)


def is_open(grid: Grid, cell: Tuple[int, int], direction: Direction) -> bool:
    return grid.is_open(cell, direction)


def open_between(grid: Grid, a: Tuple[int, int], b: Tuple[int, int]):
    grid.open_between(a, b)
