from typing import Iterable, Optional, Tuple
from maze_explorer.core.grid import Grid, Cell


def render_text(grid: Grid, path: Optional[Iterable[Tuple[int, int]]] = None) -> str:
    """
    Draws the maze with '+', '---' and '|'. Cells on the path are marked
    '*', the start 'S' and the bottom-right goal 'G'.

        +---+---+
        | S   * |
        +---+   +
        |     G |
        +---+---+
    """
    on_path = {Cell(*p) for p in path} if path else set()
    start = Cell(0, 0)
    goal = Cell(grid.width - 1, grid.height - 1)

    lines = []
    for y in range(grid.height):
        top = ["+"]
        row = []
        for x in range(grid.width):
            walls = grid[(x, y)]
            top.append("---+" if walls.top else "   +")

            if (x, y) == start:
                mark = "S"
            elif (x, y) == goal:
                mark = "G"
            elif (x, y) in on_path:
                mark = "*"
            else:
                mark = " "
            row.append(("|" if walls.left else " ") + f" {mark} ")
        row.append("|" if grid[(grid.width - 1, y)].right else " ")
        lines.append("".join(top))
        lines.append("".join(row))

    bottom = ["+"]
    for x in range(grid.width):
        bottom.append("---+" if grid[(x, grid.height - 1)].bottom else "   +")
    lines.append("".join(bottom))
    return "\n".join(lines)
