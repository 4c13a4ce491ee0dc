import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_explorer.core.grid import create_grid
from maze_explorer.algo.dfs import generate_maze
from maze_explorer.algo.solvers import AStar
from maze_explorer.viz.text import render_text

class TestTextRender(unittest.TestCase):
    def test_small_maze_with_path(self):
        grid = create_grid(2, 2)
        grid.open_between((0, 0), (1, 0))
        grid.open_between((1, 0), (1, 1))

        expected = "\n".join([
            "+---+---+",
            "| S   * |",
            "+---+   +",
            "|   | G |",
            "+---+---+",
        ])
        self.assertEqual(render_text(grid, [(0, 0), (1, 0), (1, 1)]), expected)

    def test_walled_single_cell(self):
        self.assertEqual(render_text(create_grid(1, 1)), "+---+\n| S |\n+---+")

    def test_generated_maze_shape(self):
        w, h = 8, 5
        grid = create_grid(w, h)
        generate_maze(grid, seed=4)
        astar = AStar(grid)
        astar.solve()

        lines = render_text(grid, astar.path).split("\n")
        self.assertEqual(len(lines), 2 * h + 1)
        self.assertTrue(all(len(line) == 4 * w + 1 for line in lines))
        # Intermediate path cells are starred
        self.assertEqual(sum(line.count("*") for line in lines), len(astar.path) - 2)
        # Outer boundary is always closed
        self.assertEqual(lines[0], "+---" * w + "+")
        self.assertEqual(lines[-1], "+---" * w + "+")

if __name__ == '__main__':
    unittest.main()
