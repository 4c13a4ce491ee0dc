import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_explorer.core.grid import create_grid
from maze_explorer.core.complexity import MazeAnalyzer
from maze_explorer.algo.dfs import RecursiveBacktracker, generate_maze

class TestGenerators(unittest.TestCase):
    def test_dfs_spanning_tree(self):
        w, h = 20, 20
        grid = create_grid(w, h)
        algo = RecursiveBacktracker(grid, seed=42)
        algo.run_all()

        self.assertEqual(algo.step_count, w * h - 1)
        self.assertEqual(grid.passage_count(), w * h - 1)
        self.assertEqual(MazeAnalyzer.reachable_from(grid), w * h, "DFS should reach every cell")
        self.assertTrue(MazeAnalyzer.is_perfect(grid))

    def test_wall_symmetry_after_generation(self):
        grid = create_grid(17, 9)
        generate_maze(grid, seed=7)
        self.assertEqual(MazeAnalyzer.asymmetric_walls(grid), [])

    def test_many_shapes_are_perfect(self):
        for seed, (w, h) in enumerate([(1, 1), (1, 8), (8, 1), (2, 2), (10, 30), (31, 7)]):
            grid = create_grid(w, h)
            generate_maze(grid, seed=seed)
            self.assertTrue(MazeAnalyzer.is_perfect(grid), f"{w}x{h} maze is not perfect")

    def test_single_cell(self):
        grid = create_grid(1, 1)
        algo = RecursiveBacktracker(grid, seed=1)
        algo.run_all()
        self.assertEqual(algo.step_count, 0)
        self.assertTrue(grid[(0, 0)].is_closed())

    def test_determinism(self):
        w, h = 10, 10
        grid1 = create_grid(w, h)
        generate_maze(grid1, seed=12345)

        grid2 = create_grid(w, h)
        rec = RecursiveBacktracker(grid2, seed=12345)
        for _ in rec.run(): pass

        self.assertEqual(grid1.cells, grid2.cells)

    def test_seeds_differ(self):
        grid1 = create_grid(10, 10)
        generate_maze(grid1, seed=1)
        grid2 = create_grid(10, 10)
        generate_maze(grid2, seed=2)
        self.assertNotEqual(grid1.cells, grid2.cells)

    def test_progress_interval(self):
        grid = create_grid(5, 4)
        messages = list(RecursiveBacktracker(grid, seed=3, progress_interval=1).run())
        # One message per carve plus the final one
        self.assertEqual(len(messages), 5 * 4 - 1 + 1)
        self.assertEqual(messages[-1], "Done")

    def test_rejects_partially_open_grid(self):
        grid = create_grid(4, 4)
        grid.open_between((0, 0), (1, 0))
        with self.assertRaises(ValueError):
            generate_maze(grid, seed=1)
        # Precondition failure happens before any carving
        self.assertEqual(grid.passage_count(), 1)

if __name__ == '__main__':
    unittest.main()
