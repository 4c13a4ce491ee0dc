import sys
import os
import time
import argparse
from typing import List

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_explorer.core.grid import create_grid
from maze_explorer.core.complexity import MazeAnalyzer
from maze_explorer.algo.dfs import generate_maze
from maze_explorer.algo.solvers import AStar

def mean(values: List[float]) -> float:
    return sum(values) / len(values) if values else 0.0

def run_benchmark():
    parser = argparse.ArgumentParser(description="A* Solver Benchmark")
    parser.add_argument("--width", type=int, default=300, help="Maze Width")
    parser.add_argument("--height", type=int, default=300, help="Maze Height")
    parser.add_argument("--runs", type=int, default=10, help="Number of mazes to average over")
    parser.add_argument("--seed", type=int, default=0, help="Seed of the first maze")
    args = parser.parse_args()
    if args.runs < 1:
        parser.error("--runs must be at least 1")

    print(f"=== A* SOLVER BENCHMARK ===")
    print(f"Size: {args.width}x{args.height} | Runs: {args.runs}")
    print("-" * 50)

    gen_times, solve_times, path_lens, visited, dead_ends = [], [], [], [], []

    for run in range(args.runs):
        grid = create_grid(args.width, args.height)

        t0 = time.time()
        generate_maze(grid, seed=args.seed + run)
        gen_times.append(time.time() - t0)

        dead_ends.append(MazeAnalyzer.calculate_stats(grid)["dead_end_percent"])

        solver = AStar(grid)
        t0 = time.time()
        solver.solve()
        solve_times.append(time.time() - t0)

        path_lens.append(solver.path_cost)
        visited.append(solver.visited_count)

    cells = args.width * args.height
    print(f"Generation : {mean(gen_times):.4f}s avg ({cells / mean(gen_times):,.0f} cells/sec)")
    print(f"Solve      : {mean(solve_times):.4f}s avg")
    print(f"Path length: {mean(path_lens):.1f} moves avg")
    print(f"Expanded   : {mean(visited):.1f} cells avg ({100 * mean(visited) / cells:.1f}% of grid)")
    print(f"Dead ends  : {mean(dead_ends):.1f}% avg")

if __name__ == "__main__":
    run_benchmark()
