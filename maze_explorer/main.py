import argparse
import sys
import os
import time
import logging

# Ensure project root is in path so we can import 'maze_explorer' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

MIN_SIZE = 10
MAX_SIZE = 300
DEFAULT_WIDTH = 50
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def maze_dimension(value: str) -> int:
    try:
        size = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer")
    if not MIN_SIZE <= size <= MAX_SIZE:
        raise argparse.ArgumentTypeError(f"There must be between {MIN_SIZE} and {MAX_SIZE} cells, got {size}")
    return size

def colour_value(value: str) -> str:
    from maze_explorer.viz.theme import parse_colour
    try:
        parse_colour(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not a colour")
    return value

def default_height(width: int) -> int:
    from maze_explorer.viz.renderer import rows_for_window
    rows = rows_for_window(WINDOW_WIDTH, WINDOW_HEIGHT, width)
    return max(MIN_SIZE, min(MAX_SIZE, rows))

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Maze Explorer: perfect maze generator and A* solver")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a new maze")
    gen_parser.add_argument("--width", type=maze_dimension, default=DEFAULT_WIDTH, help="Maze Width (columns)")
    gen_parser.add_argument("--height", type=maze_dimension, default=None, help="Maze Height (rows, default: fit window)")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--solve", action="store_true", help="Find the route from top-left to bottom-right")
    gen_parser.add_argument("--text", action="store_true", help="Print the maze as text")
    gen_parser.add_argument("--stats", action="store_true", help="Log structural statistics")
    gen_parser.add_argument("--visual", action="store_true", help="Show visualization")
    gen_parser.add_argument("--record", action="store_true", help="Record generation video")
    gen_parser.add_argument("--background", type=colour_value, help="Background colour")
    gen_parser.add_argument("--foreground", type=colour_value, help="Wall colour")
    gen_parser.add_argument("--solution", type=colour_value, help="Solution path colour")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time generation and solving")
    bench_parser.add_argument("--sizes", type=maze_dimension, nargs="+", default=[10, 50, 100, 300], help="Square maze sizes")
    bench_parser.add_argument("--seed", type=int, default=123, help="Random Seed")

    return parser

def run_generate(args, logger) -> int:
    from maze_explorer.core.grid import create_grid
    from maze_explorer.algo.dfs import RecursiveBacktracker

    height = args.height if args.height is not None else default_height(args.width)
    logger.info(f"Generating {args.width}x{height} maze...")
    grid = create_grid(args.width, height)

    if args.visual or args.record:
        logger.info("Visual mode enabled - Opening window...")
        from maze_explorer.viz.renderer import Renderer
        from maze_explorer.viz.theme import Theme

        theme = Theme.from_strings(args.background, args.foreground, args.solution)
        generator = RecursiveBacktracker(grid, seed=args.seed, progress_interval=1)
        renderer = Renderer(grid, generator=generator, theme=theme, width=WINDOW_WIDTH,
                            height=WINDOW_HEIGHT, record=args.record, show_solution=args.solve)
        if args.record:
            logger.info(f"Recording video to {renderer.recorder.output_file}")
        renderer.init_window()
        renderer.run_loop()
        return 0

    t0 = time.time()
    RecursiveBacktracker(grid, seed=args.seed).run_all()
    logger.info(f"Generation complete in {time.time() - t0:.4f}s")

    if args.stats:
        from maze_explorer.core.complexity import MazeAnalyzer
        logger.info(f"Stats: {MazeAnalyzer.calculate_stats(grid)}")

    path = None
    if args.solve:
        from maze_explorer.algo.solvers import AStar
        solver = AStar(grid)
        if solver.solve() is None:
            logger.warning("No route found")
        else:
            path = solver.path
            logger.info(f"Path length: {solver.path_cost} moves, expanded {solver.visited_count} cells")

    if args.text:
        from maze_explorer.viz.text import render_text
        print(render_text(grid, path))

    return 0

def run_benchmark(args, logger) -> int:
    from maze_explorer.core.grid import create_grid
    from maze_explorer.algo.dfs import generate_maze
    from maze_explorer.algo.solvers import AStar

    logger.info(f"Running benchmark for sizes {args.sizes}...")
    print(f"\n{'SIZE':<10} | {'GEN (s)':<10} | {'SOLVE (s)':<10} | {'PATH LEN':<10} | {'VISITED':<10}")
    print("-" * 62)

    for size in args.sizes:
        grid = create_grid(size, size)
        t0 = time.time()
        generate_maze(grid, seed=args.seed)
        gen_time = time.time() - t0

        solver = AStar(grid)
        t0 = time.time()
        solver.solve()
        solve_time = time.time() - t0

        label = f"{size}x{size}"
        print(f"{label:<10} | {gen_time:<10.4f} | {solve_time:<10.4f} | {solver.path_cost:<10} | {solver.visited_count:<10}")

    return 0

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("maze_explorer")

    if args.command is None:
        parser.print_help()
        return 0

    logger.info(f"Running command: {args.command}")

    if args.command == "generate":
        return run_generate(args, logger)
    elif args.command == "benchmark":
        return run_benchmark(args, logger)
    return 0

if __name__ == "__main__":
    sys.exit(main())
