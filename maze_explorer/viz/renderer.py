import logging
import math
from typing import Iterable, List, NamedTuple, Optional, Tuple

import pygame

from maze_explorer.core.grid import Grid, create_grid
from maze_explorer.algo.dfs import RecursiveBacktracker
from maze_explorer.algo.solvers import AStar
from maze_explorer.viz.theme import Theme
from maze_explorer.viz.recorder import VideoRecorder

logger = logging.getLogger(__name__)

MARGIN = 20


class Layout(NamedTuple):
    cell_size: float
    x0: float
    y0: float


def rows_for_window(screen_width: int, screen_height: int, columns: int, margin: int = MARGIN) -> int:
    """Rows of square cells that fit below `columns` spanning the window width."""
    cell_size = (screen_width - 2 * margin) / columns
    return int((screen_height - 2 * margin) // cell_size)


def fit_layout(screen_width: int, screen_height: int, columns: int, rows: int, margin: int = MARGIN) -> Layout:
    """Largest square cell that fits the whole grid, centred on screen."""
    available_w = screen_width - margin * 2
    available_h = screen_height - margin * 2
    cell_size = max(1.0, min(available_w / columns, available_h / rows))
    x0 = (screen_width - columns * cell_size) / 2
    y0 = (screen_height - rows * cell_size) / 2
    return Layout(cell_size, x0, y0)


def _shade(surface: pygame.Surface, colour: pygame.Color, x: float, y: float, size: float):
    # Blit through an alpha tile so translucent colours blend
    side = max(1, math.ceil(size))
    tile = pygame.Surface((side, side), pygame.SRCALPHA)
    tile.fill(colour)
    surface.blit(tile, (x, y))


def draw_maze(surface: pygame.Surface, grid: Grid, layout: Layout, theme: Theme,
              path: Optional[Iterable[Tuple[int, int]]] = None):
    surface.fill(theme.background)
    size, x0, y0 = layout

    _shade(surface, theme.start, x0, y0, size)
    _shade(surface, theme.finish, x0 + size * (grid.width - 1), y0 + size * (grid.height - 1), size)

    colour = theme.foreground
    for cell, walls in grid.cells.items():
        left = x0 + cell.x * size
        top = y0 + cell.y * size
        right = left + size
        bottom = top + size
        if walls.top:
            pygame.draw.line(surface, colour, (left, top), (right, top))
        if walls.right:
            pygame.draw.line(surface, colour, (right, top), (right, bottom))
        if walls.bottom:
            pygame.draw.line(surface, colour, (right, bottom), (left, bottom))
        if walls.left:
            pygame.draw.line(surface, colour, (left, bottom), (left, top))

    if path:
        inset = size * 0.35
        dot = max(1, int(size * 0.3))
        for px, py in path:
            rect = pygame.Rect(int(x0 + px * size + inset), int(y0 + py * size + inset), dot, dot)
            pygame.draw.rect(surface, theme.solution, rect)


class Renderer:
    def __init__(self, grid: Grid, generator=None, theme: Optional[Theme] = None,
                 width=1280, height=720, record=False, output_file=None,
                 show_solution=False, steps_per_frame=None):
        self.grid = grid
        self.generator = generator
        self.theme = theme or Theme()
        self.screen_width = width
        self.screen_height = height
        self.show_solution = show_solution

        # Roughly two seconds of animation at 60 fps
        self.steps_per_frame = steps_per_frame or max(1, len(grid) // 120)

        self.recorder = VideoRecorder(active=record, output_file=output_file)

        self.solution: Optional[List] = None
        self.gen_iter = None
        self.gen_finished = generator is None
        self.font = None
        self.running = True
        self.clock = None
        self.surface = None

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Maze Explorer - {self.grid.width}x{self.grid.height}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)

    def regenerate(self):
        logger.info(f"Regenerating {self.grid.width}x{self.grid.height} maze...")
        self.grid = create_grid(self.grid.width, self.grid.height)
        self.generator = RecursiveBacktracker(self.grid, progress_interval=1)
        self.gen_iter = None
        self.gen_finished = False
        self.solution = None

    def solution_path(self) -> List:
        # The grid is fixed once carved, so one search per maze is enough
        if self.solution is None:
            solver = AStar(self.grid)
            if solver.solve() is None:
                logger.warning("No route from start to finish")
            self.solution = solver.path
        return self.solution

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_s:
                    self.show_solution = not self.show_solution
                elif event.key == pygame.K_r:
                    self.regenerate()

    def step_generator(self):
        if self.gen_finished:
            return
        if self.gen_iter is None:
            self.gen_iter = self.generator.run()
        try:
            for _ in range(self.steps_per_frame):
                next(self.gen_iter)
        except StopIteration:
            self.gen_finished = True

    def draw(self):
        layout = fit_layout(self.screen_width, self.screen_height, self.grid.width, self.grid.height)
        path = None
        if self.show_solution and self.gen_finished:
            path = self.solution_path()
        draw_maze(self.surface, self.grid, layout, self.theme, path)

    def draw_hud(self):
        fps = int(self.clock.get_fps())
        status = "Done" if self.gen_finished else "Carving"
        info = [
            f"FPS: {fps}",
            f"Size: {self.grid.width}x{self.grid.height}",
            f"Status: {status}",
            "[S] solution  [R] new maze  [Esc] quit",
        ]
        if self.show_solution and self.gen_finished:
            path = self.solution_path()
            info.append(f"Path: {len(path) - 1} moves" if path else "Path: none")
        if self.recorder.active:
            info.append("REC")

        for i, text in enumerate(info):
            lbl = self.font.render(text, True, self.theme.foreground)
            self.surface.blit(lbl, (10, 10 + i * 20))

    def run_loop(self):
        while self.running:
            self.handle_input()
            self.step_generator()

            self.draw()
            self.draw_hud()
            pygame.display.flip()

            if self.recorder.active:
                self.recorder.capture_frame(self.surface)

            self.clock.tick(60)

        self.recorder.stop()
        pygame.quit()
