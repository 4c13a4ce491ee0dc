from abc import ABC, abstractmethod
from typing import Iterator, Optional
from maze_explorer.core.grid import Grid

class Generator(ABC):
    def __init__(self, grid: Grid, seed: Optional[int] = None, progress_interval: int = 100):
        self.grid = grid
        self.seed = seed
        self.progress_interval = max(1, progress_interval)
        self.step_count = 0

    @abstractmethod
    def run(self) -> Iterator[str]:
        """
        Yields status strings every `progress_interval` steps.
        The grid is carved in place on self.grid.
        """
        pass

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass
