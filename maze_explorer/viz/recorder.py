import logging
import os
from datetime import datetime
from typing import Optional

import cv2
import numpy as np
import pygame

logger = logging.getLogger(__name__)


def default_output_path(prefix: str = "maze", directory: str = "recordings") -> str:
    os.makedirs(directory, exist_ok=True)
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    return os.path.join(directory, f"{prefix}_{ts}.mp4")


def surface_to_bgr(surface: pygame.Surface) -> np.ndarray:
    """Copies a surface into an OpenCV frame: (height, width, 3) uint8, BGR."""
    # array3d is (width, height, 3) RGB
    view = pygame.surfarray.array3d(surface)
    frame = np.ascontiguousarray(np.transpose(view, (1, 0, 2)))
    return cv2.cvtColor(frame, cv2.COLOR_RGB2BGR)


class VideoRecorder:
    def __init__(self, active: bool = False, output_file: Optional[str] = None, fps: int = 30):
        self.active = active
        self.output_file = output_file
        self.fps = fps
        self.writer = None
        self.frame_size = None
        self.frame_count = 0

        if self.active and not self.output_file:
            self.output_file = default_output_path()

    def capture_frame(self, surface: pygame.Surface):
        if not self.active:
            return

        frame = surface_to_bgr(surface)
        height, width = frame.shape[:2]

        if self.writer is None:
            self.frame_size = (width, height)
            fourcc = cv2.VideoWriter_fourcc(*'mp4v')
            self.writer = cv2.VideoWriter(self.output_file, fourcc, self.fps, self.frame_size)
            logger.info(f"Recording started: {self.output_file}")
        elif (width, height) != self.frame_size:
            # VideoWriter silently drops frames of the wrong size
            frame = cv2.resize(frame, self.frame_size)

        self.writer.write(frame)
        self.frame_count += 1

    def stop(self):
        if self.writer:
            self.writer.release()
            logger.info(f"Video saved: {self.output_file} ({self.frame_count} frames)")
            self.writer = None
