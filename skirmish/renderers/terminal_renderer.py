import sys
from typing import Optional, TextIO

import numpy as np

from ..core.renderer import RendererConfig
from ..core.renderable import Bitmap
from .headless_renderer import HeadlessRenderer


# Darkest to brightest
SHADES = " .:-=+*#%@"


def bitmap_to_ascii(bitmap: Bitmap, shades: str = SHADES) -> list[str]:
    """Convert a bitmap to one line of shade characters per pixel row."""
    luminance = bitmap.pixels.astype(np.float32) @ np.array([0.299, 0.587, 0.114], dtype=np.float32)
    indices = np.clip((luminance / 256.0 * len(shades)).astype(np.int32), 0, len(shades) - 1)
    return ["".join(shades[i] for i in row) for row in indices]


class TerminalRenderer(HeadlessRenderer):
    """Prints each presented frame as ASCII shading."""

    def __init__(self, config: Optional[RendererConfig] = None, stream: Optional[TextIO] = None):
        super().__init__(config, keep_frames=1)
        self.stream = stream or sys.stdout
        self._frame_count = 0

    def initialize(self) -> None:
        super().initialize()
        self.stream.write(f"Initializing TerminalRenderer ({self.config.width}x{self.config.height})\n")
        self.stream.write("=" * self.config.width + "\n")

    def cleanup(self) -> None:
        self.stream.write("\nTerminalRenderer cleanup complete\n")
        self.stream.flush()

    def present(self) -> None:
        super().present()
        self._frame_count += 1
        self.stream.write(f"\n--- Frame {self._frame_count} ---\n")
        for line in bitmap_to_ascii(self.screen):
            self.stream.write(line + "\n")
        self.stream.flush()
