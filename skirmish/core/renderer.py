from abc import ABC, abstractmethod
from typing import Optional
from dataclasses import dataclass

from .renderable import Bitmap, Color


@dataclass(frozen=True)
class RendererConfig:
    width: int = 64
    height: int = 32
    title: str = "Skirmish"
    target_fps: int = 30


class RenderError(RuntimeError):
    """Any error that occurs while drawing to the screen."""


class Renderer(ABC):

    def __init__(self, config: Optional[RendererConfig] = None):
        self.config = config or RendererConfig()
        self._running = False

    @abstractmethod
    def initialize(self) -> None:
        pass

    @abstractmethod
    def cleanup(self) -> None:
        pass

    @abstractmethod
    def draw(self, bitmap: Bitmap, x: int, y: int) -> None:
        """Draw a bitmap with its top-left corner at (x, y).

        Raises:
            RenderError: If the bitmap cannot be drawn
        """

    @abstractmethod
    def clear(self, color: Color) -> None:
        pass

    @abstractmethod
    def present(self) -> None:
        pass

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self) -> None:
        self._running = True
        self.initialize()

    def stop(self) -> None:
        self._running = False
        self.cleanup()

    def get_screen_size(self) -> tuple[int, int]:
        return (self.config.width, self.config.height)

    def _check_bounds(self, bitmap: Bitmap, x: int, y: int) -> None:
        """Reject draws that start outside the screen."""
        width, height = self.get_screen_size()
        if x < 0 or y < 0 or x >= width or y >= height:
            raise RenderError(
                f"Cannot draw {bitmap.width}x{bitmap.height} bitmap at ({x}, {y}) "
                f"on a {width}x{height} screen"
            )
