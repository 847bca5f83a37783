from typing import Optional

from ..core.renderer import Renderer, RendererConfig, RenderError
from ..core.renderable import Bitmap, Color


class HeadlessRenderer(Renderer):
    """Composes frames into an in-memory screen buffer and keeps them."""

    def __init__(self, config: Optional[RendererConfig] = None, keep_frames: Optional[int] = None):
        super().__init__(config)
        width, height = self.get_screen_size()
        self.screen = Bitmap.filled(width, height, Color(0, 0, 0))
        self.frames: list[Bitmap] = []
        self.keep_frames = keep_frames
        self.draw_calls = 0

    def initialize(self) -> None:
        self.frames.clear()

    def cleanup(self) -> None:
        pass

    def draw(self, bitmap: Bitmap, x: int, y: int) -> None:
        if not self.is_running:
            raise RenderError("Renderer has not been started")
        self._check_bounds(bitmap, x, y)
        self.screen.blit(bitmap, x, y)
        self.draw_calls += 1

    def clear(self, color: Color) -> None:
        self.screen.fill_rect(0, 0, self.screen.width, self.screen.height, color)

    def present(self) -> None:
        self.frames.append(self.screen.copy())
        if self.keep_frames is not None and len(self.frames) > self.keep_frames:
            del self.frames[0]

    @property
    def last_frame(self) -> Optional[Bitmap]:
        return self.frames[-1] if self.frames else None
