"""
Frame composition for the battle screen.

This module turns the current battle state into a finished Bitmap that any
renderer can draw. It only reads combatants; it never changes them.
"""
from typing import Optional, Sequence

from ..core.config_loader import GameConfig
from ..core.renderable import Bitmap
from .entities.combatant import Combatant


class RenderBuilder:
    """Builds full-screen frames from combatant state."""

    def __init__(self, config: GameConfig, margin: int = 1):
        self.config = config
        self.margin = margin

    @property
    def screen_size(self) -> tuple[int, int]:
        return (self.config.renderer.width, self.config.renderer.height)

    def bar_height(self) -> int:
        _, height = self.screen_size
        return max(1, height // 8)

    def health_bar_fill(self, combatant: Combatant, bar_width: int) -> int:
        """Number of filled pixels in a health bar of the given width."""
        health = combatant.health
        if health.max <= 0:
            return bar_width
        return round(bar_width * health.current / health.max)

    def build_frame(
        self,
        combatants: Sequence[Combatant],
        splash: Optional[Bitmap] = None
    ) -> Bitmap:
        """
        Compose a frame: background, optional splash image, one health bar
        per combatant stacked from the bottom of the screen. Each bar sits on
        a foreground-colored border one pixel wider on every side.

        Args:
            combatants: Combatants whose health bars are drawn, top to bottom
            splash: Optional image drawn at the top-left corner

        Returns:
            Bitmap the size of the screen
        """
        width, height = self.screen_size
        palette = self.config.palette

        frame = Bitmap.filled(width, height, palette.background)
        if splash is not None:
            frame.blit(splash, 0, 0)

        bar_height = self.bar_height()
        bar_width = max(0, width - 2 * self.margin)
        stride = bar_height + self.margin

        first_row = height - self.margin - stride * len(combatants) + self.margin
        for index, combatant in enumerate(combatants):
            y = first_row + index * stride
            frame.fill_rect(self.margin - 1, y - 1, bar_width + 2, bar_height + 2, palette.foreground)
            frame.fill_rect(self.margin, y, bar_width, bar_height, palette.damage)
            frame.fill_rect(
                self.margin, y, self.health_bar_fill(combatant, bar_width), bar_height, palette.health
            )

        return frame
