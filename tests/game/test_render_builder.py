"""
Unit tests for battle frame composition.
"""
from skirmish.core.config_loader import GameConfig
from skirmish.core.renderable import Bitmap, Color
from skirmish.game.render_builder import RenderBuilder


class TestRenderBuilder:
    """Test frames built from combatant state."""

    def setup_method(self):
        self.config = GameConfig()
        self.palette = self.config.palette
        self.builder = RenderBuilder(self.config)

    def test_frame_fills_screen(self, alice, vim):
        frame = self.builder.build_frame([alice, vim])

        assert (frame.width, frame.height) == (64, 32)
        assert frame.get_pixel(0, 0) == self.palette.background

    def test_bars_stack_from_bottom(self, alice, vim):
        assert self.builder.bar_height() == 4

        frame = self.builder.build_frame([alice, vim])

        # Alice on rows 22-25, Vim on rows 27-30, one pixel margin around
        for y in (22, 25, 27, 30):
            assert frame.get_pixel(1, y) == self.palette.health
            assert frame.get_pixel(62, y) == self.palette.health
        assert frame.get_pixel(1, 20) == self.palette.background

    def test_bars_have_foreground_border(self, alice, vim):
        frame = self.builder.build_frame([alice, vim])

        # Borders cover rows 21-26 and 26-31, sharing the row between bars
        for y in (21, 26, 31):
            assert frame.get_pixel(1, y) == self.palette.foreground
        for y in (21, 22, 30):
            assert frame.get_pixel(0, y) == self.palette.foreground
            assert frame.get_pixel(63, y) == self.palette.foreground
        assert frame.get_pixel(0, 20) == self.palette.background

    def test_bar_shows_lost_health(self, alice, vim):
        vim.health.damage(8)

        frame = self.builder.build_frame([alice, vim])

        # 2 of 10 hit points over a 62 pixel bar rounds to 12 pixels
        assert self.builder.health_bar_fill(vim, 62) == 12
        assert frame.get_pixel(12, 27) == self.palette.health
        assert frame.get_pixel(13, 27) == self.palette.damage
        assert frame.get_pixel(62, 27) == self.palette.damage
        assert frame.get_pixel(62, 22) == self.palette.health

    def test_defeated_bar_is_all_damage(self, alice, vim):
        vim.health.damage(100)

        frame = self.builder.build_frame([alice, vim])

        assert frame.get_pixel(1, 27) == self.palette.damage

    def test_splash_drawn_at_origin(self, alice, vim):
        splash = Bitmap.filled(8, 8, Color(1, 2, 3))

        frame = self.builder.build_frame([alice, vim], splash)

        assert frame.get_pixel(7, 7) == Color(1, 2, 3)
        assert frame.get_pixel(8, 8) == self.palette.background

    def test_building_does_not_change_combatants(self, alice, vim):
        vim.health.damage(3)
        self.builder.build_frame([alice, vim])

        assert vim.health.current == 7
        assert alice.health.current == 10
