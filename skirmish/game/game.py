"""
Main game orchestration class.

This module connects the battle to the platform services: it polls input,
advances the battle one turn at a time on the fixed-timestep loop and draws
a frame after every loop iteration. Combat rules live entirely in the turn
manager and the combat package; nothing here changes them.
"""

from typing import Optional

from ..core.asset_loader import LoadError
from ..core.config_loader import GameConfig
from ..core.engine.game_loop import GameLoop
from ..core.events import EventManager, GameEnded, GameStarted, LogMessage
from ..core.renderable import Bitmap
from ..core.renderer import RenderError
from ..core.services import ServiceContainer
from .managers.turn_manager import BattleOutcome, TurnManager
from .render_builder import RenderBuilder


class GameError(RuntimeError):
    """An error that prevents the game from continuing to run."""


class Game:
    """Main game orchestrator that coordinates services and the battle."""

    def __init__(
        self,
        services: ServiceContainer,
        config: GameConfig,
        battle: TurnManager,
        event_manager: Optional[EventManager] = None
    ):
        self.services = services
        self.config = config
        self.battle = battle
        self.event_manager = event_manager or battle.event_manager or EventManager()
        self.render_builder = RenderBuilder(config)

        self.splash: Optional[Bitmap] = None
        self.running = False
        self.quit_requested = False
        self._updates_since_turn = 0

    def initialize(self) -> None:
        """Start the renderer, load assets and announce the game."""
        self.services.verify()
        self.services.renderer.start()

        if self.config.splash_image:
            try:
                self.splash = self.services.asset_loader.load_bitmap(self.config.splash_image)
            except LoadError as e:
                raise GameError(f"Problem loading bitmap: {e}") from e
            self._emit_log(f"Loaded splash image {self.config.splash_image}", category="ASSET")

        self.event_manager.publish(GameStarted(turn=0, title=self.config.renderer.title))
        self._emit_log(f"{self.config.renderer.title} started")
        self.event_manager.process_events()

        self.running = True

    def _emit_log(self, message: str, category: str = "SYSTEM", level: str = "INFO") -> None:
        """Emit a log message event."""
        self.event_manager.publish(
            LogMessage(
                turn=self.battle.turns_taken,
                message=message,
                category=category,
                level=level,
                source="Game",
            )
        )

    def run(self, loop: Optional[GameLoop] = None) -> Optional[BattleOutcome]:
        """Run the game until the battle ends or a close is requested.

        Returns:
            The battle outcome, or None if the game was closed mid-battle
        """
        self.services.verify()
        loop = loop or GameLoop(
            updates_per_second=self.config.updates_per_second,
            max_frame_time=self.config.max_frame_time,
            target_fps=self.config.renderer.target_fps,
        )

        try:
            self.initialize()
            loop.run(self.update, self.render)
        finally:
            self.cleanup()

        return self.battle.outcome

    def update(self, loop: GameLoop) -> None:
        """Advance one fixed step: input, then at most one battle turn."""
        self.event_manager.process_events()

        if self.services.input_manager.is_requesting_close():
            self.quit_requested = True
            self._emit_log("Close requested", category="INPUT")
            loop.exit()
            return

        if self.battle.is_over:
            if self.config.exit_when_finished:
                loop.exit()
            return

        self._updates_since_turn += 1
        if self._updates_since_turn >= self.config.updates_per_turn:
            self._updates_since_turn = 0
            self.battle.take_turn()
            self.event_manager.process_events()

    def render(self, loop: GameLoop) -> None:
        """Render the current frame."""
        renderer = self.services.renderer
        frame = self.render_builder.build_frame(
            [self.battle.first, self.battle.second], self.splash
        )

        renderer.clear(self.config.palette.background)
        try:
            renderer.draw(frame, 0, 0)
        except RenderError as e:
            raise GameError(f"Render error: {e}") from e
        renderer.present()

    def cleanup(self) -> None:
        """Announce the end of the game and release services."""
        self.running = False

        if self.quit_requested or not self.battle.is_over:
            result = "quit"
        else:
            result = "finished"

        self.event_manager.publish(GameEnded(turn=self.battle.turns_taken, result=result))
        self.event_manager.flush()

        renderer = self.services.renderer
        if renderer.is_running:
            renderer.stop()
