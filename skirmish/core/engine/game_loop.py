"""
Fixed-timestep game loop.

Update callbacks run at a constant rate regardless of how fast frames are
rendered. Elapsed time per frame is capped so that a long stall (a debugger
pause, a slow terminal) does not trigger an unbounded burst of updates.
"""

import time
from typing import Callable, Optional


UpdateCallback = Callable[["GameLoop"], None]
RenderCallback = Callable[["GameLoop"], None]


class GameLoop:
    """Drives update and render callbacks at a fixed update rate."""

    def __init__(
        self,
        updates_per_second: int = 60,
        max_frame_time: float = 0.1,
        clock: Callable[[], float] = time.perf_counter,
        sleep: Callable[[float], None] = time.sleep,
        idle_sleep: float = 0.001,
        target_fps: Optional[int] = None
    ):
        """Initialize the loop.

        Args:
            updates_per_second: Fixed number of update steps per second
            max_frame_time: Longest elapsed time counted for a single frame
            clock: Monotonic clock returning seconds
            sleep: Sleep function used while waiting for the next step
            idle_sleep: Seconds to sleep when no update step is due
            target_fps: Most frames rendered per second (None renders every frame)
        """
        if updates_per_second <= 0:
            raise ValueError(f"updates_per_second must be positive: {updates_per_second}")
        if max_frame_time <= 0:
            raise ValueError(f"max_frame_time must be positive: {max_frame_time}")
        if target_fps is not None and target_fps <= 0:
            raise ValueError(f"target_fps must be positive: {target_fps}")

        self.updates_per_second = updates_per_second
        self.fixed_time_step = 1.0 / updates_per_second
        self.max_frame_time = max_frame_time
        self._clock = clock
        self._sleep = sleep
        self._idle_sleep = idle_sleep
        self.min_render_interval = 0.0 if target_fps is None else 1.0 / target_fps

        self.running = False
        self.number_of_updates = 0
        self.number_of_renders = 0
        self.blending_factor = 0.0
        self._accumulated_time = 0.0
        self._previous_instant: Optional[float] = None
        self._last_render: Optional[float] = None

    def exit(self) -> None:
        """Stop the loop at the next frame boundary."""
        self.running = False

    def tick(self, update: UpdateCallback, render: RenderCallback) -> int:
        """Run one frame: all due update steps, then at most one render.

        The render is skipped when the previous one happened less than
        min_render_interval seconds ago.

        Returns:
            Number of update steps that ran this frame
        """
        now = self._clock()
        if self._previous_instant is None:
            self._previous_instant = now

        elapsed = min(now - self._previous_instant, self.max_frame_time)
        self._previous_instant = now
        self._accumulated_time += elapsed

        steps = 0
        while self._accumulated_time >= self.fixed_time_step:
            update(self)
            self.number_of_updates += 1
            self._accumulated_time -= self.fixed_time_step
            steps += 1
            if not self.running:
                return steps

        self.blending_factor = self._accumulated_time / self.fixed_time_step
        if self._last_render is None or now - self._last_render >= self.min_render_interval:
            render(self)
            self.number_of_renders += 1
            self._last_render = now
        return steps

    def run(self, update: UpdateCallback, render: RenderCallback) -> None:
        """Run frames until exit() is called.

        Exceptions raised by the callbacks stop the loop and propagate.
        """
        self.running = True
        self._previous_instant = None
        self._accumulated_time = 0.0
        self._last_render = None

        try:
            while self.running:
                steps = self.tick(update, render)
                if steps == 0 and self.running:
                    self._sleep(self._idle_sleep)
        finally:
            self.running = False
