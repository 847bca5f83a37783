from abc import ABC, abstractmethod


class InputManager(ABC):
    """Manages input between the user and the game."""

    @abstractmethod
    def is_requesting_close(self) -> bool:
        """Return True if the user or window is asking the game to close."""

    @abstractmethod
    def request_close(self) -> None:
        """Make every later is_requesting_close call return True."""


class SimpleInputManager(InputManager):
    """Flag-based input manager for front ends without a window."""

    def __init__(self):
        self._close_requested = False

    def is_requesting_close(self) -> bool:
        return self._close_requested

    def request_close(self) -> None:
        self._close_requested = True


class ScriptedInputManager(SimpleInputManager):
    """Requests a close after a fixed number of polls."""

    def __init__(self, close_after: int):
        super().__init__()
        self.close_after = close_after
        self.polls = 0

    def is_requesting_close(self) -> bool:
        self.polls += 1
        if self.polls >= self.close_after:
            self.request_close()
        return super().is_requesting_close()
