"""
Service container for platform-specific front-end services.

Each service is implemented and registered by whichever front end runs the
game. Every slot holds exactly one service; registering twice or asking for
a service before it is registered is a wiring error reported immediately.
The combat core never reaches into this container.
"""

from typing import Optional, TypeVar

from .asset_loader import AssetLoader
from .input import InputManager
from .renderer import Renderer


TService = TypeVar("TService")


class AlreadyRegisteredError(RuntimeError):
    """Raised when registering a service whose slot is already taken."""


class NotYetRegisteredError(RuntimeError):
    """Raised when requesting a service that has not been registered."""


class ServiceContainer:
    """A selection of services used to run the game."""

    def __init__(self):
        self._asset_loader: Optional[AssetLoader] = None
        self._renderer: Optional[Renderer] = None
        self._input_manager: Optional[InputManager] = None

    @staticmethod
    def _register(current: Optional[TService], service: TService, name: str) -> TService:
        if current is not None:
            raise AlreadyRegisteredError(f"{name} has already been registered")
        return service

    @staticmethod
    def _require(service: Optional[TService], name: str) -> TService:
        if service is None:
            raise NotYetRegisteredError(f"{name} has not been registered")
        return service

    def register_asset_loader(self, asset_loader: AssetLoader) -> None:
        self._asset_loader = self._register(self._asset_loader, asset_loader, "AssetLoader")

    def register_renderer(self, renderer: Renderer) -> None:
        self._renderer = self._register(self._renderer, renderer, "Renderer")

    def register_input_manager(self, input_manager: InputManager) -> None:
        self._input_manager = self._register(self._input_manager, input_manager, "InputManager")

    @property
    def asset_loader(self) -> AssetLoader:
        return self._require(self._asset_loader, "AssetLoader")

    @property
    def renderer(self) -> Renderer:
        return self._require(self._renderer, "Renderer")

    @property
    def input_manager(self) -> InputManager:
        return self._require(self._input_manager, "InputManager")

    def verify(self) -> None:
        """Raise NotYetRegisteredError if any service is missing."""
        _ = self.asset_loader, self.renderer, self.input_manager
