"""Game configuration loader.

Configuration is read once from YAML and handed to the game as an immutable
GameConfig value. Values missing from the file keep their defaults, and a
missing file falls back to the defaults entirely.
"""

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Optional

import yaml

from .renderable import Color
from .renderer import RendererConfig


DEFAULT_CONFIG_PATH = "assets/config/game.yaml"


@dataclass(frozen=True)
class Palette:
    """Colors used when composing frames."""
    background: Color = Color(0x00, 0x11, 0x99)
    foreground: Color = Color(0x00, 0x11, 0x11)
    health: Color = Color(0xEE, 0xEE, 0xDD)
    damage: Color = Color(0xAA, 0x22, 0x22)


@dataclass(frozen=True)
class GameConfig:
    renderer: RendererConfig = field(default_factory=RendererConfig)
    palette: Palette = field(default_factory=Palette)
    updates_per_second: int = 60
    max_frame_time: float = 0.1
    updates_per_turn: int = 30
    max_turns: Optional[int] = 100
    dice_sides: int = 100
    seed: Optional[int] = None
    splash_image: Optional[str] = "assets/images/example.ppm"
    exit_when_finished: bool = True

    def __post_init__(self):
        for name in ("updates_per_second", "updates_per_turn", "dice_sides"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")
        if self.max_frame_time <= 0:
            raise ValueError(f"max_frame_time must be positive, got {self.max_frame_time}")
        if self.max_turns is not None and self.max_turns <= 0:
            raise ValueError(f"max_turns must be positive, got {self.max_turns}")


def find_project_root() -> Path:
    """Walk up from this package to the directory holding assets/."""
    current_dir = Path(__file__).parent
    for _ in range(5):  # Limit search depth
        if (current_dir / "assets").is_dir():
            return current_dir
        current_dir = current_dir.parent
    return Path.cwd()


def load_game_config(path: Optional[str] = None) -> GameConfig:
    """Load configuration from YAML, falling back to defaults.

    Args:
        path: Config file path; relative paths resolve against the project root

    Returns:
        GameConfig with file values applied over the defaults

    Raises:
        ValueError: If the file contains invalid values
    """
    config_path = Path(path or DEFAULT_CONFIG_PATH)
    if not config_path.is_absolute():
        config_path = find_project_root() / config_path

    if not config_path.exists():
        print(f"Warning: Game config file not found: {config_path}")
        return GameConfig()

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Could not parse config {config_path}: {e}") from e

    return parse_game_config(data, source=str(config_path))


def parse_game_config(data: dict[str, Any], source: str = "<config>") -> GameConfig:
    """Apply loaded YAML sections over the default GameConfig."""
    if not isinstance(data, dict):
        raise ValueError(f"Config in {source} must be a mapping")

    config = GameConfig()

    try:
        renderer_section = data.get("renderer") or {}
        renderer = replace(
            config.renderer,
            **{key: (str(value) if key == "title" else int(value))
               for key, value in renderer_section.items()
               if key in ("width", "height", "title", "target_fps")}
        )

        palette_section = data.get("palette") or {}
        palette = replace(
            config.palette,
            **{key: Color.from_hex(str(value))
               for key, value in palette_section.items()
               if key in ("background", "foreground", "health", "damage")}
        )

        loop_section = data.get("loop") or {}
        battle_section = data.get("battle") or {}
        assets_section = data.get("assets") or {}

        overrides: dict[str, Any] = {"renderer": renderer, "palette": palette}
        if "updates_per_second" in loop_section:
            overrides["updates_per_second"] = int(loop_section["updates_per_second"])
        if "max_frame_time" in loop_section:
            overrides["max_frame_time"] = float(loop_section["max_frame_time"])
        if "updates_per_turn" in loop_section:
            overrides["updates_per_turn"] = int(loop_section["updates_per_turn"])
        if "max_turns" in battle_section:
            max_turns = battle_section["max_turns"]
            overrides["max_turns"] = None if max_turns is None else int(max_turns)
        if "dice_sides" in battle_section:
            overrides["dice_sides"] = int(battle_section["dice_sides"])
        if "seed" in battle_section:
            seed = battle_section["seed"]
            overrides["seed"] = None if seed is None else int(seed)
        if "exit_when_finished" in battle_section:
            overrides["exit_when_finished"] = bool(battle_section["exit_when_finished"])
        if "splash_image" in assets_section:
            splash = assets_section["splash_image"]
            overrides["splash_image"] = None if splash is None else os.fspath(splash)
    except (TypeError, AttributeError) as e:
        raise ValueError(f"Invalid config value in {source}: {e}") from e

    return replace(config, **overrides)
