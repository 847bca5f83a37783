"""Concrete front-end renderers.

- headless_renderer.py: In-memory frames, for tests and batch runs
- terminal_renderer.py: ASCII shading printed to a text stream
"""

from .headless_renderer import HeadlessRenderer
from .terminal_renderer import TerminalRenderer, bitmap_to_ascii

__all__ = [
    "HeadlessRenderer",
    "TerminalRenderer",
    "bitmap_to_ascii",
]
