"""Core systems shared by the game layer and front ends.

- data/: Combat enums
- events/: Event definitions and the event bus
- engine/: Dice and the fixed-timestep loop
- renderer.py, renderable.py, asset_loader.py, input.py: Platform boundaries
- services.py: Single-slot service registration
- config_loader.py: Immutable game configuration
"""
