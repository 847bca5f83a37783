"""Battle game layer.

- entities/: Weapons, combatants and rosters
- combat/: Attack formulas and their application
- managers/: Turn sequencing and logging
- render_builder.py: Frame composition
- game.py: Orchestration of services, loop and battle
"""
