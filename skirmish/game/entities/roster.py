"""Combatant roster loaded from YAML.

A roster file defines the weapons available, the combatants that can be
built from them and which two combatants meet in the default battle:

    weapons:
      longsword: {name: Longsword, hit_rate: 70, damage: 8}
    combatants:
      alice: {name: Alice, max_health: 10, weapon: longsword,
              stats: {accuracy: 0, evasion: 0, strength: 0, defense: 0}}
    battle:
      first: alice
      second: vim

Every call to create_combatant builds a fresh Combatant, so combatants are
never shared between battles.
"""

import os
from dataclasses import dataclass, field
from typing import Any, Optional

import yaml

from .combatant import Combatant, CombatStats, DEFAULT_MAX_HEALTH
from .weapon import Weapon


STAT_NAMES = ("accuracy", "evasion", "strength", "defense")


class RosterError(ValueError):
    """Raised when a roster file is missing pieces or references unknown keys."""


@dataclass(frozen=True)
class CombatantTemplate:
    """Initial values for one combatant."""
    name: str
    max_health: int = DEFAULT_MAX_HEALTH
    stats: dict[str, int] = field(default_factory=dict)
    weapon: Optional[str] = None  # Key into Roster.weapons


@dataclass
class Roster:
    """Weapons and combatant templates available for battles."""
    weapons: dict[str, Weapon]
    combatants: dict[str, CombatantTemplate]
    first: Optional[str] = None
    second: Optional[str] = None

    def create_combatant(self, key: str) -> Combatant:
        """Build a new combatant from its template.

        Raises:
            RosterError: If the combatant or its weapon is unknown
        """
        if key not in self.combatants:
            raise RosterError(f"No combatant named '{key}' in roster")
        template = self.combatants[key]

        combatant = Combatant(template.name, max_health=template.max_health)
        combatant.stats = CombatStats(**template.stats)

        if template.weapon is not None:
            if template.weapon not in self.weapons:
                raise RosterError(f"Combatant '{key}' uses unknown weapon '{template.weapon}'")
            combatant.equip(self.weapons[template.weapon])

        return combatant

    def create_battle_pair(self) -> tuple[Combatant, Combatant]:
        """Build the two combatants named in the roster's battle section."""
        if self.first is None or self.second is None:
            raise RosterError("Roster does not define a battle pair")
        return self.create_combatant(self.first), self.create_combatant(self.second)


def default_roster() -> Roster:
    """The reference duel: Alice and Vim, both with a longsword."""
    return Roster(
        weapons={"longsword": Weapon("Longsword", 70, 8)},
        combatants={
            "alice": CombatantTemplate(name="Alice", weapon="longsword"),
            "vim": CombatantTemplate(name="Vim", weapon="longsword"),
        },
        first="alice",
        second="vim",
    )


def load_roster(path: str) -> Roster:
    """Load a roster from a YAML file.

    Args:
        path: Path to the roster YAML file

    Returns:
        Parsed Roster

    Raises:
        FileNotFoundError: If the file does not exist
        RosterError: If the file structure is invalid
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Roster file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise RosterError(f"Could not parse roster {path}: {e}") from e

    return parse_roster(data, source=path)


def parse_roster(data: dict[str, Any], source: str = "<roster>") -> Roster:
    """Convert loaded YAML data into a Roster."""
    if not isinstance(data, dict):
        raise RosterError(f"Roster in {source} must be a mapping")

    try:
        weapons = {
            key: Weapon(
                name=str(entry.get("name", key)),
                hit_rate=int(entry["hit_rate"]),
                damage=int(entry["damage"]),
            )
            for key, entry in (data.get("weapons") or {}).items()
        }

        combatants = {}
        for key, entry in (data.get("combatants") or {}).items():
            stats = entry.get("stats") or {}
            unknown = set(stats) - set(STAT_NAMES)
            if unknown:
                raise RosterError(f"Unknown stats for '{key}' in {source}: {sorted(unknown)}")
            combatants[key] = CombatantTemplate(
                name=str(entry.get("name", key)),
                max_health=int(entry.get("max_health", DEFAULT_MAX_HEALTH)),
                stats={name: int(value) for name, value in stats.items()},
                weapon=entry.get("weapon"),
            )
    except RosterError:
        raise
    except KeyError as e:
        raise RosterError(f"Invalid roster structure in {source}: missing {e}")
    except (TypeError, ValueError, AttributeError) as e:
        raise RosterError(f"Invalid roster value in {source}: {e}")

    battle = data.get("battle") or {}
    if not isinstance(battle, dict):
        raise RosterError(f"Battle section in {source} must be a mapping with first and second")
    roster = Roster(
        weapons=weapons,
        combatants=combatants,
        first=battle.get("first"),
        second=battle.get("second"),
    )

    for key in (roster.first, roster.second):
        if key is not None and key not in combatants:
            raise RosterError(f"Battle in {source} references unknown combatant '{key}'")
    for key, template in combatants.items():
        if template.weapon is not None and template.weapon not in weapons:
            raise RosterError(f"Combatant '{key}' in {source} uses unknown weapon '{template.weapon}'")

    return roster
