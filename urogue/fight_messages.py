"""Combat messages and small facts about weapons used in fights."""

from __future__ import annotations

import random
from typing import Optional

from urogue.encumbrance import ItemKind

_PLAYER_HIT = (
    " scored an excellent hit on ",
    " hit ",
    " have injured ",
    " swing and hit ",
)
_MONSTER_HIT = (
    " scored an excellent hit on ",
    " hit ",
    " has injured ",
    " swings and hits ",
)
_PLAYER_MISS = (" miss", " swing and miss", " barely miss", " don't hit")
_MONSTER_MISS = (" misses", " swings and misses", " barely misses", " doesn't hit")

_ALWAYS_MAGIC = frozenset(
    {ItemKind.POTION, ItemKind.SCROLL, ItemKind.STICK, ItemKind.RING, ItemKind.ARTIFACT}
)

_LAUNCHERS = {
    "bolt": "crossbow",
    "arrow": "bow",
    "silver arrow": "bow",
    "rock": "sling",
}


def _pick(variant: Optional[int], choices: tuple[str, ...]) -> str:
    if variant is None:
        return random.choice(choices)
    if not 0 <= variant < len(choices):
        raise ValueError(f"message variant {variant} out of range")
    return choices[variant]


def combatant_name(who: Optional[str], upper: bool = False, blind: bool = False) -> str:
    """How a combatant is named; None stands for the player."""
    if who is None:
        name = "you"
    elif blind:
        name = "the monster"
    else:
        name = f"the {who}"
    if upper:
        name = name[:1].upper() + name[1:]
    return name


def hit_message(attacker: Optional[str], defender: Optional[str],
                variant: Optional[int] = None, blind: bool = False) -> str:
    """Message for a successful blow; None names the player."""
    verbs = _PLAYER_HIT if attacker is None else _MONSTER_HIT
    verb = _pick(variant, verbs)
    return (combatant_name(attacker, True, blind) + verb
            + combatant_name(defender, False, blind) + ".")


def miss_message(attacker: Optional[str], defender: Optional[str],
                 variant: Optional[int] = None, blind: bool = False) -> str:
    """Message for a swing that misses; None names the player."""
    verbs = _PLAYER_MISS if attacker is None else _MONSTER_MISS
    verb = _pick(variant, verbs)
    return (combatant_name(attacker, True, blind) + verb + " "
            + combatant_name(defender, False, blind) + ".")


def thunk_message(weapon_name: Optional[str], monster: str, blind: bool = False) -> str:
    """A missile thrown by the player hits a monster."""
    target = combatant_name(monster, False, blind)
    if weapon_name is None:
        return f"You hit {target}."
    return f"The {weapon_name} hits {target}."


def m_thunk_message(weapon_name: Optional[str], monster: str, blind: bool = False) -> str:
    """A missile from a monster hits the player."""
    thrower = combatant_name(monster, True, blind)
    if weapon_name is None:
        return f"{thrower} hits you."
    return f"{thrower}'s {weapon_name} hits you."


def bounce_message(weapon_name: Optional[str], monster: str, blind: bool = False) -> str:
    """A missile thrown by the player misses a monster."""
    target = combatant_name(monster, False, blind)
    if weapon_name is None:
        return f"You missed {target}."
    return f"The {weapon_name} misses {target}."


def m_bounce_message(weapon_name: Optional[str], monster: str, blind: bool = False) -> str:
    """A missile from a monster misses the player."""
    thrower = combatant_name(monster, True, blind)
    if weapon_name is None:
        return f"{thrower} misses you."
    return f"{thrower}'s {weapon_name} misses you."


def is_magic(kind: ItemKind, ac: int = 0, base_class: int = 0,
             hplus: int = 0, dplus: int = 0) -> bool:
    """Whether an object radiates magic."""
    if kind is ItemKind.ARMOR:
        return ac != base_class
    if kind is ItemKind.WEAPON:
        return hplus != 0 or dplus != 0
    return kind in _ALWAYS_MAGIC


def launcher_for(missile: str) -> Optional[str]:
    """The weapon a monster must wield to fire the given missile."""
    return _LAUNCHERS.get(missile)