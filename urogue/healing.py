"""How fast creatures regain hit points and how fast the hero digests food."""

from __future__ import annotations

from typing import Optional

from urogue.combat import CharacterClass
from urogue.encumbrance import HungerState

POWER_EAT_BONUS = 200
MAX_POWERS = 5


def _cdiv(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def regeneration_profile(char_class, level: int) -> tuple[int, int]:
    """Resting turns before healing starts, and the healing roll size.

    Below level 8 a creature regains one point once it has rested longer
    than the first value; from level 8 on it regains up to the second
    value plus one at a time.
    """
    try:
        cls = CharacterClass(char_class)
    except ValueError:
        raise ValueError(f"unknown character class {char_class!r}") from None
    if cls is CharacterClass.MAGICIAN:
        return 4 - _cdiv(level, 2), level
    if cls is CharacterClass.THIEF:
        return 8 - level, level - 2
    if cls is CharacterClass.CLERIC:
        return 8 - level, level - 3
    if cls is CharacterClass.FIGHTER:
        return 16 - level * 2, level - 5
    return 16 - level, level - 6


def food_consumption(ring_eat_total: int, food_level: int,
                     super_eat: bool = False, power_eat: bool = False,
                     powers: int = 0) -> int:
    """Food used up in one turn.

    ``ring_eat_total`` is what the worn rings eat, ``food_level`` the rate
    set by the pack's weight, and ``powers`` the number of attributes
    boosted by the Crown of Might; each one adds a full share of food.
    """
    if not 0 <= powers <= MAX_POWERS:
        raise ValueError(f"powers must be between 0 and {MAX_POWERS}")
    amount = ring_eat_total + food_level
    if super_eat:
        amount *= 2
    if power_eat:
        amount += POWER_EAT_BONUS
    return amount * (powers + 1)


def hunger_transition(old_food: int, new_food: int,
                      more_time: int) -> Optional[HungerState]:
    """The hunger state entered when food drops from old to new, if any."""
    if more_time <= 0:
        raise ValueError("more_time must be positive")
    if new_food < more_time <= old_food:
        return HungerState.WEAK
    if new_food < 2 * more_time <= old_food:
        return HungerState.HUNGRY
    return None