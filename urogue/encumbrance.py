"""Pack weight and how much the hero can carry."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass
from typing import Iterable, Optional


class HungerState(enum.Enum):
    OK = 0
    HUNGRY = 1
    WEAK = 2
    FAINT = 3


class ItemKind(enum.Enum):
    ARMOR = "armor"
    WEAPON = "weapon"
    POTION = "potion"
    SCROLL = "scroll"
    FOOD = "food"
    RING = "ring"
    STICK = "stick"
    ARTIFACT = "artifact"
    GOLD = "gold"
    OTHER = "other"


@dataclass
class Item:
    """The parts of an object that decide how much it weighs."""

    kind: ItemKind
    weight: int
    count: int = 1
    ac: int = 0
    base_class: int = 0
    hplus: int = 0
    dplus: int = 0
    cursed: bool = False
    blessed: bool = False


def _cdiv(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def item_weight(item: Item, armor_class: Optional[int] = None) -> int:
    """Weight of one object; armor loses a fifth per point of enchantment."""
    weight = item.weight
    if item.kind is ItemKind.ARMOR:
        base = item.base_class if armor_class is None else armor_class
        ac = base - item.ac
        weight = max(0, _cdiv(weight * 5 - weight * ac, 5))
    elif item.kind is ItemKind.WEAPON and item.hplus + item.dplus > 0:
        weight = _cdiv(weight, 2)
    if item.cursed:
        weight += _cdiv(weight, 5)
    elif item.blessed:
        weight -= _cdiv(weight, 5)
    return weight


def pack_weight(items: Iterable[Item], carrying_bonus: int = 0) -> int:
    """Total pack weight, lightened by a ring of carrying of the given value."""
    weight = sum(item_weight(item) * item.count for item in items)
    if carrying_bonus:
        weight -= _cdiv(carrying_bonus * weight, 4)
    return max(0, weight)


def carry_ability(strength: int) -> int:
    """Carrying ability above the norm."""
    return (strength - 8) * 50


def total_encumbrance(strength: int, hunger: HungerState, normal: int) -> int:
    """Total weight the hero can carry, given the normal load."""
    total = normal + carry_ability(strength)
    if hunger is HungerState.WEAK:
        total -= _cdiv(total, 10)
    elif hunger is HungerState.FAINT:
        total = _cdiv(total, 2)
    return total


def food_level(current: int, capacity: int, previous: int = 1, rng=None) -> int:
    """Food use rate for a pack of the given weight."""
    rng = random if rng is None else rng
    fifth = _cdiv(capacity, 5)
    if current > 4 * fifth:
        return 3 if rng.randrange(100) < 80 else previous
    if current > 3 * fifth:
        return 2 if rng.randrange(100) < 60 else previous
    return 1


def hit_weight(level: int) -> int:
    """To-hit adjustment: +1 light, 0 medium, -1 heavy."""
    return 2 - level