"""Hit rolls, saving throws, ability bonuses and experience levels."""

from __future__ import annotations

import enum
import random
import re
from dataclasses import dataclass

from urogue.encumbrance import HungerState


class CharacterClass(enum.IntEnum):
    FIGHTER = 0
    MAGICIAN = 1
    CLERIC = 2
    THIEF = 3
    MONSTER = 4


@dataclass(frozen=True)
class AttackMatrix:
    """Parameters of the to-hit table for one class."""

    base: int
    max_lvl: int
    factor: int
    offset: int
    range: int


ATTACK_MATRIX = {
    CharacterClass.FIGHTER: AttackMatrix(10, 17, 2, 1, 2),
    CharacterClass.MAGICIAN: AttackMatrix(9, 21, 2, 1, 5),
    CharacterClass.CLERIC: AttackMatrix(10, 19, 2, 1, 3),
    CharacterClass.THIEF: AttackMatrix(10, 21, 2, 1, 4),
    CharacterClass.MONSTER: AttackMatrix(7, 25, 1, 0, 2),
}

# Experience needed for level 2; every further level needs twice as much.
EXPERIENCE_BASE = {
    CharacterClass.FIGHTER: 113,
    CharacterClass.MAGICIAN: 135,
    CharacterClass.CLERIC: 87,
    CharacterClass.THIEF: 72,
}


def _cdiv(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _rnd(rng, n: int) -> int:
    return 0 if n <= 0 else rng.randrange(n)


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?[0-9]+)", text)
    return int(match.group(1)) if match else 0


def swing(char_class, attacker_level: int, opponent_armor: int,
          weapon_plus: int, difficulty: int = 0, depth: int = 1,
          rng=None) -> bool:
    """Roll a d20 to hit; True if the swing lands."""
    rng = random if rng is None else rng
    cls = CharacterClass(char_class)
    mat = ATTACK_MATRIX[cls]
    res = _rnd(rng, 20) + 1

    need = (mat.base
            - mat.factor * _cdiv(min(attacker_level, mat.max_lvl) - mat.offset,
                                 mat.range)
            + (10 - opponent_armor))
    if 20 < need <= 25:
        need = 20

    if difficulty >= 2:
        if cls is CharacterClass.MONSTER and need > 15:
            if difficulty > 3 or (difficulty > 2 and depth < 90):
                need = int(15 + (need - 15) * 0.5)
            else:
                need = int(15 + (need - 15) * 0.67)
            if depth > 35 and difficulty > 2:
                need -= _cdiv(depth, 20)

        # A close but outmatched attacker still gets a chance.
        if (35 < depth < 85
                and need > 20 + weapon_plus
                and need < 22 + weapon_plus + difficulty * 2
                and res == 20
                and _rnd(rng, 5 - difficulty) == 0):
            return True

    return res + weapon_plus >= need


def save_throw(which: int, creature_level: int, ring_bonus: int = 0,
               armor_bonus: int = 0, is_player: bool = True,
               difficulty: int = 0, depth: int = 1, rng=None) -> bool:
    """Saving throw; the bonuses count only for the player."""
    rng = random if rng is None else rng
    if not is_player:
        ring_bonus = armor_bonus = 0
    elif difficulty < 2:
        pass
    elif difficulty == 2 or depth > 90:
        if ring_bonus > 1:
            ring_bonus = _cdiv(ring_bonus, 2)
        if armor_bonus > 1:
            armor_bonus = _cdiv(armor_bonus, 2)
    else:
        if ring_bonus > 1:
            ring_bonus = max(1, _cdiv(ring_bonus, 3))
        if armor_bonus > 1:
            armor_bonus = max(1, _cdiv(armor_bonus, 3))

    need = 14 + which - _cdiv(creature_level, 2) - ring_bonus - armor_bonus

    if is_player and difficulty > 2:
        if depth > 20:
            need += _cdiv(depth, 20)
        else:
            need += _rnd(rng, 2)

    need = min(20, max(1, need))
    return _rnd(rng, 20) + 1 >= need


def dext_plus(dexterity: int) -> int:
    """To-hit bonus for dexterity."""
    return _cdiv(dexterity - 10, 3)


def dext_prot(dexterity: int) -> int:
    """Armor class bonus for dexterity."""
    return _cdiv(dexterity - 9, 2)


def str_plus(strength: int) -> int:
    """To-hit bonus or penalty for strength."""
    return _cdiv(strength - 10, 3)


def add_dam(strength: int) -> int:
    """Extra damage for exceptionally high or low strength."""
    return _cdiv(strength - 9, 2)


def hung_dam(state: HungerState) -> int:
    """Damage adjustment for the player's hunger."""
    return {HungerState.WEAK: -1, HungerState.FAINT: -2}.get(state, 0)


def _base(char_class) -> int:
    cls = CharacterClass(char_class)
    if cls not in EXPERIENCE_BASE:
        raise ValueError(f"no experience table for {cls.name.lower()}")
    return EXPERIENCE_BASE[cls]


def _threshold_count(char_class, experience: int) -> tuple[int, int]:
    needed = _base(char_class)
    count = 0
    while needed <= experience:
        count += 1
        needed *= 2
    return count, needed


def experience_level(char_class, experience: int) -> int:
    """Experience level reached with the given points."""
    count, _ = _threshold_count(char_class, experience)
    return count + 1


def points_to_next_level(char_class, experience: int) -> tuple[int, int]:
    """Points still needed, and the level they lead to."""
    count, needed = _threshold_count(char_class, experience)
    return needed - experience, count + 2


def raised_experience(char_class, experience: int) -> int:
    """Experience after magically going up one level."""
    base = _base(char_class)
    if experience < base // 2:
        return base
    return experience * 2


def parse_damage(spec: str) -> list[tuple[int, int, int]]:
    """Attacks of a damage string such as "1d4+1/2d3" as (dice, sides, plus).

    A later attack is read only when the one before it has a "+" part.
    """
    attacks: list[tuple[int, int, int]] = []
    pos = 0
    while True:
        ndice = _atoi(spec[pos:])
        d = spec.find("d", pos)
        if d < 0:
            break
        pos = d + 1
        nsides = _atoi(spec[pos:])
        plus = spec.find("+", pos)
        if plus < 0:
            attacks.append((ndice, nsides, 0))
            break
        pos = plus + 1
        attacks.append((ndice, nsides, _atoi(spec[pos:])))
        slash = spec.find("/", pos)
        if slash < 0:
            break
        pos = slash + 1
    return attacks