import pytest

from urogue.combat import CharacterClass
from urogue.encumbrance import HungerState
from urogue.healing import (
    food_consumption,
    hunger_transition,
    regeneration_profile,
)


def test_magician_profile_pinned():
    assert regeneration_profile(CharacterClass.MAGICIAN, 4) == (2, 4)


def test_magician_heals_as_many_points_as_level():
    for level in range(1, 20):
        assert regeneration_profile(CharacterClass.MAGICIAN, level)[1] == level


def test_thief_and_cleric_share_limit_but_thief_heals_more():
    for level in range(1, 20):
        t_limit, t_points = regeneration_profile(CharacterClass.THIEF, level)
        c_limit, c_points = regeneration_profile(CharacterClass.CLERIC, level)
        assert t_limit == c_limit
        assert t_points == c_points + 1


def test_fighter_limit_is_double_thief_limit():
    for level in range(1, 20):
        f_limit, _ = regeneration_profile(CharacterClass.FIGHTER, level)
        t_limit, _ = regeneration_profile(CharacterClass.THIEF, level)
        assert f_limit == 2 * t_limit


def test_limit_never_grows_with_level():
    for cls in CharacterClass:
        limits = [regeneration_profile(cls, lvl)[0] for lvl in range(1, 30)]
        assert limits == sorted(limits, reverse=True)


def test_accepts_plain_integer_class():
    assert regeneration_profile(4, 10) == regeneration_profile(
        CharacterClass.MONSTER, 10)


def test_unknown_class_rejected():
    with pytest.raises(ValueError):
        regeneration_profile(9, 3)


def test_plain_consumption_is_sum():
    assert food_consumption(2, 1) == 3


def test_super_eat_doubles():
    assert food_consumption(3, 2, super_eat=True) == 2 * food_consumption(3, 2)


def test_power_eat_adds_bonus():
    assert food_consumption(3, 2, power_eat=True) == food_consumption(3, 2) + 200


def test_powers_scale_linearly():
    base = food_consumption(1, 3, super_eat=True, power_eat=True)
    for powers in range(6):
        assert food_consumption(1, 3, True, True, powers) == base * (powers + 1)


@pytest.mark.parametrize("powers", [-1, 6])
def test_powers_out_of_range(powers):
    with pytest.raises(ValueError):
        food_consumption(0, 1, powers=powers)


def test_becoming_weak():
    assert hunger_transition(310, 290, 300) is HungerState.WEAK


def test_becoming_hungry():
    assert hunger_transition(610, 590, 300) is HungerState.HUNGRY


def test_no_change_without_crossing():
    assert hunger_transition(1000, 900, 300) is None
    assert hunger_transition(290, 280, 300) is None


def test_big_drop_reports_weak():
    assert hunger_transition(1000, 10, 300) is HungerState.WEAK


def test_more_time_must_be_positive():
    with pytest.raises(ValueError):
        hunger_transition(10, 5, 0)