import pytest

from urogue.encumbrance import ItemKind
from urogue.fight_messages import (
    bounce_message,
    combatant_name,
    hit_message,
    is_magic,
    launcher_for,
    m_bounce_message,
    m_thunk_message,
    miss_message,
    thunk_message,
)


def test_player_is_you():
    assert combatant_name(None, False, False) == "you"
    assert combatant_name(None, False, True) == "you"


def test_player_capitalised():
    assert combatant_name(None, True, False) == "You"


def test_blind_hides_monster():
    assert combatant_name("orc", False, True) == "the monster"
    assert combatant_name("orc", True, True).startswith("The monster")


def test_named_monster():
    name = combatant_name("orc", False, False)
    assert name.startswith("the ")
    assert name.endswith("orc")
    assert combatant_name("orc", True, False)[0] == "T"


def test_hit_message_pinned():
    assert hit_message(None, "orc", 0, False) == "You scored an excellent hit on the orc."


def test_hit_verb_agreement():
    assert " have injured " in hit_message(None, "orc", 2)
    assert " has injured " in hit_message("orc", None, 2)
    assert " swing and hit " in hit_message(None, "orc", 3)
    assert " swings and hits " in hit_message("orc", None, 3)


def test_hit_message_ends_with_defender():
    msg = hit_message("orc", None, 1)
    assert msg.endswith("you.")
    assert msg.startswith("The orc")


def test_miss_verbs():
    assert " don't hit " in miss_message(None, "orc", 3)
    assert " doesn't hit " in miss_message("orc", None, 3)
    assert " barely misses " in miss_message("orc", None, 2)
    assert miss_message(None, "orc", 0).startswith("You miss ")


def test_invalid_variant():
    with pytest.raises(ValueError):
        hit_message(None, "orc", 4)
    with pytest.raises(ValueError):
        miss_message(None, "orc", -1)


def test_random_variant_is_one_of_fixed():
    options = {hit_message(None, "orc", v) for v in range(4)}
    for _ in range(20):
        assert hit_message(None, "orc") in options
    misses = {miss_message("orc", None, v) for v in range(4)}
    assert miss_message("orc", None) in misses


def test_thunk_messages():
    assert thunk_message(None, "orc").startswith("You hit ")
    msg = thunk_message("arrow", "orc")
    assert msg.startswith("The arrow hits ")
    assert msg.endswith("orc.")
    assert "the monster" in thunk_message("arrow", "orc", True)


def test_monster_thunk_messages():
    assert m_thunk_message(None, "orc", True).startswith("The monster")
    assert m_thunk_message(None, "orc").endswith(" hits you.")
    assert "'s arrow hits you." in m_thunk_message("arrow", "orc")


def test_bounce_messages():
    assert bounce_message(None, "orc").startswith("You missed ")
    assert bounce_message("rock", "orc").startswith("The rock misses ")
    assert m_bounce_message(None, "orc").endswith(" misses you.")
    assert "'s rock misses you." in m_bounce_message("rock", "orc")


def test_is_magic_armor():
    assert is_magic(ItemKind.ARMOR, ac=5, base_class=5) is False
    assert is_magic(ItemKind.ARMOR, ac=4, base_class=5) is True


def test_is_magic_weapon():
    assert is_magic(ItemKind.WEAPON) is False
    assert is_magic(ItemKind.WEAPON, hplus=1) is True
    assert is_magic(ItemKind.WEAPON, dplus=-1) is True


@pytest.mark.parametrize(
    "kind", [ItemKind.POTION, ItemKind.SCROLL, ItemKind.STICK, ItemKind.RING, ItemKind.ARTIFACT]
)
def test_always_magic(kind):
    assert is_magic(kind) is True


@pytest.mark.parametrize("kind", [ItemKind.FOOD, ItemKind.GOLD, ItemKind.OTHER])
def test_never_magic(kind):
    assert is_magic(kind, ac=3, base_class=7, hplus=2) is False


def test_launchers():
    assert launcher_for("bolt") == "crossbow"
    assert launcher_for("arrow") == "bow"
    assert launcher_for("silver arrow") == "bow"
    assert launcher_for("rock") == "sling"
    assert launcher_for("dagger") is None