# urogue

Rules and file tools for an UltraRogue-style dungeon crawler, written in
plain Python with no third-party dependencies.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Command-line tools

Two commands manage the files the game keeps between sessions.

### `urogue-charfile`

Works on the saved character definitions in `.rog_defs` under your home
directory (`HOME`, or `HOMEPATH` when `HOME` is not set). The file must be
readable and writable. The command takes exactly one number:

```
urogue-charfile 3
```

It first lists every stored character with its intelligence, strength,
wisdom, dexterity, constitution and charisma, followed by its class,
armour, weapon with enchantments, and hit points. If the number is between
1 and 10 and that entry holds a character, the entry is deleted, the later
ones move up, and the file is written back. Other numbers only list.

### `urogue-scorefile`

Shows the top-ten score list, or deletes one of its entries:

```
urogue-scorefile
urogue-scorefile 3
```

Without an argument (or with `0`) it prints each entry that has a score.
With a number from 1 to 10 it deletes that entry, if it has a score, and
writes the list back.

The central score file `/usr/local/lib/urogue/LIB/scorefile` is used when it
is readable and writable; otherwise `~/.rog_score` is used. On Windows the
file is `%APPDATA%/urogue/rogue.score`.

## Library

The modules can be used on their own:

- `urogue.charfile` – `load_definitions`, `save_definitions`, `describe`,
  `format_entries`, `delete_entry`, `default_path` and the
  `CharacterRecord` view of one row.
- `urogue.scorefile` – `ScoreEntry`, `read_scores`, `write_scores`,
  `format_scores`, `delete_score` and `default_path`.
- `urogue.encumbrance` – `item_weight`, `pack_weight`, `carry_ability`,
  `total_encumbrance`, `food_level` and `hit_weight`, with the `Item`,
  `ItemKind` and `HungerState` types.
- `urogue.combat` – to-hit rolls (`swing`), `save_throw`, ability-score
  bonuses (`dext_plus`, `dext_prot`, `str_plus`, `add_dam`, `hung_dam`),
  experience levels (`experience_level`, `points_to_next_level`,
  `raised_experience`) and `parse_damage` for strings such as `"1d4+1/2d3"`.
- `urogue.fight_messages` – the hit, miss and missile messages shown during
  combat, `is_magic`, and `launcher_for` a missile.
- `urogue.artifacts` – `ArtifactRegister` (which artifacts were picked up,
  are carried, and are active), `BagLetters` for the magic purse, and
  `amulet_reading`.
- `urogue.artifact_powers` – `power_limit`, `power_menu` and `choose_power`
  for the powers each artifact offers.
- `urogue.healing` – `regeneration_profile`, `food_consumption` and
  `hunger_transition`.

Functions that roll dice take an optional `rng` with a `randrange` method,
so results can be made repeatable.

A short example:

```python
import random

from urogue.artifacts import Artifact, ArtifactRegister
from urogue.artifact_powers import power_menu
from urogue.combat import CharacterClass, dext_plus, str_plus, swing

print(str_plus(18), dext_plus(16))          # 2 2
print(swing(CharacterClass.FIGHTER, 5, 5, 1, rng=random.Random(1)))

register = ArtifactRegister()
register.pick_up(Artifact.PALANTIR)
register.pick_up(Artifact.CROWN)
print(power_menu(Artifact.PALANTIR, register))
```

## What it does not do

This is not a playable game. There is no dungeon, screen, input handling or
game loop, and no scheduler for timed effects such as fuses that go off
after a number of turns; the modules supply rules and calculations that
such a game would call.