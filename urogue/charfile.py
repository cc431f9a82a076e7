"""Inspect and prune the saved character definitions file."""

from __future__ import annotations

import os
import re
import string
import struct
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Sequence

I_APPEAL = 1
I_ARM = 2
I_CHAR = 3
I_DEX = 4
I_HITS = 5
I_INTEL = 6
I_STR = 7
I_WEAP = 8
I_WEAPENCH = 9
I_WELL = 10
I_WIS = 11

MAXPATT = 100
MAXPDEF = 100
DELETABLE = 10
FILENAME = ".rog_defs"

CLASS_NAMES = {0: "fighter", 1: "magician", 2: "cleric", 3: "thief"}

_ROW = struct.Struct(f"<{MAXPATT}i")
_FILE_SIZE = _ROW.size * MAXPDEF


def _cdiv(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _cmod(a: int, b: int) -> int:
    return a - b * _cdiv(a, b)


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?[0-9]+)", text)
    return int(match.group(1)) if match else 0


@dataclass(frozen=True)
class CharacterRecord:
    """The attributes of one saved character that are shown to the user."""

    intelligence: int
    strength: int
    wisdom: int
    dexterity: int
    constitution: int
    charisma: int
    char_class: int
    armor: int
    weapon: int
    weapon_enchant: int
    hit_points: int

    @classmethod
    def from_row(cls, row: Sequence[int]) -> "CharacterRecord":
        return cls(
            intelligence=row[I_INTEL],
            strength=row[I_STR],
            wisdom=row[I_WIS],
            dexterity=row[I_DEX],
            constitution=row[I_WELL],
            charisma=row[I_APPEAL],
            char_class=row[I_CHAR],
            armor=row[I_ARM],
            weapon=row[I_WEAP],
            weapon_enchant=row[I_WEAPENCH],
            hit_points=row[I_HITS],
        )

    @property
    def class_name(self) -> str:
        return CLASS_NAMES.get(self.char_class, "")

    @property
    def in_use(self) -> bool:
        return self.intelligence > 0


def load_definitions(path) -> list[list[int]]:
    """Read the whole table; a short file is filled out with zeros."""
    data = Path(path).read_bytes()[:_FILE_SIZE]
    data = data.ljust(_FILE_SIZE, b"\0")
    return [list(row) for row in _ROW.iter_unpack(data)]


def save_definitions(path, rows: Sequence[Sequence[int]]) -> None:
    """Write the whole table back to disk."""
    if len(rows) != MAXPDEF or any(len(row) != MAXPATT for row in rows):
        raise ValueError(f"expected {MAXPDEF} rows of {MAXPATT} attributes")
    Path(path).write_bytes(b"".join(_ROW.pack(*row) for row in rows))


def describe(row: Sequence[int]) -> str:
    """Two-line description of one character, followed by a blank line."""
    rec = CharacterRecord.from_row(row)
    tens = _cdiv(rec.weapon_enchant, 10)
    units = _cmod(rec.weapon_enchant, 10)
    return (
        f"Int: {rec.intelligence}  Str: {rec.strength}  Wis: {rec.wisdom}  "
        f"Dex: {rec.dexterity}  Const: {rec.constitution}  "
        f"Charisma: {rec.charisma}\n"
        f"{rec.class_name}  Armor: {rec.armor}   Weapon: {rec.weapon} "
        f"(+{tens},+{units})    Hit Points: {rec.hit_points}\n\n"
    )


def format_entries(rows: Sequence[Sequence[int]]) -> str:
    """Describe every row that holds a character."""
    return "".join(describe(row) for row in rows if row[I_INTEL] > 0)


def delete_entry(rows: Sequence[Sequence[int]], number: int) -> tuple[list[list[int]], bool]:
    """Remove the 1-based entry if it holds a character; later rows move up."""
    if not 1 <= number <= len(rows):
        raise ValueError(f"entry {number} out of range")
    result = [list(row) for row in rows]
    if result[number - 1][I_INTEL] <= 0:
        return result, False
    width = len(result[number - 1])
    del result[number - 1]
    result.append([0] * width)
    return result, True


def default_path(environ: Mapping[str, str]) -> str:
    """Location of the character file under the user's home directory."""
    home = environ.get("HOME")
    if home is None:
        home = environ.get("HOMEPATH", "")
    return f"{home}/{FILENAME}"


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    path = default_path(os.environ)

    if not os.access(path, os.R_OK | os.W_OK):
        print(f"Unable to access character file: {path}", file=sys.stderr)
        return 1

    if len(args) != 1 or not args[0] or args[0][0] not in string.digits:
        print("Usage: charfile [n]", file=sys.stderr)
        print(" E.g. 'charfile 3' delete 3rd entry in character file", file=sys.stderr)
        return 1

    number = _atoi(args[0])

    try:
        rows = load_definitions(path)
    except OSError as err:
        print(f"Unable to read {path}", file=sys.stderr)
        print(f"{path}: {err.strerror}", file=sys.stderr)
        return 0

    sys.stdout.write(format_entries(rows))

    if not 1 <= number <= DELETABLE:
        return 0

    rows, deleted = delete_entry(rows, number)
    if deleted:
        print(f"Delete entry {number}")

    try:
        save_definitions(path, rows)
    except OSError as err:
        print(f"Unable to write {path}", file=sys.stderr)
        print(f"{path}: {err.strerror}", file=sys.stderr)
    return 0