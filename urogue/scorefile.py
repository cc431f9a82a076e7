"""Inspect and prune the top-ten score file."""

from __future__ import annotations

import os
import re
import string
import struct
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Sequence

SCOREFILE = "/usr/local/lib/urogue/LIB/scorefile"
NUMSCORES = 10
NAME_LENGTH = 76

_RECORD = struct.Struct(f"<q{NAME_LENGTH}s4xqiihhi")
_FILE_SIZE = _RECORD.size * NUMSCORES


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?[0-9]+)", text)
    return int(match.group(1)) if match else 0


@dataclass
class ScoreEntry:
    """One line of the top-ten list."""

    score: int = 0
    name: str = ""
    gold: int = 0
    flags: int = 0
    level: int = 0
    artifacts: int = 0
    monster: int = 0
    game_id: int = 0

    def pack(self) -> bytes:
        raw_name = self.name.encode("latin-1")[: NAME_LENGTH - 1]
        return _RECORD.pack(
            self.score, raw_name, self.gold, self.flags, self.level,
            self.artifacts, self.monster, self.game_id,
        )

    @classmethod
    def unpack(cls, data: bytes) -> "ScoreEntry":
        return cls._from_fields(_RECORD.unpack(data))

    @classmethod
    def _from_fields(cls, fields) -> "ScoreEntry":
        score, raw_name, gold, flags, level, artifacts, monster, game_id = fields
        name = raw_name.split(b"\0", 1)[0].decode("latin-1")
        return cls(score, name, gold, flags, level, artifacts, monster, game_id)


def read_scores(path) -> list[ScoreEntry]:
    """Read the ten entries; missing bytes read as empty entries."""
    data = Path(path).read_bytes()[:_FILE_SIZE].ljust(_FILE_SIZE, b"\0")
    return [ScoreEntry._from_fields(fields) for fields in _RECORD.iter_unpack(data)]


def write_scores(path, entries: Sequence[ScoreEntry]) -> None:
    if len(entries) != NUMSCORES:
        raise ValueError(f"expected {NUMSCORES} entries, got {len(entries)}")
    Path(path).write_bytes(b"".join(entry.pack() for entry in entries))


def _line(entry: ScoreEntry) -> str:
    return f"{entry.score:10d} {entry.name:>10}"


def format_scores(entries: Sequence[ScoreEntry]) -> str:
    return "".join(_line(entry) + "\n" for entry in entries if entry.score > 0)


def delete_score(
    entries: Sequence[ScoreEntry], number: int
) -> tuple[list[ScoreEntry], ScoreEntry | None]:
    """Remove the 1-based entry if it has a score; return the list and what was removed."""
    if not 1 <= number <= len(entries):
        raise ValueError(f"entry {number} out of range")
    result = list(entries)
    if result[number - 1].score <= 0:
        return result, None
    removed = result.pop(number - 1)
    result.append(ScoreEntry())
    return result, removed


def default_path(environ: Mapping[str, str]) -> str:
    """The shared score file, or a per-user one when it cannot be used."""
    if os.name == "nt":
        appdata = environ.get("APPDATA")
        if appdata is not None:
            return f"{appdata}/urogue/rogue.score"
        return SCOREFILE
    if not os.access(SCOREFILE, os.R_OK | os.W_OK):
        home = environ.get("HOME")
        if home is not None:
            return f"{home}/.rog_score"
    return SCOREFILE


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    path = default_path(os.environ)

    if len(args) > 1 or (args and (not args[0] or args[0][0] not in string.digits)):
        print("Usage: scorefile [n]", file=sys.stderr)
        print(" E.g. 'scorefile 3' delete 3rd entry in scorefile", file=sys.stderr)
        return 1

    number = _atoi(args[0]) if args else 0

    try:
        entries = read_scores(path)
    except OSError as err:
        print(f"Unable to read {path}", file=sys.stderr)
        print(f"{path}: {err.strerror}", file=sys.stderr)
        return 0

    if number == 0:
        sys.stdout.write(format_scores(entries))

    if not args or not 1 <= number <= NUMSCORES:
        return 0

    entries, removed = delete_score(entries, number)
    if removed is not None:
        print(f"Delete entry {number} {_line(removed)}")

    try:
        write_scores(path, entries)
    except OSError as err:
        print(f"Unable to write {path}", file=sys.stderr)
        print(f"{path}: {err.strerror}", file=sys.stderr)
    return 0