"""Which artifacts the hero has found, carries and has activated."""

from __future__ import annotations

import enum
from typing import Mapping, Sequence, Union

BAG_LETTERS = "zyxwvutsrqponmlkjihgfedcba"
NO_LETTER = "?"


class Artifact(enum.IntEnum):
    PURSE = 0
    PHIAL = 1
    AMULET = 2
    PALANTIR = 3
    CROWN = 4
    SCEPTRE = 5
    SILMARIL = 6
    WAND = 7


MAXARTIFACT = len(Artifact)

Levels = Union[Mapping[int, int], Sequence[int]]


class ArtifactRegister:
    """Bit sets of artifacts ever picked up, carried now, and active."""

    def __init__(self, picked: int = 0, carrying: int = 0, active: int = 0):
        self.picked = picked
        self.carrying = carrying
        self.active = active

    @staticmethod
    def _bit(artifact) -> int:
        return 1 << Artifact(artifact)

    def possessed(self, artifact) -> bool:
        """Whether the hero has ever carried the artifact."""
        return bool(self.picked & self._bit(artifact))

    def is_carrying(self, artifact) -> bool:
        return bool(self.carrying & self._bit(artifact))

    def is_active(self, artifact) -> bool:
        return bool(self.active & self._bit(artifact))

    def pick_up(self, artifact) -> None:
        bit = self._bit(artifact)
        self.picked |= bit
        self.carrying |= bit

    def lose(self, artifact) -> None:
        """The artifact leaves the hero's pack; it still counts as possessed."""
        self.carrying &= ~self._bit(artifact)

    def activate(self, artifact) -> None:
        self.active |= self._bit(artifact)

    def deactivate(self, artifact) -> None:
        self.active &= ~self._bit(artifact)

    def should_make_artifact(self, levels: Levels, depth: int) -> bool:
        """Whether an artifact is due on this dungeon level.

        ``levels`` gives, for each artifact, the level from which it may appear.
        """
        for artifact in Artifact:
            if not self.possessed(artifact) and levels[artifact] <= depth:
                return True
            if (not self.is_carrying(artifact)
                    and depth > 100 and depth % 5 == 0):
                return True
        return False


class BagLetters:
    """Letters naming the contents of the magic purse, handed out as a stack."""

    def __init__(self):
        self._free = list(BAG_LETTERS)

    @property
    def available(self) -> int:
        return len(self._free)

    def allocate(self) -> str:
        """Next free letter, or "?" once all are in use."""
        if self._free and self._free[-1].islower():
            return self._free.pop()
        return NO_LETTER

    def release(self, letter: str) -> None:
        """Give a letter back; "?" and anything not lower case is ignored."""
        if len(letter) == 1 and letter.islower() and len(self._free) < len(BAG_LETTERS):
            self._free.append(letter)


_COLOURS = (
    (3, "black"),
    (6, "red"),
    (9, "orange"),
    (12, "yellow"),
    (15, "green"),
    (18, "blue"),
    (25, "violet"),
)

_FEELINGS = (
    (10, "feels cold in your hand"),
    (30, "feels cool"),
    (200, "feels warm and soft"),
    (1000, "feels warm and slippery"),
    (5000, "feels hot and dry"),
    (10000, "feels too hot to hold"),
    (20000, "burns your hand badly"),
)

_BURNS = "burns your hand badly"


def amulet_reading(monster_count: int, max_nasty: int) -> tuple[str, str, bool]:
    """Colour and feel of the Amulet of Yendor for the level's monsters.

    The third value tells whether the amulet burns the hero.
    """
    colour = next((c for limit, c in _COLOURS if monster_count < limit),
                  "pink with purple polka dots")
    feeling = next((f for limit, f in _FEELINGS if max_nasty < limit),
                   "tingles your hand")
    return colour, feeling, feeling == _BURNS