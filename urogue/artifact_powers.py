"""The powers each artifact offers when applied, and how a key picks one."""

from __future__ import annotations

from typing import Collection, Optional, Union

from urogue.artifacts import Artifact, ArtifactRegister

ESCAPE = "\x1b"

Carrying = Union[ArtifactRegister, Collection[Artifact]]

# Every power an artifact can have, in menu order; the later ones are
# offered only while certain other artifacts are carried.
_POWERS: dict[Artifact, tuple[str, ...]] = {
    Artifact.PHIAL: ("light", "monster confusion"),
    Artifact.PALANTIR: (
        "monster detection",
        "gold detection",
        "magic detection",
        "food detection",
        "teleportation",
        "clear thought",
    ),
    Artifact.SILMARIL: (
        "magic mapping",
        "petrification",
        "stairwell downwards",
    ),
    Artifact.AMULET: ("level evaluation", "invisibility"),
    Artifact.PURSE: (
        "inventory",
        "add to bag",
        "remove from bag",
        "see invisible",
    ),
    Artifact.SCEPTRE: (
        "cancellation",
        "polymorph monster",
        "slow monster",
        "teleport monster",
        "monster confusion",
        "paralyze monster",
        "drain life",
        "smell monster",
    ),
    Artifact.CROWN: (
        "add strength",
        "add intelligence",
        "add wisdom",
        "add dexterity",
        "add constitution",
        "normal strength",
        "normal intelligence",
        "normal wisdom",
        "normal dexterity",
        "normal constitution",
        "disguise",
        "super heroism",
    ),
}

# Highest power index always available, and the artifacts that each add one.
_LIMITS: dict[Artifact, tuple[int, tuple[Artifact, ...]]] = {
    Artifact.PHIAL: (1, ()),
    Artifact.PALANTIR: (3, (Artifact.SCEPTRE, Artifact.CROWN)),
    Artifact.SILMARIL: (2, ()),
    Artifact.AMULET: (0, (Artifact.PURSE,)),
    Artifact.PURSE: (2, (Artifact.AMULET,)),
    Artifact.SCEPTRE: (5, (Artifact.CROWN, Artifact.PALANTIR)),
    Artifact.CROWN: (9, (Artifact.PALANTIR, Artifact.SCEPTRE)),
}


def _has(carrying: Carrying, artifact: Artifact) -> bool:
    if isinstance(carrying, ArtifactRegister):
        return carrying.is_carrying(artifact)
    return artifact in carrying


def _known(artifact) -> Artifact:
    art = Artifact(artifact)
    if art not in _LIMITS:
        raise ValueError(f"{art.name.lower()} has no fixed list of powers")
    return art


def power_limit(artifact, carrying: Carrying = ()) -> int:
    """Highest index of the powers the artifact offers right now."""
    art = _known(artifact)
    base, boosters = _LIMITS[art]
    return base + sum(1 for other in boosters if _has(carrying, other))


def power_menu(artifact, carrying: Carrying = ()) -> list[tuple[str, str]]:
    """The (key, power) pairs offered by the artifact right now."""
    art = _known(artifact)
    names = _POWERS[art][: power_limit(art, carrying) + 1]
    return [(chr(ord("a") + i), name) for i, name in enumerate(names)]


def choose_power(artifact, key: str, carrying: Carrying = ()) -> Optional[int]:
    """Index of the power the key selects, or None if it selects none.

    Escape, and any key outside the offered powers, select nothing.
    """
    if not isinstance(key, str) or len(key) != 1:
        raise ValueError("key must be a single character")
    limit = power_limit(artifact, carrying)
    if key == ESCAPE:
        return None
    which = ord(key) - ord("a")
    if 0 <= which <= limit:
        return which
    return None