"""Rules and save-file tools for an UltraRogue-style dungeon crawler."""

__version__ = "0.1.0"

__all__ = [
    "artifact_powers",
    "artifacts",
    "charfile",
    "combat",
    "encumbrance",
    "fight_messages",
    "healing",
    "scorefile",
]