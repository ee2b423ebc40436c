"""Fluent builder for immutable dungeon aggregates."""

from .builder import DungeonBuilder, SimpleDungeonBuilder
from .errors import (
    BuilderConsumedError,
    DungeonBuildError,
    MissingFieldError,
    MissingNameError,
    MissingPlayerError,
)
from .models import NPC, Dungeon, Item, Player, Room

__all__ = [
    "BuilderConsumedError",
    "Dungeon",
    "DungeonBuildError",
    "DungeonBuilder",
    "Item",
    "MissingFieldError",
    "MissingNameError",
    "MissingPlayerError",
    "NPC",
    "Player",
    "Room",
    "SimpleDungeonBuilder",
]
