"""Leaf entities and the immutable dungeon aggregate."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Room:
    name: str
    description: str = ""

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class NPC:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Item:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Player:
    name: str

    def __str__(self) -> str:
        return self.name


def _render_list(values: Iterable[object]) -> str:
    return "[" + ", ".join(str(value) for value in values) + "]"


@dataclass(frozen=True, slots=True)
class Dungeon:
    """Immutable result of a dungeon build.

    Sequence fields are copied into tuples on construction, so the caller's
    collections can change afterwards without reaching the dungeon.
    ``treasure_room`` is not required to appear in ``rooms``.

    Only :meth:`SimpleDungeonBuilder.build` checks that ``name`` is non-empty
    and ``player`` is set; constructing a ``Dungeon`` directly skips that check.
    """

    name: str
    rooms: tuple[Room, ...]
    npcs: tuple[NPC, ...]
    items: tuple[Item, ...]
    player: Player
    traps: tuple[str, ...]
    treasure_room: Room | None
    secret_passages: tuple[str, ...]

    def __post_init__(self) -> None:
        for field_name in ("rooms", "npcs", "items", "traps", "secret_passages"):
            object.__setattr__(self, field_name, tuple(getattr(self, field_name)))

    def render(self) -> str:
        """Return the eight-line human-readable summary."""
        treasure = self.treasure_room.name if self.treasure_room is not None else "None"
        return "\n".join(
            [
                f"Dungeon: {self.name}",
                f"Rooms: {_render_list(self.rooms)}",
                f"NPCs: {_render_list(self.npcs)}",
                f"Items: {_render_list(self.items)}",
                f"Player: {self.player}",
                f"Traps: {_render_list(self.traps)}",
                f"Treasure Room: {treasure}",
                f"Secret Passages: {_render_list(self.secret_passages)}",
            ]
        )

    def __str__(self) -> str:
        return self.render()
