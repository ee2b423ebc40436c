"""CLI-side helpers for turning command options into builder calls."""

from __future__ import annotations

from collections.abc import Sequence

from .builder import SimpleDungeonBuilder
from .models import NPC, Dungeon, Item, Player, Room


def parse_room(spec: str) -> Room:
    """Parse ``"Name: description"``; the description part is optional."""
    name, _, description = spec.partition(":")
    return Room(name=name.strip(), description=description.strip())


def build_from_options(
    *,
    name: str | None,
    player: str | None,
    rooms: Sequence[str] = (),
    npcs: Sequence[str] = (),
    items: Sequence[str] = (),
    traps: Sequence[str] = (),
    treasure_room: str | None = None,
    secret_passages: Sequence[str] = (),
    builder: SimpleDungeonBuilder | None = None,
) -> Dungeon:
    builder = builder or SimpleDungeonBuilder()
    builder.set_name(name)
    builder.add_rooms(parse_room(spec) for spec in rooms)
    builder.add_npcs(NPC(npc) for npc in npcs)
    builder.add_items(Item(item) for item in items)
    if player is not None:
        builder.set_player(Player(player))
    builder.add_traps(traps)
    if treasure_room is not None:
        builder.set_treasure_room(parse_room(treasure_room))
    builder.add_secret_passages(secret_passages)
    return builder.build()
