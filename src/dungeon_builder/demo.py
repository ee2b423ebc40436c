"""Reference dungeon used by the ``demo`` command."""

from __future__ import annotations

from .builder import SimpleDungeonBuilder
from .models import NPC, Dungeon, Item, Player, Room


def build_demo_dungeon(builder: SimpleDungeonBuilder | None = None) -> Dungeon:
    entrance = Room("Entrance Hall", "A dimly lit hall with stone walls.")
    throne_room = Room("Throne Room", "A grand room with a golden throne.")
    hidden_chamber = Room("Hidden Chamber", "A mysterious room full of treasures.")
    boss = NPC("Dark Overlord")
    sword = Item("Enchanted Sword")
    hero = Player("Hero")

    # Hidden Chamber is the treasure room but not one of the listed rooms.
    return (
        (builder or SimpleDungeonBuilder())
        .set_name("The Dark Keep")
        .add_room(entrance)
        .add_room(throne_room)
        .add_npc(boss)
        .add_item(sword)
        .set_player(hero)
        .add_trap("Pitfall Trap")
        .set_treasure_room(hidden_chamber)
        .add_secret_passage("Hidden tunnel behind the throne")
        .build()
    )
