"""Fluent builder that validates and freezes a :class:`Dungeon`."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Protocol

from .errors import BuilderConsumedError, MissingNameError, MissingPlayerError
from .models import NPC, Dungeon, Item, Player, Room


class DungeonBuilder(Protocol):
    """Step-by-step construction of a dungeon; every setter returns the builder."""

    def set_name(self, name: str | None) -> DungeonBuilder: ...

    def add_room(self, room: Room) -> DungeonBuilder: ...

    def add_npc(self, npc: NPC) -> DungeonBuilder: ...

    def add_item(self, item: Item) -> DungeonBuilder: ...

    def set_player(self, player: Player | None) -> DungeonBuilder: ...

    def add_trap(self, trap: str) -> DungeonBuilder: ...

    def set_treasure_room(self, room: Room | None) -> DungeonBuilder: ...

    def add_secret_passage(self, passage: str) -> DungeonBuilder: ...

    def build(self) -> Dungeon:
        """Validate required fields and return the finalized dungeon."""


class SimpleDungeonBuilder:
    """Accumulates dungeon parts in insertion order.

    A successful :meth:`build` consumes the builder: later configuration calls
    and further builds raise :class:`BuilderConsumedError`. A failed build
    leaves the accumulated state as it was so the caller can fix it and retry.
    """

    def __init__(self, *, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("dungeon_builder.builder")
        self._name: str | None = None
        self._rooms: list[Room] = []
        self._npcs: list[NPC] = []
        self._items: list[Item] = []
        self._player: Player | None = None
        self._traps: list[str] = []
        self._treasure_room: Room | None = None
        self._secret_passages: list[str] = []
        self._built = False

    @property
    def built(self) -> bool:
        return self._built

    def set_name(self, name: str | None) -> SimpleDungeonBuilder:
        self._ensure_open()
        self._name = name
        return self

    def add_room(self, room: Room) -> SimpleDungeonBuilder:
        self._ensure_open()
        self._rooms.append(room)
        return self

    def add_rooms(self, rooms: Iterable[Room]) -> SimpleDungeonBuilder:
        self._ensure_open()
        self._rooms.extend(rooms)
        return self

    def add_npc(self, npc: NPC) -> SimpleDungeonBuilder:
        self._ensure_open()
        self._npcs.append(npc)
        return self

    def add_npcs(self, npcs: Iterable[NPC]) -> SimpleDungeonBuilder:
        self._ensure_open()
        self._npcs.extend(npcs)
        return self

    def add_item(self, item: Item) -> SimpleDungeonBuilder:
        self._ensure_open()
        self._items.append(item)
        return self

    def add_items(self, items: Iterable[Item]) -> SimpleDungeonBuilder:
        self._ensure_open()
        self._items.extend(items)
        return self

    def set_player(self, player: Player | None) -> SimpleDungeonBuilder:
        self._ensure_open()
        self._player = player
        return self

    def add_trap(self, trap: str) -> SimpleDungeonBuilder:
        self._ensure_open()
        self._traps.append(trap)
        return self

    def add_traps(self, traps: Iterable[str]) -> SimpleDungeonBuilder:
        self._ensure_open()
        self._traps.extend(traps)
        return self

    def set_treasure_room(self, room: Room | None) -> SimpleDungeonBuilder:
        self._ensure_open()
        self._treasure_room = room
        return self

    def add_secret_passage(self, passage: str) -> SimpleDungeonBuilder:
        self._ensure_open()
        self._secret_passages.append(passage)
        return self

    def add_secret_passages(self, passages: Iterable[str]) -> SimpleDungeonBuilder:
        self._ensure_open()
        self._secret_passages.extend(passages)
        return self

    def build(self) -> Dungeon:
        """Validate required fields and return an immutable snapshot.

        Raises :class:`MissingNameError` when the name is unset or empty and
        :class:`MissingPlayerError` when no player was set, in that order.
        """
        self._ensure_open()
        if not self._name:
            self._logger.warning("dungeon_build_rejected", extra={"missing_field": "name"})
            raise MissingNameError()
        if self._player is None:
            self._logger.warning("dungeon_build_rejected", extra={"missing_field": "player"})
            raise MissingPlayerError()

        dungeon = Dungeon(
            name=self._name,
            rooms=tuple(self._rooms),
            npcs=tuple(self._npcs),
            items=tuple(self._items),
            player=self._player,
            traps=tuple(self._traps),
            treasure_room=self._treasure_room,
            secret_passages=tuple(self._secret_passages),
        )
        self._built = True
        self._logger.info(
            "dungeon_built",
            extra={
                "dungeon_name": dungeon.name,
                "room_count": len(dungeon.rooms),
                "npc_count": len(dungeon.npcs),
                "item_count": len(dungeon.items),
                "trap_count": len(dungeon.traps),
                "secret_passage_count": len(dungeon.secret_passages),
            },
        )
        return dungeon

    def _ensure_open(self) -> None:
        if self._built:
            self._logger.warning("builder_reuse_rejected")
            raise BuilderConsumedError()
