"""CLI entrypoint for the dungeon builder."""

from __future__ import annotations

from typing import NoReturn

import typer
from rich.console import Console

from dungeon_builder.cli import build_from_options
from dungeon_builder.config import settings
from dungeon_builder.demo import build_demo_dungeon
from dungeon_builder.errors import DungeonBuildError, MissingFieldError
from dungeon_builder.models import Dungeon
from dungeon_builder.telemetry import configure_logging

app = typer.Typer(help="Build and print dungeons")
console = Console(soft_wrap=True, emoji=False)


def _print_dungeon(dungeon: Dungeon) -> None:
    console.print(dungeon.render(), markup=False, highlight=False)


def _fail(exc: DungeonBuildError) -> NoReturn:
    missing = exc.field if isinstance(exc, MissingFieldError) else None
    console.print({"error": str(exc), "missing": missing})
    raise typer.Exit(code=1)


@app.callback()
def main() -> None:
    configure_logging(settings.log_level, rich=settings.rich_logging)


@app.command()
def demo() -> None:
    """Build the reference dungeon and print it."""
    _print_dungeon(build_demo_dungeon())


@app.command()
def build(
    name: str = typer.Option(None, help="Dungeon name (required)"),
    player: str = typer.Option(None, help="Player name (required)"),
    rooms: list[str] = typer.Option([], "--room", help="Room as 'Name: description'; repeatable"),
    npcs: list[str] = typer.Option([], "--npc", help="NPC name; repeatable"),
    items: list[str] = typer.Option([], "--item", help="Item name; repeatable"),
    traps: list[str] = typer.Option([], "--trap", help="Trap description; repeatable"),
    treasure_room: str = typer.Option(None, help="Treasure room as 'Name: description'"),
    secret_passages: list[str] = typer.Option([], "--secret-passage", help="Secret passage; repeatable"),
) -> None:
    """Build a dungeon from command-line options and print it."""
    try:
        dungeon = build_from_options(
            name=name,
            player=player,
            rooms=rooms,
            npcs=npcs,
            items=items,
            traps=traps,
            treasure_room=treasure_room,
            secret_passages=secret_passages,
        )
    except DungeonBuildError as exc:
        _fail(exc)
    _print_dungeon(dungeon)


@app.command("settings")
def show_settings() -> None:
    """Show the effective runtime settings."""
    console.print(
        {
            "app_name": settings.app_name,
            "log_level": settings.log_level,
            "rich_logging": settings.rich_logging,
        }
    )


if __name__ == "__main__":
    app()
