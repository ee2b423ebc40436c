from __future__ import annotations

import pytest

from dungeon_builder.cli import build_from_options, parse_room
from dungeon_builder.errors import MissingPlayerError
from dungeon_builder.models import Room


def test_parse_room_splits_on_first_colon() -> None:
    assert parse_room("Vault: Gold: lots of it") == Room("Vault", "Gold: lots of it")
    assert parse_room("  Cellar  ") == Room("Cellar", "")


def test_build_from_options_drives_builder() -> None:
    dungeon = build_from_options(
        name="Crypt",
        player="Hero",
        rooms=["Hall: Long.", "Cellar"],
        npcs=["Rat"],
        items=["Key", "Torch"],
        traps=["Darts"],
        treasure_room="Vault: Shiny.",
        secret_passages=["Loose brick"],
    )

    assert [room.name for room in dungeon.rooms] == ["Hall", "Cellar"]
    assert dungeon.rooms[0].description == "Long."
    assert [item.name for item in dungeon.items] == ["Key", "Torch"]
    assert dungeon.treasure_room == Room("Vault", "Shiny.")


def test_build_from_options_without_player_fails() -> None:
    with pytest.raises(MissingPlayerError):
        build_from_options(name="Crypt", player=None)


def test_demo_command_prints_dungeon() -> None:
    typer_testing = pytest.importorskip("typer.testing")
    from dungeon_builder.main import app

    result = typer_testing.CliRunner().invoke(app, ["demo"], catch_exceptions=False)

    assert result.exit_code == 0
    assert "Dungeon: The Dark Keep" in result.stdout
    assert "Rooms: [Entrance Hall, Throne Room]" in result.stdout
    assert "Secret Passages: [Hidden tunnel behind the throne]" in result.stdout


def test_build_command_prints_dungeon() -> None:
    typer_testing = pytest.importorskip("typer.testing")
    from dungeon_builder.main import app

    result = typer_testing.CliRunner().invoke(
        app,
        ["build", "--name", "Crypt", "--player", "Hero", "--room", "Hall: Long.", "--room", "Cellar", "--trap", "Darts"],
        catch_exceptions=False,
    )

    assert result.exit_code == 0
    assert "Rooms: [Hall, Cellar]" in result.stdout
    assert "Traps: [Darts]" in result.stdout
    assert "Treasure Room: None" in result.stdout


def test_build_command_reports_missing_name() -> None:
    typer_testing = pytest.importorskip("typer.testing")
    from dungeon_builder.main import app

    result = typer_testing.CliRunner().invoke(app, ["build", "--player", "Hero"], catch_exceptions=False)

    assert result.exit_code == 1
    assert "Dungeon must have a name." in result.stdout


def test_settings_command_prints_app_name() -> None:
    typer_testing = pytest.importorskip("typer.testing")
    from dungeon_builder.main import app

    result = typer_testing.CliRunner().invoke(app, ["settings"], catch_exceptions=False)

    assert result.exit_code == 0
    assert "dungeon-builder" in result.stdout


def test_build_command_prints_names_verbatim() -> None:
    typer_testing = pytest.importorskip("typer.testing")
    from dungeon_builder.main import app

    result = typer_testing.CliRunner().invoke(
        app,
        ["build", "--name", "Crypt :skull:", "--player", "Hero", "--secret-passage", "Door :door:"],
        catch_exceptions=False,
    )

    assert result.exit_code == 0
    assert "Dungeon: Crypt :skull:" in result.stdout
    assert "Secret Passages: [Door :door:]" in result.stdout


def test_build_command_reports_missing_player() -> None:
    typer_testing = pytest.importorskip("typer.testing")
    from dungeon_builder.main import app

    result = typer_testing.CliRunner().invoke(app, ["build", "--name", "Crypt"], catch_exceptions=False)

    assert result.exit_code == 1
    assert "Dungeon must have a player." in result.stdout
    assert "'missing': 'player'" in result.stdout


def test_build_command_names_missing_name_field() -> None:
    typer_testing = pytest.importorskip("typer.testing")
    from dungeon_builder.main import app

    result = typer_testing.CliRunner().invoke(app, ["build", "--player", "Hero"], catch_exceptions=False)

    assert result.exit_code == 1
    assert "'missing': 'name'" in result.stdout
