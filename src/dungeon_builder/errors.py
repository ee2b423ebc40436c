"""Failures raised while finalizing a dungeon."""

from __future__ import annotations


class DungeonBuildError(Exception):
    """Base class for dungeon construction failures."""


class MissingFieldError(DungeonBuildError):
    """A required dungeon field was not provided before ``build()``."""

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__(message or f"Dungeon must have a {field}.")


class MissingNameError(MissingFieldError):
    def __init__(self) -> None:
        super().__init__("name")


class MissingPlayerError(MissingFieldError):
    def __init__(self) -> None:
        super().__init__("player")


class BuilderConsumedError(DungeonBuildError):
    """The builder already produced a dungeon and cannot be configured again."""

    def __init__(self) -> None:
        super().__init__("Builder has already built a dungeon; create a new builder.")
