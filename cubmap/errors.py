"""The error raised when a scene description is rejected."""

from __future__ import annotations


class CubError(Exception):
    """A scene file, its textures or its map failed validation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def report(self) -> str:
        """Return the text shown to the user for this error."""
        return f"Error\n{self.message}\n"