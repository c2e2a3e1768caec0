from __future__ import annotations


class GeoPinError(ValueError):
    """Base class for every error raised by the codec."""


class InvalidCoordinate(GeoPinError):
    """Latitude, longitude or elevation is non-finite or outside the datum."""

    def __init__(self, message: str, *, field: str | None = None, value: object = None) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class InvalidToken(GeoPinError):
    """Token has the wrong shape after separators are removed."""

    def __init__(self, message: str, *, token: object = None) -> None:
        super().__init__(message)
        self.token = token


class UnknownCharacter(InvalidToken):
    """Token contains a character outside the alphabet."""

    def __init__(self, character: str, position: int, *, token: object = None) -> None:
        super().__init__(
            f"Invalid character in GeoPin: {character!r} at position {position}",
            token=token,
        )
        self.character = character
        self.position = position
