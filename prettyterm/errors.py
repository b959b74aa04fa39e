"""Exceptions raised by the package."""

from __future__ import annotations

__all__ = [
    "PrettyTermError",
    "TerminalSizeNotDetectableError",
    "HexCodeInvalidError",
    "FatalMessageError",
]


class PrettyTermError(Exception):
    """Base class for all errors of this package."""

    default_message = "terminal output error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(self.default_message if message is None else message)


class TerminalSizeNotDetectableError(PrettyTermError):
    """The terminal size could not be detected; fallback values are used."""

    default_message = "terminal size could not be detected - using fallback value"


class HexCodeInvalidError(PrettyTermError, ValueError):
    """A HEX colour code is not valid."""

    default_message = "hex code is not valid"


class FatalMessageError(PrettyTermError):
    """Raised after a fatal message has been printed."""

    default_message = ""