"""Coalitions of the simulated battlefield."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["Coalition", "all_coalitions"]


class Coalition(IntEnum):
    """Numeric ID of a coalition."""

    RED = 1
    BLUE = 2
    NEUTRALS = 3

    def __str__(self) -> str:
        if self is Coalition.RED:
            return "Red"
        if self is Coalition.BLUE:
            return "Blue"
        return "Neutrals"

    def opposite(self) -> Coalition:
        """Return the opposing coalition; neutrals oppose nobody but themselves."""
        if self is Coalition.RED:
            return Coalition.BLUE
        if self is Coalition.BLUE:
            return Coalition.RED
        return Coalition.NEUTRALS


def all_coalitions() -> list[Coalition]:
    """Return every coalition."""
    return [Coalition.RED, Coalition.BLUE, Coalition.NEUTRALS]