"""Groups of air contacts, declarations and DECLARE calls."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from skyeye.bearings import Bearing
from skyeye.brevity.geometry import BRAA, Aspect, Bullseye, Stack, Track

__all__ = ["Declaration", "Group", "DeclareRequest", "DeclareResponse"]

_HEAVY_CONTACTS = 3
_HIGH_ALTITUDE_FEET = 40000


class Declaration(str, Enum):
    """Friend or foe status of a contact."""

    BOGEY = "bogey"
    FRIENDLY = "friendly"
    NEUTRAL = "neutral"
    BANDIT = "bandit"
    HOSTILE = "hostile"
    FURBALL = "furball"
    UNABLE = "unable"
    CLEAN = "clean"

    def __str__(self) -> str:
        return self.value


@dataclass
class Group:
    """Air contacts within 3 nautical miles in azimuth and range of each other.

    The location is given by a bullseye or, for BOGEY DOPE, SNAPLOCK and some
    THREAT calls, by BRAA.
    """

    contacts: int = 1
    bullseye: Bullseye | None = None
    stacks: list[Stack] = field(default_factory=list)
    track: Track = Track.UNKNOWN
    aspect: Aspect = Aspect.UNKNOWN
    braa: BRAA | None = None
    declaration: Declaration = Declaration.BOGEY
    platforms: list[str] = field(default_factory=list)
    fast: bool = False
    very_fast: bool = False
    threat: bool = False
    merged_with: int = 0
    object_ids: list[int] = field(default_factory=list)

    @property
    def altitude(self) -> float:
        """Highest altitude in feet, or 0 when unknown."""
        return self.stacks[0].altitude if self.stacks else 0.0

    @property
    def heavy(self) -> bool:
        """Whether the group has three or more contacts."""
        return self.contacts >= _HEAVY_CONTACTS

    @property
    def high(self) -> bool:
        """Whether the group is above 40,000 feet."""
        return self.altitude > _HIGH_ALTITUDE_FEET

    def __str__(self) -> str:
        if self.bullseye is not None:
            location = f"bullseye {self.bullseye}"
        elif self.braa is not None:
            location = str(self.braa)
        else:
            location = "unknown location"
        text = (
            f"{self.declaration} group of {self.contacts} at {location}, "
            f"altitude {self.altitude:.0f}, track {self.track}"
        )
        if self.platforms:
            text += ", " + ", ".join(self.platforms)
        return text


@dataclass
class DeclareRequest:
    """A DECLARE call, locating the contact by bullseye or by BRAA."""

    callsign: str
    is_braa: bool = False
    bullseye: Bullseye | None = None
    bearing: Bearing | None = None
    range_nm: float = 0.0
    altitude: float = 0.0
    track: Track = Track.UNKNOWN

    def __str__(self) -> str:
        text = f"DECLARE for {self.callsign}: "
        if self.is_braa:
            text += f"bearing {self.bearing}, range {self.range_nm:.0f}"
            if self.altitude != 0:
                text += f", altitude {self.altitude:.0f}"
        else:
            text += f"bullseye {self.bullseye}"
        text += f", track {self.track}"
        return text


@dataclass
class DeclareResponse:
    """Response to a DECLARE call; the group may be absent for furball, unable or clean."""

    callsign: str
    declaration: Declaration
    group: Group | None = None