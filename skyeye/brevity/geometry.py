"""Brevity geometry: altitude stacks, aspect, track direction, BRA/BRAA and bullseye."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum

from skyeye.bearings import Bearing, MagneticBearing

__all__ = [
    "Stack",
    "Aspect",
    "Track",
    "BRA",
    "BRAA",
    "Bullseye",
    "stacks",
    "aspect_from_angle",
    "track_from_bearing",
]

_log = logging.getLogger(__name__)

# A new stack starts when an altitude is at least this far below the previous stack.
_STACK_SEPARATION_FEET = 9900.0


def _round_half_away(value: float) -> float:
    return float(math.copysign(math.floor(abs(value) + 0.5), value))


def _normalize_altitude(feet: float) -> float:
    """Round to the nearest hundred feet below 1,000 ft, else to the nearest thousand."""
    if feet < 1000:
        return _round_half_away(feet / 100) * 100
    return _round_half_away(feet / 1000) * 1000


@dataclass
class Stack:
    """A single layer of an altitude STACK."""

    altitude: float
    count: int

    def __str__(self) -> str:
        return f"{self.count} {self.altitude:.0f}"


def stacks(*altitudes: float) -> list[Stack]:
    """Group altitudes in feet into STACKS, ordered from highest to lowest.

    Altitudes that normalize to zero are ignored.
    """
    result: list[Stack] = []
    for altitude in sorted((_normalize_altitude(a) for a in altitudes), reverse=True):
        if altitude == 0:
            continue
        if result and altitude > result[-1].altitude - _STACK_SEPARATION_FEET:
            result[-1].count += 1
        else:
            result.append(Stack(altitude=altitude, count=1))
    return result


class Aspect(str, Enum):
    """Target aspect of a contact relative to a fighter."""

    UNKNOWN = "maneuver"
    HOT = "hot"
    FLANK = "flank"
    BEAM = "beam"
    DRAG = "drag"

    def __str__(self) -> str:
        return self.value


class Track(str, Enum):
    """Compass direction of travel."""

    UNKNOWN = "unknown"
    NORTH = "north"
    NORTHEAST = "northeast"
    EAST = "east"
    SOUTHEAST = "southeast"
    SOUTH = "south"
    SOUTHWEST = "southwest"
    WEST = "west"
    NORTHWEST = "northwest"

    def __str__(self) -> str:
        return self.value


def aspect_from_angle(bearing: Bearing, track: Bearing) -> Aspect:
    """Target aspect from the magnetic bearing to the target and its magnetic track."""
    if not bearing.is_magnetic() or not track.is_magnetic():
        _log.warning(
            "bearing and track provided to aspect_from_angle should be magnetic",
            extra={"fields": {"bearing": str(bearing), "track": str(track)}},
        )

    reciprocal = bearing.reciprocal()
    if reciprocal.degrees() > track.degrees():
        theta = reciprocal.degrees() - track.degrees()
    else:
        theta = track.reciprocal().degrees() - bearing.degrees()
    theta = MagneticBearing(theta).degrees()

    if 0 <= theta <= 35:
        return Aspect.HOT
    if 35 < theta <= 75:
        return Aspect.FLANK
    if 75 < theta <= 115:
        return Aspect.BEAM
    if 115 < theta <= 245:
        return Aspect.DRAG
    if 245 < theta <= 285:
        return Aspect.BEAM
    if 285 < theta <= 325:
        return Aspect.FLANK
    if 325 < theta <= 360:
        return Aspect.HOT
    return Aspect.UNKNOWN


_TRACK_SECTORS = (
    (67.5, Track.NORTHEAST),
    (112.5, Track.EAST),
    (157.5, Track.SOUTHEAST),
    (202.5, Track.SOUTH),
    (247.5, Track.SOUTHWEST),
    (292.5, Track.WEST),
    (337.5, Track.NORTHWEST),
)


def track_from_bearing(bearing: Bearing) -> Track:
    """Track direction for the given magnetic bearing."""
    if not bearing.is_magnetic():
        _log.warning(
            "bearing provided to track_from_bearing should be magnetic",
            extra={"fields": {"bearing": str(bearing)}},
        )
    theta = bearing.degrees()
    if theta >= 337.5 or theta < 22.5:
        return Track.NORTH
    for upper, direction in _TRACK_SECTORS:
        if theta < upper:
            return direction
    return Track.UNKNOWN


class BRA:
    """Bearing, range and altitude of a contact relative to a fighter."""

    def __init__(self, bearing: Bearing, range_nm: float, *altitudes: float) -> None:
        if not bearing.is_magnetic():
            _log.warning(
                "bearing provided to BRA should be magnetic",
                extra={"fields": {"bearing": str(bearing)}},
            )
        self.bearing = bearing
        self.range_nm = float(range_nm)
        self.stacks = stacks(*altitudes)

    def range(self) -> float:
        """Range in nautical miles, rounded to the nearest mile."""
        return _round_half_away(self.range_nm)

    def altitude(self) -> float:
        """Highest altitude in feet, or 0 when unknown."""
        if not self.stacks:
            return 0.0
        return _normalize_altitude(self.stacks[0].altitude)

    def __str__(self) -> str:
        text = f"BRA {self.bearing}/{self.range():.0f} {self.altitude():.0f}"
        if len(self.stacks) > 1:
            text += " ([" + " ".join(str(s) for s in self.stacks) + "])"
        return text


class BRAA(BRA):
    """BRA with the aspect of the contact."""

    def __init__(
        self, bearing: Bearing, range_nm: float, altitudes: list[float], aspect: Aspect
    ) -> None:
        if not bearing.is_magnetic():
            _log.warning(
                "bearing provided to BRAA should be magnetic",
                extra={"fields": {"bearing": str(bearing)}},
            )
        super().__init__(bearing, range_nm, *altitudes)
        self.aspect = Aspect(aspect)

    def __str__(self) -> str:
        return f"{super().__str__()} {self.aspect}"


@dataclass(frozen=True)
class Bullseye:
    """Magnetic bearing and distance in nautical miles from the BULLSEYE."""

    bearing: Bearing
    distance_nm: float

    def __post_init__(self) -> None:
        if not self.bearing.is_magnetic():
            _log.warning(
                "bearing provided to Bullseye should be magnetic",
                extra={"fields": {"bearing": str(self.bearing)}},
            )

    def distance(self) -> float:
        """Distance in nautical miles, rounded to the nearest mile."""
        return _round_half_away(self.distance_nm)

    def __str__(self) -> str:
        return f"{self.bearing}/{self.distance_nm:.0f}"