"""True and magnetic compass bearings, in degrees normalized to (0, 360]."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

__all__ = ["Bearing", "TrueBearing", "MagneticBearing", "normalize"]


def normalize(degrees: float) -> float:
    """Normalize an angle in degrees to the range (0, 360]."""
    theta = float(degrees)
    while theta < 0:
        theta += 360
    theta = math.fmod(theta, 360)
    if theta == 0:
        theta = 360.0
    return theta


def _round_half_away(value: float) -> float:
    return float(math.copysign(math.floor(abs(value) + 0.5), value))


class Bearing(ABC):
    """A compass bearing, either true or magnetic."""

    __slots__ = ("_theta",)

    def __init__(self, degrees: float) -> None:
        self._theta = normalize(degrees)

    def degrees(self) -> float:
        """The bearing in degrees, in range (0, 360]."""
        return self._theta

    def rounded_degrees(self) -> float:
        """The bearing in degrees, rounded to the nearest degree."""
        return _round_half_away(self._theta)

    @abstractmethod
    def true(self, declination: float) -> Bearing:
        """Convert to a true bearing using the given declination in degrees."""

    @abstractmethod
    def magnetic(self, declination: float) -> Bearing:
        """Convert to a magnetic bearing using the given declination in degrees."""

    def reciprocal(self) -> Bearing:
        """The opposite bearing, of the same kind."""
        return type(self)(self._theta + 180)

    @abstractmethod
    def is_true(self) -> bool:
        """Whether this bearing points at geographic north."""

    @abstractmethod
    def is_magnetic(self) -> bool:
        """Whether this bearing points at magnetic north."""

    def __str__(self) -> str:
        return f"{self.rounded_degrees():03.0f}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._theta!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._theta == other._theta  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._theta))


class TrueBearing(Bearing):
    """A bearing relative to geographic north."""

    __slots__ = ()

    def true(self, declination: float) -> Bearing:
        return self

    def magnetic(self, declination: float) -> Bearing:
        return MagneticBearing(self._theta - declination)

    def is_true(self) -> bool:
        return True

    def is_magnetic(self) -> bool:
        return False


class MagneticBearing(Bearing):
    """A bearing relative to magnetic north."""

    __slots__ = ()

    def true(self, declination: float) -> Bearing:
        return TrueBearing(self._theta + declination)

    def magnetic(self, declination: float) -> Bearing:
        return self

    def is_true(self) -> bool:
        return False

    def is_magnetic(self) -> bool:
        return True