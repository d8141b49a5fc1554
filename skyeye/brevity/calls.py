"""Requests, responses and calls exchanged between aircrews and the GCI controller."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from skyeye.bearings import Bearing
from skyeye.brevity.geometry import BRA, Aspect, Bullseye, Track
from skyeye.brevity.group import Declaration, Group

__all__ = [
    "AlphaCheckRequest",
    "AlphaCheckResponse",
    "ContactCategory",
    "BogeyDopeRequest",
    "BogeyDopeResponse",
    "NegativeRadarContactResponse",
    "FadedCall",
    "MergedCall",
    "MERGE_ENTRY_DISTANCE_NM",
    "MERGE_EXIT_DISTANCE_NM",
    "PictureRequest",
    "PictureResponse",
    "RadioCheckRequest",
    "RadioCheckResponse",
    "SnaplockRequest",
    "SnaplockResponse",
    "SpikedRequest",
    "SpikedResponse",
    "SunriseCall",
    "ThreatCall",
    "MANDATORY_THREAT_DISTANCE_NM",
    "TripwireRequest",
    "TripwireResponse",
    "UnableToUnderstandRequest",
    "SayAgainResponse",
]

# Distance in nautical miles at which contacts enter the merge.
MERGE_ENTRY_DISTANCE_NM = 3.0
# Distance in nautical miles at which contacts exit the merge.
MERGE_EXIT_DISTANCE_NM = 5.0
# Distance in nautical miles inside which a contact is a threat regardless of aspect.
MANDATORY_THREAT_DISTANCE_NM = 35.0


@dataclass
class AlphaCheckRequest:
    """A request for the caller's own position, given from the bullseye."""

    callsign: str

    def __str__(self) -> str:
        return f"ALPHA CHECK for {self.callsign}"


@dataclass
class AlphaCheckResponse:
    """Response to an ALPHA CHECK; the location may be absent when status is false."""

    callsign: str
    status: bool
    location: Bullseye | None = None


class ContactCategory(IntEnum):
    """Kind of aircraft a BOGEY DOPE is filtered to."""

    AIRCRAFT = 0
    FIXED_WING = 1
    ROTARY_WING = 2

    def __str__(self) -> str:
        return _CATEGORY_NAMES[self]


_CATEGORY_NAMES = {
    ContactCategory.AIRCRAFT: "Aircraft",
    ContactCategory.FIXED_WING: "Fixed Wing",
    ContactCategory.ROTARY_WING: "Rotary Wing",
}


@dataclass
class BogeyDopeRequest:
    """A request for the hostile group closest to the caller."""

    callsign: str
    filter: ContactCategory = ContactCategory.AIRCRAFT

    def __str__(self) -> str:
        return f"BOGEY DOPE for {self.callsign}: filter {self.filter}"


@dataclass
class BogeyDopeResponse:
    """Response to a BOGEY DOPE; the group is absent when nothing qualifies."""

    callsign: str
    group: Group | None = None


@dataclass
class NegativeRadarContactResponse:
    """Response when the caller cannot be found on the radar scope."""

    callsign: str


@dataclass
class FadedCall:
    """A tracked group that has not been updated by any sensor for some time."""

    group: Group


@dataclass
class MergedCall:
    """Friendly aircraft that have merged with a hostile group."""

    callsigns: list[str] = field(default_factory=list)


@dataclass
class PictureRequest:
    """A request for an updated PICTURE; the callsign may be empty."""

    callsign: str = ""

    def __str__(self) -> str:
        if not self.callsign:
            return "PICTURE"
        return f"PICTURE for {self.callsign}"


@dataclass
class PictureResponse:
    """A PICTURE: the total number of groups and at most three of them."""

    count: int = 0
    groups: list[Group] = field(default_factory=list)


@dataclass
class RadioCheckRequest:
    """A RADIO CHECK."""

    callsign: str

    def __str__(self) -> str:
        return f"RADIO CHECK for {self.callsign}"


@dataclass
class RadioCheckResponse:
    """Response to a RADIO CHECK, saying whether the caller is on the scope."""

    callsign: str
    radar_contact: bool = False


@dataclass
class SnaplockRequest:
    """An abbreviated DECLARE for a contact inside threat range."""

    callsign: str
    bra: BRA

    def __str__(self) -> str:
        return f"SNAPLOCK for {self.callsign}: bra {self.bra}"


@dataclass
class SnaplockResponse:
    """Response to a SNAPLOCK; the group may be absent for unable or furball."""

    callsign: str
    declaration: Declaration
    group: Group | None = None


@dataclass
class SpikedRequest:
    """A request to correlate a radar spike on the given bearing."""

    callsign: str
    bearing: Bearing

    def __str__(self) -> str:
        return f"SPIKED for {self.callsign}: bearing {self.bearing}"


@dataclass
class SpikedResponse:
    """Contacts correlated within 30 degrees of a reported spike."""

    callsign: str
    status: bool = False
    range_nm: float = 0.0
    altitude: float = 0.0
    aspect: Aspect = Aspect.UNKNOWN
    track: Track = Track.UNKNOWN
    declaration: Declaration = Declaration.CLEAN
    contacts: int = 0
    bearing: Bearing | None = None


@dataclass
class SunriseCall:
    """Announcement that the GCI is online, with its frequencies in megahertz."""

    frequencies: list[float] = field(default_factory=list)


@dataclass
class ThreatCall:
    """A group threatening the named friendly aircraft."""

    callsigns: list[str]
    group: Group


@dataclass
class TripwireRequest:
    """A request for a TRIPWIRE, which is not a real brevity term."""

    callsign: str

    def __str__(self) -> str:
        return f"TRIPWIRE for {self.callsign}"


@dataclass
class TripwireResponse:
    """Response to a TRIPWIRE request."""

    callsign: str


@dataclass
class UnableToUnderstandRequest:
    """A transmission whose callsign or request could not be understood."""

    callsign: str = ""

    def __str__(self) -> str:
        if self.callsign:
            return f"UNABLE TO UNDERSTAND: callsign {self.callsign}"
        return "UNABLE TO UNDERSTAND: unknown callsign"


@dataclass
class SayAgainResponse:
    """Asks the caller to repeat; the callsign may be empty."""

    callsign: str = ""