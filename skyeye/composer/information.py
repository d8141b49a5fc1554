"""Natural language for groups, locations, altitudes and group-centred calls."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

from skyeye.bearings import Bearing
from skyeye.brevity.calls import BogeyDopeResponse, FadedCall, ThreatCall
from skyeye.brevity.geometry import BRAA, Aspect, Bullseye, Stack, Track
from skyeye.brevity.group import Declaration, DeclareResponse, Group
from skyeye.composer.pronounce import pronounce_bearing

__all__ = ["NaturalLanguageResponse", "InformationComposer"]

_log = logging.getLogger(__name__)

_CARDINAL_ASPECTS = (Aspect.FLANK, Aspect.BEAM, Aspect.DRAG)
_NO_GROUP_DECLARATIONS = (Declaration.FURBALL, Declaration.UNABLE, Declaration.CLEAN)
_AT_BULLSEYE_NM = 5


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _check_magnetic(bearing: Bearing, where: str) -> None:
    if not bearing.is_magnetic():
        _log.error(
            "bearing provided to %s should be magnetic",
            where,
            extra={"fields": {"bearing": str(bearing)}},
        )


@dataclass(frozen=True)
class NaturalLanguageResponse:
    """A response as in-game subtitle text and as speech synthesis input."""

    subtitle: str
    speech: str

    @classmethod
    def both(cls, text: str) -> NaturalLanguageResponse:
        """A response whose subtitle and speech are the same text."""
        return cls(subtitle=text, speech=text)


class _Builder:
    """Accumulates subtitle and speech text side by side."""

    def __init__(self) -> None:
        self.subtitle: list[str] = []
        self.speech: list[str] = []

    def both(self, text: str) -> None:
        self.subtitle.append(text)
        self.speech.append(text)

    def add(self, subtitle: str, speech: str) -> None:
        self.subtitle.append(subtitle)
        self.speech.append(speech)

    def build(self) -> NaturalLanguageResponse:
        return NaturalLanguageResponse(subtitle="".join(self.subtitle), speech="".join(self.speech))


class InformationComposer:
    """Composes group information and calls that centre on a group."""

    def __init__(self, callsign: str) -> None:
        self.callsign = callsign

    def compose_core_information_format(self, *groups: Group) -> NaturalLanguageResponse:
        """Describe each group in turn, or CLEAN when there are none."""
        if not groups:
            return NaturalLanguageResponse.both(str(Declaration.CLEAN))
        responses = [self.compose_group(group) for group in groups]
        return NaturalLanguageResponse(
            subtitle=" ".join(r.subtitle for r in responses),
            speech=" ".join(r.speech for r in responses),
        )

    def compose_group(self, group: Group) -> NaturalLanguageResponse:
        """Describe one group: location, altitude, track, declaration and fill-ins."""
        if group is None:
            raise ValueError("a group is required")
        if group.braa is not None:
            _check_magnetic(group.braa.bearing, "compose_group")
        if group.bullseye is not None:
            _check_magnetic(group.bullseye.bearing, "compose_group")

        out = _Builder()
        label = "Group threat" if group.threat else "Group"
        group_stacks = group.stacks

        if group.bullseye is not None:
            bullseye = self.compose_bullseye(group.bullseye)
            altitude = self.compose_altitude_stacks(group_stacks, group.declaration)
            out.add(
                f"{label} {bullseye.subtitle}, {altitude}",
                f"{label} {bullseye.speech}, {altitude}",
            )
            if group.track != Track.UNKNOWN:
                out.both(f", track {group.track}")
        elif group.braa is not None:
            braa = self.compose_braa(group.braa, group.declaration)
            out.add(f"{label} {braa.subtitle}", f"{label} {braa.speech}")
            if (
                group.braa.aspect in _CARDINAL_ASPECTS
                and group.track != Track.UNKNOWN
                and group.declaration != Declaration.FURBALL
            ):
                out.both(f" {group.track}")

        out.both(f", {group.declaration}")
        if group.merged_with == 1:
            out.both(", merged with 1 friendly")
        elif group.merged_with > 1:
            out.both(f", merged with {group.merged_with} friendlies")

        if group.heavy:
            out.both(", heavy")
        contacts = self.compose_contacts(group.contacts)
        out.add(contacts.subtitle, contacts.speech)

        if not group.high and len(group_stacks) > 1:
            out.both(", " + self.compose_altitude_fill_ins(group_stacks))

        if group.platforms:
            out.both(", " + ", ".join(group.platforms))

        if group.high:
            out.both(", high")

        if group.fast:
            out.both(", fast")
        elif group.very_fast:
            out.both(", very fast")

        out.both(".")
        return out.build()

    def compose_contacts(self, n: int) -> NaturalLanguageResponse:
        """The number of contacts; a single contact is left unsaid."""
        return NaturalLanguageResponse.both(f", {n} contacts" if n > 1 else "")

    def compose_altitude_stacks(self, stacks: Sequence[Stack], declaration: Declaration) -> str:
        """Altitude of a group, as a STACK when it has several layers."""
        if not stacks:
            return "altitude unknown"
        altitudes = [self.compose_altitude(s.altitude, declaration) for s in stacks]
        if len(altitudes) == 1:
            return altitudes[0]
        return "stack " + ", ".join(altitudes[:-1]) + " and " + altitudes[-1]

    def compose_altitude_fill_ins(self, stacks: Sequence[Stack]) -> str:
        """Contact counts per altitude layer for two or three layers."""
        if len(stacks) == 2:
            return f"{stacks[0].count} high, {stacks[1].count} low"
        if len(stacks) == 3:
            return f"{stacks[0].count} high, {stacks[1].count} medium, {stacks[2].count} low"
        return ""

    def compose_altitude(self, altitude: float, declaration: Declaration) -> str:
        """An altitude in feet, as angels or cherubs for friendlies."""
        hundreds = int(_round_half_away(altitude / 100))
        thousands = int(_round_half_away(altitude / 1000))
        if hundreds == 0:
            return "altitude unknown"
        if declaration == Declaration.FRIENDLY:
            if altitude < 1000:
                return f"cherubs {hundreds}"
            return f"angels {thousands}"
        if altitude < 1000:
            return str(hundreds * 100)
        return str(thousands * 1000)

    def compose_braa(self, braa: BRAA, declaration: Declaration) -> NaturalLanguageResponse:
        """Bearing, range, altitude and aspect of a contact."""
        _check_magnetic(braa.bearing, "compose_braa")
        aspect = "" if braa.aspect == Aspect.UNKNOWN else str(braa.aspect)
        range_nm = int(braa.range())
        altitude = self.compose_altitude(braa.altitude(), declaration)
        return NaturalLanguageResponse(
            subtitle=f"BRAA {braa.bearing}/{range_nm}, {altitude}, {aspect}",
            speech=f"BRAA {pronounce_bearing(braa.bearing)}, {range_nm}, {altitude}, {aspect}",
        )

    def compose_bullseye(self, bullseye: Bullseye) -> NaturalLanguageResponse:
        """A bullseye location, or "at bullseye" when within 5 miles of it."""
        _check_magnetic(bullseye.bearing, "compose_bullseye")
        distance = bullseye.distance()
        if distance <= _AT_BULLSEYE_NM:
            return NaturalLanguageResponse.both("at bullseye")
        return NaturalLanguageResponse(
            subtitle=f"bullseye {bullseye.bearing}/{int(distance)}",
            speech=f"bullseye {pronounce_bearing(bullseye.bearing)}, {int(distance)}",
        )

    def compose_declare_response(self, response: DeclareResponse) -> NaturalLanguageResponse:
        """Reply to a DECLARE call."""
        callsign = response.callsign.upper()
        if response.declaration in _NO_GROUP_DECLARATIONS:
            return NaturalLanguageResponse.both(f"{callsign}, {response.declaration}.")
        info = self.compose_core_information_format(response.group)
        return NaturalLanguageResponse(
            subtitle=f"{callsign}, {info.subtitle}",
            speech=f"{callsign}, {info.speech}",
        )

    def compose_faded_call(self, call: FadedCall) -> NaturalLanguageResponse:
        """Announce that a group has faded."""
        group = call.group
        out = _Builder()
        out.both(f"{self.callsign}, ")
        if group.contacts == 1:
            out.both("single contact faded,")
        else:
            out.both(f"{group.contacts} contacts faded,")

        if group.bullseye is not None:
            bullseye = self.compose_bullseye(group.bullseye)
            out.add(" " + bullseye.subtitle, " " + bullseye.speech)

        if group.track != Track.UNKNOWN:
            out.both(f", track {group.track}")

        if group.declaration != Declaration.UNABLE:
            out.both(f", {group.declaration}")

        for platform in group.platforms:
            out.both(", " + platform)

        out.both(".")
        return out.build()

    def compose_bogey_dope_response(self, response: BogeyDopeResponse) -> NaturalLanguageResponse:
        """Reply to a BOGEY DOPE with the closest group, or CLEAN."""
        callsign = response.callsign.upper()
        if response.group is None:
            return NaturalLanguageResponse.both(f"{callsign}, {Declaration.CLEAN}")
        if response.group.braa is not None:
            _check_magnetic(response.group.braa.bearing, "compose_bogey_dope_response")
        info = self.compose_core_information_format(response.group)
        return NaturalLanguageResponse(
            subtitle=f"{callsign}, {info.subtitle}",
            speech=f"{callsign}, {info.speech}",
        )

    def compose_threat_call(self, call: ThreatCall) -> NaturalLanguageResponse:
        """Warn the named aircraft of a threatening group."""
        group = self.compose_group(call.group)
        callsigns = ", ".join(call.callsigns).upper()
        subtitle = group.subtitle[:1].lower() + group.subtitle[1:]
        return NaturalLanguageResponse(
            subtitle=f"{callsigns}, {subtitle}",
            speech=f"{callsigns}, {group.speech}",
        )