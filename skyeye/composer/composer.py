"""Natural language for every response and call the GCI controller makes."""

from __future__ import annotations

import random
from collections.abc import Callable
from typing import Any

from skyeye.brevity.calls import (
    AlphaCheckResponse,
    BogeyDopeResponse,
    FadedCall,
    MergedCall,
    NegativeRadarContactResponse,
    PictureResponse,
    RadioCheckResponse,
    SayAgainResponse,
    SnaplockResponse,
    SpikedResponse,
    SunriseCall,
    ThreatCall,
    TripwireResponse,
)
from skyeye.brevity.geometry import Aspect, Track
from skyeye.brevity.group import Declaration, DeclareResponse
from skyeye.composer.information import InformationComposer, NaturalLanguageResponse
from skyeye.composer.pronounce import pronounce_bearing, pronounce_decimal

__all__ = ["Composer"]

_CARDINAL_ASPECTS = (Aspect.FLANK, Aspect.BEAM, Aspect.DRAG)

_NEGATIVE_RADAR_CONTACT_REPLIES = (
    "%s, negative radar contact. Double check your callsign.",
    "%s, negative radar contact. Check your callsign.",
    "%s, negative radar contact. Verify your callsign.",
    "%s, negative radar contact. Confirm your callsign.",
    "%s, negative radar contact. Send it again for me.",
    "%s, negative radar contact. I might have misheard your callsign.",
    "%s, negative radar contact. Is that the right callsign?",
    "%s, negative radar contact. Possible I misheard the callsign.",
    "%s, negative radar contact. No contact with that callsign on scope.",
    "%s, negative radar contact. Can't find that callsign on scope.",
    "%s, negative radar contact. I don't see that callsign on scope.",
    "%s, negative radar contact. I don't have that callsign on scope.",
    "%s, negative radar contact. I do not have that callsign on scope.",
)

_RADIO_CHECK_CONTACT_REPLIES = (
    "%s, 5 by 5.",
    "%s, 5 by 5!",
    "%s, I read you 5 by 5.",
    "%s, I've got you 5 by 5.",
    "%s, loud and clear.",
    "%s, I read you loud and clear.",
    "%s, I've got you loud and clear.",
    "%s, Lima Charlie.",
    "%s, Lima Charlie!",
)

_RADIO_CHECK_HEARD_REPLIES = (
    "%s, I've got you 5 by 5",
    "%s, I read you 5 by 5",
    "%s, I've got you loud and clear",
    "%s, I read you loud and clear",
    "%s, I heard you",
)

_RADIO_CHECK_NO_CONTACT_REPLIES = (
    "but I don't see you on the scope.",
    "but I don't see you on the radar.",
    "but I don't see you on the scope.",
    "but I don't see you on the radar.",
    "but you are not on the scope.",
    "but you are not on my radar.",
)

_TRIPWIRE_REPLIES = (
    "%s, I've got my copy of MULTI-SERVICE TACTICS TECHNIQUES AND PROCEDURES for Air Control "
    "Communication right here, and I don't see anything in here about a so-called TRIPWIRE.",
    "%s, I'm not sure what you mean by TRIPWIRE. I don't see that term in MULTI-SERVICE TACTICS "
    "TECHNIQUES AND PROCEDURES for Air Control Communication.",
    "%s, TRIPWIRE is not a term we use in Air Battle Management.",
    "%s, I'm not sure what you mean by TRIPWIRE.",
    "%s, I don't see anything about a TRIPWIRE in MULTI-SERVICE TACTICS TECHNIQUES AND "
    "PROCEDURES for Air Control Communication.",
    "%s, I'm not sure what you mean by TRIPWIRE. I don't see that term in MULTI-SERVICE TACTICS "
    "TECHNIQUES AND PROCEDURES for Air Control Communication.",
    "%s, give me a second, I'm just searching my copy of MULTI-SERVICE TACTICS TECHNIQUES AND "
    "PROCEDURES for Air Control Communication for what a TRIPWIRE is. Nope, I couldn't find it "
    "in there.",
    "%s, I have no idea what a TRIPWIRE is. Frankly, I don't want to know.",
    "%s, I think you have me confused with someone else.",
    "%s, did you know how many times the word TRIPWIRE appears in MULTI-SERVICE TACTICS "
    "TECHNIQUES AND PROCEDURES for Air Control Communication? I'll give you a hint: it's less "
    "than once. ",
    "%s, TRIPWIRE ain't no brevity I ever heard of!",
    "%s, please refer to MULTI-SERVICE TACTICS TECHNIQUES AND PROCEDURES for Air Control "
    "Communication. You will find that it does not contain any so-called TRIPWIRE.",
)

_TRIPWIRE_REASSURANCES = (
    "Look, I'm watching you on the radar, and I'll let you know if I see any threats, okay?",
    "Look, I'm watching you on the radar, and I'll let you know if I see any threats.",
    "I'll let you know with a THREAT call if I see anything that could be a danger to you, "
    "and you can ask me for an updated PICTURE at any time.",
    "I'm watching the radar for threats, and I'll let you know if I see anything that could "
    "be a danger to you.",
    "I'll keep watching you on the radar and let you know if I see anything that could be a "
    "threat.",
    "I'm monitoring you on my radar scope, and will let you know about any threats.",
    "I am monitoring you on the radar and will automatically inform you about any threats.",
    "Why don't you just focus on flying, and I'll focus on watching the radar for threats?",
    "Let's keep it simple: you fly the plane, I watch the radar for threats, and I'll let you "
    "know if I see anything.",
    "I'm watching for threats on the radar, and I'll inform you if anything needs your "
    "attention.",
    "I am following you on the radar and will tell you about any threats.",
    "I'm monitoring you on the radar. I will inform you if I see any threats, and you can ask "
    "me for an updated PICTURE at any time.",
)

_SAY_AGAIN_WITH_CALLSIGN = (
    "%s, sorry, I didn't understand. Say again.",
    "%s, I didn't catch that. Say again.",
    "%s, I didn't understand. Say again.",
    "%s, say again.",
    "%s, I didn't get that. Say again.",
    "%s, I only got the first part of that. Say again.",
)

_SAY_AGAIN_WITHOUT_CALLSIGN = (
    "I heard my callsign, but I did not understand the request. Say again.",
    "I heard someone call me, but I didn't understand what they said. Say again.",
    "I only got the first part of that. Say again.",
    "Sorry, I only caught part of that. Say again.",
)


def _frequency_text(megahertz: float) -> str:
    text = f"{megahertz:.3f}".rstrip("0")
    if text.endswith("."):
        text += "0"
    return text


class Composer(InformationComposer):
    """Converts brevity responses and calls into natural language.

    Several replies are picked at random from a set of variations.
    """

    def compose_alpha_check_response(self, response: AlphaCheckResponse) -> NaturalLanguageResponse:
        """Reply to an ALPHA CHECK with the caller's bullseye position."""
        if response.status and response.location is not None:
            location = response.location
            if not location.bearing.is_magnetic():
                self._warn_not_magnetic(location.bearing)
            callsign = response.callsign.upper()
            own = self.callsign.upper()
            distance = int(location.distance())
            return NaturalLanguageResponse(
                subtitle=f"{callsign}, {own}, contact, alpha check bullseye {location.bearing}/{distance}",
                speech=(
                    f"{callsign}, {own}, contact, alpha check bullseye "
                    f"{pronounce_bearing(location.bearing)}, {distance}"
                ),
            )
        return NaturalLanguageResponse.both(f"{response.callsign}, negative contact")

    def compose_negative_radar_contact_response(
        self, response: NegativeRadarContactResponse
    ) -> NaturalLanguageResponse:
        """Say the caller cannot be found on the scope."""
        reply = random.choice(_NEGATIVE_RADAR_CONTACT_REPLIES) % response.callsign.upper()
        return NaturalLanguageResponse.both(reply)

    def compose_merged_call(self, call: MergedCall) -> NaturalLanguageResponse:
        """Announce that the named aircraft have merged."""
        return NaturalLanguageResponse.both(", ".join(call.callsigns).upper() + ", merged.")

    def compose_picture_response(self, response: PictureResponse) -> NaturalLanguageResponse:
        """Describe the PICTURE, or CLEAN when there are no groups."""
        own = self.callsign.upper()
        if response.count == 0:
            return NaturalLanguageResponse(
                subtitle=f"{own}, {Declaration.CLEAN}.",
                speech=f"{own}, {Declaration.CLEAN}",
            )
        info = self.compose_core_information_format(*response.groups)
        fill_in = "single group." if response.count <= 1 else f"{response.count} groups."
        return NaturalLanguageResponse(
            subtitle=f"{own}, {fill_in} {info.subtitle.strip()}",
            speech=f"{own}, {fill_in} {info.speech.strip()}",
        )

    def compose_radio_check_response(self, response: RadioCheckResponse) -> NaturalLanguageResponse:
        """Reply to a RADIO CHECK, noting whether the caller is on the scope."""
        if response.radar_contact:
            template = random.choice(_RADIO_CHECK_CONTACT_REPLIES)
        else:
            template = (
                f"{random.choice(_RADIO_CHECK_HEARD_REPLIES)}, "
                f"{random.choice(_RADIO_CHECK_NO_CONTACT_REPLIES)}"
            )
        return NaturalLanguageResponse.both(template % response.callsign.upper())

    def compose_snaplock_response(self, response: SnaplockResponse) -> NaturalLanguageResponse:
        """Reply to a SNAPLOCK with the group, or with the bare declaration."""
        callsign = response.callsign.upper()
        if response.declaration in (Declaration.HOSTILE, Declaration.FRIENDLY):
            info = self.compose_core_information_format(response.group)
            return NaturalLanguageResponse(
                subtitle=f"{callsign}, {info.subtitle}",
                speech=f"{callsign}, {info.speech}",
            )
        return NaturalLanguageResponse.both(f"{callsign}, {response.declaration}")

    def compose_spiked_response(self, response: SpikedResponse) -> NaturalLanguageResponse:
        """Reply to a SPIKED call with the correlated contact, or clean on the bearing."""
        callsign = response.callsign.upper()
        if response.status:
            reply = (
                f"{callsign}, spike range {int(response.range_nm)}, "
                f"{self.compose_altitude(response.altitude, Declaration.BOGEY)}, {response.aspect}"
            )
            if response.aspect in _CARDINAL_ASPECTS and response.track != Track.UNKNOWN:
                reply = f"{reply} {response.track}"
            reply = f"{reply}, {response.declaration}"
            if response.contacts == 1:
                reply += ", single contact."
            elif response.contacts > 1:
                reply += f", {response.contacts} contacts."
            return NaturalLanguageResponse.both(reply)
        if response.bearing is None:
            return NaturalLanguageResponse.both(f"{callsign}, {Declaration.UNABLE}")
        own = self.callsign.upper()
        return NaturalLanguageResponse(
            subtitle=f"{callsign}, {own} clean {int(response.bearing.degrees())}.",
            speech=f"{callsign}, {own}, clean - {pronounce_bearing(response.bearing)}",
        )

    def compose_sunrise_call(self, call: SunriseCall) -> NaturalLanguageResponse:
        """Announce that GCI is online on the given frequencies."""
        own = self.callsign.upper()
        subtitle = [f"All players: GCI {own} (bot) sunrise on "]
        speech = [f"All players, GCI {own} sunrise on "]
        count = len(call.frequencies)
        for index, megahertz in enumerate(call.frequencies):
            text = _frequency_text(megahertz)
            subtitle.append(text)
            speech.append(pronounce_decimal(megahertz, len(text.split(".")[1]), "point"))
            if index == count - 2:
                separator = " and "
            elif index < count - 2:
                separator = ", "
            else:
                separator = ""
            subtitle.append(separator)
            speech.append(separator)
        return NaturalLanguageResponse(subtitle="".join(subtitle), speech="".join(speech))

    def compose_tripwire_response(self, response: TripwireResponse) -> NaturalLanguageResponse:
        """Explain that TRIPWIRE is not a brevity term."""
        opening = random.choice(_TRIPWIRE_REPLIES) % response.callsign.upper()
        reply = f"{opening} {random.choice(_TRIPWIRE_REASSURANCES)}"
        return NaturalLanguageResponse.both(reply)

    def compose_say_again_response(self, response: SayAgainResponse) -> NaturalLanguageResponse:
        """Ask the caller to repeat the last transmission."""
        if response.callsign:
            reply = random.choice(_SAY_AGAIN_WITH_CALLSIGN) % response.callsign.upper()
        else:
            reply = random.choice(_SAY_AGAIN_WITHOUT_CALLSIGN)
        return NaturalLanguageResponse.both(reply)

    def compose(self, call: Any) -> NaturalLanguageResponse:
        """Compose any supported response or call; raise TypeError for anything else."""
        handler = _ROUTES.get(type(call))
        if handler is None:
            raise TypeError(f"no route for call of type {type(call).__name__}")
        return handler(self, call)

    @staticmethod
    def _warn_not_magnetic(bearing: Any) -> None:
        import logging

        logging.getLogger(__name__).error(
            "bearing provided to compose_alpha_check_response should be magnetic",
            extra={"fields": {"bearing": str(bearing)}},
        )


_ROUTES: dict[type, Callable[[Composer, Any], NaturalLanguageResponse]] = {
    AlphaCheckResponse: Composer.compose_alpha_check_response,
    BogeyDopeResponse: Composer.compose_bogey_dope_response,
    DeclareResponse: Composer.compose_declare_response,
    FadedCall: Composer.compose_faded_call,
    NegativeRadarContactResponse: Composer.compose_negative_radar_contact_response,
    PictureResponse: Composer.compose_picture_response,
    RadioCheckResponse: Composer.compose_radio_check_response,
    SnaplockResponse: Composer.compose_snaplock_response,
    SpikedResponse: Composer.compose_spiked_response,
    TripwireResponse: Composer.compose_tripwire_response,
    SunriseCall: Composer.compose_sunrise_call,
    ThreatCall: Composer.compose_threat_call,
    MergedCall: Composer.compose_merged_call,
    SayAgainResponse: Composer.compose_say_again_response,
}