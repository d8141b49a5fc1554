import logging

import pytest

from skyeye.bearings import MagneticBearing, TrueBearing
from skyeye.brevity.geometry import (
    BRA,
    BRAA,
    Aspect,
    Bullseye,
    Stack,
    Track,
    aspect_from_angle,
    stacks,
    track_from_bearing,
)


@pytest.mark.parametrize(
    "altitudes, expected",
    [
        ([], []),
        ([0], []),
        ([0, 100], [(100, 1)]),
        ([40], []),
        ([100], [(100, 1)]),
        ([100, 12000], [(12000, 1), (100, 1)]),
        (
            [10000, 20000, 30000, 40000, 50000],
            [(50000, 1), (40000, 1), (30000, 1), (20000, 1), (10000, 1)],
        ),
        ([10000, 10000], [(10000, 2)]),
        ([10000, 15000], [(15000, 2)]),
        ([10000, 20000, 20000], [(20000, 2), (10000, 1)]),
    ],
)
def test_stacks(altitudes, expected):
    result = stacks(*altitudes)
    assert len(result) == len(expected)
    for stack, (altitude, count) in zip(result, expected):
        assert stack.altitude == pytest.approx(altitude, abs=0.5)
        assert stack.count == count


def test_stacks_does_not_modify_input():
    altitudes = [100, 12000]
    stacks(*altitudes)
    assert altitudes == [100, 12000]


def test_stack_str():
    assert str(Stack(altitude=20000, count=2)) == "2 20000"


_DIRECTIONS = {
    "n": 0,
    "nne": 22.5,
    "ne": 45,
    "ene": 67.5,
    "e": 90,
    "ese": 112.5,
    "se": 135,
    "sse": 157.5,
    "s": 180,
    "ssw": 202.5,
    "sw": 225,
    "wsw": 247.5,
    "w": 270,
    "wnw": 292.5,
    "nw": 315,
    "nnw": 337.5,
}

_ORDER = list(_DIRECTIONS)

_EXPECTED_ASPECTS = {
    "n": "DDDBBFFHHHFFBBDD",
    "e": "BBDDDDDBBFFHHHFF",
    "s": "HHFFBBDDDDDBBFFH",
    "w": "BFFHHHFFBBDDDDDB",
}

_LETTERS = {"H": Aspect.HOT, "F": Aspect.FLANK, "B": Aspect.BEAM, "D": Aspect.DRAG}

_ASPECT_CASES = [
    (bearing, track, _LETTERS[letter])
    for bearing, letters in _EXPECTED_ASPECTS.items()
    for track, letter in zip(_ORDER, letters)
]


@pytest.mark.parametrize("bearing, track, expected", _ASPECT_CASES)
def test_aspect_from_angle(bearing, track, expected):
    actual = aspect_from_angle(
        MagneticBearing(_DIRECTIONS[bearing]), MagneticBearing(_DIRECTIONS[track])
    )
    assert actual is expected


def test_aspect_from_angle_warns_on_true_bearings(caplog):
    with caplog.at_level(logging.WARNING):
        result = aspect_from_angle(TrueBearing(0), TrueBearing(180))
    assert result is Aspect.HOT
    assert any(r.levelno == logging.WARNING for r in caplog.records)


@pytest.mark.parametrize(
    "degrees, expected",
    [
        (0, Track.NORTH),
        (45, Track.NORTHEAST),
        (90, Track.EAST),
        (135, Track.SOUTHEAST),
        (180, Track.SOUTH),
        (225, Track.SOUTHWEST),
        (270, Track.WEST),
        (315, Track.NORTHWEST),
        (360, Track.NORTH),
    ],
)
def test_track_from_bearing(degrees, expected):
    assert track_from_bearing(MagneticBearing(degrees)) is expected


def test_track_from_bearing_warns_on_true_bearing(caplog):
    with caplog.at_level(logging.WARNING):
        result = track_from_bearing(TrueBearing(90))
    assert result is Track.EAST
    assert any(r.levelno == logging.WARNING for r in caplog.records)


def test_enum_strings():
    assert Aspect("maneuver") is Aspect.UNKNOWN
    assert str(Aspect("maneuver")) == "maneuver"
    assert str(track_from_bearing(MagneticBearing(315))) == "northwest"
    assert str(aspect_from_angle(MagneticBearing(0), MagneticBearing(180))) == "hot"


def test_bra_range_and_altitude():
    bra = BRA(MagneticBearing(90), 10.6, 20000, 10000)
    assert bra.range() == 11
    assert bra.altitude() == 20000
    assert [s.count for s in bra.stacks] == [1, 1]
    assert bra.bearing == MagneticBearing(90)


def test_bra_without_altitude():
    bra = BRA(MagneticBearing(90), 10)
    assert bra.altitude() == 0
    assert bra.stacks == []


def test_bra_str_single_stack():
    assert str(BRA(MagneticBearing(90), 10.4, 20000)) == "BRA 090/10 20000"


def test_bra_str_multiple_stacks():
    bra = BRA(MagneticBearing(5), 30, 20000, 20000, 10000)
    assert str(bra) == "BRA 005/30 20000 ([2 20000 1 10000])"


def test_braa():
    braa = BRAA(MagneticBearing(270), 25, [15000], Aspect.HOT)
    assert braa.aspect is Aspect.HOT
    assert braa.range() == 25
    assert braa.altitude() == 15000
    assert str(braa) == "BRA 270/25 15000 hot"


def test_bullseye():
    bullseye = Bullseye(MagneticBearing(45), 10.4)
    assert bullseye.distance() == 10
    assert str(bullseye) == "045/10"
    assert Bullseye(MagneticBearing(45), 10.6).distance() == 11