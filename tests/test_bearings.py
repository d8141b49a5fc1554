import math

import pytest

from skyeye.bearings import MagneticBearing, TrueBearing, normalize


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, 360),
        (1, 1),
        (359, 359),
        (360, 360),
        (361, 1),
        (-1, 359),
        (360 * 4 + 90, 90),
        (22.5, 22.5),
    ],
)
def test_normalize(value, expected):
    assert normalize(value) == pytest.approx(expected, abs=0.1)


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0, "360"), (1, "001"), (10, "010"), (100, "100"), (359, "359"), (360, "360")],
)
def test_bearing_to_string(value, expected):
    assert str(TrueBearing(value)) == expected


COMPASS_BEARINGS = [
    (-360, 360, "360"),
    (-90, 270, "270"),
    (-1, 359, "359"),
    (0, 360, "360"),
    (1, 1, "001"),
    (5, 5, "005"),
    (10, 10, "010"),
    (15, 15, "015"),
    (20, 20, "020"),
    (30, 30, "030"),
    (40, 40, "040"),
    (45, 45, "045"),
    (50, 50, "050"),
    (60, 60, "060"),
    (70, 70, "070"),
    (80, 80, "080"),
    (90, 90, "090"),
    (100, 100, "100"),
    (110, 110, "110"),
    (120, 120, "120"),
    (130, 130, "130"),
    (135, 135, "135"),
    (140, 140, "140"),
    (150, 150, "150"),
    (160, 160, "160"),
    (170, 170, "170"),
    (180, 180, "180"),
    (190, 190, "190"),
    (200, 200, "200"),
    (210, 210, "210"),
    (220, 220, "220"),
    (225, 225, "225"),
    (230, 230, "230"),
    (240, 240, "240"),
    (250, 250, "250"),
    (260, 260, "260"),
    (270, 270, "270"),
    (280, 280, "280"),
    (290, 290, "290"),
    (300, 300, "300"),
    (310, 310, "310"),
    (320, 320, "320"),
    (330, 330, "330"),
    (340, 340, "340"),
    (350, 350, "350"),
    (360, 360, "360"),
    (361, 1, "001"),
    (540, 180, "180"),
    (720, 360, "360"),
    (1080, 360, "360"),
    (34.5, 34.5, "035"),
    (33.49, 33.49, "033"),
]

RECIPROCALS = [
    (-45, 135),
    (0, 180),
    (1, 181),
    (90, 270),
    (180, 360),
    (360, 180),
    (540, 360),
    (33.35, 213.35),
]


@pytest.mark.parametrize(("value", "expected_degrees", "expected_string"), COMPASS_BEARINGS)
def test_new_magnetic_bearing(value, expected_degrees, expected_string):
    bearing = MagneticBearing(value)
    assert bearing.degrees() == pytest.approx(expected_degrees, abs=0.0001)
    assert bearing.rounded_degrees() == pytest.approx(math.floor(expected_degrees + 0.5), abs=0.0001)
    assert bearing.is_true() is False
    assert bearing.is_magnetic() is True


@pytest.mark.parametrize(("value", "expected_degrees", "expected_string"), COMPASS_BEARINGS)
def test_new_true_bearing(value, expected_degrees, expected_string):
    bearing = TrueBearing(value)
    assert bearing.degrees() == pytest.approx(expected_degrees, abs=0.0001)
    assert bearing.rounded_degrees() == pytest.approx(math.floor(expected_degrees + 0.5), abs=0.0001)
    assert bearing.is_true() is True
    assert bearing.is_magnetic() is False


@pytest.mark.parametrize(("value", "expected_degrees", "expected_string"), COMPASS_BEARINGS)
def test_magnetic_string(value, expected_degrees, expected_string):
    assert str(MagneticBearing(value)) == expected_string


@pytest.mark.parametrize(("value", "expected_degrees", "expected_string"), COMPASS_BEARINGS)
def test_true_string(value, expected_degrees, expected_string):
    assert str(TrueBearing(value)) == expected_string


@pytest.mark.parametrize(("value", "expected"), RECIPROCALS)
def test_magnetic_reciprocal(value, expected):
    reciprocal = MagneticBearing(value).reciprocal()
    assert reciprocal.degrees() == pytest.approx(expected, abs=0.0001)
    assert reciprocal.is_magnetic() is True


@pytest.mark.parametrize(("value", "expected"), RECIPROCALS)
def test_true_reciprocal(value, expected):
    reciprocal = TrueBearing(value).reciprocal()
    assert reciprocal.degrees() == pytest.approx(expected, abs=0.0001)
    assert reciprocal.is_true() is True


@pytest.mark.parametrize(
    ("value", "declination", "expected"),
    [(0, 0, 360), (360, 0, 360), (0, 1, 1), (358, 4, 2)],
)
def test_magnetic_true(value, declination, expected):
    converted = MagneticBearing(value).true(declination)
    assert converted.degrees() == pytest.approx(expected, abs=0.0001)
    assert converted.is_true() is True


@pytest.mark.parametrize(
    ("value", "declination", "expected"),
    [(0, 0, 360), (360, 0, 360), (0, 1, 359), (2, 4, 358)],
)
def test_true_magnetic(value, declination, expected):
    converted = TrueBearing(value).magnetic(declination)
    assert converted.degrees() == pytest.approx(expected, abs=0.0001)
    assert converted.is_magnetic() is True


def test_same_kind_conversion_returns_self():
    true_bearing = TrueBearing(45)
    magnetic_bearing = MagneticBearing(45)
    assert true_bearing.true(10) is true_bearing
    assert magnetic_bearing.magnetic(10) is magnetic_bearing


def test_round_trip_through_declination():
    original = TrueBearing(123.4)
    back = original.magnetic(7.5).true(7.5)
    assert back.degrees() == pytest.approx(original.degrees(), abs=1e-9)


def test_equality_depends_on_kind():
    assert TrueBearing(90) == TrueBearing(450)
    assert TrueBearing(90) != MagneticBearing(90)