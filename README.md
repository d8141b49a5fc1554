# skyeye

Building blocks for a ground-controlled intercept (GCI) controller in a
combat flight simulator. The package models the air combat brevity
vocabulary (bearings, altitude stacks, aspect, groups, requests and calls)
and turns structured calls into the subtitle and speech text a controller
would transmit over the radio.

It uses only the Python standard library and supports Python 3.10 and later.

## Modules

- `skyeye.coalitions`: `Coalition` (`RED`, `BLUE`, `NEUTRALS`),
  `Coalition.opposite()` and `all_coalitions()`.
- `skyeye.bearings`: `TrueBearing` and `MagneticBearing`, both subclasses of
  `Bearing`, hold an angle normalised to the range (0, 360] degrees. They
  offer `degrees()`, `rounded_degrees()`, `true(declination)`,
  `magnetic(declination)`, `reciprocal()`, `is_true()`, `is_magnetic()`, and
  print as three digits. `normalize()` exposes the normalisation itself.
- `skyeye.cli`: `EnumOption`, a string value restricted to a set of choices
  (`set()` raises `ValueError` for anything else), and
  `setup_logging(level_name, format_name)`, which configures the root logger
  to write to standard error, as readable lines for the format `"pretty"`
  and as JSON lines otherwise. Level names are `error`, `warn`, `info`,
  `debug` and `trace` (the extra `TRACE` level); unknown names fall back to
  `info`. It returns the level that was set.
- `skyeye.brevity.geometry`: `Stack` and `stacks()`, `Aspect` and
  `aspect_from_angle()`, `Track` and `track_from_bearing()`, and the location
  formats `BRA`, `BRAA` and `Bullseye`.
- `skyeye.brevity.group`: `Group`, `Declaration`, `DeclareRequest` and
  `DeclareResponse`.
- `skyeye.brevity.calls`: the remaining requests, responses and calls:
  ALPHA CHECK, BOGEY DOPE (with `ContactCategory`), NEGATIVE RADAR CONTACT,
  FADED, MERGED, PICTURE, RADIO CHECK, SNAPLOCK, SPIKED, SUNRISE, THREAT,
  TRIPWIRE, `UnableToUnderstandRequest` and `SayAgainResponse`, plus the
  distances `MERGE_ENTRY_DISTANCE_NM`, `MERGE_EXIT_DISTANCE_NM` and
  `MANDATORY_THREAT_DISTANCE_NM`.
- `skyeye.composer.pronounce`: `pronounce_int()`, `pronounce_decimal()`,
  `pronounce_bearing()` and `pronounce_numbers()`, which speak numbers digit
  by digit.
- `skyeye.composer.information`: `NaturalLanguageResponse` (a `subtitle`
  and a `speech` text) and `InformationComposer`, which renders groups,
  BRAA, bullseye, altitudes and altitude stacks, and the DECLARE, FADED,
  BOGEY DOPE and THREAT calls.
- `skyeye.composer.composer`: `Composer`, a subclass of
  `InformationComposer` that renders every other call. `Composer.compose()`
  takes any supported response or call object and raises `TypeError` for
  anything else.

## Examples

Bearings never read as zero; north is 360:

```python
from skyeye.bearings import MagneticBearing, TrueBearing, normalize

normalize(0)                       # 360.0
normalize(-1)                      # 359.0
str(TrueBearing(1))                # "001"
MagneticBearing(358).true(4).degrees()  # 2.0
```

Altitudes in feet are grouped into stacks, highest first:

```python
from skyeye.brevity.geometry import stacks

stacks(10000, 20000, 20000)
# [Stack(altitude=20000.0, count=2), Stack(altitude=10000.0, count=1)]
```

Numbers are spoken digit by digit:

```python
from skyeye.composer.pronounce import pronounce_decimal, pronounce_int

pronounce_int(308)                       # "3 0 8"
pronounce_int(-1)                        # "minus 1"
pronounce_decimal(249.5, 2, "")          # "2 4 9 point 5 0"
pronounce_decimal(136.0, 1, "decimal")   # "1 3 6 decimal 0"
```

Composing calls:

```python
from skyeye.brevity.calls import MergedCall, SunriseCall
from skyeye.composer.composer import Composer

composer = Composer("Sky Eye")

composer.compose(MergedCall(["Eagle 1", "Viper 2"])).speech
# "EAGLE 1, VIPER 2, merged."

sunrise = composer.compose_sunrise_call(SunriseCall([251.0, 133.5]))
sunrise.subtitle  # "All players: GCI SKY EYE (bot) sunrise on 251.0 and 133.5"
sunrise.speech    # "All players, GCI SKY EYE sunrise on 2 5 1 point 0 and 1 3 3 point 5"
```

NEGATIVE RADAR CONTACT, RADIO CHECK, TRIPWIRE and SAY AGAIN replies are
picked at random from several phrasings, using the `random` module.

## What this package does not do

It only models brevity and composes text. It has no radar picture or
contact tracking, no telemetry or radio client, no speech recognition, no
parsing of spoken requests, no speech synthesis and no command to run a
controller. A program that does those things can use these modules to
describe what it sees and to word what it says.

## Running the tests

Install the package with its `test` extra and run `pytest` from the project
directory.