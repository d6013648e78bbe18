"""Half-lives and level widths with their units."""

from __future__ import annotations

import math
import string

from .uncert import Sign, Uncert
from .util import order_of

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def _with_upper_case(units: dict[str, float]) -> dict[str, float]:
    # Only ASCII letters are raised, so "µs" gains "µS" as its upper-case form.
    result = dict(units)
    for name, factor in units.items():
        result[name.translate(_ASCII_UPPER)] = factor
    return result


TIME_UNITS: dict[str, float] = _with_upper_case(
    {
        "y": 365.0 * 86400.0,
        "d": 86400.0,
        "h": 3600.0,
        "m": 60.0,
        "s": 1.0,
        "ms": 1.0e-3,
        "µs": 1.0e-6,
        "ns": 1.0e-9,
        "ps": 1.0e-12,
        "fs": 1.0e-15,
        "as": 1.0e-18,
        "us": 1.0e-6,
    }
)

ENERGY_UNITS: dict[str, float] = _with_upper_case(
    {"eV": 1.0, "keV": 1.0e3, "MeV": 1.0e6}
)


def preferred_time_units(seconds: float) -> str:
    """The time unit best suited to show ``seconds``."""
    if seconds > 86400.0 * 365.0 * 2.0:
        return "y"
    if seconds > 86400.0 * 2.0:
        return "d"
    if seconds > 3600.0 * 2.0:
        return "h"
    if seconds > 60.0 * 2.0:
        return "m"
    if seconds < 1.0e-15:
        return "as"
    if seconds < 1.0e-12:
        return "fs"
    if seconds < 1.0e-9:
        return "ps"
    if seconds < 1.0e-6:
        return "ns"
    if seconds < 1.0e-3:
        return "µs"
    if seconds < 1.0:
        return "ms"
    return "s"


def preferred_e_units(ev: float) -> str:
    """The energy unit best suited to show ``ev`` electronvolts."""
    if ev > 1.0e6:
        return "MeV"
    if ev > 1.0e3:
        return "keV"
    return "eV"


class HalfLife:
    """A half-life in time units, or a level width in energy units."""

    __slots__ = ("time", "tentative", "units")

    def __init__(
        self, time: Uncert | None = None, tentative: bool = False, units: str = ""
    ) -> None:
        if time is None:
            time = Uncert(math.nan, order_of(math.nan), Sign.SIGN_MAGNITUDE_DEFINED)
        self.time = time
        self.tentative = tentative
        self.units = units

    @classmethod
    def from_float(cls, value: float, tentative: bool = False, units: str = "") -> HalfLife:
        """A half-life whose significant figures follow its order of magnitude."""
        value = float(value)
        return cls(
            Uncert(value, order_of(value), Sign.SIGN_MAGNITUDE_DEFINED), tentative, units
        )

    def __repr__(self) -> str:
        return (
            f"HalfLife(time={self.time!r}, tentative={self.tentative!r}, "
            f"units={self.units!r})"
        )

    def preferred_units(self) -> HalfLife:
        """A copy expressed in the unit best suited to its magnitude."""
        time = self.time.copy()
        units = self.units
        if self.units in ENERGY_UNITS:
            time.scale(ENERGY_UNITS[self.units])
            units = preferred_e_units(time.value)
            time.scale(1.0 / ENERGY_UNITS[units])
        if self.units in TIME_UNITS:
            time.scale(TIME_UNITS[self.units])
            units = preferred_time_units(time.value)
            time.scale(1.0 / TIME_UNITS[units])
        return HalfLife(time, self.tentative, units)

    def valid(self) -> bool:
        return not math.isnan(self.time.value)

    def seconds(self) -> float:
        """The half-life in seconds, or NaN when the unit is not a time unit."""
        factor = TIME_UNITS.get(self.units)
        if factor is None:
            return math.nan
        return self.time.copy().scale(factor).value

    def ev(self) -> float:
        """The width in electronvolts, or NaN when the unit is not an energy unit."""
        factor = ENERGY_UNITS.get(self.units)
        if factor is None:
            return math.nan
        return self.time.copy().scale(factor).value

    def stable(self) -> bool:
        return math.isinf(self.time.value)

    def to_string(self, with_uncert: bool = True) -> str:
        """Display text, bracketed when tentative; empty when undefined."""
        if not self.valid():
            return ""
        text = "stable" if self.stable() else self.time.to_string(False, with_uncert)
        if self.units:
            text += " " + self.units
        if self.tentative:
            return "(" + text + ")"
        return text

    def __lt__(self, other: HalfLife) -> bool:
        if not isinstance(other, HalfLife):
            return NotImplemented
        return self.seconds() < other.seconds()

    def __gt__(self, other: HalfLife) -> bool:
        if not isinstance(other, HalfLife):
            return NotImplemented
        return self.seconds() > other.seconds()

    def __ge__(self, other: HalfLife) -> bool:
        if not isinstance(other, HalfLife):
            return NotImplemented
        return self.seconds() >= other.seconds()