"""Energies of levels and transitions, in keV."""

from __future__ import annotations

import math

from .uncert import Sign, Uncert
from .util import order_of


def _as_float(other: object) -> float | None:
    if isinstance(other, Energy):
        return other.value.value
    if isinstance(other, (int, float)) and not isinstance(other, bool):
        return float(other)
    return None


class Energy:
    """An energy in keV carried as an :class:`Uncert`."""

    __slots__ = ("value",)

    def __init__(self, value: Uncert | None = None) -> None:
        self.value = Uncert() if value is None else value

    @classmethod
    def from_float(cls, energy: float, sign: Sign) -> Energy:
        """An energy whose significant figures follow its order of magnitude."""
        energy = float(energy)
        result = cls(Uncert(energy, order_of(energy), sign))
        if energy == 0:
            result.value.set_symmetric_uncertainty(0.0)
        return result

    def __repr__(self) -> str:
        return f"Energy({self.value!r})"

    def valid(self) -> bool:
        return self.value.defined()

    def to_string(self) -> str:
        """Display text in keV, or in MeV from 10000 keV upward."""
        if not math.isfinite(self.value.value):
            return ""
        if self.value.value >= 10000.0:
            mev = self.value.copy().scale(0.001)
            return mev.to_string(False) + " MeV"
        return self.value.to_string(False) + " keV"

    def __float__(self) -> float:
        return self.value.value

    def __lt__(self, other: object) -> bool:
        right = _as_float(other)
        if right is None:
            return NotImplemented
        return self.value.value < right

    def __gt__(self, other: object) -> bool:
        right = _as_float(other)
        if right is None:
            return NotImplemented
        return self.value.value > right

    def __eq__(self, other: object) -> bool:
        right = _as_float(other)
        if right is None:
            return NotImplemented
        return self.value.value == right

    def __hash__(self) -> int:
        return hash(self.value.value)

    def __add__(self, other: Energy) -> Energy:
        if not isinstance(other, Energy):
            return NotImplemented
        return Energy(self.value + other.value)

    def __sub__(self, other: Energy) -> Energy:
        if not isinstance(other, Energy):
            return NotImplemented
        difference = self.value.copy()
        difference.set_value(self.value.value - other.value.value)
        return Energy(difference)