"""Gamma transitions between nuclear levels."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .energy import Energy
from .uncert import Uncert


@dataclass(eq=False)
class Transition:
    """A transition of a given energy from one level to another."""

    energy: Energy = field(default_factory=Energy)
    intensity: Uncert = field(default_factory=Uncert)
    multipolarity: str = ""
    delta: Uncert = field(default_factory=Uncert)
    from_energy: Energy = field(default_factory=Energy)
    to_energy: Energy = field(default_factory=Energy)
    text: list[dict[str, Any]] = field(default_factory=list)

    def intensity_string(self) -> str:
        """The intensity as a percentage, or its undefined marker."""
        if self.intensity.defined():
            return self.intensity.to_string(False) + "%"
        return self.intensity.to_string(False)

    def to_string(self) -> str:
        """One line in fixed-width columns describing the transition."""
        line = (
            f"{self.energy.to_string():>16}   "
            f"{self.from_energy.to_string():>15}"
            " --> "
            f"{self.to_energy.to_string():>15}"
            f"{self.intensity_string():>15}"
            f"{self.multipolarity:>12}"
        )
        if self.delta.has_finite_value():
            line += "  delta=" + self.delta.to_string(False)
        return line

    def add_text(self, heading: str, pars: Any) -> None:
        """Attach a block of commentary under ``heading``."""
        self.text.append({"heading": heading, "pars": pars})