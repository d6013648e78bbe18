"""Description of a radioactive decay from a parent nuclide."""

from __future__ import annotations

from dataclasses import dataclass, field

from .decay_mode import DecayMode
from .halflife import HalfLife
from .nuclide_id import NuclideId


@dataclass
class DecayInfo:
    """The parent nuclide, how it decays and its half-life."""

    parent: NuclideId = field(default_factory=NuclideId)
    mode: DecayMode = field(default_factory=DecayMode)
    hl: HalfLife = field(default_factory=HalfLife)

    def valid(self) -> bool:
        return self.parent.valid() and self.mode.valid()

    def to_string(self) -> str:
        """Parent, decay mode and, when known, half-life in convenient units."""
        text = self.parent.symbolic_name() + " " + self.mode.to_string()
        if self.hl.valid():
            text += " " + self.hl.preferred_units().to_string(True)
        return text

    def name(self) -> str:
        return self.mode.to_string()