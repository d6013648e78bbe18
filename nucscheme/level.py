"""Energy levels of a nucleus."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .energy import Energy
from .halflife import HalfLife
from .spin_parity import SpinSet
from .uncert import Uncert


@dataclass(eq=False)
class Level:
    """A nuclear level with its spins, half-life and connecting transitions.

    ``isomer_num`` is positive for isomeric levels, counted upward from the
    lowest energy. ``feed_intensity`` tells how often the level is fed directly
    per 100 parent decays. ``feeding_level`` marks a parent level from which
    decays start.
    """

    energy: Energy = field(default_factory=Energy)
    spins: SpinSet = field(default_factory=SpinSet)
    halflife: HalfLife = field(default_factory=HalfLife)
    isomer_num: int = 0
    feed_intensity: Uncert = field(default_factory=Uncert)
    feeding_level: bool = False
    populating_transitions: set[Energy] = field(default_factory=set)
    depopulating_transitions: set[Energy] = field(default_factory=set)
    text: list[dict[str, Any]] = field(default_factory=list)

    def add_populating_transition(self, energy: Energy) -> None:
        """Record a transition feeding this level; undefined energies are ignored."""
        if energy.valid():
            self.populating_transitions.add(energy)

    def add_depopulating_transition(self, energy: Energy) -> None:
        """Record a transition leaving this level; undefined energies are ignored."""
        if energy.valid():
            self.depopulating_transitions.add(energy)

    def to_string(self) -> str:
        """One line in fixed-width columns: energy, spins, half-life, isomer mark."""
        line = f"{self.energy.to_string():>16}"
        if self.spins.valid():
            line += f"{self.spins.to_string():>10}"
        if self.halflife.valid():
            line += f"{self.halflife.to_string():>13}"
        if self.isomer_num:
            line += f" M{self.isomer_num}"
        return line

    def add_text(self, heading: str, pars: Any) -> None:
        """Attach a block of commentary under ``heading``."""
        self.text.append({"heading": heading, "pars": pars})