"""A decay or reaction data set linking a parent to a daughter nuclide."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .decay_info import DecayInfo
from .nuclide import Nuclide
from .reaction import ReactionInfo


@dataclass(eq=False)
class DecayScheme:
    """Parent and daughter nuclides with how the daughter levels were reached."""

    name: str = ""
    parent: Nuclide = field(default_factory=Nuclide)
    daughter: Nuclide = field(default_factory=Nuclide)
    decay_info: DecayInfo = field(default_factory=DecayInfo)
    reaction_info: ReactionInfo = field(default_factory=ReactionInfo)
    text: list[dict[str, Any]] = field(default_factory=list)
    references: set[str] = field(default_factory=set)

    def valid(self) -> bool:
        """True when the daughter has levels or there is commentary."""
        return not self.daughter.empty() or bool(self.text)

    def insert_reference(self, reference: str) -> None:
        self.references.add(reference)

    def add_text(self, heading: str, pars: Any) -> None:
        """Attach a block of commentary under ``heading``."""
        self.text.append({"heading": heading, "pars": pars})

    def to_string(self) -> str:
        text = "Parent: " + self.parent.to_string() + "\n"
        text += "Daughter: " + self.daughter.to_string() + "\n"
        if self.decay_info.valid():
            text += "Decay: " + self.decay_info.name() + "\n"
            text += "React: " + self.reaction_info.name() + "\n"
        return text