"""Nuclear reactions named in ENSDF data-set identifiers."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from .nuclide_id import NuclideId

_NUCLIDE = r"[\w\d]+"
_REACTANT = r"[\w\d\s+'-]+"
_INOUT = rf"\({_REACTANT},{_REACTANT}\)"
_REACTION = rf"{_NUCLIDE}\s*{_INOUT}(?:,{_INOUT})*"

_INOUT_RE = re.compile(_INOUT, re.ASCII)
_INOUT_PARSE = re.compile(rf"\(({_REACTANT}),({_REACTANT})\)", re.ASCII)
_REACTION_PARSE = re.compile(
    rf"({_NUCLIDE})\s*({_INOUT}(?:,{_INOUT})*)", re.ASCII
)
_EXTRAS = re.compile(
    rf"({_REACTION}(?:\s*,\s*{_REACTION}\s*)*)(.*)", re.ASCII | re.DOTALL
)
_REACTIONS = re.compile(rf"({_REACTION})(?:\s*,\s*({_REACTION}))*", re.ASCII)
_TARGET = re.compile(r"(\d*)([A-Za-z]*)")

# Markers that introduce the beam energy, with the text removed from it.
_ENERGY_MARKERS = (
    ("E=", "E="),
    ("E =", "E ="),
    ("E<", "E"),
    ("E>", "E"),
    ("E AP", "E "),
)


def _parse_target(text: str) -> NuclideId:
    match = _TARGET.fullmatch(text)
    if match is None:
        return NuclideId()
    digits, letters = match.groups()
    if not digits and not letters:
        return NuclideId()
    if not letters:
        return NuclideId.from_az(int(digits), 0, mass_only=True)
    z = NuclideId.z_of_symbol(letters.upper())
    if z is None:
        return NuclideId()
    if not digits:
        return NuclideId(z=z, n=0, mass_only=True)
    return NuclideId.from_az(int(digits), z)


def _format_target(nid: NuclideId) -> str:
    if not nid.valid():
        return ""
    if nid.mass_only and nid.z == 0:
        return str(nid.a)
    return f"{nid.a}{NuclideId.symbol_of(nid.z).upper()}"


@dataclass
class Reactants:
    """The incoming and outgoing particles of a reaction, as in ``(N,G)``."""

    incoming: str = ""
    outgoing: str = ""

    @classmethod
    def parse(cls, text: str) -> Reactants:
        """Read ``(in,out)``; anything else gives empty reactants."""
        match = _INOUT_PARSE.fullmatch(text.strip())
        if match is None:
            return cls()
        return cls(match.group(1), match.group(2))

    def valid(self) -> bool:
        return bool(self.incoming) and bool(self.outgoing)

    def to_string(self) -> str:
        return f"({self.incoming},{self.outgoing})"


@dataclass
class Reaction:
    """A target nuclide with one or more sets of reactants."""

    target: NuclideId = field(default_factory=NuclideId)
    variants: list[Reactants] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str, daughter: NuclideId) -> Reaction:
        """Read a reaction such as ``56FE(N,G)``.

        A target given by its element alone takes the mass of ``daughter``.
        """
        reaction = cls()
        pairs = ""
        match = _REACTION_PARSE.fullmatch(text)
        if match is not None:
            reaction.target = _parse_target(match.group(1))
            if not reaction.target.composition_known() and reaction.target.z:
                reaction.target.a = daughter.a
            pairs = match.group(2)
        pairs = pairs.strip()
        for token in _INOUT_RE.finditer(pairs):
            reactants = Reactants.parse(token.group(0))
            if reactants.valid():
                reaction.variants.append(reactants)
        return reaction

    def valid(self) -> bool:
        return self.target.valid() and bool(self.variants)

    def to_string(self) -> str:
        return _format_target(self.target).strip() + ",".join(
            variant.to_string() for variant in self.variants
        )


@dataclass
class ReactionInfo:
    """The reactions of a data set with their beam energy and qualifier."""

    reactions: list[Reaction] = field(default_factory=list)
    energy: str = ""
    qualifier: str = ""

    @staticmethod
    def match(record: str) -> bool:
        """Whether ``record`` starts with at least one reaction."""
        return _EXTRAS.fullmatch(record.strip()) is not None

    @classmethod
    def parse(cls, ext_dsid: str, daughter: NuclideId) -> ReactionInfo:
        """Read the reactions, energy and qualifier of a data-set identifier."""
        info = cls()
        text = ext_dsid.strip()

        reactions_text = ""
        extras = ""
        match = _EXTRAS.fullmatch(text)
        if match is not None:
            reactions_text = match.group(1).strip()
            extras = (match.group(2) or "").strip()

        listed = _REACTIONS.fullmatch(reactions_text)
        if listed is not None:
            # Only the first and the last listed reaction are captured.
            for group in listed.groups():
                part = (group or "").strip()
                if not part:
                    continue
                reaction = Reaction.parse(part, daughter)
                if reaction.valid():
                    info.reactions.append(reaction)

        for wanted, trim_what in _ENERGY_MARKERS:
            remaining = info._take_energy(extras, wanted, trim_what)
            if remaining is None:
                continue
            extras = remaining
            energy = info.energy.strip()
            position = energy.find("E=")
            if position != -1:
                energy = energy[:position] + energy[position + 2 :]
            else:
                energy = energy[1:]
            info.energy = energy.strip()
            break

        position = info.energy.find(":")
        if position != -1:
            info.energy = info.energy[:position] + info.energy[position + 1 :]

        info.qualifier = extras.strip()
        return info

    def _take_energy(self, extras: str, wanted: str, trim_what: str) -> str | None:
        position = extras.find(wanted)
        if position == -1:
            return None
        energy = extras[position:]
        remaining = extras[:position]
        cut = energy.find(trim_what)
        if cut != -1:
            energy = energy[:cut] + energy[cut + len(trim_what) :]
        self.energy = energy.strip()
        return remaining

    def valid(self) -> bool:
        return bool(self.reactions)

    def to_string(self) -> str:
        return self.name()

    def name(self) -> str:
        """Reactions, then qualifier, then ``E=`` and the energy."""
        text = ",".join(reaction.to_string() for reaction in self.reactions)
        if self.qualifier:
            text += " " + self.qualifier
        if self.energy:
            text += " E=" + self.energy
        return text