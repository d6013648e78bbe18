"""Identification of nuclides by proton and neutron numbers."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering

_ELEMENTS: tuple[tuple[str, str], ...] = (
    ("nn", "neutron"),
    ("H", "Hydrogen"),
    ("He", "Helium"),
    ("Li", "Lithium"),
    ("Be", "Beryllium"),
    ("B", "Boron"),
    ("C", "Carbon"),
    ("N", "Nitrogen"),
    ("O", "Oxygen"),
    ("F", "Fluorine"),
    ("Ne", "Neon"),
    ("Na", "Sodium"),
    ("Mg", "Magnesium"),
    ("Al", "Aluminium"),
    ("Si", "Silicon"),
    ("P", "Phosphorus"),
    ("S", "Sulfur"),
    ("Cl", "Chlorine"),
    ("Ar", "Argon"),
    ("K", "Potassium"),
    ("Ca", "Calcium"),
    ("Sc", "Scandium"),
    ("Ti", "Titanium"),
    ("V", "Vanadium"),
    ("Cr", "Chromium"),
    ("Mn", "Manganese"),
    ("Fe", "Iron"),
    ("Co", "Cobalt"),
    ("Ni", "Nickel"),
    ("Cu", "Copper"),
    ("Zn", "Zinc"),
    ("Ga", "Gallium"),
    ("Ge", "Germanium"),
    ("As", "Arsenic"),
    ("Se", "Selenium"),
    ("Br", "Bromine"),
    ("Kr", "Krypton"),
    ("Rb", "Rubidium"),
    ("Sr", "Strontium"),
    ("Y", "Yttrium"),
    ("Zr", "Zirconium"),
    ("Nb", "Niobium"),
    ("Mo", "Molybdenum"),
    ("Tc", "Technetium"),
    ("Ru", "Ruthenium"),
    ("Rh", "Rhodium"),
    ("Pd", "Palladium"),
    ("Ag", "Silver"),
    ("Cd", "Cadmium"),
    ("In", "Indium"),
    ("Sn", "Tin"),
    ("Sb", "Antimony"),
    ("Te", "Tellurium"),
    ("I", "Iodine"),
    ("Xe", "Xenon"),
    ("Cs", "Caesium"),
    ("Ba", "Barium"),
    ("La", "Lanthanum"),
    ("Ce", "Cerium"),
    ("Pr", "Praseodynium"),
    ("Nd", "Neodynium"),
    ("Pm", "Promethium"),
    ("Sm", "Samarium"),
    ("Eu", "Europium"),
    ("Gd", "Gadolinium"),
    ("Tb", "Terbium"),
    ("Dy", "Dysprosium"),
    ("Ho", "Holmium"),
    ("Er", "Erbium"),
    ("Tm", "Thulium"),
    ("Yb", "Ytterbium"),
    ("Lu", "Lutetium"),
    ("Hf", "Hafnium"),
    ("Ta", "Tantalum"),
    ("W", "Tungsten"),
    ("Re", "Rhenium"),
    ("Os", "Osmium"),
    ("Ir", "Iridium"),
    ("Pt", "Platinum"),
    ("Au", "Gold"),
    ("Hg", "Mercury"),
    ("Tl", "Thallium"),
    ("Pb", "Lead"),
    ("Bi", "Bismuth"),
    ("Po", "Polonium"),
    ("At", "Astanine"),
    ("Rn", "Radon"),
    ("Fr", "Francium"),
    ("Ra", "Radium"),
    ("Ac", "Actinium"),
    ("Th", "Thorium"),
    ("Pa", "Protactinium"),
    ("U", "Uranium"),
    ("Np", "Neptunium"),
    ("Pu", "Plutonium"),
    ("Am", "Americium"),
    ("Cm", "Curium"),
    ("Bk", "Berkelium"),
    ("Cf", "Californium"),
    ("Es", "Einsteinium"),
    ("Fm", "Fermium"),
    ("Md", "Mendelevium"),
    ("No", "Nobelium"),
    ("Lr", "Lawrencium"),
    ("Rf", "Rutherfordium"),
    ("Db", "Dubnium"),
    ("Sg", "Seaborgium"),
    ("Bh", "Bohrium"),
    ("Hs", "Hassium"),
    ("Mt", "Meitnerium"),
    ("Ds", "Darmstadtium"),
    ("Rg", "Roentgenium"),
    ("Cn", "Copernicium"),
    ("Nh", "Nihonium"),
    ("Fl", "Flerovium"),
    ("Mc", "Moscovium"),
    ("Lv", "Livermorium"),
    ("Ts", "Tennessine"),
    ("Og", "Oganesson"),
)


@total_ordering
@dataclass(eq=False)
class NuclideId:
    """A nuclide given by its proton number ``z`` and neutron number ``n``.

    With ``mass_only`` set only the mass number is meaningful.
    """

    z: int = 0
    n: int = 0
    mass_only: bool = False

    @classmethod
    def from_az(cls, a: int, z: int, mass_only: bool = False) -> NuclideId:
        """Build from mass and proton numbers; an impossible pair gives an empty id."""
        if a < z:
            return cls()
        return cls(z=z, n=a - z, mass_only=mass_only)

    @classmethod
    def from_zn(cls, z: int, n: int, mass_only: bool = False) -> NuclideId:
        """Build from proton and neutron numbers."""
        return cls(z=z, n=n, mass_only=mass_only)

    @staticmethod
    def z_of_symbol(name: str) -> int | None:
        """Proton number whose upper-case symbol or name equals ``name``, if any."""
        for z, (symbol, full_name) in enumerate(_ELEMENTS):
            if symbol.upper() == name or full_name.upper() == name:
                return z
        return None

    @staticmethod
    def name_of(z: int) -> str:
        """Element name for proton number ``z``, or an empty string."""
        return _ELEMENTS[z][1] if 0 <= z < len(_ELEMENTS) else ""

    @staticmethod
    def symbol_of(z: int) -> str:
        """Element symbol for proton number ``z``, or an empty string."""
        return _ELEMENTS[z][0] if 0 <= z < len(_ELEMENTS) else ""

    @property
    def a(self) -> int:
        """Mass number."""
        return self.n + self.z

    @a.setter
    def a(self, value: int) -> None:
        # The proton number is kept; the mass cannot drop below it.
        value = max(value, self.z)
        self.n = value - self.z

    def valid(self) -> bool:
        return self.a != 0

    def composition_known(self) -> bool:
        return not self.mass_only

    def element(self) -> str:
        return self.symbol_of(self.z)

    def symbolic_name(self) -> str:
        """Name such as ``Fe-57``, or only the mass number when that is all that is known."""
        if not self.valid():
            return ""
        if self.mass_only:
            return str(self.a)
        return f"{self.symbol_of(self.z)}-{self.a}"

    def verbose_name(self) -> str:
        """Name such as ``Iron-57``, or only the mass number when that is all that is known."""
        if not self.valid():
            return ""
        if self.mass_only:
            return str(self.a)
        return f"{self.name_of(self.z)}-{self.a}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NuclideId):
            return NotImplemented
        return self.n == other.n and self.z == other.z

    def __lt__(self, other: NuclideId) -> bool:
        if not isinstance(other, NuclideId):
            return NotImplemented
        return (self.a, self.n) < (other.a, other.n)

    def __gt__(self, other: NuclideId) -> bool:
        if not isinstance(other, NuclideId):
            return NotImplemented
        return (self.a, self.n) > (other.a, other.n)

    def __hash__(self) -> int:
        return hash((self.z, self.n))