"""Data model for nuclear decay schemes: uncertain values, nuclides, levels, transitions, spins, reactions and a selection tree."""

__version__ = "0.1.0"

__all__ = [
    "util",
    "quality",
    "uncert",
    "nuclide_id",
    "energy",
    "halflife",
    "parity",
    "spin",
    "spin_parity",
    "moment",
    "decay_mode",
    "decay_info",
    "level",
    "transition",
    "nuclide",
    "reaction",
    "decay_scheme",
    "tree_item",
]