# nucscheme

A pure-Python data model for nuclear decay schemes. It has the pieces needed to
describe the parent and daughter nuclides of a decay or a reaction.

## Modules

- `nucscheme.util`: small helpers such as `trim_all`, `sig_digits`, `order_of`,
  `get_precision`, `itobin16` and `itobin32`.
- `nucscheme.quality`: `DataQuality` (known, unknown, tentative, theoretical,
  about), `add_qualifiers` and the `QualifiedData` base class.
- `nucscheme.uncert`: `Uncert`, a value with a symmetric or asymmetric
  uncertainty or a limit (`UncertaintyType`), a sign state (`Sign`) and a
  number of significant figures. `to_string` and `to_markup` format it for
  display; `scale`, `+`, `-` and `*` do arithmetic.
- `nucscheme.nuclide_id`: `NuclideId`, proton and neutron numbers with element
  symbols and names. For example `NuclideId.from_az(60, 27).symbolic_name()`
  gives `"Co-60"`.
- `nucscheme.energy`: `Energy`, an energy in keV. It is shown in MeV from
  10000 keV upward.
- `nucscheme.halflife`: `HalfLife`, in time or energy units, with
  `seconds()`, `ev()` and `preferred_units()`.
- `nucscheme.spin`, `nucscheme.parity`, `nucscheme.spin_parity`: `Spin`,
  `Parity`, `SpinParity` and `SpinSet`, which format alternative spin-parity
  assignments with shared qualifiers factored out.
- `nucscheme.moment`: `Moment`, a moment value with references.
- `nucscheme.decay_mode` and `nucscheme.decay_info`: `DecayMode` and
  `DecayInfo`.
- `nucscheme.level`, `nucscheme.transition`, `nucscheme.nuclide`: `Level`,
  `Transition` and `Nuclide`. A nuclide connects transitions between its
  levels (`add_transition_from`, `add_transition_to`, optionally within a
  relative tolerance). It finds cascades with `upstream`, `downstream` and
  `coincidences`.
- `nucscheme.reaction`: `Reactants`, `Reaction` and `ReactionInfo`. These parse
  data-set identifiers such as `"58NI(N,P) E=14 MEV"`.
- `nucscheme.decay_scheme`: `DecayScheme`, which holds the parent and daughter
  nuclides with their decay and reaction information, references and
  commentary.
- `nucscheme.tree_item`: `TreeItem` and `ItemType`, a selection tree of mass
  chains, daughters and decays. `dump` writes it to a binary stream and
  `TreeItem.load` reads it back.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from nucscheme.decay_mode import DecayMode
from nucscheme.energy import Energy
from nucscheme.level import Level
from nucscheme.nuclide import Nuclide
from nucscheme.nuclide_id import NuclideId
from nucscheme.transition import Transition
from nucscheme.uncert import Sign, Uncert

ground = Level(Energy(Uncert(0.0, 1, Sign.SIGN_MAGNITUDE_DEFINED, 0.0)))
excited = Level(Energy(Uncert(1332.5, 5, Sign.SIGN_MAGNITUDE_DEFINED, 0.1)))

ni60 = Nuclide(NuclideId.from_az(60, 28))
ni60.add_level(ground)
ni60.add_level(excited)
ni60.add_transition_from(
    Transition(
        excited.energy,
        Uncert(99.98, 4, Sign.SIGN_MAGNITUDE_DEFINED, 0.01),
        from_energy=excited.energy,
    )
)
print(ni60.to_string())

print(DecayMode(beta_minus=1, electron_capture=2).to_string())
# β-, 2x Electron Capture
```

## What it does not do

The package is a data model only. It does not read ENSDF data files and does
not download them. It keeps no cache on disk beyond what `TreeItem.dump` writes
to a stream you supply. It has no command-line program and no graphical
interface.