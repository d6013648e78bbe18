import math

import pytest

from nucscheme.energy import Energy
from nucscheme.uncert import Sign, Uncert, UncertaintyType

SMD = Sign.SIGN_MAGNITUDE_DEFINED


def test_default_energy_is_invalid():
    energy = Energy()
    assert not energy.valid()
    assert energy.to_string() == ""
    assert math.isnan(float(energy))


def test_from_float_is_valid_and_converts_back():
    energy = Energy.from_float(661.657, SMD)
    assert energy.valid()
    assert float(energy) == pytest.approx(661.657)
    assert energy.value.kind == UncertaintyType.SYMMETRIC


def test_zero_energy_has_zero_uncertainty():
    energy = Energy.from_float(0.0, SMD)
    assert energy.valid()
    assert energy.value.zero_uncert()
    assert energy.to_string().endswith(" keV")


def test_units_switch_at_ten_thousand():
    assert Energy.from_float(661.657, SMD).to_string() == "661.657 keV"
    assert Energy.from_float(20000.0, SMD).to_string() == "20 MeV"
    assert Energy.from_float(9999.0, SMD).to_string().endswith(" keV")


def test_infinite_energy_prints_nothing():
    assert Energy.from_float(math.inf, SMD).to_string() == ""


def test_mev_display_does_not_change_value():
    energy = Energy.from_float(20000.0, SMD)
    energy.to_string()
    assert float(energy) == 20000.0


def test_comparisons_with_energy_and_numbers():
    low = Energy.from_float(100.0, SMD)
    high = Energy.from_float(200.0, SMD)
    assert low < high
    assert high > low
    assert low < 150.0
    assert high > 150.0
    assert not (low > high)


def test_equality_and_hash():
    first = Energy.from_float(122.06, SMD)
    second = Energy(Uncert(122.06, 5, SMD, 0.1))
    assert first == second
    assert hash(first) == hash(second)
    table = {first: "level"}
    assert table[second] == "level"


def test_nan_energies_are_not_equal():
    first = Energy()
    second = Energy()
    result = first == second
    assert result is False
    assert first.to_string() == ""


def test_addition_and_subtraction():
    a = Energy.from_float(100.0, SMD)
    b = Energy.from_float(30.0, SMD)
    assert float(a + b) == pytest.approx(130.0)
    assert float(a - b) == pytest.approx(70.0)
    assert float((a - b) + b) == pytest.approx(float(a))


def test_subtraction_leaves_operands_alone():
    a = Energy.from_float(100.0, SMD)
    b = Energy.from_float(30.0, SMD)
    a - b
    a + b
    assert float(a) == 100.0
    assert float(b) == 30.0


def test_addition_rejects_numbers():
    with pytest.raises(TypeError):
        Energy.from_float(1.0, SMD) + 1.0