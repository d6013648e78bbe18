from nucscheme.parity import Parity, ParityValue
from nucscheme.quality import DataQuality
from nucscheme.spin import Spin
from nucscheme.spin_parity import SpinParity, SpinSet
from nucscheme.uncert import UncertaintyType


def make(num, den, spin_q, parity_value, parity_q, eq_type=UncertaintyType.UNDEFINED):
    return SpinParity(
        parity=Parity(parity_value, parity_q),
        spin=Spin(num, den, spin_q),
        eq_type=eq_type,
    )


def test_single_known_assignment():
    sp = make(3, 2, DataQuality.KNOWN, ParityValue.PLUS, DataQuality.KNOWN)
    assert sp.valid()
    assert sp.to_string(True) == sp.spin.to_string() + sp.parity.to_string()
    assert sp.to_string(True) == sp.to_string(False)


def test_fully_unknown_is_invalid():
    sp = make(3, 2, DataQuality.UNKNOWN, ParityValue.PLUS, DataQuality.UNKNOWN)
    assert not sp.valid()


def test_different_qualities_are_qualified_separately():
    sp = make(3, 2, DataQuality.TENTATIVE, ParityValue.MINUS, DataQuality.KNOWN)
    assert sp.to_string(True) == sp.spin.to_qualified_string() + "-"


def test_eq_type_prefix():
    sp = make(5, 2, DataQuality.KNOWN, ParityValue.PLUS, DataQuality.KNOWN,
              UncertaintyType.GREATER_EQUAL)
    assert sp.to_string(False).startswith("GE ")
    spins = SpinSet()
    spins.add(sp)
    assert spins.to_pretty_string().startswith("≥")
    assert "GE " not in spins.to_pretty_string()


def test_set_common_quality_keeps_unknown_parts():
    sp = make(1, 2, DataQuality.KNOWN, ParityValue.PLUS, DataQuality.UNKNOWN)
    sp.set_common_quality(DataQuality.TENTATIVE)
    assert sp.spin.quality == DataQuality.TENTATIVE
    assert sp.parity.quality == DataQuality.UNKNOWN


def test_empty_set():
    spins = SpinSet()
    assert not spins.valid()
    assert spins.to_string() == ""


def test_invalid_entries_are_ignored():
    spins = SpinSet()
    spins.add(make(1, 2, DataQuality.UNKNOWN, ParityValue.PLUS, DataQuality.UNKNOWN))
    assert not spins.valid()


def test_single_entry_matches_assignment_text():
    sp = make(5, 2, DataQuality.KNOWN, ParityValue.MINUS, DataQuality.KNOWN)
    spins = SpinSet()
    spins.add(sp)
    assert spins.valid()
    assert spins.to_string() == sp.to_string(True)


def test_tentative_spins_share_parity():
    spins = SpinSet(",")
    spins.add(make(1, 2, DataQuality.TENTATIVE, ParityValue.PLUS, DataQuality.KNOWN))
    spins.add(make(3, 2, DataQuality.TENTATIVE, ParityValue.PLUS, DataQuality.KNOWN))
    assert spins.to_string() == "(1/2,3/2)+"


def test_common_quality_wraps_whole_list():
    spins = SpinSet(",")
    spins.add(make(1, 2, DataQuality.TENTATIVE, ParityValue.PLUS, DataQuality.TENTATIVE))
    spins.add(make(3, 2, DataQuality.TENTATIVE, ParityValue.PLUS, DataQuality.TENTATIVE))
    assert spins.to_string() == "(1/2+,3/2+)"


def test_set_common_quality_matches_direct_construction():
    changed = SpinSet(",")
    changed.add(make(1, 2, DataQuality.KNOWN, ParityValue.PLUS, DataQuality.KNOWN))
    changed.add(make(3, 2, DataQuality.KNOWN, ParityValue.PLUS, DataQuality.KNOWN))
    changed.set_common_quality(DataQuality.TENTATIVE)

    direct = SpinSet(",")
    direct.add(make(1, 2, DataQuality.TENTATIVE, ParityValue.PLUS, DataQuality.TENTATIVE))
    direct.add(make(3, 2, DataQuality.TENTATIVE, ParityValue.PLUS, DataQuality.TENTATIVE))
    assert changed.to_string() == direct.to_string()


def test_set_common_parity():
    spins = SpinSet(",")
    spins.add(make(1, 2, DataQuality.KNOWN, ParityValue.PLUS, DataQuality.KNOWN))
    spins.add(make(3, 2, DataQuality.KNOWN, ParityValue.PLUS, DataQuality.KNOWN))
    spins.set_common_parity(Parity(ParityValue.MINUS, DataQuality.KNOWN))
    text = spins.to_string()
    assert text.endswith("-")
    assert "+" not in text


def test_merge_takes_logic_and_entries():
    first = SpinSet(",")
    first.add(make(1, 2, DataQuality.KNOWN, ParityValue.PLUS, DataQuality.KNOWN))
    second = SpinSet("&")
    second.add(make(3, 2, DataQuality.KNOWN, ParityValue.PLUS, DataQuality.KNOWN))
    first.merge(second)

    direct = SpinSet("&")
    direct.add(make(1, 2, DataQuality.KNOWN, ParityValue.PLUS, DataQuality.KNOWN))
    direct.add(make(3, 2, DataQuality.KNOWN, ParityValue.PLUS, DataQuality.KNOWN))
    assert first.logic == "&"
    assert first.to_string() == direct.to_string()


def test_merging_empty_set_keeps_logic():
    spins = SpinSet(",")
    spins.merge(SpinSet("&"))
    assert spins.logic == ","


def test_add_stores_a_copy():
    sp = make(1, 2, DataQuality.KNOWN, ParityValue.PLUS, DataQuality.KNOWN)
    spins = SpinSet()
    spins.add(sp)
    before = spins.to_string()
    sp.spin.set(7, 2)
    assert spins.to_string() == before


def test_debug_counts_entries():
    spins = SpinSet(",")
    spins.add(make(1, 2, DataQuality.KNOWN, ParityValue.PLUS, DataQuality.KNOWN))
    spins.add(make(3, 2, DataQuality.KNOWN, ParityValue.MINUS, DataQuality.KNOWN))
    assert spins.debug().startswith("2>>  ")