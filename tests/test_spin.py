import logging
import math

import pytest

from nucscheme.quality import DataQuality
from nucscheme.spin import Spin


def test_default_is_invalid():
    spin = Spin()
    assert not spin.valid()
    assert spin.to_string() == ""
    assert math.isnan(spin.to_float())


def test_half_integer_text():
    spin = Spin(3, 2, DataQuality.KNOWN)
    assert spin.valid()
    assert spin.to_string() == "3/2"


def test_integer_text():
    assert Spin(2, 1, DataQuality.KNOWN).to_string() == "2"


def test_unknown_quality_gives_empty_text():
    spin = Spin(3, 2, DataQuality.UNKNOWN)
    assert spin.to_string() == ""
    assert spin.to_qualified_string() == "?"


def test_tentative_qualified():
    assert Spin(3, 2, DataQuality.TENTATIVE).to_qualified_string() == "(3/2)"


def test_odd_denominator_warns(caplog):
    with caplog.at_level(logging.WARNING, logger="nucscheme.spin"):
        spin = Spin(1, 3, DataQuality.KNOWN)
    assert "Spin should be an integer or half an integer" in caplog.text
    assert spin.denominator == 3


def test_add_and_subtract_units_round_trip():
    spin = Spin(1, 2, DataQuality.KNOWN)
    assert (spin + 2) - 2 == spin
    assert (spin + 1).to_float() == spin.to_float() + 1


def test_add_spins_of_same_denominator():
    a = Spin(1, 2, DataQuality.KNOWN)
    b = Spin(3, 2, DataQuality.KNOWN)
    assert (a + b).to_float() == a.to_float() + b.to_float()
    assert (a + b).denominator == a.denominator


@pytest.mark.parametrize("first, second", [((1, 2), (1, 1)), ((2, 1), (3, 2))])
def test_add_spins_of_mixed_denominators(first, second):
    a = Spin(*first, DataQuality.KNOWN)
    b = Spin(*second, DataQuality.KNOWN)
    total = a + b
    assert total.to_float() == a.to_float() + b.to_float()
    assert total.denominator == max(a.denominator, b.denominator)


def test_sum_keeps_quality_of_left_operand():
    total = Spin(1, 2, DataQuality.TENTATIVE) + Spin(1, 2, DataQuality.KNOWN)
    assert total.quality == DataQuality.TENTATIVE


def test_negation_is_involution():
    spin = Spin(5, 2, DataQuality.KNOWN)
    assert -(-spin) == spin
    assert -spin != spin


def test_subtracting_a_spin_is_not_supported():
    with pytest.raises(TypeError):
        Spin(1, 2) - Spin(1, 2)


def test_comparisons():
    low = Spin(1, 2, DataQuality.KNOWN)
    high = Spin(3, 2, DataQuality.KNOWN)
    assert low < high
    assert high > low
    assert low <= Spin(1, 2, DataQuality.TENTATIVE)
    assert high >= low
    assert not high <= low


def test_equality_and_hash_ignore_quality():
    a = Spin(3, 2, DataQuality.KNOWN)
    b = Spin(3, 2, DataQuality.ABOUT)
    assert a == b
    assert hash(a) == hash(b)