import pytest

from nucscheme.decay_mode import DecayMode


def test_default_is_invalid():
    mode = DecayMode()
    assert not mode.valid()
    assert mode.to_string() == ""


@pytest.mark.parametrize(
    "kwargs, text",
    [
        ({"spontaneous_fission": True}, "Spontaneous Fission"),
        ({"isomeric": True}, "Isomeric Transition"),
        ({"beta_minus": 1}, "β-"),
        ({"beta_plus": 1}, "β+"),
        ({"electron_capture": 1}, "Electron Capture"),
        ({"alpha": True}, "α"),
        ({"protons": 1}, "p"),
        ({"neutrons": 1}, "n"),
    ],
)
def test_single_process(kwargs, text):
    mode = DecayMode(**kwargs)
    assert mode.valid()
    assert mode.to_string() == text


def test_multiplicity_prefix():
    assert DecayMode(beta_minus=2).to_string() == "2β-"
    assert DecayMode(electron_capture=2).to_string() == "2x Electron Capture"


def test_processes_are_listed_in_fixed_order():
    mode = DecayMode(alpha=True, beta_minus=1)
    assert mode.to_string() == "β-, α"


@pytest.mark.parametrize("name", ["beta_plus", "beta_minus", "electron_capture"])
def test_multiplicity_of_three_or_more_is_ignored(name):
    mode = DecayMode()
    setattr(mode, name, 1)
    setattr(mode, name, 3)
    assert getattr(mode, name) == 1


def test_constructor_ignores_out_of_range_multiplicity():
    assert DecayMode(beta_plus=5) == DecayMode()
    assert not DecayMode(beta_plus=5).valid()


def test_equality():
    assert DecayMode(alpha=True) == DecayMode(alpha=True)
    assert DecayMode(alpha=True) != DecayMode(isomeric=True)