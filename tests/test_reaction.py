import pytest

from nucscheme.nuclide_id import NuclideId
from nucscheme.reaction import Reactants, Reaction, ReactionInfo

DAUGHTER = NuclideId.from_az(57, 26)


def test_reactants_parse_strips_and_splits():
    reactants = Reactants.parse(" (N,G) ")
    assert reactants.incoming == "N"
    assert reactants.outgoing == "G"
    assert reactants.valid()
    assert reactants.to_string() == "(N,G)"


def test_reactants_without_parentheses_are_invalid():
    reactants = Reactants.parse("N,G")
    assert not reactants.valid()
    assert reactants.incoming == ""


def test_reaction_parse_target_and_round_trip():
    reaction = Reaction.parse("56FE(N,G)", DAUGHTER)
    assert reaction.valid()
    assert reaction.target == NuclideId.from_az(56, 26)
    assert reaction.to_string() == "56FE(N,G)"


def test_reaction_with_several_variants():
    reaction = Reaction.parse("56FE(N,G),(N,P)", DAUGHTER)
    assert [v.to_string() for v in reaction.variants] == ["(N,G)", "(N,P)"]
    assert reaction.to_string() == "56FE(N,G),(N,P)"


def test_element_only_target_takes_daughter_mass():
    reaction = Reaction.parse("FE(N,G)", DAUGHTER)
    assert reaction.valid()
    assert reaction.target.z == 26
    assert reaction.target.a == DAUGHTER.a


def test_unparseable_reaction_is_invalid():
    reaction = Reaction.parse("garbage", DAUGHTER)
    assert not reaction.valid()
    assert reaction.variants == []


@pytest.mark.parametrize(
    "record, expected",
    [("56FE(N,G) E=THERMAL", True), ("NO REACTION HERE", False)],
)
def test_match(record, expected):
    assert ReactionInfo.match(record) is expected


def test_info_with_qualifier():
    info = ReactionInfo.parse("9BE(A,N) THICK TARGET", NuclideId.from_az(12, 6))
    assert info.valid()
    assert len(info.reactions) == 1
    assert info.qualifier == "THICK TARGET"
    assert info.energy == ""
    assert info.name() == "9BE(A,N) THICK TARGET"


def test_info_with_two_reactions_round_trips():
    text = "56FE(N,G),57FE(G,G')"
    info = ReactionInfo.parse(text, DAUGHTER)
    assert len(info.reactions) == 2
    assert info.to_string() == text


def test_info_keeps_first_and_last_of_many():
    info = ReactionInfo.parse("54FE(N,G),56FE(N,G),58FE(N,G)", DAUGHTER)
    assert [r.to_string() for r in info.reactions] == ["54FE(N,G)", "58FE(N,G)"]


def test_info_energy_limit():
    info = ReactionInfo.parse("56FE(N,G) E<5", DAUGHTER)
    assert info.energy == "5"
    assert info.qualifier == ""
    assert info.name() == "56FE(N,G) E=5"


def test_info_energy_drops_colon():
    info = ReactionInfo.parse("56FE(N,G) E>1.2:", DAUGHTER)
    assert info.energy == "1.2"


def test_empty_info_is_invalid():
    info = ReactionInfo.parse("", DAUGHTER)
    assert not info.valid()
    assert info.name() == ""