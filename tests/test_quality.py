import pytest

from nucscheme.quality import DataQuality, QualifiedData, add_qualifiers


@pytest.mark.parametrize(
    "quality, expected",
    [
        (DataQuality.KNOWN, "5/2"),
        (DataQuality.TENTATIVE, "(5/2)"),
        (DataQuality.THEORETICAL, "[5/2]"),
        (DataQuality.ABOUT, "~5/2"),
        (DataQuality.UNKNOWN, "?"),
    ],
)
def test_add_qualifiers(quality, expected):
    assert add_qualifiers("5/2", quality) == expected


def test_unknown_uses_given_placeholder():
    assert add_qualifiers("5/2", DataQuality.UNKNOWN, "") == ""
    assert add_qualifiers("5/2", DataQuality.UNKNOWN, "n/a") == "n/a"


@pytest.mark.parametrize(
    "quality, expected",
    [
        (DataQuality.KNOWN, "7"),
        (DataQuality.TENTATIVE, "(7)"),
        (DataQuality.THEORETICAL, "[7]"),
        (DataQuality.ABOUT, "~7"),
    ],
)
def test_qualified_data_built_with_quality(quality, expected):
    data = QualifiedData(quality)
    assert data.quality is quality
    assert data.qualify("7") == expected


def test_qualified_data_defaults_to_known():
    data = QualifiedData()
    assert data.quality is DataQuality.KNOWN
    assert data.qualify("x") == "x"
    assert data.debug() == ""


def test_qualified_data_qualify_follows_quality():
    data = QualifiedData()
    data.quality = DataQuality.TENTATIVE
    assert data.qualify("3") == "(3)"
    assert data.debug() == "()"


def test_qualified_data_unknown_placeholder():
    data = QualifiedData(DataQuality.UNKNOWN)
    assert data.qualify("3") == "?"
    assert data.qualify("3", "-") == "-"
    assert data.debug() == "?"