"""Qualifiers that mark how certain a piece of nuclear data is."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class DataQuality(IntEnum):
    """How well a datum is established."""

    KNOWN = 0
    UNKNOWN = 1
    TENTATIVE = 2
    THEORETICAL = 3
    ABOUT = 4


def add_qualifiers(original: str, quality: DataQuality, unknown: str = "?") -> str:
    """Decorate ``original`` according to ``quality``."""
    if quality == DataQuality.UNKNOWN:
        return unknown
    if quality == DataQuality.TENTATIVE:
        return "(" + original + ")"
    if quality == DataQuality.THEORETICAL:
        return "[" + original + "]"
    if quality == DataQuality.ABOUT:
        return "~" + original
    return original


@dataclass
class QualifiedData:
    """Base for data that carries a quality marker."""

    quality: DataQuality = DataQuality.KNOWN

    def qualify(self, original: str, unknown: str = "?") -> str:
        """Decorate ``original`` according to this datum's quality."""
        return add_qualifiers(original, self.quality, unknown)

    def debug(self) -> str:
        """The qualifier decoration applied to an empty string."""
        return self.qualify("")