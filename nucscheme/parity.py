"""Parity of a nuclear state together with how certain it is."""

from __future__ import annotations

from enum import IntEnum

from .quality import DataQuality, QualifiedData


class ParityValue(IntEnum):
    """The parity itself."""

    MINUS = -1
    PLUS_MINUS = 0
    PLUS = 1


_SYMBOLS = {
    ParityValue.PLUS: "+",
    ParityValue.MINUS: "-",
    ParityValue.PLUS_MINUS: "\u00b1",
}


class Parity(QualifiedData):
    """A parity value with a quality marker.

    Equality, ordering and hashing look at the parity value only.
    """

    def __init__(
        self,
        value: ParityValue = ParityValue.PLUS_MINUS,
        quality: DataQuality = DataQuality.UNKNOWN,
    ) -> None:
        self.value = ParityValue(value)
        self.quality = DataQuality(quality)

    def __repr__(self) -> str:
        return f"Parity(value={self.value.name}, quality={self.quality.name})"

    def valid(self) -> bool:
        return self.quality != DataQuality.UNKNOWN

    def to_string(self) -> str:
        """The parity sign, or an empty string when unknown."""
        if self.quality == DataQuality.UNKNOWN:
            return ""
        return _SYMBOLS[self.value]

    def to_qualified_string(self, unknown: str = "?") -> str:
        """The parity sign decorated according to its quality."""
        return self.qualify(self.to_string(), unknown)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Parity):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other: Parity) -> bool:
        if not isinstance(other, Parity):
            return NotImplemented
        return self.value < other.value

    def __gt__(self, other: Parity) -> bool:
        if not isinstance(other, Parity):
            return NotImplemented
        return self.value > other.value

    def __hash__(self) -> int:
        return hash(self.value)