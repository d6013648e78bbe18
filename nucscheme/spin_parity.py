"""Spin-parity assignments of nuclear levels and sets of alternatives."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field

from .parity import Parity, ParityValue
from .quality import DataQuality, add_qualifiers
from .spin import Spin
from .uncert import UncertaintyType

_EQ_CODES = {
    UncertaintyType.LESS_EQUAL: "LE",
    UncertaintyType.LESS_THAN: "LT",
    UncertaintyType.GREATER_EQUAL: "GE",
    UncertaintyType.GREATER_THAN: "GT",
    UncertaintyType.APPROXIMATELY: "AP",
    UncertaintyType.SYSTEMATICS: "SY",
    UncertaintyType.CALCULATED: "CA",
}

_PRETTY = (
    ("LE ", "≤"),
    ("LT ", "<"),
    ("GE ", "≥"),
    ("GT ", ">"),
    ("AP ", "~"),
    ("SY ", " (sys)"),
    ("CA ", " (cal)"),
)


@dataclass
class SpinParity:
    """One spin with its parity, optionally qualified by a limit or estimate."""

    parity: Parity = field(default_factory=Parity)
    spin: Spin = field(default_factory=Spin)
    eq_type: UncertaintyType = UncertaintyType.UNDEFINED

    def set_common_quality(self, quality: DataQuality) -> None:
        """Give spin and parity the same quality, leaving unknown parts unknown."""
        if self.spin.quality != DataQuality.UNKNOWN:
            self.spin = copy.copy(self.spin)
            self.spin.quality = quality
        if self.parity.quality != DataQuality.UNKNOWN:
            self.parity = copy.copy(self.parity)
            self.parity.quality = quality

    def valid(self) -> bool:
        return (
            self.parity.quality != DataQuality.UNKNOWN
            or self.spin.quality != DataQuality.UNKNOWN
        )

    def to_string(self, with_qualifiers: bool = True) -> str:
        prefix = _EQ_CODES.get(self.eq_type, "")
        if prefix:
            prefix += " "
        if with_qualifiers:
            if self.spin.quality != self.parity.quality:
                return (
                    prefix
                    + self.spin.to_qualified_string("")
                    + self.parity.to_qualified_string("")
                )
            return add_qualifiers(
                prefix + self.spin.to_string() + self.parity.to_string(),
                self.spin.quality,
            )
        return prefix + self.spin.to_string() + self.parity.to_string()


class SpinSet:
    """Alternative spin-parity assignments joined by a logical separator."""

    def __init__(self, logic: str = "%") -> None:
        self.logic = logic
        self._items: list[SpinParity] = []
        self._parities: dict[ParityValue, Parity] = {}
        self._spin_qualities: set[DataQuality] = set()
        self._parity_qualities: set[DataQuality] = set()

    def __repr__(self) -> str:
        return f"SpinSet({self.to_string()!r}, logic={self.logic!r})"

    def add(self, spin_parity: SpinParity) -> None:
        """Append a copy of ``spin_parity``; invalid entries are ignored."""
        if not spin_parity.valid():
            return
        item = copy.deepcopy(spin_parity)
        self._items.append(item)
        self._parities.setdefault(item.parity.value, copy.copy(item.parity))
        self._spin_qualities.add(item.spin.quality)
        self._parity_qualities.add(item.parity.quality)

    def set_common_quality(self, quality: DataQuality) -> None:
        self._spin_qualities = {quality}
        self._parity_qualities = {quality}
        for item in self._items:
            item.set_common_quality(quality)

    def set_common_parity(self, parity: Parity) -> None:
        self._parities = {parity.value: copy.copy(parity)}
        self._parity_qualities = {parity.quality}
        for item in self._items:
            item.parity = copy.copy(parity)

    def merge(self, other: SpinSet) -> None:
        """Add the entries of ``other``, taking over its separator if it has any."""
        for item in other._items:
            self.add(item)
        if other._items:
            self.logic = other.logic

    def valid(self) -> bool:
        return bool(self._items)

    def debug(self) -> str:
        text = self.logic.join(item.to_string(True) for item in self._items)
        return f"{len(self._items)}>>  {text}"

    def to_string(self) -> str:
        """ENSDF-style text with shared qualifiers and parities factored out."""
        count = len(self._items)
        one_spin_quality = len(self._spin_qualities) == 1
        one_parity_quality = len(self._parity_qualities) == 1
        one_parity = len(self._parities) == 1 and one_parity_quality
        spin_quality = next(iter(self._spin_qualities)) if one_spin_quality else None
        parity_quality = next(iter(self._parity_qualities)) if one_parity_quality else None

        one_quality = (
            one_spin_quality and one_parity_quality and spin_quality == parity_quality
        )
        omit_qualities = one_quality and count > 1
        omit_parities = (
            count > 1
            and one_spin_quality
            and one_parity
            and spin_quality not in (DataQuality.KNOWN, DataQuality.ABOUT)
            and parity_quality not in (DataQuality.TENTATIVE, DataQuality.THEORETICAL)
        )

        if omit_parities:
            parts = (item.spin.to_string() for item in self._items)
        else:
            parts = (item.to_string(not omit_qualities) for item in self._items)
        text = self.logic.join(parts)

        if omit_parities:
            parity = next(iter(self._parities.values()))
            text = add_qualifiers(text, spin_quality)
            if spin_quality == parity_quality:
                text += parity.to_string()
            else:
                text += parity.to_qualified_string()
        elif omit_qualities:
            text = add_qualifiers(text, spin_quality)

        return "" if text == "?" else text

    def to_pretty_string(self) -> str:
        """Text with the limit and estimate codes replaced by symbols."""
        text = self.to_string()
        for code, symbol in _PRETTY:
            text = text.replace(code, symbol)
        return text