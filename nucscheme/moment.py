"""Electromagnetic moments of nuclear states."""

from __future__ import annotations

from dataclasses import dataclass, field

from .uncert import Uncert


@dataclass
class Moment:
    """A moment value with the references it was taken from."""

    value: Uncert = field(default_factory=Uncert)
    references: list[str] = field(default_factory=list)

    def valid(self) -> bool:
        return self.value.has_finite_value()

    def add_reference(self, ref: str) -> None:
        self.references.append(ref)

    def to_string(self) -> str:
        return self.value.to_string(False)

    def to_markup(self) -> str:
        return self.value.to_markup()