"""Angular momentum of a nuclear state as an integer or half-integer."""

from __future__ import annotations

import logging
import math

from .quality import DataQuality, QualifiedData

_log = logging.getLogger(__name__)

_MASK = 0xFFFF


class Spin(QualifiedData):
    """A spin written as ``numerator / denominator`` with a quality marker.

    Numerator and denominator are unsigned 16-bit counts.
    """

    def __init__(
        self,
        numerator: int = 0,
        denominator: int = 0,
        quality: DataQuality = DataQuality.KNOWN,
    ) -> None:
        self.numerator = 0
        self.denominator = 0
        if numerator or denominator:
            self.set(numerator, denominator)
        self.quality = DataQuality(quality)

    def __repr__(self) -> str:
        return (
            f"Spin(numerator={self.numerator}, denominator={self.denominator}, "
            f"quality={self.quality.name})"
        )

    def valid(self) -> bool:
        return self.denominator != 0

    def set(self, numerator: int, denominator: int = 1) -> None:
        """Replace the fraction, warning when it is not an integer or half-integer."""
        self.numerator = int(numerator) & _MASK
        self.denominator = int(denominator) & _MASK
        if self.denominator not in (1, 2):
            _log.warning(
                "Spin should be an integer or half an integer!     [%d/%d]",
                self.numerator,
                self.denominator,
            )

    def to_float(self) -> float:
        """The spin as a number, or NaN without a denominator."""
        if self.denominator:
            return self.numerator / self.denominator
        return math.nan

    def to_string(self) -> str:
        if self.quality == DataQuality.UNKNOWN or not self.denominator:
            return ""
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"

    def to_qualified_string(self, unknown: str = "?") -> str:
        """The spin decorated according to its quality."""
        return self.qualify(self.to_string(), unknown)

    def _with(self, numerator: int, denominator: int) -> Spin:
        result = Spin(quality=self.quality)
        result.numerator = numerator & _MASK
        result.denominator = denominator & _MASK
        return result

    def __add__(self, other: Spin | int) -> Spin:
        """Add whole units of spin, or another spin."""
        if isinstance(other, Spin):
            if self.denominator == other.denominator:
                return self._with(self.numerator + other.numerator, self.denominator)
            return self._with(
                self.denominator * other.numerator + self.numerator * other.denominator,
                max(self.denominator, other.denominator),
            )
        if isinstance(other, int):
            return self._with(self.numerator + self.denominator * other, self.denominator)
        return NotImplemented

    def __sub__(self, other: int) -> Spin:
        """Remove whole units of spin."""
        if isinstance(other, int) and not isinstance(other, Spin):
            return self._with(self.numerator - self.denominator * other, self.denominator)
        return NotImplemented

    def __neg__(self) -> Spin:
        return self._with(-self.numerator, self.denominator)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Spin):
            return NotImplemented
        return self.numerator == other.numerator and self.denominator == other.denominator

    def __lt__(self, other: Spin) -> bool:
        if not isinstance(other, Spin):
            return NotImplemented
        return self.to_float() < other.to_float()

    def __le__(self, other: Spin) -> bool:
        if not isinstance(other, Spin):
            return NotImplemented
        return self == other or self.to_float() <= other.to_float()

    def __gt__(self, other: Spin) -> bool:
        if not isinstance(other, Spin):
            return NotImplemented
        return self.to_float() > other.to_float()

    def __ge__(self, other: Spin) -> bool:
        if not isinstance(other, Spin):
            return NotImplemented
        return self == other or self.to_float() >= other.to_float()

    def __hash__(self) -> int:
        return hash((self.numerator, self.denominator))