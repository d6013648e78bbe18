"""The ways a nucleus can decay."""

from __future__ import annotations


def _count(value: int) -> str:
    return str(value) if value > 1 else ""


class DecayMode:
    """A combination of decay processes.

    Beta and electron-capture multiplicities are limited to 0, 1 or 2;
    other values are ignored.
    """

    def __init__(
        self,
        *,
        protons: int = 0,
        neutrons: int = 0,
        beta_plus: int = 0,
        beta_minus: int = 0,
        electron_capture: int = 0,
        isomeric: bool = False,
        alpha: bool = False,
        spontaneous_fission: bool = False,
    ) -> None:
        self.protons = protons
        self.neutrons = neutrons
        self._beta_plus = 0
        self._beta_minus = 0
        self._electron_capture = 0
        self.beta_plus = beta_plus
        self.beta_minus = beta_minus
        self.electron_capture = electron_capture
        self.isomeric = isomeric
        self.alpha = alpha
        self.spontaneous_fission = spontaneous_fission

    def _state(self) -> tuple:
        return (
            self.protons,
            self.neutrons,
            self._beta_plus,
            self._beta_minus,
            self._electron_capture,
            self.isomeric,
            self.alpha,
            self.spontaneous_fission,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DecayMode):
            return NotImplemented
        return self._state() == other._state()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"DecayMode({self.to_string()!r})"

    @property
    def beta_plus(self) -> int:
        return self._beta_plus

    @beta_plus.setter
    def beta_plus(self, count: int) -> None:
        if 0 <= count < 3:
            self._beta_plus = count

    @property
    def beta_minus(self) -> int:
        return self._beta_minus

    @beta_minus.setter
    def beta_minus(self, count: int) -> None:
        if 0 <= count < 3:
            self._beta_minus = count

    @property
    def electron_capture(self) -> int:
        return self._electron_capture

    @electron_capture.setter
    def electron_capture(self, count: int) -> None:
        if 0 <= count < 3:
            self._electron_capture = count

    def valid(self) -> bool:
        return bool(
            self.alpha
            or self.isomeric
            or self.spontaneous_fission
            or self.protons
            or self.neutrons
            or self._beta_minus
            or self._beta_plus
            or self._electron_capture
        )

    def to_string(self) -> str:
        """The processes in a fixed order, separated by commas."""
        parts: list[str] = []
        if self.spontaneous_fission:
            parts.append("Spontaneous Fission")
        if self.isomeric:
            parts.append("Isomeric Transition")
        if self._beta_minus:
            parts.append(_count(self._beta_minus) + "β-")
        if self._beta_plus:
            parts.append(_count(self._beta_plus) + "β+")
        if self._electron_capture:
            multiplicity = (
                f"{self._electron_capture}x " if self._electron_capture > 1 else ""
            )
            parts.append(multiplicity + "Electron Capture")
        if self.protons:
            parts.append(_count(self.protons) + "p")
        if self.neutrons:
            parts.append(_count(self.neutrons) + "n")
        if self.alpha:
            parts.append("α")
        return ", ".join(parts)