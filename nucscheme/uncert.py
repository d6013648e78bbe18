"""Measured values with uncertainties, significant figures and limits."""

from __future__ import annotations

import math
from enum import IntEnum

from .util import order_of

PLUSMINUS = "\u00b1"
XTEN = "\u00d710"
SUPERPLUS = "\u207a"
SUBMINUS = "\u208b"
APPROX = "\u2248"

_SUPERSCRIPT = str.maketrans("0123456789+-", "⁰¹²³⁴⁵⁶⁷⁸⁹⁺⁻")
_SUBSCRIPT = str.maketrans("0123456789+-", "₀₁₂₃₄₅₆₇₈₉₊₋")


class UncertaintyType(IntEnum):
    """What kind of uncertainty or limit accompanies a value."""

    UNDEFINED = 0x0
    SYMMETRIC = 0x1
    ASYMMETRIC = 0x2
    LESS_THAN = 0x3
    LESS_EQUAL = 0x4
    GREATER_THAN = 0x5
    GREATER_EQUAL = 0x6
    APPROXIMATELY = 0x7
    CALCULATED = 0x8
    SYSTEMATICS = 0x9


class Sign(IntEnum):
    """Which parts of a value (magnitude, sign) are known."""

    UNDEFINED = 0x0
    MAGNITUDE_DEFINED = 0x1
    SIGN_DEFINED = 0x2
    SIGN_MAGNITUDE_DEFINED = 0x3


_LIMIT_PREFIX = {
    UncertaintyType.GREATER_EQUAL: "≥",
    UncertaintyType.GREATER_THAN: ">",
    UncertaintyType.LESS_EQUAL: "≤",
    UncertaintyType.LESS_THAN: "<",
}

_NEGATED_LIMIT = {
    UncertaintyType.LESS_THAN: UncertaintyType.GREATER_THAN,
    UncertaintyType.LESS_EQUAL: UncertaintyType.GREATER_EQUAL,
    UncertaintyType.GREATER_THAN: UncertaintyType.LESS_THAN,
    UncertaintyType.GREATER_EQUAL: UncertaintyType.LESS_EQUAL,
}

_SCALES_PLAINLY = {
    UncertaintyType.SYMMETRIC,
    UncertaintyType.APPROXIMATELY,
    UncertaintyType.CALCULATED,
    UncertaintyType.SYSTEMATICS,
}

_FINITE_KINDS = _SCALES_PLAINLY | {UncertaintyType.ASYMMETRIC}


def _fixed(value: float, decimals: int) -> str:
    return f"{value:.{max(int(decimals), 0)}f}"


def _plain(value: float) -> str:
    return f"{value:.15g}"


def _superscript(text: str) -> str:
    return text.translate(_SUPERSCRIPT)


def _subscript(text: str) -> str:
    return text.translate(_SUBSCRIPT)


class Uncert:
    """A value with an uncertainty, a sign state and a number of significant figures.

    Without a value the quantity is wholly undefined.
    """

    __slots__ = ("value", "lower_sigma", "upper_sigma", "sign", "kind", "_sigfigs")

    def __init__(
        self,
        value: float | None = None,
        sigfigs: int = 0,
        sign: Sign = Sign.UNDEFINED,
        sigma: float | None = None,
    ) -> None:
        if value is None:
            self.value = math.nan
            self.lower_sigma = math.nan
            self.upper_sigma = math.nan
            self.sign = Sign.UNDEFINED
            self.kind = UncertaintyType.UNDEFINED
            self.sigfigs = 0
            return
        spread = 0.0 if sigma is None else float(sigma)
        self.value = float(value)
        self.lower_sigma = spread
        self.upper_sigma = spread
        self.sign = Sign(sign)
        self.kind = UncertaintyType.SYMMETRIC
        self.sigfigs = sigfigs

    @property
    def sigfigs(self) -> int:
        """Number of significant figures, kept as an unsigned 16-bit count."""
        return self._sigfigs

    @sigfigs.setter
    def sigfigs(self, count: int) -> None:
        self._sigfigs = int(count) & 0xFFFF

    def __repr__(self) -> str:
        return (
            f"Uncert(value={self.value!r}, lower_sigma={self.lower_sigma!r}, "
            f"upper_sigma={self.upper_sigma!r}, sign={self.sign.name}, "
            f"kind={self.kind.name}, sigfigs={self.sigfigs})"
        )

    def copy(self) -> Uncert:
        """An independent copy of this value."""
        twin = Uncert.__new__(Uncert)
        twin.value = self.value
        twin.lower_sigma = self.lower_sigma
        twin.upper_sigma = self.upper_sigma
        twin.sign = self.sign
        twin.kind = self.kind
        twin._sigfigs = self._sigfigs
        return twin

    def set_value(self, value: float, sign: Sign = Sign.SIGN_MAGNITUDE_DEFINED) -> None:
        """Replace the value and its sign state."""
        self.value = float(value)
        self.sign = Sign(sign)

    def set_uncertainty(self, lower: float, upper: float, kind: UncertaintyType) -> None:
        """Replace both uncertainties and their kind."""
        self.lower_sigma = float(lower)
        self.upper_sigma = float(upper)
        self.kind = UncertaintyType(kind)

    def set_symmetric_uncertainty(self, sigma: float) -> None:
        self.set_uncertainty(sigma, sigma, UncertaintyType.SYMMETRIC)

    def set_asymmetric_uncertainty(self, lower: float, upper: float) -> None:
        self.set_uncertainty(lower, upper, UncertaintyType.ASYMMETRIC)

    def sigdec(self) -> int:
        """Number of significant decimal places of the value."""
        order = order_of(self.value)
        if self.sigfigs > order:
            return (self.sigfigs - order - 1) & 0xFFFF
        return 0

    def has_finite_value(self) -> bool:
        if self.sign not in (Sign.MAGNITUDE_DEFINED, Sign.SIGN_MAGNITUDE_DEFINED):
            return False
        return self.kind in _FINITE_KINDS

    def defined(self) -> bool:
        return self.sign != Sign.UNDEFINED and self.kind != UncertaintyType.UNDEFINED

    def symmetric(self) -> bool:
        return self.kind == UncertaintyType.SYMMETRIC or self.upper_sigma == self.lower_sigma

    def uncert_order(self) -> int:
        if self.symmetric():
            return order_of(self.lower_sigma)
        return max(order_of(self.lower_sigma), order_of(self.upper_sigma))

    def val_adjusted(self) -> float:
        """The value, or its magnitude when only the magnitude is known."""
        if self.sign in (Sign.MAGNITUDE_DEFINED, Sign.UNDEFINED):
            return abs(self.value)
        return self.value

    def exponent(self) -> int:
        """Power of ten factored out for display, or 0 for moderate magnitudes."""
        target = max(order_of(self.val_adjusted()), self.uncert_order())
        if target > 4 or target < -3:
            return target
        return 0

    def decimals(self) -> int:
        """Decimal places shown for the value after factoring out the exponent."""
        altsigs = order_of(self.val_adjusted()) - self.exponent()
        if self.sigfigs > altsigs:
            return self.sigfigs - altsigs - 1
        return 0

    def insignificant_uncert(self) -> bool:
        return (
            order_of(self.val_adjusted()) - self.uncert_order() > 6
        ) or self.zero_uncert()

    def zero_uncert(self) -> bool:
        return self.lower_sigma == 0 and self.upper_sigma == 0

    def sign_prefix(self, prefix_magn: bool) -> str:
        if self.sign == Sign.MAGNITUDE_DEFINED and prefix_magn:
            return PLUSMINUS
        if self.sign == Sign.UNDEFINED:
            return "?"
        return ""

    def value_str(self) -> str:
        return _fixed(self.value / 10.0 ** self.exponent(), self.decimals())

    def sym_uncert_str(self) -> str:
        exp = self.exponent()
        dec = self.decimals()
        shifted = self.lower_sigma / 10.0 ** exp
        if not dec:
            text = _plain(shifted)
        elif shifted < 1.0:
            text = _plain(shifted / 10.0 ** -dec)
        else:
            text = _fixed(shifted, self.uncert_order() - exp + dec)
        return PLUSMINUS + text if text else ""

    def asym_uncert_str(self) -> str:
        exp = self.exponent()
        dec = self.decimals()
        lower = self.lower_sigma / 10.0 ** exp
        upper = self.upper_sigma / 10.0 ** exp
        if dec == 0:
            lower_text = _subscript(_plain(lower))
            upper_text = _superscript(_plain(upper))
        elif lower >= 1.0 or upper >= 1.0:
            places = self.uncert_order() - exp + dec
            lower_text = _subscript(_fixed(lower, places))
            upper_text = _superscript(_fixed(upper, places))
        else:
            shift = 1.0 / 10.0 ** -dec
            lower_text = _subscript(_plain(lower * shift))
            upper_text = _superscript(_plain(upper * shift))

        result = ""
        if upper_text:
            result += SUPERPLUS + upper_text
        if lower_text:
            result += SUBMINUS + lower_text
        return result

    def uncert_str(self) -> str:
        """The uncertainty part of the display, for symmetric and asymmetric kinds."""
        if not self.insignificant_uncert():
            if self.symmetric():
                return self.sym_uncert_str()
            return self.asym_uncert_str()
        if self.value != 0:
            return APPROX
        return ""

    def to_string(self, prefix_magn: bool = False, with_uncert: bool = True) -> str:
        """Human-readable text for the value and its uncertainty."""
        kind = self.kind
        prefix = self.sign_prefix(prefix_magn)
        if kind == UncertaintyType.SYSTEMATICS:
            return prefix + _plain(self.val_adjusted()) + " (sys)"
        if kind == UncertaintyType.CALCULATED:
            return prefix + _plain(self.val_adjusted()) + " (calc)"
        if kind == UncertaintyType.APPROXIMATELY:
            marker = APPROX if self.value != 0 else ""
            return marker + prefix + _plain(self.val_adjusted())
        if kind in _LIMIT_PREFIX:
            return _LIMIT_PREFIX[kind] + prefix + _plain(self.val_adjusted())
        if kind in (UncertaintyType.SYMMETRIC, UncertaintyType.ASYMMETRIC):
            if self.zero_uncert():
                return prefix + _plain(self.val_adjusted())
            result = prefix + self.value_str()
            if with_uncert:
                result += self.uncert_str()
            exp = self.exponent()
            if exp:
                return "(" + result + ")" + XTEN + _superscript(str(exp))
            return result
        return "undefined"

    def to_markup(self) -> str:
        """The display text with HTML markup and escaped comparison signs."""
        text = self.to_string(True)
        text = text.replace("(sys)", "<i>(sys)</i>")
        text = text.replace("(calc)", "<i>(calc)</i>")
        text = text.replace("<", "&lt;")
        return text.replace(">", "&gt;")

    def scale(self, factor: float) -> Uncert:
        """Multiply in place by ``factor``, flipping limits for negative factors."""
        factor = float(factor)
        self.set_value(self.value * factor)
        lower = self.lower_sigma * factor
        upper = self.upper_sigma * factor
        kind = self.kind
        if factor >= 0.0 or kind in _SCALES_PLAINLY:
            self.set_uncertainty(lower, upper, kind)
        elif kind == UncertaintyType.ASYMMETRIC:
            self.set_uncertainty(upper, lower, kind)
        else:
            self.set_uncertainty(lower, upper, _NEGATED_LIMIT.get(kind, kind))
        return self

    def _combine(self, other: Uncert, direction: int) -> Uncert:
        own_places = self.sigdec()
        other_places = other.sigdec()
        self.set_value(self.value + direction * other.value)
        self.sigfigs = min(own_places, other_places) + order_of(self.value) + 1
        if self.kind == other.kind:
            self.set_uncertainty(
                self.lower_sigma + other.lower_sigma,
                self.upper_sigma + other.upper_sigma,
                self.kind,
            )
        else:
            self.set_uncertainty(math.nan, math.nan, UncertaintyType.UNDEFINED)
        return self

    def __add__(self, other: Uncert) -> Uncert:
        if not isinstance(other, Uncert):
            return NotImplemented
        return self.copy()._combine(other, 1)

    def __sub__(self, other: Uncert) -> Uncert:
        if not isinstance(other, Uncert):
            return NotImplemented
        return self.copy()._combine(other, -1)

    def __mul__(self, other: Uncert | float) -> Uncert:
        if isinstance(other, Uncert):
            factor = other.value
        elif isinstance(other, (int, float)):
            factor = float(other)
        else:
            return NotImplemented
        return self.copy().scale(factor)

    def __float__(self) -> float:
        return self.value