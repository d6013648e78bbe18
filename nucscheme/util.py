"""Small string and number helpers used throughout the package."""

from __future__ import annotations

import math
import re
from collections.abc import Sequence

_STRTOD_NUMBER = re.compile(
    r"""[+-]?(?:
        0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)(?:p[+-]?\d+)?
      | (?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?
      | inf(?:inity)?
      | nan(?:\([0-9a-z_]*\))?
    )""",
    re.VERBOSE | re.IGNORECASE,
)

_DIGITS = "0123456789"


def trim_all(text: str) -> str:
    """Collapse every run of whitespace to one space and strip both ends."""
    return " ".join(text.split())


def join(items: Sequence[str], spacer: str = "") -> str:
    """Concatenate ``items``, putting ``spacer`` only after the inner items.

    No spacer follows the first or the last item, so ``["a", "b", "c"]``
    joined with ``","`` gives ``"ab,c"``.
    """
    last = len(items) - 1
    parts: list[str] = []
    for position, item in enumerate(items):
        parts.append(item)
        if 0 < position < last:
            parts.append(spacer)
    return "".join(parts)


def is_number(value: object) -> bool:
    """Tell whether the first word of ``value`` as text is wholly a number."""
    if isinstance(value, bool):
        value = int(value)
    words = str(value).split()
    if not words:
        return False
    word = words[0]
    first = word[0]
    if first.isascii() and first.isalpha():
        return False
    return _STRTOD_NUMBER.fullmatch(word) is not None


def _parse_number(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        pass
    try:
        return float.fromhex(text)
    except ValueError:
        return math.nan


def sig_digits(text: str) -> int:
    """Count the significant digits of the single number written in ``text``."""
    text = text.lower().replace("+", "").replace("-", "")
    text = text.split("e", 1)[0]
    count = 0
    past_zeros = False
    for char in text:
        digit = char in _DIGITS
        if digit and char != "0":
            past_zeros = True
        if past_zeros and digit:
            count += 1
    return count


def order_of(value: float) -> int:
    """Decimal order of magnitude of ``value``; zero or non-finite values give 0."""
    magnitude = abs(value)
    if magnitude == 0 or not math.isfinite(magnitude):
        return 0
    return math.floor(math.log10(magnitude))


def get_precision(value: str) -> float:
    """Value of one unit in the last written decimal place of ``value``."""
    value = value.strip().strip("+-")
    parts = re.split("[Ee]", value)
    mantissa = parts[0]
    exponent_text = parts[1] if len(parts) > 1 else ""

    exponent = 0
    if exponent_text and is_number(exponent_text):
        parsed = _parse_number(exponent_text.split()[0])
        if math.isfinite(parsed):
            exponent = int(parsed)

    sigpos = 0
    point = mantissa.find(".")
    if point != -1:
        sigpos -= len(mantissa) - point - 1

    return 10.0 ** (sigpos + exponent)


def itobin16(value: int) -> str:
    """The low 16 bits of ``value`` as a string of 0 and 1."""
    return format(value & 0xFFFF, "016b")


def itobin32(value: int) -> str:
    """The low 32 bits of ``value`` as two 16-bit groups separated by a space."""
    high = (value >> 16) & 0xFFFF
    low = value & 0xFFFF
    return itobin16(high) + " " + itobin16(low)