"""Pixel to relative-unit conversion."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext
import math
import re
from typing import Final

from nopx.errors import InvalidBase, InvalidMagnitude

DEFAULT_BASE_FONT_SIZE: Final[float] = 16
PX_SUFFIX: Final[str] = "px"
REM_SUFFIX: Final[str] = "rem"

_FRACTION_DIGITS: Final[Decimal] = Decimal("0.0001")
# Wide enough to quantize the ratio of any two finite floats.
_PRECISION: Final[int] = 400
_MAGNITUDE_RE: Final[re.Pattern[str]] = re.compile(r"[0-9]+(?:\.[0-9]+)?")


def to_relative(magnitude: float, base: float = DEFAULT_BASE_FONT_SIZE) -> str:
    """Format `magnitude / base` with at most four fractional digits.

    Rounds half away from zero at the 4th digit, then strips trailing zeros
    and a trailing decimal point: 8/16 -> "0.5", 16/16 -> "1".
    """
    if not _is_finite_number(magnitude) or magnitude < 0:
        raise InvalidMagnitude(magnitude)
    if not _is_finite_number(base) or base <= 0:
        raise InvalidBase(base)

    # repr() round-trips floats exactly, so 0.1 stays 0.1 and not its binary expansion.
    with localcontext() as context:
        context.prec = _PRECISION
        ratio = Decimal(repr(magnitude)) / Decimal(repr(base))
        text = format(ratio.quantize(_FRACTION_DIGITS, rounding=ROUND_HALF_UP), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def to_rem(magnitude: float, base: float = DEFAULT_BASE_FONT_SIZE) -> str:
    return f"{to_relative(magnitude, base)}{REM_SUFFIX}"


def parse_magnitude(raw_value: str) -> float:
    """Parse `16px` / `12.5px` (or a bare number) into a non-negative float."""
    number = raw_value[: -len(PX_SUFFIX)] if raw_value.endswith(PX_SUFFIX) else raw_value
    if _MAGNITUDE_RE.fullmatch(number) is None:
        raise InvalidMagnitude(raw_value)
    value = float(number)
    if not math.isfinite(value):
        raise InvalidMagnitude(raw_value)
    return value


def _is_finite_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)
