"""Pixel to rem conversion."""

from nopx.convert.converter import (
    DEFAULT_BASE_FONT_SIZE,
    PX_SUFFIX,
    REM_SUFFIX,
    parse_magnitude,
    to_relative,
    to_rem,
)

__all__ = [
    "DEFAULT_BASE_FONT_SIZE",
    "PX_SUFFIX",
    "REM_SUFFIX",
    "parse_magnitude",
    "to_relative",
    "to_rem",
]
