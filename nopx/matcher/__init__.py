"""Pixel literal matching."""

from nopx.matcher.matcher import (
    PX_PATTERN,
    PixelMatch,
    count_pixel_literals,
    find_pixel_literals,
)

__all__ = [
    "PX_PATTERN",
    "PixelMatch",
    "count_pixel_literals",
    "find_pixel_literals",
]
