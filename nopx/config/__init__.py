"""Configuration options."""

from nopx.config.options import (
    DEFAULT_FILE_EXTENSIONS,
    DEFAULT_IGNORE_PATTERNS,
    NoPxOptions,
)

__all__ = [
    "DEFAULT_FILE_EXTENSIONS",
    "DEFAULT_IGNORE_PATTERNS",
    "NoPxOptions",
]
