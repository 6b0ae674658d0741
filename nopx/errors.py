"""Error taxonomy shared by the converter, scanner and edit planner."""

from __future__ import annotations


class NoPxError(Exception):
    """Base class for nopx errors."""


class InvalidMagnitude(NoPxError, ValueError):
    """A pixel magnitude is non-finite, negative or unparsable."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid px value: {value!r}")
        self.value = value


class InvalidBase(NoPxError, ValueError):
    """A conversion base is non-finite or not strictly positive."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid base font size: {value!r}")
        self.value = value


class UnreadableSource(NoPxError):
    """A corpus entry could not be read or decoded."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Could not read {path}: {reason}")
        self.path = path
        self.reason = reason


class StaleSnapshot(NoPxError):
    """An edit plan no longer matches the text it is applied to."""


class ConfigError(NoPxError, ValueError):
    """A configuration value has the wrong type or an invalid value."""
