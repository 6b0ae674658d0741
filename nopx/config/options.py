"""Host configuration recognised by nopx."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
import math
import posixpath
from typing import Any, Final

from nopx.convert import DEFAULT_BASE_FONT_SIZE
from nopx.diagnostics.diagnostic import Severity, resolve_severity
from nopx.errors import ConfigError
from nopx.scan import IgnorePolicy

DEFAULT_FILE_EXTENSIONS: Final[frozenset[str]] = frozenset({"css", "scss", "sass", "less", "stylus", "vue"})
DEFAULT_IGNORE_PATTERNS: Final[tuple[str, ...]] = ("node_modules", "dist", "build", ".git", "coverage")


@dataclass(frozen=True, slots=True)
class NoPxOptions:
    """Feature flags and thresholds shared by the scanner, diagnostics and edits."""

    file_extensions: frozenset[str] = DEFAULT_FILE_EXTENSIONS
    ignore_threshold: float | None = 1
    excluded_values: frozenset[str] = frozenset()
    ignore_patterns: tuple[str, ...] = DEFAULT_IGNORE_PATTERNS
    enable_inline_diagnostics: bool = True
    diagnostic_severity: str = "warning"
    auto_convert_on_save: bool = False
    base_font_size: float = DEFAULT_BASE_FONT_SIZE

    @staticmethod
    def from_mapping(mapping: Mapping[str, Any]) -> "NoPxOptions":
        """Build options from host settings keyed by their camelCase names.

        Unknown keys are ignored; missing keys keep their defaults.
        """
        values: dict[str, Any] = {}
        for key, (attribute, coerce) in _KEYS.items():
            if key in mapping:
                values[attribute] = coerce(key, mapping[key])
        return NoPxOptions(**values)

    def with_overrides(self, **changes: Any) -> "NoPxOptions":
        return replace(self, **changes)

    @property
    def severity(self) -> Severity:
        return resolve_severity(self.diagnostic_severity)

    def ignore_policy(self) -> IgnorePolicy:
        return IgnorePolicy(threshold=self.ignore_threshold, excluded_values=self.excluded_values)

    def is_supported_path(self, path: str) -> bool:
        extension = posixpath.splitext(path.replace("\\", "/"))[1][1:].lower()
        if not extension:
            return False
        return any(extension == allowed.lower().lstrip(".") for allowed in self.file_extensions)


def _as_bool(key: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"`{key}` must be a boolean, got {value!r}")
    return value


def _as_number(key: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise ConfigError(f"`{key}` must be a finite number, got {value!r}")
    return value


def _as_positive_number(key: str, value: Any) -> float:
    number = _as_number(key, value)
    if number <= 0:
        raise ConfigError(f"`{key}` must be greater than zero, got {value!r}")
    return number


def _as_string(key: str, value: Any) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"`{key}` must be a string, got {value!r}")
    return value


def _as_strings(key: str, value: Any) -> tuple[str, ...]:
    if isinstance(value, str) or not isinstance(value, Iterable):
        raise ConfigError(f"`{key}` must be a list of strings, got {value!r}")
    items = tuple(value)
    for item in items:
        if not isinstance(item, str):
            raise ConfigError(f"`{key}` must only contain strings, got {item!r}")
    return items


def _as_string_set(key: str, value: Any) -> frozenset[str]:
    return frozenset(_as_strings(key, value))


_KEYS: Final = {
    "fileExtensions": ("file_extensions", _as_string_set),
    "ignoreThreshold": ("ignore_threshold", _as_number),
    "excludedValues": ("excluded_values", _as_string_set),
    "ignorePatterns": ("ignore_patterns", _as_strings),
    "enableInlineDiagnostics": ("enable_inline_diagnostics", _as_bool),
    "diagnosticSeverity": ("diagnostic_severity", _as_string),
    "autoConvertOnSave": ("auto_convert_on_save", _as_bool),
    "baseFontSize": ("base_font_size", _as_positive_number),
}
