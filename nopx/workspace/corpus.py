"""Filesystem enumeration of stylesheet sources under a workspace root."""

from __future__ import annotations

from collections.abc import Iterable
from fnmatch import fnmatchcase
from pathlib import Path, PurePosixPath

from nopx.config import NoPxOptions
from nopx.scan import SourceUnit


def collect_corpus(root: str | Path, options: NoPxOptions | None = None) -> list[SourceUnit]:
    """List supported files under `root`, skipping ignored paths.

    Reading is deferred: each unit loads its bytes when the scanner asks, so
    a file that vanishes or cannot be read is reported by the scanner.
    """
    resolved_options = options if options is not None else NoPxOptions()
    root_path = Path(root)
    if not root_path.is_dir():
        return []

    units: list[SourceUnit] = []
    for path in sorted(root_path.rglob("*")):
        if not path.is_file():
            continue
        relative = str(path.relative_to(root_path)).replace("\\", "/")
        if is_ignored(relative, resolved_options.ignore_patterns):
            continue
        if not resolved_options.is_supported_path(relative):
            continue
        units.append(SourceUnit(path=str(path).replace("\\", "/"), source=path.read_bytes))
    return units


def is_ignored(relative_path: str, patterns: Iterable[str]) -> bool:
    """True when a path component equals a pattern or the path matches it as a glob.

    `node_modules` and `**/node_modules/**` both exclude everything under any
    `node_modules` directory.
    """
    parts = PurePosixPath(relative_path).parts
    for pattern in patterns:
        bare = pattern.strip("/")
        if bare.startswith("**/"):
            bare = bare[3:]
        if bare.endswith("/**"):
            bare = bare[:-3]
        if bare in parts:
            return True
        if fnmatchcase(relative_path, pattern) or any(fnmatchcase(part, bare) for part in parts):
            return True
    return False
