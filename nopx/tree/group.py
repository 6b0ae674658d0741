"""Grouping of flat scan results into a deterministic folder/file tree."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
import posixpath

from nopx.scan import PixelLiteral, normalize_path
from nopx.tree.model import FileNode, FolderNode


def group_literals(literals: Iterable[PixelLiteral]) -> tuple[FolderNode, ...]:
    """Group literals by directory, then by file.

    Folders sort by directory path, files by base name (full path breaks
    ties), literals by (line, column). Comparisons are plain code-point order,
    so the same input set always yields the same tree.
    """
    by_folder: dict[str, dict[str, list[PixelLiteral]]] = defaultdict(lambda: defaultdict(list))
    for literal in literals:
        path = normalize_path(literal.path)
        by_folder[posixpath.dirname(path)][path].append(literal)

    folders: list[FolderNode] = []
    for folder_path in sorted(by_folder):
        files_by_path = by_folder[folder_path]
        files = tuple(
            FileNode(
                path=file_path,
                children=tuple(sorted(files_by_path[file_path], key=lambda literal: literal.sort_key)),
            )
            for file_path in sorted(files_by_path, key=lambda path: (posixpath.basename(path), path))
        )
        folders.append(FolderNode(path=folder_path, children=files))
    return tuple(folders)
