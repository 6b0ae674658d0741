"""Folder/file hierarchy nodes built from scan results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
import posixpath
from typing import TypeAlias

from nopx.scan import PixelLiteral


class NodeKind(StrEnum):
    """Discriminator shared by every hierarchy node."""

    FOLDER = "folder"
    FILE = "file"


@dataclass(frozen=True, slots=True)
class FileNode:
    path: str
    children: tuple[PixelLiteral, ...]
    kind: NodeKind = field(default=NodeKind.FILE, init=False)

    @property
    def name(self) -> str:
        return posixpath.basename(self.path)


@dataclass(frozen=True, slots=True)
class FolderNode:
    path: str
    children: tuple[FileNode, ...]
    kind: NodeKind = field(default=NodeKind.FOLDER, init=False)

    @property
    def name(self) -> str:
        return posixpath.basename(self.path)

    @property
    def literal_count(self) -> int:
        return sum(len(file.children) for file in self.children)


HierarchyNode: TypeAlias = FolderNode | FileNode
