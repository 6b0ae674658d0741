"""Text labels for hierarchy nodes and leaf literals."""

from __future__ import annotations

from typing import TypeAlias

from collections.abc import Iterator, Sequence

from nopx.scan import PixelLiteral
from nopx.tree.model import FileNode, FolderNode, NodeKind

ROOT_FOLDER_LABEL = "Root"

TreeRow: TypeAlias = tuple[int, FolderNode | FileNode | PixelLiteral]


def folder_label(node: FolderNode) -> str:
    return node.name or ROOT_FOLDER_LABEL


def file_label(node: FileNode) -> str:
    return f"{node.name} ({len(node.children)})"


def literal_label(literal: PixelLiteral) -> str:
    return f"{literal.raw_value} - Line {literal.line}"


def literal_tooltip(literal: PixelLiteral) -> str:
    return f"{literal.path}:{literal.line}:{literal.column} - {literal.context}"


def iter_nodes(folders: Sequence[FolderNode]) -> Iterator[TreeRow]:
    """Depth-first walk yielding `(depth, item)`; literals sit at depth 2."""
    for folder in folders:
        yield 0, folder
        for file in folder.children:
            yield 1, file
            for literal in file.children:
                yield 2, literal


def render_tree(folders: Sequence[FolderNode], *, indent: str = "  ") -> str:
    lines: list[str] = []
    for depth, item in iter_nodes(folders):
        if isinstance(item, PixelLiteral):
            label = f"{literal_label(item)}  {item.context}"
        else:
            match item.kind:
                case NodeKind.FOLDER:
                    label = folder_label(item)
                case NodeKind.FILE:
                    label = file_label(item)
        lines.append(f"{indent * depth}{label}")
    return "\n".join(lines)
