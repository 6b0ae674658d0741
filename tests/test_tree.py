import random

from nopx.scan import PixelLiteral
from nopx.tree import (
    FileNode,
    FolderNode,
    NodeKind,
    file_label,
    folder_label,
    group_literals,
    iter_nodes,
    literal_label,
    literal_tooltip,
    render_tree,
)


def _literal(path: str, line: int = 1, column: int = 1, raw_value: str = "16px") -> PixelLiteral:
    return PixelLiteral(raw_value=raw_value, path=path, line=line, column=column, context=f"top: {raw_value};")


def test_group_builds_sorted_folders_and_files() -> None:
    literals = [_literal("b/z.css"), _literal("a/y.css"), _literal("a/x.css")]

    tree = group_literals(literals)

    assert [folder.path for folder in tree] == ["a", "b"]
    assert [file.path for file in tree[0].children] == ["a/x.css", "a/y.css"]
    assert [file.name for file in tree[0].children] == ["x.css", "y.css"]
    assert [file.path for file in tree[1].children] == ["b/z.css"]


def test_group_keeps_line_then_column_order_within_a_file() -> None:
    literals = [
        _literal("a.css", line=3, column=1),
        _literal("a.css", line=1, column=9),
        _literal("a.css", line=1, column=2),
    ]

    (folder,) = group_literals(literals)
    (file,) = folder.children

    assert [(lit.line, lit.column) for lit in file.children] == [(1, 2), (1, 9), (3, 1)]


def test_group_is_deterministic_for_any_input_order() -> None:
    literals = [
        _literal("src/B.css", 2),
        _literal("src/a.css", 1),
        _literal("lib/c.less", 5),
        _literal("src/a.css", 7),
        _literal("src/nested/d.scss", 1),
        _literal("root.css", 4),
    ]
    expected = group_literals(literals)

    shuffled = list(literals)
    for seed in range(5):
        random.Random(seed).shuffle(shuffled)
        assert group_literals(shuffled) == expected

    assert [folder.path for folder in expected] == ["", "lib", "src", "src/nested"]
    # Case-sensitive: uppercase sorts before lowercase.
    assert [file.name for file in expected[2].children] == ["B.css", "a.css"]


def test_group_uses_explicit_kind_tags() -> None:
    (folder,) = group_literals([_literal("a/x.css")])

    assert folder.kind is NodeKind.FOLDER
    assert folder.children[0].kind is NodeKind.FILE
    assert isinstance(folder, FolderNode)
    assert isinstance(folder.children[0], FileNode)


def test_group_of_nothing_is_empty() -> None:
    assert group_literals([]) == ()


def test_group_normalizes_backslash_paths() -> None:
    tree = group_literals([_literal("a\\x.css"), _literal("a/y.css")])

    assert [folder.path for folder in tree] == ["a"]
    assert [file.path for file in tree[0].children] == ["a/x.css", "a/y.css"]


def test_labels_and_tooltips() -> None:
    literal = _literal("a/x.css", line=3, column=8)
    (folder,) = group_literals([literal, _literal("a/x.css", line=4)])
    (root_folder,) = group_literals([_literal("top.css")])

    assert folder_label(folder) == "a"
    assert folder_label(root_folder) == "Root"
    assert file_label(folder.children[0]) == "x.css (2)"
    assert literal_label(literal) == "16px - Line 3"
    assert literal_tooltip(literal) == "a/x.css:3:8 - top: 16px;"
    assert folder.literal_count == 2


def test_iter_nodes_and_render_tree() -> None:
    tree = group_literals([_literal("a/x.css", line=2), _literal("b/y.css", raw_value="8px")])

    depths = [depth for depth, _ in iter_nodes(tree)]
    rendered = render_tree(tree)

    assert depths == [0, 1, 2, 0, 1, 2]
    assert rendered.splitlines() == [
        "a",
        "  x.css (1)",
        "    16px - Line 2  top: 16px;",
        "b",
        "  y.css (1)",
        "    8px - Line 1  top: 8px;",
    ]
