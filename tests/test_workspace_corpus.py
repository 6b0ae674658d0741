from pathlib import Path

import pytest

from nopx.config import NoPxOptions
from nopx.workspace import collect_corpus, is_ignored


@pytest.mark.parametrize(
    ("path", "ignored"),
    [
        ("node_modules/pkg/a.css", True),
        ("src/node_modules/pkg/a.css", True),
        ("dist/app.css", True),
        (".git/info.css", True),
        ("src/distance.css", False),
        ("src/app.css", False),
    ],
)
def test_is_ignored_with_default_patterns(path: str, ignored: bool) -> None:
    assert is_ignored(path, NoPxOptions().ignore_patterns) is ignored


def test_is_ignored_with_glob_patterns() -> None:
    patterns = ("**/vendor/**", "*.min.css")

    assert is_ignored("lib/vendor/reset.css", patterns)
    assert is_ignored("css/app.min.css", patterns)
    assert not is_ignored("css/app.css", patterns)


def test_collect_corpus_filters_and_sorts(tmp_path: Path) -> None:
    for relative in ["b.css", "a/z.scss", "a/notes.txt", "build/out.css", "coverage/x.less"]:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("a{top:4px}", encoding="utf-8")

    corpus = collect_corpus(tmp_path)

    relative_paths = [str(Path(unit.path).relative_to(tmp_path)).replace("\\", "/") for unit in corpus]
    assert relative_paths == ["a/z.scss", "b.css"]
    assert corpus[0].read_text() == "a{top:4px}"


def test_collect_corpus_of_missing_root(tmp_path: Path) -> None:
    assert collect_corpus(tmp_path / "missing") == []
