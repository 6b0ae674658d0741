"""Host-side helpers for working on a directory tree."""

from nopx.workspace.corpus import collect_corpus, is_ignored

__all__ = [
    "collect_corpus",
    "is_ignored",
]
