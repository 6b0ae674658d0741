#!/usr/bin/env python3
"""Print every px literal under a directory as a folder/file/value tree."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from nopx.config import NoPxOptions
from nopx.pipeline import run_scan
from nopx.tree import render_tree
from nopx.workspace import collect_corpus


def main() -> int:
    parser = argparse.ArgumentParser(description="Scan stylesheets for px values")
    parser.add_argument("root", type=Path, help="Workspace directory to scan")
    parser.add_argument(
        "--threshold",
        type=float,
        default=1,
        help="Ignore values at or below this many pixels (default: 1)",
    )
    parser.add_argument(
        "--exclude-value",
        action="append",
        default=[],
        help="Ignore this exact literal, e.g. 1px (repeatable)",
    )
    parser.add_argument(
        "--ext",
        action="append",
        default=[],
        help="File extension to scan (repeatable, default: css scss sass less stylus vue)",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log skipped files")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    root: Path = args.root
    if not root.is_dir():
        raise SystemExit(f"Invalid root: {root}")

    options = NoPxOptions(ignore_threshold=args.threshold, excluded_values=frozenset(args.exclude_value))
    if args.ext:
        options = options.with_overrides(file_extensions=frozenset(args.ext))

    corpus = collect_corpus(root, options)
    result = run_scan(corpus, options, show_progress=not args.no_progress)

    if result.tree:
        print(render_tree(result.tree))
    print(f"Found {len(result.literals)} px values in {len(corpus)} files")
    if result.skipped:
        print(f"Skipped {len(result.skipped)} unreadable files")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
