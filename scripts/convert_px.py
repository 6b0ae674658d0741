#!/usr/bin/env python3
"""Convert px values to rem in place."""

from __future__ import annotations

import argparse
from pathlib import Path

from tqdm import tqdm

from nopx.config import NoPxOptions
from nopx.pipeline import run_convert


def main() -> int:
    parser = argparse.ArgumentParser(description="Convert px values to rem in stylesheet files")
    parser.add_argument("files", type=Path, nargs="+", help="Files to convert")
    parser.add_argument("--threshold", type=float, default=1, help="Keep values at or below this (default: 1)")
    parser.add_argument("--base", type=float, default=16, help="Base font size in px (default: 16)")
    parser.add_argument("--dry-run", action="store_true", help="Report conversions without writing")
    args = parser.parse_args()

    if args.base <= 0:
        raise SystemExit(f"Invalid --base: {args.base}")
    options = NoPxOptions(ignore_threshold=args.threshold, base_font_size=args.base)

    total = 0
    for path in tqdm(args.files, desc="Converting", unit="file"):
        text = path.read_text(encoding="utf-8")
        result = run_convert(text, options)
        total += result.converted_count
        if result.changed and not args.dry_run:
            path.write_text(result.text, encoding="utf-8")
        tqdm.write(f"{path}: {result.converted_count} px value(s)")

    verb = "Would convert" if args.dry_run else "Converted"
    print(f"{verb} {total} px values to rem")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
