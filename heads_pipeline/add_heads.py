"""CLI: add head marks to Penn treebank files (one tree per line)."""

from __future__ import annotations

import argparse
import json

from heads_pipeline.config import build_head_finder, load_head_finder_config
from heads_pipeline.pipeline import process_treebank


def main() -> None:
    parser = argparse.ArgumentParser(description="Mark head constituents in a treebank file or directory")
    parser.add_argument("--input", required=True, help="Treebank file, or directory walked recursively")
    parser.add_argument("--language", default=None, help="en | es (default: HEADS_LANGUAGE or en)")
    parser.add_argument("--head-finder", default=None, help="collins | modcollins | sem | none")
    parser.add_argument("--rules-file", default=None, help="Head rules in '<count> <category> <flag> <tag>...' format")
    parser.add_argument("--extension", default=".head")
    args = parser.parse_args()

    config = load_head_finder_config(args.language, args.head_finder, args.rules_file)
    finder = build_head_finder(config)

    try:
        written = process_treebank(args.input, finder, extension=args.extension)
    except (ValueError, KeyError, FileNotFoundError) as exc:
        print(json.dumps({"input": args.input, "error": str(exc)}, ensure_ascii=False))
        raise SystemExit(2) from exc

    for path in written:
        print(f"Saved {path}")
    print(f"Annotated {len(written)} treebank files ({config.language}/{config.variant})")


if __name__ == "__main__":
    main()
