"""CLI: parse and head-annotate JSONL rows carrying 'text' or 'tree'."""

from __future__ import annotations

import argparse
import json

from heads_pipeline.config import build_head_finder, load_head_finder_config, load_parser_config
from heads_pipeline.parse.backend import CommandLineParser
from heads_pipeline.parse.spacy_parser import load_nlp
from heads_pipeline.pipeline import annotate_penn, parse_and_annotate


def main() -> None:
    parser = argparse.ArgumentParser(description="Head-annotate constituency trees for JSONL input")
    parser.add_argument("--input", required=True, help="Input JSONL with field 'tree' (Penn) or 'text'")
    parser.add_argument("--output", required=True)
    parser.add_argument("--output-format", default="jsonl", choices=["jsonl", "oneline"])
    parser.add_argument("--language", default=None)
    parser.add_argument("--head-finder", default=None)
    parser.add_argument("--rules-file", default=None)
    parser.add_argument("--parser-command", default=None, help="External parser; reads tokens, prints trees")
    parser.add_argument("--parser-timeout", type=int, default=None)
    parser.add_argument("--spacy-model", default=None)
    args = parser.parse_args()

    finder = build_head_finder(load_head_finder_config(args.language, args.head_finder, args.rules_file))
    parser_config = load_parser_config(args.parser_command, args.parser_timeout, args.spacy_model)

    rows = []
    with open(args.input, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line:
                rows.append(json.loads(line))

    nlp = None
    backend = None
    if any("tree" not in row for row in rows):
        if parser_config.command is None:
            raise ValueError("rows without 'tree' need --parser-command or HEADS_PARSER_COMMAND")
        nlp = load_nlp(parser_config.spacy_model)
        backend = CommandLineParser(parser_config.command, timeout_sec=parser_config.timeout_sec)

    for i, row in enumerate(rows):
        try:
            if "tree" in row:
                row["trees"] = [annotate_penn(row["tree"], finder)]
            else:
                row["trees"] = parse_and_annotate(row["text"], nlp, backend, finder)
        except (ValueError, KeyError, RuntimeError) as exc:
            print(json.dumps({"input": args.input, "row": i, "error": str(exc)}, ensure_ascii=False))
            raise SystemExit(2) from exc

    with open(args.output, "w", encoding="utf-8") as f:
        for row in rows:
            if args.output_format == "oneline":
                for tree in row["trees"]:
                    f.write(tree + "\n")
            else:
                f.write(json.dumps(row, ensure_ascii=False) + "\n")

    print(f"Saved {sum(len(row['trees']) for row in rows)} annotated trees to {args.output}")


if __name__ == "__main__":
    main()
