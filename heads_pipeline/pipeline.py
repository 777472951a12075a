"""Per-sentence orchestration: parse, annotate heads, serialize."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List, Optional, Union

from heads_pipeline.heads.annotate import annotate_heads
from heads_pipeline.heads.finder import HeadFinder
from heads_pipeline.parse.backend import ConstituentParser
from heads_pipeline.parse.spacy_parser import tokenize_sentences
from heads_pipeline.tree.node import Constituent
from heads_pipeline.tree.penn import read_penn, to_penn


def annotate_tree(tree: Constituent, finder: Optional[HeadFinder]) -> Constituent:
    if finder is None:
        return tree
    return annotate_heads(tree, finder)


def annotate_penn(tree_text: str, finder: Optional[HeadFinder]) -> str:
    return to_penn(annotate_tree(read_penn(tree_text), finder))


def annotate_treebank_lines(lines: Iterable[str], finder: Optional[HeadFinder]) -> List[str]:
    return [annotate_penn(line, finder) for line in lines if line.strip()]


def parse_and_annotate(
    text: str,
    nlp,
    parser: ConstituentParser,
    finder: Optional[HeadFinder],
) -> List[str]:
    """One annotated Penn string per sentence of ``text``, from the best parse."""
    out = []
    for tokens in tokenize_sentences(text, nlp):
        ranked = parser.parse(tokens, num_parses=1)
        if not ranked:
            raise RuntimeError(f"parser returned no tree for: {' '.join(tokens)[:80]!r}")
        out.append(annotate_penn(ranked[0], finder))
    return out


def _treebank_files(path: Path, extension: str) -> List[Path]:
    if path.is_file():
        return [path]
    if not path.is_dir():
        raise FileNotFoundError(f"treebank path not found: {path}")
    files = []
    for root, _dirs, names in os.walk(path):
        for name in names:
            if name.startswith(".") or name.endswith(extension):
                continue
            files.append(Path(root) / name)
    return sorted(files)


def process_treebank(
    path: Union[str, Path],
    finder: Optional[HeadFinder],
    extension: str = ".head",
) -> List[Path]:
    """Annotate a one-tree-per-line file, or every file under a directory.

    Output goes next to each input as ``<name><extension>``; outputs already
    present in a directory are not treated as inputs.
    """
    written = []
    for src in _treebank_files(Path(path), extension):
        with open(src, "r", encoding="utf-8") as f:
            annotated = annotate_treebank_lines(f, finder)
        dst = src.with_name(src.name + extension)
        with open(dst, "w", encoding="utf-8") as f:
            for line in annotated:
                f.write(line + "\n")
        written.append(dst)
    return written
