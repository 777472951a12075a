"""Parse tree model and Penn bracket I/O."""

from .node import Constituent, strip_head_mark
from .penn import from_nltk, iter_treebank_lines, read_penn, read_treebank_file, to_nltk, to_penn

__all__ = [
    "Constituent",
    "strip_head_mark",
    "from_nltk",
    "to_nltk",
    "read_penn",
    "to_penn",
    "iter_treebank_lines",
    "read_treebank_file",
]
