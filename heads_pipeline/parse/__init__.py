"""Tokenization and external parser adapters."""

from .backend import CommandLineParser, ConstituentParser
from .spacy_parser import blank_nlp, load_nlp, tokenize_sentences

__all__ = ["ConstituentParser", "CommandLineParser", "load_nlp", "blank_nlp", "tokenize_sentences"]
