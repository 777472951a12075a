"""spaCy loading and sentence tokenization for raw text input."""

from __future__ import annotations

from typing import List

import spacy


def load_nlp(model_name: str = "en_core_web_sm"):
    nlp = spacy.load(model_name)
    _ensure_sentence_boundaries(nlp)
    return nlp


def _ensure_sentence_boundaries(nlp):
    if "parser" not in nlp.pipe_names and "senter" not in nlp.pipe_names:
        if "sentencizer" not in nlp.pipe_names:
            nlp.add_pipe("sentencizer")
    return nlp


def blank_nlp(language: str = "en"):
    """Tokenizer plus rule-based sentence splitting; no model download needed."""
    return _ensure_sentence_boundaries(spacy.blank(language))


def tokenize_sentences(text: str, nlp) -> List[List[str]]:
    """Split text into sentences of token strings, dropping whitespace tokens."""
    raw = (text or "").strip()
    if not raw:
        return []
    doc = nlp(raw)
    sentences = []
    for sent in doc.sents:
        tokens = [token.text for token in sent if not token.is_space]
        if tokens:
            sentences.append(tokens)
    return sentences
