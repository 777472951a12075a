"""Head finder and parser configuration: CLI values with environment fallbacks."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from heads_pipeline.constants import HEAD_FINDER_VARIANTS, LANGUAGES
from heads_pipeline.heads.coordination import CoordinationCorrector
from heads_pipeline.heads.finder import HeadFinder
from heads_pipeline.heads.semantic import ANCORA_LEXICON, ENGLISH_LEXICON, SemanticHeadOverride
from heads_pipeline.rules.registry import load_rule_table
from heads_pipeline.rules.table import load_rule_file

DEFAULT_LANGUAGE = "en"
DEFAULT_VARIANT = "sem"
DEFAULT_SPACY_MODEL = "en_core_web_sm"
DEFAULT_PARSER_TIMEOUT_SEC = 60

_CORRECTORS = {
    ("en", "collins"): CoordinationCorrector(conjunctions=frozenset({"CC", "CONJP"})),
    ("en", "modcollins"): CoordinationCorrector(conjunctions=frozenset({"CC", "CONJP"})),
    ("en", "sem"): CoordinationCorrector(
        conjunctions=frozenset({"CC", "CONJP"}),
        interjection_tags=frozenset({"UH"}),
        interjection_phrases=frozenset({"INTJ"}),
        multi_conjunct=True,
    ),
    ("es", "collins"): CoordinationCorrector(conjunctions=frozenset({"CC", "COORD", "CONJ"})),
    ("es", "sem"): CoordinationCorrector(
        conjunctions=frozenset({"CC", "CONJ"}),
        interjection_tags=frozenset({"I"}),
        interjection_phrases=frozenset({"INTERJECCIO"}),
        multi_conjunct=True,
    ),
}

_SEMANTIC_LEXICONS = {
    "en": ENGLISH_LEXICON,
    "es": ANCORA_LEXICON,
}


@dataclass(frozen=True)
class HeadFinderConfig:
    language: str = DEFAULT_LANGUAGE
    variant: str = DEFAULT_VARIANT  # collins | modcollins | sem | none
    rules_file: Optional[str] = None

    @property
    def marks_heads(self) -> bool:
        return self.variant != "none"


@dataclass(frozen=True)
class ParserConfig:
    command: Optional[str]
    timeout_sec: int
    spacy_model: str


def _pick(cli_value: Optional[str], env_name: str, default: str) -> str:
    raw = cli_value if cli_value is not None else os.getenv(env_name, default)
    return (raw or default).strip().lower()


def resolve_language(cli_value: Optional[str] = None) -> str:
    language = _pick(cli_value, "HEADS_LANGUAGE", DEFAULT_LANGUAGE)
    if language not in LANGUAGES:
        raise ValueError(f"language must be one of: {' | '.join(sorted(LANGUAGES))}")
    return language


def resolve_head_finder_variant(cli_value: Optional[str] = None) -> str:
    variant = _pick(cli_value, "HEADS_FINDER", DEFAULT_VARIANT)
    if variant not in HEAD_FINDER_VARIANTS:
        raise ValueError(f"head_finder must be one of: {' | '.join(sorted(HEAD_FINDER_VARIANTS))}")
    return variant


def resolve_rules_file(cli_value: Optional[str] = None) -> Optional[str]:
    raw = cli_value if cli_value is not None else os.getenv("HEADS_RULES_FILE", "")
    path = (raw or "").strip()
    if not path:
        return None
    if not os.path.isfile(path):
        raise FileNotFoundError(f"rules file not found: {path}")
    return path


def _to_positive_int(name: str, raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got: {raw!r}") from exc
    if value <= 0:
        raise ValueError(f"{name} must be > 0, got: {value}")
    return value


def load_head_finder_config(
    language: Optional[str] = None,
    variant: Optional[str] = None,
    rules_file: Optional[str] = None,
) -> HeadFinderConfig:
    return HeadFinderConfig(
        language=resolve_language(language),
        variant=resolve_head_finder_variant(variant),
        rules_file=resolve_rules_file(rules_file),
    )


def load_parser_config(
    command: Optional[str] = None,
    timeout_sec: Optional[int] = None,
    spacy_model: Optional[str] = None,
) -> ParserConfig:
    raw_command = command if command is not None else os.getenv("HEADS_PARSER_COMMAND", "")
    if timeout_sec is None:
        raw_timeout = os.getenv("HEADS_PARSER_TIMEOUT_SEC", str(DEFAULT_PARSER_TIMEOUT_SEC)).strip()
        timeout_sec = _to_positive_int("HEADS_PARSER_TIMEOUT_SEC", raw_timeout)
    elif timeout_sec <= 0:
        raise ValueError(f"parser_timeout must be > 0, got: {timeout_sec}")
    model = spacy_model if spacy_model is not None else os.getenv("HEADS_SPACY_MODEL", DEFAULT_SPACY_MODEL)
    return ParserConfig(
        command=(raw_command or "").strip() or None,
        timeout_sec=timeout_sec,
        spacy_model=(model or DEFAULT_SPACY_MODEL).strip(),
    )


def build_head_finder(config: HeadFinderConfig) -> Optional[HeadFinder]:
    """Compose table, coordination correction and overrides; None when marking is off."""
    if not config.marks_heads:
        return None

    if config.rules_file:
        table = load_rule_file(config.rules_file)
        corrector = _CORRECTORS[(config.language, "collins")]
        return HeadFinder(table, corrector)

    table = load_rule_table(config.language, config.variant)
    corrector = _CORRECTORS[(config.language, config.variant)]
    overrides = []
    if config.variant == "sem":
        overrides.append(SemanticHeadOverride(_SEMANTIC_LEXICONS[config.language]))
    return HeadFinder(table, corrector, overrides)
