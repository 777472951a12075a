"""Rule table selection by language and head finder variant."""

from __future__ import annotations

from functools import lru_cache

from heads_pipeline.rules.english import collins_table, modified_collins_table, semantic_table
from heads_pipeline.rules.spanish import ancora_semantic_table, ancora_table
from heads_pipeline.rules.table import RuleTable

_TABLE_FACTORIES = {
    ("en", "collins"): collins_table,
    ("en", "modcollins"): modified_collins_table,
    ("en", "sem"): semantic_table,
    ("es", "collins"): ancora_table,
    ("es", "sem"): ancora_semantic_table,
}


@lru_cache(maxsize=None)
def load_rule_table(language: str, variant: str = "collins") -> RuleTable:
    """Built-in table for ``(language, variant)``; built once, then shared read-only."""
    factory = _TABLE_FACTORIES.get((language, variant))
    if factory is None:
        known = " | ".join(f"{lang}/{var}" for lang, var in sorted(_TABLE_FACTORIES))
        raise ValueError(f"no rule table for {language}/{variant}; expected one of: {known}")
    return factory()
