"""Semantic head overrides for verb groups and clauses.

Structural rules make the finite verb the head of a clause. These overrides
move the head to the lexical predicate instead. Auxiliaries and
passive/progressive chains hand it to the embedded verb phrase; copulas hand it
to the predicative complement, except in existential and WH-question clauses.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Optional, Sequence

from heads_pipeline import constants
from heads_pipeline.rules.table import Rule
from heads_pipeline.tree.node import Constituent

if TYPE_CHECKING:
    from heads_pipeline.heads.finder import HeadFinder


def _matches_any(patterns: Iterable[str], tag: str) -> bool:
    return any(re.fullmatch(pattern, tag) for pattern in patterns)


@dataclass(frozen=True)
class SemanticLexicon:
    """Categories, tag patterns and word lists one language's overrides need.

    Tag fields hold full-match regular expressions; word lists are compared
    with lower-cased word forms, and only for tags in ``lexical_tags``.
    """

    verbal_categories: frozenset
    verb_phrase: str
    nominal_prefix: str
    auxiliaries: frozenset
    passive_auxiliaries: frozenset
    copulas: frozenset
    lexical_tags: tuple
    auxiliary_tags: tuple
    participle_tags: tuple
    auxiliary_rule: Rule
    copula_rule: Rule
    passive_auxiliary_tags: tuple = ()
    copula_tags: tuple = ()
    coordinating_tags: tuple = ("CC",)
    coordinated_phrases: tuple = ("CONJP", "PRN")
    existential_tags: tuple = ("EX",)
    question_category: str = "SQ"
    question_copula_rule: Optional[Rule] = None
    wh_question_parent: str = "SBARQ"
    wh_prefix: str = "WH"
    temporal_marker: str = "-TMP"


ENGLISH_LEXICON = SemanticLexicon(
    verbal_categories=frozenset({"VP", "SQ", "SINV"}),
    verb_phrase="VP",
    nominal_prefix="NP",
    auxiliaries=constants.AUXILIARIES,
    passive_auxiliaries=constants.BE_GET_VERBS,
    copulas=constants.COPULAS,
    lexical_tags=constants.VERB_TAGS,
    auxiliary_tags=constants.UNAMBIGUOUS_AUX_TAGS,
    participle_tags=constants.PARTICIPLE_TAGS,
    auxiliary_rule=Rule("left", ("VP", "ADJP")),
    copula_rule=Rule("left", ("VP", "ADJP", "NP", "WHADJP", "WHNP")),
    question_copula_rule=Rule("right", ("VP", "ADJP", "NP", "WHADJP", "WHNP")),
)

ANCORA_LEXICON = SemanticLexicon(
    verbal_categories=frozenset({"GRUP.VERB"}),
    verb_phrase="GRUP.VERB",
    nominal_prefix="SN",
    auxiliaries=frozenset(),
    passive_auxiliaries=frozenset(),
    copulas=constants.SPANISH_COPULAS,
    lexical_tags=(".*",),
    auxiliary_tags=("VA.*",),
    participle_tags=("V[MAS]P.*", "V[MAS]G.*", "V[MAS][ISMN][IS].*"),
    auxiliary_rule=Rule("left", (r"GRUP\.VERB", "SA", r"S\.A", r"GRUP\.A")),
    copula_rule=Rule("left", (r"GRUP\.VERB", "SA", r"S\.A", r"GRUP\.A", "SN", r"GRUP\.NOM")),
    passive_auxiliary_tags=("VS.*",),
    copula_tags=("VS.*",),
    coordinated_phrases=("CONJ",),
)


class SemanticHeadOverride:
    def __init__(self, lexicon: SemanticLexicon) -> None:
        self.lexicon = lexicon

    def attempt(self, finder: "HeadFinder", node: Constituent, parent: Optional[Constituent]) -> Optional[int]:
        lex = self.lexicon
        category = node.category
        if category not in lex.verbal_categories:
            return None
        children = node.children

        if self.has_auxiliary(children) or self.has_passive_progressive(children):
            index = finder.traverse(children, lex.auxiliary_rule)
            if index is not None:
                return index

        if self.has_copula(children) and not self.is_existential(node, parent) and not self.is_wh_question(node, parent):
            question = category == lex.question_category and lex.question_copula_rule is not None
            rule = lex.question_copula_rule if question else lex.copula_rule
            index = finder.traverse(children, rule)
            if index is not None and lex.temporal_marker in children[index].label:
                index = None
            if question and index is not None and children[index].category.startswith(lex.nominal_prefix):
                # A lone nominal in a question is the subject, not the predicate.
                if not any(c.category.startswith(lex.nominal_prefix) for c in children[:index]):
                    index = None
            if index is not None:
                return index
        return None

    def is_auxiliary(self, node: Constituent) -> bool:
        if not node.is_preterminal:
            return False
        lex = self.lexicon
        tag = node.category
        if _matches_any(lex.auxiliary_tags, tag):
            return True
        return _matches_any(lex.lexical_tags, tag) and node.word.lower() in lex.auxiliaries

    def is_passive_auxiliary(self, node: Constituent) -> bool:
        if not node.is_preterminal:
            return False
        lex = self.lexicon
        tag = node.category
        if _matches_any(lex.passive_auxiliary_tags, tag):
            return True
        return _matches_any(lex.lexical_tags, tag) and node.word.lower() in lex.passive_auxiliaries

    def is_copula(self, node: Constituent) -> bool:
        if not node.is_preterminal:
            return False
        lex = self.lexicon
        tag = node.category
        if _matches_any(lex.copula_tags, tag):
            return True
        return _matches_any(lex.lexical_tags, tag) and node.word.lower() in lex.copulas

    def has_auxiliary(self, children: Sequence[Constituent]) -> bool:
        return any(self.is_auxiliary(child) for child in children)

    def has_copula(self, children: Sequence[Constituent]) -> bool:
        return any(self.is_copula(child) for child in children)

    def has_passive_progressive(self, children: Sequence[Constituent]) -> bool:
        """A passive auxiliary next to a verb phrase headed by a participle."""
        found_auxiliary = False
        found_participle_phrase = False
        for child in children:
            if self.is_passive_auxiliary(child):
                found_auxiliary = True
            elif child.is_phrasal and child.category.startswith(self.lexicon.verb_phrase):
                if self._participle_phrase(child):
                    found_participle_phrase = True
            if found_auxiliary and found_participle_phrase:
                return True
        return False

    def _participle_phrase(self, phrase: Constituent) -> bool:
        lex = self.lexicon
        participle_in_nested = False
        for grandchild in phrase.children:
            category = grandchild.category
            if grandchild.is_preterminal:
                if _matches_any(lex.participle_tags, category):
                    return True
                if category in lex.coordinating_tags and participle_in_nested:
                    return True
            elif grandchild.is_phrasal:
                if category == lex.verb_phrase:
                    participle_in_nested = self._contains_participle(grandchild)
                elif category in lex.coordinated_phrases and participle_in_nested:
                    return True
        return False

    def _contains_participle(self, phrase: Constituent) -> bool:
        return any(
            child.is_preterminal and _matches_any(self.lexicon.participle_tags, child.category)
            for child in phrase.children
        )

    def is_existential(self, node: Constituent, parent: Optional[Constituent]) -> bool:
        """Existential "there" before the verb phrase, or among a question's constituents."""
        if parent is None or not self.lexicon.existential_tags:
            return False
        lex = self.lexicon
        category = node.category
        if category == lex.verb_phrase:
            for sibling in parent.children:
                if sibling.category == lex.verb_phrase:
                    break
                if any(tag in lex.existential_tags for tag in sibling.preterminal_yield()):
                    return True
        elif category.startswith(lex.question_category):
            for sibling in parent.children:
                if sibling.category.startswith("VB"):
                    continue
                if any(tag in lex.existential_tags for tag in sibling.preterminal_yield()):
                    return True
        return False

    def is_wh_question(self, node: Constituent, parent: Optional[Constituent]) -> bool:
        lex = self.lexicon
        if parent is None or not node.category.startswith(lex.question_category):
            return False
        if parent.category != lex.wh_question_parent:
            return False
        return any(child.category.startswith(lex.wh_prefix) for child in parent.children)
