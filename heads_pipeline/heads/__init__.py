"""Head finding: rule engine, coordination correction, semantic overrides."""

from .annotate import annotate_heads, apply_head_marks, head_preterminal, head_word, strip_head_marks
from .coordination import CoordinationCorrector
from .finder import HeadFinder, HeadOverride
from .semantic import ANCORA_LEXICON, ENGLISH_LEXICON, SemanticHeadOverride, SemanticLexicon

__all__ = [
    "HeadFinder",
    "HeadOverride",
    "CoordinationCorrector",
    "SemanticHeadOverride",
    "SemanticLexicon",
    "ENGLISH_LEXICON",
    "ANCORA_LEXICON",
    "annotate_heads",
    "apply_head_marks",
    "strip_head_marks",
    "head_preterminal",
    "head_word",
]
