"""English (Penn Treebank) head rule tables."""

from __future__ import annotations

from heads_pipeline.constants import PUNCTUATION_TAGS
from heads_pipeline.rules.table import RuleTable, build_rule_table

COLLINS_RULES = {
    "ADJP": [["left", "NNS", "QP", "NN", "$", "ADVP", "JJ", "VBN", "VBG", "ADJP", "JJR", "NP", "JJS", "DT", "FW",
              "RBR", "RBS", "SBAR", "RB"]],
    "ADVP": [["right", "RB", "RBR", "RBS", "FW", "ADVP", "TO", "CD", "JJR", "JJ", "IN", "NP", "JJS", "NN"]],
    "CONJP": [["right", "CC", "RB", "IN"]],
    "FRAG": [["right"]],
    "INTJ": [["left"]],
    "LST": [["right", "LS", ":"]],
    "NAC": [["left", "NN", "NNS", "NNP", "NNPS", "NP", "NAC", "EX", "$", "CD", "QP", "PRP", "VBG", "JJ", "JJS", "JJR",
             "ADJP", "FW"]],
    "NX": [["left"]],
    "PP": [["right", "IN", "TO", "VBG", "VBN", "RP", "FW"]],
    "PRN": [["left"]],
    "PRT": [["right", "RP"]],
    "QP": [["left", "$", "IN", "NNS", "NN", "JJ", "RB", "DT", "CD", "NCD", "QP", "JJR", "JJS"]],
    "RRC": [["right", "VP", "NP", "ADVP", "ADJP", "PP"]],
    "S": [["left", "TO", "IN", "VP", "S", "SBAR", "ADJP", "UCP", "NP"]],
    "SBAR": [["left", "WHNP", "WHPP", "WHADVP", "WHADJP", "IN", "DT", "S", "SQ", "SINV", "SBAR", "FRAG"]],
    "SBARQ": [["left", "SQ", "S", "SINV", "SBARQ", "FRAG"]],
    "SINV": [["left", "VBZ", "VBD", "VBP", "VB", "MD", "VP", "S", "SINV", "ADJP", "NP"]],
    "SQ": [["left", "VBZ", "VBD", "VBP", "VB", "MD", "VP", "SQ"]],
    "UCP": [["right"]],
    "VP": [["left", "TO", "VBD", "VBN", "MD", "VBZ", "VB", "VBG", "VBP", "AUX", "AUXG", "VP", "ADJP", "NN", "NNS", "NP"]],
    "WHADJP": [["left", "CC", "WRB", "JJ", "ADJP"]],
    "WHADVP": [["right", "CC", "WRB"]],
    "WHNP": [["left", "WDT", "WP", "WP$", "WHADJP", "WHPP", "WHNP"]],
    "WHPP": [["right", "IN", "TO", "FW"]],
    "X": [["right"]],
    "NP": [
        ["rightdis", "NN", "NNP", "NNPS", "NNS", "NX", "POS", "JJR"],
        ["left", "NP"],
        ["rightdis", "$", "ADJP", "PRN"],
        ["right", "CD"],
        ["rightdis", "JJ", "JJS", "RB", "QP"],
    ],
    "TYPO": [["left"]],
    "EDITED": [["left"]],
    "XS": [["right", "IN"]],
}

_VP_CANDIDATES = ["TO", "VBD", "VBN", "MD", "VBZ", "VB", "VBG", "VBP", "VP", "AUX", "AUXG", "ADJP", "JJP", "NN", "NNS",
                  "JJ", "NP", "NNP"]

# Collins' table extended with NML, JJP and the newer treebank categories.
MODIFIED_COLLINS_RULES = {
    "ADJP": [
        ["left", "$"],
        ["rightdis", "NNS", "NN", "JJ", "QP", "VBN", "VBG"],
        ["left", "ADJP"],
        ["rightdis", "JJP", "JJR", "JJS", "DT", "RB", "RBR", "CD", "IN", "VBD"],
        ["left", "ADVP", "NP"],
    ],
    "JJP": [["left", "NNS", "NN", "$", "QP", "JJ", "VBN", "VBG", "ADJP", "JJP", "JJR", "NP", "JJS", "DT", "FW", "RBR",
             "RBS", "SBAR", "RB"]],
    "ADVP": [
        ["left", "ADVP", "IN"],
        ["rightdis", "RB", "RBR", "RBS", "JJ", "JJR", "JJS"],
        ["rightdis", "RP", "DT", "NN", "CD", "NP", "VBN", "NNP", "CC", "FW", "NNS", "ADJP", "NML"],
    ],
    "CONJP": [["right", "CC", "RB", "IN"]],
    "FRAG": [["right"]],
    "INTJ": [["left"]],
    "LST": [["right", "LS", ":"]],
    "NAC": [["left", "NN", "NNS", "NML", "NNP", "NNPS", "NP", "NAC", "EX", "$", "CD", "QP", "PRP", "VBG", "JJ", "JJS",
             "JJR", "ADJP", "JJP", "FW"]],
    "NX": [["right", "NP", "NX"]],
    "PP": [["right", "IN", "TO", "VBG", "VBN", "RP", "FW", "JJ", "SYM"], ["left", "PP"]],
    "PRN": [["left", "VP", "NP", "PP", "SQ", "S", "SINV", "SBAR", "ADJP", "JJP", "ADVP", "INTJ", "WHNP", "NAC", "VBP",
             "JJ", "NN", "NNP"]],
    "PRT": [["right", "RP"]],
    "QP": [["left", "$", "IN", "NNS", "NN", "JJ", "CD", "PDT", "DT", "RB", "NCD", "QP", "JJR", "JJS"]],
    "RRC": [["left", "RRC"], ["right", "VP", "ADJP", "JJP", "NP", "PP", "ADVP"]],
    "S": [["left", "TO", "VP", "S", "FRAG", "SBAR", "ADJP", "JJP", "UCP", "NP"]],
    "SBAR": [["left", "WHNP", "WHPP", "WHADVP", "WHADJP", "IN", "DT", "S", "SQ", "SINV", "SBAR", "FRAG"]],
    "SBARQ": [["left", "SQ", "S", "SINV", "SBARQ", "FRAG", "SBAR"]],
    "SINV": [["left", "VBZ", "VBD", "VBP", "VB", "MD", "VBN", "VP", "S", "SINV", "ADJP", "JJP", "NP"]],
    "SQ": [["left", "VBZ", "VBD", "VBP", "VB", "MD", "AUX", "AUXG", "VP", "SQ"]],
    "UCP": [["right"]],
    "VP": [["left", *_VP_CANDIDATES]],
    "WHADJP": [["left", "WRB", "WHADVP", "RB", "JJ", "ADJP", "JJP", "JJR"]],
    "WHADVP": [["right", "WRB", "WHADVP"]],
    "WHNP": [["left", "WDT", "WP", "WP$", "WHADJP", "WHPP", "WHNP"]],
    "WHPP": [["right", "IN", "TO", "FW"]],
    "X": [["right", "S", "VP", "ADJP", "JJP", "NP", "SBAR", "PP", "X"]],
    "NP": [
        ["rightdis", "NN", "NNP", "NNPS", "NNS", "NML", "NX", "POS", "JJR"],
        ["left", "NP", "PRP"],
        ["rightdis", "$", "ADJP", "JJP", "PRN", "FW"],
        ["right", "CD"],
        ["rightdis", "JJ", "JJS", "RB", "QP", "DT", "WDT", "RBR", "ADVP"],
    ],
    "NML": [
        ["rightdis", "NN", "NNP", "NNPS", "NNS", "NX", "NML", "POS", "JJR"],
        ["left", "NP", "PRP"],
        ["rightdis", "$", "ADJP", "JJP", "PRN"],
        ["right", "CD"],
        ["rightdis", "JJ", "JJS", "RB", "QP", "DT", "WDT", "RBR", "ADVP"],
    ],
    "TYPO": [["left", "NN", "NP", "NML", "NNP", "NNPS", "TO", "VBD", "VBN", "MD", "VBZ", "VB", "VBG", "VBP", "VP", "ADJP",
              "JJP", "FRAG"]],
    "EDITED": [["left"]],
    "XS": [["right", "IN"]],
    "VB": [["left", *_VP_CANDIDATES]],
}

# Replacements installed over the modified table by the semantic head finder:
# content words, not function words, head clauses and complements.
SEMANTIC_RULES = {
    "NP": [
        ["rightdis", "NN", "NNP", "NNPS", "NNS", "NX", "NML", "JJR", "WP"],
        ["left", "NP", "PRP"],
        ["rightdis", "$", "ADJP", "FW"],
        ["right", "CD"],
        ["rightdis", "JJ", "JJS", "QP", "DT", "WDT", "NML", "PRN", "RB", "RBR", "ADVP"],
        ["left", "POS"],
    ],
    "WHNP": [
        ["rightdis", "NN", "NNP", "NNPS", "NNS", "NX", "NML", "JJR", "WP"],
        ["left", "WHNP", "NP"],
        ["rightdis", "$", "ADJP", "PRN", "FW"],
        ["right", "CD"],
        ["rightdis", "JJ", "JJS", "RB", "QP"],
        ["left", "WHPP", "WHADJP", "WP$", "WDT"],
    ],
    "WHADJP": [["left", "ADJP", "JJ", "JJR", "WP"], ["right", "RB"], ["right"]],
    "WHADVP": [["rightdis", "WRB", "WHADVP", "RB", "JJ"]],
    "QP": [["right", "$", "NNS", "NN", "CD", "JJ", "PDT", "DT", "IN", "RB", "NCD", "QP", "JJR", "JJS"]],
    "S": [["left", "VP", "S", "FRAG", "SBAR", "ADJP", "UCP", "TO"], ["right", "NP"]],
    "SBAR": [["left", "S", "SQ", "SINV", "SBAR", "FRAG", "VP", "WHNP", "WHPP", "WHADVP", "WHADJP", "IN", "DT"]],
    "SQ": [["left", "VP", "SQ", "ADJP", "VB", "VBZ", "VBD", "VBP", "MD", "AUX", "AUXG"]],
    "UCP": [["left"]],
    "CONJP": [["right", "VB", "JJ", "RB", "IN", "CC"]],
    "FRAG": [["left", "IN"], ["right", "RB"], ["left", "NP"], ["left", "ADJP", "ADVP", "FRAG", "S", "SBAR", "VP"]],
    "PRN": [["left", "VP", "SQ", "S", "SINV", "SBAR", "NP", "ADJP", "PP", "ADVP", "INTJ", "WHNP", "NAC", "VBP", "JJ",
             "NN", "NNP"]],
    "XS": [["right", "IN"]],
    "EMBED": [["right", "INTJ"]],
}


def collins_table() -> RuleTable:
    return build_rule_table("collins", COLLINS_RULES)


def modified_collins_table() -> RuleTable:
    return build_rule_table("modcollins", MODIFIED_COLLINS_RULES, avoid=PUNCTUATION_TAGS)


def semantic_table() -> RuleTable:
    return modified_collins_table().with_overrides("sem", SEMANTIC_RULES)
