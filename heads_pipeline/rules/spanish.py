"""Spanish (AnCora) head rule tables; candidates are full-match tag patterns."""

from __future__ import annotations

from heads_pipeline.rules.table import RuleTable, build_rule_table

_NOMINAL = [
    ["rightdis", "AQA.*", "AQC.*", r"GRUP\.A", r"S\.A", "NC.*S.*", "NP.*", "NC.*P.*", r"GRUP\.NOM"],
    ["left", "SN", r"GRUP\.NOM"],
    ["rightdis", r"\$", r"GRUP\.A", r"S\.A", "SA"],
    ["right", "Z.*"],
    ["rightdis", "AQ0.*", "AQ[AC].*", "AO.*", r"GRUP\.A", r"S\.A", "RG", "RN", r"GRUP\.NOM"],
]

_ADJECTIVAL = ["NC.*P.*", r"GRUP\.NOM", r"\$", "NC.*S.*", "SADV", r"GRUP\.ADV", "AQA.*", "AQC.*", "V[MAS]P.*",
               "V[MAS]G.*"]
_ADJECTIVAL_TAIL = ["AQS.*", "SN", r"GRUP\.NOM", "D.*", "S", "RG", "RN"]

ANCORA_RULES = {
    "SN": _NOMINAL,
    "GRUP.NOM": _NOMINAL,
    "SENTENCE": [["left", "PREP", "SP[CS].*", "CS.*", r"GRUP\.VERB", "S", "SA", "COORD", "CONJ", r"GRUP\.NOM", "SN",
                  "S"]],
    "S": [["left", "PREP", "SP[CS].*", "COORD", "CONJ", "CS.*", r"GRUP\.VERB", "S", "SA", "COORD", r"GRUP\.NOM",
           "SN"]],
    "SA": [["left", *_ADJECTIVAL, "SA", r"S\.A", r"GRUP\.A", *_ADJECTIVAL_TAIL]],
    "S.A": [["left", *_ADJECTIVAL, r"S\.A", r"GRUP\.A", *_ADJECTIVAL_TAIL]],
    "SADV": [["right", "S", "RG", "RN", "SADV", r"GRUP\.ADV", "SP[CS].*", "PREP", "Z.*", "AQA.*", "AQC.*", r"S\.A",
              r"GRUP\.A", "CONJ", "CS.*", "SN", r"GRUP\.NOM", "AQS.*", "NC.*S.*"]],
    "SP": [["right", "SP[CS].*", "PREP", "CS.*", "CONJ", "V[MAS]G.*", "V[MAS]P.*"]],
    "GRUP.A": [["left", *_ADJECTIVAL, r"GRUP\.A", *_ADJECTIVAL_TAIL]],
    "GRUP.ADV": [["right", "RG", "RN", r"GRUP\.ADV", "PREP", "SP.*", "Z.*", "AQA.*", "AQC.*", r"GRUP\.A", r"S\.A",
                  "CS.*", "CONJ", "SN", r"GRUP\.NOM", "AQS.*", "NC.*S.*"]],
    "GRUP.VERB": [["left", "INFINITIU", "GERUNDI", "PARTICIPI", "PREP", "SP[CS].*", "V[MAS].*[IS].*", "V[MAS]P.*",
                   "V.*C.*", "V[MAS]IP3S.*", "V.*", "V[MAS]G.*", "V[MAS]IP[12]S.*", r"GRUP\.VERB", "SA", r"S\.A",
                   r"GRUP\.A", "NC.*S.*", "NC.*P.*", r"GRUP\.NOM", "SN", "S"]],
    "INFINITIU": [["left", "VMN.*", "V[MAS]N.*", "V.*"]],
    "GERUNDI": [["left", "VMG.*", "V[MAS]G.*", "V.*"]],
    "PARTICIPI": [["left", "VMP.*", "V[MAS]P.*", "V.*"]],
    "MORFEMA.PRONOMINAL": [["left", "P.*", "SN.*", r"GRUP\.NOM.*", r"GRUP\.VERB"]],
    "MORFEMA.VERBAL": [["left", r"GRUP\.VERB", "P.*", "SN.*", r"GRUP\.NOM.*", "S"]],
    "COORD": [["right"]],
    "CONJ": [["right", "CONJ", "CC.*", "RB", "RN", "SP[CS].*", "PREP", "CS"]],
    "INC": [["left", "S", "SN", r"GRUP\.NOM", r"GRUP\.VERB", "SADV", r"GRUP\.ADV", "SA", r"S\.A", r"GRUP\.A", "PREP",
             "SP[CS].*", "CONJ", "CS", "D.*"]],
    "INTERJECCIO": [["left", "I"]],
    "NEG": [["left", "RN"]],
    "PREP": [["left", "PREP", "SP[CS].*", "CONJ", "CS"]],
    "RELATIU": [["left", "P.*", "SN", r"GRUP\.NOM", "S", r"GRUP\.VERB"]],
    "SPEC": [["left"]],
    "X": [["right"]],
}

_SEMANTIC_NOMINAL_TAIL = [
    ["rightdis", r"\$", "SA", r"S\.A", r"GRUP\.A"],
    ["right", "Z.*"],
    ["rightdis", "AQ0.*", "AQ[AC].*", "AO.*", r"GRUP\.A", r"S\.A", r"GRUP\.NOM", "D.*", "RG", "RN", "SADV",
     r"GRUP\.ADV"],
]
_SEMANTIC_COORDINATION = [["right", r"GRUP\.VERB", "A[QO][AC].*", r"GRUP\.A", r"S\.A", "RB", "RN", "PREP", "SP[CS].*",
                           "CC"]]
_SEMANTIC_CLAUSE = [
    ["left", r"GRUP\.VERB", "S", "SA", r"S\.A", r"GRUP\.A", "COORD", "CONJ", "PREP", "SP[CS].*"],
    ["right", "SN", r"GRUP\.NOM"],
]

# Nouns before adjectives, and clauses headed by their verb group rather than
# by a leading preposition or conjunction.
ANCORA_SEMANTIC_RULES = {
    "SN": [
        ["rightdis", "NC.*S.*", "NP.*", "NC.*P.*", "SN", r"GRUP\.NOM", "AQA.*", "AQC.*", r"GRUP\.A", r"S\.A"],
        ["left", "SN", r"GRUP\.NOM", "P.*"],
        *_SEMANTIC_NOMINAL_TAIL,
    ],
    "GRUP.NOM": [
        ["rightdis", "NC.*S.*", "NP.*", "NC.*P.*", r"GRUP\.NOM", "AQA.*", "AQC.*", r"GRUP\.A", r"S\.A"],
        ["left", r"GRUP\.NOM", "P.*"],
        *_SEMANTIC_NOMINAL_TAIL,
    ],
    "SENTENCE": _SEMANTIC_CLAUSE,
    "S": _SEMANTIC_CLAUSE,
    "COORD": _SEMANTIC_COORDINATION,
    "CONJ": _SEMANTIC_COORDINATION,
}


def ancora_table() -> RuleTable:
    return build_rule_table("ancora", ANCORA_RULES, match_mode="regex")


def ancora_semantic_table() -> RuleTable:
    return ancora_table().with_overrides("ancora-sem", ANCORA_SEMANTIC_RULES)
