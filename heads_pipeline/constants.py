"""Shared constants for the head-finding pipeline."""

HEAD_MARK = "=H"

PUNCTUATION_TAGS = frozenset({".", ",", "``", "''", ":"})
SEPARATOR_TAGS = frozenset({",", ":"})

LANGUAGES = {"en", "es"}
HEAD_FINDER_VARIANTS = {"collins", "modcollins", "sem", "none"}

# English lexical sets, matched against lower-cased word forms.
AUXILIARIES = frozenset({
    "will", "wo", "shall", "sha", "may", "might", "should", "would", "can", "could", "ca", "must",
    "has", "have", "had", "having", "get", "gets", "getting", "got", "gotten",
    "do", "does", "did", "to", "'ve", "ve", "v", "'d", "d", "'ll", "ll", "na", "of", "hav", "hvae", "as",
})
BE_GET_VERBS = frozenset({
    "be", "being", "been", "am", "are", "r", "is", "ai", "was", "were", "'m", "m", "'re", "'s", "s",
    "art", "ar", "get", "getting", "gets", "got",
})
COPULAS = frozenset({
    "be", "being", "been", "am", "are", "r", "is", "ai", "was", "were", "'m", "m", "'re", "'s", "s", "wase",
    "seem", "seems", "seemed", "appear", "appears", "appeared", "stay", "stays", "stayed",
    "remain", "remains", "remained", "resemble", "resembles", "resembled", "become", "becomes", "became",
})

VERB_TAGS = ("TO", "MD", "VB", "VBD", "VBP", "VBZ", "VBG", "VBN", "AUX", "AUXG")
UNAMBIGUOUS_AUX_TAGS = ("TO", "MD", "AUX", "AUXG")
PARTICIPLE_TAGS = ("VBN", "VBG", "VBD")

# Spanish (Ancora) copulas: forms of ser, estar and parecer.
SPANISH_COPULAS = frozenset({
    "era", "erais", "eran", "eras", "eres", "es", "estaba", "estabais", "estaban", "estabas", "estad",
    "estado", "estamos", "estando", "estar", "estaremos", "estará", "estarán", "estarás", "estaré",
    "estaréis", "estaría", "estaríais", "estaríamos", "estarían", "estarías", "estemos", "estoy",
    "estuve", "estuviera", "estuvierais", "estuvieran", "estuvieras", "estuviere", "estuviereis",
    "estuvieren", "estuvieres", "estuvieron", "estuviese", "estuvieseis", "estuviesen", "estuvieses",
    "estuvimos", "estuviste", "estuvisteis", "estuviéramos", "estuviéremos", "estuviésemos",
    "estuvo", "está", "estábamos", "estáis", "están", "estás", "esté", "estéis", "estén",
    "estés", "fue", "fuera", "fuerais", "fueran", "fueras", "fuere", "fuereis", "fueren", "fueres",
    "fueron", "fuese", "fueseis", "fuesen", "fueses", "fui", "fuimos", "fuiste", "fuisteis",
    "fuéramos", "fuéremos", "fuésemos", "parece", "pareced", "parecemos", "parecen", "parecer",
    "pareceremos", "pareceres", "parecerá", "parecerán", "parecerás", "pareceré", "pareceréis",
    "parecería", "pareceríais", "pareceríamos", "parecerían", "parecerías", "pareces", "parecida",
    "parecidas", "parecido", "parecidos", "pareciendo", "pareciera", "parecierais", "parecieran",
    "parecieras", "pareciere", "pareciereis", "parecieren", "parecieres", "parecieron", "pareciese",
    "parecieseis", "pareciesen", "parecieses", "parecimos", "pareciste", "parecisteis",
    "pareciéramos", "pareciéremos", "pareciésemos", "pareció", "parecéis", "parecí", "parecía",
    "parecíais", "parecíamos", "parecían", "parecías", "parezca", "parezcamos", "parezcan",
    "parezcas", "parezco", "parezcáis", "sea", "seamos", "sean", "seas", "sed", "ser", "seremos",
    "será", "serán", "serás", "seré", "seréis", "sería", "seríais", "seríamos", "serían",
    "serías", "seáis", "sido", "siendo", "sois", "somos", "son", "soy", "sé", "éramos",
})
