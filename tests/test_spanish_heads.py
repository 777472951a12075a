import unittest

from heads_pipeline.config import HeadFinderConfig, build_head_finder
from heads_pipeline.errors import NoRuleForCategory
from heads_pipeline.heads.annotate import annotate_heads, head_word
from heads_pipeline.tree.penn import read_penn


class AncoraHeadTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.structural = build_head_finder(HeadFinderConfig(language="es", variant="collins"))
        cls.semantic = build_head_finder(HeadFinderConfig(language="es", variant="sem"))

    def test_nominal_heads_match_tag_patterns(self):
        self.assertEqual(self.structural.get_head(read_penn("(GRUP.NOM (DA0MS0 el) (NCMS000 perro))")), 1)
        self.assertEqual(
            self.structural.get_head(read_penn("(SN (SPEC (DA0MS0 el)) (GRUP.NOM (NCMS000 perro)))")), 1
        )

    def test_coordinated_nominals(self):
        node = read_penn("(SN (GRUP.NOM (NCMS000 perro)) (COORD (CC y)) (GRUP.NOM (NCMS000 gato)))")
        self.assertEqual(self.structural.get_head(node), 0)

    def test_auxiliary_heads_embedded_verb_group(self):
        node = read_penn("(GRUP.VERB (VAIP3S0 ha) (GRUP.VERB (VMP00SM comido)))")
        self.assertEqual(self.structural.get_head(node), 0)
        self.assertEqual(self.semantic.get_head(node), 1)

    def test_passive_heads_participle_group(self):
        node = read_penn("(GRUP.VERB (VSIP3S0 es) (GRUP.VERB (VMP00SM comido)))")
        self.assertEqual(self.semantic.get_head(node), 1)

    def test_copula_by_tag_and_by_word(self):
        by_tag = read_penn("(GRUP.VERB (VSIP3S0 es) (S.A (GRUP.A (AQ0MS0 grande))))")
        self.assertEqual(self.structural.get_head(by_tag), 0)
        self.assertEqual(self.semantic.get_head(by_tag), 1)

        by_word = read_penn("(GRUP.VERB (VMIP3S0 Parece) (S.A (GRUP.A (AQ0MS0 grande))))")
        self.assertEqual(self.semantic.get_head(by_word), 1)

    def test_semantic_clause_rule_prefers_verb_group(self):
        node = read_penn("(S (PREP (SPS00 para)) (GRUP.VERB (VMN0000 comer)))")
        self.assertEqual(self.structural.get_head(node), 0)
        self.assertEqual(self.semantic.get_head(node), 1)

    def test_unknown_category(self):
        with self.assertRaises(NoRuleForCategory):
            self.structural.get_head(read_penn("(FOO (NCMS000 a) (NCMS000 b))"))

    def test_sentence_annotation(self):
        tree = read_penn(
            "(SENTENCE (SN (SPEC (DA0MS0 el)) (GRUP.NOM (NCMS000 perro))) (GRUP.VERB (VSIP3S0 es))"
            " (S.A (GRUP.A (AQ0MS0 grande))) (Fp .))"
        )
        annotate_heads(tree, self.semantic)
        self.assertEqual(head_word(tree), "es")
        self.assertEqual(head_word(tree.children[0]), "perro")


if __name__ == "__main__":
    unittest.main()
