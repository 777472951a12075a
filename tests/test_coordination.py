import unittest

from heads_pipeline.heads.coordination import CoordinationCorrector
from heads_pipeline.tree.penn import read_penn


def children(text):
    return read_penn(text).children


class CoordinationTests(unittest.TestCase):
    def setUp(self):
        self.simple = CoordinationCorrector(conjunctions=frozenset({"CC", "CONJP"}))
        self.full = CoordinationCorrector(
            conjunctions=frozenset({"CC", "CONJP"}),
            interjection_tags=frozenset({"UH"}),
            interjection_phrases=frozenset({"INTJ"}),
            multi_conjunct=True,
        )

    def test_head_not_after_conjunction_is_kept(self):
        kids = children("(NP (NP (NN a)) (, ,) (NP (NN b)) (CC and) (NP (NN c)))")
        self.assertEqual(self.full.correct(2, kids), 2)
        self.assertEqual(self.full.correct(0, kids), 0)

    def test_three_way_coordination(self):
        kids = children("(NP (NP (NN a)) (, ,) (NP (NN b)) (CC and) (NP (NN c)))")
        self.assertEqual(self.full.correct(4, kids), 0)
        self.assertEqual(self.simple.correct(4, kids), 2)

    def test_stops_without_separator(self):
        kids = children("(NP (NP (NN x)) (NP (NN a)) (NP (NN b)) (CC and) (NP (NN c)))")
        self.assertEqual(self.full.correct(4, kids), 2)

    def test_skips_punctuation_before_conjunction(self):
        kids = children("(NP (NP (NN a)) (, ,) (CC and) (NP (NN b)))")
        self.assertEqual(self.simple.correct(3, kids), 0)
        self.assertEqual(self.full.correct(3, kids), 0)

    def test_skips_interjections_unless_head_is_one(self):
        kids = children("(S (NP (NN a)) (UH oh) (CC and) (NP (NN b)))")
        self.assertEqual(self.full.correct(3, kids), 0)
        self.assertEqual(self.simple.correct(3, kids), 1)

        kids = children("(INTJ (UH oh) (UH well) (CC and) (UH hey))")
        self.assertEqual(self.full.correct(3, kids), 1)

    def test_skips_interjection_phrases(self):
        kids = children("(S (S (NN a)) (INTJ (UH oh)) (CC and) (S (NN b)))")
        self.assertEqual(self.full.correct(3, kids), 0)

    def test_keeps_head_when_nothing_left_of_conjunction(self):
        kids = children("(NP (, ,) (CC and) (NP (NN a)))")
        self.assertEqual(self.full.correct(2, kids), 2)
        self.assertEqual(self.simple.correct(2, kids), 2)

    def test_conjp_counts_as_conjunction(self):
        kids = children("(NP (NP (NN a)) (CONJP (RB as) (RB well) (IN as)) (NP (NN b)))")
        self.assertEqual(self.simple.correct(2, kids), 0)


if __name__ == "__main__":
    unittest.main()
