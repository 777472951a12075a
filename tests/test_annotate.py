import unittest

from nltk import Tree

from heads_pipeline.config import HeadFinderConfig, build_head_finder
from heads_pipeline.constants import HEAD_MARK
from heads_pipeline.errors import InvalidArgument
from heads_pipeline.heads.annotate import annotate_heads, apply_head_marks, head_word, strip_head_marks
from heads_pipeline.tree.penn import read_penn, to_penn

SENTENCE = "(ROOT (S (NP (DT The) (NN dog)) (VP (VBZ is) (ADJP (JJ big))) (. .)))"
ANNOTATED = "(ROOT (S=H (NP (DT The) (NN=H dog)) (VP=H (VBZ is) (ADJP=H (JJ=H big))) (. .)))"

LONGER = (
    "(ROOT (S (NP (NP (DT The) (NNS cats)) (, ,) (NP (DT the) (NNS dogs)) (CC and) (NP (DT the) (NN bird)))"
    " (VP (VBD were) (VP (VBN fed) (PP (IN by) (NP (PRP her))))) (. .)))"
)


class AnnotateHeadsTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.finder = build_head_finder(HeadFinderConfig(language="en", variant="sem"))

    def test_annotated_rendering(self):
        tree = annotate_heads(read_penn(SENTENCE), self.finder)
        self.assertEqual(to_penn(tree), ANNOTATED)

    def test_every_internal_node_has_exactly_one_head(self):
        tree = annotate_heads(read_penn(LONGER), self.finder)
        for node in tree.subtrees():
            if node.is_leaf:
                self.assertIsNone(node.head_index)
            else:
                self.assertIsNotNone(node.head_index)
                self.assertTrue(0 <= node.head_index < len(node.children))

        rendered = Tree.fromstring(to_penn(tree))
        for subtree in rendered.subtrees():
            marked = [c for c in subtree if isinstance(c, Tree) and c.label().endswith(HEAD_MARK)]
            if all(isinstance(c, Tree) for c in subtree):
                self.assertEqual(len(marked), 1, subtree)
            else:
                self.assertEqual(marked, [])

    def test_coordinated_subject_and_passive_verb(self):
        tree = annotate_heads(read_penn(LONGER), self.finder)
        subject, predicate = tree.children[0].children[0], tree.children[0].children[1]
        self.assertEqual(head_word(subject), "cats")
        self.assertEqual(head_word(predicate), "fed")
        self.assertEqual(head_word(tree), "fed")

    def test_idempotent(self):
        once = to_penn(annotate_heads(read_penn(LONGER), self.finder))
        tree = read_penn(LONGER)
        annotate_heads(tree, self.finder)
        annotate_heads(tree, self.finder)
        self.assertEqual(to_penn(tree), once)
        self.assertEqual(to_penn(annotate_heads(read_penn(once), self.finder)), once)

    def test_label_marks_round_trip(self):
        tree = annotate_heads(read_penn(SENTENCE), self.finder)
        apply_head_marks(tree)
        apply_head_marks(tree)
        self.assertEqual(tree.children[0].label, "S=H")
        self.assertEqual(tree.children[0].children[1].children[1].children[0].label, "JJ=H")

        # Marked labels still resolve to the same heads.
        annotate_heads(tree, self.finder)
        self.assertEqual(to_penn(tree), ANNOTATED)

        strip_head_marks(tree)
        self.assertEqual(to_penn(tree), SENTENCE)
        self.assertTrue(all(node.head_index is None for node in tree.subtrees()))

    def test_rejects_leaf_root(self):
        with self.assertRaises(InvalidArgument):
            annotate_heads(read_penn("(NN dog)").children[0], self.finder)

    def test_head_word_requires_annotation(self):
        with self.assertRaises(InvalidArgument):
            head_word(read_penn(SENTENCE))


if __name__ == "__main__":
    unittest.main()
