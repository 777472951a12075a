import os
import tempfile
import unittest

from heads_pipeline.constants import PUNCTUATION_TAGS
from heads_pipeline.errors import MalformedRuleTable
from heads_pipeline.rules import (
    Rule,
    build_rule_table,
    dump_rule_lines,
    load_rule_file,
    load_rule_table,
    parse_rule_lines,
)


class RuleTests(unittest.TestCase):
    def test_unknown_mode_rejected(self):
        with self.assertRaisesRegex(MalformedRuleTable, "traversal mode"):
            Rule("middle", ("NP",))

    def test_empty_or_missing_tag_rejected(self):
        with self.assertRaises(MalformedRuleTable):
            Rule("left", ("NP", ""))
        with self.assertRaises(MalformedRuleTable):
            Rule("left", ("NP", None))

    def test_from_spec(self):
        rule = Rule.from_spec(["rightdis", "NN", "NNS"])
        self.assertEqual(rule.mode, "rightdis")
        self.assertEqual(rule.candidates, ("NN", "NNS"))
        self.assertFalse(rule.leftward)


class RuleTableTests(unittest.TestCase):
    def test_malformed_entries_fail_at_construction(self):
        with self.assertRaises(MalformedRuleTable):
            build_rule_table("t", {"NP": []})
        with self.assertRaises(MalformedRuleTable):
            build_rule_table("t", {"NP": [["left", "NN", ""]]})
        with self.assertRaises(MalformedRuleTable):
            build_rule_table("t", {"NP": [["left", "NN"]]}, match_mode="fuzzy")
        with self.assertRaisesRegex(MalformedRuleTable, "bad tag pattern"):
            build_rule_table("t", {"SN": [["left", "NC[.*"]]}, match_mode="regex")

    def test_table_is_read_only(self):
        table = build_rule_table("t", {"NP": [["left", "NN"]]})
        with self.assertRaises(TypeError):
            table.rules["VP"] = (Rule("left"),)
        self.assertIn("NP", table)
        self.assertIsNone(table.lookup("VP"))

    def test_match_modes(self):
        exact = build_rule_table("t", {}, match_mode="exact")
        prefix = build_rule_table("t", {}, match_mode="prefix")
        regex = build_rule_table("t", {}, match_mode="regex")
        self.assertFalse(exact.matches("NP", "NP-SBJ"))
        self.assertTrue(prefix.matches("NP", "NP-SBJ"))
        self.assertTrue(regex.matches("NC.*S.*", "NCMS000"))
        self.assertFalse(regex.matches(r"S\.A", "SXA"))
        self.assertFalse(regex.matches("NC", "NCMS000"))

    def test_last_resort_rule(self):
        plain = build_rule_table("t", {})
        self.assertEqual(plain.last_resort_rule(True), Rule("left"))
        self.assertEqual(plain.last_resort_rule(False), Rule("right"))

        avoiding = build_rule_table("t", {}, avoid=PUNCTUATION_TAGS)
        rule = avoiding.last_resort_rule(False)
        self.assertEqual(rule.mode, "rightexcept")
        self.assertEqual(set(rule.candidates), set(PUNCTUATION_TAGS))

        regex = build_rule_table("t", {}, match_mode="regex", avoid={"."})
        self.assertEqual(regex.last_resort_rule(True).candidates, (r"\.",))

    def test_regex_avoid_tags_are_literal(self):
        table = build_rule_table("t", {}, match_mode="regex", avoid={"*", "."})
        rule = table.last_resort_rule(False)
        self.assertEqual(set(rule.candidates), {r"\*", r"\."})
        self.assertTrue(table.matches(r"\*", "*"))
        self.assertFalse(table.matches(r"\.", "NP"))
        self.assertTrue(all(c in table._patterns for c in rule.candidates))

    def test_with_overrides_replaces_only_named_categories(self):
        base = build_rule_table("base", {"NP": [["left", "NN"]], "VP": [["left", "VB"]]}, avoid={"."})
        derived = base.with_overrides("derived", {"NP": [["right", "NNS"]]})
        self.assertEqual(derived.lookup("NP"), (Rule("right", ("NNS",)),))
        self.assertEqual(derived.lookup("VP"), base.lookup("VP"))
        self.assertEqual(derived.avoid, frozenset({"."}))
        self.assertEqual(base.lookup("NP"), (Rule("left", ("NN",)),))


class RuleLineFormatTests(unittest.TestCase):
    LINES = [
        "# Spanish head rules",
        "4 SN 1 NC NP",
        "",
        "3 GRUP.NOM 0 NC",
        "2 SPEC 1",
    ]

    def test_parse_rule_lines(self):
        table = parse_rule_lines(self.LINES, name="spanish")
        self.assertEqual(table.lookup("SN"), (Rule("left", ("NC", "NP")),))
        self.assertEqual(table.lookup("GRUP.NOM"), (Rule("right", ("NC",)),))
        self.assertEqual(table.lookup("SPEC"), (Rule("left"),))
        self.assertEqual(table.default_rule, Rule("right"))
        self.assertEqual(table.match_mode, "exact")

    def test_count_mismatch_reports_line(self):
        with self.assertRaisesRegex(MalformedRuleTable, r"spanish:2: count 5"):
            parse_rule_lines(["2 SPEC 1", "5 SN 1 NC NP"], name="spanish")

    def test_bad_flag_and_count(self):
        with self.assertRaisesRegex(MalformedRuleTable, "direction flag"):
            parse_rule_lines(["4 SN 2 NC NP"])
        with self.assertRaisesRegex(MalformedRuleTable, "integer"):
            parse_rule_lines(["four SN 1 NC NP"])
        with self.assertRaises(MalformedRuleTable):
            parse_rule_lines(["4 SN"])

    def test_dump_writes_the_same_lines_back(self):
        table = parse_rule_lines(self.LINES)
        self.assertEqual(dump_rule_lines(table), ["4 SN 1 NC NP", "3 GRUP.NOM 0 NC", "2 SPEC 1"])

    def test_dump_rejects_modes_the_format_cannot_express(self):
        with self.assertRaises(ValueError):
            dump_rule_lines(load_rule_table("en", "collins"))

    def test_load_rule_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "es_heads.txt")
            with open(path, "w", encoding="utf-8") as f:
                f.write("\n".join(self.LINES) + "\n")
            table = load_rule_file(path, match_mode="prefix")
        self.assertEqual(table.name, "es_heads")
        self.assertEqual(table.match_mode, "prefix")
        self.assertIn("GRUP.NOM", table)


class RegistryTests(unittest.TestCase):
    def test_tables_are_built_once(self):
        self.assertIs(load_rule_table("en", "sem"), load_rule_table("en", "sem"))

    def test_semantic_table_partially_replaces_modified_collins(self):
        modified = load_rule_table("en", "modcollins")
        semantic = load_rule_table("en", "sem")
        self.assertNotEqual(semantic.lookup("S"), modified.lookup("S"))
        self.assertEqual(semantic.lookup("PP"), modified.lookup("PP"))
        self.assertIn("EMBED", semantic)
        self.assertNotIn("EMBED", modified)

    def test_variants_differ_in_avoid_set(self):
        self.assertEqual(load_rule_table("en", "collins").avoid, frozenset())
        self.assertEqual(load_rule_table("en", "modcollins").avoid, PUNCTUATION_TAGS)
        self.assertEqual(load_rule_table("es", "collins").match_mode, "regex")

    def test_unknown_variant(self):
        with self.assertRaisesRegex(ValueError, "no rule table for es/modcollins"):
            load_rule_table("es", "modcollins")


if __name__ == "__main__":
    unittest.main()
