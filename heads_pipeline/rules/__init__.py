"""Head rule tables."""

from .registry import load_rule_table
from .table import (
    MATCH_MODES,
    TRAVERSAL_MODES,
    Rule,
    RuleTable,
    build_rule_table,
    dump_rule_lines,
    load_rule_file,
    parse_rule_lines,
)

__all__ = [
    "MATCH_MODES",
    "TRAVERSAL_MODES",
    "Rule",
    "RuleTable",
    "build_rule_table",
    "parse_rule_lines",
    "load_rule_file",
    "dump_rule_lines",
    "load_rule_table",
]
