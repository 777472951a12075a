"""Exceptions raised by rule tables and the head finder."""

from __future__ import annotations


class HeadFinderError(Exception):
    pass


class NoRuleForCategory(HeadFinderError, KeyError):
    def __init__(self, category: str, table: str = "") -> None:
        self.category = category
        self.table = table
        where = f" in table {table!r}" if table else ""
        super().__init__(f"No head rule defined for {category!r}{where}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return self.args[0]


class InvalidArgument(HeadFinderError, ValueError):
    pass


class MalformedRuleTable(HeadFinderError, ValueError):
    pass
