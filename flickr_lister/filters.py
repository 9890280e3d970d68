"""
Record filtering by exact field match or regular expression.
"""
import re
from collections.abc import Mapping

from .utils.table import cell_text


def get_field(record, field):
    """Read a named field from a mapping or an object, None if absent."""
    if isinstance(record, Mapping):
        return record.get(field)
    return getattr(record, field, None)


class FilterRule:
    """A single FIELD=VALUE (exact) or FIELD=PATTERN (regex) condition."""

    def __init__(self, field, pattern, regex=False):
        self.field = field
        self.pattern = pattern
        self.regex = regex
        self._compiled = re.compile(pattern) if regex else None

    def matches(self, record):
        """True if the record's field satisfies this rule."""
        value = get_field(record, self.field)
        if value is None:
            return False
        # Compare against the text shown in the table, e.g. yes/no for booleans
        text = cell_text(value)
        if self.regex:
            return self._compiled.search(text) is not None
        return text == self.pattern

    def __repr__(self):
        op = "~" if self.regex else "="
        return f"FilterRule({self.field}{op}{self.pattern!r})"


def parse_rule(text, regex=False):
    """
    Parse a FIELD=VALUE argument into a FilterRule.
    Only the first '=' separates field and value, so values may contain '='.
    """
    field, sep, pattern = text.partition("=")
    field = field.strip()
    if not sep or not field:
        raise ValueError(f"Invalid filter '{text}': expected FIELD=VALUE")
    if regex:
        try:
            return FilterRule(field, pattern, regex=True)
        except re.error as e:
            raise ValueError(f"Invalid regular expression for '{field}': {e}") from e
    return FilterRule(field, pattern)


def filter_records(records, rules):
    """Yield records satisfying every rule, in their original order."""
    rules = list(rules or [])
    for record in records:
        if all(rule.matches(record) for rule in rules):
            yield record
