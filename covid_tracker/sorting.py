"""Ordering of list entries by one metric."""

from enum import Enum
from functools import cmp_to_key


class SortKey(Enum):
    CASES = "cases"
    CASES_TODAY = "today-cases"
    DEATHS = "deaths"
    DEATHS_TODAY = "today-deaths"
    RECOVERED = "recovered"
    RECOVERED_TODAY = "today-recovered"
    ACTIVE = "active"

    @property
    def attribute(self):
        return self.name.lower()


def sort_value(entry, key):
    """The entry's metric for `key`; missing metrics count as zero."""
    value = getattr(entry, key.attribute)
    return 0 if value is None else value


def compare_entries(key, a, b):
    """Negative, zero or positive as `a` ranks below, level with or above `b`."""
    left, right = sort_value(a, key), sort_value(b, key)
    return (left > right) - (left < right)


def sort_entries(entries, key):
    """Descending order by `key`; ties keep their fetched order."""
    return sorted(entries, key=cmp_to_key(lambda a, b: compare_entries(key, b, a)))
