"""
Typed field extraction from loosely-typed JSON records.

Required getters raise DecodingError when the field is absent or has the
wrong shape. Optional getters never raise: absence and wrong shape both give
None. Strings are never turned into numbers or the other way round.
"""

import math

from .errors import DecodingError


def _is_number(value):
    # bool is an int subclass; JSON true/false is not a count
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def _check_record(record):
    if not isinstance(record, dict):
        raise DecodingError(f"expected an object, got {type(record).__name__}")


def required_string(record, name):
    _check_record(record)
    value = record.get(name)
    if not isinstance(value, str):
        raise DecodingError(f"field '{name}' must be a string, got {value!r}")
    return value


def required_number(record, name):
    _check_record(record)
    value = record.get(name)
    if not _is_number(value):
        raise DecodingError(f"field '{name}' must be a number, got {value!r}")
    return value


def optional_string(record, name):
    if not isinstance(record, dict):
        return None
    value = record.get(name)
    return value if isinstance(value, str) else None


def optional_number(record, name):
    if not isinstance(record, dict):
        return None
    value = record.get(name)
    return value if _is_number(value) else None


def number_mapping(record, name):
    """Return a date -> number mapping, skipping entries that are not numbers.

    The mapping itself is required; a missing or non-object value raises.
    """
    _check_record(record)
    value = record.get(name)
    if not isinstance(value, dict):
        raise DecodingError(f"field '{name}' must be an object, got {value!r}")
    return {key: item for key, item in value.items() if _is_number(item)}


def required_count(record, name):
    """A required whole number that is not negative (10.0 is accepted as 10)."""
    value = required_number(record, name)
    if value < 0 or (isinstance(value, float) and not value.is_integer()):
        raise DecodingError(f"field '{name}' must be a non-negative integer, got {value!r}")
    return int(value)
