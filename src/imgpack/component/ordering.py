import re
from typing import Optional


# Precompiled regular expressions
pattern_leading_digits = re.compile(r"^[0-9]+")

MAX_NUMERIC_PREFIX = 2**64 - 1


def numeric_prefix(name: str) -> Optional[int]:
    """
    Parses the leading decimal digits of a base name.

    Args:
        name (str): The base name, e.g. "12foo".

    Returns:
        int: The value of the leading digits, e.g. 12, or None if the name doesn't start with a digit
        or the value doesn't fit into an unsigned 64 bit integer.
    """
    match = pattern_leading_digits.match(name)
    if not match:
        return None
    value = int(match.group(0))
    if value > MAX_NUMERIC_PREFIX:
        return None
    return value


def sort_key(name: str) -> tuple[int, int, str]:
    """
    Returns the comparison key of a base name. Names with a numeric prefix come first, ordered by its value,
    names without one come last. Ties are broken by the full name, e.g. "3bar" < "12foo" < "999x" < "abc".
    """
    value = numeric_prefix(name)
    if value is None:
        return (1, 0, name)
    return (0, value, name)


def order_entries(entries: list[dict]) -> list[dict]:
    """
    Sorts a list of single-key dicts {base name: value} by the sort key of their base name.
    The sort is stable, thus entries with the same base name keep their relative order.

    Args:
        entries (list[dict]): The entries in traversal order.

    Returns:
        list[dict]: A new, sorted list.
    """
    return sorted(entries, key=lambda entry: sort_key(next(iter(entry))))
