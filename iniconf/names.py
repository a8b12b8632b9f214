"""Name comparison and ordering rules for sections and keys."""

from __future__ import annotations

import string
from dataclasses import dataclass

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


@dataclass(frozen=True)
class Entry:
    """A named item (section, key or value) with its comment and load order."""

    item: str
    comment: str | None = None
    order: int = 0


def fold_name(name: str, case_sensitive: bool) -> str:
    """Return the form of *name* used for comparisons.

    Case-insensitive comparison folds only the ASCII letters A-Z.
    """
    if case_sensitive:
        return name
    return name.translate(_ASCII_LOWER)


def names_equal(left: str, right: str, case_sensitive: bool) -> bool:
    """Tell whether two names refer to the same section or key."""
    return fold_name(left, case_sensitive) == fold_name(right, case_sensitive)


def name_less(left: str, right: str, case_sensitive: bool) -> bool:
    """Strict ordering of names by code point, after case folding."""
    return fold_name(left, case_sensitive) < fold_name(right, case_sensitive)


def load_order_key(entry: Entry, case_sensitive: bool) -> tuple[int, str]:
    """Sort key ordering entries by load order, then by name."""
    return (entry.order, fold_name(entry.item, case_sensitive))