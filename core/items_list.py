"""
AutoAxis - Items List
Immutable multi-valued cell used by list-typed fields.
"""

from __future__ import annotations

from typing import Any, Iterable

__all__ = ["ItemsList"]


class ItemsList(tuple):
    """
    Tuple of items held in a single cell of a list field.

    ``ItemsList("a b".split())`` behaves like a tuple; it only differs in its
    string form (comma-joined) and in being recognisable as a list value.
    """

    def __new__(cls, items: Iterable[Any] = ()) -> "ItemsList":
        return super().__new__(cls, items)

    def __str__(self) -> str:
        return ", ".join(str(item) for item in self)

    def __repr__(self) -> str:
        return f"ItemsList({list(self)!r})"
