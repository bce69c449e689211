"""
edit_ops.py — single alignment steps

An EditOperation pairs an optional code from x with an optional code
from y:

    (a, None)  deletion of a
    (None, b)  insertion of b
    (a, b)     match (a == b) or mismatch (a != b)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .default import GAP_SYMBOL


@dataclass(frozen=True)
class EditOperation:
    """
    One step of an alignment.

    Attributes
    ----------
    a : int or None
        Code taken from x, or None for an insertion.
    b : int or None
        Code taken from y, or None for a deletion.
    """
    a: Optional[int]
    b: Optional[int]

    def __post_init__(self):
        if self.a is None and self.b is None:
            raise ValueError("An edit operation needs at least one side")
        for side, value in (("a", self.a), ("b", self.b)):
            if value is not None and value < 1:
                raise ValueError(f"Edit operation side {side} must be positive, got {value}")

    @property
    def is_insertion(self) -> bool:
        return self.a is None

    @property
    def is_deletion(self) -> bool:
        return self.b is None

    @property
    def is_substitution(self) -> bool:
        """Match or mismatch: both sides present."""
        return self.a is not None and self.b is not None

    @property
    def is_match(self) -> bool:
        return self.is_substitution and self.a == self.b

    @property
    def is_mismatch(self) -> bool:
        return self.is_substitution and self.a != self.b

    @property
    def cost(self) -> int:
        """Unit cost for indels, 0/1 for match/mismatch."""
        return 0 if self.is_match else 1

    def render(self, gap: str = GAP_SYMBOL) -> str:
        a = gap if self.a is None else str(self.a)
        b = gap if self.b is None else str(self.b)
        return f"({a}, {b})"

    def __str__(self) -> str:
        return self.render()


def insertion(b: int) -> EditOperation:
    return EditOperation(None, b)


def deletion(a: int) -> EditOperation:
    return EditOperation(a, None)


def substitution(a: int, b: int) -> EditOperation:
    return EditOperation(a, b)
