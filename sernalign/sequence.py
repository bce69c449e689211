"""
sequence.py — structural sequence container

A structural sequence is the integer-coded linear form of an RNA secondary
structure (pseudoknots allowed).  Building one from a parsed structure is
the job of the caller; this module only holds the codes, checks they are
positive, and offers read-only access in both 0-based (Python) and 1-based
(paper) indexing.
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, List, Sequence, Tuple, Union, overload

import numpy as np
from numpy.typing import NDArray

_SEPARATORS = re.compile(r"[,\s]+")


class StructuralSequence(Sequence[int]):
    """
    Immutable ordered sequence of positive integer codes.

    Parameters
    ----------
    codes : iterable of int
        The structural codes, in sequence order.  Every element must be a
        positive integer; numpy integer scalars are accepted.

    Examples
    --------
    >>> s = StructuralSequence([1, 1, 3])
    >>> len(s), s.element_at(3), s[0]
    (3, 3, 1)
    """

    __slots__ = ("_codes",)

    def __init__(self, codes: Iterable[int]):
        values: List[int] = []
        for k, code in enumerate(codes, start=1):
            if isinstance(code, (bool, np.bool_)) or not isinstance(code, (int, np.integer)):
                raise ValueError(
                    f"Structural code at position {k} must be an integer, got {code!r}"
                )
            if code < 1:
                raise ValueError(
                    f"Structural code at position {k} must be positive, got {code}"
                )
            values.append(int(code))
        self._codes: Tuple[int, ...] = tuple(values)

    # -- construction helpers ------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> "StructuralSequence":
        """
        Read the textual form "1, 1, 3" (commas and/or whitespace).

        An empty or blank string gives the empty sequence.
        """
        tokens = [tok for tok in _SEPARATORS.split(text.strip()) if tok]
        try:
            return cls(int(tok) for tok in tokens)
        except ValueError as exc:
            raise ValueError(f"Cannot parse structural sequence {text!r}: {exc}") from None

    # -- read access ---------------------------------------------------------

    def __len__(self) -> int:
        return len(self._codes)

    @overload
    def __getitem__(self, index: int) -> int: ...
    @overload
    def __getitem__(self, index: slice) -> "StructuralSequence": ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return StructuralSequence(self._codes[index])
        return self._codes[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._codes)

    def __eq__(self, other) -> bool:
        if isinstance(other, StructuralSequence):
            return self._codes == other._codes
        if isinstance(other, (list, tuple)):
            return list(self._codes) == list(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._codes)

    def __repr__(self) -> str:
        return f"StructuralSequence({list(self._codes)!r})"

    def __str__(self) -> str:
        return ", ".join(str(c) for c in self._codes)

    def length(self) -> int:
        """Number of codes n."""
        return len(self._codes)

    def element_at(self, k: int) -> int:
        """Return the code at 1-based position k (1 <= k <= n)."""
        if not 1 <= k <= len(self._codes):
            raise IndexError(f"Position {k} out of range 1..{len(self._codes)}")
        return self._codes[k - 1]

    def to_list(self) -> List[int]:
        return list(self._codes)

    def to_array(self) -> NDArray[np.int64]:
        """Contiguous int64 copy, the layout the compiled solver expects."""
        return np.ascontiguousarray(self._codes, dtype=np.int64)

    def is_well_formed(self) -> bool:
        """
        True if every code at 1-based position k satisfies 1 <= code <= 2k-1.

        Sequences built from real secondary structures always do; the
        bound is the same one the constrained aligner enforces.
        """
        return all(code <= 2 * k - 1 for k, code in enumerate(self._codes, start=1))


SequenceLike = Union[StructuralSequence, Sequence[int]]


def as_structural_sequence(seq: SequenceLike, name: str = "sequence") -> StructuralSequence:
    """
    Coerce a plain integer sequence to a StructuralSequence.

    Raises
    ------
    ValueError
        If seq is None or holds a non-positive code.
    """
    if seq is None:
        raise ValueError(f"Cannot align: {name} is None")
    if isinstance(seq, StructuralSequence):
        return seq
    if isinstance(seq, str):
        return StructuralSequence.parse(seq)
    return StructuralSequence(seq)
