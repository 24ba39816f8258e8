"""
Identifier resolution for registry lookups

A lookup may name an entry in several shapes:

  - 54399                          leaf number
  - "54399"                        leaf number as text
  - "1.3.6.1.4.1.54399"            dotted OID text
  - [1, 3, 6, 1, 4, 1, 54399]      raw integer sequence
  - ObjectIdentifier(...)          structured OID value

Each shape is reduced to the leaf number stored on the entry. Resolution
never raises; anything that cannot be reduced is simply a non-match.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class LeafNumber:
    """A bare leaf number."""

    value: int


@dataclass(frozen=True)
class DecimalString:
    """A leaf number written as decimal text."""

    value: str


@dataclass(frozen=True)
class DottedPath:
    """A dotted identifier string, e.g. "1.3.6.1.4.1.54399"."""

    value: str


@dataclass(frozen=True)
class IntegerSequence:
    """A full identifier as a sequence of arcs."""

    arcs: tuple[int, ...]


@dataclass(frozen=True)
class ObjectIdentifier:
    """Structured hierarchical identifier value."""

    arcs: tuple[int, ...]

    @classmethod
    def parse(cls, text: str) -> ObjectIdentifier:
        """Build an identifier from dotted text.

        Args:
            text: Dotted-numeric identifier such as "1.3.6.1.4.1.54399"

        Returns:
            The parsed ObjectIdentifier

        Raises:
            ValueError: If any arc is not a non-negative integer
        """
        parts = text.split(".")
        if not all(part.isascii() and part.isdigit() for part in parts):
            raise ValueError(f"Invalid object identifier: '{text}'")
        return cls(tuple(int(part) for part in parts))

    def __str__(self) -> str:
        return ".".join(str(arc) for arc in self.arcs)


IdentifierQuery = Union[
    LeafNumber, DecimalString, DottedPath, IntegerSequence, ObjectIdentifier
]


def to_query(value: object) -> IdentifierQuery | None:
    """Lift a raw lookup value into an identifier query.

    Args:
        value: int, str, list/tuple of ints, or an IdentifierQuery

    Returns:
        The matching query variant, or None for unsupported values
    """
    if isinstance(
        value, (LeafNumber, DecimalString, DottedPath, IntegerSequence, ObjectIdentifier)
    ):
        return value
    # bool is an int subclass but never a leaf number
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return LeafNumber(value)
    if isinstance(value, str):
        if value.isascii() and value.isdigit():
            return DecimalString(value)
        return DottedPath(value)
    if isinstance(value, (list, tuple)):
        if all(isinstance(arc, int) and not isinstance(arc, bool) for arc in value):
            return IntegerSequence(tuple(value))
    return None


_INTEGER = re.compile(r"-?[0-9]+")


def _parse_int(text: str) -> int | None:
    if not _INTEGER.fullmatch(text):
        return None
    try:
        return int(text)
    except ValueError:
        # digit runs beyond the interpreter's int conversion limit
        return None


def resolve_leaf(query: IdentifierQuery | None, oid_prefix: str) -> int | None:
    """Reduce an identifier query to a leaf number.

    Args:
        query: The identifier query to resolve
        oid_prefix: Dotted OID prefix of the registry being searched

    Returns:
        The non-negative leaf number, or None if the query cannot match
    """
    match query:
        case ObjectIdentifier(arcs=arcs):
            return resolve_leaf(IntegerSequence(arcs), oid_prefix)
        case IntegerSequence(arcs=arcs):
            # A bare prefix names no entry
            if len(arcs) <= 1:
                return None
            if ".".join(str(arc) for arc in arcs[:-1]) != oid_prefix:
                return None
            return resolve_leaf(LeafNumber(arcs[-1]), oid_prefix)
        case DottedPath(value=text):
            number = _parse_int(text)
            if number is not None:
                return resolve_leaf(LeafNumber(number), oid_prefix)
            last = text.split(".")[-1]
            if last == text:
                return None
            return resolve_leaf(DecimalString(last), oid_prefix)
        case DecimalString(value=text):
            number = _parse_int(text)
            if number is None:
                return None
            return resolve_leaf(LeafNumber(number), oid_prefix)
        case LeafNumber(value=number):
            if number < 0:
                return None
            return number
        case _:
            return None
