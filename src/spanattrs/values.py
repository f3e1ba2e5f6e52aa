"""
Attribute value contract: which keys and values may be recorded.

An attribute value is one of:
  - None (explicitly cleared attribute)
  - a primitive: number (int/float), bool, or str
  - a homogeneous list/tuple of one primitive kind, where individual
    elements may be None

bool is a subclass of int in Python, but booleans and numbers are
distinct kinds here: [1, True] is NOT homogeneous.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Sequence, Union

Primitive = Union[int, float, bool, str]
AttributeValue = Union[None, Primitive, Sequence[Optional[Primitive]]]


class AttributeKind(str, Enum):
    """Runtime kind of a candidate attribute value."""

    NULL = "null"
    NUMBER = "number"
    BOOLEAN = "boolean"
    STRING = "string"
    ARRAY = "array"
    INVALID = "invalid"


_PRIMITIVE_KINDS = frozenset({AttributeKind.NUMBER, AttributeKind.BOOLEAN, AttributeKind.STRING})


def classify(candidate: Any) -> AttributeKind:
    """Map a Python value onto its attribute kind. Never raises."""
    if candidate is None:
        return AttributeKind.NULL
    # bool before int: isinstance(True, int) is True
    if isinstance(candidate, bool):
        return AttributeKind.BOOLEAN
    if isinstance(candidate, (int, float)):
        return AttributeKind.NUMBER
    if isinstance(candidate, str):
        return AttributeKind.STRING
    if isinstance(candidate, (list, tuple)):
        return AttributeKind.ARRAY
    return AttributeKind.INVALID


def is_attribute_key(candidate: Any) -> bool:
    return isinstance(candidate, str) and len(candidate) > 0


def is_valid_primitive(candidate: Any) -> bool:
    """True for numbers, booleans and strings. None is not a primitive."""
    return classify(candidate) in _PRIMITIVE_KINDS


def is_attribute_value(candidate: Any) -> bool:
    """True if candidate may be stored as an attribute value."""
    kind = classify(candidate)
    if kind is AttributeKind.NULL:
        return True
    if kind is AttributeKind.ARRAY:
        return is_homogeneous_array(candidate)
    return kind in _PRIMITIVE_KINDS


def is_homogeneous_array(elements: Sequence[Any]) -> bool:
    """
    Single left-to-right scan. The first non-None element fixes the kind
    and must be a valid primitive; every later non-None element must match
    it. Empty and all-None arrays are valid.
    """
    established: Optional[AttributeKind] = None

    for element in elements:
        # None slots are allowed anywhere
        if element is None:
            continue

        kind = classify(element)
        if established is None:
            if kind not in _PRIMITIVE_KINDS:
                return False
            established = kind
            continue

        if kind is not established:
            return False

    return True
