"""
Attribute flattening.

Turns the handler's base attributes and a record's attributes into a flat
``{key: value}`` mapping. Groups are flattened to dotted keys, groups with
an empty key are inlined, and empty attributes or empty groups vanish.
"""

from itertools import chain
from typing import Any, Iterable

from .record import Attr, Group


def collect_fields(base_attrs: Iterable[Attr], record_attrs: Iterable[Attr]) -> dict[str, Any]:
    """
    Flatten attributes into a field mapping.

    Base attributes are processed before record attributes, each in their
    original order. When two attributes end up with the same key the later
    one wins.

    Args:
        base_attrs: Attributes bound to the handler
        record_attrs: Attributes of the record being handled

    Returns:
        Mapping of flattened key to resolved value
    """
    fields: dict[str, Any] = {}
    for attr in chain(base_attrs, record_attrs):
        _collect_attr(fields, attr, "")
    return fields


def _collect_attr(fields: dict[str, Any], attr: Attr, prefix: str) -> None:
    attr = attr.resolved()
    if attr.is_empty():
        return

    key = prefix + attr.key

    if isinstance(attr.value, Group):
        children = _surviving_children(attr.value)
        if not children:
            # Empty groups are dropped, key included
            return
        child_prefix = key + "." if attr.key else prefix
        for child in children:
            _collect_attr(fields, child, child_prefix)
        return

    fields[key] = attr.value


def _surviving_children(value: Group) -> list[Attr]:
    resolved = (child.resolved() for child in value)
    return [child for child in resolved if not child.is_empty()]
