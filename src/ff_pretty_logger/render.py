"""
Value rendering for the pretty console format.
"""

from collections.abc import Mapping
from numbers import Number
from typing import Any

from .record import Group


def render_value(value: Any) -> str:
    """
    Render any value as display text.

    Strings are returned as-is, numbers in their native form, exceptions as
    their message. Mappings render as ``{k1=v1 k2=v2}`` with sorted keys,
    groups as ``{key=value ...}`` in their own order, lists and tuples as
    ``{v1 v2}``. Everything else falls back to ``str()``.
    """
    if isinstance(value, str):
        return value
    elif isinstance(value, Number):
        return str(value)
    elif isinstance(value, BaseException):
        return _safe_str(value)
    elif isinstance(value, Mapping):
        items = sorted(((str(k), v) for k, v in value.items()), key=lambda item: item[0])
        return _braced(f"{k}={render_value(v)}" for k, v in items)
    elif isinstance(value, Group):
        return _braced(f"{attr.key}={render_value(attr.value)}" for attr in value)
    elif isinstance(value, list | tuple):
        return _braced(render_value(item) for item in value)
    return _safe_str(value)


def _braced(parts) -> str:
    return "{" + " ".join(parts) + "}"


def _safe_str(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        return object.__repr__(value)
