# shlog/utils/enums.py
"""Helpers for enum-keyed lookup tables."""

from __future__ import annotations

from enum import Enum
from typing import Mapping


def covers_each_member(table: Mapping[object, object], enum_cls: type[Enum]) -> bool:
    """Return True if ``table`` has exactly one key per member of ``enum_cls``.

    Extra keys, or keys from another type, make the table invalid.
    """
    members = set(enum_cls)
    return len(table) == len(members) and set(table) == members


__all__ = ["covers_each_member"]
