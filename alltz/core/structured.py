"""Typed accessors for parsed TOML.

`tomllib` hands back plain dicts of `object`; these helpers validate a value's
shape at the boundary and return None when it does not match, so config
parsing can fall back to defaults field by field.
"""

from __future__ import annotations

from typing import Mapping, TypeGuard, cast

StrDict = dict[str, object]
ObjList = list[object]


def is_str_dict(obj: object) -> TypeGuard[StrDict]:
    if not isinstance(obj, dict):
        return False
    d = cast(dict[object, object], obj)
    return all(isinstance(k, str) for k in d.keys())


def as_str_dict(obj: object) -> StrDict | None:
    if is_str_dict(obj):
        return obj
    return None


def get_table(table: Mapping[str, object], key: str) -> StrDict | None:
    """Nested table under `key`, or None."""
    return as_str_dict(table.get(key))


def get_str(table: Mapping[str, object], key: str) -> str | None:
    """Stripped, non-empty string under `key`, or None."""
    value = table.get(key)
    if not isinstance(value, str):
        return None
    s = value.strip()
    return s or None


def get_int(table: Mapping[str, object], key: str) -> int | None:
    """Integer under `key`, or None. Booleans are rejected."""
    value = table.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def get_bool(table: Mapping[str, object], key: str) -> bool | None:
    value = table.get(key)
    if not isinstance(value, bool):
        return None
    return value


def get_str_list(table: Mapping[str, object], key: str) -> list[str] | None:
    """List of non-empty strings under `key`; non-string items are dropped."""
    value = table.get(key)
    if not isinstance(value, list):
        return None
    items = cast(ObjList, value)
    return [item.strip() for item in items if isinstance(item, str) and item.strip()]
