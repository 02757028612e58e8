"""Tests for alltz.core.structured module."""

from alltz.core.structured import (
    as_str_dict,
    get_bool,
    get_int,
    get_str,
    get_str_list,
    get_table,
)


def test_as_str_dict_rejects_non_string_keys() -> None:
    assert as_str_dict({"a": 1}) == {"a": 1}
    assert as_str_dict({1: "a"}) is None
    assert as_str_dict(["a"]) is None


def test_get_str_strips_and_drops_empty() -> None:
    table: dict[str, object] = {"a": "  ocean ", "b": "   ", "c": 3}
    assert get_str(table, "a") == "ocean"
    assert get_str(table, "b") is None
    assert get_str(table, "c") is None
    assert get_str(table, "missing") is None


def test_get_int_rejects_bools() -> None:
    table: dict[str, object] = {"n": 8, "flag": True, "s": "8"}
    assert get_int(table, "n") == 8
    assert get_int(table, "flag") is None
    assert get_int(table, "s") is None


def test_get_bool() -> None:
    table: dict[str, object] = {"yes": True, "num": 1}
    assert get_bool(table, "yes") is True
    assert get_bool(table, "num") is None


def test_get_str_list_filters_items() -> None:
    table: dict[str, object] = {"zones": ["UTC", 3, " Asia/Tokyo ", ""], "bad": "UTC"}
    assert get_str_list(table, "zones") == ["UTC", "Asia/Tokyo"]
    assert get_str_list(table, "bad") is None


def test_get_table() -> None:
    table: dict[str, object] = {"display": {"theme": "ocean"}, "flat": 1}
    assert get_table(table, "display") == {"theme": "ocean"}
    assert get_table(table, "flat") is None
