"""
Tests for pinned references.

A pinned reference must resolve when it is declared, so a literal
index or key that can never succeed fails at that point.
"""

import pytest
from static_types.errors import DeclarationError, StaticIndexError, StaticKeyError
from static_types.hetero import HeteroList
from static_types.mapping import StaticMap
from static_types.refs import IndexRef, KeyRef, pin
from static_types.sequences import ConstList, StrList

GROUPDEFS = StaticMap.of(
    str, StrList,
    ("chicken", StrList.of("foo", "bar")),
    ("beef", StrList.of("baz", "bat")),
)


def test_index_ref_resolves():
    ref = IndexRef(ConstList.of(int, 5, 7, -3), 2)
    assert ref.get() == -3
    assert ref() == -3


def test_index_ref_rejects_literal_out_of_range():
    with pytest.raises(StaticIndexError):
        IndexRef(ConstList.of(int, 5, 7), 2)


def test_key_ref_whole_value():
    ref = KeyRef(GROUPDEFS, "chicken")
    assert ref() == StrList.of("foo", "bar")


def test_key_ref_with_index():
    assert KeyRef(GROUPDEFS, "beef", 0).get() == "baz"


def test_key_ref_rejects_unknown_key():
    with pytest.raises(StaticKeyError):
        KeyRef(GROUPDEFS, "pork")


def test_key_ref_rejects_bad_index():
    with pytest.raises(StaticIndexError):
        KeyRef(GROUPDEFS, "beef", 5)


def test_pin_chooses_ref_kind():
    assert isinstance(pin(GROUPDEFS, "beef", 1), KeyRef)
    assert isinstance(pin(StrList.of("a"), 0), IndexRef)
    assert pin(GROUPDEFS, "beef", 1)() == "bat"


def test_pin_rejects_second_index_on_sequence():
    with pytest.raises(DeclarationError):
        pin(StrList.of("a"), 0, 0)


def test_pin_rejects_hetero_list():
    with pytest.raises(DeclarationError):
        pin(HeteroList(), 0)
