"""
Tests for serialization of static containers.

These tests ensure the dict literal form round-trips and that the
JSON/YAML dumps carry the same structure.
"""

import json

import pytest
import yaml

from static_types.hetero import HeteroList
from static_types.mapping import StaticMap
from static_types.sequences import ConstList, StrList
from static_types.serialization import (
    container_to_dict,
    container_from_dict,
    container_to_json,
    container_to_yaml,
)


def build_sample_map() -> StaticMap:
    return StaticMap.of(
        str, StrList,
        ("chicken", StrList.of("foo", "bar")),
        ("beef", StrList.of("baz", "bat")),
    )


def test_dict_roundtrip_map():
    groupdefs = build_sample_map()
    restored = container_from_dict(container_to_dict(groupdefs))
    assert restored == groupdefs
    assert restored.get("beef", 0) == "baz"


def test_dict_roundtrip_const_list():
    coefs = ConstList.of(float, 0.5, 0.25)
    assert container_from_dict(container_to_dict(coefs)) == coefs


def test_const_list_dict_shape():
    assert container_to_dict(ConstList.of(int, 1, 2)) == {
        "kind": "const_list",
        "value_type": "int",
        "values": [1, 2],
    }


def test_from_dict_runs_declaration_checks():
    with pytest.raises(TypeError):
        container_from_dict({"kind": "const_list", "value_type": "int", "values": ["x"]})


def test_json_dump():
    groupdefs = build_sample_map()
    assert json.loads(container_to_json(groupdefs)) == container_to_dict(groupdefs)


def test_yaml_dump():
    groupdefs = build_sample_map()
    assert yaml.safe_load(container_to_yaml(groupdefs)) == container_to_dict(groupdefs)


def test_hetero_list_not_serializable():
    with pytest.raises(TypeError):
        container_to_dict(HeteroList())


def test_unknown_kind():
    with pytest.raises(TypeError):
        container_from_dict({"kind": "set"})
